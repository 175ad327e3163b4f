# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike, ArrayNamespace, namespace_of_arrays, is_inexact, shape
from .errors import InvalidArgumentError

def check_non_neg(msg: str, value: int | float):
    if value < 0:
        raise InvalidArgumentError(f"{msg} must not be negative, got {value}")

def check_int(msg: str, value: int):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{msg} must be an integer, got {value!r}")

def check_real(msg: str, value: float):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{msg} must be a real number, got {value!r}")

def check_vector(msg: str, vec: ArrayLike) -> ArrayNamespace:
    xp = namespace_of_arrays(vec)
    if vec.ndim != 1:
        raise InvalidArgumentError(f"{msg} must be one dimensional, got shape {vec.shape}")
    if shape(vec)[0] == 0:
        raise InvalidArgumentError(f"{msg} must not be empty")
    if not is_inexact(xp, vec.dtype):
        raise InvalidArgumentError(f"{msg} must have a floating point dtype, got {vec.dtype}")
    return xp

def check_length(msg: str, vec: ArrayLike, length: int):
    if shape(vec)[0] != length:
        raise InvalidArgumentError(f"{msg} must have length {length}, got {shape(vec)[0]}")

def check_same_shape(ref: ArrayLike, out: ArrayLike):
    if ref.shape != out.shape:
        raise InvalidArgumentError(
            f"Operator output shape {out.shape} does not match input shape {ref.shape}")

def check_same_dtype(ref: ArrayLike, out: ArrayLike):
    if ref.dtype != out.dtype:
        raise InvalidArgumentError(
            f"Operator output dtype {out.dtype} does not match input dtype {ref.dtype}")
