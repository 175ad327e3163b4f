# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
import array_api_compat as api
from array_api_compat import to_device, device
from array_api_compat import size as _size

from .array_namespace import ArrayNamespace, ArrayLike, Device, DType


def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except (AttributeError, TypeError):
            raise TypeError("Provided object is not a recognized array or namespace.")
    return api.array_namespace(obj) # type: ignore

def namespace_of_arrays[T: ArrayLike](*arrays: T) -> ArrayNamespace[T]:
    return api.array_namespace(*arrays) # type: ignore

def size(array: ArrayLike) -> int:
    val = _size(array)
    if val is None:
        raise ValueError("Array size is unknown (None).")
    return val

def shape(array: ArrayLike) -> tuple[int, ...]:
    shp = array.shape
    if any(s is None for s in shp):
        raise ValueError("Array shape contains None dimension(s).")
    return shp  # type: ignore

def is_inexact(xp: ArrayNamespace, dtype: DType) -> bool:
    return xp.isdtype(dtype, ("real floating", "complex floating"))

def vector_norm[T: ArrayLike](vec: T) -> T:
    """Euclidean norm, computed on the vector scaled by its largest magnitude entry so that tiny
    or huge entries do not underflow or overflow when squared."""
    xp = namespace_of_arrays(vec)
    scale = xp.max(xp.abs(vec))
    scale = xp.where(scale == 0, xp.ones_like(scale), scale)
    scaled = vec / xp.astype(scale, vec.dtype)
    if hasattr(xp, "linalg") and hasattr(xp.linalg, "vector_norm"):
        return scale * xp.linalg.vector_norm(scaled)
    return scale * xp.sqrt(xp.sum(xp.abs(scaled)**2))

def materialize[T: ArrayLike](array: T) -> T:
    """Evaluate lazy arrays in place of their task graph. Eager arrays are returned as they are."""
    if api.is_dask_array(array):
        return array.persist() # type: ignore
    return array

def describe(array: ArrayLike) -> str:
    return f"{type(array).__module__}.{type(array).__name__}(shape={array.shape}, dtype={array.dtype}, device={device(array)})"
