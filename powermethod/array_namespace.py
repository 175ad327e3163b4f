# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Structural types for arrays and array namespaces following the array API standard."""

from typing import Any, Protocol, Self, Sequence

type Device = Any
type DType = Any

class ArrayLike(Protocol):
    """Minimal array interface used by the solvers."""

    @property
    def dtype(self) -> DType: ...

    @property
    def device(self) -> Device: ...

    @property
    def ndim(self) -> int: ...

    @property
    def shape(self) -> tuple[int | None, ...]: ...

    def __getitem__(self, key: Any, /) -> Self: ...
    def __add__(self, other: Any, /) -> Self: ...
    def __sub__(self, other: Any, /) -> Self: ...
    def __mul__(self, other: Any, /) -> Self: ...
    def __rmul__(self, other: Any, /) -> Self: ...
    def __truediv__(self, other: Any, /) -> Self: ...
    def __matmul__(self, other: Any, /) -> Self: ...
    def __float__(self) -> float: ...

class LinalgNamespace[T: ArrayLike](Protocol):
    def vector_norm(self, x: T, /) -> T: ...
    def eigh(self, x: T, /) -> tuple[T, T]: ...

class ArrayNamespace[T: ArrayLike](Protocol):
    """Array namespace as returned by ``array_api_compat.array_namespace``."""

    linalg: LinalgNamespace[T]
    float32: DType
    float64: DType
    complex64: DType
    complex128: DType

    def asarray(self, obj: Any, /, *, dtype: DType = None, device: Device = None) -> T: ...
    def zeros(self, shape: int | Sequence[int], *, dtype: DType = None, device: Device = None) -> T: ...
    def ones(self, shape: int | Sequence[int], *, dtype: DType = None, device: Device = None) -> T: ...
    def eye(self, n: int, /, *, dtype: DType = None, device: Device = None) -> T: ...
    def concat(self, arrays: Sequence[T], /, *, axis: int = 0) -> T: ...
    def astype(self, x: T, dtype: DType, /) -> T: ...
    def isdtype(self, dtype: DType, kind: str | tuple[str, ...], /) -> bool: ...
    def abs(self, x: T, /) -> T: ...
    def sqrt(self, x: T, /) -> T: ...
    def sum(self, x: T, /) -> T: ...
    def all(self, x: T, /) -> T: ...
    def isfinite(self, x: T, /) -> T: ...
    def __array_namespace_info__(self) -> Any: ...
