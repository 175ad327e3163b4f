# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike, shape
from .errors import InvalidArgumentError
from .utils import check_length

class DenseOperator[T: ArrayLike]:
    """Linear operator given by a stored square matrix."""

    _matrix: T

    @property
    def matrix(self) -> T:
        return self._matrix

    @property
    def size(self) -> int:
        return shape(self._matrix)[0]

    @property
    def dtype(self):
        return self._matrix.dtype

    def __init__(self, matrix: T) -> None:
        if matrix.ndim != 2:
            raise InvalidArgumentError(f"Matrix must be two dimensional, got shape {matrix.shape}")
        rows, cols = shape(matrix)
        if rows != cols:
            raise InvalidArgumentError(f"Matrix must be square, got shape {matrix.shape}")
        self._matrix = matrix

    def apply(self, vec: T, /) -> T:
        check_length("Vector", vec, self.size)
        return self._matrix @ vec

    def __repr__(self) -> str:
        return f"DenseOperator(size={self.size}, dtype={self.dtype})"
