# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Optional

from .backend import ArrayLike, namespace_of_arrays, shape, device
from .errors import InvalidArgumentError
from .utils import check_length

class TridiagonalOperator[T: ArrayLike]:
    """
    Banded linear operator storing only the main diagonal and the two adjacent diagonals.
    Without an upper diagonal the operator is symmetric, i.e. the lower diagonal is used for both.
    """

    #: Main diagonal of length n.
    diag: T
    #: Subdiagonal of length n-1.
    lower: T
    #: Superdiagonal of length n-1.
    upper: T

    @property
    def size(self) -> int:
        return shape(self.diag)[0]

    @property
    def dtype(self):
        return self.diag.dtype

    @property
    def symmetric(self) -> bool:
        return self.upper is self.lower

    def __init__(self, diag: T, lower: T, upper: Optional[T] = None) -> None:
        if upper is None:
            upper = lower
        if any(d.ndim != 1 for d in (diag, lower, upper)):
            raise InvalidArgumentError("Diagonals must be one dimensional")
        if shape(diag)[0] < 2:
            raise InvalidArgumentError("Tridiagonal operator needs at least two rows")
        check_length("Lower diagonal", lower, shape(diag)[0]-1)
        check_length("Upper diagonal", upper, shape(diag)[0]-1)
        self.diag = diag
        self.lower = lower
        self.upper = upper

    def apply(self, vec: T, /) -> T:
        check_length("Vector", vec, self.size)
        xp = namespace_of_arrays(vec)
        zero = xp.zeros(1, dtype=vec.dtype, device=device(vec))
        below = xp.concat([zero, self.lower * vec[:-1]])
        above = xp.concat([self.upper * vec[1:], zero])
        return below + self.diag * vec + above

    def to_dense(self) -> T:
        """Full matrix representation in the namespace of the diagonals."""
        xp = namespace_of_arrays(self.diag)
        n = self.size
        eye = xp.eye(n, dtype=self.dtype, device=device(self.diag))
        mat = eye * self.diag[:, None]
        mat = mat + xp.concat([xp.zeros((1, n), dtype=self.dtype, device=device(self.diag)),
                               eye[:-1, :] * self.lower[:, None]], axis=0)
        mat = mat + xp.concat([eye[1:, :] * self.upper[:, None],
                               xp.zeros((1, n), dtype=self.dtype, device=device(self.diag))], axis=0)
        return mat

    def __repr__(self) -> str:
        return f"TridiagonalOperator(size={self.size}, dtype={self.dtype}, symmetric={self.symmetric})"
