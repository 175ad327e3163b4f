# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import ArrayLike, namespace_of_arrays, shape
from .errors import InvalidArgumentError

class AveragingOperator:
    """
    Matrix-free smoothing operator. Interior entries are replaced by the mean of their two
    neighbours, the first and last entry are kept fixed. The operator stores no data and
    works for vectors of any length n >= 3.
    """

    def apply[T: ArrayLike](self, vec: T, /) -> T:
        if vec.ndim != 1 or shape(vec)[0] < 3:
            raise InvalidArgumentError(
                f"Averaging needs a vector with at least three entries, got shape {vec.shape}")
        xp = namespace_of_arrays(vec)
        return xp.concat([vec[:1], (vec[:-2] + vec[2:]) / 2, vec[-1:]])

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AveragingOperator)

    def __hash__(self) -> int:
        return hash(AveragingOperator)

    def __repr__(self) -> str:
        return "AveragingOperator()"
