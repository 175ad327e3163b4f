# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Protocol, runtime_checkable
from .backend import ArrayLike

@runtime_checkable
class LinearOperator(Protocol):
    """Protocol for a linear map of a vector space onto itself, defined by its action on vectors."""

    def apply[T: ArrayLike](self, vec: T, /) -> T:
        """
        Apply the linear map to a vector. The result has the same shape and dtype as the input.
        """
        ...
