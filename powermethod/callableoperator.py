# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Callable
from .backend import ArrayLike

class CallableOperator[T: ArrayLike]:
    """Wraps a function, which is assumed to be linear and shape preserving, as a linear operator."""

    func: Callable[[T], T]

    def __init__(self, func: Callable[[T], T]) -> None:
        if not callable(func):
            raise TypeError(f"Expected a callable, got {type(func).__name__}")
        self.func = func

    def apply(self, vec: T, /) -> T:
        return self.func(vec)

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", type(self.func).__name__)
        return f"CallableOperator({name})"
