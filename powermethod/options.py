# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Literal, Any, Optional, Self, overload
from enum import Enum
import threading

from .backend import ArrayNamespace, Device, DType, is_inexact
from .errors import InvalidArgumentError
from .utils import check_int, check_real, check_non_neg

class OptionType(Enum):
    ITERATION = 0
    PRECISION = 1

class Options:

    key: Hashable

    def __init__(self, namespace: ArrayNamespace, category: OptionType):
        self.key = (namespace, category, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

class IterationOptions(Options):
    """
    Context manager for the defaults of the power iteration.
    """

    #: Number of iterations.
    iterations: int
    #: Convergence criterion, zero disables early stopping.
    eps: float

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            iterations: int = 100,
            eps: float = 0.0):
        check_int("iterations", iterations)
        check_non_neg("iterations", iterations)
        check_real("eps", eps)
        check_non_neg("eps", eps)
        self.iterations = iterations
        self.eps = eps
        super().__init__(namespace, OptionType.ITERATION)

    def __repr__(self) -> str:
        return f"IterationOptions(iterations={self.iterations}, eps={self.eps})"

class PrecisionOptions(Options):
    """
    Context manager for the dtype and device of newly created arrays.
    """

    #: Floating point dtype of created arrays.
    dtype: DType
    #: Device on which arrays are created, None selects the default device of the namespace.
    device: Optional[Device]

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            dtype: Optional[DType] = None,
            device: Optional[Device] = None):
        if dtype is None:
            dtype = namespace.float64
        if not is_inexact(namespace, dtype):
            raise InvalidArgumentError(f"Precision must be a floating point dtype, got {dtype}")
        self.dtype = dtype
        self.device = device
        super().__init__(namespace, OptionType.PRECISION)

    def __repr__(self) -> str:
        return f"PrecisionOptions(dtype={self.dtype}, device={self.device})"

_opts: dict[Any, Options] = {}

@overload
def get_options(namespace: ArrayNamespace, otype: Literal[OptionType.ITERATION]) -> IterationOptions: ...
@overload
def get_options(namespace: ArrayNamespace, otype: Literal[OptionType.PRECISION]) -> PrecisionOptions: ...
# implementation
def get_options(namespace: ArrayNamespace, otype: OptionType) -> Options:
    global _opts
    key = (namespace, otype, threading.get_ident())
    if key in _opts:
        return _opts[key]
    else:
        raise KeyError("No options set for the current thread.")

def set_options(opts: IterationOptions | PrecisionOptions) -> None:
    global _opts
    _opts[opts.key] = opts
