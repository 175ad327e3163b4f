# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import overload, Any, Type, Callable, Optional
from dataclasses import dataclass
import h5py

from .backend import ArrayNamespace, Device, DType, get_namespace, to_device as _to_device
from .linearoperator import LinearOperator
from .denseoperator import DenseOperator
from .tridiagonaloperator import TridiagonalOperator
from .averagingoperator import AveragingOperator
from .callableoperator import CallableOperator
from .poweriteration import PowerIteration, PowerIterationResult

from .io import write as _write
from .io import read as _read

from .options import IterationOptions, PrecisionOptions, OptionType, set_options, get_options

#-------------------------------------------------------------------------------------------------
# Construction wrapper
@dataclass(frozen=True)
class PowerMethod[NDArray: Any]:
    """
    Entry point bound to one array library. Arrays, operators and solvers created through it
    live in that library, so the same algorithm code runs on every supported backend.
    """

    #: Array namespace for the underlying array library.
    namespace: ArrayNamespace[NDArray]

    def __init__(self, namespace: Any) -> None:
        object.__setattr__(self, "namespace", get_namespace(namespace))

        set_options(self.iteration())
        set_options(self.precision())

    #-------------------------------------------------------------------------------------------------
    # array wrapper

    def asarray(self, data: Any) -> NDArray:
        """
        Convert data to an array of the backend with the dtype and device of the precision options.
        """
        opts = get_options(self.namespace, OptionType.PRECISION)
        arr = self.namespace.asarray(data)
        arr = self.namespace.astype(arr, opts.dtype)
        if opts.device is not None:
            arr = _to_device(arr, opts.device)
        return arr

    def ones(self, size: int) -> NDArray:
        """Vector of ones, a common starting vector."""
        opts = get_options(self.namespace, OptionType.PRECISION)
        return self.namespace.ones(size, dtype=opts.dtype, device=opts.device)

    def to_device(self, array: NDArray, device: Device) -> NDArray:
        """Copy an array to the given device."""
        return _to_device(array, device)

    #-------------------------------------------------------------------------------------------------
    # operator wrapper

    def dense(self, matrix: Any) -> DenseOperator[NDArray]:
        """
        Operator given by a stored square matrix.
        """
        return DenseOperator(self.asarray(matrix))

    def tridiagonal(
            self,
            diag: Any,
            lower: Any,
            upper: Optional[Any] = None) -> TridiagonalOperator[NDArray]:
        """
        Banded operator given by its three diagonals. Without an upper diagonal the
        operator is symmetric.
        """
        upper_ = None if upper is None else self.asarray(upper)
        return TridiagonalOperator(self.asarray(diag), self.asarray(lower), upper_)

    def averaging(self) -> AveragingOperator:
        """
        Matrix-free averaging operator with fixed boundary values.
        """
        return AveragingOperator()

    def operator(self, func: Callable[[NDArray], NDArray]) -> CallableOperator[NDArray]:
        """
        Operator defined by a linear, shape preserving function.
        """
        return CallableOperator(func)

    #-------------------------------------------------------------------------------------------------
    # solver wrapper

    def power_iteration(
            self, *,
            iterations: Optional[int] = None,
            eps: Optional[float] = None) -> PowerIteration:
        """
        Power iteration solver. Unset arguments are taken from the iteration options.
        """
        opts = get_options(self.namespace, OptionType.ITERATION)
        return PowerIteration(iterations=opts.iterations if iterations is None else iterations,
                              eps=opts.eps if eps is None else eps)

    def solve(
            self,
            operator: LinearOperator,
            guess: NDArray,
            iterations: Optional[int] = None,
            callback: Optional[Callable[[int, float], bool]] = None,
            ) -> PowerIterationResult[NDArray]:
        """
        Estimate the dominant eigenpair of the operator starting from guess.
        """
        return self.power_iteration(iterations=iterations)(operator, guess, callback=callback)

    #-------------------------------------------------------------------------------------------------
    # io wrapper

    def write(self, group: h5py.Group, obj: Any) -> None:
        """
        Write an operator or a result to a hdf5 group.
        """
        _write(group, obj)

    @overload
    def read(self, group: h5py.Group, cls: Type[DenseOperator]) -> DenseOperator[NDArray]: ...
    @overload
    def read(self, group: h5py.Group, cls: Type[TridiagonalOperator]) -> TridiagonalOperator[NDArray]: ...
    @overload
    def read(self, group: h5py.Group, cls: Type[AveragingOperator]) -> AveragingOperator: ...
    @overload
    def read(self, group: h5py.Group, cls: Type[PowerIterationResult]) -> PowerIterationResult[NDArray]: ...
    # implementation
    def read(self, group: h5py.Group, cls: Any) -> Any:
        """
        Read an operator or a result from a hdf5 group into the namespace of this object.
        """
        return _read(group, cls, self.namespace)

    #-------------------------------------------------------------------------------------------------
    # default options

    def iteration(
            self, *,
            iterations: int = 100,
            eps: float = 0.0) -> IterationOptions:
        """
        Defaults for power iterations created by this object.
        """
        return IterationOptions(namespace=self.namespace, iterations=iterations, eps=eps)

    def precision(
            self, *,
            dtype: Optional[DType] = None,
            device: Optional[Device] = None) -> PrecisionOptions:
        """
        Dtype and device of arrays created by this object. dtype defaults to float64.
        """
        return PrecisionOptions(namespace=self.namespace, dtype=dtype, device=device)

    def set_options(self, options: IterationOptions | PrecisionOptions) -> None:
        """
        Set options globally. The options are stored per thread.
        """
        set_options(options)

    def get_options(self, otype: OptionType) -> IterationOptions | PrecisionOptions:
        """
        Get the current options.
        """
        return get_options(self.namespace, otype)
