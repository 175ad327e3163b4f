# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Type, overload
import h5py
import numpy as np

from .backend import ArrayNamespace, ArrayLike, to_device
from .denseoperator import DenseOperator
from .tridiagonaloperator import TridiagonalOperator
from .averagingoperator import AveragingOperator
from .poweriteration import PowerIterationResult

@overload
def write(group: h5py.Group, obj: DenseOperator) -> None: ...
@overload
def write(group: h5py.Group, obj: TridiagonalOperator) -> None: ...
@overload
def write(group: h5py.Group, obj: AveragingOperator) -> None: ...
@overload
def write(group: h5py.Group, obj: PowerIterationResult) -> None: ...
#implementation
def write(group: h5py.Group, obj: Any) -> None:
    if isinstance(obj, DenseOperator):
        group.attrs["kind"] = "dense"
        write_array(group, "matrix", obj.matrix)
    elif isinstance(obj, TridiagonalOperator):
        group.attrs["kind"] = "tridiagonal"
        write_array(group, "diag", obj.diag)
        write_array(group, "lower", obj.lower)
        if not obj.symmetric:
            write_array(group, "upper", obj.upper)
    elif isinstance(obj, AveragingOperator):
        group.attrs["kind"] = "averaging"
    elif isinstance(obj, PowerIterationResult):
        group.attrs["kind"] = "result"
        group.attrs["time"] = obj.time
        group.attrs["iterations"] = obj.iterations
        write_array(group, "array", obj.array)
        write_array(group, "value", obj.value)
        group.create_dataset("values", data=np.asarray(obj.values, dtype=np.float64))
    else:
        raise ValueError(f"Objects of type {type(obj).__name__} cannot be written.")

@overload
def read[T: ArrayLike](group: h5py.Group, cls: Type[DenseOperator], xp: ArrayNamespace[T]) -> DenseOperator[T]: ...
@overload
def read[T: ArrayLike](group: h5py.Group, cls: Type[TridiagonalOperator], xp: ArrayNamespace[T]) -> TridiagonalOperator[T]: ...
@overload
def read(group: h5py.Group, cls: Type[AveragingOperator], xp: ArrayNamespace) -> AveragingOperator: ...
@overload
def read[T: ArrayLike](group: h5py.Group, cls: Type[PowerIterationResult], xp: ArrayNamespace[T]) -> PowerIterationResult[T]: ...
#implementation
def read(group: h5py.Group, cls: Any, xp: ArrayNamespace) -> Any:
    if cls == DenseOperator:
        check_kind(group, "dense")
        return DenseOperator(read_array(group, "matrix", xp))
    elif cls == TridiagonalOperator:
        check_kind(group, "tridiagonal")
        upper = read_array(group, "upper", xp) if "upper" in group.keys() else None
        return TridiagonalOperator(read_array(group, "diag", xp),
                                   read_array(group, "lower", xp),
                                   upper)
    elif cls == AveragingOperator:
        check_kind(group, "averaging")
        return AveragingOperator()
    elif cls == PowerIterationResult:
        check_kind(group, "result")
        values = group["values"]
        assert isinstance(values, h5py.Dataset)
        return PowerIterationResult(array=read_array(group, "array", xp),
                                    value=read_array(group, "value", xp),
                                    time=float(get_attr(group, "time")),
                                    values=[float(v) for v in values[()]],
                                    iterations=int(get_attr(group, "iterations")))

    raise ValueError("Invalid class.")

def write_array(group: h5py.Group, name: str, array: ArrayLike) -> None:
    group.create_dataset(name, data=np.asarray(to_device(array, "cpu")))

def read_array[T: ArrayLike](group: h5py.Group, name: str, xp: ArrayNamespace[T]) -> T:
    dataset = group[name]
    assert isinstance(dataset, h5py.Dataset)
    return xp.asarray(np.asarray(dataset[()]))

def check_kind(group: h5py.Group, kind: str) -> None:
    stored = get_attr(group, "kind")
    if stored != kind:
        raise ValueError(f"Group holds a {stored} object, expected {kind}.")

def get_attr(group: h5py.Group, name: str) -> Any:
    return group.attrs[name]
