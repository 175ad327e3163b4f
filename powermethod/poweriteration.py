# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Optional
from dataclasses import dataclass
from math import isfinite
import logging
import time

from .backend import ArrayLike, vector_norm, materialize, describe
from .errors import InvalidArgumentError, NumericalDegeneracyError
from .linearoperator import LinearOperator
from .utils import check_int, check_real, check_non_neg, check_vector, check_same_shape, check_same_dtype

logger = logging.getLogger(__name__)

@dataclass(kw_only=True)
class PowerIterationResult[T: ArrayLike]:
    #: Unit norm estimate of the dominant eigenvector.
    array: T
    #: Estimate of the dominant eigenvalue, zero dimensional with the dtype of the vector.
    value: T
    #: Time taken to compute the eigenvector and eigenvalue.
    time: float
    #: Running eigenvalue estimate after each iteration.
    values: list[float]
    #: Number of iterations performed.
    iterations: int

@dataclass
class PowerIteration:
    """
    Power method for the eigenvector belonging to the eigenvalue of largest magnitude.
    The operator is applied repeatedly to the vector, which is renormalized after each step.
    """

    #: Number of operator applications before the eigenvalue is estimated.
    iterations: int = 100

    #: Minimum difference between the estimates of consecutive iterations, below which the
    #: iteration is stopped. Zero runs all iterations.
    eps: float = 0.0

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "iterations":
            check_int(name, value)
            check_non_neg(name, value)
        elif name == "eps":
            check_real(name, value)
            check_non_neg(name, value)
        super().__setattr__(name, value)

    def __call__[T: ArrayLike](
            self,
            operator: LinearOperator,
            guess: T, /,
            callback: Optional[Callable[[int, float], bool]] = None,
            ) -> PowerIterationResult[T]:
        """
        Run the power method for the operator starting from the initial guess. The callback is
        called after each iteration with the iteration index and the current eigenvalue estimate.
        Returning True from the callback stops the iteration.
        """
        xp = check_vector("Initial vector", guess)
        self._check_operator(operator)
        start_norm = self._start_norm(guess)
        logger.debug("power iteration on %r with %s", operator, describe(guess))

        stamp = time.time()
        vec = guess
        prev_norm = start_norm
        values: list[float] = []
        for i in range(self.iterations):
            out = materialize(operator.apply(vec))
            check_same_shape(vec, out)
            check_same_dtype(vec, out)
            norm = vector_norm(out)
            val = self._norm_value(norm, i) / prev_norm
            vec = out / xp.astype(norm, out.dtype)
            prev_norm = 1.0
            values.append(val)
            logger.debug("iteration %d: eigenvalue estimate %.12g", i, val)
            if callback is not None and callback(i, val):
                break
            if self.eps > 0.0 and len(values) > 1 and abs(values[-1] - values[-2]) < self.eps:
                break

        if self.iterations == 0:
            vec = guess / xp.astype(vector_norm(guess), guess.dtype)

        value = self.estimate(operator, vec)
        result = PowerIterationResult(array=vec,
                                      value=value,
                                      time=time.time() - stamp,
                                      values=values,
                                      iterations=len(values))
        logger.info("power iteration finished after %d iterations with eigenvalue %s",
                    result.iterations, value)
        return result

    def estimate[T: ArrayLike](self, operator: LinearOperator, vec: T) -> T:
        """
        Eigenvalue estimate norm(apply(v)) / norm(v) for a vector which is close to an eigenvector.
        """
        xp = check_vector("Vector", vec)
        out = operator.apply(vec)
        check_same_shape(vec, out)
        check_same_dtype(vec, out)
        return xp.astype(vector_norm(out), vec.dtype) / xp.astype(vector_norm(vec), vec.dtype)

    def _check_operator(self, operator: Any) -> None:
        if not isinstance(operator, LinearOperator):
            raise TypeError(
                f"{type(operator).__name__} does not provide an apply method. "
                "Wrap functions with CallableOperator.")

    def _start_norm(self, guess: ArrayLike) -> float:
        norm = float(vector_norm(guess))
        if norm == 0.0 or not isfinite(norm):
            raise InvalidArgumentError(f"Initial vector must be nonzero and finite, got norm {norm}")
        return norm

    def _norm_value(self, norm: ArrayLike, step: int) -> float:
        val = float(norm)
        if val == 0.0 or not isfinite(val):
            logger.error("degenerate norm %s in iteration %d", val, step)
            raise NumericalDegeneracyError(
                f"Norm of the iterate is {val} in iteration {step}, the operator is degenerate or diverges")
        return val

def power_iteration[T: ArrayLike](
        operator: LinearOperator,
        vec: T,
        iterations: int = 100) -> tuple[T, T]:
    """
    Dominant eigenvector and eigenvalue of the operator, starting from vec.
    """
    res = PowerIteration(iterations=iterations)(operator, vec)
    return res.array, res.value
