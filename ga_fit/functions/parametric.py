"""
Parametric Functions

This module provides the bounded-parameter functions that parametric models
wrap. A function holds a parameter vector, per-parameter limits and names,
and can be evaluated at a point x (a 1-D coordinate vector).

By convention, limits with min >= max mark a parameter as fixed: it is not
randomized at initialization and not perturbed by mutation.
"""
import copy
from typing import Callable, Optional, Sequence, Tuple
import numpy as np


class ParametricFunction:
    """
    A function f(x; p) with a bounded parameter vector.

    Args:
        func: Callable taking (x, params) and returning a float. x is a 1-D
              numpy array, params a numpy array of length n_params.
        n_params: Number of parameters.
        names: Optional parameter names. Defaults to p0, p1, ...
        values: Optional initial parameter values. Defaults to zeros.
        limits: Optional list of (min, max) per parameter. Defaults to (0, 0).
    """

    def __init__(self, func: Callable[[np.ndarray, np.ndarray], float], n_params: int,
                 names: Optional[Sequence[str]] = None,
                 values: Optional[Sequence[float]] = None,
                 limits: Optional[Sequence[Tuple[float, float]]] = None):
        if n_params < 0:
            raise ValueError(f"n_params must be >= 0, got {n_params}")
        self.func = func
        self._params = np.zeros(n_params, dtype=np.float64)
        self._limits = np.zeros((n_params, 2), dtype=np.float64)
        self._names = [f"p{i}" for i in range(n_params)]

        if names is not None:
            for i, name in enumerate(names):
                self.set_parameter_name(i, name)
        if values is not None:
            self.set_parameters(values)
        if limits is not None:
            for i, (pmin, pmax) in enumerate(limits):
                self.set_bounds(i, pmin, pmax)

    def _check_index(self, i: int):
        if i < 0 or i >= len(self._params):
            raise IndexError(f"Parameter index ({i}) is out of range [0, {len(self._params)}[")

    def parameter_count(self) -> int:
        return len(self._params)

    def get_parameter(self, i: int) -> float:
        self._check_index(i)
        return float(self._params[i])

    def set_parameter(self, i: int, value: float):
        self._check_index(i)
        self._params[i] = value

    def get_parameters(self) -> np.ndarray:
        """Returns a copy of the current parameter vector."""
        return self._params.copy()

    def set_parameters(self, values: Sequence[float]):
        values = np.asarray(values, dtype=np.float64)
        if values.shape != self._params.shape:
            raise ValueError(f"Expected {len(self._params)} parameters, got {values.size}")
        self._params[:] = values

    def get_bounds(self, i: int) -> Tuple[float, float]:
        self._check_index(i)
        return float(self._limits[i, 0]), float(self._limits[i, 1])

    def set_bounds(self, i: int, pmin: float, pmax: float):
        self._check_index(i)
        self._limits[i] = (pmin, pmax)

    def get_parameter_name(self, i: int) -> str:
        self._check_index(i)
        return self._names[i]

    def set_parameter_name(self, i: int, name: str):
        self._check_index(i)
        self._names[i] = name

    def evaluate(self, params: Sequence[float], x) -> float:
        """Evaluates the function at x for an explicit parameter vector."""
        x = np.atleast_1d(np.asarray(x, dtype=np.float64))
        return float(self.func(x, np.asarray(params, dtype=np.float64)))

    def __call__(self, x) -> float:
        return self.evaluate(self._params, x)

    def clone(self) -> 'ParametricFunction':
        """Returns an independent copy; the caller owns it."""
        return copy.deepcopy(self)

    def describe(self) -> str:
        lines = []
        for i in range(self.parameter_count()):
            pmin, pmax = self.get_bounds(i)
            lines.append(f"{self._names[i]} : {self._params[i]:.6g}  - range: [{pmin:g}, {pmax:g}]")
        return "\n".join(lines)

    def __repr__(self) -> str:
        params = ", ".join(f"{n}={v:.4g}" for n, v in zip(self._names, self._params))
        return f"ParametricFunction({params})"


def _gaussian(x: np.ndarray, p: np.ndarray) -> float:
    """c * exp(-0.5 * ((x - mu) / sigma)^2), evaluated at x[0]."""
    return p[0] * np.exp(-0.5 * ((x[0] - p[1]) / p[2]) ** 2)


def _polynomial(x: np.ndarray, p: np.ndarray) -> float:
    return np.polynomial.polynomial.polyval(x[0], p)


def gaussian(constant: float = 1.0, mean: float = 0.0, sigma: float = 1.0,
             limits: Optional[Sequence[Tuple[float, float]]] = None) -> ParametricFunction:
    """Creates a one-dimensional gaussian with parameters Constant, Mean, Sigma."""
    return ParametricFunction(_gaussian, 3,
                              names=["Constant", "Mean", "Sigma"],
                              values=[constant, mean, sigma],
                              limits=limits)


def polynomial(degree: int, coefficients: Optional[Sequence[float]] = None,
               limits: Optional[Sequence[Tuple[float, float]]] = None) -> ParametricFunction:
    """Creates a one-dimensional polynomial p0 + p1*x + ... + pN*x^N."""
    if degree < 0:
        raise ValueError(f"degree must be >= 0, got {degree}")
    return ParametricFunction(_polynomial, degree + 1, values=coefficients, limits=limits)


FUNCTION_FACTORIES = {
    'gaussian': gaussian,
    'polynomial': polynomial,
}
