"""
Simple linear regression.

Fits f(x) = slope·x + intercept by ordinary least squares in closed form:

    slope     = (nΣxy − ΣxΣy) / (nΣx² − (Σx)²)
    intercept = Σy/n − slope·Σx/n

Example:
    >>> model = SimpleLinear.fit([0, 1, 2, 3, 4, 5], [10, 8, 6, 4, 2, 0])
    >>> model.equation(0)
    'f(x) = -2x + 10'
    >>> SimpleLinear.from_json(model.to_json()).predict(2.5)
    array([5.])
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike

from pycurvefit.regression.base import FittableModel
from pycurvefit.regression.design import ObservationSet


@dataclass(frozen=True)
class SimpleLinear(FittableModel):
    """
    Simple linear regression model.

    Attributes:
        slope: Rise over run of the fitted line
        intercept: Value of the line at x = 0
    """
    slope: float = 0.0
    intercept: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, 'slope', float(self.slope))
        object.__setattr__(self, 'intercept', float(self.intercept))

    @classmethod
    def fit(cls, x: ArrayLike, y: ArrayLike) -> SimpleLinear:
        """
        Fit a line to paired observations.

        Args:
            x: Inputs, scalar or 1D sequence
            y: Observed outputs, same length as x

        Returns:
            A new SimpleLinear

        Raises:
            ValidationError: If inputs are empty or non-numeric
            DimensionMismatchError: If x and y differ in length
        """
        return cls.fit_observations(ObservationSet.from_arrays(x, y))

    @classmethod
    def fit_observations(cls, observations: ObservationSet) -> SimpleLinear:
        """Fit a line to an already validated ObservationSet."""
        x = observations.x
        y = observations.y
        n = observations.n

        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            x_sum = np.sum(x)
            y_sum = np.sum(y)
            x_squared = np.sum(x ** 2)
            xy = np.sum(x * y)

            denominator = n * x_squared - x_sum ** 2
            slope = (n * xy - x_sum * y_sum) / denominator
            intercept = y_sum / n - slope * x_sum / n

        if denominator == 0:
            warnings.warn(
                f"All {n} x values are identical; slope is undefined "
                f"and the fit contains non-finite parameters.",
                RuntimeWarning,
                stacklevel=3,
            )

        return cls(slope=float(slope), intercept=float(intercept))

    def evaluate(self, x: float) -> float:
        return self.slope * x + self.intercept

    def get_x(self, y: float, precision: int | None = None) -> float:
        """
        Compute x at y, optionally rounded.

        A zero slope gives ±inf (or nan when y equals the intercept).
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            x = np.divide(np.float64(y) - self.intercept, self.slope)
        return self._to_precision(float(x), precision)

    def coefficients(self, precision: int | None = None) -> list[float]:
        """Coefficients in ascending powers of x: [x^0, x^1]."""
        return [
            self._to_precision(self.intercept, precision),
            self._to_precision(self.slope, precision),
        ]

    def equation(self, precision: int | None = None) -> str:
        """
        Render as 'f(x) = <slope>x + <intercept>'.

        A zero slope renders the constant alone, a slope of magnitude 1
        renders as a bare x, a zero intercept is omitted and a negative one
        is written with '-'.
        """
        equation = 'f(x) = '

        if self.slope == 0:
            return equation + self._precise_string(self.intercept, precision)

        coefficient = self._precise_string(self.slope, precision)
        if coefficient in ('1', '-1'):
            coefficient = coefficient[:-1]
        equation += f"{coefficient}x"

        if self.intercept != 0:
            operator = '-' if self.intercept < 0 else '+'
            equation += f" {operator} {self._precise_string(abs(self.intercept), precision)}"

        return equation

    def _params(self) -> dict[str, Any]:
        return {
            'slope': self.slope,
            'intercept': self.intercept,
            'coefficients': self.coefficients(),
        }

    @classmethod
    def _from_params(cls, record: Mapping[str, Any]) -> SimpleLinear:
        return cls(slope=float(record['slope']), intercept=float(record['intercept']))
