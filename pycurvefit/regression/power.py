"""
Power regression.

Fits f(x) = coefficient·x^exponent by log-linearizing both axes and
delegating to SimpleLinear:

    ln y = ln(coefficient) + exponent·ln x

so coefficient = exp(intercept) and exponent = slope of the log-space fit.
Inputs must be strictly positive for the fit to be meaningful; other
values are not rejected and produce non-finite parameters.
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
import numpy as np
from numpy.typing import ArrayLike

from pycurvefit.regression.base import FittableModel
from pycurvefit.regression.design import ObservationSet
from pycurvefit.regression.linear import SimpleLinear


@dataclass(frozen=True)
class Power(FittableModel):
    """
    Power regression model.

    Attributes:
        coefficient: Multiplier A in A·x^B
        exponent: Power B in A·x^B
        linear: The log-space SimpleLinear fit this model was derived
            from, or None when built directly. Kept for traceability only;
            excluded from equality and from serialized records.
    """
    coefficient: float = 0.0
    exponent: float = 1.0
    linear: SimpleLinear | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'coefficient', float(self.coefficient))
        object.__setattr__(self, 'exponent', float(self.exponent))

    @classmethod
    def fit(cls, x: ArrayLike, y: ArrayLike) -> Power:
        """
        Fit a power law to paired observations.

        Args:
            x: Inputs, scalar or 1D sequence, expected > 0
            y: Observed outputs, same length as x, expected > 0

        Returns:
            A new Power

        Raises:
            ValidationError: If inputs are empty or non-numeric
            DimensionMismatchError: If x and y differ in length
        """
        observations = ObservationSet.from_arrays(x, y)
        logged = observations.log()

        for name, values in (('x', logged.x), ('y', logged.y)):
            n_bad = int(np.sum(~np.isfinite(values) & np.isfinite(getattr(observations, name))))
            if n_bad:
                warnings.warn(
                    f"{name}: {n_bad} non-positive value(s) cannot be log-linearized; "
                    f"the power fit contains non-finite parameters.",
                    RuntimeWarning,
                    stacklevel=2,
                )

        linear = SimpleLinear.fit_observations(logged)

        with np.errstate(over='ignore'):
            coefficient = float(np.exp(linear.intercept))

        return cls(coefficient=coefficient, exponent=linear.slope, linear=linear)

    def evaluate(self, x: float) -> float:
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            return float(self.coefficient * np.power(np.float64(x), self.exponent))

    def get_x(self, y: float, precision: int | None = None) -> float:
        """
        Compute x at y, optionally rounded.

        A zero exponent uses 0 as the inverse exponent and a zero
        coefficient uses 0 as the base, so neither divides by zero.
        """
        exponent = 0.0 if self.exponent == 0 else 1 / self.exponent
        base = 0.0 if self.coefficient == 0 else y / self.coefficient
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            x = np.power(np.float64(base), exponent)
        return self._to_precision(float(x), precision)

    def equation(self, precision: int | None = None) -> str:
        """Render as 'f(x) = <coefficient>x^<exponent>'; a coefficient of 1 is omitted."""
        coefficient = self._precise_string(self.coefficient, precision)
        return 'f(x) = {}x^{}'.format(
            '' if coefficient == '1' else coefficient,
            self._precise_string(self.exponent, precision),
        )

    def _params(self) -> dict[str, Any]:
        return {
            'coefficient': self.coefficient,
            'exponent': self.exponent,
        }

    @classmethod
    def _from_params(cls, record: Mapping[str, Any]) -> Power:
        return cls(coefficient=float(record['coefficient']), exponent=float(record['exponent']))
