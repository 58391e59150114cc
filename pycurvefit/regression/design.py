"""
Observation set for curve fitting.

An ObservationSet pairs x-values with y-values positionally. It is the
single place where fit and score inputs are validated; everything that
receives one can trust its shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycurvefit.core.validation import (
    check_array,
    check_1d,
    check_consistent_length,
    check_min_samples,
)


@dataclass(frozen=True)
class ObservationSet:
    """
    Paired (x, y) observations.

    Immutable after construction. Build with ObservationSet.from_arrays(x, y);
    scalars are accepted and treated as one-element sequences.
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> ObservationSet:
        """
        Build an ObservationSet from paired inputs.

        Raises:
            ValidationError: If either input is non-numeric or empty
            DimensionMismatchError: If x and y differ in length or are not 1D
        """
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')

        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        check_min_samples(x_arr, 1, 'x')

        return cls(_x=x_arr, _y=y_arr, _n=x_arr.shape[0])

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Input values (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Observed output values (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    def log(self) -> ObservationSet:
        """
        Log-linearize both axes.

        Non-positive values map to -inf/nan without raising; callers decide
        whether that is worth a warning.
        """
        with np.errstate(divide='ignore', invalid='ignore'):
            x_log = np.log(self._x)
            y_log = np.log(self._y)
        return ObservationSet(_x=x_log, _y=y_log, _n=self._n)
