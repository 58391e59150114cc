"""
Core infrastructure for pycurvefit.

Shared abstractions used by the regression models.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
"""

from pycurvefit.core.exceptions import (
    CurveFitError,
    ValidationError,
    DimensionMismatchError,
    TypeMismatchError,
    InvalidPropertyError,
)

__all__ = [
    "CurveFitError",
    "ValidationError",
    "DimensionMismatchError",
    "TypeMismatchError",
    "InvalidPropertyError",
]
