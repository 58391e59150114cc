"""
pycurvefit: closed-form curve fitting for Python.

Fits simple linear and power models to paired observations, scores them,
renders their equations, and serializes them losslessly.

Submodules:
    core: Exceptions and input validation
    regression: Fittable models, scoring and family dispatch
"""

__version__ = "0.1.0"

from pycurvefit import regression
from pycurvefit.regression import (
    fit,
    load,
    loads,
    FittableModel,
    SimpleLinear,
    Power,
    Score,
)

__all__ = [
    "__version__",
    "regression",
    "fit",
    "load",
    "loads",
    "FittableModel",
    "SimpleLinear",
    "Power",
    "Score",
]
