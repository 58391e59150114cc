"""
Closed-form regression models.

Two families are provided: simple linear regression and power regression
(fitted through log-linearized simple linear regression).

Public API:
    fit(x, y, family=...) -> FittableModel
    load(record) / loads(text) -> FittableModel

Example:
    >>> from pycurvefit.regression import SimpleLinear
    >>> model = SimpleLinear.fit(x, y)
    >>> print(model.equation(2))
    >>> print(model.score(x, y).summary())
"""

from pycurvefit.regression.design import ObservationSet
from pycurvefit.regression.score import Score
from pycurvefit.regression.base import FittableModel
from pycurvefit.regression.linear import SimpleLinear
from pycurvefit.regression.power import Power
from pycurvefit.regression.solvers import FAMILIES, fit, load, loads

__all__ = [
    "fit",
    "load",
    "loads",
    "FAMILIES",
    "ObservationSet",
    "Score",
    "FittableModel",
    "SimpleLinear",
    "Power",
]
