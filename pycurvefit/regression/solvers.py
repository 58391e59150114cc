"""
Family dispatch for curve fitting.

Provides the fit() function (public API) and the load()/loads() pair that
rebuild a model from a record without knowing its family in advance.
"""

from collections.abc import Mapping
from typing import Any, Literal
import json

from numpy.typing import ArrayLike

from pycurvefit.core.exceptions import TypeMismatchError, ValidationError
from pycurvefit.regression.base import FittableModel
from pycurvefit.regression.linear import SimpleLinear
from pycurvefit.regression.power import Power


# Type alias for family selection
FamilyChoice = Literal['linear', 'power']

FAMILIES: dict[str, type[FittableModel]] = {
    'linear': SimpleLinear,
    'power': Power,
}


def fit(
    x: ArrayLike,
    y: ArrayLike,
    *,
    family: FamilyChoice = 'linear',
) -> FittableModel:
    """
    Fit a closed-form model to paired observations.

    Args:
        x: Inputs. Scalar or 1D array-like.
        y: Observed outputs, same length as x.
        family: Functional form to fit:
            - 'linear': f(x) = slope·x + intercept
            - 'power': f(x) = coefficient·x^exponent (x, y > 0)

    Returns:
        A new, immutable fitted model

    Raises:
        ValueError: If family is unknown
        ValidationError: If inputs are empty or non-numeric
        DimensionMismatchError: If x and y differ in length

    Example:
        >>> from pycurvefit import fit
        >>> model = fit([1, 2, 4], [3, 6, 12], family='power')
        >>> model.equation(2)
        'f(x) = 3x^1'
    """
    try:
        model_cls = FAMILIES[family]
    except KeyError:
        raise ValueError(
            f"Unknown family: {family!r}. Valid choices: {sorted(FAMILIES)}"
        ) from None
    return model_cls.fit(x, y)


def load(record: Mapping[str, Any]) -> FittableModel:
    """
    Rebuild a model of any family from a record produced by to_dict().

    Raises:
        ValidationError: If record is not a mapping
        TypeMismatchError: If record['name'] matches no known family
    """
    if not isinstance(record, Mapping):
        raise ValidationError(
            f"record: expected a mapping, got {type(record).__name__}"
        )

    name = record.get('name')
    for model_cls in FAMILIES.values():
        if model_cls.qualified_name() == name:
            return model_cls.from_dict(record)

    known = [model_cls.qualified_name() for model_cls in FAMILIES.values()]
    raise TypeMismatchError(
        f"Model {name!r} is not a known model. Known models: {known}",
        expected=None,
        actual=name,
    )


def loads(text: str) -> FittableModel:
    """Rebuild a model of any family from JSON text produced by to_json()."""
    try:
        record = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"json: cannot decode model record: {e}") from e
    return load(record)
