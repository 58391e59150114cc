"""
Base class for fitted closed-form models.

A FittableModel holds the parameters of one functional family. Families
supply a single primitive, evaluate(x), plus their equation rendering and
record fields; everything else (prediction, scoring, serialization) is
shared and expressed in terms of those hooks.

Models are immutable. Fitting is a classmethod that returns a new
instance, so concurrent reads of one model never need locking.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, TypeVar
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pycurvefit.core.exceptions import TypeMismatchError, ValidationError
from pycurvefit.core.validation import check_array, check_1d
from pycurvefit.regression.design import ObservationSet
from pycurvefit.regression.score import Score

M = TypeVar('M', bound='FittableModel')


class FittableModel(ABC):
    """
    Contract shared by every fitted model.

    Subclasses are frozen dataclasses and must implement:
        evaluate(x)       the closed-form function at a single point
        equation(...)     human-readable rendering of the fitted function
        _params()         raw parameters in record order
        _from_params(r)   rebuild an instance from a record's parameters
    """

    @abstractmethod
    def evaluate(self, x: float) -> float:
        """Value of the fitted function at a single point x."""
        ...

    @abstractmethod
    def equation(self, precision: int | None = None) -> str:
        """Render the fitted function, rounding displayed values to precision."""
        ...

    @abstractmethod
    def _params(self) -> dict[str, Any]:
        ...

    @classmethod
    @abstractmethod
    def _from_params(cls: type[M], record: Mapping[str, Any]) -> M:
        ...

    # === Prediction ===

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Predict outputs for one or more inputs.

        Args:
            x: Scalar or 1D sequence of inputs. A scalar is treated as a
               one-element sequence.

        Returns:
            float64 array with one prediction per input
        """
        x_arr = check_array(x, 'x')
        check_1d(x_arr, 'x')
        return np.fromiter(
            (self.evaluate(float(value)) for value in x_arr),
            dtype=np.float64,
            count=x_arr.shape[0],
        )

    def get_y(self, x: float, precision: int | None = None) -> float:
        """Compute y at x, optionally rounded."""
        return self._to_precision(self.evaluate(float(x)), precision)

    # === Scoring ===

    def score(self, x: ArrayLike, y: ArrayLike) -> Score:
        """
        Score the model against observed data.

        Statistics (y2 = predict(x), n observations):
            r    = (nΣ(y2·y) − Σy2·Σy) / sqrt[(nΣy2² − (Σy2)²)(nΣy² − (Σy)²)]
            r2   = r²
            chi2 = Σ (y − y2)² / y over observations with y != 0
            rmsd = ((y_n − y2_n)²)² / n, from the last observation only

        rmsd squares the last squared residual again before dividing by n;
        it is not a true root-mean-square deviation.

        Zero variance in either series yields nan for r and r2 rather than
        raising.

        Raises:
            ValidationError: If x or y is empty or non-numeric
            DimensionMismatchError: If x and y differ in length
        """
        observations = ObservationSet.from_arrays(x, y)
        n = observations.n
        actual = observations.y
        predicted = self.predict(observations.x)

        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            sum_predicted = np.sum(predicted)
            sum_actual = np.sum(actual)
            numerator = n * np.sum(predicted * actual) - sum_predicted * sum_actual
            denominator = np.sqrt(
                (n * np.sum(predicted ** 2) - sum_predicted ** 2)
                * (n * np.sum(actual ** 2) - sum_actual ** 2)
            )
            r = float(numerator / denominator)

            squared = (actual - predicted) ** 2
            nonzero = actual != 0
            chi2 = float(np.sum(squared[nonzero] / actual[nonzero]))
            rmsd = float(squared[-1] ** 2 / n)

        return Score(r, r ** 2, chi2, rmsd)

    # === Serialization ===

    @classmethod
    def qualified_name(cls) -> str:
        """Name tag written to, and required on, serialized records."""
        return f"{cls.__module__}.{cls.__qualname__}"

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to a flat record.

        The equation is derived output and is ignored by from_dict().
        """
        return {
            'name': self.qualified_name(),
            **self._params(),
            'equation': self.equation(),
        }

    @classmethod
    def from_dict(cls: type[M], record: Mapping[str, Any]) -> M:
        """
        Load a model from a record produced by to_dict().

        Raises:
            TypeMismatchError: If the record's name is not this family
            ValidationError: If the record is not a mapping or a parameter
                is missing or non-numeric
        """
        cls.check_same_model(record)
        try:
            return cls._from_params(record)
        except KeyError as e:
            raise ValidationError(
                f"record: missing parameter {e.args[0]!r} for {cls.qualified_name()}"
            ) from e
        except (TypeError, ValueError) as e:
            raise ValidationError(
                f"record: invalid parameter for {cls.qualified_name()}: {e}"
            ) from e

    @classmethod
    def check_same_model(cls, record: Mapping[str, Any]) -> None:
        """
        Verify a record was exported by this family.

        Raises:
            ValidationError: If record is not a mapping
            TypeMismatchError: If record['name'] is missing or differs
        """
        if not isinstance(record, Mapping):
            raise ValidationError(
                f"record: expected a mapping, got {type(record).__name__}"
            )
        expected = cls.qualified_name()
        actual = record.get('name')
        if actual != expected:
            raise TypeMismatchError(
                f"Model is not a {expected} model.",
                expected=expected,
                actual=actual,
            )

    def to_json(self, **kwargs: Any) -> str:
        """Convert to a JSON record. Keyword arguments go to json.dumps."""
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_json(cls: type[M], text: str) -> M:
        """
        Load a model from JSON text produced by to_json().

        Raises:
            ValidationError: If text is not valid JSON
            TypeMismatchError: If the record belongs to another family
        """
        try:
            record = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValidationError(f"json: cannot decode model record: {e}") from e
        return cls.from_dict(record)

    def __str__(self) -> str:
        return self.to_json()

    # === Precision helpers ===

    @staticmethod
    def _to_precision(value: float, precision: int | None = None) -> float:
        """Round to precision decimals, or pass through when precision is None."""
        return value if precision is None else round(value, int(precision))

    @classmethod
    def _precise_string(cls, value: float, precision: int | None = None) -> str:
        """
        Render a value for an equation.

        Integral values drop the trailing '.0'; others use the shortest
        representation that round-trips.
        """
        magnitude = cls._to_precision(abs(value), precision)
        text = np.format_float_positional(magnitude, trim='-')
        return f"-{text}" if value < 0 and magnitude != 0 else text
