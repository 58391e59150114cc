"""
Tests for SimpleLinear.

Validates fitting, forward and inverse prediction, equation rendering,
scoring against reference values and the record/JSON round trip.
"""

import json
from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from pycurvefit.core.exceptions import DimensionMismatchError, TypeMismatchError
from pycurvefit.regression.linear import SimpleLinear


class TestFit:
    """Closed-form least squares fit."""

    def test_returns_new_instance(self, small_line_data):
        x, y = small_line_data
        model = SimpleLinear.fit(x, y)
        assert isinstance(model, SimpleLinear)

    def test_small_line(self, small_line_data):
        x, y = small_line_data
        model = SimpleLinear.fit(x, y)
        assert round(model.slope, 2) == -0.26
        assert round(model.intercept, 1) == 50.6
        assert model.coefficients(0) == [round(model.intercept), round(model.slope)]
        assert model.equation(2) == 'f(x) = -0.26x + 50.59'

    def test_integer_line_is_exact(self, integer_line_data):
        x, y = integer_line_data
        model = SimpleLinear.fit(x, y)
        assert model.slope == -2.0
        assert model.intercept == 10.0
        assert model.equation(0) == 'f(x) = -2x + 10'

    def test_height_weight_parameters(self, height_weight_data):
        x, y = height_weight_data
        model = SimpleLinear.fit(x, y)
        assert round(model.slope, 3) == 61.272
        assert round(model.intercept, 3) == -39.062

    def test_numpy_input(self, integer_line_data):
        x, y = integer_line_data
        model = SimpleLinear.fit(np.array(x), np.array(y, dtype=np.int32))
        assert model == SimpleLinear(slope=-2.0, intercept=10.0)

    def test_length_mismatch(self):
        with pytest.raises(DimensionMismatchError, match="x=3, y=2"):
            SimpleLinear.fit([0, 1, 2], [0, 1])

    def test_identical_x_warns(self):
        with pytest.warns(RuntimeWarning, match="identical"):
            model = SimpleLinear.fit([2, 2, 2], [1, 2, 3])
        assert np.isnan(model.slope)

    def test_model_is_frozen(self):
        model = SimpleLinear(slope=1, intercept=0)
        with pytest.raises(FrozenInstanceError):
            model.slope = 2.0

    def test_constructor_coerces_to_float(self):
        model = SimpleLinear(1, 2)
        assert isinstance(model.slope, float)
        assert isinstance(model.intercept, float)


class TestPrediction:
    """get_y, get_x and predict agree with the fitted line."""

    def test_get_y(self, integer_line_data):
        model = SimpleLinear.fit(*integer_line_data)
        assert model.get_y(0) == model.intercept
        assert model.get_y(6) == -2.0
        assert model.get_y(-1) == 12.0
        assert model.get_y(2.5) == 5.0

    def test_get_x(self, integer_line_data):
        model = SimpleLinear.fit(*integer_line_data)
        assert model.get_x(5) == 2.5
        assert model.get_x(9) == 0.5
        assert model.get_x(-12) == 11.0

    def test_predict_matches_get_y(self, height_weight_data):
        x, y = height_weight_data
        model = SimpleLinear.fit(x, y)
        for value in x:
            assert model.get_y(value) == model.predict([value])[0]
        np.testing.assert_array_equal(model.predict(x), [model.get_y(v) for v in x])

    def test_inverse_of_forward(self, small_line_data):
        model = SimpleLinear.fit(*small_line_data)
        assert model.predict(85)[0] == model.get_y(85)
        assert model.get_y(85, 0) == 28.0
        assert model.get_x(model.get_y(85), 0) == 85.0

    def test_get_x_with_zero_slope(self):
        model = SimpleLinear(slope=0, intercept=2)
        assert model.get_x(4) == np.inf
        assert model.get_x(0) == -np.inf
        assert np.isnan(model.get_x(2))


class TestEquation:
    """Equation rendering rules."""

    def test_constant_function(self):
        model = SimpleLinear.fit([0, 1, 2, 3], [2, 2, 2, 2])
        assert model.slope == 0.0
        assert model.intercept == 2.0
        assert model.equation(2) == 'f(x) = 2'

    def test_negative_intercept_and_unit_slope(self):
        model = SimpleLinear.fit([-1, 0, 1], [-2, -1, 0])
        assert model.equation() == 'f(x) = x - 1'

    def test_zero_intercept_omitted(self):
        assert SimpleLinear(slope=3, intercept=0).equation() == 'f(x) = 3x'

    def test_negative_unit_slope(self):
        assert SimpleLinear(slope=-1, intercept=4).equation() == 'f(x) = -x + 4'

    def test_slope_rounding_to_one(self):
        assert SimpleLinear(slope=0.999, intercept=0.5).equation(2) == 'f(x) = x + 0.5'

    def test_full_precision(self):
        assert SimpleLinear(slope=0.25, intercept=-1.125).equation() == 'f(x) = 0.25x - 1.125'

    def test_negative_constant(self):
        assert SimpleLinear(slope=0, intercept=-3.5).equation() == 'f(x) = -3.5'


class TestScore:
    """Goodness of fit against reference values."""

    def test_height_weight(self, height_weight_data):
        x, y = height_weight_data
        score = SimpleLinear.fit(x, y).score(x, y)
        assert score.r(3) == 0.995
        assert score.r2(3) == 0.989
        assert score.r2() == score.r() ** 2
        assert score.chi2(3) == 0.118
        assert score.rmsd(3) == 0.252

    def test_perfect_fit(self, integer_line_data):
        x, y = integer_line_data
        score = SimpleLinear.fit(x, y).score(x, y)
        assert score.r() == 1.0
        assert score.r2() == 1.0
        assert score.chi2() == 0.0
        assert score.rmsd() == 0.0


class TestSerialization:
    """Record and JSON export/import."""

    def test_json_format(self):
        model = SimpleLinear(1, 1)
        record = json.loads(model.to_json())
        assert list(record) == ['name', 'slope', 'intercept', 'coefficients', 'equation']
        assert record['name'] == 'pycurvefit.regression.linear.SimpleLinear'
        assert record['slope'] == 1
        assert record['intercept'] == 1
        assert record['coefficients'] == [record['intercept'], record['slope']]
        assert record['equation'] == 'f(x) = x + 1'

    def test_load_from_export(self):
        model = SimpleLinear.from_json(SimpleLinear(1, 1).to_json())
        assert model.slope == 1.0
        assert model.intercept == 1.0
        assert model.equation(2) == 'f(x) = x + 1'

    def test_record_round_trip(self, height_weight_data):
        model = SimpleLinear.fit(*height_weight_data)
        record = model.to_dict()
        assert SimpleLinear.from_dict(record).to_dict() == record
        assert SimpleLinear.from_json(model.to_json()) == model

    def test_invalid_load_raises(self):
        with pytest.raises(
            TypeMismatchError,
            match="Model is not a pycurvefit.regression.linear.SimpleLinear model.",
        ):
            SimpleLinear.from_dict({'name': 'Foo.Bar', 'slope': 1, 'intercept': 1})
