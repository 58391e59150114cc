"""
pytest configuration and shared fixtures.
"""

import pytest


@pytest.fixture
def integer_line_data():
    """Exact line y = -2x + 10, including a zero actual."""
    x = [0, 1, 2, 3, 4, 5]
    y = [10, 8, 6, 4, 2, 0]
    return x, y


@pytest.fixture
def small_line_data():
    """Five noisy points with a shallow negative slope."""
    x = [80, 60, 10, 20, 30]
    y = [20, 40, 30, 50, 60]
    return x, y


@pytest.fixture
def height_weight_data():
    """
    Height (m) vs weight (kg) of 15 women.

    https://en.wikipedia.org/wiki/Simple_linear_regression#Numerical_example
    """
    x = [1.47, 1.50, 1.52, 1.55, 1.57, 1.60, 1.63, 1.65, 1.68, 1.70, 1.73, 1.75, 1.78, 1.80, 1.83]
    y = [52.21, 53.12, 54.48, 55.84, 57.20, 58.57, 59.93, 61.29, 63.11, 64.47, 66.28, 68.10, 69.92, 72.19, 74.46]
    return x, y


@pytest.fixture
def power_law_data():
    """Eleven points following y ≈ 24.13·x^0.66."""
    x = [17.6, 26, 31.9, 38.9, 45.8, 51.2, 58.1, 64.7, 66.7, 80.8, 82.9]
    y = [159.9, 206.9, 236.8, 269.9, 300.6, 323.6, 351.7, 377.6, 384.1, 437.2, 444.7]
    return x, y
