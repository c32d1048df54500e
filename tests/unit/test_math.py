# tests/unit/test_math.py

import math

import pytest

from grid_geometry.utils.math import rounded_value


@pytest.mark.parametrize(
    "value, decimal_count, expected",
    [
        (2.5, 0, 3.0),
        (-2.5, 0, -3.0),
        (0.5, 0, 1.0),
        (2.4, 0, 2.0),
        (1.23456, 3, 1.235),
        (-1.23449, 3, -1.234),
        (7.0, 3, 7.0),
        # largest double below one half must not be pushed over it
        (0.49999999999999994, 0, 0.0),
        (-0.49999999999999994, 0, -0.0),
        # already integral at this magnitude; scaling would overflow
        (1e306, 3, 1e306),
        (-1.5e308, 0, -1.5e308),
        (2.0**53 + 2, 0, 2.0**53 + 2),
    ],
)
def test_rounded_value(value: float, decimal_count: int, expected: float) -> None:
    assert rounded_value(value, decimal_count) == pytest.approx(expected)


@pytest.mark.parametrize("value", [math.inf, -math.inf])
def test_rounded_value_passes_infinities_through(value: float) -> None:
    assert rounded_value(value, 3) == value


def test_rounded_value_passes_nan_through() -> None:
    assert math.isnan(rounded_value(math.nan, 0))


def test_rounded_value_keeps_sign_of_small_negatives() -> None:
    assert math.copysign(1.0, rounded_value(-1e-16, 0)) == -1.0


def test_rounded_value_rejects_negative_decimals() -> None:
    with pytest.raises(ValueError):
        rounded_value(1.0, -1)
