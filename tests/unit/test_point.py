# tests/unit/test_point.py

from typing import Tuple

import pytest

from grid_geometry.coordinate_system import (
    ORIGIN_LOWER_LEFT,
    ORIGIN_UPPER_LEFT,
    CoordinateSystem,
)
from grid_geometry.direction import Direction, EightWayDirection, FourWayDirection
from grid_geometry.point import Point, Size, Vector
from grid_geometry.rect import Rect


def test_distance_to_point() -> None:
    assert Point(1, 2).distance_to_point(Point(4, 6)) == Vector(3, 4)
    assert Point(4, 6).distance_to_point(Point(1, 2)) == Vector(-3, -4)


def test_offsets_and_scaling() -> None:
    assert Point(1, 2).offset_by(0.5, -2) == Point(1.5, 0)
    assert Point(1, 2).offset_by_vector(Vector(3, 4)) == Point(4, 6)
    assert Point(1, 2).multiplied_by(2, 0.5) == Point(2, 1)


@pytest.mark.parametrize(
    "direction, coordinate_system, expected",
    [
        (FourWayDirection.RIGHT, ORIGIN_UPPER_LEFT, (10, 0)),
        (FourWayDirection.LEFT, ORIGIN_UPPER_LEFT, (-10, 0)),
        (FourWayDirection.UP, ORIGIN_UPPER_LEFT, (0, -10)),
        (FourWayDirection.DOWN, ORIGIN_UPPER_LEFT, (0, 10)),
        (FourWayDirection.UP, ORIGIN_LOWER_LEFT, (0, 10)),
        (FourWayDirection.DOWN, ORIGIN_LOWER_LEFT, (0, -10)),
        (EightWayDirection.UP_RIGHT, ORIGIN_UPPER_LEFT, (7, -7)),
        (EightWayDirection.UP_RIGHT, ORIGIN_LOWER_LEFT, (7, 7)),
        (EightWayDirection.DOWN_LEFT, ORIGIN_UPPER_LEFT, (-7, 7)),
    ],
)
def test_point_at_distance_integral(
    direction: Direction,
    coordinate_system: CoordinateSystem,
    expected: Tuple[float, float],
) -> None:
    point = Point(0, 0).point_at_distance(10, direction, coordinate_system)
    assert point == Point(*expected)


def test_point_at_distance_fractional_rounds_to_three_decimals() -> None:
    point = Point(1, 1).point_at_distance(
        10, EightWayDirection.RIGHT_DOWN, ORIGIN_UPPER_LEFT, integral=False
    )
    assert point == Point(8.071, 8.071)


def test_point_at_distance_defaults() -> None:
    point = Point(0, 0).point_at_distance(3, FourWayDirection.UP)
    assert point == Point(0, -3)


@pytest.mark.parametrize(
    "point, tile_size, expected",
    [
        ((14, 26), (10, 10), (10, 30)),
        ((15, 25), (10, 10), (20, 30)),  # halves round away from zero
        ((-15, 4), (10, 8), (-20, 8)),
        ((3, 3), (32, 32), (0, 0)),
    ],
)
def test_closest_point_in_grid(
    point: Tuple[float, float],
    tile_size: Tuple[float, float],
    expected: Tuple[float, float],
) -> None:
    assert Point(*point).closest_point_in_grid(Size(*tile_size)) == Point(*expected)


def test_closest_point_in_grid_rejects_empty_tile() -> None:
    with pytest.raises(ValueError):
        Point(1, 1).closest_point_in_grid(Size(0, 10))


def test_rect_constructors() -> None:
    assert Rect() == Rect(Point(0, 0), Size(0, 0))
    assert Rect.from_origin(Point(2, 3)) == Rect(Point(2, 3), Size())
    assert Rect.from_size(Size(4, 5)) == Rect(Point(), Size(4, 5))


def test_rect_bounds_and_mutators() -> None:
    rect = Rect(Point(2, 3), Size(4, 5))
    assert rect.bounds == Rect(Point(0, 0), Size(4, 5))
    assert rect.with_origin(Point(9, 9)) == Rect(Point(9, 9), Size(4, 5))
    assert rect.with_size(Size(1, 1)) == Rect(Point(2, 3), Size(1, 1))
    assert rect == Rect(Point(2, 3), Size(4, 5))


def test_point_at_distance_far_from_origin() -> None:
    point = Point(1e306, 0.0).point_at_distance(
        1, FourWayDirection.UP, ORIGIN_UPPER_LEFT, integral=False
    )
    assert point == Point(1e306, -1.0)


@pytest.mark.parametrize(
    "point, tile_size, expected",
    [
        ((1.5e308, 0), (0.5, 1), (1.5e308, 0)),
        ((-1.5e308, 3), (0.25, 2), (-1.5e308, 4)),
    ],
)
def test_closest_point_in_grid_with_huge_coordinates(
    point: Tuple[float, float],
    tile_size: Tuple[float, float],
    expected: Tuple[float, float],
) -> None:
    assert Point(*point).closest_point_in_grid(Size(*tile_size)) == Point(*expected)
