"""Floating point geometry: points, vectors and sizes.

These types work in continuous (screen / scene) space, independent of the
generic grid positions in :mod:`grid_geometry.position`. They carry no unit;
callers decide whether a value means pixels, points or tiles.
"""

import math
from dataclasses import dataclass

from grid_geometry.coordinate_system import ORIGIN_UPPER_LEFT, CoordinateSystem
from grid_geometry.direction import Direction, FourWayDirection
from grid_geometry.utils.math import rounded_value


@dataclass(frozen=True)
class Vector:
    """Displacement between two points."""

    dx: float = 0.0
    dy: float = 0.0


@dataclass(frozen=True)
class Size:
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Point:
    """Point in continuous 2D space.

    Attributes:
        x: Horizontal coordinate (grows to the right).
        y: Vertical coordinate; its visual sense depends on the
            :class:`CoordinateSystem` passed to direction-aware helpers.
    """

    x: float = 0.0
    y: float = 0.0

    def distance_to_point(self, point: "Point") -> Vector:
        """Return the vector leading from this point to ``point``."""
        return Vector(point.x - self.x, point.y - self.y)

    def offset_by(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def offset_by_vector(self, vector: Vector) -> "Point":
        return Point(self.x + vector.dx, self.y + vector.dy)

    def multiplied_by(self, sx: float, sy: float) -> "Point":
        """Scale each coordinate by its own factor."""
        return Point(self.x * sx, self.y * sy)

    def point_at_distance(
        self,
        distance: float,
        direction: Direction,
        coordinate_system: CoordinateSystem = ORIGIN_UPPER_LEFT,
        integral: bool = True,
    ) -> "Point":
        """Move ``distance`` units along ``direction``.

        The horizontal component is ``distance * sin(θ)`` and the vertical one
        ``distance * cos(θ)``, negated when incrementing the vertical
        coordinate moves down on screen. Results are rounded to whole numbers
        when ``integral`` is set, otherwise to 3 decimals.

        Args:
            distance: Length of the move.
            direction: Four- or eight-way direction; its ``radian_value`` is used.
            coordinate_system: Vertical axis orientation.
            integral: Round to 0 decimals instead of 3.

        Returns:
            Point: The destination.
        """
        radians = direction.radian_value
        vertical_distance = distance * math.cos(radians)
        if coordinate_system.incremental_vertical_direction == FourWayDirection.DOWN:
            vertical_distance = -vertical_distance

        decimal_count = 0 if integral else 3
        return Point(
            rounded_value(self.x + distance * math.sin(radians), decimal_count),
            rounded_value(self.y + vertical_distance, decimal_count),
        )

    def closest_point_in_grid(self, tile_size: Size) -> "Point":
        """Snap to the nearest tile corner of a grid anchored at (0, 0).

        Raises:
            ValueError: If either tile dimension is zero.
        """
        if tile_size.width == 0 or tile_size.height == 0:
            raise ValueError(f"Tile size must be non-zero, got {tile_size}")
        return Point(
            _snap_to_multiple(self.x, tile_size.width),
            _snap_to_multiple(self.y, tile_size.height),
        )


def _snap_to_multiple(value: float, step: float) -> float:
    tiles = value / step
    # Overflowing quotient: value is far beyond the grid's resolution
    if not math.isfinite(tiles):
        return value
    return rounded_value(tiles, 0) * step
