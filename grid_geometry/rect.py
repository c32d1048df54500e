"""Axis-aligned rectangle built from a :class:`Point` origin and a :class:`Size`."""

from dataclasses import dataclass, field, replace

from grid_geometry.point import Point, Size


@dataclass(frozen=True)
class Rect:
    """Rectangle value.

    Attributes:
        origin: Corner the rectangle extends from.
        size: Width and height.
    """

    origin: Point = field(default_factory=Point)
    size: Size = field(default_factory=Size)

    @classmethod
    def from_origin(cls, origin: Point) -> "Rect":
        """Zero-sized rectangle at ``origin``."""
        return cls(origin=origin)

    @classmethod
    def from_size(cls, size: Size) -> "Rect":
        """Rectangle of ``size`` anchored at (0, 0)."""
        return cls(size=size)

    @property
    def bounds(self) -> "Rect":
        """The rectangle with its origin stripped."""
        return replace(self, origin=Point())

    def with_origin(self, origin: Point) -> "Rect":
        return replace(self, origin=origin)

    def with_size(self, size: Size) -> "Rect":
        return replace(self, size=size)
