"""Generic grid positions.

:class:`Position2D` and :class:`Position3D` are immutable coordinates
parameterized over :data:`grid_geometry.types.Number` (``int`` or ``float``).
Equality and hashing are structural over the coordinate fields, so positions
are safe to use as set members and mapping keys (e.g. in a ``PMap``).

Key form: each position renders to a colon separated key (``"x:y"`` or
``"x:y:z"``) via ``str()`` of every coordinate; ``from_key`` parses it back
and returns ``None`` instead of raising on malformed text.

Radius enumeration walks a taxicab diamond cell by cell. It is meant for
small boards; for very large radii a spatial index would be the better tool.
"""

from dataclasses import dataclass
from typing import Callable, Container, Generic, Iterator, Optional, Tuple, Union

from pyrsistent import pset, pvector
from pyrsistent.typing import PVector

from grid_geometry.coordinate_system import ORIGIN_UPPER_LEFT, CoordinateSystem
from grid_geometry.direction import Direction, FourWayDirection
from grid_geometry.point import Point
from grid_geometry.types import Number, NumberType


KEY_SEPARATOR = ":"


def _parse_key(
    key: str, part_count: int, number_type: NumberType
) -> Optional[Tuple[Union[int, float], ...]]:
    """Split ``key`` into exactly ``part_count`` coordinates of ``number_type``."""
    parts = key.split(KEY_SEPARATOR)
    if len(parts) != part_count:
        return None
    # int()/float() tolerate padding, digit separators and non-ASCII digits;
    # rendered keys never contain them
    if any(not part.isascii() or part != part.strip() or "_" in part for part in parts):
        return None
    try:
        return tuple(number_type(part) for part in parts)
    except ValueError:
        return None


@dataclass(frozen=True)
class Position2D(Generic[Number]):
    """Two-dimensional coordinate.

    Attributes:
        x: Column (grows to the right).
        y: Row; whether it grows up or down is decided by the
            :class:`CoordinateSystem` handed to direction-aware methods.
    """

    x: Number = 0
    y: Number = 0

    def __str__(self) -> str:
        return self.key

    @property
    def key(self) -> str:
        """Serialized ``"x:y"`` form, usable as a string mapping key."""
        return f"{self.x}{KEY_SEPARATOR}{self.y}"

    @classmethod
    def from_key(
        cls, key: str, number_type: NumberType = int
    ) -> Optional["Position2D[Number]"]:
        """Parse an ``"x:y"`` key.

        Returns:
            Optional[Position2D]: ``None`` if ``key`` does not split into
            exactly two parts or a part does not parse as ``number_type``.
        """
        coordinates = _parse_key(key, 2, number_type)
        if coordinates is None:
            return None
        x, y = coordinates
        return cls(x, y)  # type: ignore[arg-type]

    def offset_by(self, dx: Number, dy: Number) -> "Position2D[Number]":
        """Return a new position shifted by ``(dx, dy)``."""
        return Position2D(self.x + dx, self.y + dy)

    def position_in_direction(
        self,
        direction: Direction,
        coordinate_system: CoordinateSystem = ORIGIN_UPPER_LEFT,
    ) -> "Position2D[Number]":
        """Return the position one unit away in ``direction``.

        ``UP`` and ``DOWN`` always move visually up / down: the sign of the
        vertical step follows ``coordinate_system``. Diagonals are two
        successive cardinal steps (``UP_RIGHT`` is Up then Right), so integer
        positions land on exactly the cell two orthogonal moves would reach.
        """
        eight_way = direction.to_eight_way()
        if eight_way.is_diagonal:
            first, second = eight_way.diagonal_steps()
            return self.position_in_direction(
                first, coordinate_system
            ).position_in_direction(second, coordinate_system)

        up = coordinate_system.vertical_sign_for_up
        dx, dy = {
            FourWayDirection.UP: (0, up),
            FourWayDirection.RIGHT: (1, 0),
            FourWayDirection.DOWN: (0, -up),
            FourWayDirection.LEFT: (-1, 0),
        }[eight_way.to_four_way()]
        return self.offset_by(dx, dy)

    def iter_positions_within_radius(
        self,
        radius: int,
        ignored_positions: Container["Position2D[Number]"] = pset(),
        include_self: bool = False,
    ) -> Iterator["Position2D[Number]"]:
        """Lazily yield every position within taxicab ``radius``.

        Coordinates are truncated to ``int`` for the scan and cast back to
        this position's numeric type. Order: increasing x, then increasing y
        within each column. A negative radius yields nothing.

        Args:
            radius: Maximum ``|dx| + |dy|``.
            ignored_positions: Positions to skip (any container supporting ``in``).
            include_self: Also yield this position.
        """
        cast = type(self.x)
        self_x = int(self.x)
        self_y = int(self.y)

        for x in range(self_x - radius, self_x + radius + 1):
            band = radius - abs(self_x - x)
            for delta_y in range(-band, band + 1):
                position: Position2D[Number] = Position2D(
                    cast(x), cast(self_y + delta_y)
                )
                if not include_self and position == self:
                    continue
                if position in ignored_positions:
                    continue
                yield position

    def positions_within_radius(
        self,
        radius: int,
        ignored_positions: Container["Position2D[Number]"] = pset(),
        include_self: bool = False,
    ) -> PVector["Position2D[Number]"]:
        """Collect :meth:`iter_positions_within_radius` into a persistent vector."""
        return pvector(
            self.iter_positions_within_radius(radius, ignored_positions, include_self)
        )

    def for_each_position_within_radius(
        self,
        radius: int,
        callback: Callable[["Position2D[Number]"], None],
        ignored_positions: Container["Position2D[Number]"] = pset(),
        include_self: bool = False,
    ) -> None:
        """Invoke ``callback`` on each position within ``radius``, in scan order."""
        for position in self.iter_positions_within_radius(
            radius, ignored_positions, include_self
        ):
            callback(position)

    def direction_to_position(
        self,
        position: "Position2D[Number]",
        coordinate_system: CoordinateSystem = ORIGIN_UPPER_LEFT,
    ) -> Optional[FourWayDirection]:
        """Return the cardinal direction ``position`` lies in, seen from here.

        The dominant axis wins; when the horizontal and vertical distances tie
        the vertical axis wins. Returns ``None`` for the same position.
        """
        if self == position:
            return None

        dx = position.x - self.x
        dy = position.y - self.y
        if abs(dx) > abs(dy):
            return FourWayDirection.RIGHT if dx > 0 else FourWayDirection.LEFT

        incremental = coordinate_system.incremental_vertical_direction
        return incremental if dy > 0 else incremental.opposite()

    def to_point(self) -> Point:
        return Point(float(self.x), float(self.y))

    def to_point_with_ratio(self, ratio: float) -> Point:
        """Convert to a :class:`Point`, scaling both coordinates by ``ratio``."""
        return Point(float(self.x) * ratio, float(self.y) * ratio)


@dataclass(frozen=True)
class Position3D(Generic[Number]):
    """Three-dimensional coordinate (e.g. a stacked board layer in ``z``)."""

    x: Number = 0
    y: Number = 0
    z: Number = 0

    def __str__(self) -> str:
        return self.key

    @property
    def key(self) -> str:
        """Serialized ``"x:y:z"`` form."""
        return KEY_SEPARATOR.join(str(value) for value in (self.x, self.y, self.z))

    @classmethod
    def from_key(
        cls, key: str, number_type: NumberType = int
    ) -> Optional["Position3D[Number]"]:
        """Parse an ``"x:y:z"`` key; ``None`` unless there are exactly three valid parts."""
        coordinates = _parse_key(key, 3, number_type)
        if coordinates is None:
            return None
        x, y, z = coordinates
        return cls(x, y, z)  # type: ignore[arg-type]

    def offset_by(self, dx: Number, dy: Number, dz: Number) -> "Position3D[Number]":
        return Position3D(self.x + dx, self.y + dy, self.z + dz)

    def to_position_2d(self) -> Position2D[Number]:
        """Drop the ``z`` coordinate."""
        return Position2D(self.x, self.y)


AnyPosition = Union[Position2D, Position3D]
