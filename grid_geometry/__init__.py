"""Grid geometry value types.

Immutable positions, compass directions, coordinate systems and float
point / rect helpers for board and tile game logic. Every operation is a
pure function returning new values; nothing here performs I/O or holds
shared state.

Typical use::

    from grid_geometry import Position2D, EightWayDirection, ORIGIN_LOWER_LEFT

    start = Position2D(5, 5)
    start.position_in_direction(EightWayDirection.UP_RIGHT, ORIGIN_LOWER_LEFT)
    start.positions_within_radius(2, include_self=True)
"""

from .coordinate_system import (
    COORDINATE_SYSTEM_REGISTRY,
    ORIGIN_LOWER_LEFT,
    ORIGIN_UPPER_LEFT,
    CoordinateSystem,
    coordinate_system_from_name,
)
from .direction import (
    EIGHT_WAY_DIRECTIONS,
    FOUR_WAY_DIRECTIONS,
    Direction,
    EightWayDirection,
    FourWayDirection,
)
from .keys import (
    position_2d_from_key,
    position_3d_from_key,
    position_map_from_keys,
    position_map_to_keys,
)
from .point import Point, Size, Vector
from .position import AnyPosition, Position2D, Position3D
from .rect import Rect
from .types import Number, NumberType

__all__ = [
    "AnyPosition",
    "COORDINATE_SYSTEM_REGISTRY",
    "CoordinateSystem",
    "Direction",
    "EIGHT_WAY_DIRECTIONS",
    "EightWayDirection",
    "FOUR_WAY_DIRECTIONS",
    "FourWayDirection",
    "Number",
    "NumberType",
    "ORIGIN_LOWER_LEFT",
    "ORIGIN_UPPER_LEFT",
    "Point",
    "Position2D",
    "Position3D",
    "Rect",
    "Size",
    "Vector",
    "coordinate_system_from_name",
    "position_2d_from_key",
    "position_3d_from_key",
    "position_map_from_keys",
    "position_map_to_keys",
]
