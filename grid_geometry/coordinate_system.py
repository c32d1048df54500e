"""Coordinate system configuration.

A :class:`CoordinateSystem` states whether incrementing the vertical
coordinate moves a value visually up or down on screen. Movement and
distance helpers consult it to pick the sign of vertical offsets; the
horizontal axis always grows to the right.

Two presets cover every common case:

* ``ORIGIN_UPPER_LEFT``: screen / raster space (y grows downward). This is
  the default everywhere.
* ``ORIGIN_LOWER_LEFT``: mathematical / scene space (y grows upward).
"""

import logging
from dataclasses import dataclass
from typing import Dict

from grid_geometry.direction import FourWayDirection


logger = logging.getLogger(__name__)

VERTICAL_DIRECTIONS = (FourWayDirection.UP, FourWayDirection.DOWN)


@dataclass(frozen=True)
class CoordinateSystem:
    """Vertical axis orientation.

    Attributes:
        incremental_vertical_direction: Direction (``UP`` or ``DOWN``) a value
            visually moves when its vertical coordinate is incremented.
    """

    incremental_vertical_direction: FourWayDirection

    def __post_init__(self) -> None:
        direction = self.incremental_vertical_direction
        # StrEnum members compare equal by value, so check the type explicitly
        if not isinstance(direction, FourWayDirection) or direction not in VERTICAL_DIRECTIONS:
            raise ValueError(
                "incremental_vertical_direction must be FourWayDirection.UP or "
                f"FourWayDirection.DOWN, got {direction!r}"
            )

    @property
    def vertical_sign_for_up(self) -> int:
        """Vertical delta (+1 or -1) of a single visual step upward."""
        return 1 if self.incremental_vertical_direction == FourWayDirection.UP else -1


ORIGIN_UPPER_LEFT = CoordinateSystem(FourWayDirection.DOWN)
ORIGIN_LOWER_LEFT = CoordinateSystem(FourWayDirection.UP)


COORDINATE_SYSTEM_REGISTRY: Dict[str, CoordinateSystem] = {
    "origin_upper_left": ORIGIN_UPPER_LEFT,
    "origin_lower_left": ORIGIN_LOWER_LEFT,
}
"""Registry of preset names to coordinate systems.

Lets level files or app settings refer to a preset by name.
"""


def coordinate_system_from_name(name: str) -> CoordinateSystem:
    """Look up a preset in :data:`COORDINATE_SYSTEM_REGISTRY`.

    Raises:
        ValueError: If ``name`` is not a registered preset.
    """
    try:
        coordinate_system = COORDINATE_SYSTEM_REGISTRY[name]
    except KeyError:
        raise ValueError(
            f"Unknown coordinate system: {name!r} "
            f"(expected one of {sorted(COORDINATE_SYSTEM_REGISTRY)})"
        ) from None
    logger.debug("Resolved coordinate system %r -> %s", name, coordinate_system)
    return coordinate_system
