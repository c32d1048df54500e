"""Compass direction enumerations.

Two closed sets are provided: :class:`FourWayDirection` (cardinals) and
:class:`EightWayDirection` (cardinals plus diagonals). Members are declared in
clockwise order starting at ``UP`` so that ``radian_value`` can be derived
from the member index: 0 is Up, and every following member adds one step of
``2π / n``.

``FOUR_WAY_DIRECTIONS`` / ``EIGHT_WAY_DIRECTIONS`` are the canonical ordered
lists; prefer ``direction in FOUR_WAY_DIRECTIONS`` over name comparisons.
"""

import math
from enum import StrEnum, auto
from typing import Dict, List, Tuple, Union


class FourWayDirection(StrEnum):
    """Cardinal directions, clockwise from ``UP``."""

    UP = auto()
    RIGHT = auto()
    DOWN = auto()
    LEFT = auto()

    @property
    def radian_value(self) -> float:
        """Angle in radians, clockwise from Up (multiples of π/2)."""
        return FOUR_WAY_DIRECTIONS.index(self) * (math.pi / 2)

    @property
    def is_diagonal(self) -> bool:
        return False

    def opposite(self) -> "FourWayDirection":
        return _FOUR_WAY_OPPOSITES[self]

    def to_four_way(self) -> "FourWayDirection":
        return self

    def to_eight_way(self) -> "EightWayDirection":
        return EightWayDirection(self.value)


class EightWayDirection(StrEnum):
    """Cardinal and diagonal directions, clockwise from ``UP``."""

    UP = auto()
    UP_RIGHT = auto()
    RIGHT = auto()
    RIGHT_DOWN = auto()
    DOWN = auto()
    DOWN_LEFT = auto()
    LEFT = auto()
    LEFT_UP = auto()

    @property
    def radian_value(self) -> float:
        """Angle in radians, clockwise from Up (multiples of π/4)."""
        return EIGHT_WAY_DIRECTIONS.index(self) * (math.pi / 4)

    @property
    def is_diagonal(self) -> bool:
        return self in _DIAGONAL_STEPS

    def opposite(self) -> "EightWayDirection":
        return _EIGHT_WAY_OPPOSITES[self]

    def to_four_way(self) -> FourWayDirection:
        """Return the cardinal with the same name.

        Diagonals have no single cardinal counterpart; they are only ever
        decomposed into two steps (see :meth:`diagonal_steps`).

        Raises:
            ValueError: If called on a diagonal.
        """
        if self.is_diagonal:
            raise ValueError(f"Diagonal direction {self} has no four-way equivalent")
        return FourWayDirection(self.value)

    def to_eight_way(self) -> "EightWayDirection":
        return self

    def diagonal_steps(self) -> Tuple[FourWayDirection, FourWayDirection]:
        """Return the two cardinal unit steps a diagonal is composed of, in order.

        Raises:
            ValueError: If called on a cardinal.
        """
        try:
            return _DIAGONAL_STEPS[self]
        except KeyError:
            raise ValueError(f"Direction {self} is not a diagonal") from None


Direction = Union[FourWayDirection, EightWayDirection]

FOUR_WAY_DIRECTIONS: List[FourWayDirection] = list(FourWayDirection)
EIGHT_WAY_DIRECTIONS: List[EightWayDirection] = list(EightWayDirection)

_FOUR_WAY_OPPOSITES: Dict[FourWayDirection, FourWayDirection] = {
    FourWayDirection.UP: FourWayDirection.DOWN,
    FourWayDirection.RIGHT: FourWayDirection.LEFT,
    FourWayDirection.DOWN: FourWayDirection.UP,
    FourWayDirection.LEFT: FourWayDirection.RIGHT,
}

_EIGHT_WAY_OPPOSITES: Dict[EightWayDirection, EightWayDirection] = {
    EightWayDirection.UP: EightWayDirection.DOWN,
    EightWayDirection.UP_RIGHT: EightWayDirection.DOWN_LEFT,
    EightWayDirection.RIGHT: EightWayDirection.LEFT,
    EightWayDirection.RIGHT_DOWN: EightWayDirection.LEFT_UP,
    EightWayDirection.DOWN: EightWayDirection.UP,
    EightWayDirection.DOWN_LEFT: EightWayDirection.UP_RIGHT,
    EightWayDirection.LEFT: EightWayDirection.RIGHT,
    EightWayDirection.LEFT_UP: EightWayDirection.RIGHT_DOWN,
}

# Step order matters: UP_RIGHT is Up then Right, RIGHT_DOWN is Right then Down.
_DIAGONAL_STEPS: Dict[EightWayDirection, Tuple[FourWayDirection, FourWayDirection]] = {
    EightWayDirection.UP_RIGHT: (FourWayDirection.UP, FourWayDirection.RIGHT),
    EightWayDirection.RIGHT_DOWN: (FourWayDirection.RIGHT, FourWayDirection.DOWN),
    EightWayDirection.DOWN_LEFT: (FourWayDirection.DOWN, FourWayDirection.LEFT),
    EightWayDirection.LEFT_UP: (FourWayDirection.LEFT, FourWayDirection.UP),
}
