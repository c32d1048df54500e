"""Position key codec for string-keyed mappings.

JSON objects (level files, save games, network payloads) can only be keyed
by strings, so maps of positions travel as ``{"x:y": value}``. This module
converts such mappings to persistent maps keyed by :class:`Position2D` /
:class:`Position3D` and back.

Decoding is lenient: entries whose key does not parse are dropped (logged at
DEBUG) rather than failing the whole payload.
"""

import logging
from typing import Callable, Dict, Mapping, Optional, TypeVar

from pyrsistent import pmap
from pyrsistent.typing import PMap

from grid_geometry.position import AnyPosition, Position2D, Position3D
from grid_geometry.types import NumberType


logger = logging.getLogger(__name__)

V = TypeVar("V")

KeyParser = Callable[[str, NumberType], Optional[AnyPosition]]


def position_2d_from_key(key: str, number_type: NumberType = int) -> Optional[Position2D]:
    return Position2D.from_key(key, number_type)


def position_3d_from_key(key: str, number_type: NumberType = int) -> Optional[Position3D]:
    return Position3D.from_key(key, number_type)


KEY_PARSER_REGISTRY: Dict[int, KeyParser] = {
    2: position_2d_from_key,
    3: position_3d_from_key,
}
"""Key parsers indexed by number of dimensions."""


def position_map_from_keys(
    raw: Mapping[str, V], number_type: NumberType = int, dimensions: int = 2
) -> PMap[AnyPosition, V]:
    """Decode a string-keyed mapping into a position-keyed persistent map.

    Args:
        raw: Mapping keyed by ``"x:y"`` (or ``"x:y:z"``) strings.
        number_type: Coordinate type (``int`` or ``float``).
        dimensions: 2 or 3.

    Returns:
        PMap[AnyPosition, V]: Every entry whose key parsed; the rest are dropped.

    Raises:
        ValueError: If ``dimensions`` is not 2 or 3.
    """
    parser = KEY_PARSER_REGISTRY.get(dimensions)
    if parser is None:
        raise ValueError(f"Unsupported position dimensions: {dimensions}")

    decoded: Dict[AnyPosition, V] = {}
    for key, value in raw.items():
        position = parser(key, number_type)
        if position is None:
            logger.debug("Dropping undecodable %dD position key %r", dimensions, key)
            continue
        decoded[position] = value
    return pmap(decoded)


def position_map_to_keys(mapping: Mapping[AnyPosition, V]) -> Dict[str, V]:
    """Encode a position-keyed mapping with string keys (JSON friendly)."""
    return {position.key: value for position, value in mapping.items()}
