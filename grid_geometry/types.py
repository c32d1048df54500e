"""Common type aliases.

``Number`` is the constrained generic every position type is parameterized
over. Concrete coordinates are either ``int`` (grid cells) or ``float``
(sub-cell / screen space). Arithmetic follows plain Python semantics; only
radius enumeration, which scans on integers, casts its results back through
the class of the centre's coordinates.
"""

from typing import Type, TypeVar, Union


Number = TypeVar("Number", int, float)

NumberType = Type[Union[int, float]]
"""Class used to parse a coordinate from its key text (``int`` or ``float``)."""
