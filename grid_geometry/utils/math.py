"""Rounding helpers shared by the point types."""

import math
from decimal import ROUND_HALF_UP, Decimal


# Doubles at or beyond this magnitude carry no fractional part
_INTEGRAL_MAGNITUDE = 2.0**52


def rounded_value(value: float, decimal_count: int) -> float:
    """Round ``value`` to ``decimal_count`` decimals, halves away from zero.

    Unlike the builtin :func:`round` (banker's rounding) ``2.5`` rounds to
    ``3.0`` and ``-2.5`` to ``-3.0``. Rounding works on the exact binary value,
    so ``0.49999999999999994`` stays below the half and rounds to ``0.0``.
    Non-finite values and values already too large to hold the requested
    decimals are returned unchanged.
    """
    if decimal_count < 0:
        raise ValueError(f"decimal_count must be non-negative, got {decimal_count}")
    if not math.isfinite(value) or abs(value) * 10**decimal_count >= _INTEGRAL_MAGNITUDE:
        return value
    quantum = Decimal(1).scaleb(-decimal_count)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
