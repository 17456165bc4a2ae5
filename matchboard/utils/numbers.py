"""Numeric helpers shared across contexts."""

import math
from typing import Iterable


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero.

    Unlike round(), which rounds ties to even (round(60.5) == 60).
    All user-facing integers go through this function.

    Examples:
        >>> round_half_up(60.5)
        61
        >>> round_half_up(-2.5)
        -3
    """
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean; 0.0 for an empty iterable."""
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return min(max(value, low), high)
