"""Small numeric helpers shared across packages."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 rounding away from zero.

    Python's built-in round() uses banker's rounding, which would turn a
    mean of 62.5 into 62.
    """
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value to the closed interval [lower, upper]."""
    return max(lower, min(upper, value))
