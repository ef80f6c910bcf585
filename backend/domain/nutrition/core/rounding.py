"""Rounding helpers shared by the nutrition calculations."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity.

    Python's built-in ``round`` uses banker's rounding (``round(0.5) == 0``);
    stored targets follow the half-up convention instead.

    Example:
        >>> round_half_up(294.5)
        295
        >>> round_half_up(66.666)
        67
    """
    return int(math.floor(value + 0.5))


def round_to_nearest(value: float, step: int) -> int:
    """Round value to the nearest multiple of ``step`` (half-up).

    Example:
        >>> round_to_nearest(2378.25, 10)
        2380
    """
    return round_half_up(value / step) * step
