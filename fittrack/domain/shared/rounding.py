"""Rounding helpers shared by metric calculations."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``).
    Nutrition targets are displayed next to values computed by the mobile
    client, which rounds halves up, so all metrics use this helper.

    Example:
        >>> round_half_up(183.75)
        184
        >>> round_half_up(2.5)
        3
    """
    return int(math.floor(value + 0.5))


def safe_percentage(value: float, target: float) -> float:
    """Return ``value`` as a percentage of ``target``.

    A zero or negative target yields 0.0 instead of raising, so progress bars
    stay renderable for incomplete data.
    """
    if target <= 0:
        return 0.0
    return value / target * 100
