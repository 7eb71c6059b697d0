"""Rounding helpers used by the combat formulas."""
from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, sending exact halves towards +infinity.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``);
    combat numbers are tuned against half-up rounding (``2.5 -> 3``,
    ``-2.5 -> -2``).
    """
    return math.floor(value + 0.5)


def round_half_up_to(value: float, places: int) -> float:
    """Round to ``places`` decimals with the same half-up rule (``0.0625 -> 0.063``)."""
    scale = 10**places
    return math.floor(value * scale + 0.5) / scale
