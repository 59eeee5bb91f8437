"""Coordinate rounding helpers."""

import math


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (``2.5 -> 3``, ``-2.5 -> -3``).

    Python's ``round`` uses banker's rounding, which would make a sprite at
    ``x = 2.5`` and one at ``x = 3.5`` land on the same even column.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
