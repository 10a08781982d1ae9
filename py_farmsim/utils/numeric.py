"""Rounding helpers matching the browser game's arithmetic."""

import math


def round_half_up(value: float, digits: int = 0):
    """
    Round with halves going towards +infinity, like JavaScript's Math.round.

    Python's round() uses banker's rounding, which would turn 2.5 into 2
    where the game shows 3. With digits=0 an int is returned.
    """
    if digits == 0:
        return int(math.floor(value + 0.5))
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor
