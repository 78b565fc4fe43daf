"""Half-up rounding used for every score and currency figure."""

from __future__ import annotations

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round ``value`` to ``ndigits`` decimals with .5 rounding upwards.

    Python's built-in ``round`` rounds half to even, which would move totals
    such as 42.5 down to 42.
    """
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round half-up to the nearest integer."""
    return int(math.floor(value + 0.5))
