"""
Numeric helpers shared by the statistics and prediction engines.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

DEFAULT_PRECISION = 2


def round_half_away(value: float, ndigits: int = DEFAULT_PRECISION) -> float:
    """
    Round half away from zero to ``ndigits`` decimal places.

    Works on the shortest decimal representation of the float, so values that
    print as an exact half round the way they read: ``1.005 -> 1.01``,
    ``-2.675 -> -2.68``, ``1 / 3 * 100 -> 33.33``.

    Parameters
    ----------
    value : float
        Value to round. NaN and infinities are returned unchanged.
    ndigits : int
        Number of decimal places.

    Returns
    -------
    float
    """
    value = float(value)
    if not math.isfinite(value):
        return value

    quantum = Decimal(1).scaleb(-ndigits)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def percentage(part: int, whole: int) -> float:
    """Return ``part / whole * 100`` rounded to two places, or 0.0 if whole is 0."""
    if whole <= 0:
        return 0.0
    return round_half_away((part / whole) * 100)


def mean(total: float, count: int) -> float:
    """Return ``total / count`` rounded to two places, or 0.0 if count is 0."""
    if count <= 0:
        return 0.0
    return round_half_away(total / count)
