"""IEEE-style arithmetic helpers.

Layout metrics divide by feature counts and bounding-box areas that can be
zero.  Those cases must come back as inf/nan, never as an exception.
"""

from __future__ import annotations

import math


def ieee_div(a: float, b: float) -> float:
    """a / b, returning ±inf or nan instead of raising on b == 0."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def ieee_sqrt(x: float) -> float:
    """math.sqrt that yields nan for negative input."""
    if x < 0 or math.isnan(x):
        return math.nan
    return math.sqrt(x)


def round_half_up(x: float, ndigits: int = 1) -> float:
    """Round to *ndigits* decimals with .5 going up; non-finite passes through.

    Python's round() is banker's rounding (47.25 -> 47.2); durations and
    feature sizes round .5 up (47.25 -> 47.3).
    """
    if not math.isfinite(x):
        return x
    scale = 10 ** ndigits
    return math.floor(x * scale + 0.5) / scale
