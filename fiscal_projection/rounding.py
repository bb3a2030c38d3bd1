"""
Display rounding shared by every derived projection field.
"""

import math


def round_display(value: float, decimals: int = 1) -> float:
    """
    Round half up (toward positive infinity) to a fixed number of decimals.

    Every ratio and rate in a projection goes through this function so that
    identical inputs always serialize to identical output. Non-finite values
    (a runaway path) are returned unchanged.
    """
    factor = 10 ** decimals
    scaled = value * factor
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / factor


def round_bps(value: float):
    """Round a basis-point quantity half up to an integer."""
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))
