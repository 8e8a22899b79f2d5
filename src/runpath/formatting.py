"""Human-readable formatting of path measurements."""

import math


def format_distance(meters: float) -> str:
    """
    Format a distance for display.

    Distances below one kilometer are shown as whole meters ("850m", halves
    rounding up), longer ones in kilometers with two decimals ("1.25km").
    Non-finite values are shown as a "--" placeholder.
    """
    if not math.isfinite(meters):
        return "--"
    if meters < 1000:
        return f"{math.floor(meters + 0.5)}m"
    return f"{meters / 1000:.2f}km"
