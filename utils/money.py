# utils/money.py
import math


def round2(value: float) -> float:
    """
    Round to 2 decimal places, half-up on the scaled value.

    round() is banker's rounding, so scale by 100, add a half and floor:
        10.333 -> 10.33
        10.995 -> 11.0   (10.995 * 100 lands exactly on 1099.5)
    """
    # inf and nan pass through, as the scaled floor cannot represent them
    if not math.isfinite(value):
        return value
    return math.floor(value * 100 + 0.5) / 100
