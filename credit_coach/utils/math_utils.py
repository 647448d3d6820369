"""Numeric helpers shared by the scoring engine"""

import math


def clamp(value: float, lower: float, upper: float) -> float:
    """Bound value to the closed interval [lower, upper]"""
    return min(upper, max(lower, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties towards +infinity (72.5 -> 73, -2.5 -> -2)"""
    return math.floor(value + 0.5)
