"""Helper utility functions."""

import math
from typing import Tuple


def polar_offset(origin: Tuple[float, float], length: float, angle: float) -> Tuple[float, float]:
    """
    Get the point `length` away from origin at the given angle (radians).
    Angles are measured counter-clockwise on screen, so y is subtracted.
    """
    return (
        origin[0] + length * math.cos(angle),
        origin[1] - length * math.sin(angle)
    )


def within_span(value: float, start: float, width: float) -> bool:
    """Check whether value lies in the closed interval [start, start + width]."""
    return start <= value <= start + width


def reflect_into_range(value: float, low: float, high: float) -> Tuple[float, bool]:
    """
    Mirror a value that overshot [low, high] back across the bound it crossed.
    Returns (value, reflected).
    """
    if value > high:
        return 2 * high - value, True
    if value < low:
        return 2 * low - value, True
    return value, False
