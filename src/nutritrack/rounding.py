"""Rounding helpers shared by the nutrition calculations."""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals with ties going up."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_half_up_int(value: float) -> int:
    """Round to the nearest integer with ties going up."""
    return math.floor(value + 0.5)
