"""Rounding of measured values to whole numbers for display."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up (-9.5 becomes -9, 2.5 becomes 3)."""
    return math.floor(value + 0.5)
