"""Numeric coercion helpers for loosely typed record fields"""

import math
from decimal import Decimal
from typing import Any


def is_finite_number(value: Any) -> bool:
    """True for real numbers that are finite as floats; bools are not amounts"""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        try:
            return math.isfinite(value)
        except (OverflowError, ValueError):
            # ints beyond float range, signaling NaN decimals
            return False
    return False


def coerce_amount(value: Any) -> float:
    """
    Coerce a record-store amount to a float.

    Numbers pass through, numeric strings are parsed. Anything else, and any
    non-finite result, becomes 0.0.

    Example:
        coerce_amount("12.50") -> 12.5
        coerce_amount("bad")   -> 0.0
        coerce_amount(None)    -> 0.0
    """
    if isinstance(value, bool):
        return 0.0

    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    elif isinstance(value, (int, float, Decimal)):
        try:
            number = float(value)
        except (OverflowError, ValueError):
            return 0.0
    else:
        return 0.0

    return number if math.isfinite(number) else 0.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives"""
    return int(math.floor(value + 0.5))


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))
