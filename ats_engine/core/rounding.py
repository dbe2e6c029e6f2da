from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
import math


def round_half_up(value: float, digits: int = 1) -> float:
    """Round half away from zero on the decimal representation, not the binary one."""
    if value is None or not math.isfinite(value):
        return 0.0
    quantum = Decimal(1).scaleb(-digits)
    try:
        return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return 0.0


def clamp(value: float, lower: float, upper: float) -> float:
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


def safe_ratio(numerator: float, denominator: float) -> float:
    if not denominator:
        return 0.0
    return numerator / denominator
