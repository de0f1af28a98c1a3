"""Numeric helpers shared by the interpreter and the scorer"""

from decimal import Decimal, ROUND_FLOOR
from typing import Union


def parse_amount(numeral: str) -> Decimal:
    """Convert a numeral like '1,250.50' to Decimal, dropping thousands separators"""
    return Decimal(numeral.replace(",", ""))


def round_half_up(value: Union[float, Decimal]) -> int:
    """Round to the nearest integer, halves going towards positive infinity (2.5 -> 3, -2.5 -> -2)"""
    shifted = Decimal(str(value)) + Decimal("0.5")
    return int(shifted.to_integral_value(rounding=ROUND_FLOOR))


def clamp(value: int, lower: int, upper: int) -> int:
    """Constrain value to the inclusive range [lower, upper]"""
    return min(upper, max(lower, value))
