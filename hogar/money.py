"""
Money helpers.

Amounts are whole Colombian pesos held as ints. Any division is rounded
to an int right where it happens, half away from zero, never with
Python's round() (which rounds half to even).
"""

from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction
from typing import Union

_ONE = Decimal(1)


def round_half_up(value: Union[Decimal, Fraction, int]) -> int:
    """Round to the nearest int, halves away from zero."""
    if isinstance(value, Fraction):
        value = Decimal(value.numerator) / Decimal(value.denominator)
    return int(Decimal(value).quantize(_ONE, rounding=ROUND_HALF_UP))


def divide_round(numerator: int, denominator: int) -> int:
    """numerator / denominator rounded half-up, computed exactly."""
    return round_half_up(Fraction(numerator, denominator))


def ceil_div(numerator: int, denominator: int) -> int:
    """Exact integer ceiling of numerator / denominator (denominator > 0)."""
    return -(-numerator // denominator)


def format_cop(amount: int) -> str:
    """
    Format pesos the way every screen shows them.

    >>> format_cop(900000)
    '$ 900.000'
    >>> format_cop(-5000)
    '-$ 5.000'
    """
    sign = "-" if amount < 0 else ""
    digits = f"{abs(int(amount)):,}".replace(",", ".")
    return f"{sign}$ {digits}"


def format_cop_short(amount: int) -> str:
    """
    Compact form for tight spaces: $1.2M, $350K, else the full form.
    """
    if amount >= 1_000_000:
        millions = (Decimal(amount) / Decimal(1_000_000)).quantize(
            Decimal("0.1"), rounding=ROUND_HALF_UP
        )
        return f"${millions}M"
    if amount >= 1000:
        return f"${divide_round(amount, 1000)}K"
    return format_cop(amount)
