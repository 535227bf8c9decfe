"""
Display formatting for currency amounts and rates.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

CURRENCY_SYMBOL = "$"


def format_currency(amount: float) -> str:
    """
    Format an amount as whole US dollars with thousands separators.

    Rounds half away from zero: 1234.56 -> "$1,235", -50.5 -> "-$51",
    -0.4 -> "-$0".
    """
    if math.isnan(amount):
        return f"{CURRENCY_SYMBOL}NaN"
    if math.isinf(amount):
        sign = "-" if amount < 0 else ""
        return f"{sign}{CURRENCY_SYMBOL}∞"

    rounded = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    # Negative amounts that round to zero keep their sign: -0.4 -> "-$0"
    sign = "-" if math.copysign(1, amount) < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(int(rounded)):,}"


def format_percentage(rate: float) -> str:
    """Format a percentage rate with two decimals: 6.5 -> "6.50%"."""
    return f"{rate:.2f}%"
