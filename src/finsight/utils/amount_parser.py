"""Amount parsing and formatting utilities.

All amounts are handled as integer cents.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re

MAX_AMOUNT = Decimal("999999999")


def parse_amount(amount_str: str) -> int:
    """Parse an amount string into integer cents.

    Handles "123.45", "$123.45", "1,234.56" and "€ 12". Empty input is 0.

    Raises:
        ValueError: If the amount cannot be parsed, is negative or too large
    """
    if amount_str is None:
        raise ValueError("Empty amount string")

    cleaned = re.sub(r"[$€£¥,\s]", "", amount_str)
    if cleaned == "":
        return 0

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if amount < 0:
        raise ValueError("Negative amounts not allowed")
    if amount > MAX_AMOUNT:
        raise ValueError("Amount exceeds maximum allowed value")

    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_currency(cents: int, places: int = 2) -> str:
    """Format cents as dollars, e.g. 123456 -> "$1,234.56".

    Dropped decimal places are rounded half-up, so 50050 with ``places=0``
    is "$501".
    """
    sign = "-" if cents < 0 else ""
    dollars = (Decimal(abs(cents)) / 100).quantize(
        Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP
    )
    return f"{sign}${dollars:,.{places}f}"


def format_currency_compact(cents: int) -> str:
    """Format cents compactly, e.g. 150000000 -> "$1.5M", 250000 -> "$2.5K"."""
    amount = abs(cents) / 100
    sign = "-" if cents < 0 else ""
    if amount >= 1_000_000:
        return f"{sign}${amount / 1_000_000:.1f}M"
    if amount >= 1_000:
        return f"{sign}${amount / 1_000:.1f}K"
    return format_currency(cents)
