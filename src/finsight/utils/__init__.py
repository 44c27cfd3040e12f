"""Utility functions for finsight."""

from finsight.utils.date_parser import parse_date, parse_period, month_key
from finsight.utils.amount_parser import parse_amount, format_currency
from finsight.utils.safe_math import safe_divide

__all__ = [
    "parse_date",
    "parse_period",
    "month_key",
    "parse_amount",
    "format_currency",
    "safe_divide",
]
