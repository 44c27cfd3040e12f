"""Date and period utilities."""

import re
from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

_PERIOD_RE = re.compile(r"^(\d{4})-(\d{2})$")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and a few
    relative forms: "today", "yesterday", "this month", "last month".

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def month_key(value: date) -> str:
    """Return the "YYYY-MM" period identifier containing a date."""
    return value.strftime("%Y-%m")


def parse_period(period: str) -> str:
    """Validate and normalize a "YYYY-MM" period identifier.

    Raises:
        ValueError: If the period is malformed
    """
    match = _PERIOD_RE.match(period.strip())
    if match is None or not 1 <= int(match.group(2)) <= 12:
        raise ValueError(f"Invalid period '{period}': expected YYYY-MM")
    return match.group(0)


def trailing_window(months: int, today: Optional[date] = None) -> tuple[date, date]:
    """Return the window starting on the first day of the month ``months``
    months before ``today`` and ending on ``today``.
    """
    if today is None:
        today = date.today()
    start = (today - relativedelta(months=months)).replace(day=1)
    return start, today
