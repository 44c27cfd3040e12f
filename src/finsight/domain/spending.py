"""Spending pattern analysis.

Monthly expense totals are computed per category and a least-squares trend is
fitted to them. Categories are keyed by name, so two categories sharing a
name are reported as one.
"""

from collections import defaultdict
from typing import Sequence

from finsight.domain.entities import (
    LedgerEntry,
    SpendingPattern,
    TransactionKind,
    Trend,
)
from finsight.utils.amount_parser import format_currency
from finsight.utils.date_parser import month_key
from finsight.utils.safe_math import percentage, round_half_up, trend_slope

MIN_MONTHS = 2
STABLE_THRESHOLD = 5.0
NOTABLE_CHANGE_THRESHOLD = 10.0
MAJOR_CATEGORY_AVERAGE = 50000


def group_monthly_spending(entries: Sequence[LedgerEntry]) -> dict[str, dict[str, int]]:
    """Sum categorized expenses per category name and "YYYY-MM" month."""
    monthly: dict[str, dict[str, int]] = defaultdict(lambda: defaultdict(int))
    for entry in entries:
        txn = entry.transaction
        if entry.category is None or txn.kind != TransactionKind.EXPENSE:
            continue
        monthly[entry.category.name][month_key(txn.date)] += txn.amount
    return {name: dict(months) for name, months in monthly.items()}


def classify_trend(slope: float, trend_percentage: float) -> Trend:
    if trend_percentage < STABLE_THRESHOLD:
        return Trend.STABLE
    if slope > 0:
        return Trend.INCREASING
    return Trend.DECREASING


def build_pattern_insights(
    category: str, trend: Trend, trend_percentage: float, average: float
) -> tuple[str, ...]:
    """Build the human-readable notes for a category's pattern, in fixed order."""
    insights: list[str] = []
    label = category.lower()

    if trend == Trend.INCREASING and trend_percentage > NOTABLE_CHANGE_THRESHOLD:
        insights.append(
            f"Your {label} spending has increased by {trend_percentage:.1f}% "
            "over recent months."
        )
    elif trend == Trend.DECREASING and trend_percentage > NOTABLE_CHANGE_THRESHOLD:
        insights.append(
            f"Great job! Your {label} spending has decreased by {trend_percentage:.1f}%."
        )

    if average > MAJOR_CATEGORY_AVERAGE:
        insights.append(
            "This is one of your major expense categories at "
            f"{format_currency(round_half_up(average), places=0)}/month."
        )

    return tuple(insights)


def monthly_average(months: dict[str, int]) -> float:
    """Unrounded mean of a category's monthly totals."""
    return sum(months.values()) / len(months)


def build_spending_pattern(category: str, months: dict[str, int]) -> SpendingPattern:
    """Fit the trend for one category's monthly totals."""
    amounts = [months[key] for key in sorted(months)]
    average = monthly_average(months)
    slope = trend_slope(amounts)
    trend_percentage = abs(percentage(slope, average))
    trend = classify_trend(slope, trend_percentage)

    return SpendingPattern(
        category=category,
        average_monthly=round_half_up(average),
        trend=trend,
        trend_percentage=trend_percentage,
        insights=build_pattern_insights(category, trend, trend_percentage, average),
    )


def analyze_spending_patterns(entries: Sequence[LedgerEntry]) -> list[SpendingPattern]:
    """Return spending patterns for categories active in at least two months.

    Args:
        entries: Ledger snapshot for the analysis window

    Returns:
        Patterns sorted by unrounded average monthly spend, highest first,
        then by category name
    """
    active = [
        (category, months)
        for category, months in group_monthly_spending(entries).items()
        if len(months) >= MIN_MONTHS
    ]
    active.sort(key=lambda item: (-monthly_average(item[1]), item[0]))
    return [build_spending_pattern(category, months) for category, months in active]
