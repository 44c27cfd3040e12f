"""Current-month financial summary and anomaly detection."""

from collections import defaultdict
from typing import Sequence

from finsight.domain.entities import (
    CategoryShare,
    FinancialSummary,
    LedgerEntry,
    TransactionKind,
    UnusualTransaction,
)
from finsight.utils.date_parser import month_key
from finsight.utils.safe_math import percentage, round_half_up, safe_divide

TOP_CATEGORY_LIMIT = 5
UNUSUAL_LIMIT = 5
UNUSUAL_MULTIPLIER = 3
UNUSUAL_FLOOR = 10000


def _is_expense(entry: LedgerEntry) -> bool:
    return entry.transaction.kind == TransactionKind.EXPENSE


def entries_in_period(entries: Sequence[LedgerEntry], period: str) -> list[LedgerEntry]:
    """Return entries whose transaction date falls in a "YYYY-MM" period."""
    return [e for e in entries if month_key(e.transaction.date) == period]


def calculate_savings_rate(income: int, expenses: int) -> float:
    """Return savings as a percentage of income, 0 when there is no income."""
    if income <= 0:
        return 0.0
    return percentage(income - expenses, income)


def top_spending_categories(
    month_entries: Sequence[LedgerEntry], monthly_expenses: int
) -> list[CategoryShare]:
    """Rank categorized expenses of the month by total, highest first."""
    totals: dict[str, int] = defaultdict(int)
    for entry in month_entries:
        if entry.category is not None and _is_expense(entry):
            totals[entry.category.name] += entry.transaction.amount

    shares = [
        CategoryShare(
            category=name,
            amount=amount,
            percentage=percentage(amount, monthly_expenses),
        )
        for name, amount in totals.items()
    ]
    shares.sort(key=lambda share: share.amount, reverse=True)
    return shares[:TOP_CATEGORY_LIMIT]


def category_averages(entries: Sequence[LedgerEntry]) -> dict[str, float]:
    """Mean expense transaction amount per category name over all entries."""
    sums: dict[str, int] = defaultdict(int)
    counts: dict[str, int] = defaultdict(int)
    for entry in entries:
        if entry.category is not None and _is_expense(entry):
            sums[entry.category.name] += entry.transaction.amount
            counts[entry.category.name] += 1
    return {name: sums[name] / counts[name] for name in sums}


def find_unusual_transactions(
    entries: Sequence[LedgerEntry], month_entries: Sequence[LedgerEntry]
) -> list[UnusualTransaction]:
    """Flag month expenses well above their category's typical size.

    A transaction is unusual when it is more than three times its category's
    average and above $100. Results keep processing order and are capped.
    """
    averages = category_averages(entries)
    unusual: list[UnusualTransaction] = []

    for entry in month_entries:
        if entry.category is None or not _is_expense(entry):
            continue
        txn = entry.transaction
        average = averages.get(entry.category.name, 0.0)
        if txn.amount > average * UNUSUAL_MULTIPLIER and txn.amount > UNUSUAL_FLOOR:
            multiple = round_half_up(safe_divide(txn.amount, average))
            unusual.append(
                UnusualTransaction(
                    description=txn.description or "Unknown transaction",
                    amount=txn.amount,
                    date=txn.date,
                    reason=(
                        f"This transaction is {multiple}× higher than your average "
                        f"{entry.category.name.lower()} spending."
                    ),
                )
            )

    return unusual[:UNUSUAL_LIMIT]


def generate_financial_summary(
    entries: Sequence[LedgerEntry], period: str
) -> FinancialSummary:
    """Summarize the given period against the whole snapshot.

    Args:
        entries: Ledger snapshot for the analysis window
        period: Current "YYYY-MM" period

    Returns:
        FinancialSummary for the period
    """
    month_entries = entries_in_period(entries, period)

    income = sum(
        e.transaction.amount
        for e in month_entries
        if e.transaction.kind == TransactionKind.INCOME
    )
    expenses = sum(e.transaction.amount for e in month_entries if _is_expense(e))

    return FinancialSummary(
        monthly_income=income,
        monthly_expenses=expenses,
        savings_rate=calculate_savings_rate(income, expenses),
        top_spending_categories=tuple(top_spending_categories(month_entries, expenses)),
        unusual_transactions=tuple(find_unusual_transactions(entries, month_entries)),
    )
