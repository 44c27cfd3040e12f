"""Budget utilization analysis for the current period."""

from typing import Sequence

from finsight.domain.entities import (
    Budget,
    BudgetInsight,
    BudgetStatus,
    LedgerEntry,
    TransactionKind,
)
from finsight.utils.date_parser import month_key
from finsight.utils.safe_math import percentage

WARNING_THRESHOLD = 75.0
EXCEEDED_THRESHOLD = 100.0


def classify_utilization(utilization: float) -> BudgetStatus:
    if utilization <= WARNING_THRESHOLD:
        return BudgetStatus.ON_TRACK
    if utilization <= EXCEEDED_THRESHOLD:
        return BudgetStatus.WARNING
    return BudgetStatus.EXCEEDED


def budget_recommendation(status: BudgetStatus, utilization: float, name: str) -> str:
    """Return the advice text for a budget's status."""
    if status == BudgetStatus.ON_TRACK:
        return f"You're doing well! You've used {utilization:.1f}% of your {name} budget."
    if status == BudgetStatus.WARNING:
        return (
            f"Caution: You've used {utilization:.1f}% of your {name} budget. "
            "Consider reducing spending in this category."
        )
    return (
        f"Budget exceeded! You've spent {utilization:.1f}% of your {name} budget. "
        "Review your spending in this category."
    )


def spent_against_budget(entries: Sequence[LedgerEntry], budget: Budget) -> int:
    """Sum the period's expenses that count toward a budget."""
    return sum(
        entry.transaction.amount
        for entry in entries
        if entry.transaction.kind == TransactionKind.EXPENSE
        and month_key(entry.transaction.date) == budget.period
        and (budget.category_id is None or entry.transaction.category_id == budget.category_id)
    )


def analyze_budget_performance(
    entries: Sequence[LedgerEntry], budgets: Sequence[Budget]
) -> list[BudgetInsight]:
    """Return one insight per budget, in the order the budgets were given.

    A zero budget amount yields 0% utilization and an on-track status.
    """
    insights = []
    for budget in budgets:
        spent = spent_against_budget(entries, budget)
        utilization = percentage(spent, budget.amount)
        status = classify_utilization(utilization)
        insights.append(
            BudgetInsight(
                category=budget.name,
                budget_amount=budget.amount,
                spent_amount=spent,
                utilization_percentage=utilization,
                status=status,
                recommendation=budget_recommendation(status, utilization, budget.name),
            )
        )
    return insights
