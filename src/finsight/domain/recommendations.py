"""Rule-based recommendations and alerts.

Rules read the already computed patterns, budget insights and summary and
are evaluated in a fixed order, so the output is deterministic.
"""

from typing import Sequence

from finsight.domain.entities import (
    Alert,
    AlertKind,
    AlertPriority,
    BudgetInsight,
    BudgetStatus,
    FinancialSummary,
    SpendingPattern,
    Trend,
)
from finsight.utils.amount_parser import format_currency

LOW_SAVINGS_RATE = 10.0
HIGH_SAVINGS_RATE = 30.0
RISING_TREND_THRESHOLD = 15.0
DOMINANT_CATEGORY_SHARE = 30.0
EMERGENCY_FUND_MONTHS = 6

ALERT_LOW_SAVINGS_RATE = 5.0
ALERT_GOOD_SAVINGS_RATE = 20.0


def generate_recommendations(
    patterns: Sequence[SpendingPattern],
    budget_insights: Sequence[BudgetInsight],
    summary: FinancialSummary,
) -> list[str]:
    """Return recommendation messages in rule order."""
    recommendations: list[str] = []

    if summary.savings_rate < LOW_SAVINGS_RATE:
        recommendations.append(
            "💰 Consider increasing your savings rate to at least 10% by reducing "
            "discretionary spending."
        )
    elif summary.savings_rate > HIGH_SAVINGS_RATE:
        recommendations.append(
            "🎉 Excellent savings rate! You're building wealth effectively."
        )

    exceeded = [b for b in budget_insights if b.status == BudgetStatus.EXCEEDED]
    if exceeded:
        recommendations.append(
            f"📊 You've exceeded {len(exceeded)} budget(s). Consider adjusting your "
            "spending or increasing these budgets."
        )

    # Patterns arrive sorted by average, so the first match is the largest.
    rising = [
        p
        for p in patterns
        if p.trend == Trend.INCREASING and p.trend_percentage > RISING_TREND_THRESHOLD
    ]
    if rising:
        recommendations.append(
            f"📈 Monitor your spending in {rising[0].category.lower()} - it's increased "
            f"by {rising[0].trend_percentage:.1f}% recently."
        )

    if summary.top_spending_categories:
        top = summary.top_spending_categories[0]
        if top.percentage > DOMINANT_CATEGORY_SHARE:
            recommendations.append(
                f"🎯 {top.category} represents {top.percentage:.1f}% of your spending. "
                "Look for optimization opportunities."
            )

    if summary.monthly_expenses > 0:
        target = summary.monthly_expenses * EMERGENCY_FUND_MONTHS
        recommendations.append(
            f"🚨 Aim to have {format_currency(target, places=0)} in emergency savings "
            f"({EMERGENCY_FUND_MONTHS} months of expenses)."
        )

    return recommendations


def budget_alerts(budget_insights: Sequence[BudgetInsight]) -> list[Alert]:
    alerts = []
    for insight in budget_insights:
        if insight.status == BudgetStatus.EXCEEDED:
            alerts.append(
                Alert(
                    kind=AlertKind.WARNING,
                    message=(
                        f"Budget exceeded for {insight.category}: "
                        f"{insight.utilization_percentage:.1f}% used"
                    ),
                    priority=AlertPriority.HIGH,
                )
            )
        elif insight.status == BudgetStatus.WARNING:
            alerts.append(
                Alert(
                    kind=AlertKind.WARNING,
                    message=(
                        f"Approaching budget limit for {insight.category}: "
                        f"{insight.utilization_percentage:.1f}% used"
                    ),
                    priority=AlertPriority.MEDIUM,
                )
            )
    return alerts


def generate_alerts(
    budget_insights: Sequence[BudgetInsight], summary: FinancialSummary
) -> list[Alert]:
    """Return alerts for budgets, savings rate and unusual activity."""
    alerts = budget_alerts(budget_insights)

    if summary.savings_rate < 0:
        alerts.append(
            Alert(
                kind=AlertKind.WARNING,
                message="You spent more than you earned this month",
                priority=AlertPriority.HIGH,
            )
        )
    elif summary.savings_rate < ALERT_LOW_SAVINGS_RATE:
        alerts.append(
            Alert(
                kind=AlertKind.WARNING,
                message=(
                    f"Low savings rate: {summary.savings_rate:.1f}%. "
                    "Consider reducing expenses."
                ),
                priority=AlertPriority.MEDIUM,
            )
        )

    if summary.unusual_transactions:
        alerts.append(
            Alert(
                kind=AlertKind.INFO,
                message=(
                    f"{len(summary.unusual_transactions)} unusual transaction(s) "
                    "detected this month"
                ),
                priority=AlertPriority.LOW,
            )
        )

    if summary.savings_rate > ALERT_GOOD_SAVINGS_RATE:
        alerts.append(
            Alert(
                kind=AlertKind.SUCCESS,
                message=f"Great job! {summary.savings_rate:.1f}% savings rate this month",
                priority=AlertPriority.LOW,
            )
        )

    return alerts
