"""Domain model entities for finsight.

These are pure data classes representing ledger facts and the insight
structures derived from them, independent of database schema. Derived
structures are never persisted; they are rebuilt from a ledger snapshot on
every request.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Optional


class TransactionKind(str, Enum):
    """Direction of money flow for transactions and categories."""

    INCOME = "income"
    EXPENSE = "expense"


class Trend(str, Enum):
    """Direction of month-over-month spending in a category."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class BudgetStatus(str, Enum):
    """Utilization band of a budget."""

    ON_TRACK = "on_track"
    WARNING = "warning"
    EXCEEDED = "exceeded"


class AlertKind(str, Enum):
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


class AlertPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Category:
    """Category domain entity."""

    id: int
    user_id: str
    name: str
    kind: TransactionKind


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    Amounts are non-negative integer cents; direction is carried by ``kind``.
    """

    id: int
    user_id: str
    amount: int
    kind: TransactionKind
    date: date
    description: Optional[str]
    category_id: Optional[int]


@dataclass(frozen=True)
class Budget:
    """Monthly budget domain entity.

    A budget without a category covers all expense categories of its period.
    """

    id: int
    user_id: str
    name: str
    category_id: Optional[int]
    amount: int
    period: str


@dataclass(frozen=True)
class LedgerEntry:
    """A transaction joined with its category, as read from the ledger."""

    transaction: Transaction
    category: Optional[Category]


@dataclass(frozen=True)
class SpendingPattern:
    """Monthly spending trend for one category."""

    category: str
    average_monthly: int
    trend: Trend
    trend_percentage: float
    insights: tuple[str, ...] = ()


@dataclass(frozen=True)
class BudgetInsight:
    """Utilization of one budget in the current period."""

    category: str
    budget_amount: int
    spent_amount: int
    utilization_percentage: float
    status: BudgetStatus
    recommendation: str


@dataclass(frozen=True)
class CategoryShare:
    """A category's part of the current month's expenses."""

    category: str
    amount: int
    percentage: float


@dataclass(frozen=True)
class UnusualTransaction:
    """A current-month expense far above its category's average."""

    description: str
    amount: int
    date: date
    reason: str


@dataclass(frozen=True)
class FinancialSummary:
    """Current-month totals, savings rate and derived lists."""

    monthly_income: int
    monthly_expenses: int
    savings_rate: float
    top_spending_categories: tuple[CategoryShare, ...] = ()
    unusual_transactions: tuple[UnusualTransaction, ...] = ()


@dataclass(frozen=True)
class Alert:
    kind: AlertKind
    message: str
    priority: AlertPriority


@dataclass(frozen=True)
class InsightsReport:
    """Aggregate result of one insights generation run."""

    spending_patterns: tuple[SpendingPattern, ...]
    budget_insights: tuple[BudgetInsight, ...]
    financial_summary: FinancialSummary
    recommendations: tuple[str, ...] = ()
    alerts: tuple[Alert, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict using the API's camelCase keys."""
        summary = self.financial_summary
        return {
            "spendingPatterns": [
                {
                    "category": p.category,
                    "averageMonthly": p.average_monthly,
                    "trend": p.trend.value,
                    "trendPercentage": p.trend_percentage,
                    "insights": list(p.insights),
                }
                for p in self.spending_patterns
            ],
            "budgetInsights": [
                {
                    "category": b.category,
                    "budgetAmount": b.budget_amount,
                    "spentAmount": b.spent_amount,
                    "utilizationPercentage": b.utilization_percentage,
                    "status": b.status.value,
                    "recommendation": b.recommendation,
                }
                for b in self.budget_insights
            ],
            "financialSummary": {
                "monthlyIncome": summary.monthly_income,
                "monthlyExpenses": summary.monthly_expenses,
                "savingsRate": summary.savings_rate,
                "topSpendingCategories": [
                    {
                        "category": c.category,
                        "amount": c.amount,
                        "percentage": c.percentage,
                    }
                    for c in summary.top_spending_categories
                ],
                "unusualTransactions": [
                    {
                        "description": u.description,
                        "amount": u.amount,
                        "date": u.date.isoformat(),
                        "reason": u.reason,
                    }
                    for u in summary.unusual_transactions
                ],
            },
            "recommendations": list(self.recommendations),
            "alerts": [
                {
                    "type": a.kind.value,
                    "message": a.message,
                    "priority": a.priority.value,
                }
                for a in self.alerts
            ],
        }
