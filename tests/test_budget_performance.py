"""Tests for budget performance analysis."""

from datetime import date

import pytest

from finsight.domain.budget_performance import (
    analyze_budget_performance,
    classify_utilization,
)
from finsight.domain.entities import BudgetStatus, TransactionKind


@pytest.mark.parametrize(
    "spent,expected",
    [
        (7500, BudgetStatus.ON_TRACK),
        (7501, BudgetStatus.WARNING),
        (10000, BudgetStatus.WARNING),
        (10001, BudgetStatus.EXCEEDED),
    ],
)
def test_utilization_boundaries(ledger, make_budget, spent, expected):
    entry = ledger(spent, date(2024, 6, 3), "Groceries")
    budget = make_budget(10000, category_id=entry.category.id, name="Groceries")

    [insight] = analyze_budget_performance([entry], [budget])

    assert insight.status == expected
    assert insight.utilization_percentage == pytest.approx(spent / 100)
    assert insight.spent_amount == spent


def test_budget_without_spend_is_reported(make_budget):
    [insight] = analyze_budget_performance([], [make_budget(20000, category_id=7, name="Fun")])

    assert insight.spent_amount == 0
    assert insight.utilization_percentage == 0
    assert insight.status == BudgetStatus.ON_TRACK
    assert insight.recommendation == "You're doing well! You've used 0.0% of your Fun budget."


def test_only_matching_category_and_period_count(ledger, make_budget):
    groceries = ledger(3000, date(2024, 6, 2), "Groceries")
    entries = [
        groceries,
        ledger(4000, date(2024, 6, 4), "Groceries"),
        ledger(9000, date(2024, 5, 30), "Groceries"),
        ledger(5000, date(2024, 6, 5), "Dining"),
        ledger(1000, date(2024, 6, 6), "Groceries", kind=TransactionKind.INCOME),
    ]
    budget = make_budget(10000, category_id=groceries.category.id, name="Groceries")

    [insight] = analyze_budget_performance(entries, [budget])

    assert insight.spent_amount == 7000
    assert insight.status == BudgetStatus.ON_TRACK


def test_overall_budget_covers_all_categories(ledger, make_budget):
    entries = [
        ledger(3000, date(2024, 6, 2), "Groceries"),
        ledger(5000, date(2024, 6, 5), "Dining"),
        ledger(2500, date(2024, 6, 7)),
    ]

    [insight] = analyze_budget_performance(entries, [make_budget(10000, name="Overall")])

    assert insight.spent_amount == 10500
    assert insight.status == BudgetStatus.EXCEEDED
    assert insight.recommendation == (
        "Budget exceeded! You've spent 105.0% of your Overall budget. "
        "Review your spending in this category."
    )


def test_zero_budget_amount_is_on_track(ledger, make_budget):
    entry = ledger(500, date(2024, 6, 2), "Groceries")

    [insight] = analyze_budget_performance(
        [entry], [make_budget(0, category_id=entry.category.id)]
    )

    assert insight.utilization_percentage == 0
    assert insight.status == BudgetStatus.ON_TRACK


def test_budgets_keep_input_order(make_budget):
    budgets = [make_budget(100, name="B"), make_budget(100, name="A")]

    insights = analyze_budget_performance([], budgets)

    assert [i.category for i in insights] == ["B", "A"]


def test_classify_utilization_between_thresholds():
    assert classify_utilization(80.0) == BudgetStatus.WARNING
