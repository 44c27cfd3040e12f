"""Tests for CLI commands."""

import json

from finsight.cli.main import cli


def _invoke(cli_runner, temp_db, *args):
    return cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "--user", "alice", *args]
    )


def test_category_create_and_list(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "category", "create", "Groceries")
    assert result.exit_code == 0
    assert "Created category 'Groceries'" in result.output

    result = _invoke(cli_runner, temp_db, "category", "create", "Salary", "--kind", "income")
    assert result.exit_code == 0

    result = _invoke(cli_runner, temp_db, "category", "list")
    assert result.exit_code == 0
    assert "Groceries [expense]" in result.output
    assert "Salary [income]" in result.output


def test_category_duplicate_fails(cli_runner, temp_db):
    _invoke(cli_runner, temp_db, "category", "create", "Groceries")

    result = _invoke(cli_runner, temp_db, "category", "create", "Groceries")

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_transaction_add_and_list(cli_runner, temp_db):
    _invoke(cli_runner, temp_db, "category", "create", "Groceries")

    result = _invoke(
        cli_runner,
        temp_db,
        "transaction",
        "add",
        "--date",
        "2024-06-02",
        "--amount",
        "$45.10",
        "--category",
        "Groceries",
        "--description",
        "Market",
    )
    assert result.exit_code == 0
    assert "Amount: $45.10 (expense)" in result.output

    result = _invoke(cli_runner, temp_db, "transaction", "list")
    assert result.exit_code == 0
    assert "Groceries" in result.output
    assert "Market" in result.output


def test_transaction_add_unknown_category(cli_runner, temp_db):
    result = _invoke(
        cli_runner, temp_db, "transaction", "add", "--date", "today", "--amount", "5", "--category", "Nope"
    )

    assert result.exit_code == 1
    assert "Category 'Nope' not found" in result.output


def test_transaction_add_invalid_amount(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "transaction", "add", "--date", "today", "--amount", "-5")

    assert result.exit_code == 1
    assert "Invalid amount format" in result.output


def test_budget_set_and_list(cli_runner, temp_db):
    _invoke(cli_runner, temp_db, "category", "create", "Dining")

    result = _invoke(
        cli_runner, temp_db, "budget", "set", "--amount", "200", "--category", "Dining", "--period", "2024-06"
    )
    assert result.exit_code == 0
    assert "$200.00 for 2024-06" in result.output

    result = _invoke(cli_runner, temp_db, "budget", "list", "--period", "2024-06")
    assert result.exit_code == 0
    assert "Dining" in result.output


def test_insights_json(cli_runner, temp_db):
    _invoke(cli_runner, temp_db, "category", "create", "Dining")
    _invoke(cli_runner, temp_db, "category", "create", "Salary", "--kind", "income")
    for when, amount in [("2024-05-03", "100"), ("2024-06-03", "250")]:
        _invoke(
            cli_runner, temp_db, "transaction", "add", "--date", when, "--amount", amount, "--category", "Dining"
        )
    _invoke(
        cli_runner, temp_db, "transaction", "add", "--date", "2024-06-01", "--amount", "1000",
        "--kind", "income", "--category", "Salary",
    )
    _invoke(
        cli_runner, temp_db, "budget", "set", "--amount", "200", "--category", "Dining", "--period", "2024-06"
    )

    result = _invoke(cli_runner, temp_db, "insights", "--json", "--as-of", "2024-06-20")

    assert result.exit_code == 0
    data = json.loads(result.output)
    summary = data["financialSummary"]
    assert summary["monthlyIncome"] == 100000
    assert summary["monthlyExpenses"] == 25000
    assert summary["savingsRate"] == 75.0
    assert data["spendingPatterns"][0]["category"] == "Dining"
    assert data["spendingPatterns"][0]["trend"] == "increasing"
    assert data["budgetInsights"][0]["status"] == "exceeded"


def test_insights_text_report(cli_runner, temp_db):
    _invoke(cli_runner, temp_db, "transaction", "add", "--date", "2024-06-03", "--amount", "80")

    result = _invoke(cli_runner, temp_db, "insights", "--as-of", "2024-06-20")

    assert result.exit_code == 0
    assert "Savings rate" in result.output
    assert "Recommendations" in result.output
    assert "$480" in result.output


def test_insights_other_user_is_empty(cli_runner, temp_db):
    _invoke(cli_runner, temp_db, "transaction", "add", "--date", "2024-06-03", "--amount", "80")

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "--user", "bob", "insights", "--json", "--as-of", "2024-06-20"],
    )

    assert result.exit_code == 0
    assert json.loads(result.output)["financialSummary"]["monthlyExpenses"] == 0
