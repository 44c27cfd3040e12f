"""Budget commands."""

from datetime import date

import click
from finsight.cli.error_handling import handle_domain_error
from finsight.domain.budget import BudgetService
from finsight.domain.category import CategoryService
from finsight.utils.amount_parser import format_currency, parse_amount
from finsight.utils.date_parser import month_key


@click.group()
def budget_group():
    """Manage monthly budgets."""
    pass


@budget_group.command("set")
@click.option("--amount", required=True, help="Budget amount (e.g., 400 or $1,200.00)")
@click.option("--category", help="Category name (omit for an overall budget)")
@click.option("--period", help="Budget month as YYYY-MM (default: current month)")
@click.option("--name", help="Display name (default: category name)")
@click.pass_context
def set_budget(
    ctx, amount: str, category: str | None, period: str | None, name: str | None
):
    """Create or update a budget for a month."""
    db = ctx.obj["db"]
    user_id = ctx.obj["user_id"]
    budget_service = BudgetService(db, user_id)
    category_service = CategoryService(db, user_id)

    period = period or month_key(date.today())
    try:
        cents = parse_amount(amount)
        category_id = (
            category_service.require_category_by_name(category).id if category else None
        )
        budget_id = budget_service.set_budget(
            amount=cents, period=period, category_id=category_id, name=name
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Set budget {budget_id}: {format_currency(cents)} for {period}")


@budget_group.command("list")
@click.option("--period", help="Budget month as YYYY-MM (default: current month)")
@click.pass_context
def list_budgets(ctx, period: str | None):
    """List budgets for a month."""
    budget_service = BudgetService(ctx.obj["db"], ctx.obj["user_id"])

    period = period or month_key(date.today())
    try:
        budgets = budget_service.list_budgets(period)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    if not budgets:
        click.echo(f"No budgets found for {period}.")
        return

    click.echo(f"\nBudgets for {period}:")
    for budget in budgets:
        click.echo(f"  {budget.name:<30} {format_currency(budget.amount):>14} (ID: {budget.id})")


def register_commands(cli):
    """Register budget commands with main CLI."""
    cli.add_command(budget_group, name="budget")
