"""Insights command."""

import json

import click
from finsight.cli.error_handling import handle_domain_error
from finsight.domain.entities import InsightsReport
from finsight.domain.errors import InsightsGenerationError
from finsight.domain.insights import InsightsService
from finsight.utils.amount_parser import format_currency, format_currency_compact
from finsight.utils.date_parser import parse_date

PRIORITY_LABELS = {"high": "!!!", "medium": "!! ", "low": "!  "}


def _display_report(report: InsightsReport) -> None:
    """Print a human-readable insights report."""
    summary = report.financial_summary

    click.echo("\nThis month")
    click.echo(f"  Income:       {format_currency(summary.monthly_income):>14}")
    click.echo(f"  Expenses:     {format_currency(summary.monthly_expenses):>14}")
    click.echo(f"  Savings rate: {summary.savings_rate:>13.1f}%")

    if report.alerts:
        click.echo("\nAlerts")
        for alert in report.alerts:
            label = PRIORITY_LABELS[alert.priority.value]
            click.echo(f"  {label} [{alert.kind.value}] {alert.message}")

    if summary.top_spending_categories:
        click.echo("\nTop spending categories")
        for share in summary.top_spending_categories:
            click.echo(
                f"  {share.category:<30} {format_currency(share.amount):>14} "
                f"{share.percentage:>6.1f}%"
            )

    if report.budget_insights:
        click.echo("\nBudgets")
        for insight in report.budget_insights:
            click.echo(
                f"  {insight.category:<30} {format_currency(insight.spent_amount):>14} / "
                f"{format_currency_compact(insight.budget_amount)} ({insight.status.value})"
            )

    if report.spending_patterns:
        click.echo("\nSpending patterns")
        for pattern in report.spending_patterns:
            click.echo(
                f"  {pattern.category:<30} {format_currency(pattern.average_monthly):>14}/mo "
                f"{pattern.trend.value} ({pattern.trend_percentage:.1f}%)"
            )
            for note in pattern.insights:
                click.echo(f"      {note}")

    if summary.unusual_transactions:
        click.echo("\nUnusual transactions")
        for unusual in summary.unusual_transactions:
            click.echo(
                f"  {unusual.date}  {format_currency(unusual.amount):>14}  "
                f"{unusual.description}: {unusual.reason}"
            )

    if report.recommendations:
        click.echo("\nRecommendations")
        for recommendation in report.recommendations:
            click.echo(f"  - {recommendation}")


@click.command("insights")
@click.option("--as-of", "as_of", help="Reference date (default: today)")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.pass_context
def show_insights(ctx, as_of: str | None, as_json: bool):
    """Show spending trends, budget status, alerts and recommendations.

    Insights are computed from the last six months of transactions and the
    budgets of the current month.
    """
    service = InsightsService(ctx.obj["db"])

    try:
        today = parse_date(as_of) if as_of else None
        report = service.generate_insights(ctx.obj["user_id"], today=today)
    except InsightsGenerationError as e:
        click.echo(f"Error: {e}: {e.__cause__}", err=True)
        ctx.exit(1)
        return
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    else:
        _display_report(report)


def register_commands(cli):
    """Register insights command with main CLI."""
    cli.add_command(show_insights)
