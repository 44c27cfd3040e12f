"""Transaction commands."""

import click
from finsight.cli.error_handling import handle_domain_error
from finsight.domain.category import CategoryService
from finsight.domain.entities import TransactionKind
from finsight.domain.errors import DomainError
from finsight.domain.transaction import TransactionService
from finsight.utils.amount_parser import format_currency, parse_amount
from finsight.utils.date_parser import parse_date


@click.group()
def transaction_group():
    """Record and list transactions."""
    pass


@transaction_group.command("add")
@click.option(
    "--date",
    "date_str",
    required=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--amount", required=True, help="Transaction amount (e.g., 123.45 or $1,234.56)")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in TransactionKind], case_sensitive=False),
    default=TransactionKind.EXPENSE.value,
    help="Transaction kind (default: expense)",
)
@click.option("--description", help="Transaction description")
@click.option("--category", help="Category name")
@click.pass_context
def add_transaction(
    ctx,
    date_str: str,
    amount: str,
    kind: str,
    description: str | None,
    category: str | None,
):
    """Add a transaction.

    Examples:
        finsight transaction add --date 2024-01-15 --amount 50.00 --category Groceries
        finsight transaction add --date today --amount 3000 --kind income
    """
    db = ctx.obj["db"]
    user_id = ctx.obj["user_id"]
    transaction_service = TransactionService(db, user_id)
    category_service = CategoryService(db, user_id)

    try:
        txn_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)
        return

    try:
        cents = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)
        return

    try:
        category_id = None
        if category:
            category_id = category_service.require_category_by_name(category).id

        transaction_id = transaction_service.create_transaction(
            amount=cents,
            kind=TransactionKind(kind.lower()),
            date=txn_date,
            description=description,
            category_id=category_id,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Date: {txn_date}")
    click.echo(f"  Amount: {format_currency(cents)} ({kind.lower()})")
    if description:
        click.echo(f"  Description: {description}")
    if category:
        click.echo(f"  Category: {category}")


@transaction_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative)")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative)")
@click.option("--category", help="Category name")
@click.pass_context
def list_transactions(
    ctx, start_date: str | None, end_date: str | None, category: str | None
):
    """List transactions, newest first."""
    db = ctx.obj["db"]
    user_id = ctx.obj["user_id"]
    transaction_service = TransactionService(db, user_id)
    category_service = CategoryService(db, user_id)

    try:
        start = parse_date(start_date) if start_date else None
        end = parse_date(end_date) if end_date else None
        category_id = (
            category_service.require_category_by_name(category).id if category else None
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    transactions = transaction_service.list_transactions(
        start_date=start, end_date=end, category_id=category_id
    )
    if not transactions:
        click.echo("No transactions found.")
        return

    names = {cat.id: cat.name for cat in category_service.list_categories()}
    for txn in transactions:
        sign = "+" if txn.kind == TransactionKind.INCOME else "-"
        amount_str = f"{sign}{format_currency(txn.amount)}"
        category_name = names.get(txn.category_id, "Uncategorized")
        click.echo(
            f"{txn.id:>5}  {txn.date}  {amount_str:>14}  {category_name:<20} "
            f"{txn.description or ''}"
        )


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
