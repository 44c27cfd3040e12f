"""Category management commands."""

import click
from finsight.cli.error_handling import handle_domain_error
from finsight.domain.category import CategoryService
from finsight.domain.entities import TransactionKind
from finsight.domain.errors import DomainError


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories."""
    service = CategoryService(ctx.obj["db"], ctx.obj["user_id"])

    categories = service.list_categories()
    if not categories:
        click.echo("No categories found. Use 'category create' to add one.")
        return

    click.echo("\nCategories:")
    for cat in categories:
        click.echo(f"  {cat.name} [{cat.kind.value}] (ID: {cat.id})")


@category_group.command("create")
@click.argument("name")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in TransactionKind], case_sensitive=False),
    default=TransactionKind.EXPENSE.value,
    help="Category kind (default: expense)",
)
@click.pass_context
def create_category(ctx, name: str, kind: str):
    """Create a new category."""
    service = CategoryService(ctx.obj["db"], ctx.obj["user_id"])

    try:
        category_id = service.create_category(name=name, kind=TransactionKind(kind.lower()))
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Created category '{name.strip()}' (ID: {category_id})")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
