"""Main CLI entry point."""

import logging

import click
from finsight.database.factories import create_sqlite_database

# Import and register all commands at module level
from finsight.cli.commands import budget, category, insights, transaction


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINSIGHT_DB_PATH environment variable)",
    envvar="FINSIGHT_DB_PATH",
)
@click.option(
    "--user",
    "user_id",
    default="default",
    show_default=True,
    envvar="FINSIGHT_USER",
    help="Ledger owner (or FINSIGHT_USER environment variable)",
)
@click.option("-v", "--verbose", count=True, help="Increase log output (-v info, -vv debug)")
@click.pass_context
def cli(ctx, db_path: str | None, user_id: str, verbose: int):
    """Finsight - Personal finance insights.

    Record transactions and monthly budgets, then get spending trends,
    budget status, unusual transactions and recommendations.
    """
    ctx.ensure_object(dict)

    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    ctx.obj["user_id"] = user_id

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
category.register_commands(cli)
transaction.register_commands(cli)
budget.register_commands(cli)
insights.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
