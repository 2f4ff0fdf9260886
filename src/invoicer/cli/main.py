"""Main CLI entry point."""

import click
from invoicer.cli.error_handling import handle_domain_error
from invoicer.domain.errors import DomainError
from invoicer.storage.factories import create_sqlite_storage
from invoicer.storage.store import InvoiceStore

# Import and register all commands at module level
from invoicer.cli.commands import (
    invoice,
    item,
    settings,
    dashboard,
)


class InvoicerGroup(click.Group):
    """Command group that reports domain errors raised by any subcommand."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except DomainError as e:
            # Errors without a command-specific handler, e.g. corrupted stored data
            handle_domain_error(ctx, e)


@click.group(cls=InvoicerGroup)
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides INVOICER_DB_PATH environment variable)",
    envvar="INVOICER_DB_PATH",
)
@click.pass_context
def cli(ctx, db_path: str | None):
    """Invoicer - Small business invoicing.

    Create and edit invoices, keep business settings, and review revenue
    from the command line.
    """
    ctx.ensure_object(dict)

    # Open storage only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        storage = create_sqlite_storage(database_path=db_path)
        storage.connect()
        storage.initialize_schema()
        ctx.call_on_close(storage.disconnect)
        ctx.obj["storage"] = storage
        ctx.obj["store"] = InvoiceStore(storage)


# Register all commands
invoice.register_commands(cli)
item.register_commands(cli)
settings.register_commands(cli)
dashboard.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
