"""Invoice management commands."""

from datetime import date

import click
from invoicer.cli.error_handling import handle_domain_error
from invoicer.cli.invoice_resolution import resolve_invoice_or_exit
from invoicer.domain.calculator import format_money
from invoicer.domain.entities import Client, InvoiceStatus
from invoicer.domain.invoice import InvoiceService
from invoicer.domain.preview import render_invoice
from invoicer.domain.settings import SettingsService
from invoicer.utils.amount_parser import parse_amount, parse_percentage
from invoicer.utils.date_parser import parse_date

STATUS_CHOICES = [status.value for status in InvoiceStatus]


def _parse_date_or_exit(ctx, label: str, value: str, today: date | None = None):
    try:
        return parse_date(value, today=today)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def _parse_rate_or_exit(ctx, value: str) -> float:
    try:
        return parse_percentage(value)
    except ValueError as e:
        click.echo(f"Error: Invalid tax rate: {e}", err=True)
        ctx.exit(1)


@click.group()
def invoice_group():
    """Manage invoices."""
    pass


@invoice_group.command("create")
@click.option("--client", "client_name", required=True, help="Client name")
@click.option("--email", default="", help="Client email")
@click.option("--address", default="", help="Client address (use \\n for new lines)")
@click.option("--number", help="Invoice number (random INV-#### if not provided)")
@click.option("--date", "issue_date", help="Issue date (YYYY-MM-DD or relative like 'today')")
@click.option("--due-date", help="Due date (defaults to 14 days after the issue date)")
@click.option("--tax-rate", help="Tax rate percentage (defaults to the settings tax rate)")
@click.option("--notes", help="Notes printed at the bottom of the invoice")
@click.option(
    "--item",
    "items",
    nargs=3,
    multiple=True,
    metavar="DESCRIPTION QTY PRICE",
    help="Line item; may be repeated",
)
@click.option(
    "--status",
    type=click.Choice(STATUS_CHOICES),
    default=InvoiceStatus.DRAFT.value,
    show_default=True,
    help="Initial status",
)
@click.pass_context
def create_invoice(
    ctx,
    client_name: str,
    email: str,
    address: str,
    number: str | None,
    issue_date: str | None,
    due_date: str | None,
    tax_rate: str | None,
    notes: str | None,
    items: tuple[tuple[str, str, str], ...],
    status: str,
):
    """Create and save a new invoice.

    Examples:
        invoicer invoice create --client "Acme Corp" --item "Design work" 2 150
        invoicer invoice create --client "Jane Doe" --number INV-1001 --due-date "in 30 days"
    """
    store = ctx.obj["store"]
    service = InvoiceService(store)
    app_settings = SettingsService(store).load()

    client = Client(name=client_name, email=email, address=address.replace("\\n", "\n"))
    issued = _parse_date_or_exit(ctx, "date", issue_date) if issue_date else None
    draft = service.new_invoice(app_settings, client=client, issue_date=issued)

    details = {"status": status}
    if number:
        details["invoice_number"] = number
    if due_date:
        details["due_date"] = _parse_date_or_exit(ctx, "due date", due_date, today=draft.date)
    if notes:
        details["notes"] = notes
    draft = service.update_details(draft, **details)

    if tax_rate is not None:
        draft = service.set_tax_rate(draft, _parse_rate_or_exit(ctx, tax_rate))

    for description, quantity, price in items:
        try:
            draft = service.add_item(
                draft,
                description=description,
                quantity=float(quantity),
                price=parse_amount(price),
            )
        except ValueError as e:
            click.echo(f"Error: Invalid item '{description}': {e}", err=True)
            ctx.exit(1)

    service.save(draft)
    click.echo(f"Created invoice {draft.invoice_number} (ID: {draft.id})")
    click.echo(f"  Client: {client.name}")
    click.echo(f"  Total: {format_money(draft.total, app_settings.currency)}")


@invoice_group.command("list")
@click.option("--status", type=click.Choice(STATUS_CHOICES), help="Only show invoices with this status")
@click.pass_context
def list_invoices(ctx, status: str | None):
    """List all invoices."""
    store = ctx.obj["store"]
    service = InvoiceService(store)
    currency = SettingsService(store).load().currency

    invoices = service.list_invoices()
    if status is not None:
        invoices = [inv for inv in invoices if inv.status.value == status]
    if not invoices:
        click.echo("No invoices found. Create one to get started.")
        return

    click.echo("\nInvoices:")
    click.echo("-" * 90)
    for inv in invoices:
        click.echo(
            f"{inv.invoice_number:12s} | {inv.client.name[:20]:20s} | {inv.date.isoformat()} | "
            f"{format_money(inv.total, currency):>12} | {inv.status.value:8s} | ID: {inv.id}"
        )


@invoice_group.command("show")
@click.argument("invoice_ref", metavar="INVOICE")
@click.pass_context
def show_invoice(ctx, invoice_ref: str):
    """Show the printable layout of an invoice.

    INVOICE can be an invoice ID or invoice number.
    """
    store = ctx.obj["store"]
    service = InvoiceService(store)
    app_settings = SettingsService(store).load()

    inv = resolve_invoice_or_exit(ctx, service, invoice_ref)
    click.echo(render_invoice(inv, app_settings))
    if inv.items:
        click.echo("\nItem IDs:")
        for line_item in inv.items:
            click.echo(f"  {line_item.id}  {line_item.description}")


@invoice_group.command("edit")
@click.argument("invoice_ref", metavar="INVOICE")
@click.option("--number", help="New invoice number")
@click.option("--client", "client_name", help="Client name")
@click.option("--email", help="Client email")
@click.option("--address", help="Client address (use \\n for new lines)")
@click.option("--date", "issue_date", help="Issue date")
@click.option("--due-date", help="Due date")
@click.option("--status", type=click.Choice(STATUS_CHOICES), help="Status")
@click.option("--notes", help="Notes")
@click.option("--tax-rate", help="Tax rate percentage")
@click.pass_context
def edit_invoice(
    ctx,
    invoice_ref: str,
    number: str | None,
    client_name: str | None,
    email: str | None,
    address: str | None,
    issue_date: str | None,
    due_date: str | None,
    status: str | None,
    notes: str | None,
    tax_rate: str | None,
):
    """Edit invoice details.

    INVOICE can be an invoice ID or invoice number. Only the given options
    are changed; totals are recomputed before saving.

    Examples:
        invoicer invoice edit INV-1001 --status Pending
        invoicer invoice edit abc123xyz --tax-rate 10 --notes "Thank you!"
    """
    store = ctx.obj["store"]
    service = InvoiceService(store)
    currency = SettingsService(store).load().currency

    inv = resolve_invoice_or_exit(ctx, service, invoice_ref)

    details = {}
    if number is not None:
        details["invoice_number"] = number
    if issue_date is not None:
        details["date"] = _parse_date_or_exit(ctx, "date", issue_date)
    if due_date is not None:
        # Relative due dates count from the (possibly new) issue date
        details["due_date"] = _parse_date_or_exit(
            ctx, "due date", due_date, today=details.get("date", inv.date)
        )
    if status is not None:
        details["status"] = status
    if notes is not None:
        details["notes"] = notes

    client_changes = {}
    if client_name is not None:
        client_changes["name"] = client_name
    if email is not None:
        client_changes["email"] = email
    if address is not None:
        client_changes["address"] = address.replace("\\n", "\n")

    if not details and not client_changes and tax_rate is None:
        click.echo("Nothing to change.")
        return

    try:
        inv = service.update_details(inv, **details)
        inv = service.update_client(inv, **client_changes)
        if tax_rate is not None:
            inv = service.set_tax_rate(inv, _parse_rate_or_exit(ctx, tax_rate))
    except ValueError as e:
        handle_domain_error(ctx, e)

    service.save(inv)
    click.echo(f"Updated invoice {inv.invoice_number}")
    click.echo(f"  Total: {format_money(inv.total, currency)}")


@invoice_group.command("status")
@click.argument("invoice_ref", metavar="INVOICE")
@click.argument("status", type=click.Choice(STATUS_CHOICES))
@click.pass_context
def set_status(ctx, invoice_ref: str, status: str):
    """Set the status of an invoice.

    Examples:
        invoicer invoice status INV-1001 Paid
    """
    service = InvoiceService(ctx.obj["store"])
    inv = resolve_invoice_or_exit(ctx, service, invoice_ref)
    inv = service.update_details(inv, status=status)
    service.save(inv)
    click.echo(f"Invoice {inv.invoice_number} is now {inv.status.value}")


@invoice_group.command("delete")
@click.argument("invoice_ref", metavar="INVOICE")
@click.option("--yes", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def delete_invoice(ctx, invoice_ref: str, yes: bool):
    """Delete an invoice.

    INVOICE can be an invoice ID or invoice number. Deletion is permanent.
    """
    service = InvoiceService(ctx.obj["store"])
    inv = resolve_invoice_or_exit(ctx, service, invoice_ref)

    if not yes and not click.confirm(
        f"Are you sure you want to delete invoice {inv.invoice_number} (ID: {inv.id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    service.delete(inv.id)
    click.echo(f"Deleted invoice {inv.invoice_number}")


def register_commands(cli):
    """Register invoice commands with main CLI."""
    cli.add_command(invoice_group, name="invoice")
