"""Line item commands."""

import click
from invoicer.cli.error_handling import handle_domain_error
from invoicer.cli.invoice_resolution import resolve_invoice_or_exit
from invoicer.domain.calculator import format_money
from invoicer.domain.invoice import InvoiceService
from invoicer.domain.settings import SettingsService
from invoicer.utils.amount_parser import parse_amount


def _parse_price_or_exit(ctx, value: str) -> float:
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid price: {e}", err=True)
        ctx.exit(1)


@click.group()
def item_group():
    """Manage invoice line items."""
    pass


@item_group.command("add")
@click.argument("invoice_ref", metavar="INVOICE")
@click.argument("description")
@click.option("--quantity", type=float, default=1, show_default=True, help="Quantity")
@click.option("--price", default="0", show_default=True, help="Unit price (e.g., 150 or $1,200.00)")
@click.pass_context
def add_item(ctx, invoice_ref: str, description: str, quantity: float, price: str):
    """Add a line item to an invoice.

    Examples:
        invoicer item add INV-1001 "Design work" --quantity 2 --price 150
    """
    store = ctx.obj["store"]
    service = InvoiceService(store)
    currency = SettingsService(store).load().currency

    inv = resolve_invoice_or_exit(ctx, service, invoice_ref)
    inv = service.add_item(
        inv,
        description=description,
        quantity=quantity,
        price=_parse_price_or_exit(ctx, price),
    )
    service.save(inv)
    new_item = inv.items[-1]
    click.echo(f"Added item '{description}' (ID: {new_item.id}) to {inv.invoice_number}")
    click.echo(f"  Line total: {format_money(new_item.line_total, currency)}")
    click.echo(f"  Invoice total: {format_money(inv.total, currency)}")


@item_group.command("update")
@click.argument("invoice_ref", metavar="INVOICE")
@click.argument("item_id", metavar="ITEM_ID")
@click.option("--description", help="New description")
@click.option("--quantity", type=float, help="New quantity")
@click.option("--price", help="New unit price")
@click.pass_context
def update_item(
    ctx,
    invoice_ref: str,
    item_id: str,
    description: str | None,
    quantity: float | None,
    price: str | None,
):
    """Update a line item.

    ITEM_ID is shown by 'invoicer invoice show'.
    """
    store = ctx.obj["store"]
    service = InvoiceService(store)
    currency = SettingsService(store).load().currency

    changes = {}
    if description is not None:
        changes["description"] = description
    if quantity is not None:
        changes["quantity"] = quantity
    if price is not None:
        changes["price"] = _parse_price_or_exit(ctx, price)
    if not changes:
        click.echo("Nothing to change.")
        return

    inv = resolve_invoice_or_exit(ctx, service, invoice_ref)
    try:
        inv = service.update_item(inv, item_id, **changes)
    except ValueError as e:
        handle_domain_error(ctx, e)

    service.save(inv)
    click.echo(f"Updated item {item_id} on {inv.invoice_number}")
    click.echo(f"  Invoice total: {format_money(inv.total, currency)}")


@item_group.command("remove")
@click.argument("invoice_ref", metavar="INVOICE")
@click.argument("item_id", metavar="ITEM_ID")
@click.pass_context
def remove_item(ctx, invoice_ref: str, item_id: str):
    """Remove a line item from an invoice."""
    store = ctx.obj["store"]
    service = InvoiceService(store)
    currency = SettingsService(store).load().currency

    inv = resolve_invoice_or_exit(ctx, service, invoice_ref)
    try:
        inv = service.remove_item(inv, item_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    service.save(inv)
    click.echo(f"Removed item {item_id} from {inv.invoice_number}")
    click.echo(f"  Invoice total: {format_money(inv.total, currency)}")


def register_commands(cli):
    """Register item commands with main CLI."""
    cli.add_command(item_group, name="item")
