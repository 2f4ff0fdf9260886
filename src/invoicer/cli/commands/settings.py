"""Business settings commands."""

import click
from invoicer.cli.error_handling import handle_domain_error
from invoicer.domain.settings import SettingsService
from invoicer.utils.amount_parser import parse_percentage


@click.group()
def settings_group():
    """View and change business settings."""
    pass


@settings_group.command("show")
@click.pass_context
def show_settings(ctx):
    """Show current business settings."""
    current = SettingsService(ctx.obj["store"]).load()

    click.echo("\nSettings:")
    click.echo("-" * 60)
    click.echo(f"Business Name:   {current.business_name}")
    click.echo(f"Address:         {current.business_address}")
    click.echo(f"Email:           {current.business_email}")
    click.echo(f"Phone:           {current.business_phone}")
    click.echo(f"Logo URL:        {current.logo_url}")
    click.echo(f"Primary Color:   {current.primary_color}")
    click.echo(f"Currency Symbol: {current.currency}")
    click.echo(f"Default Tax:     {current.tax_rate:g}%")


@settings_group.command("set")
@click.option("--business-name", help="Business name")
@click.option("--address", help="Business address (use \\n for new lines)")
@click.option("--email", help="Business email")
@click.option("--phone", help="Business phone")
@click.option("--logo-url", help="Logo image URL")
@click.option("--primary-color", help="Primary color hex code (e.g., #a855f7)")
@click.option("--currency", help="Currency symbol (e.g., $, €)")
@click.option("--tax-rate", help="Default tax rate percentage for new invoices")
@click.pass_context
def set_settings(
    ctx,
    business_name: str | None,
    address: str | None,
    email: str | None,
    phone: str | None,
    logo_url: str | None,
    primary_color: str | None,
    currency: str | None,
    tax_rate: str | None,
):
    """Change business settings.

    Only the given options are changed. Existing invoices keep their own
    tax rate.

    Examples:
        invoicer settings set --business-name "Acme Studio" --currency "€"
        invoicer settings set --tax-rate 7.5
    """
    service = SettingsService(ctx.obj["store"])
    current = service.load()

    changes = {
        "business_name": business_name,
        "business_address": address.replace("\\n", "\n") if address is not None else None,
        "business_email": email,
        "business_phone": phone,
        "logo_url": logo_url,
        "primary_color": primary_color,
        "currency": currency,
    }
    changes = {key: value for key, value in changes.items() if value is not None}
    if tax_rate is not None:
        try:
            changes["tax_rate"] = parse_percentage(tax_rate)
        except ValueError as e:
            click.echo(f"Error: Invalid tax rate: {e}", err=True)
            ctx.exit(1)

    if not changes:
        click.echo("Nothing to change.")
        return

    try:
        updated = service.update(current, **changes)
    except ValueError as e:
        handle_domain_error(ctx, e)

    service.save(updated)
    click.echo("Settings saved!")


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group, name="settings")
