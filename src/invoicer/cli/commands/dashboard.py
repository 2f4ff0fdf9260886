"""Dashboard command."""

import click
from invoicer.domain.calculator import format_money
from invoicer.domain.insights import analyze_business_health
from invoicer.domain.invoice import InvoiceService
from invoicer.domain.reporting import build_dashboard_report
from invoicer.domain.settings import SettingsService

BAR_WIDTH = 40


def _display_monthly_totals(report, currency: str) -> None:
    """Display the month series as a text bar chart, in first-seen order."""
    if not report.monthly_totals:
        return
    largest = max(abs(month.amount) for month in report.monthly_totals)

    click.echo("\nRevenue Overview")
    click.echo("-" * 60)
    for month in report.monthly_totals:
        width = int(round(BAR_WIDTH * abs(month.amount) / largest)) if largest else 0
        click.echo(f"{month.name:<4} {'#' * width:<{BAR_WIDTH}} {format_money(month.amount, currency):>14}")


@click.command("dashboard")
@click.option("--insights", is_flag=True, help="Ask Gemini for a short business health summary")
@click.pass_context
def dashboard(ctx, insights: bool):
    """Show revenue figures across all invoices.

    Pending Amount counts invoices with status Pending only; drafts are not
    yet billed.

    Set GEMINI_API_KEY to use --insights.
    """
    store = ctx.obj["store"]
    app_settings = SettingsService(store).load()
    invoices = InvoiceService(store).list_invoices()
    currency = app_settings.currency

    if not invoices:
        click.echo("No invoices found. Create one to get started.")
        return

    report = build_dashboard_report(invoices)

    click.echo("\nDashboard")
    click.echo("-" * 60)
    click.echo(f"{'Total Revenue':<20} {format_money(report.total_revenue, currency):>20}")
    click.echo(f"{'Pending Amount':<20} {format_money(report.pending_amount, currency):>20}")
    click.echo(f"{'Total Invoices':<20} {report.invoice_count:>20}")
    click.echo(f"{'Paid Invoices':<20} {report.paid_count:>20}")

    click.echo("\nBy Status")
    click.echo("-" * 60)
    for status, count in report.status_counts.items():
        click.echo(f"{status.value:<20} {count:>20}")

    _display_monthly_totals(report, currency)

    if insights:
        click.echo("\nAI Insights")
        click.echo("-" * 60)
        click.echo(analyze_business_health(invoices, app_settings))


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
