"""Printable plain-text invoice layout."""

from invoicer.domain.calculator import format_money
from invoicer.domain.entities import AppSettings, Invoice

LINE_WIDTH = 72
_RULE = "-" * LINE_WIDTH


def _format_quantity(quantity: float) -> str:
    return f"{quantity:g}"


def _format_rate(rate: float) -> str:
    return f"{rate:g}%"


def render_invoice(invoice: Invoice, settings: AppSettings) -> str:
    """Render an invoice as a printable text page.

    Layout: business header, invoice details, bill-to block, item table,
    totals and notes. Amounts are rounded to two decimals and prefixed with
    the settings currency.
    """
    currency = settings.currency
    lines: list[str] = []

    lines.append(f"{settings.business_name:<40}{'INVOICE':>{LINE_WIDTH - 40}}")
    for part in settings.business_address.splitlines():
        lines.append(part)
    contact = " | ".join(p for p in (settings.business_email, settings.business_phone) if p)
    if contact:
        lines.append(contact)
    lines.append(_RULE)

    lines.append(f"Invoice #: {invoice.invoice_number}")
    lines.append(f"Date:      {invoice.date.isoformat()}")
    lines.append(f"Due Date:  {invoice.due_date.isoformat()}")
    lines.append(f"Status:    {invoice.status.value}")
    lines.append("")

    lines.append("Bill To:")
    lines.append(f"  {invoice.client.name}")
    if invoice.client.email:
        lines.append(f"  {invoice.client.email}")
    for part in invoice.client.address.splitlines():
        lines.append(f"  {part}")
    lines.append(_RULE)

    lines.append(f"{'Description':<34} {'Qty':>8} {'Price':>13} {'Total':>14}")
    lines.append(_RULE)
    if not invoice.items:
        lines.append("(no items)")
    for item in invoice.items:
        lines.append(
            f"{item.description[:34]:<34} "
            f"{_format_quantity(item.quantity):>8} "
            f"{format_money(item.price, currency):>13} "
            f"{format_money(item.line_total, currency):>14}"
        )
    lines.append(_RULE)

    label_width = LINE_WIDTH - 16
    lines.append(f"{'Subtotal':>{label_width}} {format_money(invoice.subtotal, currency):>15}")
    tax_label = f"Tax ({_format_rate(invoice.tax_rate)})"
    lines.append(f"{tax_label:>{label_width}} {format_money(invoice.tax_amount, currency):>15}")
    lines.append(f"{'Total':>{label_width}} {format_money(invoice.total, currency):>15}")

    if invoice.notes:
        lines.append("")
        lines.append("Notes:")
        for part in invoice.notes.splitlines():
            lines.append(f"  {part}")

    return "\n".join(lines)
