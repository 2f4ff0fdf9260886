"""Invoice total calculations."""

from dataclasses import replace
from typing import Iterable

from invoicer.domain.entities import Invoice, InvoiceItem, InvoiceTotals


def calculate_totals(items: Iterable[InvoiceItem], tax_rate: float) -> InvoiceTotals:
    """Derive subtotal, tax amount and total from line items.

    Plain float arithmetic. Inputs are not validated; negative quantities or
    prices flow straight through.

    Args:
        items: Line items in invoice order
        tax_rate: Tax rate as a percentage (e.g. 8.875)

    Returns:
        InvoiceTotals with full-precision values
    """
    subtotal = sum((item.quantity * item.price for item in items), 0.0)
    tax_amount = subtotal * tax_rate / 100
    return InvoiceTotals(subtotal=subtotal, tax_amount=tax_amount, total=subtotal + tax_amount)


def apply_totals(invoice: Invoice) -> Invoice:
    """Return a copy of the invoice with its derived fields recomputed."""
    totals = calculate_totals(invoice.items, invoice.tax_rate)
    return replace(
        invoice,
        subtotal=totals.subtotal,
        tax_amount=totals.tax_amount,
        total=totals.total,
    )


def round_money(value: float) -> float:
    """Round a monetary value to two decimal places for display."""
    return round(value, 2)


def format_money(value: float, currency: str = "$") -> str:
    """Format a monetary value with a currency prefix, e.g. ``$1,234.50``."""
    return f"{currency}{round_money(value):,.2f}"
