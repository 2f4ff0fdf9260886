"""CLI helpers for invoice resolution and error handling."""

from __future__ import annotations

import click
from invoicer.domain.entities import Invoice
from invoicer.domain.invoice import InvoiceService
from invoicer.cli.error_handling import handle_domain_error


def resolve_invoice_or_exit(
    ctx: click.Context, invoice_service: InvoiceService, invoice_ref: str
) -> Invoice:
    """Resolve invoice ID or number, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return invoice_service.require_invoice(invoice_ref)
    except ValueError as exc:
        handle_domain_error(ctx, exc)
