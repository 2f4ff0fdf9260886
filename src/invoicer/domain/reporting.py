"""Revenue reporting over invoice collections."""

import calendar
from typing import Iterable, Sequence

from invoicer.domain.entities import (
    DashboardReport,
    Invoice,
    InvoiceStatus,
    MonthlyTotal,
)

# Statuses counted as outstanding money. Drafts are not yet billed.
OUTSTANDING_STATUSES = frozenset({InvoiceStatus.PENDING})


def total_for_status(invoices: Iterable[Invoice], statuses: Iterable[InvoiceStatus]) -> float:
    """Sum invoice totals over the given statuses."""
    wanted = set(statuses)
    return sum((inv.total for inv in invoices if inv.status in wanted), 0.0)


def total_revenue(invoices: Iterable[Invoice]) -> float:
    """Sum of totals of paid invoices."""
    return total_for_status(invoices, {InvoiceStatus.PAID})


def pending_amount(invoices: Iterable[Invoice]) -> float:
    """Sum of totals of invoices still awaiting payment."""
    return total_for_status(invoices, OUTSTANDING_STATUSES)


def month_name(invoice: Invoice) -> str:
    """Abbreviated month name of the invoice issue date, e.g. ``Jan``."""
    return calendar.month_abbr[invoice.date.month]


def monthly_totals(invoices: Iterable[Invoice]) -> tuple[MonthlyTotal, ...]:
    """Sum invoice totals per issue month name.

    Months appear in the order they are first seen in ``invoices``, not in
    calendar order. Months of different years share a bucket.
    """
    buckets: dict[str, float] = {}
    for invoice in invoices:
        name = month_name(invoice)
        buckets[name] = buckets.get(name, 0.0) + invoice.total
    return tuple(MonthlyTotal(name=name, amount=amount) for name, amount in buckets.items())


def status_counts(invoices: Iterable[Invoice]) -> dict[InvoiceStatus, int]:
    """Count invoices per status; every status is present."""
    counts = {status: 0 for status in InvoiceStatus}
    for invoice in invoices:
        counts[invoice.status] += 1
    return counts


def build_dashboard_report(invoices: Sequence[Invoice]) -> DashboardReport:
    """Build the dashboard figures for an invoice collection.

    Args:
        invoices: Invoices in stored order

    Returns:
        DashboardReport with revenue, outstanding amount, counts and the
        month series
    """
    return DashboardReport(
        total_revenue=total_revenue(invoices),
        pending_amount=pending_amount(invoices),
        invoice_count=len(invoices),
        status_counts=status_counts(invoices),
        monthly_totals=monthly_totals(invoices),
    )
