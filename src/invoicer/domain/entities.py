"""Domain model entities for invoicer.

These are pure data classes representing business concepts, independent of
how they are encoded in storage. Edits never mutate an entity in place; they
build a replacement with ``dataclasses.replace``.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class InvoiceStatus(str, Enum):
    """Lifecycle status of an invoice."""

    DRAFT = "Draft"
    PENDING = "Pending"
    PAID = "Paid"
    OVERDUE = "Overdue"


@dataclass(frozen=True)
class Client:
    """Client details embedded by value in an invoice."""

    name: str
    email: str = ""
    address: str = ""


@dataclass(frozen=True)
class InvoiceItem:
    """Line item domain entity."""

    id: str
    description: str
    quantity: float
    price: float

    @property
    def line_total(self) -> float:
        """Quantity times unit price."""
        return self.quantity * self.price


@dataclass(frozen=True)
class Invoice:
    """Invoice domain entity.

    ``subtotal``, ``tax_amount`` and ``total`` are derived from ``items`` and
    ``tax_rate`` but are stored alongside them, so a saved invoice keeps the
    figures it was issued with.
    """

    id: str
    invoice_number: str
    date: date
    due_date: date
    client: Client
    items: tuple[InvoiceItem, ...] = ()
    status: InvoiceStatus = InvoiceStatus.DRAFT
    notes: Optional[str] = None
    tax_rate: float = 0.0
    subtotal: float = 0.0
    tax_amount: float = 0.0
    total: float = 0.0

    def find_item(self, item_id: str) -> Optional[InvoiceItem]:
        """Return the line item with the given ID, if present."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None


DEFAULT_LOGO_URL = "https://i.imgur.com/G5qWJ4p.jpeg"


@dataclass(frozen=True)
class AppSettings:
    """Business-wide settings record.

    ``tax_rate`` only seeds newly created invoices.
    """

    business_name: str = "Zia's Royalle"
    business_address: str = "123 Fashion Ave, New York, NY 10012"
    business_email: str = "contact@ziasroyalle.com"
    business_phone: str = "+1 (555) 012-3456"
    logo_url: str = DEFAULT_LOGO_URL
    primary_color: str = "#a855f7"
    currency: str = "$"
    tax_rate: float = 8.875


@dataclass(frozen=True)
class InvoiceTotals:
    """Derived monetary figures for an invoice."""

    subtotal: float
    tax_amount: float
    total: float


@dataclass(frozen=True)
class MonthlyTotal:
    """Sum of invoice totals for one calendar month name."""

    name: str
    amount: float


@dataclass(frozen=True)
class DashboardReport:
    """Aggregated figures over an invoice collection."""

    total_revenue: float
    pending_amount: float
    invoice_count: int
    status_counts: dict[InvoiceStatus, int] = field(default_factory=dict)
    monthly_totals: tuple[MonthlyTotal, ...] = ()

    @property
    def paid_count(self) -> int:
        """Number of invoices with status Paid."""
        return self.status_counts.get(InvoiceStatus.PAID, 0)
