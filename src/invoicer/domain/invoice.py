"""Invoice domain service."""

from dataclasses import fields, replace
from datetime import date
from typing import Any, Optional

from invoicer.domain.calculator import apply_totals
from invoicer.domain.entities import (
    AppSettings,
    Client,
    Invoice,
    InvoiceItem,
    InvoiceStatus,
)
from invoicer.domain.errors import (
    NotFoundError,
    ValidationError,
    ambiguous_invoice_number,
    invoice_not_found,
    item_not_found,
    unknown_fields,
)
from invoicer.storage.store import InvoiceStore
from invoicer.utils.date_parser import default_due_date
from invoicer.utils.identifiers import generate_id, generate_invoice_number
from invoicer.utils.logs import logger

log = logger(__name__)

_ITEM_FIELDS = {"description", "quantity", "price"}
_DETAIL_FIELDS = {"invoice_number", "date", "due_date", "status", "notes"}
_CLIENT_FIELDS = {f.name for f in fields(Client)}


def _check_fields(kind: str, changes: dict[str, Any], allowed: set[str]) -> None:
    unknown = set(changes) - allowed
    if unknown:
        raise ValidationError(unknown_fields(kind, unknown))


class InvoiceService:
    """Service for creating, editing and persisting invoices.

    Edit methods never touch storage. They return a new Invoice with its
    totals recomputed; call ``save`` to make the result durable.
    """

    def __init__(self, store: InvoiceStore):
        """Initialize invoice service.

        Args:
            store: Invoice store
        """
        self.store = store

    def new_invoice(
        self,
        settings: AppSettings,
        client: Optional[Client] = None,
        issue_date: Optional[date] = None,
    ) -> Invoice:
        """Create an unsaved draft invoice.

        Args:
            settings: Current settings; the invoice copies their tax rate
            client: Optional client details
            issue_date: Issue date (defaults to today); due date is 14 days later

        Returns:
            Draft invoice with no items
        """
        if issue_date is None:
            issue_date = date.today()
        invoice = Invoice(
            id=generate_id(),
            invoice_number=generate_invoice_number(),
            date=issue_date,
            due_date=default_due_date(issue_date),
            client=client if client is not None else Client(name=""),
            status=InvoiceStatus.DRAFT,
            tax_rate=settings.tax_rate,
        )
        return apply_totals(invoice)

    def add_item(
        self,
        invoice: Invoice,
        description: str = "",
        quantity: float = 1,
        price: float = 0,
    ) -> Invoice:
        """Append a new line item.

        Returns:
            Updated invoice; the new item is last in ``items``
        """
        item = InvoiceItem(
            id=generate_id(), description=description, quantity=quantity, price=price
        )
        return apply_totals(replace(invoice, items=invoice.items + (item,)))

    def remove_item(self, invoice: Invoice, item_id: str) -> Invoice:
        """Remove a line item by ID.

        Raises:
            NotFoundError: If the invoice has no such item
        """
        if invoice.find_item(item_id) is None:
            raise NotFoundError(item_not_found(item_id, invoice.invoice_number))
        items = tuple(item for item in invoice.items if item.id != item_id)
        return apply_totals(replace(invoice, items=items))

    def update_item(self, invoice: Invoice, item_id: str, **changes: Any) -> Invoice:
        """Change description, quantity or price of a line item in place.

        Raises:
            NotFoundError: If the invoice has no such item
            ValidationError: If changes name an unknown field
        """
        _check_fields("item", changes, _ITEM_FIELDS)
        if invoice.find_item(item_id) is None:
            raise NotFoundError(item_not_found(item_id, invoice.invoice_number))
        items = tuple(
            replace(item, **changes) if item.id == item_id else item
            for item in invoice.items
        )
        return apply_totals(replace(invoice, items=items))

    def set_tax_rate(self, invoice: Invoice, tax_rate: float) -> Invoice:
        """Change the invoice tax rate and recompute totals."""
        return apply_totals(replace(invoice, tax_rate=tax_rate))

    def update_details(self, invoice: Invoice, **changes: Any) -> Invoice:
        """Change invoice number, dates, status or notes.

        Raises:
            ValidationError: If changes name an unknown field
        """
        _check_fields("invoice", changes, _DETAIL_FIELDS)
        if "status" in changes:
            changes["status"] = InvoiceStatus(changes["status"])
        return apply_totals(replace(invoice, **changes))

    def update_client(self, invoice: Invoice, **changes: Any) -> Invoice:
        """Change client name, email or address.

        Raises:
            ValidationError: If changes name an unknown field
        """
        _check_fields("client", changes, _CLIENT_FIELDS)
        return replace(invoice, client=replace(invoice.client, **changes))

    def save(self, invoice: Invoice) -> None:
        """Persist an invoice, inserting or replacing it by ID."""
        self.store.save_invoice(invoice)
        log.debug("Saved invoice %s (%s)", invoice.invoice_number, invoice.id)

    def delete(self, invoice_id: str) -> None:
        """Delete an invoice by ID. Unknown IDs are ignored."""
        self.store.delete_invoice(invoice_id)

    def list_invoices(self) -> list[Invoice]:
        """List all invoices in stored order."""
        return self.store.get_invoices()

    def get_invoice(self, invoice_id: str) -> Optional[Invoice]:
        """Get invoice by ID."""
        return self.store.get_invoice(invoice_id)

    def require_invoice(self, invoice_ref: str) -> Invoice:
        """Resolve an invoice by ID, falling back to invoice number.

        Args:
            invoice_ref: Invoice ID or invoice number

        Raises:
            NotFoundError: If nothing matches
            ValidationError: If the number matches more than one invoice
        """
        invoices = self.store.get_invoices()
        for invoice in invoices:
            if invoice.id == invoice_ref:
                return invoice

        matches = [inv for inv in invoices if inv.invoice_number == invoice_ref]
        if len(matches) == 1:
            return matches[0]
        if len(matches) > 1:
            raise ValidationError(ambiguous_invoice_number(invoice_ref, len(matches)))
        raise NotFoundError(invoice_not_found(invoice_ref))
