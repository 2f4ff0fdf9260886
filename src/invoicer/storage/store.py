"""Invoice and settings persistence over a key-value storage backend.

Two logical collections live under two keys: ``settings`` holds one JSON
object and ``invoices`` holds one JSON array. Every invoice mutation reads
the whole array, changes it in memory and writes it back. The
read-modify-write is not atomic, so two writers racing on the same backend
can lose updates (last write wins). Callers that share a backend between
threads or processes must serialize store calls themselves.
"""

import json
from typing import Any, Optional

from invoicer.domain.entities import AppSettings, Invoice
from invoicer.domain.errors import CorruptedStateError
from invoicer.storage.base import KeyValueStorage
from invoicer.storage.mappers import (
    RecordShapeError,
    invoice_to_domain,
    invoice_to_record,
    settings_to_domain,
    settings_to_record,
)
from invoicer.utils.logs import logger

SETTINGS_KEY = "settings"
INVOICES_KEY = "invoices"

log = logger(__name__)


class InvoiceStore:
    """Store for the AppSettings singleton and the invoice collection."""

    def __init__(self, storage: KeyValueStorage):
        """Initialize invoice store.

        Args:
            storage: Key-value storage backend
        """
        self.storage = storage

    def _load(self, key: str) -> Optional[Any]:
        raw = self.storage.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptedStateError(key, str(e)) from e

    def _load_records(self) -> list[Any]:
        records = self._load(INVOICES_KEY)
        if records is None:
            return []
        if not isinstance(records, list):
            raise CorruptedStateError(INVOICES_KEY, "expected a JSON array")
        return records

    def _write_invoices(self, invoices: list[Invoice]) -> None:
        records = [invoice_to_record(invoice) for invoice in invoices]
        self.storage.set(INVOICES_KEY, json.dumps(records))

    def get_settings(self) -> AppSettings:
        """Get stored settings, or the defaults when none were ever saved.

        Defaults are not written back.

        Raises:
            CorruptedStateError: If stored settings cannot be decoded
        """
        record = self._load(SETTINGS_KEY)
        if record is None:
            return AppSettings()
        try:
            return settings_to_domain(record)
        except RecordShapeError as e:
            raise CorruptedStateError(SETTINGS_KEY, str(e)) from e

    def save_settings(self, settings: AppSettings) -> None:
        """Overwrite stored settings with the given record."""
        self.storage.set(SETTINGS_KEY, json.dumps(settings_to_record(settings)))
        log.debug("Saved settings for '%s'", settings.business_name)

    def get_invoices(self) -> list[Invoice]:
        """Get all invoices in persisted order.

        Raises:
            CorruptedStateError: If the stored collection cannot be decoded
        """
        try:
            return [invoice_to_domain(record) for record in self._load_records()]
        except RecordShapeError as e:
            raise CorruptedStateError(INVOICES_KEY, str(e)) from e

    def get_invoice(self, invoice_id: str) -> Optional[Invoice]:
        """Get invoice by ID."""
        for invoice in self.get_invoices():
            if invoice.id == invoice_id:
                return invoice
        return None

    def save_invoice(self, invoice: Invoice) -> None:
        """Insert or replace an invoice by ID.

        A replaced invoice keeps its position in the collection; a new one is
        appended.
        """
        invoices = self.get_invoices()
        for index, existing in enumerate(invoices):
            if existing.id == invoice.id:
                invoices[index] = invoice
                log.debug("Replaced invoice %s at position %d", invoice.id, index)
                break
        else:
            invoices.append(invoice)
            log.debug("Appended invoice %s", invoice.id)
        self._write_invoices(invoices)

    def delete_invoice(self, invoice_id: str) -> None:
        """Delete an invoice by ID. Unknown IDs are ignored."""
        invoices = self.get_invoices()
        remaining = [invoice for invoice in invoices if invoice.id != invoice_id]
        if len(remaining) == len(invoices):
            return
        self._write_invoices(remaining)
        log.debug("Deleted invoice %s", invoice_id)
