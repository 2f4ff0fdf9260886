"""Storage layer for invoicer application."""

from invoicer.storage.base import KeyValueStorage
from invoicer.storage.factories import create_sqlite_storage
from invoicer.storage.store import InvoiceStore, INVOICES_KEY, SETTINGS_KEY

__all__ = [
    "KeyValueStorage",
    "create_sqlite_storage",
    "InvoiceStore",
    "INVOICES_KEY",
    "SETTINGS_KEY",
]
