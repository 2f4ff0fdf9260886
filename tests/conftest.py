"""Shared pytest fixtures for invoicer tests."""

import tempfile
import os
from datetime import date
import pytest

from invoicer.domain.entities import (
    AppSettings,
    Client,
    Invoice,
    InvoiceItem,
    InvoiceStatus,
)
from invoicer.domain.calculator import apply_totals
from invoicer.domain.invoice import InvoiceService
from invoicer.domain.settings import SettingsService
from invoicer.storage.factories import create_sqlite_storage
from invoicer.storage.store import InvoiceStore


@pytest.fixture
def temp_storage():
    """Create a temporary SQLite key-value storage for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    storage = create_sqlite_storage(database_path=db_path)
    # Store the path for tests that need it
    storage.database_path = db_path
    storage.connect()
    storage.initialize_schema()

    yield storage

    storage.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def store(temp_storage):
    """Create an InvoiceStore over the temporary storage."""
    return InvoiceStore(temp_storage)


@pytest.fixture
def invoice_service(store):
    """Create an InvoiceService with a temporary store."""
    return InvoiceService(store)


@pytest.fixture
def settings_service(store):
    """Create a SettingsService with a temporary store."""
    return SettingsService(store)


@pytest.fixture
def default_settings():
    """Return the default settings record."""
    return AppSettings()


def make_invoice(
    invoice_id="inv000001",
    invoice_number="INV-0001",
    status=InvoiceStatus.DRAFT,
    issue_date=date(2024, 1, 15),
    items=(),
    tax_rate=10.0,
    client_name="Acme Corp",
    notes=None,
):
    """Build an invoice with totals already applied."""
    invoice = Invoice(
        id=invoice_id,
        invoice_number=invoice_number,
        date=issue_date,
        due_date=date.fromordinal(issue_date.toordinal() + 14),
        client=Client(name=client_name, email="billing@acme.test", address="1 Main St\nSpringfield"),
        items=tuple(items),
        status=status,
        notes=notes,
        tax_rate=tax_rate,
    )
    return apply_totals(invoice)


@pytest.fixture
def sample_invoice():
    """Return an invoice with two items: 2 x 10 and 1 x 5 at 10% tax."""
    return make_invoice(
        items=(
            InvoiceItem(id="item00001", description="Widget", quantity=2, price=10.0),
            InvoiceItem(id="item00002", description="Gadget", quantity=1, price=5.0),
        ),
        notes="Thank you for your business!",
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def invoice_factory():
    """Return a factory building invoices with totals applied."""
    return make_invoice
