"""Tests for the invoice domain service."""

from datetime import date, timedelta

import pytest

from invoicer.domain.entities import AppSettings, Client, InvoiceStatus
from invoicer.domain.errors import NotFoundError, ValidationError


def _assert_consistent(invoice):
    subtotal = sum(item.quantity * item.price for item in invoice.items)
    assert invoice.subtotal == pytest.approx(subtotal, abs=1e-9)
    assert invoice.tax_amount == pytest.approx(invoice.subtotal * invoice.tax_rate / 100, abs=1e-9)
    assert invoice.total == pytest.approx(invoice.subtotal + invoice.tax_amount, abs=1e-9)


class TestNewInvoice:
    """Tests for draft creation."""

    def test_new_invoice_defaults(self, invoice_service):
        """Test defaults for a new invoice."""
        settings = AppSettings(tax_rate=7.5)
        invoice = invoice_service.new_invoice(settings)

        assert invoice.date == date.today()
        assert invoice.due_date == date.today() + timedelta(days=14)
        assert invoice.items == ()
        assert invoice.status == InvoiceStatus.DRAFT
        assert invoice.tax_rate == 7.5
        assert invoice.total == 0
        assert invoice.invoice_number.startswith("INV-")
        assert len(invoice.id) == 9

    def test_new_invoice_with_client_and_date(self, invoice_service, default_settings):
        """Test explicit client and issue date."""
        client = Client(name="Jane Doe", email="jane@example.com")
        invoice = invoice_service.new_invoice(
            default_settings, client=client, issue_date=date(2024, 2, 20)
        )

        assert invoice.client == client
        assert invoice.due_date == date(2024, 3, 5)

    def test_new_invoice_not_saved(self, invoice_service, default_settings):
        """Test that creating a draft does not persist it."""
        invoice_service.new_invoice(default_settings)

        assert invoice_service.list_invoices() == []

    def test_tax_rate_snapshot(self, invoice_service, settings_service):
        """Test that later settings changes do not affect existing invoices."""
        settings = settings_service.load()
        invoice = invoice_service.add_item(invoice_service.new_invoice(settings), "Work", 1, 100)
        invoice_service.save(invoice)

        settings_service.save(settings_service.update(settings, tax_rate=20))

        stored = invoice_service.get_invoice(invoice.id)
        assert stored.tax_rate == 8.875
        assert stored.total == pytest.approx(108.875)


class TestItemEdits:
    """Tests for line item edits."""

    def test_add_item_recomputes(self, invoice_service, default_settings):
        """Test adding items updates totals."""
        invoice = invoice_service.new_invoice(default_settings)
        invoice = invoice_service.set_tax_rate(invoice, 10)
        invoice = invoice_service.add_item(invoice, "Widget", 2, 10)
        invoice = invoice_service.add_item(invoice, "Gadget", 1, 5)

        assert [item.description for item in invoice.items] == ["Widget", "Gadget"]
        assert invoice.subtotal == pytest.approx(25)
        assert invoice.tax_amount == pytest.approx(2.5)
        assert invoice.total == pytest.approx(27.5)

    def test_add_item_defaults(self, invoice_service, default_settings):
        """Test a blank item has quantity 1 and price 0."""
        invoice = invoice_service.add_item(invoice_service.new_invoice(default_settings))

        item = invoice.items[0]
        assert item.description == ""
        assert item.quantity == 1
        assert item.price == 0

    def test_add_item_does_not_mutate_original(self, invoice_service, sample_invoice):
        """Test edits return a new invoice."""
        updated = invoice_service.add_item(sample_invoice, "Extra", 1, 1)

        assert len(sample_invoice.items) == 2
        assert len(updated.items) == 3

    def test_update_item(self, invoice_service, sample_invoice):
        """Test updating an item keeps its position and ID."""
        updated = invoice_service.update_item(sample_invoice, "item00001", quantity=5, description="Widget XL")

        assert updated.items[0].id == "item00001"
        assert updated.items[0].quantity == 5
        assert updated.items[0].description == "Widget XL"
        assert updated.subtotal == pytest.approx(55)
        _assert_consistent(updated)

    def test_update_item_unknown_field(self, invoice_service, sample_invoice):
        """Test that item IDs cannot be changed."""
        with pytest.raises(ValidationError):
            invoice_service.update_item(sample_invoice, "item00001", id="new")

    def test_update_missing_item(self, invoice_service, sample_invoice):
        """Test updating an unknown item."""
        with pytest.raises(NotFoundError):
            invoice_service.update_item(sample_invoice, "nope", quantity=1)

    def test_remove_item(self, invoice_service, sample_invoice):
        """Test removing an item recomputes totals."""
        updated = invoice_service.remove_item(sample_invoice, "item00001")

        assert [item.id for item in updated.items] == ["item00002"]
        assert updated.subtotal == pytest.approx(5)
        _assert_consistent(updated)

    def test_remove_missing_item(self, invoice_service, sample_invoice):
        """Test removing an unknown item."""
        with pytest.raises(NotFoundError):
            invoice_service.remove_item(sample_invoice, "nope")

    def test_consistency_after_edit_sequence(self, invoice_service, default_settings):
        """Test totals stay consistent through a sequence of edits."""
        invoice = invoice_service.new_invoice(default_settings)
        invoice = invoice_service.add_item(invoice, "A", 3, 19.99)
        _assert_consistent(invoice)
        invoice = invoice_service.add_item(invoice, "B", 0.5, 120)
        _assert_consistent(invoice)
        invoice = invoice_service.set_tax_rate(invoice, 13)
        _assert_consistent(invoice)
        invoice = invoice_service.update_item(invoice, invoice.items[0].id, price=21.5)
        _assert_consistent(invoice)
        invoice = invoice_service.remove_item(invoice, invoice.items[1].id)
        _assert_consistent(invoice)
        invoice = invoice_service.set_tax_rate(invoice, 0)
        _assert_consistent(invoice)
        assert invoice.total == pytest.approx(64.5)


class TestDetailEdits:
    """Tests for invoice and client field edits."""

    def test_update_details(self, invoice_service, sample_invoice):
        """Test changing number, status and notes."""
        updated = invoice_service.update_details(
            sample_invoice, invoice_number="INV-9", status="Paid", notes="Paid in full"
        )

        assert updated.invoice_number == "INV-9"
        assert updated.status == InvoiceStatus.PAID
        assert updated.notes == "Paid in full"
        assert updated.total == sample_invoice.total

    def test_update_details_unknown_field(self, invoice_service, sample_invoice):
        """Test that totals cannot be edited directly."""
        with pytest.raises(ValidationError, match="total"):
            invoice_service.update_details(sample_invoice, total=1)

    def test_update_client(self, invoice_service, sample_invoice):
        """Test changing client fields."""
        updated = invoice_service.update_client(sample_invoice, name="New Co", email="")

        assert updated.client.name == "New Co"
        assert updated.client.email == ""
        assert updated.client.address == sample_invoice.client.address


class TestPersistence:
    """Tests for save, lookup and delete through the service."""

    def test_save_and_list(self, invoice_service, sample_invoice):
        """Test saving through the service."""
        invoice_service.save(sample_invoice)

        assert invoice_service.list_invoices() == [sample_invoice]

    def test_require_invoice_by_id_and_number(self, invoice_service, sample_invoice):
        """Test resolving by ID and by number."""
        invoice_service.save(sample_invoice)

        assert invoice_service.require_invoice(sample_invoice.id) == sample_invoice
        assert invoice_service.require_invoice("INV-0001") == sample_invoice

    def test_require_invoice_missing(self, invoice_service):
        """Test resolving an unknown reference."""
        with pytest.raises(NotFoundError, match="not found"):
            invoice_service.require_invoice("INV-404")

    def test_require_invoice_ambiguous_number(self, invoice_service, invoice_factory):
        """Test duplicate invoice numbers must be addressed by ID."""
        invoice_service.save(invoice_factory(invoice_id="a", invoice_number="INV-1"))
        invoice_service.save(invoice_factory(invoice_id="b", invoice_number="INV-1"))

        with pytest.raises(ValidationError, match="matches 2 invoices"):
            invoice_service.require_invoice("INV-1")
        assert invoice_service.require_invoice("b").id == "b"

    def test_delete(self, invoice_service, sample_invoice):
        """Test deleting through the service."""
        invoice_service.save(sample_invoice)
        invoice_service.delete(sample_invoice.id)

        assert invoice_service.get_invoice(sample_invoice.id) is None
