"""Mapper functions to convert between domain entities and stored JSON records.

Records use the camelCase field names of the original browser storage layout,
so stored documents stay readable by anything that expects that shape.
"""

from datetime import date
from typing import Any

from invoicer.domain.entities import (
    AppSettings,
    Client,
    Invoice,
    InvoiceItem,
    InvoiceStatus,
)

_SETTINGS_FIELDS = {
    "businessName": "business_name",
    "businessAddress": "business_address",
    "businessEmail": "business_email",
    "businessPhone": "business_phone",
    "logoUrl": "logo_url",
    "primaryColor": "primary_color",
    "currency": "currency",
    "taxRate": "tax_rate",
}


class RecordShapeError(ValueError):
    """A decoded JSON value does not have the expected record shape."""


def _require(record: Any, field: str) -> Any:
    if not isinstance(record, dict):
        raise RecordShapeError(f"expected an object, got {type(record).__name__}")
    if field not in record:
        raise RecordShapeError(f"missing field '{field}'")
    return record[field]


def _number(record: dict, field: str) -> float:
    value = _require(record, field)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RecordShapeError(f"field '{field}' must be a number")
    return float(value)


def _string(record: dict, field: str) -> str:
    value = _require(record, field)
    if not isinstance(value, str):
        raise RecordShapeError(f"field '{field}' must be a string")
    return value


def _optional_string(record: dict, field: str) -> str:
    value = record.get(field)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise RecordShapeError(f"field '{field}' must be a string")
    return value


def _iso_date(record: dict, field: str) -> date:
    value = _string(record, field)
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise RecordShapeError(f"field '{field}' is not an ISO date: '{value}'")


def client_to_record(client: Client) -> dict[str, Any]:
    """Convert a Client entity to its stored record."""
    return {"name": client.name, "email": client.email, "address": client.address}


def client_to_domain(record: Any) -> Client:
    """Convert a stored client record to a Client entity."""
    return Client(
        name=_string(record, "name"),
        email=_optional_string(record, "email"),
        address=_optional_string(record, "address"),
    )


def item_to_record(item: InvoiceItem) -> dict[str, Any]:
    """Convert an InvoiceItem entity to its stored record."""
    return {
        "id": item.id,
        "description": item.description,
        "quantity": item.quantity,
        "price": item.price,
    }


def item_to_domain(record: Any) -> InvoiceItem:
    """Convert a stored item record to an InvoiceItem entity."""
    return InvoiceItem(
        id=_string(record, "id"),
        description=_string(record, "description"),
        quantity=_number(record, "quantity"),
        price=_number(record, "price"),
    )


def invoice_to_record(invoice: Invoice) -> dict[str, Any]:
    """Convert an Invoice entity to its stored record."""
    record: dict[str, Any] = {
        "id": invoice.id,
        "invoiceNumber": invoice.invoice_number,
        "date": invoice.date.isoformat(),
        "dueDate": invoice.due_date.isoformat(),
        "client": client_to_record(invoice.client),
        "items": [item_to_record(item) for item in invoice.items],
        "status": invoice.status.value,
        "subtotal": invoice.subtotal,
        "taxRate": invoice.tax_rate,
        "taxAmount": invoice.tax_amount,
        "total": invoice.total,
    }
    if invoice.notes is not None:
        record["notes"] = invoice.notes
    return record


def invoice_to_domain(record: Any) -> Invoice:
    """Convert a stored invoice record to an Invoice entity.

    Derived fields are taken as stored, never recomputed.

    Raises:
        RecordShapeError: If the record is missing fields or has wrong types
    """
    items = _require(record, "items")
    if not isinstance(items, list):
        raise RecordShapeError("field 'items' must be a list")
    status = _string(record, "status")
    try:
        invoice_status = InvoiceStatus(status)
    except ValueError:
        raise RecordShapeError(f"unknown invoice status '{status}'")
    notes = record.get("notes")
    return Invoice(
        id=_string(record, "id"),
        invoice_number=_string(record, "invoiceNumber"),
        date=_iso_date(record, "date"),
        due_date=_iso_date(record, "dueDate"),
        client=client_to_domain(_require(record, "client")),
        items=tuple(item_to_domain(item) for item in items),
        status=invoice_status,
        notes=notes if isinstance(notes, str) else None,
        tax_rate=_number(record, "taxRate"),
        subtotal=_number(record, "subtotal"),
        tax_amount=_number(record, "taxAmount"),
        total=_number(record, "total"),
    )


def settings_to_record(settings: AppSettings) -> dict[str, Any]:
    """Convert AppSettings to its stored record."""
    return {key: getattr(settings, attr) for key, attr in _SETTINGS_FIELDS.items()}


def settings_to_domain(record: Any) -> AppSettings:
    """Convert a stored settings record to AppSettings.

    Raises:
        RecordShapeError: If the record is missing fields or has wrong types
    """
    values: dict[str, Any] = {}
    for key, attr in _SETTINGS_FIELDS.items():
        values[attr] = _number(record, key) if key == "taxRate" else _string(record, key)
    return AppSettings(**values)
