"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class CorruptedStateError(DomainError):
    """A stored value exists but cannot be decoded into its record shape."""

    def __init__(self, key: str, reason: str):
        super().__init__(corrupted_key(key, reason))
        self.key = key
        self.reason = reason


def invoice_not_found(invoice_ref: str) -> str:
    """Return message for missing invoice by ID or number."""
    return f"Invoice '{invoice_ref}' not found"


def item_not_found(item_id: str, invoice_number: str) -> str:
    """Return message for missing line item."""
    return f"Item '{item_id}' not found on invoice {invoice_number}"


def ambiguous_invoice_number(invoice_number: str, count: int) -> str:
    """Return message when several invoices share a number."""
    return (
        f"Invoice number '{invoice_number}' matches {count} invoices. "
        "Use the invoice ID instead."
    )


def unknown_fields(kind: str, fields: set[str]) -> str:
    """Return message for edits naming fields the record does not have."""
    return f"Unknown {kind} field{'s' if len(fields) != 1 else ''}: {', '.join(sorted(fields))}"


def corrupted_key(key: str, reason: str) -> str:
    """Return message for a stored key that failed to decode."""
    return f"Stored '{key}' data is corrupted: {reason}"
