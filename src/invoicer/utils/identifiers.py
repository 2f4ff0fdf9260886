"""Identifier generation for invoices and line items."""

import random
import string

_BASE36_DIGITS = string.digits + string.ascii_lowercase
ID_LENGTH = 9


def generate_id() -> str:
    """Generate a short random base36 identifier.

    Identifiers are unique with high probability within one process. They are
    not cryptographically secure, not time-ordered, and not checked against
    existing records.

    Returns:
        A 9-character lowercase base36 string
    """
    value = random.getrandbits(ID_LENGTH * 6)
    chars = []
    for _ in range(ID_LENGTH):
        value, digit = divmod(value, 36)
        chars.append(_BASE36_DIGITS[digit])
    return "".join(chars)


def generate_invoice_number() -> str:
    """Generate a default user-facing invoice number such as ``INV-4821``."""
    return f"INV-{random.randrange(10000)}"
