"""Utility functions for invoicer."""

from invoicer.utils.date_parser import parse_date
from invoicer.utils.amount_parser import parse_amount, parse_percentage
from invoicer.utils.identifiers import generate_id, generate_invoice_number

__all__ = [
    "parse_date",
    "parse_amount",
    "parse_percentage",
    "generate_id",
    "generate_invoice_number",
]
