"""Tests for identifier generation and input parsers."""

from datetime import date, timedelta

import pytest

from invoicer.utils.amount_parser import parse_amount, parse_percentage
from invoicer.utils.date_parser import default_due_date, parse_date
from invoicer.utils.identifiers import generate_id, generate_invoice_number


class TestIdentifiers:
    """Tests for identifier generation."""

    def test_generate_id_shape(self):
        """Test IDs are 9 lowercase base36 characters."""
        value = generate_id()

        assert len(value) == 9
        assert all(c in "0123456789abcdefghijklmnopqrstuvwxyz" for c in value)

    def test_generate_id_unique(self):
        """Test 10,000 IDs have no duplicates."""
        ids = {generate_id() for _ in range(10_000)}

        assert len(ids) == 10_000

    def test_generate_invoice_number(self):
        """Test default invoice number format."""
        number = generate_invoice_number()

        assert number.startswith("INV-")
        assert 0 <= int(number[4:]) < 10000


class TestParseDate:
    """Tests for date parsing."""

    def test_parse_absolute_date(self):
        """Test parsing absolute dates."""
        assert parse_date("2024-01-15") == date(2024, 1, 15)
        assert parse_date("January 15, 2024") == date(2024, 1, 15)

    def test_parse_relative(self):
        """Test parsing relative words."""
        today = date(2024, 3, 13)

        assert parse_date("today", today=today) == today
        assert parse_date("Tomorrow", today=today) == date(2024, 3, 14)
        assert parse_date("yesterday", today=today) == date(2024, 3, 12)

    def test_parse_in_period(self):
        """Test 'in N days/weeks/months'."""
        today = date(2024, 1, 31)

        assert parse_date("in 14 days", today=today) == date(2024, 2, 14)
        assert parse_date("in 2 weeks", today=today) == date(2024, 2, 14)
        assert parse_date("in 1 month", today=today) == date(2024, 2, 29)

    def test_parse_next_month(self):
        """Test 'next month' is the first of next month."""
        assert parse_date("next month", today=date(2024, 12, 10)) == date(2025, 1, 1)

    def test_parse_invalid(self):
        """Test invalid input raises ValueError."""
        with pytest.raises(ValueError, match="Could not parse date"):
            parse_date("not a date")

    def test_default_due_date(self):
        """Test the 14 day payment term."""
        assert default_due_date(date(2024, 1, 1)) == date(2024, 1, 1) + timedelta(days=14)


class TestParseAmount:
    """Tests for amount parsing."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("123.45", 123.45),
            ("$123.45", 123.45),
            ("1,234.56", 1234.56),
            ("€ 99", 99.0),
            ("(10.00)", -10.0),
        ],
    )
    def test_parse_amount(self, text, expected):
        """Test amount formats."""
        assert parse_amount(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "   ", "abc"])
    def test_parse_amount_invalid(self, text):
        """Test invalid amounts."""
        with pytest.raises(ValueError):
            parse_amount(text)

    def test_parse_percentage(self):
        """Test percentage parsing."""
        assert parse_percentage("8.875") == 8.875
        assert parse_percentage("10%") == 10.0
        with pytest.raises(ValueError):
            parse_percentage("ten")
