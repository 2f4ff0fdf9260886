"""Tests for the settings domain service."""

import pytest

from invoicer.domain.entities import AppSettings
from invoicer.domain.errors import ValidationError


def test_load_defaults(settings_service):
    """Test loading with nothing saved."""
    assert settings_service.load() == AppSettings()


def test_update_returns_new_record(settings_service):
    """Test update does not persist or mutate."""
    current = settings_service.load()
    updated = settings_service.update(current, business_name="Acme Studio", currency="€")

    assert updated.business_name == "Acme Studio"
    assert updated.currency == "€"
    assert current.business_name == "Zia's Royalle"
    assert settings_service.load() == AppSettings()


def test_save_then_load(settings_service):
    """Test explicit save makes changes durable."""
    updated = settings_service.update(settings_service.load(), tax_rate=5.0)
    settings_service.save(updated)

    assert settings_service.load().tax_rate == 5.0


@pytest.mark.parametrize("color", ["#fff", "#A855F7", "#a855f7"])
def test_update_accepts_hex_colors(settings_service, color):
    """Test valid hex colors."""
    updated = settings_service.update(AppSettings(), primary_color=color)

    assert updated.primary_color == color


@pytest.mark.parametrize("color", ["purple", "#12345", "a855f7"])
def test_update_rejects_bad_colors(settings_service, color):
    """Test invalid colors are rejected."""
    with pytest.raises(ValidationError, match="hex"):
        settings_service.update(AppSettings(), primary_color=color)


def test_update_rejects_negative_tax(settings_service):
    """Test negative default tax rates are rejected."""
    with pytest.raises(ValidationError, match="negative"):
        settings_service.update(AppSettings(), tax_rate=-1)


def test_update_rejects_unknown_field(settings_service):
    """Test unknown settings fields."""
    with pytest.raises(ValidationError, match="Unknown settings field"):
        settings_service.update(AppSettings(), theme="dark")
