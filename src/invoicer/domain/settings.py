"""Settings domain service."""

import re
from dataclasses import fields, replace
from typing import Any

from invoicer.domain.entities import AppSettings
from invoicer.domain.errors import ValidationError, unknown_fields
from invoicer.storage.store import InvoiceStore

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_SETTINGS_FIELDS = {f.name for f in fields(AppSettings)}


class SettingsService:
    """Service for loading and saving business settings.

    Settings are loaded once and passed explicitly to whatever needs them;
    nothing reads them from a global.
    """

    def __init__(self, store: InvoiceStore):
        """Initialize settings service.

        Args:
            store: Invoice store
        """
        self.store = store

    def load(self) -> AppSettings:
        """Load stored settings, or defaults if none were saved."""
        return self.store.get_settings()

    def update(self, settings: AppSettings, **changes: Any) -> AppSettings:
        """Return settings with the given fields replaced.

        Raises:
            ValidationError: If a field is unknown, the color is not a hex code,
                or the tax rate is negative
        """
        unknown = set(changes) - _SETTINGS_FIELDS
        if unknown:
            raise ValidationError(unknown_fields("settings", unknown))
        if "primary_color" in changes and not _HEX_COLOR.match(changes["primary_color"]):
            raise ValidationError(
                f"Primary color must be a hex code like '#a855f7', got '{changes['primary_color']}'"
            )
        if "tax_rate" in changes and changes["tax_rate"] < 0:
            raise ValidationError("Tax rate cannot be negative")
        return replace(settings, **changes)

    def save(self, settings: AppSettings) -> None:
        """Persist settings, replacing the stored record."""
        self.store.save_settings(settings)
