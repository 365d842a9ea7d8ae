"""Settings service - user preferences persisted in the key-value store."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from pomotask.exceptions import StorageError, ValidationError
from pomotask.models.config_models import FontSize, Settings, Theme, WeekStart
from pomotask.repositories import SETTINGS_KEY, KeyValueStore, StoredDocument
from pomotask.utils.logger import get_logger


class SettingsService:
    """Loads and updates :class:`Settings`, falling back to defaults."""

    def __init__(self, store: KeyValueStore):
        self._document: StoredDocument[Settings] = StoredDocument(store, SETTINGS_KEY, Settings)
        self._settings: Settings | None = None
        self.logger = get_logger(__name__)

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = self._document.load(default=Settings())
        return self._settings

    def update(self, **changes: Any) -> Settings:
        """Validate and persist a partial settings change.

        Raises:
            ValidationError: If a key is unknown or a value is not allowed
        """
        unknown = set(changes) - set(Settings.model_fields)
        if unknown:
            raise ValidationError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
        try:
            updated = Settings.model_validate({**self.settings.model_dump(), **changes})
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid setting: {e}") from e

        self._settings = updated
        try:
            self._document.save(updated)
        except StorageError:
            self.logger.error("failed to persist settings")
            raise
        self.logger.info("settings updated: %s", ", ".join(sorted(changes)))
        return updated

    def update_theme(self, theme: Theme) -> Settings:
        return self.update(theme=theme)

    def update_font_size(self, font_size: FontSize) -> Settings:
        return self.update(font_size=font_size)

    def update_week_start(self, week_start: WeekStart) -> Settings:
        return self.update(week_start=week_start)

    def update_reminder_enabled(self, enabled: bool) -> Settings:
        return self.update(reminder_enabled=enabled)
