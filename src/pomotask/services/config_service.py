"""Configuration service for pomotask.

``ConfigService`` is the single owner of ``config.json`` in the platform config
directory. It creates the file with defaults on first run and exposes dotted
key access (``pomodoro.focus_duration``) for the ``config`` commands.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import ValidationError as PydanticValidationError

from pomotask.exceptions import PomotaskError, ValidationError
from pomotask.models.config_models import AppConfig
from pomotask.utils.logger import get_logger


class ConfigService:
    """Loads, saves and edits the application configuration."""

    def __init__(self, config_dir: Path | str | None = None):
        if config_dir is None:
            config_dir = user_config_dir("pomotask")

        self.config_dir = Path(config_dir)
        self.config_path = self.config_dir / "config.json"
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None
        self.logger = get_logger(__name__)

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from disk, writing defaults on first run."""
        if self._config is not None:
            return self._config

        try:
            self._config = AppConfig.model_validate_json(
                self.config_path.read_text(encoding="utf-8")
            )
        except FileNotFoundError:
            self.logger.info("no config at %s, writing defaults", self.config_path)
            self._config = AppConfig()
            self.save_config()
        except (OSError, PydanticValidationError) as e:
            raise PomotaskError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to disk."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(self.config.model_dump_json(indent=4), encoding="utf-8")
            self.config_path.chmod(0o600)
        except OSError as e:
            raise PomotaskError(f"Failed to save config: {e}") from e

    def reset_config(self) -> AppConfig:
        """Replace the configuration with defaults."""
        if self.config_path.exists():
            self.config_path.unlink()
        self._config = AppConfig()
        self.save_config()
        self.logger.info("config reset to defaults")
        return self._config

    def get_value(self, key: str) -> Any:
        """Return the value at a dotted key.

        Raises:
            ValidationError: If the key does not exist
        """
        node: Any = self.config.model_dump(mode="json")
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                raise ValidationError(f"Unknown configuration key '{key}'")
            node = node[part]
        return node

    def set_value(self, key: str, value: Any) -> AppConfig:
        """Set the value at a dotted key and save.

        The whole configuration is revalidated, so a value of the wrong type
        or out of range is rejected and nothing is written.
        """
        self.get_value(key)

        data = self.config.model_dump(mode="json")
        *parents, leaf = key.split(".")
        node = data
        for part in parents:
            node = node[part]
        node[leaf] = value

        try:
            updated = AppConfig.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid value for '{key}': {e}") from e

        self._config = updated
        self.save_config()
        self.logger.info("config %s set to %r", key, value)
        return updated


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
