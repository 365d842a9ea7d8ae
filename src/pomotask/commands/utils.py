"""Helpers shared by the command modules."""

from __future__ import annotations

from datetime import date, datetime

import typer

from pomotask.adapters import JsonFileStore
from pomotask.services.config_service import get_config_service
from pomotask.services.container import Services, build_services


def get_services() -> Services:
    """Build the services for this invocation from the current configuration."""
    config = get_config_service().config
    return build_services(config, JsonFileStore(config.storage.data_dir))


def parse_when(value: str | None) -> tuple[datetime | None, bool]:
    """Parse ``YYYY-MM-DD`` or ``YYYY-MM-DDTHH:MM`` into (scheduled_at, has_time)."""
    if value is None:
        return None, False
    try:
        if "T" in value or " " in value:
            return datetime.fromisoformat(value).astimezone(), True
        day = date.fromisoformat(value)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid date '{value}', use YYYY-MM-DD[THH:MM]") from e
    return datetime(day.year, day.month, day.day).astimezone(), False
