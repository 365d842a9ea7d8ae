"""Shared test fixtures and configuration.

Every test runs with platform directories redirected into *tmp_path*, so no
log, config or data file is written outside the test sandbox.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from unittest.mock import patch

import pytest

from pomotask.adapters import MemoryStore


class FakeClock:
    """Controllable clock returning aware local datetimes."""

    def __init__(self, start: datetime):
        self.now = start.astimezone()

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)

    def set(self, value: datetime) -> None:
        self.now = value.astimezone()


@pytest.fixture(autouse=True)
def isolate_dirs(tmp_path):
    """Redirect platform dirs and reset the cached logger and config service."""
    import pomotask.utils.logger as logger_mod
    from pomotask.services.config_service import get_config_service

    logger_mod._root = None
    logging.getLogger(logger_mod.ROOT_LOGGER_NAME).handlers.clear()
    get_config_service.cache_clear()

    with (
        patch("pomotask.utils.logger.user_log_dir", return_value=str(tmp_path / "log")),
        patch("pomotask.services.config_service.user_config_dir", return_value=str(tmp_path / "config")),
        patch("pomotask.adapters.json_store.user_data_dir", return_value=str(tmp_path / "data")),
    ):
        yield tmp_path

    get_config_service.cache_clear()
    for handler in logging.getLogger(logger_mod.ROOT_LOGGER_NAME).handlers:
        handler.close()
    logging.getLogger(logger_mod.ROOT_LOGGER_NAME).handlers.clear()
    logger_mod._root = None


@pytest.fixture()
def clock() -> FakeClock:
    """Clock fixed at Tuesday 2026-01-20 10:00 local time."""
    return FakeClock(datetime(2026, 1, 20, 10, 0))


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()
