"""Persistence ports for pomotask."""

from .collection import StoredDocument
from .repository import (
    FOCUS_LOGS_KEY,
    POSTS_KEY,
    SETTINGS_KEY,
    TASKS_KEY,
    KeyValueStore,
)

__all__ = [
    "FOCUS_LOGS_KEY",
    "KeyValueStore",
    "POSTS_KEY",
    "SETTINGS_KEY",
    "StoredDocument",
    "TASKS_KEY",
]
