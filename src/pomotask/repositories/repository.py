"""Persistence gateway abstraction.

Services never talk to files directly; they go through a ``KeyValueStore``
(a port, in hexagonal terms). Each key holds one whole collection, so every
save replaces the previous snapshot in full.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

TASKS_KEY = "app_tasks"
FOCUS_LOGS_KEY = "focus_logs"
SETTINGS_KEY = "app_settings"
POSTS_KEY = "sns_posts"


class KeyValueStore(ABC):
    """Durable byte storage addressed by key."""

    @abstractmethod
    def load(self, key: str) -> bytes | None:
        """Return the stored bytes for *key*, or None when absent.

        Raises:
            StorageError: If the backend cannot be read
        """
        raise NotImplementedError("KeyValueStore.load() must be implemented by adapter")

    @abstractmethod
    def save(self, key: str, data: bytes) -> None:
        """Replace the value stored under *key*.

        A failed save must leave the previous value intact.

        Raises:
            StorageError: If the value could not be written
        """
        raise NotImplementedError("KeyValueStore.save() must be implemented by adapter")

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete *key*. Removing an absent key is not an error.

        Raises:
            StorageError: If the value could not be removed
        """
        raise NotImplementedError("KeyValueStore.remove() must be implemented by adapter")
