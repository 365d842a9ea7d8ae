"""Typed JSON documents on top of a key-value store."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from pomotask.exceptions import StorageError
from pomotask.repositories.repository import KeyValueStore

T = TypeVar("T")


class StoredDocument(Generic[T]):
    """One JSON value of type ``T`` kept under a single key.

    Dates round-trip through ISO 8601 strings via pydantic::

        tasks = StoredDocument(store, TASKS_KEY, list[Task])
        tasks.save([...])
        tasks.load(default=[])
    """

    def __init__(self, store: KeyValueStore, key: str, type_: Any):
        self.store = store
        self.key = key
        self._adapter: TypeAdapter[T] = TypeAdapter(type_)

    def load(self, default: T) -> T:
        """Decode the stored value, or return *default* when the key is absent.

        Raises:
            StorageError: If the stored bytes are not a valid encoding
        """
        raw = self.store.load(self.key)
        if raw is None:
            return default
        try:
            return self._adapter.validate_json(raw)
        except PydanticValidationError as e:
            raise StorageError(f"Corrupt data under '{self.key}': {e}", key=self.key) from e

    def save(self, value: T) -> None:
        self.store.save(self.key, self._adapter.dump_json(value, indent=2))

    def remove(self) -> None:
        self.store.remove(self.key)
