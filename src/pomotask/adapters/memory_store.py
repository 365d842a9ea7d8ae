"""In-memory key-value store for tests and throwaway runs."""

from __future__ import annotations

from pomotask.repositories.repository import KeyValueStore


class MemoryStore(KeyValueStore):
    """Dict-backed store; nothing survives the process."""

    def __init__(self, initial: dict[str, bytes] | None = None):
        self.data: dict[str, bytes] = dict(initial or {})

    def load(self, key: str) -> bytes | None:
        return self.data.get(key)

    def save(self, key: str, data: bytes) -> None:
        self.data[key] = bytes(data)

    def remove(self, key: str) -> None:
        self.data.pop(key, None)
