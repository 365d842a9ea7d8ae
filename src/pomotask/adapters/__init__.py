"""Storage adapters implementing the KeyValueStore port."""

from .json_store import JsonFileStore
from .memory_store import MemoryStore

__all__ = ["JsonFileStore", "MemoryStore"]
