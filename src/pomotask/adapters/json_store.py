"""File-backed key-value store, one JSON file per key."""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path

from platformdirs import user_data_dir

from pomotask.exceptions import StorageError
from pomotask.repositories.repository import KeyValueStore
from pomotask.utils.logger import get_logger

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileStore(KeyValueStore):
    """Stores each key as ``<data_dir>/<key>.json``.

    Writes go to a temporary file in the same directory and are moved into
    place with ``os.replace``, so a failed save never leaves a half-written
    file behind and the previous snapshot stays readable.
    """

    def __init__(self, data_dir: Path | str | None = None):
        """Initialize the store.

        Args:
            data_dir: Directory for the JSON files. Defaults to the platform
                user data directory.
        """
        if data_dir is None:
            data_dir = Path(user_data_dir("pomotask")) / "store"

        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.logger = get_logger(__name__)

    def path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise StorageError(f"Invalid storage key: {key!r}", key=key)
        return self.data_dir / f"{key}.json"

    def load(self, key: str) -> bytes | None:
        path = self.path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            self.logger.error("load failed for %s: %s", key, e)
            raise StorageError(f"Failed to load '{key}': {e}", key=key) from e

    def save(self, key: str, data: bytes) -> None:
        path = self.path_for(key)
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "wb", dir=self.data_dir, prefix=f".{key}.", suffix=".tmp", delete=False
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            self.logger.error("save failed for %s: %s", key, e)
            raise StorageError(f"Failed to save '{key}': {e}", key=key) from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        self.logger.debug("saved %s (%d bytes)", key, len(data))

    def remove(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            self.logger.error("remove failed for %s: %s", key, e)
            raise StorageError(f"Failed to remove '{key}': {e}", key=key) from e
