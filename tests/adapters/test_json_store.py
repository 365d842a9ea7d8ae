"""Tests for the file-backed key-value store."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from pomotask.adapters import JsonFileStore
from pomotask.exceptions import StorageError


@pytest.fixture()
def json_store(tmp_path) -> JsonFileStore:
    return JsonFileStore(tmp_path / "store")


def test_missing_key_loads_none(json_store):
    assert json_store.load("app_tasks") is None


def test_save_then_load(json_store):
    json_store.save("app_tasks", b'[{"id": "t1"}]')
    assert json_store.load("app_tasks") == b'[{"id": "t1"}]'
    assert (json_store.data_dir / "app_tasks.json").exists()


def test_saved_file_is_private(json_store):
    json_store.save("app_settings", b"{}")
    mode = (json_store.data_dir / "app_settings.json").stat().st_mode & 0o777
    assert mode == 0o600


def test_overwrite_leaves_no_temp_files(json_store):
    json_store.save("focus_logs", b"[]")
    json_store.save("focus_logs", b"[1]")
    assert sorted(p.name for p in json_store.data_dir.iterdir()) == ["focus_logs.json"]


def test_failed_save_keeps_previous_snapshot(json_store):
    json_store.save("app_tasks", b"old")
    with patch("pomotask.adapters.json_store.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(StorageError) as exc_info:
            json_store.save("app_tasks", b"new")

    assert exc_info.value.key == "app_tasks"
    assert json_store.load("app_tasks") == b"old"
    assert [p.name for p in json_store.data_dir.iterdir()] == ["app_tasks.json"]


def test_remove(json_store):
    json_store.save("sns_posts", b"[]")
    json_store.remove("sns_posts")
    json_store.remove("sns_posts")
    assert json_store.load("sns_posts") is None


@pytest.mark.parametrize("key", ["../escape", "a/b", "", "spaced key"])
def test_rejects_unsafe_keys(json_store, key):
    with pytest.raises(StorageError, match="Invalid storage key"):
        json_store.load(key)


def test_default_directory_uses_platform_data_dir(isolate_dirs):
    store = JsonFileStore()
    assert store.data_dir == isolate_dirs / "data" / "store"
    assert store.data_dir.is_dir()


@pytest.mark.skipif(os.geteuid() == 0, reason="root ignores directory permissions")
def test_unreadable_file_raises_storage_error(json_store):
    json_store.save("app_tasks", b"[]")
    path = json_store.data_dir / "app_tasks.json"
    path.chmod(0)
    try:
        with pytest.raises(StorageError):
            json_store.load("app_tasks")
    finally:
        path.chmod(0o600)
