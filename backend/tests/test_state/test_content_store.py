"""Tests for the hash-keyed content store and its storage backends."""

from __future__ import annotations

import logging
import os

import pytest

from brandbento.state.content_store import (
    ContentStore,
    FileStorage,
    MemoryStorage,
    StorageError,
    content_hash,
)
from tests.conftest import LOGO_DATA_URI, PNG_DATA_URI


class _BrokenStorage:
    def get_item(self, key: str) -> str | None:
        raise StorageError("disk on fire")

    def set_item(self, key: str, value: str) -> None:
        raise StorageError("disk on fire")


def test_hash_is_deterministic():
    assert content_hash(PNG_DATA_URI) == content_hash(PNG_DATA_URI)
    assert content_hash(PNG_DATA_URI) != content_hash(LOGO_DATA_URI)


def test_put_then_get(content_store):
    hash_ = content_store.put(PNG_DATA_URI)
    assert content_store.get(hash_) == PNG_DATA_URI
    assert hash_ in content_store


def test_put_is_idempotent(storage, content_store):
    first = content_store.put(PNG_DATA_URI)
    second = content_store.put(PNG_DATA_URI)
    assert first == second
    assert len(storage) == 1
    assert storage.keys() == [f"bb:img:{first}"]


def test_get_missing_returns_none(content_store):
    assert content_store.get("doesnotexist") is None
    assert "doesnotexist" not in content_store


def test_custom_prefix(storage):
    store = ContentStore(storage, prefix="app:img:")
    hash_ = store.put(PNG_DATA_URI)
    assert storage.get_item(f"app:img:{hash_}") == PNG_DATA_URI


def test_quota_failure_is_not_fatal(caplog):
    storage = MemoryStorage(quota_bytes=16)
    store = ContentStore(storage)
    with caplog.at_level(logging.WARNING, logger="brandbento.state.content_store"):
        hash_ = store.put(LOGO_DATA_URI)
    assert hash_ == content_hash(LOGO_DATA_URI)
    assert store.get(hash_) is None
    assert len(storage) == 0
    assert any("Failed to store" in r.message for r in caplog.records)


def test_broken_backend_never_raises():
    store = ContentStore(_BrokenStorage())
    hash_ = store.put(PNG_DATA_URI)
    assert hash_ == content_hash(PNG_DATA_URI)
    assert store.get(hash_) is None


def test_file_storage_persists_across_instances(tmp_path):
    hash_ = ContentStore(FileStorage(tmp_path)).put(PNG_DATA_URI)

    reopened = ContentStore(FileStorage(tmp_path))
    assert reopened.get(hash_) == PNG_DATA_URI
    assert FileStorage(tmp_path).keys() == [f"bb:img:{hash_}"]


def test_file_storage_overwrite_leaves_no_temp_files(tmp_path):
    storage = FileStorage(tmp_path)
    storage.set_item("k", "one")
    storage.set_item("k", "two")
    assert storage.get_item("k") == "two"
    assert list(tmp_path.glob("*.tmp")) == []
    assert storage.get_item("missing") is None


def test_file_storage_undecodable_payload_reads_as_missing(tmp_path):
    storage = FileStorage(tmp_path)
    store = ContentStore(storage)
    hash_ = content_hash(PNG_DATA_URI)
    storage._path(store.key_for(hash_)).write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(StorageError):
        storage.get_item(store.key_for(hash_))
    assert store.get(hash_) is None
    assert hash_ not in store


def test_file_storage_failed_replace_cleans_up(tmp_path, monkeypatch):
    storage = FileStorage(tmp_path)

    def fail_replace(src, dst):
        raise OSError("read-only file system")

    monkeypatch.setattr(os, "replace", fail_replace)
    with pytest.raises(StorageError):
        storage.set_item("k", "value")
    assert list(tmp_path.iterdir()) == []


def test_file_storage_unencodable_value(tmp_path):
    storage = FileStorage(tmp_path)
    with pytest.raises(StorageError):
        storage.set_item("k", "bad \ud800 surrogate")
    assert list(tmp_path.iterdir()) == []
