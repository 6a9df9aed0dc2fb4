"""Content store: hash-keyed side storage for large embedded payloads.

Data URIs for logos and hero images are far too large for a shareable URL.
The codec stores them here and leaves a short ``ref:<hash>`` in the token.

Entries are written lazily the first time a payload is encoded and never
deleted by this module. Lookups never raise: a missing key (for example a
shared link opened in a different browser profile) simply reads as ``None``.
"""

from __future__ import annotations

import hashlib
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "bb:img:"


class StorageError(Exception):
    """Raised by a storage backend when a read or write cannot complete."""


class StorageQuotaError(StorageError):
    """Raised when a write would exceed the backend's capacity."""


class KeyValueStorage(Protocol):
    """String-keyed, string-valued durable storage."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """In-process storage. ``quota_bytes`` caps the total stored value size."""

    def __init__(self, quota_bytes: int | None = None) -> None:
        self.quota_bytes = quota_bytes
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            used = sum(len(v) for k, v in self._items.items() if k != key)
            if used + len(value) > self.quota_bytes:
                raise StorageQuotaError(
                    f"Storing {key} needs {len(value)} bytes, "
                    f"{self.quota_bytes - used} available"
                )
        self._items[key] = value

    def keys(self) -> list[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


class FileStorage:
    """One file per key under ``data_dir``. Writes replace atomically."""

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        # ':' is not portable in file names
        return self.data_dir / (key.replace(":", "_") + ".txt")

    def get_item(self, key: str) -> str | None:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {key}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            fd, tmp = tempfile.mkstemp(dir=self.data_dir, suffix=".tmp")
        except OSError as e:
            raise StorageError(f"Cannot write {key}: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp, path)
        except (OSError, UnicodeEncodeError) as e:
            Path(tmp).unlink(missing_ok=True)
            raise StorageError(f"Cannot write {key}: {e}") from e

    def keys(self) -> list[str]:
        return sorted(p.stem.replace("_", ":") for p in self.data_dir.glob("*.txt"))

    def __len__(self) -> int:
        return len(self.keys())


def content_hash(payload: str) -> str:
    """Compute a short, stable hash of a payload."""
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]


class ContentStore:
    """Append-only payload store keyed by content hash."""

    def __init__(
        self,
        storage: KeyValueStorage | None = None,
        prefix: str = DEFAULT_PREFIX,
    ) -> None:
        self.storage = storage if storage is not None else MemoryStorage()
        self.prefix = prefix

    def key_for(self, hash_: str) -> str:
        return f"{self.prefix}{hash_}"

    def put(self, payload: str) -> str:
        """Store ``payload`` and return its hash.

        Idempotent: an identical payload already present is not rewritten.
        A failed write is logged and otherwise ignored; the hash is returned
        either way, so a later ``get`` may come back empty.
        """
        hash_ = content_hash(payload)
        key = self.key_for(hash_)
        try:
            if self.storage.get_item(key) == payload:
                return hash_
            self.storage.set_item(key, payload)
            logger.debug("Stored payload %s (%d chars)", hash_, len(payload))
        except StorageError as e:
            logger.warning("Failed to store payload %s: %s", hash_, e)
        return hash_

    def get(self, hash_: str) -> str | None:
        try:
            return self.storage.get_item(self.key_for(hash_))
        except StorageError as e:
            logger.warning("Failed to read payload %s: %s", hash_, e)
            return None

    def __contains__(self, hash_: str) -> bool:
        return self.get(hash_) is not None
