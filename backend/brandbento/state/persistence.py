"""Local snapshot persistence for the document store."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from brandbento.models.document import Document
from brandbento.state.content_store import KeyValueStorage, StorageError

logger = logging.getLogger(__name__)

STATE_KEY = "brandBentoState"


class LocalPersistence:
    """Saves the whole document (payloads included) under a single key."""

    def __init__(self, storage: KeyValueStorage, key: str = STATE_KEY) -> None:
        self.storage = storage
        self.key = key

    def save(self, document: Document) -> bool:
        try:
            self.storage.set_item(self.key, document.model_dump_json())
        except StorageError as e:
            logger.warning("Failed to persist document: %s", e)
            return False
        return True

    def load(self) -> Document | None:
        try:
            stored = self.storage.get_item(self.key)
        except StorageError as e:
            logger.warning("Failed to read persisted document: %s", e)
            return None
        if not stored:
            return None

        try:
            data = json.loads(stored)
        except (json.JSONDecodeError, RecursionError):
            logger.warning("Persisted document is not valid JSON, ignoring it")
            return None
        if not _looks_like_document(data):
            logger.warning("Persisted document has an unexpected shape, ignoring it")
            return None
        try:
            return Document.model_validate(data)
        except ValidationError as e:
            logger.warning("Persisted document failed validation (%d errors)", e.error_count())
            return None


def _looks_like_document(data: object) -> bool:
    if not isinstance(data, dict):
        return False
    if not isinstance(data.get("version"), int):
        return False
    if not isinstance(data.get("assets"), dict):
        return False
    if not isinstance(data.get("tile_settings"), dict):
        return False
    return True
