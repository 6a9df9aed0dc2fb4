"""Editing session: wires the state core together once at startup."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from brandbento.config import Settings
from brandbento.state.codec import StateCodec
from brandbento.state.content_store import ContentStore, FileStorage, KeyValueStorage, MemoryStorage
from brandbento.state.persistence import LocalPersistence
from brandbento.state.store import DocumentStore, RequestSequencer
from brandbento.state.temporal import TemporalController

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """Everything one single-user editing session owns."""

    content_store: ContentStore
    codec: StateCodec
    store: DocumentStore
    temporal: TemporalController
    requests: RequestSequencer = field(default_factory=RequestSequencer)

    def hydrate(self, token: str | None = None) -> str:
        """Load startup state; the loaded document starts a fresh history."""
        source = self.store.hydrate(token)
        self.temporal.clear()
        return source


def create_session(settings: Settings, storage: KeyValueStorage | None = None) -> Session:
    if storage is None:
        if settings.data_dir is not None:
            storage = FileStorage(settings.data_dir)
            logger.info("Using file storage at %s", settings.data_dir)
        else:
            storage = MemoryStorage()

    content_store = ContentStore(storage, prefix=settings.storage_prefix)
    codec = StateCodec(
        content_store,
        soft_limit=settings.url_soft_limit,
        max_version=settings.state_version,
    )
    store = DocumentStore(
        codec=codec,
        persistence=LocalPersistence(storage),
        recent_fonts_limit=settings.recent_fonts_limit,
    )
    temporal = TemporalController(store, limit=settings.history_limit)
    return Session(content_store=content_store, codec=codec, store=store, temporal=temporal)
