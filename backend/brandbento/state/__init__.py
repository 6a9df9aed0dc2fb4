"""Brand Bento state core: content store, codec, document store, history."""

from brandbento.state.codec import EncodeResult, StateCodec
from brandbento.state.content_store import (
    ContentStore,
    FileStorage,
    KeyValueStorage,
    MemoryStorage,
    StorageError,
    StorageQuotaError,
)
from brandbento.state.persistence import LocalPersistence
from brandbento.state.store import DocumentStore, RequestSequencer, StoreState
from brandbento.state.temporal import History, TemporalController

__all__ = [
    "ContentStore",
    "DocumentStore",
    "EncodeResult",
    "FileStorage",
    "History",
    "KeyValueStorage",
    "LocalPersistence",
    "MemoryStorage",
    "RequestSequencer",
    "StateCodec",
    "StorageError",
    "StorageQuotaError",
    "StoreState",
    "TemporalController",
]
