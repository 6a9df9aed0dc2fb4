"""Temporal controller: undo/redo over document snapshots with drag batching.

A continuous interaction (slider drag, tile drag) brackets itself with
``pause()`` / ``resume()``. While paused the document keeps changing but only
one history entry is recorded: the state right before the first paused
change. A single ``undo()`` afterwards reverts the whole interaction.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from brandbento.models.document import Document
from brandbento.state.store import DocumentStore, StoreState

logger = logging.getLogger(__name__)

MAX_HISTORY = 50


@dataclass
class History:
    """Past/future snapshot stacks; the most recent entry is last in each."""

    limit: int = MAX_HISTORY
    past: list[Document] = field(default_factory=list)
    future: list[Document] = field(default_factory=list)

    def push(self, snapshot: Document) -> None:
        self.past.append(snapshot)
        if len(self.past) > self.limit:
            del self.past[: len(self.past) - self.limit]
        self.future.clear()

    def step_back(self, current: Document) -> Document | None:
        if not self.past:
            return None
        self.future.append(current)
        return self.past.pop()

    def step_forward(self, current: Document) -> Document | None:
        if not self.future:
            return None
        self.past.append(current)
        return self.future.pop()

    def clear(self) -> None:
        self.past.clear()
        self.future.clear()


class TemporalController:
    """Records document changes from a ``DocumentStore`` into a ``History``."""

    def __init__(self, store: DocumentStore, limit: int = MAX_HISTORY) -> None:
        self.store = store
        self.history = History(limit=limit)
        self._paused = False
        self._anchored = False
        self._restoring = False
        self._unsubscribe = store.subscribe(self._on_change)

    @property
    def is_tracking(self) -> bool:
        return not self._paused

    @property
    def can_undo(self) -> bool:
        return bool(self.history.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.history.future)

    def _on_change(self, state: StoreState, previous: StoreState) -> None:
        if self._restoring or state.document is previous.document:
            return
        if self._paused:
            if self._anchored:
                return
            self._anchored = True
        self.history.push(previous.document)

    def pause(self) -> None:
        if self._paused:
            return
        self._paused = True
        self._anchored = False
        logger.debug("History paused")

    def resume(self) -> None:
        if not self._paused:
            return
        self._paused = False
        self._anchored = False
        logger.debug("History resumed")

    @contextmanager
    def batch(self) -> Iterator[None]:
        """Record everything inside the block as one undo step."""
        self.pause()
        try:
            yield
        finally:
            self.resume()

    def undo(self) -> bool:
        target = self.history.step_back(self.store.document)
        if target is None:
            return False
        self._restore(target)
        return True

    def redo(self) -> bool:
        target = self.history.step_forward(self.store.document)
        if target is None:
            return False
        self._restore(target)
        return True

    def _restore(self, document: Document) -> None:
        self._restoring = True
        try:
            self.store.replace_document(document)
        finally:
            self._restoring = False
        # A later paused change must anchor again on the restored state
        self._anchored = False

    def clear(self) -> None:
        self.history.clear()

    def close(self) -> None:
        self._unsubscribe()
