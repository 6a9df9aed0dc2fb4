"""Document store: the single owner of the canonical document.

The rest of the application changes the document only through the mutation
methods here. Observers register with ``subscribe`` and are called with the
new and previous state after every committed change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Literal

from brandbento.layout.placements import swap_slots
from brandbento.models.document import (
    BrandAssets,
    Document,
    ExtractionStage,
    TileSettings,
    create_default_document,
    now_ms,
    push_recent_font,
)
from brandbento.models.layout import LayoutSelection
from brandbento.state.codec import StateCodec
from brandbento.state.persistence import LocalPersistence

logger = logging.getLogger(__name__)

HydrationSource = Literal["url", "local", "default"]


@dataclass(frozen=True)
class StoreState:
    document: Document
    extraction_stage: ExtractionStage = "idle"
    extraction_error: str | None = None


Listener = Callable[[StoreState, StoreState], None]


def _deep_merge(base: dict[str, Any], partial: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in partial.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class DocumentStore:
    """Owns the document plus transient extraction status."""

    def __init__(
        self,
        document: Document | None = None,
        *,
        codec: StateCodec | None = None,
        persistence: LocalPersistence | None = None,
        recent_fonts_limit: int = 10,
    ) -> None:
        self._state = StoreState(document=document or create_default_document())
        self._listeners: list[Listener] = []
        self.codec = codec
        self.persistence = persistence
        self.recent_fonts_limit = recent_fonts_limit

    # -- observation -------------------------------------------------------

    def get_state(self) -> StoreState:
        return self._state

    @property
    def document(self) -> Document:
        return self._state.document

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, **changes: Any) -> None:
        previous = self._state
        self._state = replace(previous, **changes)
        if self.persistence is not None and self._state.document is not previous.document:
            self.persistence.save(self._state.document)
        for listener in list(self._listeners):
            listener(self._state, previous)

    def _commit(self, document: Document) -> bool:
        """Commit ``document`` unless it equals the current one. Bumps last_modified."""
        current = self._state.document
        if document.model_dump(exclude={"last_modified"}) == current.model_dump(
            exclude={"last_modified"}
        ):
            return False
        document.last_modified = now_ms()
        self._set(document=document)
        return True

    # -- mutations ---------------------------------------------------------

    def set_assets(self, partial: dict[str, Any]) -> bool:
        """Shallow-merge ``partial`` into the brand assets."""
        current = self.document
        assets = BrandAssets.model_validate({**current.assets.model_dump(), **partial})
        return self._commit(current.model_copy(update={"assets": assets}, deep=True))

    def set_tile_settings(self, partial: dict[str, Any]) -> bool:
        """Merge ``partial`` into the tile settings, one level deep per tile."""
        current = self.document
        merged = _deep_merge(current.tile_settings.model_dump(), partial)
        settings = TileSettings.model_validate(merged)
        return self._commit(current.model_copy(update={"tile_settings": settings}, deep=True))

    def add_recent_font(self, font: str) -> bool:
        current = self.document
        recent = push_recent_font(
            current.tile_settings.recent_fonts, font, self.recent_fonts_limit
        )
        settings = current.tile_settings.model_copy(update={"recent_fonts": recent})
        return self._commit(current.model_copy(update={"tile_settings": settings}, deep=True))

    def set_source_url(self, url: str | None) -> bool:
        return self._commit(self.document.model_copy(update={"source_url": url}, deep=True))

    def mark_extracted(self) -> bool:
        return self._commit(
            self.document.model_copy(update={"extracted_at": now_ms()}, deep=True)
        )

    def set_preset(self, preset: str) -> bool:
        current = self.document
        layout = LayoutSelection.model_validate({**current.layout.model_dump(), "preset": preset})
        return self._commit(current.model_copy(update={"layout": layout}, deep=True))

    def set_swaps(self, swaps: dict[str, str]) -> bool:
        current = self.document
        layout = current.layout.model_copy(update={"swaps": dict(swaps)})
        return self._commit(current.model_copy(update={"layout": layout}, deep=True))

    def swap_tiles(self, first: str, second: str) -> bool:
        """Exchange what renders in two slots. Recorded as one history step."""
        return self.set_swaps(swap_slots(self.document.layout.swaps, first, second))

    def set_extraction_stage(self, stage: ExtractionStage) -> None:
        self._set(extraction_stage=stage)

    def set_extraction_error(self, error: str | None) -> None:
        self._set(extraction_error=error, extraction_stage="error" if error else "idle")

    def replace_document(self, document: Document) -> None:
        """Swap in ``document`` as-is (used by undo/redo)."""
        self._set(document=document)

    def reset(self) -> None:
        """Back to defaults, keeping the source URL and the layout."""
        document = create_default_document()
        document.source_url = self.document.source_url
        document.layout = self.document.layout.model_copy(deep=True)
        self._set(document=document, extraction_stage="idle", extraction_error=None)

    def hydrate(self, token: str | None = None) -> HydrationSource:
        """Load state at startup: URL token, then local snapshot, then defaults."""
        source: HydrationSource = "default"
        document: Document | None = None

        if token and self.codec is not None:
            document = self.codec.decode(token)
            if document is not None:
                source = "url"
            else:
                logger.info("No state to restore from shared token")

        if document is None and self.persistence is not None:
            document = self.persistence.load()
            if document is not None:
                source = "local"

        if document is None:
            document = create_default_document()

        self._set(document=document, extraction_stage="idle", extraction_error=None)
        logger.debug("Hydrated document from %s", source)
        return source

    def share_token(self) -> str:
        if self.codec is None:
            raise RuntimeError("DocumentStore has no codec configured")
        return self.codec.encode(self.document)


class RequestSequencer:
    """Monotonic request tickets per logical slot.

    An async font or extraction result is applied only if its ticket is still
    the latest one issued for that slot.
    """

    def __init__(self) -> None:
        self._counter = 0
        self._latest: dict[str, int] = {}

    def begin(self, slot: str) -> int:
        self._counter += 1
        self._latest[slot] = self._counter
        return self._counter

    def is_current(self, slot: str, ticket: int) -> bool:
        current = self._latest.get(slot) == ticket
        if not current:
            logger.debug("Dropping stale result for %s (ticket %d)", slot, ticket)
        return current
