"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from brandbento.models.document import Document, ExtractionStage
from brandbento.models.layout import LayoutConfig, PlacementTile


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    state_version: int = 1


class EncodeResponse(BaseModel):
    token: str
    length: int
    over_budget: bool = False


class DecodeResponse(BaseModel):
    restored: bool
    document: Document | None = None


class DocumentResponse(BaseModel):
    document: Document
    extraction_stage: ExtractionStage = "idle"
    extraction_error: str | None = None
    changed: bool = True


class HydrateResponse(BaseModel):
    source: str
    document: Document


class HistoryResponse(BaseModel):
    tracking: bool = True
    can_undo: bool = False
    can_redo: bool = False
    past: int = 0
    future: int = 0
    moved: bool = False


class LayoutResponse(BaseModel):
    preset: str
    breakpoint: str
    layout: LayoutConfig
    tiles: dict[str, PlacementTile | None] = Field(default_factory=dict)


class ResolveResponse(BaseModel):
    slot_id: str
    effective_slot_id: str
    tile: PlacementTile | None = None


class SelectionResponse(BaseModel):
    preset: str
    swaps: dict[str, str] = Field(default_factory=dict)
    changed: bool = True
