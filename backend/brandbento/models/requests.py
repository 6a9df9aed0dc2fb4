"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from brandbento.models.document import Document, ExtractionStage


class EncodeRequest(BaseModel):
    document: Document


class DecodeRequest(BaseModel):
    token: str = Field(..., description="Compact state token from a shared URL")


class HydrateRequest(BaseModel):
    token: str | None = Field(None, description="Token from the URL, if any")


class AssetsPatch(BaseModel):
    assets: dict[str, Any] = Field(default_factory=dict)


class TileSettingsPatch(BaseModel):
    tile_settings: dict[str, Any] = Field(default_factory=dict)


class SourceUrlRequest(BaseModel):
    source_url: str | None = None


class ExtractionRequest(BaseModel):
    stage: ExtractionStage | None = None
    error: str | None = None


class RecentFontRequest(BaseModel):
    font: str = Field(..., min_length=1)


class ResolveRequest(BaseModel):
    preset: str | None = Field(None, description="Defaults to the document's active preset")
    breakpoint: str = "desktop"
    slot_id: str
    swaps: dict[str, str] | None = Field(None, description="Defaults to the document's swaps")


class PresetRequest(BaseModel):
    preset: str


class SwapRequest(BaseModel):
    first: str
    second: str
