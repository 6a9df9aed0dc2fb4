"""Brand document model: the full editable state of one canvas session."""

from __future__ import annotations

import time
from typing import Literal

from pydantic import BaseModel, Field

from brandbento.models.layout import LayoutSelection

CURRENT_VERSION = 1

DEFAULT_COLORS = ["#111111", "#555555", "#F5F5F5", "#2563EB", "#FFFFFF"]
DEFAULT_PRIMARY_FONT = "Inter"
DEFAULT_SECONDARY_FONT = "Lora"

AssetSource = Literal["extracted", "default"]
LogoSource = Literal[
    "favicon-svg",
    "favicon-png",
    "apple-touch-icon",
    "favicon-default",
    "header-img",
    "default",
]
ExtractionStage = Literal[
    "idle", "fetching", "colors", "fonts", "images", "logo", "complete", "error"
]
FontWeight = Literal["light", "regular", "medium", "semibold", "bold"]


def now_ms() -> int:
    return int(time.time() * 1000)


class ColorPalette(BaseModel):
    """Semantic color roles derived from the extracted colors."""

    primary: str = "#2563EB"
    accent: str = "#7C3AED"
    background: str = "#F5F5F5"
    text: str = "#111111"


class ImageryState(BaseModel):
    treatment: Literal["original", "grayscale", "duotone", "tint"] = "original"
    color_overlay: int = Field(0, ge=0, le=100)


class BrandAssets(BaseModel):
    colors: list[str] = Field(default_factory=lambda: list(DEFAULT_COLORS))
    colors_source: AssetSource = "default"

    primary_font: str = DEFAULT_PRIMARY_FONT
    secondary_font: str = DEFAULT_SECONDARY_FONT
    fonts_source: AssetSource = "default"

    logo: str | None = None  # URL or data URI
    logo_source: LogoSource = "default"

    hero_image: str | None = None  # URL or data URI
    images_source: AssetSource = "default"

    palette: ColorPalette = Field(default_factory=ColorPalette)
    imagery: ImageryState = Field(default_factory=ImageryState)


class LogoTileSettings(BaseModel):
    scale: int = Field(70, ge=10, le=150)
    variant: Literal["original", "mono-dark", "mono-light"] = "original"
    background: Literal["auto", "light", "dark", "transparent"] = "auto"


class FontTileSettings(BaseModel):
    weight: FontWeight = "regular"
    size_scale: float = 1.0
    line_height: float = 1.2


class TileSettings(BaseModel):
    logo: LogoTileSettings = Field(default_factory=LogoTileSettings)
    primary_font: FontTileSettings = Field(default_factory=FontTileSettings)
    secondary_font: FontTileSettings = Field(
        default_factory=lambda: FontTileSettings(line_height=1.5)
    )
    recent_fonts: list[str] = Field(default_factory=list)  # most recent first


class Document(BaseModel):
    """Canonical state for one editing session."""

    version: int = CURRENT_VERSION
    source_url: str | None = None
    assets: BrandAssets = Field(default_factory=BrandAssets)
    tile_settings: TileSettings = Field(default_factory=TileSettings)
    layout: LayoutSelection = Field(default_factory=LayoutSelection)
    extracted_at: int | None = None  # epoch ms
    last_modified: int | None = None  # epoch ms


def create_default_document() -> Document:
    return Document(last_modified=now_ms())


def push_recent_font(recent: list[str], font: str, limit: int = 10) -> list[str]:
    """Insert ``font`` at the front, dropping any earlier occurrence and trimming to ``limit``."""
    updated = [font] + [f for f in recent if f != font]
    return updated[:limit]
