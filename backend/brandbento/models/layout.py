"""Grid layout models: cell placements and resolved tile identities."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Breakpoint = Literal["mobile", "tablet", "desktop"]
PresetName = Literal[
    "balanced", "geos", "foodDrink", "heroCenter", "heroLeft", "stacked", "minimal", "duo"
]
PlacementKind = Literal[
    "identity", "editorial", "social", "interface", "colors", "icons", "product"
]


class CellPlacement(BaseModel):
    """One grid slot of a layout, in 1-based grid coordinates."""

    id: str
    col_start: int
    row_start: int
    col_span: int = 1
    row_span: int = 1


class LayoutConfig(BaseModel):
    columns: int
    rows: int
    gap: int
    placements: list[CellPlacement] = Field(default_factory=list)

    @property
    def slot_ids(self) -> list[str]:
        return [p.id for p in self.placements]


class PlacementTile(BaseModel):
    """The tile that actually renders in a slot."""

    slot_id: str
    tile_id: str
    tile_type: str
    kind: PlacementKind | None = None


DEFAULT_PRESET: PresetName = "geos"


class LayoutSelection(BaseModel):
    """Active preset plus the tile swap overlay, stored in the document."""

    preset: PresetName = DEFAULT_PRESET
    swaps: dict[str, str] = Field(default_factory=dict)
