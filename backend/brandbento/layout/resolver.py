"""Placement resolver: "what really renders in slot S" for the active layout."""

from __future__ import annotations

from brandbento.layout.placements import (
    placement_kind,
    placement_tile_id,
    placement_tile_type,
    resolve_swapped_id,
)
from brandbento.layout.presets import get_layout
from brandbento.models.layout import LayoutConfig, PlacementTile


class PlacementResolver:
    """Resolves slots of one preset/breakpoint layout through a swap overlay.

    The grid only ever asks ``resolve_tile(slot, swaps)``; it never needs to
    know how many exchanges happened.
    """

    def __init__(self, layout: LayoutConfig) -> None:
        self.layout = layout
        self._slots = set(layout.slot_ids)

    @classmethod
    def for_preset(cls, preset: str, breakpoint: str) -> PlacementResolver:
        return cls(get_layout(preset, breakpoint))

    def get_placement_tile(self, slot_id: str) -> PlacementTile | None:
        """Static lookup; ``None`` when the slot is not part of this layout."""
        if slot_id not in self._slots:
            return None
        tile_id = placement_tile_id(slot_id)
        tile_type = placement_tile_type(slot_id)
        if tile_id is None or tile_type is None:
            return None
        return PlacementTile(
            slot_id=slot_id,
            tile_id=tile_id,
            tile_type=tile_type,
            kind=placement_kind(slot_id),
        )

    def resolve_tile(self, slot_id: str, swaps: dict[str, str]) -> PlacementTile | None:
        if slot_id not in self._slots:
            return None
        effective = resolve_swapped_id(slot_id, swaps)
        return self.get_placement_tile(effective)

    def resolve_all(self, swaps: dict[str, str]) -> dict[str, PlacementTile | None]:
        return {slot: self.resolve_tile(slot, swaps) for slot in self.layout.slot_ids}
