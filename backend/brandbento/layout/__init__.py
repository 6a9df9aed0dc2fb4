"""Bento grid layouts and swap-aware placement resolution."""

from brandbento.layout.placements import resolve_swapped_id, swap_slots
from brandbento.layout.presets import breakpoint_for_width, get_layout
from brandbento.layout.resolver import PlacementResolver

__all__ = [
    "PlacementResolver",
    "breakpoint_for_width",
    "get_layout",
    "resolve_swapped_id",
    "swap_slots",
]
