"""Placement graph: which tile instance lives in each grid slot.

Slot ids are layout positions ("hero", "a" .. "f", and named slots used by
specific presets). Each slot maps to a tile component type and a unique tile
instance id, independent of the active preset. Swaps are an overlay on top:
a swap map ``{slot: slot}`` redirects a slot to the contents of another.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

PLACEMENT_KIND_BY_ID: dict[str, str] = {
    "hero": "identity",
    "editorial": "editorial",
    "social": "social",
    "buttons": "interface",
    "logo": "identity",
    "colors": "colors",
    "product": "product",
    "a": "identity",
    "b": "editorial",
    "c": "interface",
    "d": "social",
    "e": "colors",
    "f": "editorial",
}

PLACEMENT_TILE_TYPE_BY_ID: dict[str, str] = {
    "hero": "hero",
    "editorial": "editorial",
    "social": "social",
    "buttons": "ui-preview",
    "logo": "logo",
    "colors": "utility",
    "product": "product",
    "a": "logo",
    "b": "editorial",
    "c": "ui-preview",
    "d": "social",
    "e": "swatch",
    "f": "stats",
}

# Each slot must own a unique tile id; shared ids would make an edit to one
# tile show up in two slots.
PLACEMENT_TILE_ID_BY_ID: dict[str, str] = {
    "hero": "hero-1",
    "editorial": "editorial-1",
    "social": "social-1",
    "buttons": "ui-preview-1",
    "logo": "logo-1",
    "colors": "utility-1",
    "product": "product-1",
    "a": "slot-a",
    "b": "slot-b",
    "c": "slot-c",
    "d": "slot-d",
    "e": "slot-e",
    "f": "slot-f",
}


def placement_kind(slot_id: str | None) -> str | None:
    if not slot_id:
        return None
    return PLACEMENT_KIND_BY_ID.get(slot_id)


def placement_tile_type(slot_id: str | None) -> str | None:
    if not slot_id:
        return None
    return PLACEMENT_TILE_TYPE_BY_ID.get(slot_id)


def placement_tile_id(slot_id: str | None) -> str | None:
    if not slot_id:
        return None
    return PLACEMENT_TILE_ID_BY_ID.get(slot_id)


def resolve_swapped_id(slot_id: str, swaps: dict[str, str]) -> str:
    """Follow the swap chain from ``slot_id`` to the slot whose contents render there.

    The walk stops at a slot that maps to itself or is unmapped, and takes at
    most ``len(swaps)`` hops. A chain that closes back on ``slot_id`` is a
    permutation cycle (that is how exchanges are stored, see ``swap_slots``);
    the last slot before the cycle closes is the answer. Any other loop is a
    malformed map and the swap is ignored.
    """
    if not swaps:
        return slot_id

    current = slot_id
    seen = {slot_id}
    hops = 0
    while True:
        nxt = swaps.get(current)
        if nxt is None or nxt == current or nxt == slot_id:
            return current
        if nxt in seen or hops >= len(swaps):
            break
        seen.add(nxt)
        current = nxt
        hops += 1

    logger.debug("Swap chain from %r does not terminate, ignoring swaps", slot_id)
    return slot_id


def effective_slots(swaps: dict[str, str], slot_ids: list[str] | None = None) -> dict[str, str]:
    """Resolve every slot in ``slot_ids`` (default: every slot named by ``swaps``)."""
    if slot_ids is None:
        names = set(swaps) | set(swaps.values())
        slot_ids = sorted(names)
    return {s: resolve_swapped_id(s, swaps) for s in slot_ids}


def swap_slots(swaps: dict[str, str], first: str, second: str) -> dict[str, str]:
    """Exchange what renders in ``first`` and ``second``; returns a new swap map.

    The current effective contents are exchanged and the result is stored as
    the inverse permutation, which ``resolve_swapped_id`` turns back into the
    exchanged contents. Slots that end up showing their own tile are dropped.
    """
    if first == second:
        return dict(swaps)

    effective = effective_slots(swaps, sorted(set(swaps) | set(swaps.values()) | {first, second}))
    if len(set(effective.values())) != len(effective):
        logger.warning("Swap map is not a permutation, starting from an empty one")
        effective = {s: s for s in effective}
    effective[first], effective[second] = effective[second], effective[first]

    updated: dict[str, str] = {}
    for slot, shows in effective.items():
        if slot != shows:
            updated[shows] = slot
    return updated
