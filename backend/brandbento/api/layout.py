"""Layout endpoints for presets, swap-aware resolution and slot exchange.

The active preset and the swap map live in the document, so changing them
goes through the document store and shows up in undo history.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from brandbento.dependencies import get_session
from brandbento.layout.placements import resolve_swapped_id
from brandbento.layout.resolver import PlacementResolver
from brandbento.models.requests import PresetRequest, ResolveRequest, SwapRequest
from brandbento.models.responses import LayoutResponse, ResolveResponse, SelectionResponse
from brandbento.session import Session

router = APIRouter(prefix="/layout")


def _resolver(preset: str, breakpoint: str) -> PlacementResolver:
    try:
        return PlacementResolver.for_preset(preset, breakpoint)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0])) from e


def _layout_response(session: Session, preset: str, breakpoint: str) -> LayoutResponse:
    resolver = _resolver(preset, breakpoint)
    return LayoutResponse(
        preset=preset,
        breakpoint=breakpoint,
        layout=resolver.layout,
        tiles=resolver.resolve_all(session.store.document.layout.swaps),
    )


def _selection_response(session: Session, changed: bool) -> SelectionResponse:
    layout = session.store.document.layout
    return SelectionResponse(preset=layout.preset, swaps=layout.swaps, changed=changed)


@router.get("", response_model=LayoutResponse)
async def get_active_layout(
    breakpoint: str = "desktop", session: Session = Depends(get_session)
) -> LayoutResponse:
    """The document's active preset at ``breakpoint``."""
    return _layout_response(session, session.store.document.layout.preset, breakpoint)


@router.get("/{preset}/{breakpoint}", response_model=LayoutResponse)
async def get_layout(
    preset: str, breakpoint: str, session: Session = Depends(get_session)
) -> LayoutResponse:
    """Layout cells plus the tile each slot renders under the document's swaps."""
    return _layout_response(session, preset, breakpoint)


@router.put("/preset", response_model=SelectionResponse)
async def set_preset(
    req: PresetRequest, session: Session = Depends(get_session)
) -> SelectionResponse:
    try:
        changed = session.store.set_preset(req.preset)
    except ValidationError as e:
        raise HTTPException(status_code=404, detail=f"Unknown preset {req.preset!r}") from e
    return _selection_response(session, changed)


@router.post("/resolve", response_model=ResolveResponse)
async def resolve(
    req: ResolveRequest, session: Session = Depends(get_session)
) -> ResolveResponse:
    layout = session.store.document.layout
    preset = req.preset or layout.preset
    swaps = req.swaps if req.swaps is not None else layout.swaps
    resolver = _resolver(preset, req.breakpoint)
    return ResolveResponse(
        slot_id=req.slot_id,
        effective_slot_id=resolve_swapped_id(req.slot_id, swaps),
        tile=resolver.resolve_tile(req.slot_id, swaps),
    )


@router.post("/swap", response_model=SelectionResponse)
async def swap(
    req: SwapRequest, session: Session = Depends(get_session)
) -> SelectionResponse:
    changed = session.store.swap_tiles(req.first, req.second)
    return _selection_response(session, changed)


@router.delete("/swaps", response_model=SelectionResponse)
async def clear_swaps(session: Session = Depends(get_session)) -> SelectionResponse:
    changed = session.store.set_swaps({})
    return _selection_response(session, changed)
