"""Document endpoints: the reducer-style mutation surface of the editor."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from brandbento.dependencies import get_session
from brandbento.models.requests import (
    AssetsPatch,
    ExtractionRequest,
    HydrateRequest,
    RecentFontRequest,
    SourceUrlRequest,
    TileSettingsPatch,
)
from brandbento.models.responses import DocumentResponse, EncodeResponse, HydrateResponse
from brandbento.session import Session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/document")


def _response(session: Session, changed: bool = True) -> DocumentResponse:
    state = session.store.get_state()
    return DocumentResponse(
        document=state.document,
        extraction_stage=state.extraction_stage,
        extraction_error=state.extraction_error,
        changed=changed,
    )


@router.get("", response_model=DocumentResponse)
async def get_document(session: Session = Depends(get_session)) -> DocumentResponse:
    return _response(session, changed=False)


@router.patch("/assets", response_model=DocumentResponse)
async def patch_assets(
    req: AssetsPatch, session: Session = Depends(get_session)
) -> DocumentResponse:
    try:
        changed = session.store.set_assets(req.assets)
    except ValidationError as e:
        raise HTTPException(
            status_code=422, detail=e.errors(include_url=False, include_context=False)
        ) from e
    return _response(session, changed)


@router.patch("/tile-settings", response_model=DocumentResponse)
async def patch_tile_settings(
    req: TileSettingsPatch, session: Session = Depends(get_session)
) -> DocumentResponse:
    try:
        changed = session.store.set_tile_settings(req.tile_settings)
    except ValidationError as e:
        raise HTTPException(
            status_code=422, detail=e.errors(include_url=False, include_context=False)
        ) from e
    return _response(session, changed)


@router.put("/source-url", response_model=DocumentResponse)
async def put_source_url(
    req: SourceUrlRequest, session: Session = Depends(get_session)
) -> DocumentResponse:
    changed = session.store.set_source_url(req.source_url)
    return _response(session, changed)


@router.put("/extraction", response_model=DocumentResponse)
async def put_extraction(
    req: ExtractionRequest, session: Session = Depends(get_session)
) -> DocumentResponse:
    """Report extraction progress. An error message overrides the stage."""
    if req.error is not None:
        session.store.set_extraction_error(req.error or None)
    elif req.stage is not None:
        session.store.set_extraction_stage(req.stage)
        if req.stage == "complete":
            session.store.mark_extracted()
    return _response(session, changed=False)


@router.post("/recent-fonts", response_model=DocumentResponse)
async def add_recent_font(
    req: RecentFontRequest, session: Session = Depends(get_session)
) -> DocumentResponse:
    changed = session.store.add_recent_font(req.font)
    return _response(session, changed)


@router.post("/hydrate", response_model=HydrateResponse)
async def hydrate(req: HydrateRequest, session: Session = Depends(get_session)) -> HydrateResponse:
    source = session.hydrate(req.token)
    return HydrateResponse(source=source, document=session.store.document)


@router.post("/reset", response_model=DocumentResponse)
async def reset(session: Session = Depends(get_session)) -> DocumentResponse:
    session.store.reset()
    return _response(session)


@router.get("/share", response_model=EncodeResponse)
async def share(session: Session = Depends(get_session)) -> EncodeResponse:
    result = session.codec.encode_with_report(session.store.document)
    return EncodeResponse(token=result.token, length=result.length, over_budget=result.over_budget)
