"""Undo/redo endpoints. Drag interactions bracket themselves with pause/resume."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from brandbento.dependencies import get_session
from brandbento.models.responses import HistoryResponse
from brandbento.session import Session

router = APIRouter(prefix="/history")


def _status(session: Session, moved: bool = False) -> HistoryResponse:
    temporal = session.temporal
    return HistoryResponse(
        tracking=temporal.is_tracking,
        can_undo=temporal.can_undo,
        can_redo=temporal.can_redo,
        past=len(temporal.history.past),
        future=len(temporal.history.future),
        moved=moved,
    )


@router.get("", response_model=HistoryResponse)
async def get_history(session: Session = Depends(get_session)) -> HistoryResponse:
    return _status(session)


@router.post("/undo", response_model=HistoryResponse)
async def undo(session: Session = Depends(get_session)) -> HistoryResponse:
    return _status(session, session.temporal.undo())


@router.post("/redo", response_model=HistoryResponse)
async def redo(session: Session = Depends(get_session)) -> HistoryResponse:
    return _status(session, session.temporal.redo())


@router.post("/pause", response_model=HistoryResponse)
async def pause(session: Session = Depends(get_session)) -> HistoryResponse:
    session.temporal.pause()
    return _status(session)


@router.post("/resume", response_model=HistoryResponse)
async def resume(session: Session = Depends(get_session)) -> HistoryResponse:
    session.temporal.resume()
    return _status(session)
