"""State token endpoints: encode, decode and content lookup."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from brandbento.dependencies import get_session
from brandbento.models.requests import DecodeRequest, EncodeRequest
from brandbento.models.responses import DecodeResponse, EncodeResponse
from brandbento.session import Session

router = APIRouter(prefix="/state")


@router.post("/encode", response_model=EncodeResponse)
async def encode_state(
    req: EncodeRequest, session: Session = Depends(get_session)
) -> EncodeResponse:
    """Turn a document into a URL-safe token; large payloads go to the content store."""
    result = session.codec.encode_with_report(req.document)
    return EncodeResponse(token=result.token, length=result.length, over_budget=result.over_budget)


@router.post("/decode", response_model=DecodeResponse)
async def decode_state(
    req: DecodeRequest, session: Session = Depends(get_session)
) -> DecodeResponse:
    document = session.codec.decode(req.token)
    if document is None:
        return DecodeResponse(restored=False)
    return DecodeResponse(restored=True, document=document)


@router.get("/content/{hash_}", response_model=str)
async def get_content(hash_: str, session: Session = Depends(get_session)) -> str:
    payload = session.content_store.get(hash_)
    if payload is None:
        raise HTTPException(status_code=404, detail=f"No content stored for {hash_}")
    return payload
