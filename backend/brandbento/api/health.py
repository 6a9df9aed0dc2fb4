"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from brandbento.config import settings
from brandbento.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0", state_version=settings.state_version)
