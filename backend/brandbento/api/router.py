"""Master API router that mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from brandbento.api import document, health, history, layout, state

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(state.router)
api_router.include_router(document.router)
api_router.include_router(history.router)
api_router.include_router(layout.router)
