"""FastAPI dependency injection."""

from __future__ import annotations

from brandbento.config import settings
from brandbento.session import Session, create_session

_session: Session | None = None


def get_settings():
    return settings


def get_session() -> Session:
    """Get or create the process-wide editing session."""
    global _session
    if _session is None:
        _session = create_session(settings)
        _session.hydrate()
    return _session


def reset_session() -> None:
    global _session
    _session = None
