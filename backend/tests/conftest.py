"""Shared test fixtures."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from brandbento.config import Settings
from brandbento.dependencies import get_session
from brandbento.models.document import BrandAssets, Document
from brandbento.session import Session, create_session
from brandbento.state.codec import StateCodec
from brandbento.state.content_store import ContentStore, MemoryStorage
from brandbento.state.store import DocumentStore
from brandbento.state.temporal import TemporalController


PNG_DATA_URI = "data:image/png;base64,AAAA"

# Long enough that it could never show up in a compressed token by accident
LOGO_DATA_URI = "data:image/svg+xml;base64," + "PHN2ZyB4bWxucz0iaHR0cDovL3d3dy53My5vcmcvMjAwMC9zdmciLz4" * 8

REMOTE_LOGO = "https://cdn.example.com/brand/logo.svg"


def make_document(**asset_overrides) -> Document:
    assets = BrandAssets(
        colors=["#0B1F3A", "#F2C14E", "#FAFAF7", "#E4572E", "#FFFFFF"],
        colors_source="extracted",
        primary_font="Playfair Display",
        secondary_font="Inter",
        fonts_source="extracted",
        logo_source="header-img",
    )
    for name, value in asset_overrides.items():
        setattr(assets, name, value)
    return Document(
        source_url="https://example.com",
        assets=assets,
        extracted_at=1_700_000_000_000,
        last_modified=1_700_000_050_000,
    )


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def content_store(storage) -> ContentStore:
    return ContentStore(storage)


@pytest.fixture
def codec(content_store) -> StateCodec:
    return StateCodec(content_store)


@pytest.fixture
def store() -> DocumentStore:
    return DocumentStore()


@pytest.fixture
def temporal(store) -> TemporalController:
    return TemporalController(store)


@pytest.fixture
def session() -> Session:
    return create_session(Settings(), storage=MemoryStorage())


@pytest.fixture
def client(session):
    from brandbento.main import app

    app.dependency_overrides[get_session] = lambda: session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
