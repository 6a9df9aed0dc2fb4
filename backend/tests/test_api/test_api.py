"""Tests for API endpoints."""

from __future__ import annotations

from tests.conftest import LOGO_DATA_URI, PNG_DATA_URI, make_document


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["state_version"] == 1


# ---------------------------------------------------------------------------
# State tokens
# ---------------------------------------------------------------------------

def test_encode_decode_round_trip(client):
    doc = make_document(logo=LOGO_DATA_URI)
    response = client.post("/api/state/encode", json={"document": doc.model_dump(mode="json")})
    assert response.status_code == 200
    data = response.json()
    assert data["length"] == len(data["token"])
    assert data["over_budget"] is False
    assert LOGO_DATA_URI not in data["token"]

    response = client.post("/api/state/decode", json={"token": data["token"]})
    assert response.status_code == 200
    decoded = response.json()
    assert decoded["restored"] is True
    assert decoded["document"]["assets"]["logo"] == LOGO_DATA_URI


def test_decode_garbage(client):
    response = client.post("/api/state/decode", json={"token": "%%%garbage"})
    assert response.status_code == 200
    assert response.json() == {"restored": False, "document": None}


def test_content_lookup(client, session):
    hash_ = session.content_store.put(PNG_DATA_URI)
    response = client.get(f"/api/state/content/{hash_}")
    assert response.status_code == 200
    assert response.json() == PNG_DATA_URI

    assert client.get("/api/state/content/0000").status_code == 404


# ---------------------------------------------------------------------------
# Document + history
# ---------------------------------------------------------------------------

def test_patch_assets_and_undo(client):
    response = client.patch("/api/document/assets", json={"assets": {"primary_font": "Roboto"}})
    assert response.status_code == 200
    assert response.json()["changed"] is True
    assert response.json()["document"]["assets"]["primary_font"] == "Roboto"

    response = client.post("/api/history/undo")
    assert response.json()["moved"] is True
    assert client.get("/api/document").json()["document"]["assets"]["primary_font"] == "Inter"

    response = client.post("/api/history/redo")
    assert response.json()["moved"] is True
    assert client.get("/api/document").json()["document"]["assets"]["primary_font"] == "Roboto"


def test_invalid_patch_rejected(client):
    response = client.patch(
        "/api/document/assets",
        json={"assets": {"imagery": {"treatment": "sepia", "color_overlay": 0}}},
    )
    assert response.status_code == 422


def test_drag_is_one_undo_step(client):
    client.patch("/api/document/tile-settings", json={"tile_settings": {"logo": {"scale": 60}}})
    status = client.post("/api/history/pause").json()
    assert status["tracking"] is False
    for scale in (70, 85, 100, 120):
        client.patch("/api/document/tile-settings", json={"tile_settings": {"logo": {"scale": scale}}})
    status = client.post("/api/history/resume").json()
    assert status["tracking"] is True
    assert status["past"] == 2

    client.post("/api/history/undo")
    doc = client.get("/api/document").json()["document"]
    assert doc["tile_settings"]["logo"]["scale"] == 60


def test_extraction_flow(client):
    client.put("/api/document/source-url", json={"source_url": "https://acme.test"})
    data = client.put("/api/document/extraction", json={"stage": "colors"}).json()
    assert data["extraction_stage"] == "colors"

    data = client.put("/api/document/extraction", json={"stage": "complete"}).json()
    assert data["document"]["extracted_at"] is not None

    data = client.put("/api/document/extraction", json={"error": "blocked by CORS"}).json()
    assert data["extraction_stage"] == "error"
    assert data["extraction_error"] == "blocked by CORS"


def test_recent_fonts(client):
    for font in ("Inter", "Lora", "Inter"):
        data = client.post("/api/document/recent-fonts", json={"font": font}).json()
    assert data["document"]["tile_settings"]["recent_fonts"] == ["Inter", "Lora"]


def test_share_then_hydrate(client):
    client.patch("/api/document/assets", json={"assets": {"hero_image": PNG_DATA_URI}})
    token = client.get("/api/document/share").json()["token"]

    client.post("/api/document/reset")
    assert client.get("/api/document").json()["document"]["assets"]["hero_image"] is None

    data = client.post("/api/document/hydrate", json={"token": token}).json()
    assert data["source"] == "url"
    assert data["document"]["assets"]["hero_image"] == PNG_DATA_URI
    assert client.get("/api/history").json()["can_undo"] is False


def test_hydrate_with_bad_token_uses_local_snapshot(client):
    client.patch("/api/document/assets", json={"assets": {"primary_font": "Roboto"}})
    data = client.post("/api/document/hydrate", json={"token": "broken"}).json()
    assert data["source"] == "local"
    assert data["document"]["assets"]["primary_font"] == "Roboto"


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def test_get_layout(client):
    response = client.get("/api/layout/balanced/desktop")
    assert response.status_code == 200
    data = response.json()
    assert data["layout"]["columns"] == 3
    assert data["tiles"]["hero"]["tile_id"] == "hero-1"


def test_get_unknown_layout(client):
    assert client.get("/api/layout/balanced/watch").status_code == 404


def test_resolve(client):
    response = client.post(
        "/api/layout/resolve",
        json={"preset": "balanced", "breakpoint": "desktop", "slot_id": "b", "swaps": {"b": "c", "c": "d"}},
    )
    data = response.json()
    assert data["effective_slot_id"] == "d"
    assert data["tile"]["tile_id"] == "slot-d"


def test_resolve_cycle(client):
    response = client.post(
        "/api/layout/resolve",
        json={"preset": "balanced", "slot_id": "b", "swaps": {"b": "c", "c": "b"}},
    )
    assert response.status_code == 200
    assert response.json()["effective_slot_id"] in {"b", "c"}


def test_swap_updates_layout(client):
    data = client.post("/api/layout/swap", json={"first": "hero", "second": "d"}).json()
    assert data["swaps"] == {"hero": "d", "d": "hero"}
    assert data["changed"] is True

    tiles = client.get("/api/layout/balanced/mobile").json()["tiles"]
    assert tiles["hero"]["tile_id"] == "slot-d"
    assert tiles["d"]["tile_id"] == "hero-1"

    assert client.delete("/api/layout/swaps").json()["swaps"] == {}


def test_swap_can_be_undone(client):
    client.post("/api/layout/swap", json={"first": "hero", "second": "logo"})
    client.post("/api/layout/swap", json={"first": "logo", "second": "colors"})

    client.post("/api/history/undo")
    document = client.get("/api/document").json()["document"]
    assert document["layout"]["swaps"] == {"hero": "logo", "logo": "hero"}

    client.post("/api/history/undo")
    tiles = client.get("/api/layout").json()["tiles"]
    assert tiles["hero"]["tile_id"] == "hero-1"


def test_active_layout_follows_preset(client):
    data = client.get("/api/layout", params={"breakpoint": "tablet"}).json()
    assert data["preset"] == "geos"
    assert data["tiles"]["editorial"]["tile_id"] == "editorial-1"

    response = client.put("/api/layout/preset", json={"preset": "duo"})
    assert response.json()["preset"] == "duo"
    data = client.get("/api/layout", params={"breakpoint": "mobile"}).json()
    assert data["layout"]["rows"] == 3

    client.post("/api/history/undo")
    assert client.get("/api/layout").json()["preset"] == "geos"


def test_unknown_preset(client):
    assert client.put("/api/layout/preset", json={"preset": "mosaic"}).status_code == 404


def test_resolve_defaults_to_document_layout(client):
    client.post("/api/layout/swap", json={"first": "editorial", "second": "colors"})
    data = client.post("/api/layout/resolve", json={"slot_id": "editorial"}).json()
    assert data["effective_slot_id"] == "colors"
    assert data["tile"]["tile_id"] == "utility-1"


def test_clear_swaps_is_undoable(client):
    client.post("/api/layout/swap", json={"first": "hero", "second": "image"})
    assert client.delete("/api/layout/swaps").json()["swaps"] == {}
    client.post("/api/history/undo")
    assert client.get("/api/document").json()["document"]["layout"]["swaps"] == {
        "hero": "image",
        "image": "hero",
    }
