"""Unit tests for the sectors router and sector authorization."""
from __future__ import annotations

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from starlette.middleware.sessions import SessionMiddleware

from app.config import settings
from app.routers.sectors import router


def _make_app():
    app = FastAPI()
    app.include_router(router)
    return app


def _make_session_app():
    app = _make_app()
    app.add_middleware(SessionMiddleware, secret_key="test-secret")

    @app.post("/login")
    async def login(request: Request):
        request.session["user"] = "controller"
        return {"ok": True}

    return app


def _firs(resp):
    return [f["properties"]["fir"] for f in resp.json()["features"]]


@pytest.mark.unit
class TestSectorsTokenMode:
    """GET /api/sectors with bearer token authorization."""

    def test_anonymous_filtered(self, airnav_settings):
        resp = TestClient(_make_app()).get("/api/sectors")
        assert resp.status_code == 200
        data = resp.json()
        assert data["type"] == "FeatureCollection"
        assert _firs(resp) == ["Kuala Lumpur"]

    def test_collection_members_preserved(self, airnav_settings):
        resp = TestClient(_make_app()).get("/api/sectors")
        assert resp.json()["name"] == "Sectors"

    def test_authorized_unfiltered(self, airnav_settings, auth_headers):
        resp = TestClient(_make_app()).get(
            "/api/sectors", headers=auth_headers
        )
        assert _firs(resp) == ["Singapore", "Singapore", "Kuala Lumpur"]

    def test_wrong_token(self, airnav_settings):
        resp = TestClient(_make_app()).get(
            "/api/sectors", headers={"Authorization": "Bearer wrong"}
        )
        assert _firs(resp) == ["Kuala Lumpur"]

    def test_non_ascii_token_is_anonymous(self, airnav_settings):
        resp = TestClient(_make_app()).get(
            "/api/sectors", headers={"Authorization": "Bearer t\xe9st".encode("latin-1")}
        )
        assert resp.status_code == 200
        assert _firs(resp) == ["Kuala Lumpur"]

    def test_unset_token_never_authorizes(self, airnav_settings, monkeypatch):
        monkeypatch.setattr(settings, "sector_access_token", "")
        resp = TestClient(_make_app()).get("/api/sectors", headers={"Authorization": "Bearer "})
        assert _firs(resp) == ["Kuala Lumpur"]

    def test_missing_file(self, airnav_settings):
        airnav_settings.sectors.unlink()
        resp = TestClient(_make_app()).get("/api/sectors")
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to load sectors data"}

    def test_malformed_file(self, airnav_settings):
        airnav_settings.sectors.write_text("not json", encoding="utf-8")
        resp = TestClient(_make_app()).get("/api/sectors")
        assert resp.status_code == 500


@pytest.mark.unit
class TestSectorsSessionMode:
    """GET /api/sectors with session authorization."""

    def test_anonymous_session(self, airnav_settings, monkeypatch):
        monkeypatch.setattr(settings, "auth_mode", "session")
        resp = TestClient(_make_session_app()).get("/api/sectors")
        assert _firs(resp) == ["Kuala Lumpur"]

    def test_signed_in_session(self, airnav_settings, monkeypatch):
        monkeypatch.setattr(settings, "auth_mode", "session")
        client = TestClient(_make_session_app())
        assert client.post("/login").status_code == 200
        resp = client.get("/api/sectors")
        assert len(_firs(resp)) == 3

    def test_token_ignored_in_session_mode(self, airnav_settings, auth_headers, monkeypatch):
        monkeypatch.setattr(settings, "auth_mode", "session")
        resp = TestClient(_make_session_app()).get(
            "/api/sectors", headers=auth_headers
        )
        assert _firs(resp) == ["Kuala Lumpur"]

    def test_session_mode_without_middleware(self, airnav_settings, monkeypatch):
        monkeypatch.setattr(settings, "auth_mode", "session")
        resp = TestClient(_make_app()).get("/api/sectors")
        assert resp.status_code == 200
        assert _firs(resp) == ["Kuala Lumpur"]
