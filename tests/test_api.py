"""Test AIRNAV application endpoints."""

import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


class TestHealth:
    """Test health endpoints."""

    def test_health(self, client):
        """Test health check endpoint."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "operational"
        assert data["system"] == "AIRNAV"

    def test_status(self, client):
        """Test status endpoint."""
        response = client.get("/api/status")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "AIRNAV"
        assert "version" in data
        assert data["auth_mode"] in ("token", "session")


class TestRoutes:
    """Test that every API router is mounted."""

    def test_search_mounted(self, client, airnav_settings):
        response = client.get("/api/search", params={"query": "FIR"})
        assert response.status_code == 200
        assert len(response.json()["results"]) == 2

    def test_sectors_mounted(self, client, airnav_settings):
        response = client.get("/api/sectors")
        assert response.status_code == 200

    def test_layers_mounted(self, client):
        response = client.get("/api/layers")
        assert response.status_code == 200

    def test_index(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "AIRNAV" in response.text
