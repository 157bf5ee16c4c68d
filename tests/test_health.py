"""
Tests for health endpoints.
"""
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ConnectionFailure

from app.database import get_db
from app.main import app


@pytest.fixture
def fake_db():
    db = MagicMock()
    app.dependency_overrides[get_db] = lambda: db
    yield db
    app.dependency_overrides.clear()


class TestHealthEndpoints:
    """Test health endpoints."""

    def test_healthy(self, fake_db):
        fake_db.command.return_value = {"ok": 1.0}
        with TestClient(app) as c:
            response = c.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"]["status"] == "healthy"
        fake_db.command.assert_called_once_with("ping")

    def test_degraded_when_database_down(self, fake_db):
        fake_db.command.side_effect = ConnectionFailure("connection refused")
        with TestClient(app) as c:
            response = c.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "degraded"
        assert data["database"]["status"] == "unhealthy"

    def test_security_headers(self, fake_db):
        with TestClient(app) as c:
            response = c.get("/api/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_unknown_route_uses_error_format(self, fake_db):
        with TestClient(app) as c:
            response = c.get("/api/nope")
        assert response.status_code == 404
        data = response.json()
        assert data["ok"] is False
        assert data["error_code"] == "HTTP_404"
