"""
Tests for the health endpoints and the API index.
"""

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient


class TestHealthEndpoint:
    """Tests for the /health endpoint."""

    def test_health_returns_200(self, client: TestClient) -> None:
        """Test that health endpoint returns 200 OK."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_response_structure(self, client: TestClient) -> None:
        """Test that health response has expected structure."""
        body = client.get("/health").json()

        assert body["success"] is True
        assert body["message"] == "Service is healthy"
        data = body["data"]
        assert data["environment"] == "test"
        assert data["version"] == "1.0.0"
        assert isinstance(data["uptime"], (int, float))
        assert data["memory"]["used"].endswith(" MB")
        assert data["memory"]["total"].endswith(" MB")

    def test_health_timestamp_format(self, client: TestClient) -> None:
        """Test that timestamp is ISO format in UTC."""
        timestamp = client.get("/health").json()["timestamp"]

        assert "T" in timestamp
        assert timestamp.endswith("Z")


class TestReadinessProbe:
    """Tests for the /health/ready endpoint."""

    def test_ready_when_database_answers(self, client: TestClient) -> None:
        """Test that readiness reports a connected database."""
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Service is ready"
        assert body["data"] == {"database": "connected", "services": "operational"}

    def test_not_ready_when_database_is_down(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that readiness answers 503 when the database check fails."""
        async def unhealthy() -> Dict[str, Any]:
            return {"status": "unhealthy", "error": "connection refused"}

        monkeypatch.setattr("app.api.v1.health.db_health_check", unhealthy)

        response = client.get("/health/ready")

        assert response.status_code == 503
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Service is not ready"
        assert body["data"] is None
        assert body["errors"] == [{"field": "database", "message": "disconnected"}]


class TestLivenessProbe:
    """Tests for the /health/live endpoint."""

    def test_live(self, client: TestClient) -> None:
        """Test that liveness answers while the process runs."""
        response = client.get("/health/live")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Service is alive"
        assert body["data"]["status"] == "alive"
        assert isinstance(body["data"]["pid"], int)


class TestApiIndex:
    """Tests for the /api/v1/docs endpoint."""

    def test_lists_user_endpoints(self, client: TestClient) -> None:
        """Test that the index names every user endpoint."""
        response = client.get("/api/v1/docs")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "API Documentation"
        users = body["data"]["endpoints"]["users"]
        assert "GET /api/v1/users" in users
        assert "DELETE /api/v1/users/:id" in users
        assert body["data"]["documentation"] == "/docs"
