"""Unit tests for health check routes."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from app import __version__
from app.api.routes.health import HealthResponse, ReadyResponse, router
from app.core.database import get_session


class TestHealthRoutes:
    """Test health check routes."""

    def test_health_response_model(self):
        """Test HealthResponse model."""
        response = HealthResponse(status="healthy", version="1.0.0")
        assert response.status == "healthy"
        assert response.version == "1.0.0"

    def test_ready_response_model(self):
        """Test ReadyResponse model."""
        response = ReadyResponse(status="ready", database="connected")
        assert response.database == "connected"

    def test_health_routes_in_router(self):
        """Test that health routes are defined in router."""
        paths = [r.path for r in router.routes]
        assert "/health" in paths
        assert "/health/ready" in paths
        assert "/health/live" in paths


@pytest.mark.asyncio
class TestHealthEndpoints:
    """Exercise health endpoints through the app."""

    async def test_health_check(self, test_client):
        response = await test_client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": __version__}

    async def test_liveness(self, test_client):
        response = await test_client.get("/api/health/live")

        assert response.status_code == 200
        assert response.json() == {"status": "alive"}

    async def test_ready_when_database_answers(self, app, test_client, mock_session):
        app.dependency_overrides[get_session] = lambda: mock_session

        response = await test_client.get("/api/health/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "database": "connected"}
        mock_session.execute.assert_awaited_once()

    async def test_not_ready_when_database_fails(self, app, test_client):
        session = AsyncMock()
        session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
        app.dependency_overrides[get_session] = lambda: session

        response = await test_client.get("/api/health/ready")

        assert response.status_code == 503
        assert response.json() == {"status": "not_ready", "database": "disconnected"}
        session.rollback.assert_awaited_once()
