"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient


class TestHealthEndpoints:
    """Tests for health check routes."""

    @pytest.mark.asyncio
    async def test_health_endpoint(self, client: AsyncClient):
        response = await client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    @pytest.mark.asyncio
    async def test_health_live_endpoint(self, client: AsyncClient):
        response = await client.get("/health/live")
        assert response.status_code == 200

        data = response.json()
        assert data["checks"] == {"alive": True}

    @pytest.mark.asyncio
    async def test_health_ready_endpoint(self, client: AsyncClient):
        response = await client.get("/health/ready")
        # 503 when the configured database is unreachable
        assert response.status_code in [200, 503]

        data = response.json()
        assert "database" in data["checks"]

    @pytest.mark.asyncio
    async def test_health_needs_no_identity(self, client: AsyncClient):
        response = await client.get("/")
        assert response.json()["service"] == "Taxonomy Admin"

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, client: AsyncClient):
        response = await client.get("/health", headers={"X-Request-Id": "req-42"})
        assert response.headers["X-Request-Id"] == "req-42"
