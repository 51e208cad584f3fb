"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from blog_api.main import app


@pytest.mark.asyncio
async def test_health_check_returns_200():
    """Health endpoint should return 200 with status, version, and environment."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data
    assert "environment" in data


@pytest.mark.asyncio
async def test_docs_are_served(client: AsyncClient):
    response = await client.get("/api-docs/openapi.json")

    assert response.status_code == 200
    assert "/api/articles" in response.json()["paths"]
