"""Health endpoint integration test."""

import pytest
from httpx import ASGITransport, AsyncClient

from memesearch.main import app


@pytest.mark.asyncio
async def test_health_returns_ok():
    """Health endpoint returns status and the configured provider."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        resp = await client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["service"] == "meme-search"
    assert data["search_provider"].startswith("http")
