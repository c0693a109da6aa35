"""Pytest configuration and shared fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from memesearch.api.dependencies import get_search_resolver, limiter
from memesearch.application.search.use_case import SearchResultResolver
from memesearch.domain.ports.config import CacheConfig
from memesearch.domain.ports.search import UpstreamResult
from memesearch.domain.services.upstream_parser import parse_upstream
from memesearch.main import app

CAT_PAYLOAD = [
    {
        "id": "1",
        "meme": {"name": "Cat", "url": "http://x/1", "image": {"medium": "http://x/1.png"}},
    },
    {"id": "2", "meme": {"name": "Dog", "url": "http://x/2"}},
]


class StubSearchClient:
    """SearchClientPort returning a canned payload and recording every term."""

    def __init__(self, payload=None, error: Exception | None = None):
        self.payload = payload
        self.error = error
        self.calls: list[str] = []

    async def search(self, term: str) -> UpstreamResult:
        self.calls.append(term)
        if self.error is not None:
            raise self.error
        return parse_upstream(self.payload)


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    """Each test starts with a fresh slowapi window."""
    limiter.reset()
    yield


@pytest.fixture
def make_stub():
    """Factory for StubSearchClient with a custom payload or error."""
    return StubSearchClient


@pytest.fixture
def stub_client():
    """Stub returning the cat/dog payload."""
    return StubSearchClient(payload=CAT_PAYLOAD)


@pytest.fixture
def resolver(stub_client):
    return SearchResultResolver(client=stub_client, cache=CacheConfig())


@pytest.fixture
async def client(stub_client):
    """ASGI client with the search resolver wired to `stub_client`."""
    app.dependency_overrides[get_search_resolver] = lambda: SearchResultResolver(
        client=stub_client, cache=CacheConfig()
    )
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.pop(get_search_resolver, None)
