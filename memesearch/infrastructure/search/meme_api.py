"""Meme API adapter - SearchClientPort over HTTP (httpx)."""

import logging
from contextlib import asynccontextmanager

import httpx

from memesearch.domain.ports.config import SearchProviderConfig
from memesearch.domain.ports.search import SearchUpstreamError, UpstreamAbsent, UpstreamResult
from memesearch.domain.services.upstream_parser import parse_upstream
from memesearch.infrastructure.services.http_pool import get_http_client

logger = logging.getLogger(__name__)


class MemeApiClient:
    """Queries `GET {base_url}{search_path}?q=<term>` and parses the JSON array.

    The term is passed as a query param, so httpx URL-encodes it. If no
    client is injected the shared connection pool is used.
    """

    def __init__(
        self,
        config: SearchProviderConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize with provider config and an optional httpx client."""
        self._config = config
        self._client = client

    @property
    def url(self) -> str:
        """Search endpoint URL."""
        return self._config.search_url

    @asynccontextmanager
    async def _get_client(self):
        if self._client is not None:
            yield self._client
        else:
            async with get_http_client(self._config.timeout) as client:
                yield client

    async def search(self, term: str) -> UpstreamResult:
        """Run one search request. Raises SearchUpstreamError on transport failure."""
        async with self._get_client() as client:
            try:
                response = await client.get(
                    self.url,
                    params={"q": term},
                    timeout=self._config.timeout,
                )
            except httpx.HTTPError as e:
                logger.warning("Search request to %s failed: %s", self.url, e)
                raise SearchUpstreamError(f"Search provider unreachable: {e}", url=self.url) from e

        if response.is_error:
            logger.warning("Search provider %s returned HTTP %d", self.url, response.status_code)
            raise SearchUpstreamError(
                f"Search provider returned HTTP {response.status_code}",
                url=self.url,
                status_code=response.status_code,
            )

        if not response.content.strip():
            return UpstreamAbsent()

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("Search provider %s returned invalid JSON: %s", self.url, e)
            raise SearchUpstreamError(
                "Search provider returned invalid JSON",
                url=self.url,
                status_code=response.status_code,
            ) from e

        return parse_upstream(payload)
