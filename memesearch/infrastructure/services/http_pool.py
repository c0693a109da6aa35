"""HTTP Connection Pool - shared async HTTP client for upstream calls."""

import asyncio
import logging
from contextlib import asynccontextmanager

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def _build_timeout(timeout: float) -> httpx.Timeout:
    return httpx.Timeout(timeout, connect=min(timeout, 5.0))


class HTTPPool:
    """Shared HTTP connection pool for async requests.

    Reuses connections across requests. The client is created lazily and
    closed on application shutdown.
    """

    _instance: "HTTPPool | None" = None
    _lock: asyncio.Lock | None = None

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize HTTP pool (client created on first use)."""
        self._client: httpx.AsyncClient | None = None
        self._timeout = _build_timeout(timeout)
        self._limits = httpx.Limits(
            max_keepalive_connections=20,
            max_connections=50,
            keepalive_expiry=30.0,
        )

    @classmethod
    async def get_instance(cls, timeout: float | None = None) -> "HTTPPool":
        """Get singleton instance (async-safe).

        A timeout different from the current one closes the pooled client so
        the next get_client() builds a new one with it.
        """
        if cls._lock is None:
            cls._lock = asyncio.Lock()

        async with cls._lock:
            if cls._instance is None:
                cls._instance = HTTPPool(timeout if timeout is not None else DEFAULT_TIMEOUT)
            elif timeout is not None and cls._instance.timeout != _build_timeout(timeout):
                await cls._instance.close()
                cls._instance._timeout = _build_timeout(timeout)
            return cls._instance

    @property
    def timeout(self) -> httpx.Timeout:
        """Timeout applied to the pooled client."""
        return self._timeout

    async def get_client(self) -> httpx.AsyncClient:
        """Get or create the shared HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=self._limits,
                follow_redirects=True,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    @classmethod
    async def reset(cls) -> None:
        """Close and drop the singleton (shutdown and tests)."""
        if cls._instance:
            await cls._instance.close()
            cls._instance = None


@asynccontextmanager
async def get_http_client(timeout: float | None = None):
    """Context manager for getting HTTP client from pool.

    Usage:
        async with get_http_client(config.timeout) as client:
            response = await client.get(url)
    """
    pool = await HTTPPool.get_instance(timeout)
    client = await pool.get_client()
    yield client
