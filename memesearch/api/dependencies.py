"""FastAPI dependencies - DI container."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from memesearch.api.container import get_container
from memesearch.application.search.use_case import SearchResultResolver
from memesearch.domain.ports.config import AppConfig

limiter = Limiter(key_func=get_remote_address)


def get_config() -> AppConfig:
    """Configuration from the global container (loaded once)."""
    return get_container().config


def get_search_resolver() -> SearchResultResolver:
    """SearchResultResolver wired by the container."""
    return get_container().search_resolver


def search_rate_limit() -> str:
    """Per-client limit for search routes, from security config."""
    return f"{get_config().security.rate_limit_requests_per_minute}/minute"
