"""Dependency Injection Container - centralized service management."""

from functools import cached_property

from memesearch.application.search.use_case import SearchResultResolver
from memesearch.domain.ports.config import AppConfig
from memesearch.domain.ports.search import SearchClientPort
from memesearch.infrastructure.config import load_config


class Container:
    """Dependency Injection Container with lazy initialization.

    All dependencies are created on first access and cached.

    Usage:
        container = Container()
        resolver = container.search_resolver
    """

    def __init__(self, config: AppConfig | None = None, search_client: SearchClientPort | None = None):
        """Initialize container with optional config and search client overrides."""
        self._config_override = config
        self._search_client_override = search_client

    @cached_property
    def config(self) -> AppConfig:
        """Application configuration."""
        if self._config_override:
            return self._config_override
        return load_config()

    @cached_property
    def search_client(self) -> SearchClientPort:
        """Upstream meme search adapter."""
        if self._search_client_override is not None:
            return self._search_client_override

        from memesearch.infrastructure.search.meme_api import MemeApiClient

        return MemeApiClient(self.config.search_provider)

    @cached_property
    def search_resolver(self) -> SearchResultResolver:
        """Search use case wired to the configured client and cache policy."""
        return SearchResultResolver(client=self.search_client, cache=self.config.cache)

    def reset(self) -> None:
        """Reset all cached instances (useful for testing)."""
        for attr in list(self.__dict__.keys()):
            if not attr.startswith("_"):
                delattr(self, attr)


# Global container instance
_container: Container | None = None


def get_container() -> Container:
    """Get or create global container instance."""
    global _container
    if _container is None:
        _container = Container()
    return _container

