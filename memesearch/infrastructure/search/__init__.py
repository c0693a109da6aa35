"""Search provider adapters."""

from memesearch.infrastructure.search.meme_api import MemeApiClient

__all__ = ["MemeApiClient"]
