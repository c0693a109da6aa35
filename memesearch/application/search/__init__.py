"""Search application layer."""

from memesearch.application.search.use_case import SearchResultResolver

__all__ = ["SearchResultResolver"]
