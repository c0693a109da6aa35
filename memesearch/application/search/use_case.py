"""Search use case - resolves a query parameter into a page view-model."""

import logging

from memesearch.domain.entities.view_model import (
    ResponseMetadata,
    SearchStatus,
    ViewModel,
)
from memesearch.domain.ports.config import CacheConfig
from memesearch.domain.ports.search import SearchClientPort, UpstreamItems
from memesearch.domain.services.upstream_parser import to_view_items

logger = logging.getLogger(__name__)


class SearchResultResolver:
    """Turns the raw `search` query parameter into a ViewModel.

    Stateless apart from its collaborators: one upstream call per non-empty
    term, none otherwise. Transport failures (SearchUpstreamError) are not
    caught here.
    """

    def __init__(self, client: SearchClientPort, cache: CacheConfig | None = None):
        """Initialize with a search client and the Cache-Control policy."""
        self._client = client
        self._cache = cache or CacheConfig()

    async def resolve(self, query_param: str | None) -> tuple[ViewModel, ResponseMetadata]:
        """Produce the view-model and response metadata for one request."""
        if not query_param:
            return ViewModel(status=SearchStatus.EMPTY_SEARCH, search_term=""), ResponseMetadata()

        result = await self._client.search(query_param)

        if not isinstance(result, UpstreamItems):
            logger.info("No results for term=%r (%s)", query_param, result.kind)
            return (
                ViewModel(status=SearchStatus.NO_RESULTS, search_term=query_param),
                ResponseMetadata(),
            )

        items = to_view_items(result.items)
        logger.debug(
            "Resolved term=%r: %d of %d upstream items kept",
            query_param,
            len(items),
            len(result.items),
        )
        view = ViewModel(
            status=SearchStatus.RESULTS_FOUND,
            search_term=query_param,
            items=items,
        )
        return view, ResponseMetadata(cache_control=self._cache.header_value())
