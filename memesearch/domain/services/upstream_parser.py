"""Upstream parser - turns untrusted provider JSON into typed results."""

import logging
from typing import Any

from pydantic import ValidationError

from memesearch.domain.entities.view_model import ViewItem
from memesearch.domain.ports.search import (
    RawSearchItem,
    UpstreamAbsent,
    UpstreamEmpty,
    UpstreamItems,
    UpstreamResult,
)

logger = logging.getLogger(__name__)


def parse_upstream(payload: Any) -> UpstreamResult:
    """Classify a decoded provider body.

    None and non-list values are Absent, an empty list is Empty. Otherwise
    every entry is validated as a RawSearchItem; entries that do not fit are
    dropped and the survivors keep their original order.
    """
    if payload is None:
        return UpstreamAbsent()
    if not isinstance(payload, list):
        logger.warning("Unexpected search payload type %s, treating as absent", type(payload).__name__)
        return UpstreamAbsent()
    if not payload:
        return UpstreamEmpty()

    items: list[RawSearchItem] = []
    for index, entry in enumerate(payload):
        try:
            items.append(RawSearchItem.model_validate(entry))
        except ValidationError as e:
            logger.debug("Dropping malformed search item #%d: %s", index, e.error_count())
    return UpstreamItems(items=items)


def to_view_items(items: list[RawSearchItem]) -> list[ViewItem]:
    """Map raw hits to view items, skipping hits without an image."""
    return [
        ViewItem(
            id=item.id,
            name=item.meme.name,
            image=item.meme.image.medium,
            url=item.meme.url,
        )
        for item in items
        if item.meme.image is not None
    ]
