"""Search routes - HTML page and JSON view-model."""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from memesearch.api.dependencies import get_config, get_search_resolver, limiter, search_rate_limit
from memesearch.application.search.use_case import SearchResultResolver
from memesearch.domain.ports.config import AppConfig
from memesearch.domain.ports.search import SearchUpstreamError

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter(tags=["search"])

# Status rendered when the provider call fails; not a ViewModel status.
ERROR_STATUS = "error"


@router.get("/", response_class=HTMLResponse)
@limiter.limit(search_rate_limit)
async def search_page(
    request: Request,
    search: str | None = None,
    resolver: SearchResultResolver = Depends(get_search_resolver),
    config: AppConfig = Depends(get_config),
) -> HTMLResponse:
    """Search form plus empty / no-results / results state."""
    try:
        view, meta = await resolver.resolve(search)
    except SearchUpstreamError as e:
        logger.exception("Search page failed for term=%r (upstream %s)", search, e.url)
        return templates.TemplateResponse(
            request,
            "index.html",
            {"page": config.page, "status": ERROR_STATUS, "search_term": search or "", "items": []},
            status_code=502,
        )

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "page": config.page,
            "status": view.status.value,
            "search_term": view.search_term,
            "items": view.items,
        },
        headers=meta.headers,
    )


@router.get("/api/search")
@limiter.limit(search_rate_limit)
async def search_json(
    request: Request,
    search: str | None = None,
    resolver: SearchResultResolver = Depends(get_search_resolver),
) -> JSONResponse:
    """Same view-model as the page, as JSON."""
    try:
        view, meta = await resolver.resolve(search)
    except SearchUpstreamError as e:
        logger.exception("Search API failed for term=%r (upstream %s)", search, e.url)
        raise HTTPException(status_code=502, detail="Search provider unavailable")

    return JSONResponse(content=view.to_json(), headers=meta.headers)
