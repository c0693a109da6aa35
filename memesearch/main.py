"""Application entry point."""

from contextlib import asynccontextmanager
from pathlib import Path

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from memesearch.api.container import get_container
from memesearch.api.dependencies import limiter
from memesearch.api.routes.search import router as search_router
from memesearch.infrastructure.services.http_pool import HTTPPool
from memesearch.shared.logging import setup_logging

log = structlog.get_logger()

STATIC_DIR = Path(__file__).resolve().parent / "api" / "static"


def _apply_logging_config(container):
    """Apply logging from container config (stdout + optional file)."""
    c = container.config
    setup_logging(
        level=c.log_level,
        file_path=c.log_file or "",
        rotation_max_mb=c.log_rotation_max_mb,
        rotation_backups=c.log_rotation_backups,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: load config and set up logging. Shutdown: close the HTTP pool."""
    container = get_container()
    _apply_logging_config(container)
    log.info("startup_begin", search_provider=container.config.search_provider.search_url)
    log.info("startup_complete")
    yield
    log.info("shutdown_begin")
    await HTTPPool.reset()
    log.info("shutdown_complete")


app = FastAPI(
    title="Meme Search",
    version="0.1.0",
    description="Search an image or meme",
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS
container = get_container()
app.add_middleware(
    CORSMiddleware,
    allow_origins=container.config.security.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
app.include_router(search_router)


@app.get("/health")
@limiter.limit("100/minute")
async def health(request: Request) -> dict:
    """Health check with the configured search provider."""
    container = get_container()
    return {
        "status": "ok",
        "service": "meme-search",
        "search_provider": container.config.search_provider.base_url,
    }
