"""Config models - application settings loaded from TOML and env."""

from pydantic import BaseModel, ConfigDict


class SearchProviderConfig(BaseModel):
    """Upstream meme search API connection."""

    base_url: str = "https://api.tvmaze.com"
    search_path: str = "/search/memes"
    timeout: float = 10.0

    model_config = ConfigDict(extra="ignore")

    @property
    def search_url(self) -> str:
        """Full URL of the search endpoint (without query string)."""
        return f"{self.base_url.rstrip('/')}/{self.search_path.lstrip('/')}"


class CacheConfig(BaseModel):
    """Cache-Control hint attached to pages with results."""

    max_age: int = 60
    stale_while_revalidate: int = 60

    def header_value(self) -> str:
        """Render as a Cache-Control header value."""
        return f"max-age={self.max_age}, stale-while-revalidate={self.stale_while_revalidate}"


class PageConfig(BaseModel):
    """Static page metadata rendered into <head>."""

    title: str = "Search an image or meme"
    description: str = "Search an image or meme"
    placeholder: str = "Search a image or meme..."


class SecurityConfig(BaseModel):
    """Security settings."""

    rate_limit_requests_per_minute: int = 60
    cors_origins: list[str] = ["http://localhost:8000"]


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000


class AppConfig(BaseModel):
    """Full application configuration."""

    server: ServerConfig = ServerConfig()
    search_provider: SearchProviderConfig = SearchProviderConfig()
    cache: CacheConfig = CacheConfig()
    page: PageConfig = PageConfig()
    security: SecurityConfig = SecurityConfig()
    log_level: str = "INFO"
    # Log file: path relative to cwd or absolute. Empty = only stdout.
    log_file: str = ""
    log_rotation_max_mb: int = 5
    log_rotation_backups: int = 3

