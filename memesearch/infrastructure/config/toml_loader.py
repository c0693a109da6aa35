"""TOML configuration loader with env overrides."""

import logging
import os
import tomllib
from pathlib import Path

from memesearch.domain.ports.config import (
    AppConfig,
    CacheConfig,
    PageConfig,
    SearchProviderConfig,
    SecurityConfig,
    ServerConfig,
)

logger = logging.getLogger(__name__)


def _load_toml(path: Path) -> dict:
    """Load TOML file."""
    with open(path, "rb") as f:
        return tomllib.load(f)


def _set_number(config: dict, section: str, key: str, env_name: str, cast: type) -> None:
    """Apply a numeric env override, ignoring unparsable values."""
    raw = os.getenv(env_name)
    if not raw:
        return
    try:
        config.setdefault(section, {})[key] = cast(raw)
    except ValueError:
        logger.warning("Invalid %s env value: %r, ignoring", env_name, raw)


def _apply_env_overrides(config: dict) -> dict:
    """Apply environment variable overrides."""
    if base_url := os.getenv("MEME_API_BASE_URL"):
        config.setdefault("search_provider", {})["base_url"] = base_url.strip()
    _set_number(config, "search_provider", "timeout", "MEME_API_TIMEOUT", float)
    _set_number(config, "cache", "max_age", "CACHE_MAX_AGE", int)
    _set_number(config, "cache", "stale_while_revalidate", "CACHE_STALE_WHILE_REVALIDATE", int)
    _set_number(config, "server", "port", "PORT", int)
    if level := os.getenv("LOG_LEVEL"):
        config.setdefault("logging", {})["level"] = level.upper()
    if path := os.getenv("LOG_FILE"):
        config.setdefault("logging", {})["file"] = path.strip()
    if origins := os.getenv("CORS_ORIGINS"):
        config.setdefault("security", {})["cors_origins"] = [o.strip() for o in origins.split(",")]
    return config


def load_config(config_dir: Path | None = None) -> AppConfig:
    """Load configuration from TOML files with env overrides.

    Loads default.toml, then development.toml if exists.
    """
    if config_dir is None:
        config_dir = Path(__file__).resolve().parent.parent.parent.parent / "config"

    config: dict = {}

    default_path = config_dir / "default.toml"
    if default_path.exists():
        config = _load_toml(default_path)

    dev_path = config_dir / "development.toml"
    if dev_path.exists():
        dev_config = _load_toml(dev_path)
        for key, value in dev_config.items():
            if isinstance(value, dict) and key in config and isinstance(config[key], dict):
                config[key] = {**config[key], **value}
            else:
                config[key] = value

    config = _apply_env_overrides(config)

    logging_raw = config.get("logging") or {}

    return AppConfig(
        server=ServerConfig(**(config.get("server") or {})),
        search_provider=SearchProviderConfig(**(config.get("search_provider") or {})),
        cache=CacheConfig(**(config.get("cache") or {})),
        page=PageConfig(**(config.get("page") or {})),
        security=SecurityConfig(**(config.get("security") or {})),
        log_level=logging_raw.get("level", "INFO"),
        log_file=(logging_raw.get("file") or "").strip(),
        log_rotation_max_mb=int(logging_raw.get("log_rotation_max_mb", 5)),
        log_rotation_backups=int(logging_raw.get("log_rotation_backups", 3)),
    )
