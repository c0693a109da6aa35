"""Tests for TOML config loader."""

import tempfile
from pathlib import Path

from memesearch.infrastructure.config.toml_loader import _apply_env_overrides, load_config


class TestLoadConfig:
    """Tests for load_config function."""

    def test_loads_default_config(self):
        """Loads the repository's default configuration."""
        config = load_config()

        assert config.search_provider.search_url == "https://api.tvmaze.com/search/memes"
        assert config.cache.header_value() == "max-age=60, stale-while-revalidate=60"
        assert config.page.title == "Search an image or meme"

    def test_loads_from_custom_dir(self):
        """Loads config from custom directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "default.toml").write_text("""
[search_provider]
base_url = "https://memes.example/"

[server]
port = 9999
""")
            config = load_config(Path(tmpdir))

            assert config.search_provider.search_url == "https://memes.example/search/memes"
            assert config.server.port == 9999

    def test_merges_development_config(self):
        """Merges development.toml over default.toml section by section."""
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "default.toml").write_text("""
[cache]
max_age = 60
stale_while_revalidate = 60
""")
            (Path(tmpdir) / "development.toml").write_text("""
[cache]
max_age = 0
""")
            config = load_config(Path(tmpdir))

            assert config.cache.max_age == 0
            assert config.cache.stale_while_revalidate == 60

    def test_handles_missing_files(self):
        """Empty directory falls back to model defaults."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config = load_config(Path(tmpdir))

            assert config.search_provider.base_url == "https://api.tvmaze.com"
            assert config.log_level == "INFO"
            assert config.log_file == ""


class TestApplyEnvOverrides:
    """Tests for _apply_env_overrides function."""

    def test_base_url_override(self, monkeypatch):
        monkeypatch.setenv("MEME_API_BASE_URL", " https://other.test ")
        config = _apply_env_overrides({})
        assert config["search_provider"]["base_url"] == "https://other.test"

    def test_numeric_overrides(self, monkeypatch):
        monkeypatch.setenv("MEME_API_TIMEOUT", "2.5")
        monkeypatch.setenv("CACHE_MAX_AGE", "30")
        monkeypatch.setenv("PORT", "8080")
        config = _apply_env_overrides({})
        assert config["search_provider"]["timeout"] == 2.5
        assert config["cache"]["max_age"] == 30
        assert config["server"]["port"] == 8080

    def test_invalid_number_ignored(self, monkeypatch):
        monkeypatch.setenv("CACHE_STALE_WHILE_REVALIDATE", "soon")
        config = _apply_env_overrides({"cache": {"stale_while_revalidate": 60}})
        assert config["cache"]["stale_while_revalidate"] == 60

    def test_logging_and_cors(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
        config = _apply_env_overrides({})
        assert config["logging"]["level"] == "DEBUG"
        assert config["security"]["cors_origins"] == ["http://a.test", "http://b.test"]
