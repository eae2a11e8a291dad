"""Unit tests for Settings loading."""

import pytest

from fittrack.domain.shared.errors import ConfigurationError
from fittrack.infrastructure.config import (
    CACHE_TTL_MS,
    SEARCH_HARD_CAP,
    Settings,
)

_VARS = (
    "FITTRACK_CACHE_TTL_MS",
    "FITTRACK_CACHE_MAX_ENTRIES",
    "FITTRACK_SEARCH_HARD_CAP",
    "FITTRACK_CATALOG_BASE_URL",
    "FITTRACK_CATALOG_TIMEOUT_S",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove host overrides; anything set during a test is removed afterwards."""
    for name in _VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self):
        """Test constants used when nothing is overridden."""
        settings = Settings.from_env()

        assert settings.cache_ttl_ms == CACHE_TTL_MS == 1_800_000
        assert settings.search_hard_cap == SEARCH_HARD_CAP == 500
        assert settings.search_page_size == 200
        assert settings.workout_page_size == 1500
        assert settings.search_min_results == 50
        assert settings.catalog_language_id == 2
        assert settings.cache_max_entries is None

    def test_env_overrides(self, monkeypatch):
        """Test FITTRACK_* variables override defaults."""
        monkeypatch.setenv("FITTRACK_CACHE_TTL_MS", "60000")
        monkeypatch.setenv("FITTRACK_CACHE_MAX_ENTRIES", "256")
        monkeypatch.setenv("FITTRACK_CATALOG_BASE_URL", "http://localhost:8000/api/v2/")

        settings = Settings.from_env()

        assert settings.cache_ttl_ms == 60000
        assert settings.cache_max_entries == 256
        assert settings.catalog_base_url == "http://localhost:8000/api/v2"

    def test_env_file(self, tmp_path):
        """Test values are read from a dotenv file."""
        env_file = tmp_path / ".env"
        env_file.write_text("FITTRACK_SEARCH_HARD_CAP=300\n")

        settings = Settings.from_env(env_file)

        assert settings.search_hard_cap == 300

    def test_malformed_number(self, monkeypatch):
        """Test non-numeric override is a configuration error."""
        monkeypatch.setenv("FITTRACK_CACHE_TTL_MS", "half an hour")

        with pytest.raises(ConfigurationError, match="FITTRACK_CACHE_TTL_MS"):
            Settings.from_env()

    def test_out_of_range(self, monkeypatch):
        """Test zero TTL is rejected."""
        monkeypatch.setenv("FITTRACK_CACHE_TTL_MS", "0")

        with pytest.raises(ConfigurationError):
            Settings.from_env()

    def test_non_positive_timeout(self, monkeypatch):
        """Test timeout must be positive."""
        monkeypatch.setenv("FITTRACK_CATALOG_TIMEOUT_S", "-1")

        with pytest.raises(ConfigurationError):
            Settings.from_env()
