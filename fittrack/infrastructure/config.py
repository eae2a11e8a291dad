"""Configuration utilities for the infrastructure layer.

All tunables are named constants with environment overrides:

Example .env:
    FITTRACK_CACHE_TTL_MS=600000
    FITTRACK_SEARCH_HARD_CAP=300
    FITTRACK_CATALOG_BASE_URL=https://wger.de/api/v2
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from fittrack.domain.shared.errors import ConfigurationError

# Freshness window for cached catalog reads (30 minutes)
CACHE_TTL_MS = 30 * 60 * 1000

# Page sizes used by the different catalog call sites
DEFAULT_PAGE_SIZE = 100
SEARCH_PAGE_SIZE = 200
WORKOUT_PAGE_SIZE = 1500

# Stop paginating a search once this many entities are accumulated
SEARCH_HARD_CAP = 500

# Below this many hits a text search is topped up with a name query
SEARCH_MIN_RESULTS = 50

CATALOG_BASE_URL = "https://wger.de/api/v2"
CATALOG_LANGUAGE_ID = 2  # English
CATALOG_TIMEOUT_S = 10.0
CATALOG_MAX_RETRIES = 3


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the cache and the catalog adapter."""

    cache_ttl_ms: int = CACHE_TTL_MS
    cache_max_entries: Optional[int] = None
    default_page_size: int = DEFAULT_PAGE_SIZE
    search_page_size: int = SEARCH_PAGE_SIZE
    workout_page_size: int = WORKOUT_PAGE_SIZE
    search_hard_cap: int = SEARCH_HARD_CAP
    search_min_results: int = SEARCH_MIN_RESULTS
    catalog_base_url: str = CATALOG_BASE_URL
    catalog_language_id: int = CATALOG_LANGUAGE_ID
    catalog_timeout_s: float = CATALOG_TIMEOUT_S
    catalog_max_retries: int = CATALOG_MAX_RETRIES

    @staticmethod
    def from_env(env_file: Optional[Union[str, Path]] = None) -> "Settings":
        """Build settings from ``FITTRACK_*`` environment variables.

        Loads ``.env`` first (without overriding variables already set).

        Raises:
            ConfigurationError: If an override is malformed or out of range
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        max_entries = _env_int("FITTRACK_CACHE_MAX_ENTRIES", 0)
        return Settings(
            cache_ttl_ms=_env_int("FITTRACK_CACHE_TTL_MS", CACHE_TTL_MS, minimum=1),
            cache_max_entries=max_entries or None,
            default_page_size=_env_int("FITTRACK_DEFAULT_PAGE_SIZE", DEFAULT_PAGE_SIZE, 1),
            search_page_size=_env_int("FITTRACK_SEARCH_PAGE_SIZE", SEARCH_PAGE_SIZE, 1),
            workout_page_size=_env_int("FITTRACK_WORKOUT_PAGE_SIZE", WORKOUT_PAGE_SIZE, 1),
            search_hard_cap=_env_int("FITTRACK_SEARCH_HARD_CAP", SEARCH_HARD_CAP, 1),
            search_min_results=_env_int("FITTRACK_SEARCH_MIN_RESULTS", SEARCH_MIN_RESULTS),
            catalog_base_url=os.getenv("FITTRACK_CATALOG_BASE_URL", CATALOG_BASE_URL).rstrip("/"),
            catalog_language_id=_env_int(
                "FITTRACK_CATALOG_LANGUAGE_ID", CATALOG_LANGUAGE_ID, 1
            ),
            catalog_timeout_s=_env_float("FITTRACK_CATALOG_TIMEOUT_S", CATALOG_TIMEOUT_S),
            catalog_max_retries=_env_int("FITTRACK_CATALOG_MAX_RETRIES", CATALOG_MAX_RETRIES, 1),
        )
