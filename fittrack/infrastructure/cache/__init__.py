"""Read-through TTL cache for remote catalog data."""

from .cache_key import build_key, canonicalize
from .pagination import Page, accumulate_pages, merge_by_id, paginated_search
from .partition import CachePartition
from .remote_cache import CacheEntry, RemoteCache

__all__ = [
    "RemoteCache",
    "CacheEntry",
    "CachePartition",
    "build_key",
    "canonicalize",
    "Page",
    "accumulate_pages",
    "merge_by_id",
    "paginated_search",
]
