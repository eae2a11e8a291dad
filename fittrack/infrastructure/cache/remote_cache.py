"""
Read-through TTL cache for remote catalog calls.

Entries live in partitions (exercises, details, search, ...) so one kind of
data can be invalidated without touching the rest. Concurrent misses on the
same key share a single in-flight fetch.
"""

import asyncio
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Generic, List, Mapping, Optional, Tuple, TypeVar

import structlog

from fittrack.domain.shared.errors import CacheKeyError
from fittrack.infrastructure.config import (
    CACHE_TTL_MS,
    SEARCH_HARD_CAP,
    SEARCH_MIN_RESULTS,
    SEARCH_PAGE_SIZE,
    Settings,
)

from .cache_key import build_key
from .pagination import NameFetcher, PageFetcher, paginated_search
from .partition import CachePartition

T = TypeVar("T")

logger = structlog.get_logger(__name__)

Clock = Callable[[], float]
Fetcher = Callable[[], Awaitable[T]]


def _system_clock_ms() -> float:
    return time.time() * 1000


@dataclass
class CacheEntry(Generic[T]):
    """Cached value and the wall-clock time (epoch ms) it was stored."""

    data: T
    timestamp: float
    partition: Optional[CachePartition] = None

    def is_fresh(self, now_ms: float, ttl_ms: int) -> bool:
        return now_ms - self.timestamp < ttl_ms


class RemoteCache:
    """In-memory TTL cache in front of remote fetchers.

    Failed fetches are never cached. A fetch started before an
    ``invalidate`` covering its partition is returned to its callers but
    not stored.

    Example:
        >>> cache = RemoteCache(ttl_ms=60_000)
        >>> data = await cache.get("categories", fetch_categories,
        ...                        CachePartition.CATEGORIES)
    """

    def __init__(
        self,
        ttl_ms: int = CACHE_TTL_MS,
        max_entries: Optional[int] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        """Initialize cache.

        Args:
            ttl_ms: Freshness window in milliseconds (default 30 minutes)
            max_entries: Optional bound; least recently used entries are
                evicted first. ``None`` means unbounded.
            clock: Returns the current time in epoch milliseconds
        """
        if ttl_ms <= 0:
            raise ValueError("ttl_ms must be positive")
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be positive")

        self.ttl_ms = ttl_ms
        self.max_entries = max_entries
        self._clock = clock or _system_clock_ms
        self._entries: "OrderedDict[str, CacheEntry[Any]]" = OrderedDict()
        self._inflight: Dict[str, Tuple[asyncio.Future, Optional[CachePartition]]] = {}
        self._epoch = 0
        self._partition_epochs: Dict[CachePartition, int] = {}

    @classmethod
    def from_settings(cls, settings: Settings, clock: Optional[Clock] = None) -> "RemoteCache":
        return cls(
            ttl_ms=settings.cache_ttl_ms,
            max_entries=settings.cache_max_entries,
            clock=clock,
        )

    # ------------------------------------------------------------------
    # Read-through
    # ------------------------------------------------------------------

    async def get(
        self,
        key: str,
        fetcher: Fetcher[T],
        partition: Optional[CachePartition] = None,
    ) -> T:
        """Return fresh cached data for ``key`` or fetch and store it.

        Args:
            key: Cache key (see ``build_key``)
            fetcher: Zero-argument coroutine function producing the data
            partition: Partition the entry belongs to

        Returns:
            Cached or freshly fetched data

        Raises:
            Whatever ``fetcher`` raises; nothing is cached in that case
        """
        if not isinstance(key, str) or not key:
            logger.warning("Invalid cache key, fetching uncached", key=repr(key))
            return await fetcher()

        entry = self._lookup(key)
        if entry is not None:
            return entry.data

        inflight = self._inflight.get(key)
        if inflight is None:
            task = asyncio.ensure_future(
                self._fetch_and_store(key, fetcher, partition, self._generation(partition))
            )
            self._inflight[key] = (task, partition)
            task.add_done_callback(lambda t, k=key: self._on_fetch_done(k, t))
        else:
            task = inflight[0]
            logger.debug("Joining in-flight fetch", key=key)

        # A cancelled caller must not cancel the fetch other callers share
        return await asyncio.shield(task)

    async def get_or_fetch(
        self,
        operation: str,
        params: Optional[Mapping[str, Any]],
        fetcher: Fetcher[T],
        partition: Optional[CachePartition] = None,
    ) -> T:
        """Build the key for ``operation``/``params`` and read through.

        A key that cannot be built never blocks the fetch: the data is
        fetched uncached instead.
        """
        try:
            key = build_key(operation, params)
        except CacheKeyError as e:
            logger.warning(
                "Cache key build failed, fetching uncached",
                operation=operation,
                error=str(e),
            )
            return await fetcher()
        return await self.get(key, fetcher, partition)

    async def search_paginated(
        self,
        query: Optional[str],
        filters: Optional[Any],
        page_fetcher: PageFetcher,
        page_size: int = SEARCH_PAGE_SIZE,
        hard_cap: int = SEARCH_HARD_CAP,
        min_results: int = SEARCH_MIN_RESULTS,
        name_fetcher: Optional[NameFetcher] = None,
    ) -> List[Any]:
        """Cached paginated search.

        The page fetcher receives the offset and applies ``filters``
        itself; ``filters`` here only takes part in the cache key.

        Returns:
            Distinct entities in server order, at most ``hard_cap`` before
            the supplementary name query is merged
        """
        normalized_query = (query or "").strip()

        async def run_search() -> List[Any]:
            return await paginated_search(
                normalized_query,
                page_fetcher,
                page_size=page_size,
                hard_cap=hard_cap,
                min_results=min_results,
                name_fetcher=name_fetcher,
            )

        return await self.get_or_fetch(
            "search",
            {
                "query": normalized_query,
                "filters": filters,
                "page_size": page_size,
                "hard_cap": hard_cap,
                "min_results": min_results,
            },
            run_search,
            CachePartition.SEARCH,
        )

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------

    def invalidate(self, scope: Optional[CachePartition] = None) -> int:
        """Drop cached entries.

        Args:
            scope: Partition to clear; ``None`` clears everything

        Returns:
            Number of entries removed
        """
        if scope is None:
            removed = len(self._entries)
            self._entries.clear()
            self._inflight.clear()
            self._epoch += 1
            logger.info("Cache cleared", removed=removed)
            return removed

        scope = CachePartition(scope)
        keys = [k for k, entry in self._entries.items() if entry.partition is scope]
        for key in keys:
            del self._entries[key]
        for key in [k for k, (_, p) in self._inflight.items() if p is scope]:
            del self._inflight[key]
        self._partition_epochs[scope] = self._partition_epochs.get(scope, 0) + 1

        logger.info("Cache partition cleared", partition=scope.value, removed=len(keys))
        return len(keys)

    def purge_expired(self) -> int:
        """Remove expired entries.

        Returns:
            Number of entries removed
        """
        now = self._clock()
        expired = [
            key for key, entry in self._entries.items() if not entry.is_fresh(now, self.ttl_ms)
        ]
        for key in expired:
            del self._entries[key]

        if expired:
            logger.info("Removed expired entries", count=len(expired))
        return len(expired)

    def size(self) -> int:
        """Number of stored entries, fresh or not."""
        return len(self._entries)

    def has(self, key: str) -> bool:
        """Whether ``key`` holds fresh data. Does not touch LRU order."""
        entry = self._entries.get(key)
        return entry is not None and entry.is_fresh(self._clock(), self.ttl_ms)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _generation(self, partition: Optional[CachePartition]) -> Tuple[int, int]:
        return self._epoch, self._partition_epochs.get(partition, 0) if partition else 0

    def _lookup(self, key: str) -> Optional[CacheEntry[Any]]:
        entry = self._entries.get(key)
        if entry is None:
            logger.debug("Cache miss", key=key)
            return None

        if not entry.is_fresh(self._clock(), self.ttl_ms):
            logger.debug("Cache expired", key=key)
            del self._entries[key]
            return None

        self._entries.move_to_end(key)
        logger.debug("Cache hit", key=key)
        return entry

    def _store(self, key: str, data: Any, partition: Optional[CachePartition]) -> None:
        self._entries[key] = CacheEntry(data=data, timestamp=self._clock(), partition=partition)
        self._entries.move_to_end(key)

        if self.max_entries is not None:
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.info("Evicted least recently used entry", key=evicted)

        logger.debug("Cached entry", key=key, partition=partition.value if partition else None)

    async def _fetch_and_store(
        self,
        key: str,
        fetcher: Fetcher[T],
        partition: Optional[CachePartition],
        generation: Tuple[int, int],
    ) -> T:
        try:
            data = await fetcher()
        except Exception as e:
            logger.warning("Fetch failed, not cached", key=key, error=str(e))
            raise

        if self._generation(partition) == generation:
            self._store(key, data, partition)
        else:
            logger.debug("Discarding result fetched before invalidation", key=key)
        return data

    def _on_fetch_done(self, key: str, task: asyncio.Future) -> None:
        inflight = self._inflight.get(key)
        if inflight is not None and inflight[0] is task:
            del self._inflight[key]
        # Mark the outcome retrieved when every caller has gone away
        if not task.cancelled():
            task.exception()
