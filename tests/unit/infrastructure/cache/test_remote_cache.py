"""Unit tests for RemoteCache."""

import asyncio

import pytest

from fittrack.domain.shared.errors import UpstreamFetchError
from fittrack.infrastructure.cache import CachePartition, RemoteCache
from fittrack.infrastructure.config import Settings


class CountingFetcher:
    """Async fetcher that records how often it was called."""

    def __init__(self, result=None, error=None, delay: float = 0):
        self.calls = 0
        self.result = result if result is not None else ["data"]
        self.error = error
        self.delay = delay

    async def __call__(self):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def cache(clock) -> RemoteCache:
    """Fixture providing a 30 minute cache on a fake clock."""
    return RemoteCache(ttl_ms=30 * 60 * 1000, clock=clock)


class TestReadThrough:
    """Test TTL read-through behaviour."""

    @pytest.mark.asyncio
    async def test_miss_then_hit(self, cache):
        """Test second read is served without calling the fetcher."""
        fetcher = CountingFetcher(result=[1, 2, 3])

        first = await cache.get("categories", fetcher, CachePartition.CATEGORIES)
        second = await cache.get("categories", fetcher, CachePartition.CATEGORIES)

        assert first == second == [1, 2, 3]
        assert fetcher.calls == 1
        assert cache.size() == 1

    @pytest.mark.asyncio
    async def test_expired_entry_refetched(self, cache, clock):
        """Test data older than the TTL is fetched again."""
        fetcher = CountingFetcher()

        await cache.get("muscles", fetcher)
        clock.advance(30 * 60 * 1000 - 1)
        await cache.get("muscles", fetcher)
        assert fetcher.calls == 1

        clock.advance(1)
        await cache.get("muscles", fetcher)
        assert fetcher.calls == 2

    @pytest.mark.asyncio
    async def test_failure_not_cached(self, cache):
        """Test fetch errors propagate and leave no entry."""
        failing = CountingFetcher(error=UpstreamFetchError("boom", status=503))

        with pytest.raises(UpstreamFetchError):
            await cache.get("equipment", failing)

        assert cache.size() == 0
        assert not cache.has("equipment")

        ok = CountingFetcher(result=["barbell"])
        assert await cache.get("equipment", ok) == ["barbell"]
        assert ok.calls == 1

    @pytest.mark.asyncio
    async def test_get_or_fetch_builds_key(self, cache):
        """Test equivalent params share one entry."""
        fetcher = CountingFetcher()

        await cache.get_or_fetch("images", {"exercise": 73}, fetcher, CachePartition.IMAGES)
        await cache.get_or_fetch("images", {"exercise": "73"}, fetcher, CachePartition.IMAGES)

        assert fetcher.calls == 1

    @pytest.mark.asyncio
    async def test_unkeyable_params_fetch_uncached(self, cache):
        """Test key build failure falls back to an uncached fetch."""
        fetcher = CountingFetcher(result=["fresh"])

        result = await cache.get_or_fetch("search", {"query": object()}, fetcher)

        assert result == ["fresh"]
        assert cache.size() == 0

    @pytest.mark.asyncio
    async def test_overflowing_number_fetch_uncached(self, cache):
        """Test a number too large for a key still gets fetched."""
        fetcher = CountingFetcher(result=["fresh"])

        result = await cache.get_or_fetch("details", {"id": "9" * 400 + ".5"}, fetcher)

        assert result == ["fresh"]
        assert cache.size() == 0

    @pytest.mark.asyncio
    async def test_empty_key_fetch_uncached(self, cache):
        """Test an empty key never reaches the map."""
        fetcher = CountingFetcher()

        await cache.get("", fetcher)
        await cache.get("", fetcher)

        assert fetcher.calls == 2
        assert cache.size() == 0


class TestConcurrency:
    """Test in-flight fetch sharing."""

    @pytest.mark.asyncio
    async def test_concurrent_misses_share_one_fetch(self, cache):
        """Test simultaneous callers trigger a single upstream call."""
        fetcher = CountingFetcher(result=["shared"], delay=0.01)

        results = await asyncio.gather(*(cache.get("search:x", fetcher) for _ in range(5)))

        assert results == [["shared"]] * 5
        assert fetcher.calls == 1

    @pytest.mark.asyncio
    async def test_concurrent_failure_reaches_every_caller(self, cache):
        """Test a shared failure is raised to all waiters and not cached."""
        fetcher = CountingFetcher(error=UpstreamFetchError("down"), delay=0.01)

        results = await asyncio.gather(
            *(cache.get("k", fetcher) for _ in range(3)), return_exceptions=True
        )

        assert all(isinstance(r, UpstreamFetchError) for r in results)
        assert fetcher.calls == 1
        assert cache.size() == 0

    @pytest.mark.asyncio
    async def test_cancelled_caller_does_not_cancel_fetch(self, cache):
        """Test the fetch completes and is stored after its caller gives up."""
        fetcher = CountingFetcher(result=["late"], delay=0.05)

        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(cache.get("slow", fetcher), timeout=0.01)

        await asyncio.sleep(0.1)

        assert cache.has("slow")
        assert await cache.get("slow", fetcher) == ["late"]
        assert fetcher.calls == 1

    @pytest.mark.asyncio
    async def test_invalidate_discards_inflight_result(self, cache):
        """Test a fetch started before invalidation is not stored."""
        fetcher = CountingFetcher(result=["stale"], delay=0.02)

        task = asyncio.ensure_future(cache.get("details:1", fetcher, CachePartition.DETAILS))
        await asyncio.sleep(0)
        cache.invalidate(CachePartition.DETAILS)

        assert await task == ["stale"]
        assert cache.size() == 0


class TestInvalidation:
    """Test partition and full invalidation."""

    @pytest.mark.asyncio
    async def test_invalidate_partition(self, cache):
        """Test only the named partition is cleared."""
        await cache.get("search:a", CountingFetcher(), CachePartition.SEARCH)
        await cache.get("search:b", CountingFetcher(), CachePartition.SEARCH)
        await cache.get("categories", CountingFetcher(), CachePartition.CATEGORIES)

        removed = cache.invalidate(CachePartition.SEARCH)

        assert removed == 2
        assert cache.size() == 1
        assert cache.has("categories")

    @pytest.mark.asyncio
    async def test_invalidate_by_name(self, cache):
        """Test partitions can be named by their string value."""
        await cache.get("videos:1", CountingFetcher(), CachePartition.VIDEOS)

        assert cache.invalidate("videos") == 1

    @pytest.mark.asyncio
    async def test_invalidate_all(self, cache):
        """Test no scope clears everything."""
        await cache.get("a", CountingFetcher(), CachePartition.EXERCISES)
        await cache.get("b", CountingFetcher())

        assert cache.invalidate() == 2
        assert cache.size() == 0

    @pytest.mark.asyncio
    async def test_refetch_after_invalidate(self, cache):
        """Test invalidated keys are fetched again."""
        fetcher = CountingFetcher()
        await cache.get("muscles", fetcher, CachePartition.MUSCLES)

        cache.invalidate(CachePartition.MUSCLES)
        await cache.get("muscles", fetcher, CachePartition.MUSCLES)

        assert fetcher.calls == 2


class TestMaintenance:
    """Test LRU bound and expiry purge."""

    @pytest.mark.asyncio
    async def test_lru_eviction(self, clock):
        """Test least recently used entry is evicted first."""
        cache = RemoteCache(ttl_ms=60_000, max_entries=2, clock=clock)

        await cache.get("a", CountingFetcher())
        await cache.get("b", CountingFetcher())
        await cache.get("a", CountingFetcher())  # touch a
        await cache.get("c", CountingFetcher())

        assert cache.size() == 2
        assert cache.has("a")
        assert not cache.has("b")
        assert cache.has("c")

    @pytest.mark.asyncio
    async def test_purge_expired(self, cache, clock):
        """Test expired entries are removed in bulk."""
        await cache.get("old", CountingFetcher())
        clock.advance(20 * 60 * 1000)
        await cache.get("new", CountingFetcher())
        clock.advance(15 * 60 * 1000)

        assert cache.purge_expired() == 1
        assert cache.has("new")
        assert cache.size() == 1

    def test_from_settings(self):
        """Test settings drive TTL and bound."""
        cache = RemoteCache.from_settings(Settings(cache_ttl_ms=1000, cache_max_entries=10))

        assert cache.ttl_ms == 1000
        assert cache.max_entries == 10

    def test_invalid_ttl(self):
        """Test TTL must be positive."""
        with pytest.raises(ValueError):
            RemoteCache(ttl_ms=0)
