"""Unit tests for ExerciseCatalogService."""

from typing import List, Union

import httpx
import pytest

from fittrack.application.catalog import ExerciseCatalogService
from fittrack.domain.catalog import (
    Category,
    Equipment,
    Exercise,
    ExerciseFilters,
    ExerciseImage,
    ExercisePage,
    ExerciseVideo,
    ICatalogProvider,
    Muscle,
)
from fittrack.domain.shared.errors import ExerciseNotFoundError, UpstreamFetchError
from fittrack.infrastructure.cache import CachePartition, RemoteCache
from fittrack.infrastructure.catalog import WgerCatalogClient
from fittrack.infrastructure.config import Settings


class FakeCatalog(ICatalogProvider):
    """In-memory catalog recording every upstream call."""

    def __init__(self, exercises: List[Exercise]):
        self.exercises = exercises
        self.calls: list = []
        self.fail_next = False

    def _check(self):
        if self.fail_next:
            self.fail_next = False
            raise UpstreamFetchError("catalog down", status=503)

    async def list_exercises(self, limit, offset=0, filters=None) -> ExercisePage:
        self.calls.append(("list", limit, offset, filters))
        self._check()
        pool = self.exercises
        if filters is not None and filters.category is not None:
            pool = [e for e in pool if e.category_id == filters.category]
        chunk = pool[offset : offset + limit]
        has_next = offset + limit < len(pool)
        return ExercisePage(
            exercises=chunk, count=len(pool), next="more" if has_next else None
        )

    async def get_exercise(self, exercise_id: Union[int, str]) -> Exercise:
        self.calls.append(("get", exercise_id))
        self._check()
        for exercise in self.exercises:
            if str(exercise.id) == str(exercise_id):
                return exercise
        raise ExerciseNotFoundError(exercise_id)

    async def search_by_name(self, query: str, limit: int) -> List[Exercise]:
        self.calls.append(("name", query, limit))
        return [Exercise(id=999, name=f"{query.title()} Variation")]

    async def list_categories(self) -> List[Category]:
        self.calls.append(("categories",))
        self._check()
        return [Category(id=10, name="Legs")]

    async def list_muscles(self) -> List[Muscle]:
        self.calls.append(("muscles",))
        return [Muscle(id=1, name="Quadriceps femoris", name_en="Quads")]

    async def list_equipment(self) -> List[Equipment]:
        self.calls.append(("equipment",))
        return [Equipment(id=1, name="Barbell")]

    async def list_images(self, exercise_id) -> List[ExerciseImage]:
        self.calls.append(("images", exercise_id))
        return [ExerciseImage(id=1, image="https://img.test/1.png")]

    async def list_videos(self, exercise_id) -> List[ExerciseVideo]:
        self.calls.append(("videos", exercise_id))
        return [ExerciseVideo(id=1, video="https://vid.test/1.mp4")]

    def count(self, kind: str) -> int:
        return sum(1 for call in self.calls if call[0] == kind)


def _catalog(n: int = 450) -> FakeCatalog:
    exercises = [
        Exercise(
            id=i,
            name="Back Squat" if i % 100 == 0 else f"Lift {i}",
            category="Legs",
            category_id=10 if i % 2 == 0 else 11,
        )
        for i in range(n)
    ]
    return FakeCatalog(exercises)


@pytest.fixture
def settings() -> Settings:
    return Settings(search_page_size=200, workout_page_size=1500, search_min_results=50)


@pytest.fixture
def catalog() -> FakeCatalog:
    return _catalog()


@pytest.fixture
def service(catalog, settings, clock) -> ExerciseCatalogService:
    cache = RemoteCache(ttl_ms=settings.cache_ttl_ms, clock=clock)
    return ExerciseCatalogService(catalog, cache, settings)


class TestListing:
    """Test paged listing and details."""

    @pytest.mark.asyncio
    async def test_get_all_exercises_cached(self, service, catalog):
        """Test the same page is fetched once."""
        first = await service.get_all_exercises(limit=100, offset=0)
        second = await service.get_all_exercises(limit=100, offset=0)

        assert first is second
        assert len(first.exercises) == 100
        assert catalog.count("list") == 1

    @pytest.mark.asyncio
    async def test_default_page_size(self, service, catalog):
        """Test limit defaults to the configured page size."""
        await service.get_all_exercises()

        assert catalog.calls[0][1] == 100

    @pytest.mark.asyncio
    async def test_get_exercise_by_id_cached(self, service, catalog):
        """Test numeric and string ids share one detail entry."""
        a = await service.get_exercise_by_id(7)
        b = await service.get_exercise_by_id("7")

        assert a.id == b.id == 7
        assert catalog.count("get") == 1

    @pytest.mark.asyncio
    async def test_routine_ids_never_hit_catalog(self, service, catalog):
        """Test warm-up and cool-down ids are served locally."""
        warmup = await service.get_exercise_by_id("warmup_2")
        cooldown = await service.get_exercise_by_id("cooldown_8")

        assert warmup.name == "Arm Circles"
        assert cooldown.name == "Calf Stretch"
        assert catalog.calls == []

    @pytest.mark.asyncio
    async def test_unknown_routine_id(self, service):
        """Test unknown built-in id raises not found."""
        with pytest.raises(ExerciseNotFoundError):
            await service.get_exercise_by_id("warmup_42")

    @pytest.mark.asyncio
    async def test_not_found_not_cached(self, service, catalog):
        """Test missing exercises are looked up again."""
        for _ in range(2):
            with pytest.raises(ExerciseNotFoundError):
                await service.get_exercise_by_id(12345)

        assert catalog.count("get") == 2


class TestSearch:
    """Test search through the paginated cache."""

    @pytest.mark.asyncio
    async def test_search_accumulates_filters_and_tops_up(self, service, catalog):
        """Test all pages walked, text filtered, name query merged."""
        results = await service.search_exercises("squat")

        # 450 exercises in pages of 200
        assert [c[2] for c in catalog.calls if c[0] == "list"] == [0, 200, 400]
        assert [e.id for e in results] == [0, 100, 200, 300, 400, 999]
        assert catalog.calls[-1] == ("name", "squat", 200)

    @pytest.mark.asyncio
    async def test_search_cached(self, service, catalog):
        """Test repeated search hits the cache."""
        await service.search_exercises("squat")
        calls = len(catalog.calls)

        await service.search_exercises("squat")

        assert len(catalog.calls) == calls

    @pytest.mark.asyncio
    async def test_search_with_structured_filters(self, service, catalog):
        """Test filters are passed upstream without the search term."""
        results = await service.search_exercises(
            filters=ExerciseFilters(category=10, search="squat")
        )

        sent_filters = catalog.calls[0][3]
        assert sent_filters.category == 10
        assert sent_filters.search is None
        assert all(e.id == 999 or e.category_id == 10 for e in results)

    @pytest.mark.asyncio
    async def test_hard_cap(self, catalog, clock):
        """Test accumulation stops at the configured cap."""
        settings = Settings(search_page_size=200, search_hard_cap=300)
        service = ExerciseCatalogService(catalog, RemoteCache(clock=clock), settings)

        results = await service.search_exercises("")

        assert len(results) == 300
        assert catalog.count("list") == 2

    @pytest.mark.asyncio
    async def test_search_failure_propagates(self, service, catalog):
        """Test upstream failure is raised and not cached."""
        catalog.fail_next = True

        with pytest.raises(UpstreamFetchError):
            await service.search_exercises("squat")

        results = await service.search_exercises("squat")
        assert len(results) == 6


class TestWorkoutExercises:
    """Test workout builder listing."""

    @pytest.mark.asyncio
    async def test_single_large_page(self, service, catalog):
        """Test no search term means one request of the workout page size."""
        results = await service.get_workout_exercises(ExerciseFilters(category=11))

        assert len(results) == 225
        assert catalog.calls == [("list", 1500, 0, ExerciseFilters(category=11))]

    @pytest.mark.asyncio
    async def test_with_search_uses_search(self, service, catalog):
        """Test a search term routes through the paginated search."""
        results = await service.get_workout_exercises(ExerciseFilters(search="squat"))

        assert 999 in [e.id for e in results]
        assert catalog.count("name") == 1


class TestReferenceData:
    """Test cached reference lists and cache clearing."""

    @pytest.mark.asyncio
    async def test_reference_lists_cached(self, service, catalog):
        """Test each list is fetched once."""
        for _ in range(2):
            await service.get_categories()
            await service.get_muscles()
            await service.get_equipment()
            await service.get_exercise_images(73)
            await service.get_exercise_videos(73)

        for kind in ("categories", "muscles", "equipment", "images", "videos"):
            assert catalog.count(kind) == 1

    @pytest.mark.asyncio
    async def test_clear_single_partition(self, service, catalog):
        """Test clearing categories leaves muscles cached."""
        await service.get_categories()
        await service.get_muscles()

        service.clear_cache(CachePartition.CATEGORIES)
        await service.get_categories()
        await service.get_muscles()

        assert catalog.count("categories") == 2
        assert catalog.count("muscles") == 1

    @pytest.mark.asyncio
    async def test_clear_everything(self, service, catalog):
        """Test full clear refetches every list."""
        await service.get_categories()
        await service.get_equipment()

        assert service.clear_cache() == 2

        await service.get_categories()
        await service.get_equipment()
        assert catalog.count("categories") == 2
        assert catalog.count("equipment") == 2

    @pytest.mark.asyncio
    async def test_category_failure_not_cached(self, service, catalog):
        """Test failed reference fetch is retried on the next call."""
        catalog.fail_next = True

        with pytest.raises(UpstreamFetchError):
            await service.get_categories()

        assert (await service.get_categories())[0].name == "Legs"

    @pytest.mark.asyncio
    async def test_builtin_routines(self, service):
        """Test warm-up and cool-down lists."""
        assert len(await service.get_warmup_exercises()) == 8
        assert len(await service.get_cooldown_exercises()) == 8


class TestSearchOverWger:
    """Test search against the HTTP adapter."""

    @pytest.mark.asyncio
    async def test_untranslated_page_does_not_end_search(self, settings, clock):
        """Test a page with no English names is skipped, not treated as the end."""

        def entry(i: int, translations: list) -> dict:
            return {"id": i, "category": {"id": 10, "name": "Abs"}, "translations": translations}

        def handler(request: httpx.Request) -> httpx.Response:
            offset = int(request.url.params["offset"])
            if offset == 0:
                results = [
                    entry(i, [{"language": 1, "name": f"Uebung {i}"}]) for i in range(200)
                ]
                return httpx.Response(
                    200, json={"count": 203, "next": "page-2", "results": results}
                )
            results = [
                entry(500 + i, [{"language": 2, "name": f"Crunch {i}"}]) for i in range(3)
            ]
            return httpx.Response(200, json={"count": 203, "next": None, "results": results})

        client = WgerCatalogClient(
            settings=Settings(catalog_base_url="https://wger.test/api/v2"),
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )
        service = ExerciseCatalogService(client, RemoteCache(clock=clock), settings)

        results = await service.search_exercises("")

        assert [e.id for e in results] == [500, 501, 502]
