"""ExerciseCatalogService - cached read access to the exercise catalog."""

from typing import List, Optional, Union

import structlog

from fittrack.domain.catalog.models import (
    Category,
    Equipment,
    Exercise,
    ExerciseFilters,
    ExerciseImage,
    ExercisePage,
    ExerciseVideo,
    Muscle,
)
from fittrack.domain.catalog.ports import ICatalogProvider
from fittrack.domain.catalog.routines import (
    cooldown_exercises,
    find_routine_exercise,
    is_routine_id,
    warmup_exercises,
)
from fittrack.domain.shared.errors import ExerciseNotFoundError
from fittrack.infrastructure.cache import CachePartition, Page, RemoteCache
from fittrack.infrastructure.config import Settings

logger = structlog.get_logger(__name__)


class ExerciseCatalogService:
    """
    Catalog reads routed through a RemoteCache.

    Every upstream call goes through its own cache partition so callers
    can clear, say, search results without dropping exercise details.
    Upstream failures propagate as UpstreamFetchError and are never cached.

    Example:
        >>> async with WgerCatalogClient(settings) as client:
        ...     service = ExerciseCatalogService(client, RemoteCache.from_settings(settings))
        ...     results = await service.search_exercises("squat")
    """

    def __init__(
        self,
        provider: ICatalogProvider,
        cache: Optional[RemoteCache] = None,
        settings: Optional[Settings] = None,
    ):
        self._settings = settings or Settings()
        self._provider = provider
        self._cache = cache or RemoteCache.from_settings(self._settings)

    @property
    def cache(self) -> RemoteCache:
        return self._cache

    async def get_all_exercises(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> ExercisePage:
        """One page of the catalog listing."""
        page_size = limit or self._settings.default_page_size
        return await self._cache.get_or_fetch(
            "exercises",
            {"limit": page_size, "offset": offset},
            lambda: self._provider.list_exercises(limit=page_size, offset=offset),
            CachePartition.EXERCISES,
        )

    async def search_exercises(
        self, query: str = "", filters: Optional[ExerciseFilters] = None
    ) -> List[Exercise]:
        """
        Text search over the filtered catalog.

        Pages through the listing (up to the configured hard cap), keeps
        entries whose name, description or category contain the query and,
        when fewer than the configured minimum remain, merges in the
        upstream name query.

        Args:
            query: Free text; empty returns the filtered listing
            filters: Structured filters; ``filters.search`` is used when
                ``query`` is empty

        Returns:
            Distinct exercises in server order
        """
        filters = filters or ExerciseFilters()
        term = query or filters.search or ""
        structured = filters.without_search()
        page_size = self._settings.search_page_size

        async def fetch_page(offset: int) -> Page[Exercise]:
            page = await self._provider.list_exercises(
                limit=page_size, offset=offset, filters=structured
            )
            return Page(
                results=page.exercises,
                has_next=page.has_next,
                fetched=page.upstream_count,
            )

        async def fetch_by_name(name: str) -> List[Exercise]:
            return await self._provider.search_by_name(name, limit=page_size)

        return await self._cache.search_paginated(
            term,
            structured,
            fetch_page,
            page_size=page_size,
            hard_cap=self._settings.search_hard_cap,
            min_results=self._settings.search_min_results,
            name_fetcher=fetch_by_name,
        )

    async def get_workout_exercises(
        self, filters: Optional[ExerciseFilters] = None
    ) -> List[Exercise]:
        """
        Exercises for the workout builder.

        With a search term this is ``search_exercises``; otherwise a single
        large page of the filtered listing.
        """
        filters = filters or ExerciseFilters()

        async def fetch() -> List[Exercise]:
            if filters.search:
                return await self.search_exercises(filters.search, filters)
            page = await self._provider.list_exercises(
                limit=self._settings.workout_page_size, offset=0, filters=filters
            )
            return page.exercises

        return await self._cache.get_or_fetch(
            "workout", {"filters": filters}, fetch, CachePartition.EXERCISES
        )

    async def get_exercise_by_id(self, exercise_id: Union[int, str]) -> Exercise:
        """
        Full exercise details.

        ``warmup_N`` / ``cooldown_N`` ids are served from the built-in
        routines without touching the catalog.

        Raises:
            ExerciseNotFoundError: Unknown id
        """
        if is_routine_id(exercise_id):
            exercise = find_routine_exercise(str(exercise_id))
            if exercise is None:
                raise ExerciseNotFoundError(exercise_id)
            return exercise

        return await self._cache.get_or_fetch(
            "details",
            {"id": exercise_id},
            lambda: self._provider.get_exercise(exercise_id),
            CachePartition.DETAILS,
        )

    async def get_categories(self) -> List[Category]:
        return await self._cache.get_or_fetch(
            "categories", None, self._provider.list_categories, CachePartition.CATEGORIES
        )

    async def get_muscles(self) -> List[Muscle]:
        return await self._cache.get_or_fetch(
            "muscles", None, self._provider.list_muscles, CachePartition.MUSCLES
        )

    async def get_equipment(self) -> List[Equipment]:
        return await self._cache.get_or_fetch(
            "equipment", None, self._provider.list_equipment, CachePartition.EQUIPMENT
        )

    async def get_exercise_images(self, exercise_id: Union[int, str]) -> List[ExerciseImage]:
        return await self._cache.get_or_fetch(
            "images",
            {"exercise": exercise_id},
            lambda: self._provider.list_images(exercise_id),
            CachePartition.IMAGES,
        )

    async def get_exercise_videos(self, exercise_id: Union[int, str]) -> List[ExerciseVideo]:
        return await self._cache.get_or_fetch(
            "videos",
            {"exercise": exercise_id},
            lambda: self._provider.list_videos(exercise_id),
            CachePartition.VIDEOS,
        )

    async def get_warmup_exercises(self) -> List[Exercise]:
        return warmup_exercises()

    async def get_cooldown_exercises(self) -> List[Exercise]:
        return cooldown_exercises()

    def clear_cache(self, scope: Optional[CachePartition] = None) -> int:
        """Drop cached catalog data (one partition or everything)."""
        removed = self._cache.invalidate(scope)
        label = CachePartition(scope).value if scope else "all"
        logger.info("Catalog cache cleared", scope=label, removed=removed)
        return removed
