"""Catalog provider port - read-only access to the exercise catalog."""

from abc import ABC, abstractmethod
from typing import List, Optional, Union

from .models import (
    Category,
    Equipment,
    Exercise,
    ExerciseFilters,
    ExerciseImage,
    ExercisePage,
    ExerciseVideo,
    Muscle,
)


class ICatalogProvider(ABC):
    """Port for the third-party exercise catalog.

    Implementations raise ``UpstreamFetchError`` (or a subclass) on any
    transport or HTTP failure; they never return an empty result to signal
    an error.
    """

    @abstractmethod
    async def list_exercises(
        self,
        limit: int,
        offset: int = 0,
        filters: Optional[ExerciseFilters] = None,
    ) -> ExercisePage:
        """Fetch one page of exercises."""
        pass

    @abstractmethod
    async def get_exercise(self, exercise_id: Union[int, str]) -> Exercise:
        """Fetch full details of one exercise.

        Raises:
            ExerciseNotFoundError: If the catalog answers 404
        """
        pass

    @abstractmethod
    async def search_by_name(self, query: str, limit: int) -> List[Exercise]:
        """Upstream name query, used to top up sparse searches."""
        pass

    @abstractmethod
    async def list_categories(self) -> List[Category]:
        pass

    @abstractmethod
    async def list_muscles(self) -> List[Muscle]:
        pass

    @abstractmethod
    async def list_equipment(self) -> List[Equipment]:
        pass

    @abstractmethod
    async def list_images(self, exercise_id: Union[int, str]) -> List[ExerciseImage]:
        pass

    @abstractmethod
    async def list_videos(self, exercise_id: Union[int, str]) -> List[ExerciseVideo]:
        pass
