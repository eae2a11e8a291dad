"""
Exercise catalog models.

These models represent catalog service resources (exercises, categories,
muscles, equipment, media) mapped to our domain.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Category(BaseModel):
    """Exercise category (e.g. Arms, Legs, Cardio)."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Catalog category ID")
    name: str = Field(..., description="Category name")


class Muscle(BaseModel):
    """Muscle targeted by an exercise.

    Example:
        >>> muscle = Muscle(id=4, name="Pectoralis major", name_en="Chest")
        >>> muscle.display_name()
        'Chest'
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Catalog muscle ID")
    name: str = Field(..., description="Latin muscle name")
    name_en: str = Field("", description="Common English name")
    is_front: bool = Field(False, description="Shown on the front body diagram")

    def display_name(self) -> str:
        return self.name_en or self.name


class Equipment(BaseModel):
    """Equipment required by an exercise."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Catalog equipment ID")
    name: str = Field(..., description="Equipment name")


class ExerciseImage(BaseModel):
    """Illustration attached to an exercise."""

    model_config = ConfigDict(frozen=True)

    id: int
    image: str = Field(..., description="Image URL")
    is_main: bool = False
    license: Optional[int] = None
    license_author: Optional[str] = None


class ExerciseVideo(BaseModel):
    """Demonstration video attached to an exercise."""

    model_config = ConfigDict(frozen=True)

    id: int
    uuid: Optional[str] = None
    exercise: Optional[int] = None
    video: str = Field(..., description="Video URL")
    is_main: bool = False
    size: Optional[int] = None
    duration: Optional[float] = None
    width: Optional[int] = None
    height: Optional[int] = None
    codec: Optional[str] = None
    codec_long: Optional[str] = None
    license: Optional[int] = None
    license_author: Optional[str] = None


class Exercise(BaseModel):
    """Exercise entry from the catalog or a built-in routine.

    Catalog exercises carry structured muscles and equipment; built-in
    warm-up and cool-down entries use plain strings and the descriptive
    fields (duration, difficulty, benefits, ...).

    Example:
        >>> ex = Exercise(id=73, name="Bench Press", category="Chest")
        >>> ex.muscle_names()
        []
    """

    model_config = ConfigDict(frozen=True)

    id: Union[int, str] = Field(..., description="Catalog ID or routine ID")
    uuid: Optional[str] = None
    name: str = Field(..., min_length=1)
    description: str = ""
    category: str = "General"
    category_id: Optional[int] = None
    muscles: list[Union[Muscle, str]] = Field(default_factory=list)
    muscles_secondary: list[Union[Muscle, str]] = Field(default_factory=list)
    equipment: list[Union[Equipment, str]] = Field(default_factory=list)
    variations: list[int] = Field(default_factory=list)
    license: Optional[int] = None
    license_author: Optional[str] = None
    images: list[ExerciseImage] = Field(default_factory=list)
    videos: list[ExerciseVideo] = Field(default_factory=list)

    # Built-in routine details
    duration: Optional[str] = None
    difficulty: Optional[str] = None
    sets: Optional[str] = None
    type: Optional[str] = None
    calories: Optional[str] = None
    benefits: list[str] = Field(default_factory=list)
    video_url: Optional[str] = None

    def muscle_names(self) -> list[str]:
        """Primary muscle names as plain strings."""
        return [m.display_name() if isinstance(m, Muscle) else m for m in self.muscles]

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on name, description and category."""
        needle = term.lower()
        return (
            needle in self.name.lower()
            or needle in self.description.lower()
            or needle in self.category.lower()
        )


class ExercisePage(BaseModel):
    """One page of a paginated exercise listing."""

    model_config = ConfigDict(frozen=True)

    exercises: list[Exercise] = Field(default_factory=list)
    count: int = Field(0, ge=0, description="Total results upstream")
    next: Optional[str] = Field(None, description="URL of the next page")
    previous: Optional[str] = Field(None, description="URL of the previous page")
    upstream_count: int = Field(
        0, ge=0, description="Entries upstream returned, unnamed ones included"
    )

    @property
    def has_next(self) -> bool:
        return bool(self.next)


class ExerciseFilters(BaseModel):
    """Explicit catalog filter set.

    Every field is optional. Identical filters always serialise to the same
    cache key regardless of construction order.

    Example:
        >>> ExerciseFilters(muscle=4).to_query_params()
        {'muscles': 4}
    """

    model_config = ConfigDict(frozen=True)

    category: Optional[int] = Field(None, description="Category ID")
    muscle: Optional[int] = Field(None, description="Muscle ID")
    equipment: Optional[int] = Field(None, description="Equipment ID")
    search: Optional[str] = Field(None, description="Free text search")

    def without_search(self) -> "ExerciseFilters":
        return self.model_copy(update={"search": None})

    def to_query_params(self) -> Dict[str, Any]:
        """Upstream query parameters for the structured filters."""
        params: Dict[str, Any] = {}
        if self.category is not None:
            params["category"] = self.category
        if self.muscle is not None:
            params["muscles"] = self.muscle
        if self.equipment is not None:
            params["equipment"] = self.equipment
        return params
