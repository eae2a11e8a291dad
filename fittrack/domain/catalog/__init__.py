"""Catalog domain: exercise catalog models, filters and heuristics."""

from .classifier import ExerciseType, MuscleGroup, classify_exercise_type, map_muscles_to_groups
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
from .ports import ICatalogProvider
from .text import clean_html

__all__ = [
    "Category",
    "Equipment",
    "Exercise",
    "ExerciseFilters",
    "ExerciseImage",
    "ExercisePage",
    "ExerciseVideo",
    "Muscle",
    "ICatalogProvider",
    "ExerciseType",
    "MuscleGroup",
    "classify_exercise_type",
    "map_muscles_to_groups",
    "clean_html",
]
