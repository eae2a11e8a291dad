"""Progress domain: workout history and derived statistics."""

from .models import (
    ExerciseSet,
    PersonalRecord,
    ProgressStats,
    WeeklyProgress,
    WorkoutSession,
)
from .progress_service import ProgressService

__all__ = [
    "ExerciseSet",
    "WorkoutSession",
    "ProgressStats",
    "WeeklyProgress",
    "PersonalRecord",
    "ProgressService",
]
