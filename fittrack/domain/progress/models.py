"""Workout history models consumed by progress aggregation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date as DateType
from datetime import datetime
from typing import Any, List, Mapping, Optional

from ..shared.errors import ValidationError
from ..shared.rounding import round_half_up


def _parse_date(value: Any, field_name: str) -> DateType:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, DateType):
        return value
    if isinstance(value, str) and value:
        try:
            return DateType.fromisoformat(value[:10])
        except ValueError:
            pass
    raise ValidationError(f"{field_name} must be an ISO date, got {value!r}", field=field_name)


def _parse_timestamp(value: Any, field_name: str) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            pass
    raise ValidationError(
        f"{field_name} must be an ISO timestamp, got {value!r}", field=field_name
    )


@dataclass(frozen=True)
class ExerciseSet:
    """One logged set of an exercise.

    Attributes:
        weight: Load in kg (0 for bodyweight work)
        reps: Repetitions performed
        exercise_name: Display name of the exercise
        set_number: Position within the exercise, if recorded
        is_pr: Whether the set was flagged as a personal record
    """

    weight: float
    reps: int
    exercise_name: str = ""
    set_number: Optional[int] = None
    is_pr: bool = False

    def volume(self) -> float:
        """Training volume of the set (weight × reps)."""
        return self.weight * self.reps

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "ExerciseSet":
        """Build a set from an ``exercise_sets`` row.

        Null weight or reps count as zero. The exercise name falls back to
        the joined planned exercise when the set row has none.
        """
        planned = row.get("planned_exercises") or {}
        return cls(
            weight=float(row.get("weight") or 0),
            reps=int(row.get("reps") or 0),
            exercise_name=row.get("exercise_name") or planned.get("exercise_name") or "",
            set_number=row.get("set_number"),
            is_pr=bool(row.get("is_pr", False)),
        )


@dataclass(frozen=True)
class WorkoutSession:
    """Historical workout session.

    Created by the persistence service when a session starts and completed
    later; aggregation code only ever reads it.
    """

    id: str
    date: DateType
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    exercise_sets: List[ExerciseSet] = field(default_factory=list)
    total_calories_burned: Optional[int] = None

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

    def volume(self) -> float:
        """Σ weight × reps over every set in the session."""
        return sum(s.volume() for s in self.exercise_sets)

    def duration_minutes(self) -> Optional[int]:
        """Whole minutes between start and completion, None while in progress."""
        if self.started_at is None or self.completed_at is None:
            return None
        seconds = (self.completed_at - self.started_at).total_seconds()
        return round_half_up(seconds / 60)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "WorkoutSession":
        """Build a session from a ``workout_sessions`` row with nested sets.

        Raises:
            ValidationError: If the session date or a timestamp is malformed
        """
        if row.get("date") is None:
            raise ValidationError("date is required", field="date")
        calories = row.get("total_calories_burned")
        return cls(
            id=str(row.get("id", "")),
            date=_parse_date(row["date"], "date"),
            started_at=_parse_timestamp(row.get("started_at"), "started_at"),
            completed_at=_parse_timestamp(row.get("completed_at"), "completed_at"),
            exercise_sets=[ExerciseSet.from_row(s) for s in row.get("exercise_sets") or []],
            total_calories_burned=int(calories) if calories is not None else None,
        )


@dataclass(frozen=True)
class ProgressStats:
    """Aggregated workout statistics for the progress screen."""

    total_workouts: int = 0
    total_volume: float = 0.0
    total_calories: int = 0
    current_streak: int = 0
    best_streak: int = 0
    workout_days_this_month: int = 0


@dataclass
class WeeklyProgress:
    """Per-week totals used by the progress bar chart.

    ``week_start`` is always a Monday.
    """

    week_start: DateType
    label: str = ""
    short_label: str = ""
    volume: float = 0.0
    calories: int = 0
    workouts: int = 0
    sets: int = 0


@dataclass(frozen=True)
class PersonalRecord:
    """Best lift recorded for an exercise."""

    exercise_name: str
    max_weight: float
    max_reps: int
