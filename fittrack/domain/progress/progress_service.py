"""ProgressService - workout volume, streak and weekly aggregation."""

from __future__ import annotations

from datetime import date as DateType
from datetime import timedelta
from typing import Dict, Iterable, List, Optional

import structlog

from .models import PersonalRecord, ProgressStats, WeeklyProgress, WorkoutSession

logger = structlog.get_logger(__name__)


class ProgressService:
    """Aggregate a user's session history into display statistics.

    Streak rules:
        - Sessions are walked in ascending date order
        - A gap of exactly one calendar day extends the running streak
        - A gap of more than one day resets the running streak to 1
        - Several sessions on the same day leave the streak unchanged
        - The current streak is the run ending at the most recent session,
          not at today
    """

    def aggregate(
        self,
        sessions: Iterable[WorkoutSession],
        today: Optional[DateType] = None,
    ) -> ProgressStats:
        """Compute totals and streaks over a session list.

        Args:
            sessions: Workout sessions in any order
            today: Reference day for the "this month" count (defaults to today)

        Returns:
            ProgressStats: Aggregated statistics

        Example:
            >>> stats = ProgressService().aggregate([])
            >>> stats.total_workouts
            0
        """
        reference = today or DateType.today()
        ordered = sorted(sessions, key=lambda s: s.date)

        total_volume = 0.0
        total_calories = 0
        running = 0
        best = 0
        previous: Optional[DateType] = None
        workout_days = set()

        for session in ordered:
            total_volume += session.volume()
            total_calories += session.total_calories_burned or 0
            workout_days.add(session.date)

            if previous is None:
                running = 1
            else:
                gap = (session.date - previous).days
                if gap == 1:
                    running += 1
                elif gap > 1:
                    running = 1
            best = max(best, running)
            previous = session.date

        days_this_month = sum(
            1 for d in workout_days if d.year == reference.year and d.month == reference.month
        )

        stats = ProgressStats(
            total_workouts=len(ordered),
            total_volume=total_volume,
            total_calories=total_calories,
            current_streak=running,
            best_streak=best,
            workout_days_this_month=days_this_month,
        )
        logger.debug(
            "Progress aggregated",
            sessions=stats.total_workouts,
            current_streak=stats.current_streak,
            best_streak=stats.best_streak,
        )
        return stats

    def group_by_week(self, sessions: Iterable[WorkoutSession]) -> List[WeeklyProgress]:
        """Bucket sessions into Monday-starting weeks.

        Returns:
            Weeks in ascending order, labelled "Week 1", "Week 2", ...
            Weeks without sessions are not emitted.
        """
        weeks: Dict[DateType, WeeklyProgress] = {}

        for session in sessions:
            week_start = session.date - timedelta(days=session.date.weekday())
            bucket = weeks.setdefault(week_start, WeeklyProgress(week_start=week_start))
            bucket.volume += session.volume()
            bucket.calories += session.total_calories_burned or 0
            bucket.workouts += 1
            bucket.sets += len(session.exercise_sets)

        ordered = [weeks[key] for key in sorted(weeks)]
        for index, week in enumerate(ordered, start=1):
            week.label = f"Week {index}"
            week.short_label = f"W{index}"
        return ordered

    def count_recent_workouts(
        self,
        sessions: Iterable[WorkoutSession],
        days: int = 7,
        today: Optional[DateType] = None,
    ) -> int:
        """Count sessions dated within the last ``days`` days (today included)."""
        reference = today or DateType.today()
        cutoff = reference - timedelta(days=days)
        return sum(1 for s in sessions if cutoff < s.date <= reference)

    def is_personal_record(
        self,
        current: Optional[PersonalRecord],
        weight: float,
        reps: int,
    ) -> bool:
        """Whether a set beats the stored record for its exercise.

        A set is a record when none exists yet, when it is heavier, or when
        it matches the weight with more reps.
        """
        if current is None:
            return True
        if weight > current.max_weight:
            return True
        return weight == current.max_weight and reps > current.max_reps
