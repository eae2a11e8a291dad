"""MetricsEngine - coordinates the nutrition and progress calculators."""

from datetime import date as DateType
from typing import Any, Iterable, List, Optional

from fittrack.domain.nutrition.calculation import (
    BMRService,
    MacroService,
    TDEEService,
    WorkoutCalorieService,
)
from fittrack.domain.nutrition.ports import (
    IBMRCalculator,
    IMacroCalculator,
    ITDEECalculator,
    IWorkoutCalorieCalculator,
)
from fittrack.domain.profile import MacroTargets, NutritionTargets, Profile
from fittrack.domain.progress import (
    PersonalRecord,
    ProgressService,
    ProgressStats,
    WeeklyProgress,
    WorkoutSession,
)
from fittrack.domain.shared.rounding import round_half_up, safe_percentage


class MetricsEngine:
    """
    Pure, synchronous fitness metrics.

    Flow for daily targets:
    1. BMR from the profile's biometrics (or the stored value)
    2. TDEE from BMR and activity level
    3. Goal-adjusted calories and macro grams

    Invalid inputs raise ValidationError; nothing is caught here.

    Example:
        >>> engine = MetricsEngine()
        >>> engine.compute_bmr(70, 175, 25, "male")
        1674
    """

    def __init__(
        self,
        bmr_service: Optional[IBMRCalculator] = None,
        tdee_service: Optional[ITDEECalculator] = None,
        macro_service: Optional[IMacroCalculator] = None,
        workout_service: Optional[IWorkoutCalorieCalculator] = None,
        progress_service: Optional[ProgressService] = None,
    ):
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()
        self._macro_service = macro_service or MacroService()
        self._workout_service = workout_service or WorkoutCalorieService()
        self._progress_service = progress_service or ProgressService()

    # Nutrition

    def compute_bmr(self, weight_kg: float, height_cm: float, age_years: int, gender: Any) -> int:
        return self._bmr_service.calculate(weight_kg, height_cm, age_years, gender)

    def compute_tdee(self, bmr: float, activity_level: Any) -> int:
        return self._tdee_service.calculate(bmr, activity_level)

    def compute_macros(self, tdee: float, goal: Any) -> MacroTargets:
        return self._macro_service.calculate(tdee, goal)

    def compute_workout_calories(
        self, weight_kg: float, duration_minutes: float, intensity: Any
    ) -> int:
        return self._workout_service.calculate(weight_kg, duration_minutes, intensity)

    def compute_nutrition_targets(self, profile: Profile) -> NutritionTargets:
        """
        Daily calorie and macro targets for a profile.

        A BMR already stored on the profile is used as-is (rounded);
        otherwise it is computed from weight, height, age and gender.

        Args:
            profile: Validated user profile

        Returns:
            NutritionTargets with bmr, tdee, calories and macro grams
        """
        if profile.bmr is not None:
            bmr = round_half_up(profile.bmr)
        else:
            bmr = self.compute_bmr(profile.weight, profile.height, profile.age, profile.gender)

        tdee = self.compute_tdee(bmr, profile.activity_level)
        macros = self.compute_macros(tdee, profile.goal)
        return NutritionTargets.from_macros(macros, bmr=bmr, tdee=tdee)

    # Progress

    def aggregate_progress(
        self, sessions: Iterable[WorkoutSession], today: Optional[DateType] = None
    ) -> ProgressStats:
        return self._progress_service.aggregate(sessions, today=today)

    def group_by_week(self, sessions: Iterable[WorkoutSession]) -> List[WeeklyProgress]:
        return self._progress_service.group_by_week(sessions)

    def count_recent_workouts(
        self,
        sessions: Iterable[WorkoutSession],
        days: int = 7,
        today: Optional[DateType] = None,
    ) -> int:
        return self._progress_service.count_recent_workouts(sessions, days=days, today=today)

    def is_personal_record(
        self, current: Optional[PersonalRecord], weight: float, reps: int
    ) -> bool:
        return self._progress_service.is_personal_record(current, weight, reps)

    @staticmethod
    def safe_percentage(value: float, target: float) -> float:
        """Percentage of ``target`` reached; 0 when the target is not positive."""
        return safe_percentage(value, target)
