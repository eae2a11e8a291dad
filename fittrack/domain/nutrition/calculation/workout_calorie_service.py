"""WorkoutCalorieService - MET based energy expenditure estimate."""

from typing import Any

from ...profile.value_objects import Intensity
from ...shared.rounding import round_half_up
from ..ports.calculators import IWorkoutCalorieCalculator
from .validation import require_positive


class WorkoutCalorieService(IWorkoutCalorieCalculator):
    """Estimate workout calories from body weight, duration and intensity.

    Formula:
        kcal/min = MET × 3.5 × weight(kg) / 200
        total    = kcal/min × minutes

    MET values: light 3.5, moderate 5.0, intense 8.0, very intense 10.0.
    """

    def calculate(self, weight: float, duration_minutes: float, intensity: Any) -> int:
        """Estimate calories burned.

        A zero-minute workout burns nothing; negative durations are rejected.

        Example:
            >>> WorkoutCalorieService().calculate(70, 30, "moderate")
            184
        """
        weight_kg = require_positive(weight, "weight")
        if duration_minutes == 0:
            return 0
        minutes = require_positive(duration_minutes, "duration_minutes")
        met = Intensity.parse(intensity).met()

        calories_per_minute = met * 3.5 * weight_kg / 200
        return round_half_up(calories_per_minute * minutes)
