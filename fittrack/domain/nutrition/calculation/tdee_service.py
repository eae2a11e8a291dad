"""TDEEService - Total Daily Energy Expenditure calculation."""

from typing import Any

from ...profile.value_objects import ActivityLevel
from ...shared.rounding import round_half_up
from ..ports.calculators import ITDEECalculator
from .validation import require_positive


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    TDEE represents total calories burned per day, calculated by
    multiplying BMR by Physical Activity Level (PAL) multiplier.

    Formula:
        TDEE = BMR × PAL

    PAL Multipliers:
        - Sedentary: 1.2 (little/no exercise)
        - Light: 1.375 (light exercise 1-3 days/week)
        - Moderate: 1.55 (moderate exercise 3-5 days/week)
        - Active: 1.725 (hard exercise 6-7 days/week)
        - Very Active: 1.9 (very hard exercise + physical job)

    Unknown or missing activity levels use the moderate multiplier.
    """

    def calculate(self, bmr: float, activity_level: Any) -> int:
        """Calculate TDEE from BMR and activity level.

        Example:
            >>> TDEEService().calculate(1800, "moderate")
            2790
        """
        bmr_value = require_positive(bmr, "bmr")
        pal_multiplier = ActivityLevel.parse(activity_level).pal_multiplier()

        return round_half_up(bmr_value * pal_multiplier)
