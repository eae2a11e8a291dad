"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum
from typing import Any

import structlog

logger = structlog.get_logger(__name__)


class ActivityLevel(str, Enum):
    """How active a profile is day to day; selects the TDEE multiplier.

    - SEDENTARY: Little or no exercise (office job)
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - ACTIVE: Hard exercise 6-7 days/week
    - VERY_ACTIVE: Very hard exercise + physical job
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    @classmethod
    def parse(cls, value: Any) -> "ActivityLevel":
        """Resolve a stored activity level, defaulting to MODERATE.

        Unknown or missing values are not errors: profiles created before
        activity tracking existed carry no level at all.

        Example:
            >>> ActivityLevel.parse("light")
            <ActivityLevel.LIGHT: 'light'>
            >>> ActivityLevel.parse(None)
            <ActivityLevel.MODERATE: 'moderate'>
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            if value is not None:
                logger.warning("Unknown activity level, using moderate", value=value)
            return cls.MODERATE

    def pal_multiplier(self) -> float:
        """Get PAL (Physical Activity Level) multiplier.

        Returns:
            float: Multiplier for BMR to calculate TDEE

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        multipliers = {
            ActivityLevel.SEDENTARY: 1.2,  # Minimal activity
            ActivityLevel.LIGHT: 1.375,  # Light exercise
            ActivityLevel.MODERATE: 1.55,  # Moderate exercise
            ActivityLevel.ACTIVE: 1.725,  # Hard exercise
            ActivityLevel.VERY_ACTIVE: 1.9,  # Very hard exercise
        }
        return multipliers[self]
