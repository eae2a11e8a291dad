"""Goal value object - user's nutritional objective."""

from enum import Enum
from typing import Any, Tuple

import structlog

logger = structlog.get_logger(__name__)


class Goal(str, Enum):
    """User's nutritional goal determining calorie target and macro ratios.

    - LOSE_WEIGHT: 20% calorie deficit, high protein
    - GAIN_MUSCLE: 10% calorie surplus, carb-heavy
    - MAINTAIN: calories at TDEE
    """

    LOSE_WEIGHT = "lose_weight"
    GAIN_MUSCLE = "gain_muscle"
    MAINTAIN = "maintain"

    @classmethod
    def parse(cls, value: Any) -> "Goal":
        """Resolve a stored goal, defaulting to MAINTAIN.

        Example:
            >>> Goal.parse("gain_muscle")
            <Goal.GAIN_MUSCLE: 'gain_muscle'>
            >>> Goal.parse("get_huge")
            <Goal.MAINTAIN: 'maintain'>
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            if value is not None:
                logger.warning("Unknown goal, using maintain", value=value)
            return cls.MAINTAIN

    def calorie_factor(self) -> float:
        """Multiplier applied to TDEE to get the calorie target.

        Example:
            >>> Goal.LOSE_WEIGHT.calorie_factor()
            0.8
        """
        factors = {
            Goal.LOSE_WEIGHT: 0.8,  # 20% deficit
            Goal.GAIN_MUSCLE: 1.1,  # 10% surplus
            Goal.MAINTAIN: 1.0,
        }
        return factors[self]

    def macro_ratios(self) -> Tuple[float, float, float]:
        """Protein / carbs / fat share of calories.

        Returns:
            Tuple of (protein_ratio, carb_ratio, fat_ratio), summing to 1.0
        """
        ratios = {
            Goal.LOSE_WEIGHT: (0.35, 0.40, 0.25),
            Goal.GAIN_MUSCLE: (0.30, 0.50, 0.20),
            Goal.MAINTAIN: (0.30, 0.45, 0.25),
        }
        return ratios[self]
