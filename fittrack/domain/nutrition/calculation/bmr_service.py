"""BMRService - Basal Metabolic Rate calculation."""

from typing import Any

from ...profile.value_objects import Gender
from ...shared.rounding import round_half_up
from ..ports.calculators import IBMRCalculator
from .validation import require_positive


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    The Mifflin-St Jeor equation is considered the most accurate formula
    for BMR calculation in normal-weight and overweight individuals.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(self, weight: float, height: float, age: int, gender: Any) -> int:
        """Calculate BMR from biometric data.

        Args:
            weight: Body weight in kg
            height: Height in cm
            age: Age in years
            gender: ``Gender`` or its string value

        Returns:
            int: BMR in kcal/day, rounded half-up

        Raises:
            ValidationError: If an input is missing, non-positive, or
                gender is not male/female

        Example:
            >>> BMRService().calculate(70, 175, 25, "male")
            1674
        """
        weight_kg = require_positive(weight, "weight")
        height_cm = require_positive(height, "height")
        age_years = require_positive(age, "age")
        sex = Gender.parse(gender)

        # Base calculation (common for both sexes)
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age_years

        return round_half_up(base + sex.bmr_offset())
