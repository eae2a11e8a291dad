"""MacroService - Macronutrient distribution calculation."""

from typing import Any

from ...profile.entities.nutrition_targets import (
    CARB_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    MacroTargets,
)
from ...profile.value_objects import Goal
from ...shared.rounding import round_half_up
from ..ports.calculators import IMacroCalculator
from .validation import require_positive


class MacroService(IMacroCalculator):
    """Calculate calorie target and macronutrient split based on goal.

    The goal first adjusts the calories, then fixed ratios are applied to
    the *adjusted* figure:

    Lose weight:
        - Calories: TDEE × 0.8 (20% deficit)
        - Protein 35% / Carbs 40% / Fat 25%

    Gain muscle:
        - Calories: TDEE × 1.1 (10% surplus)
        - Protein 30% / Carbs 50% / Fat 20%

    Maintain (and any unrecognized goal):
        - Calories: TDEE
        - Protein 30% / Carbs 45% / Fat 25%

    Calorie conversion:
        - Protein: 4 kcal/g
        - Carbohydrates: 4 kcal/g
        - Fat: 9 kcal/g
    """

    def calculate(self, tdee: float, goal: Any) -> MacroTargets:
        """Calculate macro distribution.

        Args:
            tdee: Total daily energy expenditure (kcal/day)
            goal: ``Goal`` or its string value

        Returns:
            MacroTargets: Adjusted calories, grams and ratios

        Example:
            >>> split = MacroService().calculate(2672, "maintain")
            >>> (split.protein_g, split.carbs_g, split.fats_g)
            (200, 301, 74)
        """
        tdee_value = require_positive(tdee, "tdee")
        resolved = Goal.parse(goal)

        calories = round_half_up(tdee_value * resolved.calorie_factor())
        protein_ratio, carb_ratio, fat_ratio = resolved.macro_ratios()

        return MacroTargets(
            calories=calories,
            protein_g=round_half_up(calories * protein_ratio / PROTEIN_KCAL_PER_G),
            carbs_g=round_half_up(calories * carb_ratio / CARB_KCAL_PER_G),
            fats_g=round_half_up(calories * fat_ratio / FAT_KCAL_PER_G),
            protein_ratio=protein_ratio,
            carb_ratio=carb_ratio,
            fat_ratio=fat_ratio,
        )
