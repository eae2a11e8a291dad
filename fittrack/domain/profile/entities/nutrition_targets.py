"""NutritionTargets - derived daily calorie and macro targets."""

from dataclasses import dataclass

PROTEIN_KCAL_PER_G = 4
CARB_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


@dataclass(frozen=True)
class MacroTargets:
    """Goal-adjusted calories and macronutrient grams.

    Output of the macro calculation alone, before BMR/TDEE are attached.
    """

    calories: int
    protein_g: int
    carbs_g: int
    fats_g: int
    protein_ratio: float
    carb_ratio: float
    fat_ratio: float

    def macro_calories(self) -> int:
        """Calories implied by the gram targets (protein×4 + carbs×4 + fat×9)."""
        return (
            self.protein_g * PROTEIN_KCAL_PER_G
            + self.carbs_g * CARB_KCAL_PER_G
            + self.fats_g * FAT_KCAL_PER_G
        )

    def __str__(self) -> str:
        return f"{self.calories} kcal ({self.protein_g}P / {self.carbs_g}C / {self.fats_g}F)"


@dataclass(frozen=True)
class NutritionTargets(MacroTargets):
    """Full daily targets shown on the nutrition screen.

    Recomputed on demand from the profile; never persisted by this library.
    """

    bmr: int = 0
    tdee: int = 0

    @classmethod
    def from_macros(cls, macros: MacroTargets, bmr: int, tdee: int) -> "NutritionTargets":
        return cls(
            calories=macros.calories,
            protein_g=macros.protein_g,
            carbs_g=macros.carbs_g,
            fats_g=macros.fats_g,
            protein_ratio=macros.protein_ratio,
            carb_ratio=macros.carb_ratio,
            fat_ratio=macros.fat_ratio,
            bmr=bmr,
            tdee=tdee,
        )
