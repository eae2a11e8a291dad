"""Profile domain entities."""

from .nutrition_targets import MacroTargets, NutritionTargets
from .profile import Profile

__all__ = [
    "Profile",
    "MacroTargets",
    "NutritionTargets",
]
