"""Profile domain: user attributes and derived nutrition targets."""

from .entities import MacroTargets, NutritionTargets, Profile
from .value_objects import ActivityLevel, Gender, Goal, Intensity

__all__ = [
    "Profile",
    "MacroTargets",
    "NutritionTargets",
    "ActivityLevel",
    "Gender",
    "Goal",
    "Intensity",
]
