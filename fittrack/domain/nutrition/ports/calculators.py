"""Calculator ports - interfaces for BMR/TDEE/Macro/MET calculations."""

from abc import ABC, abstractmethod
from typing import Any

from ...profile.entities import MacroTargets


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Calculates Basal Metabolic Rate using Mifflin-St Jeor formula.
    """

    @abstractmethod
    def calculate(self, weight: float, height: float, age: int, gender: Any) -> int:
        """Calculate BMR in kcal/day from biometric data."""
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation.

    Calculates Total Daily Energy Expenditure from BMR and activity.
    """

    @abstractmethod
    def calculate(self, bmr: float, activity_level: Any) -> int:
        """Calculate TDEE from BMR and activity level."""
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient distribution calculation."""

    @abstractmethod
    def calculate(self, tdee: float, goal: Any) -> MacroTargets:
        """Calculate goal-adjusted calories and macro grams."""
        pass


class IWorkoutCalorieCalculator(ABC):
    """Port for exercise energy expenditure estimates."""

    @abstractmethod
    def calculate(self, weight: float, duration_minutes: float, intensity: Any) -> int:
        """Estimate calories burned during a workout."""
        pass
