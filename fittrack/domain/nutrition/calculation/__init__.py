"""Calculation services for nutrition targets and energy expenditure."""

from .bmr_service import BMRService
from .macro_service import MacroService
from .tdee_service import TDEEService
from .workout_calorie_service import WorkoutCalorieService

__all__ = [
    "BMRService",
    "TDEEService",
    "MacroService",
    "WorkoutCalorieService",
]
