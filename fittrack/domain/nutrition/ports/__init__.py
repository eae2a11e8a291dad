"""Nutrition domain ports."""

from .calculators import (
    IBMRCalculator,
    IMacroCalculator,
    ITDEECalculator,
    IWorkoutCalorieCalculator,
)

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "IMacroCalculator",
    "IWorkoutCalorieCalculator",
]
