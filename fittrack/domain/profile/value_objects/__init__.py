"""Value objects for the profile domain."""

from .activity_level import ActivityLevel
from .gender import Gender
from .goal import Goal
from .intensity import Intensity

__all__ = [
    "ActivityLevel",
    "Gender",
    "Goal",
    "Intensity",
]
