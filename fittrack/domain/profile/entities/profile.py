"""Profile entity - immutable snapshot of a user's physical attributes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ...shared.errors import ValidationError
from ..value_objects import ActivityLevel, Gender, Goal


def _positive_float(row: Mapping[str, Any], field: str) -> float:
    value = row.get(field)
    if value is None or value == "":
        raise ValidationError(f"{field} is required", field=field)
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number, got {value!r}", field=field)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(
            f"{field} must be a number, got {value!r}", field=field
        ) from None
    if number <= 0:
        raise ValidationError(f"{field} must be positive, got {number}", field=field)
    return number


def _positive_int(row: Mapping[str, Any], field: str) -> int:
    number = _positive_float(row, field)
    if not number.is_integer():
        raise ValidationError(
            f"{field} must be a whole number, got {number}", field=field
        )
    return int(number)


@dataclass(frozen=True)
class Profile:
    """User biometric and goal data for nutrition calculations.

    Owned by the persistence service; the metrics code treats each
    instance as a read-only snapshot for the duration of one call.

    Attributes:
        weight: Body weight in kilograms
        height: Height in centimeters
        age: Age in years
        gender: Biological sex for the BMR constant
        activity_level: Physical activity level (defaults to moderate)
        goal: Nutritional goal (defaults to maintain)
        bmr: Precomputed BMR stored on the profile, if any
    """

    weight: float
    height: float
    age: int
    gender: Gender
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    goal: Goal = Goal.MAINTAIN
    bmr: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate biometric constraints.

        Raises:
            ValidationError: If any required value is missing or not positive
        """
        for field in ("weight", "height", "age"):
            value = getattr(self, field)
            if value is None or isinstance(value, bool):
                raise ValidationError(f"{field} is required", field=field)
            if value <= 0:
                raise ValidationError(
                    f"{field} must be positive, got {value}", field=field
                )
        if not isinstance(self.gender, Gender):
            raise ValidationError(
                f"gender must be a Gender, got {self.gender!r}", field="gender"
            )
        if self.bmr is not None and self.bmr <= 0:
            raise ValidationError(f"bmr must be positive, got {self.bmr}", field="bmr")

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Profile":
        """Build a profile from a persistence row.

        Required keys are ``weight``, ``height``, ``age`` and ``gender``.
        ``activity_level`` and ``goal`` fall back to moderate/maintain.
        A falsy ``bmr`` (0, null) is treated as "not computed yet".

        Raises:
            ValidationError: Naming the first missing or malformed field

        Example:
            >>> profile = Profile.from_row({
            ...     "weight": 70, "height": 175, "age": 25, "gender": "male",
            ... })
            >>> profile.activity_level
            <ActivityLevel.MODERATE: 'moderate'>
        """
        weight = _positive_float(row, "weight")
        height = _positive_float(row, "height")
        age = _positive_int(row, "age")
        gender = Gender.parse(row.get("gender"))

        stored_bmr = row.get("bmr")
        bmr = _positive_float(row, "bmr") if stored_bmr else None

        return cls(
            weight=weight,
            height=height,
            age=age,
            gender=gender,
            activity_level=ActivityLevel.parse(row.get("activity_level")),
            goal=Goal.parse(row.get("goal")),
            bmr=bmr,
        )
