"""Gender value object - selects the Mifflin-St Jeor constant."""

from enum import Enum
from typing import Any

from ...shared.errors import ValidationError


class Gender(str, Enum):
    """Biological sex used by the BMR equation.

    Only two values are accepted. Anything else is rejected rather than
    silently treated as female, since the constant differs by 166 kcal.
    """

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, value: Any) -> "Gender":
        """Resolve a stored gender.

        Raises:
            ValidationError: If value is missing or not male/female
        """
        if isinstance(value, cls):
            return value
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError("gender is required", field="gender")
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(
                f"gender must be 'male' or 'female', got {value!r}", field="gender"
            ) from None

    def bmr_offset(self) -> float:
        """Sex-specific constant added to the Mifflin-St Jeor base."""
        return 5.0 if self is Gender.MALE else -161.0
