"""Input guards for calculation services."""

from typing import Any

from ...shared.errors import ValidationError


def require_positive(value: Any, field: str) -> float:
    """Return ``value`` as a float, rejecting missing or non-positive input.

    Raises:
        ValidationError: With ``field`` set to the offending argument name
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field} is required", field=field)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(
            f"{field} must be a number, got {value!r}", field=field
        ) from None
    if number <= 0:
        raise ValidationError(f"{field} must be positive, got {number}", field=field)
    return number
