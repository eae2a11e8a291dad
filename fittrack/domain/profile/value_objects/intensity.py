"""Intensity value object - workout effort level for MET estimates."""

from enum import Enum
from typing import Any

import structlog

logger = structlog.get_logger(__name__)


class Intensity(str, Enum):
    """Workout intensity mapped to a Metabolic Equivalent of Task."""

    LIGHT = "light"
    MODERATE = "moderate"
    INTENSE = "intense"
    VERY_INTENSE = "very_intense"

    @classmethod
    def parse(cls, value: Any) -> "Intensity":
        """Resolve an intensity label, defaulting to MODERATE."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            if value is not None:
                logger.warning("Unknown intensity, using moderate", value=value)
            return cls.MODERATE

    def met(self) -> float:
        """MET value for this intensity.

        Example:
            >>> Intensity.INTENSE.met()
            8.0
        """
        mets = {
            Intensity.LIGHT: 3.5,
            Intensity.MODERATE: 5.0,
            Intensity.INTENSE: 8.0,
            Intensity.VERY_INTENSE: 10.0,
        }
        return mets[self]
