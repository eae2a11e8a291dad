"""Shared domain primitives."""

from .errors import (
    CacheError,
    CacheKeyError,
    ConfigurationError,
    DomainError,
    ExerciseNotFoundError,
    ExternalServiceError,
    InfrastructureError,
    NotFoundError,
    RateLimitError,
    ServiceUnavailableError,
    TimeoutError,
    UpstreamFetchError,
    ValidationError,
)
from .rounding import round_half_up, safe_percentage

__all__ = [
    "DomainError",
    "ValidationError",
    "ConfigurationError",
    "NotFoundError",
    "ExerciseNotFoundError",
    "ExternalServiceError",
    "UpstreamFetchError",
    "TimeoutError",
    "RateLimitError",
    "ServiceUnavailableError",
    "InfrastructureError",
    "CacheError",
    "CacheKeyError",
    "round_half_up",
    "safe_percentage",
]
