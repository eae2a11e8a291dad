"""
Domain exceptions.

Typed exceptions for explicit error handling: input validation failures,
upstream catalog failures and cache bookkeeping failures each get their own
branch so callers never confuse "no results" with "request failed".
"""

from __future__ import annotations

from typing import Optional


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all fittrack errors.

    Allows catching every library error with a single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# VALIDATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ValidationError(DomainError):
    """
    Input validation failed.

    Raised when:
    - A required profile field is missing
    - A numeric field is malformed or not positive
    - Gender is not one of the supported values

    Example:
        >>> raise ValidationError("weight is required", field="weight")
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class ConfigurationError(DomainError):
    """
    Settings could not be loaded.

    Raised when an environment override is not a valid number or is out of
    range (e.g. a negative TTL).
    """

    pass


class NotFoundError(DomainError):
    """Resource not found."""

    pass


class ExerciseNotFoundError(NotFoundError):
    """
    Exercise id unknown to the catalog.

    Example:
        >>> raise ExerciseNotFoundError(9999)
    """

    def __init__(self, exercise_id: object) -> None:
        super().__init__(f"Exercise not found: {exercise_id}")
        self.exercise_id = exercise_id


# ═══════════════════════════════════════════════════════════
# EXTERNAL SERVICE EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ExternalServiceError(DomainError):
    """
    External service call failed.

    Base class for all external service errors.
    """

    pass


class UpstreamFetchError(ExternalServiceError):
    """
    Catalog or persistence read failed.

    Raised when:
    - The upstream answered with an error status
    - The upstream was unreachable
    - The response body could not be parsed

    Never cached: a failed fetch leaves the cache untouched.
    """

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class TimeoutError(UpstreamFetchError):  # noqa: A001
    """
    Upstream call timed out.

    Example:
        >>> raise TimeoutError("Catalog API timeout after 10s")
    """

    pass


class RateLimitError(UpstreamFetchError):
    """Upstream answered 429 Too Many Requests."""

    pass


class ServiceUnavailableError(UpstreamFetchError):
    """
    Upstream unavailable.

    Raised when:
    - Service answers 5xx after retries
    - Circuit breaker is open
    """

    pass


# ═══════════════════════════════════════════════════════════
# INFRASTRUCTURE EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class InfrastructureError(DomainError):
    """
    Infrastructure layer error.

    Base class for cache and configuration plumbing errors.
    """

    pass


class CacheError(InfrastructureError):
    """Cache bookkeeping failed."""

    pass


class CacheKeyError(CacheError):
    """
    Request parameters could not be serialised into a cache key.

    Example:
        >>> raise CacheKeyError("Unsupported parameter type: object")
    """

    pass
