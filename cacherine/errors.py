"""
cacherine — Core Error Types

Defines the exception hierarchy for the cache library.
All exceptions inherit from CacherineError for consistent error handling.

Cache operations (get/set/clear) never raise for valid input; absence is
reported as None. Errors are confined to construction and configuration.
"""

from typing import Any


class CacherineError(Exception):
    """Base exception for all cacherine errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentError(CacherineError, ValueError):
    """Raised when a cache, metric query or monitor receives an invalid argument."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, details)


class ConfigurationError(CacherineError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, details)


def validate_capacity(capacity: Any) -> int:
    """
    Validate a cache capacity.

    Args:
        capacity: Maximum number of entries

    Returns:
        The capacity unchanged

    Raises:
        InvalidArgumentError: If capacity is not a positive integer
    """
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidArgumentError(
            "capacity must be an integer",
            details={"capacity": repr(capacity)},
        )
    if capacity <= 0:
        raise InvalidArgumentError(
            "capacity must be greater than 0",
            details={"capacity": capacity},
        )
    return capacity
