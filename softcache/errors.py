"""
softcache - Core Error Types

Defines the exception hierarchy for softcache.
All exceptions inherit from SoftcacheError for consistent error handling.

Only caller-data problems are raised from cache operations. Store
connectivity failures never surface as exceptions; they disable the
facade instead.
"""

from typing import Any


class SoftcacheError(Exception):
    """Base exception for all softcache errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logs or API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(SoftcacheError):
    """Raised when configuration is invalid or missing."""


class CacheError(SoftcacheError):
    """Base exception for cache data errors."""


class SerializationError(CacheError):
    """Raised when a value cannot be encoded for storage."""

    def __init__(self, value_type: str, error: Exception):
        message = f"Failed to serialize cache value of type {value_type}: {error}"
        super().__init__(message, {"value_type": value_type, "error": str(error)})


class DeserializationError(CacheError):
    """Raised when a stored payload does not fit the requested shape."""

    def __init__(self, shape: str, error: Exception):
        message = f"Failed to deserialize cache value into {shape}: {error}"
        super().__init__(message, {"shape": shape, "error": str(error)})
