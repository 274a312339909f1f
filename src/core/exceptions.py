"""
Domain exceptions for the item stats service.

Every error carries a machine-readable ``code`` that the API layer
turns into a standardized error response.
"""

from pathlib import Path
from typing import Any


class ItemStatsError(Exception):
    """Base exception for all service errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

# Storage Exceptions
class StorageError(ItemStatsError):
    """Base exception for item store operations."""

    pass


class StoreReadError(StorageError):
    """Backing file could not be read or parsed."""

    def __init__(self, path: Path | str, reason: str):
        super().__init__(
            f"Failed to read item store '{path}': {reason}",
            code="STORE_READ_ERROR",
            details={"path": str(path), "reason": reason},
        )


class StoreWriteError(StorageError):
    """Backing file could not be written."""

    def __init__(self, path: Path | str, reason: str):
        super().__init__(
            f"Failed to write item store '{path}': {reason}",
            code="STORE_WRITE_ERROR",
            details={"path": str(path), "reason": reason},
        )


class ItemNotFoundError(StorageError):
    """Item not found in the store."""

    def __init__(self, item_id: int):
        super().__init__(
            f"Item not found: {item_id}",
            code="ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )


# Watch Exceptions
class WatchError(ItemStatsError):
    """Filesystem change notification could not be set up."""

    def __init__(self, path: Path | str, reason: str):
        super().__init__(
            f"Cannot watch '{path}': {reason}",
            code="WATCH_SETUP_FAILED",
            details={"path": str(path), "reason": reason},
        )


# Validation Exceptions
class ValidationError(ItemStatsError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )
