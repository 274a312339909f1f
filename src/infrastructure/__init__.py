"""Infrastructure layer implementations."""

from src.infrastructure import storage, watchers

__all__ = ["storage", "watchers"]
