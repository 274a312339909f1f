"""Storage infrastructure implementations."""

from src.infrastructure.storage.json_item_store import JsonItemStore

__all__ = [
    "JsonItemStore",
]
