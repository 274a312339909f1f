"""
Service factory functions for dependency injection.

This module wires infrastructure implementations to core services.
Use cases and API dependencies should import from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from typing import TYPE_CHECKING

from src.config import get_settings
from src.core.services import StatsCacheEngine

if TYPE_CHECKING:
    from src.core.interfaces import IChangeNotifier, IItemStore


# Singleton instances
_item_store: "IItemStore | None" = None
_stats_engine: StatsCacheEngine | None = None


def get_item_store() -> "IItemStore":
    """Get or create the item store for the configured data file."""
    global _item_store

    if _item_store is None:
        # Lazy import infrastructure to avoid circular imports
        from src.infrastructure.storage import JsonItemStore

        _item_store = JsonItemStore(get_settings().storage.items_path)

    return _item_store


def get_stats_engine(
    item_store: "IItemStore | None" = None,
    notifier: "IChangeNotifier | None" = None,
) -> StatsCacheEngine:
    """
    Get or create the StatsCacheEngine instance.

    Only the process-wide instance is cached; passing overrides
    builds a fresh engine.

    Args:
        item_store: Optional item store override
        notifier: Optional change notifier override

    Returns:
        Configured StatsCacheEngine (not yet started)
    """
    global _stats_engine

    if _stats_engine is not None and item_store is None and notifier is None:
        return _stats_engine

    from src.infrastructure.watchers import WatchdogChangeNotifier

    engine = StatsCacheEngine(
        store=item_store or get_item_store(),
        notifier=notifier or WatchdogChangeNotifier(),
        watch_path=get_settings().storage.items_path,
    )

    if item_store is None and notifier is None:
        _stats_engine = engine

    return engine


def reset_services() -> None:
    """
    Reset all singleton service instances.

    Stops the stats engine first so its watcher is released.
    """
    global _item_store
    global _stats_engine

    if _stats_engine is not None:
        _stats_engine.stop()

    _item_store = None
    _stats_engine = None


__all__ = [
    "get_item_store",
    "get_stats_engine",
    "reset_services",
]
