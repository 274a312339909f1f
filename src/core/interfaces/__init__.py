"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.item_store import IItemStore
from src.core.interfaces.notifier import IChangeNotifier, Unsubscribe

__all__ = [
    "IItemStore",
    "IChangeNotifier",
    "Unsubscribe",
]
