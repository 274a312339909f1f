"""Abstract interface for filesystem change notifications."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

# Releases a subscription. Calling it more than once is a no-op.
Unsubscribe = Callable[[], None]


class IChangeNotifier(ABC):
    """Delivers a callback whenever a watched file changes."""

    @abstractmethod
    def subscribe(self, path: Path, on_change: Callable[[], None]) -> Unsubscribe:
        """
        Start watching ``path``.

        ``on_change`` is invoked on the subscriber's event loop, once per
        change event. Raises if the path cannot be watched.
        """
        pass
