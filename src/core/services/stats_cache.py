"""In-memory holder for the single memoized stats summary."""

import time
from collections.abc import Callable

from src.core.entities.stats import CacheEntry, StatsSummary


class StatsCache:
    """
    Holds at most one summary and the time it was computed.

    The entry is replaced as a whole, so readers see either no entry
    or a complete one. There is no expiry; only ``invalidate`` removes it.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entry: CacheEntry | None = None

    def get(self) -> CacheEntry | None:
        return self._entry

    def set(self, summary: StatsSummary) -> CacheEntry:
        entry = CacheEntry(value=summary, computed_at=self._clock())
        self._entry = entry
        return entry

    def invalidate(self) -> None:
        self._entry = None

    def age_ms(self, entry: CacheEntry) -> int:
        """Milliseconds since ``entry`` was computed, never negative."""
        return max(0, int((self._clock() - entry.computed_at) * 1000))
