"""
Stats cache engine.

Serves the stats summary from memory and keeps it consistent with the
item store by invalidating on every change notification for the
backing file and eagerly recomputing in the background.
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from src.config import get_logger
from src.core.entities.stats import StatsSummary
from src.core.interfaces.item_store import IItemStore
from src.core.interfaces.notifier import IChangeNotifier, Unsubscribe
from src.core.services.stats_cache import StatsCache
from src.core.services.stats_calculator import compute_stats

logger = get_logger(__name__)


class WatchState(str, Enum):
    """Lifecycle of the change subscription."""

    UNINITIALIZED = "uninitialized"
    WATCHING = "watching"
    UNAVAILABLE = "unavailable"  # setup failed, caching disabled


@dataclass
class StatsResult:
    """Summary plus how it was obtained."""

    summary: StatsSummary
    cached: bool
    cache_age_ms: int | None = None


class StatsCacheEngine:
    """
    Memoizing front for stats computation.

    One instance per process in production; tests build their own with
    a fake notifier. Nothing is memoized unless the engine is watching,
    since no other path would ever invalidate the entry.
    """

    def __init__(
        self,
        store: IItemStore,
        notifier: IChangeNotifier,
        watch_path: Path,
        cache: StatsCache | None = None,
    ):
        """
        Initialize the engine.

        Args:
            store: Item store the summary is computed from
            notifier: Source of change notifications for ``watch_path``
            watch_path: Backing file of ``store``
            cache: Optional cache override (e.g. with a fake clock)
        """
        self._store = store
        self._notifier = notifier
        self._watch_path = watch_path
        self._cache = cache or StatsCache()
        self._state = WatchState.UNINITIALIZED
        self._unsubscribe: Unsubscribe | None = None
        self._refresh_tasks: set[asyncio.Task[None]] = set()
        # Bumped on every change event; a load that started before the
        # latest event must not overwrite the cache
        self._generation = 0

    @property
    def state(self) -> WatchState:
        return self._state

    @property
    def cache(self) -> StatsCache:
        return self._cache

    @property
    def pending_refreshes(self) -> int:
        return len(self._refresh_tasks)

    def start(self) -> None:
        """Subscribe to change notifications. Only the first call does anything."""
        if self._state is not WatchState.UNINITIALIZED:
            return

        try:
            self._unsubscribe = self._notifier.subscribe(self._watch_path, self._on_change)
        except Exception as e:
            self._state = WatchState.UNAVAILABLE
            logger.error(
                "stats_watch_setup_failed",
                path=str(self._watch_path),
                error=str(e),
            )
            return

        self._state = WatchState.WATCHING
        logger.info("stats_watch_started", path=str(self._watch_path))

    def stop(self) -> None:
        """Release the subscription and drop cached state. Idempotent."""
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        if unsubscribe is not None:
            unsubscribe()
            logger.info("stats_watch_stopped", path=str(self._watch_path))

        for task in list(self._refresh_tasks):
            task.cancel()
        self._refresh_tasks.clear()

        # Loads still in flight must not fill the cache of a later start
        self._generation += 1
        self._cache.invalidate()
        self._state = WatchState.UNINITIALIZED

    async def get_summary(self) -> StatsResult:
        """
        Return the current summary.

        Store failures propagate to the caller.
        """
        entry = self._cache.get()
        if entry is not None:
            return StatsResult(
                summary=entry.value,
                cached=True,
                cache_age_ms=self._cache.age_ms(entry),
            )

        generation = self._generation
        items = await self._store.load()
        summary = compute_stats(items)
        if self._state is WatchState.WATCHING and generation == self._generation:
            self._cache.set(summary)
        return StatsResult(summary=summary, cached=False)

    def _on_change(self) -> None:
        """Invalidate now, then recompute in the background."""
        self._generation += 1
        self._cache.invalidate()
        logger.info("stats_cache_invalidated", path=str(self._watch_path))

        task = asyncio.create_task(self._refresh(self._generation))
        self._refresh_tasks.add(task)
        task.add_done_callback(self._refresh_tasks.discard)

    async def _refresh(self, generation: int) -> None:
        try:
            items = await self._store.load()
        except Exception as e:
            logger.error("stats_cache_refresh_failed", error=str(e))
            return

        # Released while loading, or superseded by a newer change
        if self._state is not WatchState.WATCHING or generation != self._generation:
            return

        summary = compute_stats(items)
        self._cache.set(summary)
        logger.info("stats_cache_refreshed", total=summary.total)
