"""Tests for the in-memory stats cache."""

from src.core.entities import StatsSummary
from src.core.services import StatsCache


class FakeClock:
    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestStatsCache:
    def test_starts_empty(self):
        assert StatsCache().get() is None

    def test_set_stores_entry_with_timestamp(self):
        clock = FakeClock(42.0)
        cache = StatsCache(clock=clock)
        summary = StatsSummary(total=3)

        entry = cache.set(summary)

        assert cache.get() is entry
        assert entry.value == summary
        assert entry.computed_at == 42.0

    def test_set_replaces_previous_entry(self):
        cache = StatsCache()
        cache.set(StatsSummary(total=1))
        cache.set(StatsSummary(total=2))

        assert cache.get().value.total == 2

    def test_invalidate_clears_entry(self):
        cache = StatsCache()
        cache.set(StatsSummary(total=1))

        cache.invalidate()

        assert cache.get() is None

    def test_invalidate_is_idempotent(self):
        cache = StatsCache()
        cache.invalidate()
        cache.invalidate()

        assert cache.get() is None

    def test_age_in_milliseconds(self):
        clock = FakeClock(10.0)
        cache = StatsCache(clock=clock)
        entry = cache.set(StatsSummary())

        clock.now = 11.5

        assert cache.age_ms(entry) == 1500

    def test_age_never_negative(self):
        clock = FakeClock(10.0)
        cache = StatsCache(clock=clock)
        entry = cache.set(StatsSummary())

        clock.now = 9.0

        assert cache.age_ms(entry) == 0

    def test_no_expiry(self):
        clock = FakeClock(0.0)
        cache = StatsCache(clock=clock)
        cache.set(StatsSummary(total=7))

        clock.now = 86_400.0

        assert cache.get() is not None
