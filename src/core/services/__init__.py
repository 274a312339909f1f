"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/interfaces/*
- src/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from src.core.services.stats_cache import StatsCache
from src.core.services.stats_calculator import compute_stats, round_money
from src.core.services.stats_engine import StatsCacheEngine, StatsResult, WatchState

__all__ = [
    # Computation
    "compute_stats",
    "round_money",
    # Cache state
    "StatsCache",
    # Engine
    "StatsCacheEngine",
    "StatsResult",
    "WatchState",
]
