"""Core domain entities."""

from src.core.entities.item import Item
from src.core.entities.stats import (
    CacheEntry,
    CategoryStats,
    PriceRange,
    StatsSummary,
)

__all__ = [
    "Item",
    "StatsSummary",
    "CategoryStats",
    "PriceRange",
    "CacheEntry",
]
