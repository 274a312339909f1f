"""
Statistics computation over item records.

Pure function of the item list; no I/O and no validation beyond what
the store already enforces.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from src.core.entities.item import Item
from src.core.entities.stats import CategoryStats, PriceRange, StatsSummary

_CENT = Decimal("0.01")


def round_money(value: float) -> float:
    """Round half-up to 2 decimal places."""
    return float(Decimal(repr(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def compute_stats(items: Iterable[Item]) -> StatsSummary:
    """
    Summarize items in a single pass.

    Category buckets use the exact category string, so "Electronics"
    and "electronics" are counted separately.

    Args:
        items: Item records in store order

    Returns:
        Summary with totals, averages, category breakdown and price range
    """
    total = 0
    value_sum = 0.0
    low: float | None = None
    high: float | None = None
    counts: dict[str, int] = {}
    subtotals: dict[str, float] = {}

    for item in items:
        price = item.price
        total += 1
        value_sum += price
        low = price if low is None or price < low else low
        high = price if high is None or price > high else high

        counts[item.category] = counts.get(item.category, 0) + 1
        subtotals[item.category] = subtotals.get(item.category, 0.0) + price

    if total == 0:
        return StatsSummary()

    return StatsSummary(
        total=total,
        average_price=round_money(value_sum / total),
        total_value=round_money(value_sum),
        categories={
            name: CategoryStats(count=count, total_value=round_money(subtotals[name]))
            for name, count in counts.items()
        },
        price_range=PriceRange(min=low, max=high),
    )
