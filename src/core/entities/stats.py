"""Statistics summary entities."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CategoryStats(_CamelModel):
    """Per-category count and value."""

    count: int = 0
    total_value: float = 0.0


class PriceRange(_CamelModel):
    """Lowest and highest item price."""

    min: float = 0.0
    max: float = 0.0


class StatsSummary(_CamelModel):
    """Summary derived from every item in the store."""

    total: int = 0
    average_price: float = 0.0
    total_value: float = 0.0
    categories: dict[str, CategoryStats] = Field(default_factory=dict)
    price_range: PriceRange = Field(default_factory=PriceRange)


@dataclass(frozen=True)
class CacheEntry:
    """Memoized summary and the monotonic time it was computed at."""

    value: StatsSummary
    computed_at: float
