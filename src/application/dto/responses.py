"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.core.entities.stats import CategoryStats, PriceRange


class ItemResponse(BaseModel):
    """Single item."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Item ID")
    name: str = Field(..., description="Item name")
    category: str = Field(..., description="Category name")
    price: int | float = Field(..., description="Item price")


class PaginationResponse(BaseModel):
    """Pagination metadata for item listing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page: int
    limit: int
    total: int = Field(..., description="Items matching the search")
    total_pages: int
    has_more: bool


class ItemListResponse(BaseModel):
    """One page of items."""

    data: list[ItemResponse] = Field(default=[], description="Items on this page")
    pagination: PaginationResponse


class StatsResponse(BaseModel):
    """Stats summary plus cache metadata.

    ``cache_age`` (milliseconds) is only set when ``cached`` is true.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total: int
    average_price: float
    total_value: float
    categories: dict[str, CategoryStats]
    price_range: PriceRange
    cached: bool
    cache_age: int | None = Field(default=None, ge=0)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    stats_watch: str | None = Field(
        default=None, description="State of the stats cache file watcher"
    )


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. ITEM_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
