"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.
"""

from typing import Any

from pydantic import BaseModel, Field


class CreateItemRequest(BaseModel):
    """Request to append an item to the store.

    Fields are accepted loosely here and checked by the use case,
    so bad input gets a 400 with a field-specific message.
    """

    name: Any = Field(
        default=None,
        description="Item name, non-empty after trimming",
        examples=["Laptop Pro"],
    )
    category: Any = Field(
        default=None,
        description="Category name, non-empty after trimming",
        examples=["Electronics"],
    )
    price: Any = Field(
        default=None,
        description="Non-negative price",
        examples=[999.99],
    )


class ListItemsRequest(BaseModel):
    """Pagination and search parameters for item listing."""

    page: int = Field(default=1, ge=1, description="1-based page number")
    limit: int = Field(default=10, ge=1, description="Items per page")
    q: str | None = Field(
        default=None,
        description="Case-insensitive substring matched against name and category",
    )
