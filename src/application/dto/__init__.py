"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from src.application.dto.requests import CreateItemRequest, ListItemsRequest
from src.application.dto.responses import (
    ErrorResponse,
    HealthResponse,
    ItemListResponse,
    ItemResponse,
    PaginationResponse,
    StatsResponse,
)

__all__ = [
    # Requests
    "CreateItemRequest",
    "ListItemsRequest",
    # Responses
    "ItemResponse",
    "ItemListResponse",
    "PaginationResponse",
    "StatsResponse",
    "HealthResponse",
    "ErrorResponse",
]
