"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers.
"""

from src.application.dto import (
    CreateItemRequest,
    ErrorResponse,
    HealthResponse,
    ItemListResponse,
    ItemResponse,
    ListItemsRequest,
    PaginationResponse,
    StatsResponse,
)
from src.application.services import (
    get_item_store,
    get_stats_engine,
    reset_services,
)
from src.application.use_cases import (
    CreateItemUseCase,
    GetStatsUseCase,
    ListItemsUseCase,
)

__all__ = [
    # Request DTOs
    "CreateItemRequest",
    "ListItemsRequest",
    # Response DTOs
    "ItemResponse",
    "ItemListResponse",
    "PaginationResponse",
    "StatsResponse",
    "HealthResponse",
    "ErrorResponse",
    # Use Cases
    "CreateItemUseCase",
    "ListItemsUseCase",
    "GetStatsUseCase",
    # Service factories
    "get_item_store",
    "get_stats_engine",
    "reset_services",
]
