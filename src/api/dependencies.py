"""
Dependency injection container for FastAPI.

Provides use case instances to route handlers; tests override these
through ``app.dependency_overrides``.
"""

from src.application.services import get_item_store, get_stats_engine
from src.application.use_cases import (
    CreateItemUseCase,
    GetStatsUseCase,
    ListItemsUseCase,
)


def get_list_items_use_case() -> ListItemsUseCase:
    """Get list items use case."""
    return ListItemsUseCase(item_store=get_item_store())


def get_create_item_use_case() -> CreateItemUseCase:
    """Get create item use case."""
    return CreateItemUseCase(item_store=get_item_store())


def get_stats_use_case() -> GetStatsUseCase:
    """Get stats use case bound to the process-wide engine."""
    return GetStatsUseCase(engine=get_stats_engine())
