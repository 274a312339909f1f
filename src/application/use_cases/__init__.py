"""Application use cases."""

from src.application.use_cases.create_item import CreateItemUseCase
from src.application.use_cases.get_stats import GetStatsUseCase
from src.application.use_cases.list_items import ListItemsResult, ListItemsUseCase

__all__ = [
    "CreateItemUseCase",
    "ListItemsUseCase",
    "ListItemsResult",
    "GetStatsUseCase",
]
