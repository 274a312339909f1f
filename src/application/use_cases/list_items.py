"""List Items Use Case: search filter plus pagination."""

import math
from dataclasses import dataclass

from src.application.dto.requests import ListItemsRequest
from src.application.dto.responses import (
    ItemListResponse,
    ItemResponse,
    PaginationResponse,
)
from src.core.entities.item import Item
from src.core.exceptions import ItemNotFoundError
from src.core.interfaces.item_store import IItemStore


@dataclass
class ListItemsResult:
    """One page of matching items."""

    items: list[Item]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)

    @property
    def has_more(self) -> bool:
        return self.page * self.limit < self.total


def matches(item: Item, term: str) -> bool:
    """Case-insensitive substring match on name or category."""
    return term in item.name.lower() or term in item.category.lower()


class ListItemsUseCase:
    """Paginated, searchable item listing."""

    def __init__(self, item_store: IItemStore | None = None):
        self._item_store = item_store

    def _get_item_store(self) -> IItemStore:
        if self._item_store is None:
            from src.application.services import get_item_store

            self._item_store = get_item_store()
        return self._item_store

    async def execute(self, request: ListItemsRequest) -> ListItemsResult:
        """Execute list items use case."""
        items = await self._get_item_store().load()

        if request.q:
            term = request.q.lower().strip()
            items = [item for item in items if matches(item, term)]

        start = (request.page - 1) * request.limit
        return ListItemsResult(
            items=items[start : start + request.limit],
            page=request.page,
            limit=request.limit,
            total=len(items),
        )

    async def get(self, item_id: int) -> Item:
        """Fetch one item by ID."""
        items = await self._get_item_store().load()
        for item in items:
            if item.id == item_id:
                return item
        raise ItemNotFoundError(item_id)

    def to_response(self, result: ListItemsResult) -> ItemListResponse:
        """Convert result to API response."""
        return ItemListResponse(
            data=[ItemResponse(**item.model_dump()) for item in result.items],
            pagination=PaginationResponse(
                page=result.page,
                limit=result.limit,
                total=result.total,
                total_pages=result.total_pages,
                has_more=result.has_more,
            ),
        )
