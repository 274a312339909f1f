"""Create Item Use Case: validate, append, rewrite the store."""

import math
import time
from typing import Any

from src.application.dto.requests import CreateItemRequest
from src.application.dto.responses import ItemResponse
from src.config import get_logger
from src.core.entities.item import Item
from src.core.exceptions import ValidationError
from src.core.interfaces.item_store import IItemStore

logger = get_logger(__name__)


def _require_text(field: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, "is required and must be a non-empty string", value)
    return value.strip()


def _require_price(value: Any) -> int | float:
    # bool is an int subclass but never a price
    if (
        isinstance(value, bool)
        or not isinstance(value, (int, float))
        or not math.isfinite(value)
        or value < 0
    ):
        raise ValidationError("price", "is required and must be a non-negative number", value)
    return value


class CreateItemUseCase:
    """Append a validated item to the store."""

    def __init__(self, item_store: IItemStore | None = None):
        self._item_store = item_store

    def _get_item_store(self) -> IItemStore:
        if self._item_store is None:
            from src.application.services import get_item_store

            self._item_store = get_item_store()
        return self._item_store

    async def execute(self, request: CreateItemRequest) -> Item:
        """Execute create item use case."""
        name = _require_text("name", request.name)
        category = _require_text("category", request.category)
        price = _require_price(request.price)

        store = self._get_item_store()
        items = await store.load()

        item = Item(
            id=int(time.time() * 1000),
            name=name,
            category=category,
            price=price,
        )
        items.append(item)
        await store.save(items)

        logger.info("item_created", item_id=item.id, category=item.category)
        return item

    def to_response(self, item: Item) -> ItemResponse:
        """Convert result to API response."""
        return ItemResponse(**item.model_dump())
