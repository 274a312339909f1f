"""Tests for CreateItemUseCase."""

from unittest.mock import AsyncMock

import pytest

from src.application.dto.requests import CreateItemRequest
from src.application.use_cases.create_item import CreateItemUseCase
from src.core.exceptions import ValidationError


@pytest.fixture
def mock_item_store(item_entities):
    store = AsyncMock()
    store.load.return_value = list(item_entities)
    return store


@pytest.fixture
def use_case(mock_item_store):
    return CreateItemUseCase(item_store=mock_item_store)


class TestCreateItemUseCase:
    async def test_appends_and_saves(self, use_case, mock_item_store):
        item = await use_case.execute(
            CreateItemRequest(name="Desk Lamp", category="Lighting", price=35)
        )

        saved = mock_item_store.save.call_args[0][0]
        assert len(saved) == 6
        assert saved[-1] == item
        assert item.price == 35.0

    async def test_trims_text_fields(self, use_case):
        item = await use_case.execute(
            CreateItemRequest(name="  Desk Lamp ", category=" Lighting  ", price=1)
        )

        assert item.name == "Desk Lamp"
        assert item.category == "Lighting"

    async def test_id_from_epoch_millis(self, use_case):
        item = await use_case.execute(CreateItemRequest(name="A", category="B", price=0))

        assert item.id > 1_600_000_000_000

    @pytest.mark.parametrize(
        ("payload", "field"),
        [
            ({"category": "B", "price": 1}, "name"),
            ({"name": "   ", "category": "B", "price": 1}, "name"),
            ({"name": 5, "category": "B", "price": 1}, "name"),
            ({"name": "A", "price": 1}, "category"),
            ({"name": "A", "category": "", "price": 1}, "category"),
            ({"name": "A", "category": "B"}, "price"),
            ({"name": "A", "category": "B", "price": -0.01}, "price"),
            ({"name": "A", "category": "B", "price": "10"}, "price"),
            ({"name": "A", "category": "B", "price": True}, "price"),
        ],
    )
    async def test_rejects_invalid_input(self, use_case, mock_item_store, payload, field):
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(CreateItemRequest(**payload))

        assert exc_info.value.details["field"] == field
        mock_item_store.save.assert_not_awaited()

    async def test_to_response(self, use_case):
        item = await use_case.execute(CreateItemRequest(name="A", category="B", price=2.5))

        response = use_case.to_response(item)

        assert response.id == item.id
        assert response.price == 2.5
