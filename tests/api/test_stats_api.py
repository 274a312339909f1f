"""Tests for the stats endpoint with a fake notifier."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from httpx import AsyncClient

from src.api.dependencies import get_stats_use_case
from src.application.use_cases.get_stats import GetStatsUseCase
from src.core.exceptions import StoreReadError
from src.core.services import StatsCacheEngine


@pytest.fixture
def mock_item_store(item_entities):
    store = AsyncMock()
    store.load.return_value = list(item_entities)
    return store


@pytest.fixture
def engine(mock_item_store, fake_notifier, app: FastAPI):
    engine = StatsCacheEngine(mock_item_store, fake_notifier, Path("items.json"))
    app.dependency_overrides[get_stats_use_case] = lambda: GetStatsUseCase(engine=engine)
    yield engine
    engine.stop()
    app.dependency_overrides.pop(get_stats_use_case, None)


class TestStatsAPI:
    async def test_structure(self, async_client: AsyncClient, engine):
        engine.start()

        response = await async_client.get("/api/stats")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 5
        assert data["averagePrice"] == 445.5
        assert data["totalValue"] == 2227.48
        assert data["priceRange"] == {"min": 29.99, "max": 999.99}
        assert data["categories"]["Electronics"] == {"count": 2, "totalValue": 1029.98}
        assert data["cached"] is False
        assert "cacheAge" not in data

    async def test_second_request_is_cached(self, async_client: AsyncClient, engine):
        engine.start()

        await async_client.get("/api/stats")
        response = await async_client.get("/api/stats")

        data = response.json()
        assert data["cached"] is True
        assert data["cacheAge"] >= 0

    async def test_change_event_refreshes(
        self, async_client: AsyncClient, engine, fake_notifier, mock_item_store, item_entities
    ):
        engine.start()
        await async_client.get("/api/stats")
        mock_item_store.load.return_value = item_entities[:3]

        fake_notifier.fire()
        response = await async_client.get("/api/stats")

        assert response.json()["total"] == 3

    async def test_empty_store(self, async_client: AsyncClient, engine, mock_item_store):
        mock_item_store.load.return_value = []

        response = await async_client.get("/api/stats")

        data = response.json()
        assert data["total"] == 0
        assert data["averagePrice"] == 0
        assert data["totalValue"] == 0
        assert data["categories"] == {}
        assert data["priceRange"] == {"min": 0, "max": 0}

    async def test_store_failure_is_500(self, async_client: AsyncClient, engine, mock_item_store):
        mock_item_store.load.side_effect = StoreReadError("items.json", "invalid JSON")

        response = await async_client.get("/api/stats")

        assert response.status_code == 500
        body = response.json()
        assert body["error_code"] == "STORE_READ_ERROR"
        assert body["path"] == "/api/stats"
        assert body["hint"]

    async def test_unexpected_error_is_opaque_500(
        self, async_client: AsyncClient, engine, mock_item_store
    ):
        mock_item_store.load.side_effect = ValueError("secret internal detail")

        response = await async_client.get("/api/stats")

        assert response.status_code == 500
        body = response.json()
        assert body["error_code"] == "INTERNAL_ERROR"
        assert "secret" not in body["message"]

    async def test_wrong_method_is_405(self, async_client: AsyncClient, engine):
        response = await async_client.post("/api/stats")

        assert response.status_code == 405
        assert response.json()["error_code"] == "METHOD_NOT_ALLOWED"
        assert "GET" in response.headers["allow"]
