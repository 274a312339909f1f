"""Pytest configuration and fixtures."""

import json
from collections.abc import AsyncGenerator, Callable, Generator
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from src.api.main import create_app
from src.application.services import reset_services
from src.config import Settings, get_settings, reset_settings
from src.core.entities import Item
from src.core.interfaces import IChangeNotifier, Unsubscribe


class FakeNotifier(IChangeNotifier):
    """In-memory notifier; tests call ``fire()`` to simulate a file change."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.subscribe_calls = 0
        self.unsubscribe_calls = 0
        self._callbacks: dict[int, Callable[[], None]] = {}

    @property
    def active(self) -> int:
        return len(self._callbacks)

    def subscribe(self, path: Path, on_change: Callable[[], None]) -> Unsubscribe:
        self.subscribe_calls += 1
        if self.error is not None:
            raise self.error

        key = self.subscribe_calls
        self._callbacks[key] = on_change

        def unsubscribe() -> None:
            self.unsubscribe_calls += 1
            self._callbacks.pop(key, None)

        return unsubscribe

    def fire(self) -> None:
        for callback in list(self._callbacks.values()):
            callback()


@pytest.fixture
def sample_items() -> list[dict]:
    """Five items; two Electronics priced 999.99 and 29.99."""
    return [
        {"id": 1, "name": "Laptop Pro", "category": "Electronics", "price": 999.99},
        {"id": 2, "name": "Noise Cancelling Headphones", "category": "Electronics", "price": 29.99},
        {"id": 3, "name": "Ultra-Wide Monitor", "category": "Displays", "price": 399.5},
        {"id": 4, "name": "Ergonomic Chair", "category": "Furniture", "price": 249},
        {"id": 5, "name": "Standing Desk", "category": "Furniture", "price": 549.0},
    ]


@pytest.fixture
def item_entities(sample_items: list[dict]) -> list[Item]:
    return [Item(**data) for data in sample_items]


@pytest.fixture
def items_file(tmp_path: Path, sample_items: list[dict]) -> Path:
    """Backing JSON file seeded with the sample items."""
    path = tmp_path / "items.json"
    path.write_text(json.dumps(sample_items, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def fake_notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def failing_notifier() -> FakeNotifier:
    return FakeNotifier(error=OSError("inotify watch limit reached"))


@pytest.fixture
def isolated_settings(
    items_file: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Settings, None, None]:
    """Point settings and service singletons at the temp data file."""
    monkeypatch.setenv("STORAGE_DATA_DIR", str(items_file.parent))
    monkeypatch.setenv("STORAGE_ITEMS_FILE", items_file.name)
    reset_services()
    reset_settings()
    yield get_settings()
    reset_services()
    reset_settings()


@pytest.fixture
def app(isolated_settings: Settings) -> FastAPI:
    """Fresh application bound to the temp data file."""
    return create_app()


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Sync test client; runs the lifespan, so the real file watcher is live."""
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async test client without lifespan; pair with dependency overrides."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
