"""
JSON file item store.

The whole array is read on every load and rewritten on every save.
No locking; the last writer wins.
"""

import asyncio
import json
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.config import get_logger
from src.core.entities.item import Item
from src.core.exceptions import StoreReadError, StoreWriteError
from src.core.interfaces.item_store import IItemStore

logger = get_logger(__name__)

_items_adapter = TypeAdapter(list[Item])


class JsonItemStore(IItemStore):
    """Item store persisted as a single JSON array."""

    def __init__(self, path: Path):
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    async def load(self) -> list[Item]:
        return await asyncio.to_thread(self._read)

    async def save(self, items: list[Item]) -> None:
        await asyncio.to_thread(self._write, items)
        logger.debug("item_store_saved", path=str(self._path), count=len(items))

    def _read(self) -> list[Item]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise StoreReadError(self._path, str(e)) from e
        except UnicodeDecodeError as e:
            raise StoreReadError(self._path, f"not UTF-8 text: {e.reason}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreReadError(self._path, f"invalid JSON: {e}") from e

        try:
            return _items_adapter.validate_python(data)
        except PydanticValidationError as e:
            raise StoreReadError(
                self._path, f"invalid item records: {e.error_count()} error(s)"
            ) from e

    def _write(self, items: list[Item]) -> None:
        payload = json.dumps(
            [item.model_dump() for item in items],
            indent=2,
            ensure_ascii=False,
        )
        try:
            self._path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise StoreWriteError(self._path, str(e)) from e
