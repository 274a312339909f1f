"""Abstract interface for item storage."""

from abc import ABC, abstractmethod

from src.core.entities.item import Item


class IItemStore(ABC):
    """Interface for an ordered, whole-file item store."""

    @abstractmethod
    async def load(self) -> list[Item]:
        """Read every item, in stored order."""
        pass

    @abstractmethod
    async def save(self, items: list[Item]) -> None:
        """Replace the stored items with ``items``."""
        pass
