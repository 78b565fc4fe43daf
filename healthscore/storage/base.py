from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional


class StorageBackend(ABC):
    """Abstract async key-value store holding JSON strings."""

    @abstractmethod
    async def get_item(self, key: str) -> Optional[str]:
        """Return the stored string, or None when the key is absent."""
        ...

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    async def remove_item(self, key: str) -> None:
        """Delete a key; absent keys are ignored."""
        ...

    async def multi_remove(self, keys: Iterable[str]) -> None:
        for key in keys:
            await self.remove_item(key)
