from __future__ import annotations

from typing import Optional

from .base import StorageBackend


class InMemoryStorage(StorageBackend):
    """Process-local store, used for tests and ephemeral runs."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    async def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._items)
