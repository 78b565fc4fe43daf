"""JSON file store: one file per key under a data directory."""

from __future__ import annotations

import asyncio
import logging
import os
import re
from pathlib import Path
from typing import Optional
from uuid import uuid4

from .base import StorageBackend

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class JsonFileStorage(StorageBackend):
    """Stores each key as ``<data_dir>/<key>.json``.

    Writes go to a temporary file that is then renamed over the target, so a
    reader never sees a half-written value. Blocking file I/O runs in a
    worker thread.
    """

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = Path(data_dir)

    def path_for(self, key: str) -> Path:
        return self.data_dir / f"{_UNSAFE_CHARS.sub('__', key)}.json"

    async def get_item(self, key: str) -> Optional[str]:
        return await asyncio.to_thread(self._read, self.path_for(key))

    async def set_item(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write, self.path_for(key), value)

    async def remove_item(self, key: str) -> None:
        await asyncio.to_thread(self._remove, self.path_for(key))

    @staticmethod
    def _read(path: Path) -> Optional[str]:
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def _write(self, path: Path, value: str) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        # One temp file per write; writers to the same key must not share it
        tmp_path = path.with_name(f"{path.name}.{uuid4().hex}.tmp")
        try:
            tmp_path.write_text(value, encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d bytes to %s", len(value), path)

    @staticmethod
    def _remove(path: Path) -> None:
        path.unlink(missing_ok=True)
