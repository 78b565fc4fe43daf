"""Persistence of the current analysis, analysis history and user settings."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic.alias_generators import to_camel

from healthscore.engine.result import BusinessHealthResult
from healthscore.engine.serialization import (
    result_from_json,
    result_to_dict,
    result_to_json,
    results_from_dicts,
    results_to_dicts,
)
from healthscore.models.app_settings import DEFAULT_SETTINGS, AppSettings
from healthscore.validation.validator import validate_app_settings

from .base import StorageBackend

logger = logging.getLogger(__name__)

CURRENT_ANALYSIS_KEY = "business_health/current_analysis"
ANALYSIS_HISTORY_KEY = "business_health/history"
APP_SETTINGS_KEY = "business_health/settings"

DEFAULT_HISTORY_LIMIT = 50


class StorageError(RuntimeError):
    """A write to the underlying store failed."""


class AnalysisRepository:
    """Reads and writes analyses and settings through a StorageBackend.

    Failed reads are logged and fall back to an empty/default value; failed
    writes are logged and raised as StorageError. Every write holds one
    asyncio.Lock, so read-modify-write updates from concurrent requests are
    applied one after another.
    """

    def __init__(
        self,
        storage: StorageBackend,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self.storage = storage
        self.history_limit = history_limit
        self._lock = asyncio.Lock()

    # -- current analysis -------------------------------------------------

    async def save_current_analysis(self, result: BusinessHealthResult) -> None:
        async with self._lock:
            await self._write(CURRENT_ANALYSIS_KEY, result_to_json(result), "current analysis")

    async def load_current_analysis(self) -> Optional[BusinessHealthResult]:
        try:
            raw = await self.storage.get_item(CURRENT_ANALYSIS_KEY)
            if not raw:
                return None
            return result_from_json(raw)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading current analysis: {e}")
            return None

    # -- history ----------------------------------------------------------

    async def load_history(self) -> list[BusinessHealthResult]:
        """Stored analyses, newest first."""
        try:
            raw = await self.storage.get_item(ANALYSIS_HISTORY_KEY)
            if not raw:
                return []
            return results_from_dicts(json.loads(raw)["analyses"])
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Error loading history: {e}")
            return []

    async def add_to_history(self, result: BusinessHealthResult) -> None:
        """Prepend ``result`` and keep only the ``history_limit`` most recent."""
        async with self._lock:
            await self._add_to_history(result)

    async def get_from_history(self, result_id: str) -> Optional[BusinessHealthResult]:
        for result in await self.load_history():
            if result.id == result_id:
                return result
        return None

    async def delete_from_history(self, result_id: str) -> bool:
        """Remove one entry; returns False when no entry had that id."""
        async with self._lock:
            history = await self.load_history()
            remaining = [r for r in history if r.id != result_id]
            if len(remaining) == len(history):
                return False
            await self._write_history(remaining)
            return True

    async def clear_history(self) -> None:
        async with self._lock:
            await self._remove([ANALYSIS_HISTORY_KEY], "history")

    async def save_analysis(self, result: BusinessHealthResult) -> None:
        """Store ``result`` as the current analysis and in the history.

        Both writes form one unit: if the history write fails, the previous
        current analysis is put back before the error is raised.
        """
        async with self._lock:
            try:
                previous = await self.storage.get_item(CURRENT_ANALYSIS_KEY)
            except OSError as e:
                logger.exception("Error reading current analysis before save")
                raise StorageError("Failed to save analysis") from e

            await self._write(CURRENT_ANALYSIS_KEY, result_to_json(result), "current analysis")
            try:
                await self._add_to_history(result)
            except StorageError:
                await self._restore_current(previous)
                raise
        logger.info(f"Saved analysis {result.id}")

    async def _restore_current(self, previous: Optional[str]) -> None:
        try:
            if previous is None:
                await self.storage.remove_item(CURRENT_ANALYSIS_KEY)
            else:
                await self.storage.set_item(CURRENT_ANALYSIS_KEY, previous)
        except Exception:
            logger.exception("Failed to restore current analysis after history write error")

    async def _add_to_history(self, result: BusinessHealthResult) -> None:
        history = await self.load_history()
        history.insert(0, result)
        await self._write_history(history[: self.history_limit])

    async def _write_history(self, history: list[BusinessHealthResult]) -> None:
        payload = json.dumps({"analyses": results_to_dicts(history)})
        await self._write(ANALYSIS_HISTORY_KEY, payload, "history")

    # -- settings ---------------------------------------------------------

    async def save_settings(self, settings: AppSettings) -> None:
        async with self._lock:
            await self._write_settings(settings)

    async def load_settings(self) -> AppSettings:
        try:
            raw = await self.storage.get_item(APP_SETTINGS_KEY)
            if not raw:
                return DEFAULT_SETTINGS
            return AppSettings.model_validate_json(raw)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading settings: {e}")
            return DEFAULT_SETTINGS

    async def update_settings(self, changes: dict[str, Any]) -> AppSettings:
        """Shallow-merge ``changes`` into the stored settings and save.

        Raises InputValidationError if the merged settings are invalid.
        """
        async with self._lock:
            current = (await self.load_settings()).model_dump(mode="json", by_alias=True)
            for key, value in changes.items():
                current[to_camel(key) if "_" in key else key] = value
            updated = validate_app_settings(current)
            await self._write_settings(updated)
        return updated

    async def reset_settings(self) -> AppSettings:
        await self.save_settings(DEFAULT_SETTINGS)
        return DEFAULT_SETTINGS

    # -- bulk -------------------------------------------------------------

    async def export_data(self) -> str:
        """All stored data as one indented JSON document."""
        current = await self.load_current_analysis()
        history = await self.load_history()
        settings = await self.load_settings()
        export = {
            "current_analysis": result_to_dict(current) if current else None,
            "history": {"analyses": results_to_dicts(history)},
            "settings": settings.model_dump(mode="json", by_alias=True),
            "export_date": datetime.now(tz=timezone.utc).isoformat(),
        }
        return json.dumps(export, indent=2)

    async def clear_all_data(self) -> None:
        async with self._lock:
            await self._remove(
                [CURRENT_ANALYSIS_KEY, ANALYSIS_HISTORY_KEY, APP_SETTINGS_KEY],
                "all data",
            )

    # -- helpers ----------------------------------------------------------

    async def _write_settings(self, settings: AppSettings) -> None:
        await self._write(APP_SETTINGS_KEY, settings.model_dump_json(by_alias=True), "settings")

    async def _write(self, key: str, value: str, what: str) -> None:
        try:
            await self.storage.set_item(key, value)
        except Exception as e:
            logger.exception(f"Error saving {what}")
            raise StorageError(f"Failed to save {what}") from e

    async def _remove(self, keys: list[str], what: str) -> None:
        try:
            await self.storage.multi_remove(keys)
        except Exception as e:
            logger.exception(f"Error deleting {what}")
            raise StorageError(f"Failed to delete {what}") from e
