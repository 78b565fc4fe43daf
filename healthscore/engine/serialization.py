"""JSON (de)serialization of analysis results."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter

from healthscore.engine.result import BusinessHealthResult

_RESULT_ADAPTER = TypeAdapter(BusinessHealthResult)
_RESULT_LIST_ADAPTER = TypeAdapter(list[BusinessHealthResult])


def result_to_dict(result: BusinessHealthResult) -> dict[str, Any]:
    """Plain JSON-compatible dict (enums as values, timestamp as ISO string)."""
    return _RESULT_ADAPTER.dump_python(result, mode="json")


def result_from_dict(data: dict[str, Any]) -> BusinessHealthResult:
    return _RESULT_ADAPTER.validate_python(data)


def result_to_json(result: BusinessHealthResult) -> str:
    return _RESULT_ADAPTER.dump_json(result).decode()


def result_from_json(raw: str | bytes) -> BusinessHealthResult:
    return _RESULT_ADAPTER.validate_json(raw)


def results_to_dicts(results: list[BusinessHealthResult]) -> list[dict[str, Any]]:
    return _RESULT_LIST_ADAPTER.dump_python(results, mode="json")


def results_from_dicts(data: list[dict[str, Any]]) -> list[BusinessHealthResult]:
    return _RESULT_LIST_ADAPTER.validate_python(data)
