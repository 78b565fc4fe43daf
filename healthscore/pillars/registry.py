from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from healthscore.models.enums import PillarName

if TYPE_CHECKING:
    from healthscore.engine.result import PillarScore

# Global registry -- maps pillar name -> PillarDefinition
_REGISTRY: dict[PillarName, PillarDefinition] = {}


@dataclass(frozen=True)
class PillarDefinition:
    """A scored pillar and the calculator that produces its PillarScore."""

    name: PillarName
    label: str
    description: str
    input_fields: list[str]  # BusinessInputData field names
    benchmark_section: str  # Which BenchmarkValues section the calculator reads
    calculate_fn: Callable[..., PillarScore]
    uses_annual_revenue: bool = False


def register_pillar(
    name: PillarName,
    label: str,
    description: str,
    input_fields: list[str],
    benchmark_section: str,
    uses_annual_revenue: bool = False,
) -> Callable:
    """Decorator to register a calculator function for a pillar."""

    def decorator(fn: Callable[..., PillarScore]) -> Callable[..., PillarScore]:
        definition = PillarDefinition(
            name=name,
            label=label,
            description=description,
            input_fields=input_fields,
            benchmark_section=benchmark_section,
            calculate_fn=fn,
            uses_annual_revenue=uses_annual_revenue,
        )
        _REGISTRY[name] = definition
        return fn

    return decorator


def get_pillar(name: PillarName | str) -> Optional[PillarDefinition]:
    """Look up a pillar definition by name."""
    try:
        return _REGISTRY.get(PillarName(name))
    except ValueError:
        return None


def get_all_pillars() -> dict[PillarName, PillarDefinition]:
    """Return the registered pillars in result order (read-only copy)."""
    return {name: _REGISTRY[name] for name in PillarName if name in _REGISTRY}
