"""User-facing application settings."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from healthscore.benchmarks.schema import (
    DEFAULT_BENCHMARKS,
    BenchmarkOverrides,
    BenchmarkValues,
)

from .enums import Currency, Language, ThemeMode


class AppSettings(BaseModel):
    """Display preferences plus optional per-field benchmark overrides."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        extra="forbid",
    )

    currency: Currency = Currency.USD
    language: Language = Language.DE
    theme: ThemeMode = ThemeMode.AUTO
    custom_benchmarks: Optional[BenchmarkOverrides] = None

    def effective_benchmarks(self, base: BenchmarkValues = DEFAULT_BENCHMARKS) -> BenchmarkValues:
        """Merge the custom overrides onto ``base``."""
        return base.with_overrides(self.custom_benchmarks)


DEFAULT_SETTINGS = AppSettings()
