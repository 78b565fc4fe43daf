"""Pydantic models for benchmark configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    validate_by_name=True,
    validate_by_alias=True,
    extra="forbid",
)


class DatabaseBenchmarks(BaseModel):
    model_config = _MODEL_CONFIG

    reactivation_rate: float = Field(
        default=0.25, ge=0, le=1.0, description="Share of past customers that can be reactivated"
    )


class ReputationBenchmarks(BaseModel):
    model_config = _MODEL_CONFIG

    target_rating: float = Field(default=4.8, ge=1, le=5, description="Target star rating")
    revenue_increase_per_star: float = Field(
        default=0.07, ge=0, le=1.0, description="Revenue uplift per additional star"
    )


class LeadCaptureBenchmarks(BaseModel):
    model_config = _MODEL_CONFIG

    conversion_rate: float = Field(
        default=0.35, ge=0, le=1.0, description="Share of answered calls that convert"
    )


class OmnichannelBenchmarks(BaseModel):
    model_config = _MODEL_CONFIG

    omnichannel_conversion_rate: float = Field(default=0.6314, ge=0, le=1.0)
    single_channel_conversion_rate: float = Field(default=0.22, ge=0, le=1.0)


class WebsiteBenchmarks(BaseModel):
    model_config = _MODEL_CONFIG

    # Strictly positive: the website score divides by it.
    target_conversion_rate: float = Field(default=0.052, gt=0, le=1.0)

    @property
    def target_conversion_rate_percent(self) -> float:
        return self.target_conversion_rate * 100


class BenchmarkValues(BaseModel):
    """Complete, immutable benchmark configuration for one calculation."""

    model_config = _MODEL_CONFIG

    database: DatabaseBenchmarks = Field(default_factory=DatabaseBenchmarks)
    reputation: ReputationBenchmarks = Field(default_factory=ReputationBenchmarks)
    lead_capture: LeadCaptureBenchmarks = Field(default_factory=LeadCaptureBenchmarks)
    omnichannel: OmnichannelBenchmarks = Field(default_factory=OmnichannelBenchmarks)
    website: WebsiteBenchmarks = Field(default_factory=WebsiteBenchmarks)

    def with_overrides(self, overrides: Optional[BenchmarkOverrides]) -> BenchmarkValues:
        """Return a new value with every non-null override field applied."""
        if overrides is None:
            return self
        data = self.model_dump()
        for section, values in overrides.model_dump(exclude_none=True).items():
            data[section].update(values)
        return BenchmarkValues.model_validate(data)


class DatabaseOverrides(BaseModel):
    model_config = _MODEL_CONFIG

    reactivation_rate: Optional[float] = Field(default=None, ge=0, le=1.0)


class ReputationOverrides(BaseModel):
    model_config = _MODEL_CONFIG

    target_rating: Optional[float] = Field(default=None, ge=1, le=5)
    revenue_increase_per_star: Optional[float] = Field(default=None, ge=0, le=1.0)


class LeadCaptureOverrides(BaseModel):
    model_config = _MODEL_CONFIG

    conversion_rate: Optional[float] = Field(default=None, ge=0, le=1.0)


class OmnichannelOverrides(BaseModel):
    model_config = _MODEL_CONFIG

    omnichannel_conversion_rate: Optional[float] = Field(default=None, ge=0, le=1.0)
    single_channel_conversion_rate: Optional[float] = Field(default=None, ge=0, le=1.0)


class WebsiteOverrides(BaseModel):
    model_config = _MODEL_CONFIG

    target_conversion_rate: Optional[float] = Field(default=None, gt=0, le=1.0)


class BenchmarkOverrides(BaseModel):
    """Partial benchmark configuration; any section or field may be omitted."""

    model_config = _MODEL_CONFIG

    database: Optional[DatabaseOverrides] = None
    reputation: Optional[ReputationOverrides] = None
    lead_capture: Optional[LeadCaptureOverrides] = None
    omnichannel: Optional[OmnichannelOverrides] = None
    website: Optional[WebsiteOverrides] = None


DEFAULT_BENCHMARKS = BenchmarkValues()


def merge_benchmarks(
    overrides: Union[BenchmarkOverrides, Mapping[str, Any], None],
    base: BenchmarkValues = DEFAULT_BENCHMARKS,
) -> BenchmarkValues:
    """Merge partial overrides onto ``base`` (the defaults unless given).

    Raises ``pydantic.ValidationError`` when a mapping contains unknown keys
    or out-of-range values.
    """
    if overrides is None:
        return base
    if not isinstance(overrides, BenchmarkOverrides):
        overrides = BenchmarkOverrides.model_validate(overrides)
    return base.with_overrides(overrides)
