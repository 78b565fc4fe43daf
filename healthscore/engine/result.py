"""Immutable result data structures."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import Field

from healthscore.models.business_input import BusinessInputData
from healthscore.models.enums import Channel, PillarName, ScoreStatus

PILLAR_MAX_SCORE = 100
TOTAL_MAX_SCORE = PILLAR_MAX_SCORE * len(PillarName)


@dataclass(frozen=True)
class DatabaseMetrics:
    total_customers: int
    contact_frequency: float
    average_project_value: float
    reactivation_potential: int
    pillar: Literal["database"] = "database"


@dataclass(frozen=True)
class ReputationMetrics:
    current_rating: float
    target_rating: float
    response_rate: float
    rating_gap: float
    pillar: Literal["reputation"] = "reputation"


@dataclass(frozen=True)
class LeadCaptureMetrics:
    daily_calls: int
    answer_rate: float
    missed_calls_per_day: int
    missed_calls_per_year: int
    pillar: Literal["lead_capture"] = "lead_capture"


@dataclass(frozen=True)
class OmnichannelMetrics:
    available_channels: list[Channel]
    channel_count: int
    current_conversion_rate: float
    target_conversion_rate: float
    pillar: Literal["omnichannel"] = "omnichannel"


@dataclass(frozen=True)
class WebsiteMetrics:
    """Conversion figures in percent; ``conversion_gap`` in percentage points."""

    monthly_visitors: int
    current_conversion_rate: float
    target_conversion_rate: float
    conversion_gap: float
    pillar: Literal["website"] = "website"


PillarMetrics = Annotated[
    Union[
        DatabaseMetrics,
        ReputationMetrics,
        LeadCaptureMetrics,
        OmnichannelMetrics,
        WebsiteMetrics,
    ],
    Field(discriminator="pillar"),
]


@dataclass(frozen=True)
class PillarScore:
    """Score, revenue impact and advice for a single pillar."""

    name: PillarName
    score: int
    percentage: int
    revenue_impact: int
    metrics: PillarMetrics
    recommendations: list[str]
    max_score: int = PILLAR_MAX_SCORE


@dataclass(frozen=True)
class BusinessHealthResult:
    """Top-level result object for a complete analysis."""

    id: str
    timestamp: datetime
    total_score: int
    percentage: float
    status: ScoreStatus
    annual_revenue_loss: int
    daily_opportunity_cost: int
    pillars: list[PillarScore]
    input_data: BusinessInputData
    max_score: int = TOTAL_MAX_SCORE

    def pillar(self, name: PillarName | str) -> PillarScore:
        """Look up a pillar by name."""
        name = PillarName(name)
        for p in self.pillars:
            if p.name == name:
                return p
        raise KeyError(name.value)
