"""Validated input record for a business health analysis."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .enums import Channel

_CHANNEL_ORDER = {channel: i for i, channel in enumerate(Channel)}


class BusinessInputData(BaseModel):
    """Self-reported business metrics, grouped by pillar.

    Field names follow snake_case in Python; the camelCase wire names used
    by the form layer are accepted as aliases.

    Numbers and booleans must arrive as JSON numbers and booleans; text such
    as "50" or "yes" is rejected rather than coerced.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
    )

    # Database
    total_customers: int = Field(strict=True, ge=0, le=1_000_000)
    average_project_value: float = Field(strict=True, ge=0, le=10_000_000)
    contact_frequency_per_year: float = Field(strict=True, ge=0, le=365)
    has_reactivation_process: bool = Field(strict=True)

    # Reputation
    google_star_rating: float = Field(strict=True, ge=1, le=5)
    review_response_rate: float = Field(strict=True, ge=0, le=100)
    shares_reviews_on_social_media: bool = Field(strict=True)

    # Lead capture
    daily_calls: int = Field(strict=True, ge=0, le=10_000)
    call_answer_rate: float = Field(strict=True, ge=0, le=100)
    has_after_hours_handling: bool = Field(strict=True)

    # Omnichannel
    available_channels: tuple[Channel, ...] = Field(min_length=1, max_length=5)
    average_response_time_hours: float = Field(strict=True, ge=0, le=168)

    # Website
    monthly_website_visitors: int = Field(strict=True, ge=0, le=100_000_000)
    conversion_rate: float = Field(strict=True, ge=0, le=100)
    is_mobile_optimized: bool = Field(strict=True)
    has_automated_follow_up: bool = Field(strict=True)
    website_load_time: Optional[float] = Field(default=None, strict=True, ge=0, le=60)

    @field_validator("available_channels")
    @classmethod
    def channels_must_be_unique(cls, v: tuple[Channel, ...]) -> tuple[Channel, ...]:
        seen: set[Channel] = set()
        duplicates: list[str] = []
        for channel in v:
            if channel in seen:
                duplicates.append(channel.value)
            seen.add(channel)
        if duplicates:
            raise ValueError(f"duplicate channels: {', '.join(duplicates)}")
        # Set semantics: store in canonical order so equal sets compare equal
        return tuple(sorted(v, key=_CHANNEL_ORDER.__getitem__))

    @property
    def channel_count(self) -> int:
        return len(self.available_channels)
