"""Pillar calculators.

Each function is a pure calculation with no side effects: it reads the
validated input and one benchmark section and returns a PillarScore.
Scores are clamped to 0-100 and rounded half-up; revenue impacts are
annual figures in the currency of ``average_project_value``.
"""

from __future__ import annotations

from typing import Optional

from healthscore.benchmarks.schema import BenchmarkValues
from healthscore.engine.result import (
    PILLAR_MAX_SCORE,
    DatabaseMetrics,
    LeadCaptureMetrics,
    OmnichannelMetrics,
    PillarScore,
    ReputationMetrics,
    WebsiteMetrics,
)
from healthscore.engine.rounding import round_int
from healthscore.models.business_input import BusinessInputData
from healthscore.models.enums import PillarName
from healthscore.pillars import recommendations
from healthscore.pillars.registry import register_pillar

# Annual revenue assumed for the reputation impact when the caller has none
FALLBACK_ANNUAL_REVENUE = 500_000

# Share of monthly website visitors treated as leads
VISITOR_LEAD_SHARE = 0.1


def _clamp_score(raw: float) -> float:
    return max(0.0, min(raw, float(PILLAR_MAX_SCORE)))


def _pillar_score(
    name: PillarName,
    raw_score: float,
    revenue_impact: int,
    metrics,
    advice: list[str],
) -> PillarScore:
    score = round_int(_clamp_score(raw_score))
    return PillarScore(
        name=name,
        score=score,
        percentage=score,
        revenue_impact=revenue_impact,
        metrics=metrics,
        recommendations=advice,
    )


@register_pillar(
    name=PillarName.DATABASE,
    label="Customer Database",
    description=(
        "How actively the existing customer base is worked. "
        "Revenue: customers * reactivation_rate * average_project_value."
    ),
    input_fields=[
        "total_customers",
        "average_project_value",
        "contact_frequency_per_year",
        "has_reactivation_process",
    ],
    benchmark_section="database",
)
def calc_database(data: BusinessInputData, benchmarks: BenchmarkValues) -> PillarScore:
    """Score = frequency component (0, or 40-100 up to 12 contacts/year) + 15 for reactivation."""
    frequency = data.contact_frequency_per_year
    if frequency == 0:
        frequency_component = 0.0
    elif frequency < 12:
        frequency_component = 40 + (frequency / 12) * 60
    else:
        frequency_component = 100.0

    reactivation_bonus = 15 if data.has_reactivation_process else 0
    raw_score = frequency_component + reactivation_bonus

    reactivation_potential = data.total_customers * benchmarks.database.reactivation_rate
    revenue_impact = reactivation_potential * data.average_project_value

    return _pillar_score(
        PillarName.DATABASE,
        raw_score,
        round_int(revenue_impact),
        DatabaseMetrics(
            total_customers=data.total_customers,
            contact_frequency=frequency,
            average_project_value=data.average_project_value,
            reactivation_potential=round_int(reactivation_potential),
        ),
        recommendations.database_recommendations(_clamp_score(raw_score)),
    )


@register_pillar(
    name=PillarName.REPUTATION,
    label="Reputation",
    description=(
        "Online rating, review responsiveness and social proof. "
        "Revenue: max(0, target_rating - rating) * revenue_increase_per_star * annual_revenue."
    ),
    input_fields=[
        "google_star_rating",
        "review_response_rate",
        "shares_reviews_on_social_media",
    ],
    benchmark_section="reputation",
    uses_annual_revenue=True,
)
def calc_reputation(
    data: BusinessInputData,
    benchmarks: BenchmarkValues,
    annual_revenue: Optional[float] = None,
) -> PillarScore:
    """Score = rating (0-40 over 1-5 stars) + response rate (0-40) + 20 for sharing on social media."""
    if annual_revenue is None:
        annual_revenue = FALLBACK_ANNUAL_REVENUE

    rating = data.google_star_rating
    target_rating = benchmarks.reputation.target_rating

    rating_component = ((rating - 1) / 4) * 40
    response_component = (data.review_response_rate / 100) * 40
    social_bonus = 20 if data.shares_reviews_on_social_media else 0
    raw_score = rating_component + response_component + social_bonus

    rating_gap = max(0.0, target_rating - rating)
    revenue_impact = (
        rating_gap * benchmarks.reputation.revenue_increase_per_star * annual_revenue
    )

    return _pillar_score(
        PillarName.REPUTATION,
        raw_score,
        round_int(revenue_impact),
        ReputationMetrics(
            current_rating=rating,
            target_rating=target_rating,
            response_rate=data.review_response_rate,
            rating_gap=rating_gap,
        ),
        recommendations.reputation_recommendations(rating, data.review_response_rate),
    )


@register_pillar(
    name=PillarName.LEAD_CAPTURE,
    label="Lead Capture",
    description=(
        "Phone reachability. "
        "Revenue: missed calls per year * conversion_rate * average_project_value."
    ),
    input_fields=[
        "daily_calls",
        "call_answer_rate",
        "has_after_hours_handling",
        "average_project_value",
    ],
    benchmark_section="lead_capture",
)
def calc_lead_capture(data: BusinessInputData, benchmarks: BenchmarkValues) -> PillarScore:
    """Score = answer rate (0-85) + 15 for after-hours handling."""
    answer_rate = data.call_answer_rate
    answer_component = (answer_rate / 100) * 85
    after_hours_bonus = 15 if data.has_after_hours_handling else 0
    raw_score = answer_component + after_hours_bonus

    missed_calls_per_day = data.daily_calls * (1 - answer_rate / 100)
    missed_calls_per_year = missed_calls_per_day * 365
    revenue_impact = (
        missed_calls_per_year
        * benchmarks.lead_capture.conversion_rate
        * data.average_project_value
    )

    return _pillar_score(
        PillarName.LEAD_CAPTURE,
        raw_score,
        round_int(revenue_impact),
        LeadCaptureMetrics(
            daily_calls=data.daily_calls,
            answer_rate=answer_rate,
            missed_calls_per_day=round_int(missed_calls_per_day),
            missed_calls_per_year=round_int(missed_calls_per_year),
        ),
        recommendations.lead_capture_recommendations(answer_rate),
    )


def response_time_points(hours: float) -> int:
    """<1h -> 30, <=4h -> 20, <=24h -> 10, slower -> 0."""
    if hours < 1:
        return 30
    if hours <= 4:
        return 20
    if hours <= 24:
        return 10
    return 0


@register_pillar(
    name=PillarName.OMNICHANNEL,
    label="Omnichannel",
    description=(
        "Breadth of contact channels and response speed. "
        "Revenue: visitors * 0.1 * 12 * (omnichannel_rate - current_rate) * average_project_value."
    ),
    input_fields=[
        "available_channels",
        "average_response_time_hours",
        "monthly_website_visitors",
        "average_project_value",
    ],
    benchmark_section="omnichannel",
)
def calc_omnichannel(data: BusinessInputData, benchmarks: BenchmarkValues) -> PillarScore:
    """Score = min(channels * 14, 70) + response time band (0-30).

    Only a single-channel business is measured against the single-channel
    conversion rate; with two or more channels the current rate equals the
    omnichannel target, so the revenue impact is always 0.
    """
    channel_count = data.channel_count
    channel_component = min(channel_count * 14, 70)
    raw_score = channel_component + response_time_points(data.average_response_time_hours)

    target_rate = benchmarks.omnichannel.omnichannel_conversion_rate
    if channel_count == 1:
        current_rate = benchmarks.omnichannel.single_channel_conversion_rate
    else:
        current_rate = target_rate

    annual_leads = data.monthly_website_visitors * VISITOR_LEAD_SHARE * 12
    revenue_impact = annual_leads * (target_rate - current_rate) * data.average_project_value

    return _pillar_score(
        PillarName.OMNICHANNEL,
        raw_score,
        max(0, round_int(revenue_impact)),
        OmnichannelMetrics(
            available_channels=list(data.available_channels),
            channel_count=channel_count,
            current_conversion_rate=current_rate,
            target_conversion_rate=target_rate,
        ),
        recommendations.omnichannel_recommendations(channel_count),
    )


@register_pillar(
    name=PillarName.WEBSITE,
    label="Website",
    description=(
        "Website conversion and follow-up automation. "
        "Revenue: visitors * max(0, target% - conversion%) / 100 * average_project_value."
    ),
    input_fields=[
        "monthly_website_visitors",
        "conversion_rate",
        "is_mobile_optimized",
        "has_automated_follow_up",
        "average_project_value",
    ],
    benchmark_section="website",
)
def calc_website(data: BusinessInputData, benchmarks: BenchmarkValues) -> PillarScore:
    """Score = conversion vs. target (0-60) + 20 mobile optimised + 20 automated follow-up."""
    target_percent = benchmarks.website.target_conversion_rate_percent
    conversion_rate = data.conversion_rate

    conversion_component = min((conversion_rate / target_percent) * 60, 60)
    mobile_bonus = 20 if data.is_mobile_optimized else 0
    follow_up_bonus = 20 if data.has_automated_follow_up else 0
    raw_score = conversion_component + mobile_bonus + follow_up_bonus

    conversion_gap = max(0.0, target_percent - conversion_rate) / 100
    revenue_impact = data.monthly_website_visitors * conversion_gap * data.average_project_value

    return _pillar_score(
        PillarName.WEBSITE,
        raw_score,
        round_int(revenue_impact),
        WebsiteMetrics(
            monthly_visitors=data.monthly_website_visitors,
            current_conversion_rate=conversion_rate,
            target_conversion_rate=target_percent,
            conversion_gap=conversion_gap * 100,
        ),
        recommendations.website_recommendations(conversion_rate, target_percent),
    )
