"""Unit tests for each pillar calculator."""

import pytest

from healthscore.benchmarks.schema import DEFAULT_BENCHMARKS, merge_benchmarks
from healthscore.engine.result import (
    DatabaseMetrics,
    LeadCaptureMetrics,
    OmnichannelMetrics,
    ReputationMetrics,
    WebsiteMetrics,
)
from healthscore.models.enums import Channel, PillarName
from healthscore.pillars.calculators import (
    FALLBACK_ANNUAL_REVENUE,
    calc_database,
    calc_lead_capture,
    calc_omnichannel,
    calc_reputation,
    calc_website,
    response_time_points,
)
from healthscore.pillars.recommendations import DATABASE_LOW
from tests.conftest import make_input


class TestDatabase:
    def test_one_contact_per_year(self, reference_input):
        # 40 + 1/12 * 60 = 45
        pillar = calc_database(reference_input, DEFAULT_BENCHMARKS)
        assert pillar.name == PillarName.DATABASE
        assert pillar.score == 45
        assert pillar.percentage == 45
        assert pillar.max_score == 100

    def test_zero_contacts_scores_zero(self):
        pillar = calc_database(make_input(contactFrequencyPerYear=0), DEFAULT_BENCHMARKS)
        assert pillar.score == 0

    def test_zero_contacts_with_reactivation(self):
        pillar = calc_database(
            make_input(contactFrequencyPerYear=0, hasReactivationProcess=True),
            DEFAULT_BENCHMARKS,
        )
        assert pillar.score == 15

    def test_monthly_contact_caps_at_100(self):
        pillar = calc_database(
            make_input(contactFrequencyPerYear=52, hasReactivationProcess=True),
            DEFAULT_BENCHMARKS,
        )
        assert pillar.score == 100

    def test_fractional_frequency(self):
        # 40 + 3/12 * 60 = 55
        assert calc_database(make_input(contactFrequencyPerYear=3), DEFAULT_BENCHMARKS).score == 55

    def test_recommendations_use_unrounded_score(self):
        # 40 + 1.9/12 * 60 = 49.5: shown as 50, advised as below 50
        pillar = calc_database(make_input(contactFrequencyPerYear=1.9), DEFAULT_BENCHMARKS)
        assert pillar.recommendations == DATABASE_LOW

    def test_revenue_impact(self, reference_input):
        # 3,200 customers * 25% * 4,500 = 3,600,000
        pillar = calc_database(reference_input, DEFAULT_BENCHMARKS)
        assert pillar.revenue_impact == 3_600_000
        assert isinstance(pillar.metrics, DatabaseMetrics)
        assert pillar.metrics.reactivation_potential == 800
        assert pillar.metrics.total_customers == 3200

    def test_low_score_recommendations(self, reference_input):
        pillar = calc_database(reference_input, DEFAULT_BENCHMARKS)
        assert len(pillar.recommendations) == 3


class TestReputation:
    def test_score_components(self, reference_input):
        # (4.2 - 1) / 4 * 40 = 32, 22% * 40 = 8.8 -> 40.8 -> 41
        pillar = calc_reputation(reference_input, DEFAULT_BENCHMARKS)
        assert pillar.score == 41

    def test_perfect_reputation(self):
        pillar = calc_reputation(
            make_input(googleStarRating=5, reviewResponseRate=100, sharesReviewsOnSocialMedia=True),
            DEFAULT_BENCHMARKS,
        )
        assert pillar.score == 100
        assert pillar.revenue_impact == 0

    def test_revenue_uses_fallback_baseline(self, reference_input):
        # (4.8 - 4.2) * 7% * 500,000 = 21,000
        pillar = calc_reputation(reference_input, DEFAULT_BENCHMARKS)
        assert FALLBACK_ANNUAL_REVENUE == 500_000
        assert pillar.revenue_impact == 21_000

    def test_revenue_uses_external_baseline(self, reference_input):
        pillar = calc_reputation(reference_input, DEFAULT_BENCHMARKS, annual_revenue=1_000_000)
        assert pillar.revenue_impact == 42_000

    def test_rating_above_target_has_no_gap(self):
        pillar = calc_reputation(make_input(googleStarRating=5), DEFAULT_BENCHMARKS)
        assert isinstance(pillar.metrics, ReputationMetrics)
        assert pillar.metrics.rating_gap == 0.0
        assert pillar.revenue_impact == 0

    def test_recommendations_never_empty(self):
        pillar = calc_reputation(
            make_input(googleStarRating=4.9, reviewResponseRate=80),
            DEFAULT_BENCHMARKS,
        )
        assert len(pillar.recommendations) > 0

    def test_low_rating_and_low_response_combine(self):
        pillar = calc_reputation(
            make_input(googleStarRating=3.0, reviewResponseRate=10),
            DEFAULT_BENCHMARKS,
        )
        assert len(pillar.recommendations) == 4


class TestLeadCapture:
    def test_answer_rate_only(self, reference_input):
        # 68% * 85 = 57.8 -> 58
        pillar = calc_lead_capture(reference_input, DEFAULT_BENCHMARKS)
        assert pillar.score == 58

    def test_half_point_rounds_up(self):
        # 50% * 85 = 42.5 -> 43 (round-half-even would give 42)
        pillar = calc_lead_capture(make_input(callAnswerRate=50), DEFAULT_BENCHMARKS)
        assert pillar.score == 43

    def test_after_hours_bonus_capped(self):
        pillar = calc_lead_capture(
            make_input(callAnswerRate=100, hasAfterHoursHandling=True),
            DEFAULT_BENCHMARKS,
        )
        assert pillar.score == 100

    def test_missed_calls_revenue(self, reference_input):
        # 50 * 32% = 16 missed/day, 5,840/year * 35% * 4,500 = 9,198,000
        pillar = calc_lead_capture(reference_input, DEFAULT_BENCHMARKS)
        assert isinstance(pillar.metrics, LeadCaptureMetrics)
        assert pillar.metrics.missed_calls_per_day == 16
        assert pillar.metrics.missed_calls_per_year == 5840
        assert pillar.revenue_impact == pytest.approx(9_198_000, abs=1)

    def test_full_answer_rate_has_no_loss(self):
        pillar = calc_lead_capture(make_input(callAnswerRate=100), DEFAULT_BENCHMARKS)
        assert pillar.revenue_impact == 0


class TestOmnichannel:
    def test_two_channels_four_hours(self, reference_input):
        # 2 * 14 = 28 + 20 for a 4h response
        pillar = calc_omnichannel(reference_input, DEFAULT_BENCHMARKS)
        assert pillar.score == 48

    @pytest.mark.parametrize(
        "hours,points",
        [(0, 30), (0.99, 30), (1, 20), (4, 20), (4.01, 10), (24, 10), (24.5, 0), (168, 0)],
    )
    def test_response_time_bands(self, hours, points):
        assert response_time_points(hours) == points

    def test_all_channels_fast_response(self, strong_input):
        pillar = calc_omnichannel(strong_input, DEFAULT_BENCHMARKS)
        assert pillar.score == 100

    def test_single_channel_revenue_gap(self):
        # 5,000 * 0.1 * 12 = 6,000 leads * (63.14% - 22%) * 4,500
        pillar = calc_omnichannel(make_input(availableChannels=["phone"]), DEFAULT_BENCHMARKS)
        assert pillar.revenue_impact == pytest.approx(6000 * 0.4114 * 4500, abs=1)
        assert pillar.metrics.current_conversion_rate == 0.22

    def test_multiple_channels_have_no_revenue_gap(self, reference_input):
        # Known anomaly: with 2+ channels the current rate equals the target.
        pillar = calc_omnichannel(reference_input, DEFAULT_BENCHMARKS)
        assert pillar.revenue_impact == 0
        assert isinstance(pillar.metrics, OmnichannelMetrics)
        assert pillar.metrics.current_conversion_rate == pillar.metrics.target_conversion_rate

    def test_revenue_floored_at_zero(self):
        benchmarks = merge_benchmarks(
            {"omnichannel": {"single_channel_conversion_rate": 0.9}}
        )
        pillar = calc_omnichannel(make_input(availableChannels=["sms"]), benchmarks)
        assert pillar.revenue_impact == 0

    def test_metrics_list_channels(self, reference_input):
        pillar = calc_omnichannel(reference_input, DEFAULT_BENCHMARKS)
        assert pillar.metrics.channel_count == 2
        assert pillar.metrics.available_channels == [Channel.PHONE, Channel.EMAIL]


class TestWebsite:
    def test_conversion_component(self, reference_input):
        # 2.8 / 5.2 * 60 = 32.3 -> 32
        pillar = calc_website(reference_input, DEFAULT_BENCHMARKS)
        assert pillar.score == 32

    def test_conversion_component_capped_at_60(self):
        pillar = calc_website(make_input(conversionRate=20), DEFAULT_BENCHMARKS)
        assert pillar.score == 60

    def test_qualitative_bonuses(self, strong_input):
        pillar = calc_website(strong_input, DEFAULT_BENCHMARKS)
        assert pillar.score == 100

    def test_revenue_impact(self, reference_input):
        # 5,000 visitors * (5.2% - 2.8%) * 4,500 = 540,000
        pillar = calc_website(reference_input, DEFAULT_BENCHMARKS)
        assert pillar.revenue_impact == pytest.approx(540_000, abs=1)
        assert isinstance(pillar.metrics, WebsiteMetrics)
        assert pillar.metrics.target_conversion_rate == pytest.approx(5.2)
        assert pillar.metrics.conversion_gap == pytest.approx(2.4)

    def test_above_target_has_no_loss(self):
        pillar = calc_website(make_input(conversionRate=6), DEFAULT_BENCHMARKS)
        assert pillar.revenue_impact == 0
        assert pillar.metrics.conversion_gap == 0.0

    def test_recommendation_bands_differ(self):
        low = calc_website(make_input(conversionRate=1), DEFAULT_BENCHMARKS)
        mid = calc_website(make_input(conversionRate=3), DEFAULT_BENCHMARKS)
        high = calc_website(make_input(conversionRate=6), DEFAULT_BENCHMARKS)
        assert low.recommendations != mid.recommendations
        assert mid.recommendations != high.recommendations
        assert all(p.recommendations for p in (low, mid, high))
