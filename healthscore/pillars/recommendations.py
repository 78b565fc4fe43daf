"""Static advice tables for each pillar.

Each selector returns a new, non-empty list so callers may keep it on an
immutable result without sharing the table entries.
"""

from __future__ import annotations

DATABASE_LOW = [
    "Introduce a CRM system to manage customer relationships systematically",
    "Start an email newsletter to stay in regular contact",
    "Segment your customer database by purchase behaviour",
]
DATABASE_MID = [
    "Increase contact frequency to at least once a month",
    "Personalise your communication based on customer segments",
]
DATABASE_HIGH = [
    "Refine your campaigns with A/B testing",
    "Use predictive analytics to reach customers proactively",
]

REPUTATION_LOW_RATING = [
    "Analyse negative reviews and fix the most common problems",
    "Put a quality assurance process in place",
]
REPUTATION_LOW_RESPONSE = [
    "Set up notifications for new reviews",
    "Reply to every review within 24 hours",
]
REPUTATION_MID_RATING = [
    "Actively ask satisfied customers for reviews",
    "Make leaving a review easier (QR code, direct link)",
]
REPUTATION_MAINTAIN = [
    "Keep replying to reviews to protect your rating",
    "Feature your best reviews on your website and in proposals",
]

LEAD_CAPTURE_LOW = [
    "Introduce a call tracking system",
    "Consider an answering service",
    "Send automatic SMS callbacks for missed calls",
]
LEAD_CAPTURE_MID = [
    "Align phone coverage with your call patterns",
    "Train your team to handle calls efficiently",
]
LEAD_CAPTURE_HIGH = [
    "Analyse call quality and call-to-sale conversion",
    "Record calls for quality assurance",
]

OMNICHANNEL_LOW = [
    "Add live chat to your website",
    "Expand your presence on social media",
    "Offer SMS notifications",
]
OMNICHANNEL_MID = [
    "Bring all channels together in one central inbox",
    "Offer a consistent experience across every channel",
]
OMNICHANNEL_HIGH = [
    "Tune channel usage to customer preferences",
    "Use AI for intelligent channel routing",
]

WEBSITE_LOW = [
    "Rework your landing pages from the ground up",
    "Simplify the conversion process",
    "Add clear calls to action",
]
WEBSITE_MID = [
    "Run A/B tests on your key page elements",
    "Improve page load speed",
    "Improve the mobile user experience",
]
WEBSITE_HIGH = [
    "Use heatmaps to find further improvements",
    "Personalise content based on visitor behaviour",
]


def database_recommendations(score: float) -> list[str]:
    """``score`` is the clamped pillar score before rounding."""
    if score < 50:
        return list(DATABASE_LOW)
    if score < 80:
        return list(DATABASE_MID)
    return list(DATABASE_HIGH)


def reputation_recommendations(rating: float, response_rate: float) -> list[str]:
    """Rating and response rate trigger independently; results are concatenated."""
    recommendations: list[str] = []
    if rating < 4.0:
        recommendations.extend(REPUTATION_LOW_RATING)
    if response_rate < 50:
        recommendations.extend(REPUTATION_LOW_RESPONSE)
    if 4.0 <= rating < 4.5:
        recommendations.extend(REPUTATION_MID_RATING)
    if not recommendations:
        recommendations.extend(REPUTATION_MAINTAIN)
    return recommendations


def lead_capture_recommendations(answer_rate: float) -> list[str]:
    if answer_rate < 60:
        return list(LEAD_CAPTURE_LOW)
    if answer_rate < 85:
        return list(LEAD_CAPTURE_MID)
    return list(LEAD_CAPTURE_HIGH)


def omnichannel_recommendations(channel_count: int) -> list[str]:
    if channel_count < 3:
        return list(OMNICHANNEL_LOW)
    if channel_count < 5:
        return list(OMNICHANNEL_MID)
    return list(OMNICHANNEL_HIGH)


def website_recommendations(conversion_rate: float, target_rate: float) -> list[str]:
    """Both rates in percent."""
    if conversion_rate < 2:
        return list(WEBSITE_LOW)
    if conversion_rate < target_rate:
        return list(WEBSITE_MID)
    return list(WEBSITE_HIGH)
