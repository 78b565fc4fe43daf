"""Overall status classification."""

from __future__ import annotations

from healthscore.models.enums import ScoreStatus

# (min percentage, status) - checked in order with >=
STATUS_BANDS = [
    (90.0, ScoreStatus.EXCELLENT),
    (80.0, ScoreStatus.GOOD),
    (50.0, ScoreStatus.NEEDS_IMPROVEMENT),
]


def status_from_percentage(percentage: float) -> ScoreStatus:
    """Map an overall percentage to a status band.

    <  50 -> CRITICAL
    >= 50 -> NEEDS_IMPROVEMENT
    >= 80 -> GOOD
    >= 90 -> EXCELLENT
    """
    for threshold, status in STATUS_BANDS:
        if percentage >= threshold:
            return status
    return ScoreStatus.CRITICAL
