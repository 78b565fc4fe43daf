"""Core scoring engine.

Takes validated business input + benchmark values -> produces a
BusinessHealthResult with per-pillar scores, revenue impact and advice.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

# Ensure all pillar calculators are registered on import
import healthscore.pillars.calculators  # noqa: F401
from healthscore.benchmarks.schema import DEFAULT_BENCHMARKS, BenchmarkValues
from healthscore.engine.identity import generate_result_id
from healthscore.engine.result import (
    TOTAL_MAX_SCORE,
    BusinessHealthResult,
    PillarScore,
)
from healthscore.engine.rounding import round_half_up, round_int
from healthscore.engine.status import status_from_percentage
from healthscore.models.business_input import BusinessInputData
from healthscore.pillars.registry import PillarDefinition, get_all_pillars

logger = logging.getLogger(__name__)


class HealthCalculator:
    """Stateless engine that scores all five pillars and aggregates them."""

    def calculate(
        self,
        input_data: BusinessInputData,
        benchmarks: BenchmarkValues = DEFAULT_BENCHMARKS,
        external_annual_revenue: Optional[float] = None,
    ) -> BusinessHealthResult:
        """Run every pillar calculator and assemble the result.

        ``input_data`` must already have passed validation; the calculators
        do not re-check ranges.
        """
        pillars = [
            self._score_pillar(definition, input_data, benchmarks, external_annual_revenue)
            for definition in get_all_pillars().values()
        ]

        # Sum of already-rounded pillar scores; no re-rounding
        total_score = sum(p.score for p in pillars)
        percentage = round_half_up(total_score / TOTAL_MAX_SCORE * 100, 1)
        annual_revenue_loss = sum(p.revenue_impact for p in pillars)

        result = BusinessHealthResult(
            id=generate_result_id(),
            timestamp=datetime.now(tz=timezone.utc),
            total_score=total_score,
            percentage=percentage,
            status=status_from_percentage(percentage),
            annual_revenue_loss=annual_revenue_loss,
            daily_opportunity_cost=round_int(annual_revenue_loss / 365),
            pillars=pillars,
            input_data=input_data,
        )
        logger.info(
            "Calculated business health %s: %d/%d (%s), annual loss %d",
            result.id,
            total_score,
            TOTAL_MAX_SCORE,
            result.status.value,
            annual_revenue_loss,
        )
        return result

    @staticmethod
    def _score_pillar(
        definition: PillarDefinition,
        input_data: BusinessInputData,
        benchmarks: BenchmarkValues,
        external_annual_revenue: Optional[float],
    ) -> PillarScore:
        kwargs = {}
        if definition.uses_annual_revenue:
            kwargs["annual_revenue"] = external_annual_revenue
        score = definition.calculate_fn(input_data, benchmarks, **kwargs)
        logger.debug(
            "Pillar %s scored %d (revenue impact %d)",
            definition.name.value,
            score.score,
            score.revenue_impact,
        )
        return score


_engine = HealthCalculator()


def calculate(
    input_data: BusinessInputData,
    benchmarks: BenchmarkValues = DEFAULT_BENCHMARKS,
    external_annual_revenue: Optional[float] = None,
) -> BusinessHealthResult:
    """Module-level shortcut for ``HealthCalculator().calculate``."""
    return _engine.calculate(input_data, benchmarks, external_annual_revenue)
