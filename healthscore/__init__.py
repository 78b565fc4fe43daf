"""Business health scoring: five pillar scores, revenue impact and advice."""

from healthscore.benchmarks.schema import DEFAULT_BENCHMARKS, BenchmarkValues
from healthscore.engine.calculator import HealthCalculator, calculate
from healthscore.engine.result import BusinessHealthResult, PillarScore
from healthscore.models.business_input import BusinessInputData
from healthscore.validation.validator import InputValidationError, validate_business_input

__all__ = [
    "DEFAULT_BENCHMARKS",
    "BenchmarkValues",
    "BusinessHealthResult",
    "BusinessInputData",
    "HealthCalculator",
    "InputValidationError",
    "PillarScore",
    "calculate",
    "validate_business_input",
]
