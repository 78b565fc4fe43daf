"""Input and settings validation with field-level error reporting.

Every violation is collected; callers get either a validated model or an
``InputValidationError`` listing all offending fields at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from healthscore.models.app_settings import AppSettings
from healthscore.models.business_input import BusinessInputData
from healthscore.models.enums import Channel

ModelT = TypeVar("ModelT", bound=BaseModel)

FIELD_LABELS = {
    "totalCustomers": "Total customers",
    "averageProjectValue": "Average project value",
    "contactFrequencyPerYear": "Contact frequency per year",
    "hasReactivationProcess": "Reactivation process",
    "googleStarRating": "Google star rating",
    "reviewResponseRate": "Review response rate",
    "sharesReviewsOnSocialMedia": "Sharing reviews on social media",
    "dailyCalls": "Daily calls",
    "callAnswerRate": "Call answer rate",
    "hasAfterHoursHandling": "After-hours call handling",
    "availableChannels": "Available channels",
    "averageResponseTimeHours": "Average response time (hours)",
    "monthlyWebsiteVisitors": "Monthly website visitors",
    "conversionRate": "Conversion rate",
    "isMobileOptimized": "Mobile optimisation",
    "hasAutomatedFollowUp": "Automated follow-up",
    "websiteLoadTime": "Website load time (seconds)",
    "currency": "Currency",
    "language": "Language",
    "theme": "Theme",
}


@dataclass(frozen=True)
class FieldIssue:
    """A single violated field: dotted path plus human-readable message."""

    path: str
    message: str


class InputValidationError(ValueError):
    """Raised when raw input violates one or more field constraints."""

    def __init__(self, issues: list[FieldIssue]):
        self.issues = issues
        summary = "; ".join(f"{i.path}: {i.message}" for i in issues)
        super().__init__(f"{len(issues)} invalid field(s): {summary}")

    def to_dict(self) -> dict[str, Any]:
        return {"errors": [{"path": i.path, "message": i.message} for i in self.issues]}


def _label(loc: tuple) -> str:
    for part in reversed(loc):
        if isinstance(part, str) and part in FIELD_LABELS:
            return FIELD_LABELS[part]
    named = [str(p) for p in loc if isinstance(p, str)]
    return named[-1] if named else "Value"


def _wire_loc(loc: tuple) -> tuple:
    """Report paths under the camelCase wire names, however the field was given."""
    return tuple(to_camel(p) if isinstance(p, str) and "_" in p else p for p in loc)


def _message(error: dict[str, Any]) -> str:
    """Translate one pydantic error into a field-specific message."""
    loc = _wire_loc(tuple(error["loc"]))
    label = _label(loc)
    ctx = error.get("ctx") or {}
    kind = error["type"]

    if kind == "missing":
        return f"{label} is required"
    if kind == "greater_than_equal":
        return f"{label} must be at least {ctx['ge']}"
    if kind == "greater_than":
        return f"{label} must be greater than {ctx['gt']}"
    if kind == "less_than_equal":
        return f"{label} must be at most {ctx['le']}"
    if kind in ("int_type", "int_parsing", "int_from_float"):
        return f"{label} must be a whole number"
    if kind in ("float_type", "float_parsing", "finite_number"):
        return f"{label} must be a number"
    if kind in ("bool_type", "bool_parsing"):
        return f"{label} must be true or false"
    if kind == "too_short":
        if loc and loc[-1] == "availableChannels":
            return "Select at least one channel"
        return f"{label} must have at least {ctx.get('min_length')} item(s)"
    if kind == "too_long":
        if loc and loc[-1] == "availableChannels":
            return f"At most {len(Channel)} channels are possible"
        return f"{label} must have at most {ctx.get('max_length')} item(s)"
    if kind == "enum":
        if "availableChannels" in loc:
            allowed = ", ".join(c.value for c in Channel)
            return f"'{error.get('input')}' is not a supported channel (expected one of: {allowed})"
        return f"{label} must be one of: {ctx.get('expected')}"
    if kind == "value_error":
        return f"{label}: {ctx.get('error', error['msg'])}"
    if kind in ("tuple_type", "list_type"):
        return f"{label} must be a list"
    if kind == "extra_forbidden":
        return f"Unknown setting '{loc[-1]}'"
    return f"{label}: {error['msg']}"


def issues_from_pydantic(exc: PydanticValidationError) -> list[FieldIssue]:
    return [
        FieldIssue(
            path=".".join(str(p) for p in _wire_loc(tuple(err["loc"]))) or "$",
            message=_message(err),
        )
        for err in exc.errors()
    ]


def _validate(model: type[ModelT], data: Any) -> ModelT:
    if isinstance(data, model):
        return data
    if not isinstance(data, dict):
        raise InputValidationError(
            [FieldIssue(path="$", message="Input must be an object of field values")]
        )
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise InputValidationError(issues_from_pydantic(e)) from e


def validate_business_input(data: Any) -> BusinessInputData:
    """Validate raw form data; raises InputValidationError listing every violation."""
    return _validate(BusinessInputData, data)


def validate_app_settings(data: Any) -> AppSettings:
    """Validate raw user settings, including partial benchmark overrides."""
    return _validate(AppSettings, data)
