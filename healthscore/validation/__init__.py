"""Validation of raw form input and user settings."""

from .validator import (
    FieldIssue,
    InputValidationError,
    validate_app_settings,
    validate_business_input,
)

__all__ = [
    "FieldIssue",
    "InputValidationError",
    "validate_app_settings",
    "validate_business_input",
]
