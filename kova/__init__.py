"""Kova: composable validation for Python values and object graphs.

Usage:
    from kova import Kova, try_validate

    result = Kova.string().min(5).try_validate("abc")
    assert result.messages[0].text == "must be at least 5 characters"
"""
from kova.config import KovaSettings, ValidationConfig, fixed_clock, get_settings
from kova.validation import (
    Kova,
    Message,
    ObjectSchema,
    Path,
    ValidationException,
    ValidationResult,
    Validator,
    try_validate,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "Kova",
    "ObjectSchema",
    "Validator",
    "Message",
    "Path",
    "ValidationResult",
    "ValidationException",
    "ValidationConfig",
    "KovaSettings",
    "get_settings",
    "fixed_clock",
    "try_validate",
    "validate",
]
