"""Validation Entry Points

Top-level calls that own a fresh ValidationContext:

- try_validate: never raises for violations; returns Success or Failure
- validate: returns the value or raises ValidationException

Usage:
    from kova.validation import Kova, try_validate, validate

    result = try_validate(lambda v: Kova.string().min(5)(v, "abc"))
    if result.is_failure():
        print([m.text for m in result.messages])

    name = validate(lambda v: Kova.string().trim().min(1)(v, raw_name))
"""
from __future__ import annotations

from typing import Callable, TypeVar

from kova.config import ValidationConfig
from kova.logging import validation_logger
from .accumulate import ValidationCancelled, ior
from .context import ValidationContext
from .errors import UnrecoveredSignalError, ValidationException
from .result import Both, Failure, ValidationResult

T = TypeVar("T")

log = validation_logger()


def try_validate(block: Callable[[ValidationContext], T], config: ValidationConfig | None = None) -> ValidationResult[T]:
    """Run ``block`` in a new top-level scope and return its result."""
    ctx = ValidationContext(config)
    try:
        outcome = ior(ctx, lambda: block(ctx))
    except ValidationCancelled as signal:
        log.error("unrecovered_signal", fail_fast=ctx.config.fail_fast)
        raise UnrecoveredSignalError("validation signal escaped every recovery boundary") from signal
    return outcome.to_result() if isinstance(outcome, Both) else outcome


def validate(block: Callable[[ValidationContext], T], config: ValidationConfig | None = None) -> T:
    """Run ``block`` and return its value, raising ValidationException on failure."""
    result = try_validate(block, config)
    if isinstance(result, Failure): raise ValidationException(result.messages)
    return result.value

