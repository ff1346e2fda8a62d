"""Temporal Validators

Past/future constraints for ``date``, ``datetime`` and ``time`` values,
measured against ``ValidationConfig.clock`` so tests can pin "now".
Naive inputs are compared with the clock's local wall time; aware inputs
with the clock's instant.
"""
from __future__ import annotations

from datetime import date, datetime, time
from typing import Any

from .comparables import ComparableValidator
from .context import ConstraintContext


def now_like(cc: ConstraintContext[Any]) -> date | datetime | time:
    """Current clock reading in the same flavour as the input."""
    now, value = cc.validation.now(), cc.input
    if isinstance(value, datetime):
        if value.tzinfo is None: return now.astimezone().replace(tzinfo=None) if now.tzinfo else now
        return now if now.tzinfo else now.astimezone()
    if isinstance(value, date): return now.date()
    if isinstance(value, time):
        local = now.astimezone() if now.tzinfo else now
        return local.timetz() if value.tzinfo else local.time()
    raise TypeError(f"unsupported temporal value: {type(value).__name__}")


class TemporalValidator(ComparableValidator):
    __slots__ = ()

    def future(self) -> TemporalValidator:
        return self.constrain("kova.temporal.future", lambda cc: cc.input > now_like(cc))

    def future_or_present(self) -> TemporalValidator:
        return self.constrain("kova.temporal.futureOrPresent", lambda cc: cc.input >= now_like(cc))

    def past(self) -> TemporalValidator:
        return self.constrain("kova.temporal.past", lambda cc: cc.input < now_like(cc))

    def past_or_present(self) -> TemporalValidator:
        return self.constrain("kova.temporal.pastOrPresent", lambda cc: cc.input <= now_like(cc))
