"""Nullable Validators

Validators over values that may be ``None``. A non-null validator lifted
with ``as_nullable()`` vacuously accepts ``None``; presence checks, defaults
and conversions back to non-null validators live here.

Usage:
    name = Kova.string().min(3).as_nullable()
    name.not_null_and(Kova.string().max(10))
    name.with_default("anonymous")      # None -> "anonymous"
    name.to_non_nullable()              # rejects None
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from .constraint import Constraint, MessageProvider
from .context import ValidationContext
from .validator import And, ConstraintValidator, Identity, Or, Then, Transform, Validator

I = TypeVar("I")
O = TypeVar("O")
U = TypeVar("U")

IS_NULL_ID = "kova.nullable.isNull"
NOT_NULL_ID = "kova.nullable.notNull"


@dataclass(frozen=True, slots=True)
class Lifted(Validator[I | None, O | None]):
    """Runs ``validator`` on non-null inputs; ``None`` passes through."""
    validator: Validator[I, O]

    def run(self, ctx: ValidationContext, value: I | None) -> O | None:
        return None if value is None else self.validator.run(ctx, value)


def _presence(constraint_id: str, check: Callable[[Any], bool], message: MessageProvider | str | None) -> Validator:
    return ConstraintValidator(Constraint(constraint_id, lambda cc: check(cc.input), message))


def _lift(validator: Validator) -> Validator:
    return validator.inner if isinstance(validator, NullableValidator) else Lifted(validator)


@dataclass(frozen=True, slots=True)
class NullableValidator(Validator[I | None, O | None]):
    inner: Validator[I | None, O | None] = field(default_factory=Identity)
    null_checked: bool = False

    def run(self, ctx: ValidationContext, value: I | None) -> O | None: return self.inner.run(ctx, value)

    def _extend(self, validator: Validator, null_checked: bool | None = None) -> NullableValidator[I, O]:
        checked = self.null_checked if null_checked is None else null_checked
        return NullableValidator(And(self.inner, validator), checked)

    def is_null(self, message: MessageProvider | str | None = None) -> NullableValidator[I, O]:
        return self._extend(_presence(IS_NULL_ID, lambda v: v is None, message))

    def not_null(self, message: MessageProvider | str | None = None) -> NullableValidator[I, O]:
        return self._extend(_presence(NOT_NULL_ID, lambda v: v is not None, message), True)

    def is_null_or(self, validator: Validator[Any, Any]) -> NullableValidator[I, O]:
        """Accept ``None``, or a value satisfying ``validator``."""
        return self._extend(Or(_presence(IS_NULL_ID, lambda v: v is None, None), _lift(validator)))

    def when_not_null(self, validator: Validator[Any, Any]) -> NullableValidator[I, O]:
        """Apply ``validator`` to non-null values only."""
        return self._extend(_lift(validator))

    def not_null_and(self, validator: Validator[Any, Any]) -> NullableValidator[I, O]:
        return self.not_null().when_not_null(validator)

    def and_(self, other: Validator[Any, U]) -> NullableValidator[I, U]:
        checked = self.null_checked or (isinstance(other, NullableValidator) and other.null_checked)
        return self._extend(_lift(other), checked)

    def or_(self, other: Validator[Any, O]) -> NullableValidator[I, O]:
        return NullableValidator(Or(self.inner, _lift(other)))

    # ========================================================================
    # Conversions to non-null validators
    # ========================================================================

    def to_non_nullable(self) -> Validator[I | None, O]:
        """Validator rejecting ``None``; the conversion itself is the null check."""
        return (self if self.null_checked else self.not_null()).inner

    def as_non_nullable_then(self, validator: Validator[O, U]) -> Validator[I | None, U]:
        return self.to_non_nullable().then(validator)

    def not_null_then(self, validator: Validator[O, U]) -> Validator[I | None, U]:
        return self.as_non_nullable_then(validator)

    def with_default(self, default: O) -> Validator[I | None, O]:
        """Substitute ``default`` for ``None`` before downstream validators run."""
        return self.with_default_from(lambda: default)

    def with_default_from(self, factory: Callable[[], O]) -> Validator[I | None, O]:
        return Then(self, Transform(lambda value: factory() if value is None else value))

    def with_default_then(self, default: O, validator: Validator[O, U]) -> Validator[I | None, U]:
        return self.with_default(default).then(validator)

    def as_nullable(self) -> NullableValidator[I, O]: return self
