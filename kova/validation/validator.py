"""Compositional Validator System

Validators are immutable values composed via combinators. Each one runs
against an explicit ValidationContext and either returns its (possibly
transformed) output or reports violations to the current scope.

Combinators:
- and_ / & / +: both validators on the same input, violations accumulate
- or_ / | / or_else: first success wins; otherwise one "kova.or" message
- then / compose / map: sequential pipeline that stops at the first failure
- chain: thread the output onward, still checking the input when the first fails
- constrain: leaf predicate with an explicit or resource-based message
- only_if: skip (vacuously succeed) when a predicate on the input is false
- with_message: replace a sub-validation's messages with one message
- named: run under a Named path segment

Usage:
    from kova.validation import Kova

    name = Kova.string().trim().min(1).max(50)
    age = Kova.string().to_int().min(0) | Kova.string().literal("unknown")
    result = name.try_validate("  Ada ")
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, Self, TypeVar

from . import boundaries
from .accumulate import ior
from .constraint import Check, Constraint, MessageProvider
from .context import ValidationContext
from .errors import MessageError
from .log import Satisfied, Violated
from .message import WITH_MESSAGE_CONSTRAINT_ID, Message
from .result import ScopeResult, ValidationResult

if TYPE_CHECKING:
    from kova.config import ValidationConfig
    from .nullable import NullableValidator

I = TypeVar("I")
O = TypeVar("O")
U = TypeVar("U")

MAP_CONSTRAINT_ID = "kova.map"


class Validator(ABC, Generic[I, O]):
    """Base class for validators.

    Subclasses implement ``run``; everything else is composition.
    """
    __slots__ = ()

    @abstractmethod
    def run(self, ctx: ValidationContext, value: I) -> O:
        """Validate ``value``, reporting violations through ``ctx``."""

    def __call__(self, ctx: ValidationContext, value: I) -> O: return self.run(ctx, value)

    def execute(self, ctx: ValidationContext, value: I) -> ScopeResult[O]:
        """Run in a nested scope and return its outcome instead of propagating."""
        return ior(ctx, lambda: self.run(ctx, value))

    def try_validate(self, value: I, config: ValidationConfig | None = None) -> ValidationResult[O]:
        return boundaries.try_validate(lambda ctx: self.run(ctx, value), config)

    def validate(self, value: I, config: ValidationConfig | None = None) -> O:
        return boundaries.validate(lambda ctx: self.run(ctx, value), config)

    # ========================================================================
    # Combinators
    # ========================================================================

    def and_(self, other: Validator[I, U]) -> Validator[I, U]: return And(self, other)

    def plus(self, other: Validator[I, U]) -> Validator[I, U]: return self.and_(other)

    def or_(self, other: Validator[I, O]) -> Validator[I, O]: return Or(self, other)

    def or_else(self, other: Validator[I, O]) -> Validator[I, O]: return self.or_(other)

    def then(self, other: Validator[O, U]) -> Validator[I, U]: return Then(self, other)

    def chain(self, other: Validator[O, O]) -> Validator[I, O]: return Chain(self, other)

    def compose(self, before: Validator[U, I]) -> Validator[U, O]: return Then(before, self)

    def map(self, transform: Callable[[O], U]) -> Validator[I, U]: return Then(self, Transform(transform))

    def constrain(self, constraint_id: str, check: Check, message: MessageProvider | str | None = None, *,
                  args: tuple[Any, ...] = (), kwargs: dict[str, Any] | None = None) -> Validator[I, O]:
        """Check the output with a leaf constraint once this validator succeeds."""
        return Then(self, ConstraintValidator(Constraint(constraint_id, check, message, args, kwargs or {})))

    def only_if(self, condition: Callable[[I], bool]) -> Validator[I, I | O]: return OnlyIf(self, condition)

    def with_message(self, provider: Callable[[list[Message]], Message | str] | str,
                     constraint_id: str = WITH_MESSAGE_CONSTRAINT_ID) -> Validator[I, O]:
        if isinstance(provider, str):
            text = provider
            provider = lambda messages: text
        return WithMessage(self, provider, constraint_id)

    def named(self, label: str) -> Validator[I, O]: return NamedValidator(self, label)

    def as_nullable(self) -> NullableValidator[I, O]:
        from .nullable import NullableValidator, Lifted
        return NullableValidator(Lifted(self))

    def __and__(self, other: Validator[I, U]) -> Validator[I, U]: return self.and_(other)

    def __add__(self, other: Validator[I, U]) -> Validator[I, U]: return self.plus(other)

    def __or__(self, other: Validator[I, O]) -> Validator[I, O]: return self.or_(other)


# ============================================================================
# Primitive Validators
# ============================================================================

@dataclass(frozen=True, slots=True)
class Identity(Validator[I, I]):
    """Always succeeds with its input."""

    def run(self, ctx: ValidationContext, value: I) -> I: return value


@dataclass(frozen=True, slots=True)
class ConstraintValidator(Validator[I, I]):
    constraint: Constraint[I]

    def run(self, ctx: ValidationContext, value: I) -> I: return self.constraint.evaluate(ctx, value)


@dataclass(frozen=True, slots=True)
class Transform(Validator[I, O]):
    """Pure transform; raising MessageError reports a violation instead."""
    transform: Callable[[I], O]

    def run(self, ctx: ValidationContext, value: I) -> O:
        try:
            return self.transform(value)
        except MessageError as e:
            message = e.message if isinstance(e.message, Message) else ctx.text(MAP_CONSTRAINT_ID, e.message, value)
            ctx.fail(message)


@dataclass(frozen=True, slots=True)
class Conversion(Validator[I, O]):
    """Parse the input; a parse error becomes the resource message for ``constraint_id``."""
    constraint_id: str
    parse: Callable[[I], O]
    args: tuple[Any, ...] = ()
    errors: tuple[type[Exception], ...] = (ValueError, TypeError, ArithmeticError)

    def run(self, ctx: ValidationContext, value: I) -> O:
        try:
            converted = self.parse(value)
        except self.errors:
            ctx.log(lambda: Violated(self.constraint_id, ctx.root, ctx.path.full_name, value, self.args))
            ctx.fail(ctx.resource(self.constraint_id, value, *self.args))
        ctx.log(lambda: Satisfied(self.constraint_id, ctx.root, ctx.path.full_name, value))
        return converted


@dataclass(frozen=True, slots=True)
class FunctionValidator(Validator[I, O]):
    """Validator backed by a plain ``(ctx, value) -> output`` function."""
    function: Callable[[ValidationContext, I], O]

    def run(self, ctx: ValidationContext, value: I) -> O: return self.function(ctx, value)


def custom(function: Callable[[ValidationContext, I], O]) -> Validator[I, O]:
    """Decorator turning a ``(ctx, value)`` function into a composable validator.

    Usage:
        @custom
        def even(ctx, value):
            if value % 2: ctx.fail(ctx.text("even", "must be even", value))
            return value
    """
    return FunctionValidator(function)


@dataclass(frozen=True, slots=True)
class Lazy(Validator[I, O]):
    """Resolves its validator on each run; lets schemas refer to themselves."""
    factory: Callable[[], Validator[I, O]]

    def run(self, ctx: ValidationContext, value: I) -> O: return self.factory().run(ctx, value)


def lazy(factory: Callable[[], Validator[I, O]]) -> Validator[I, O]: return Lazy(factory)


# ============================================================================
# Combinators
# ============================================================================

@dataclass(frozen=True, slots=True)
class And(Validator[I, O]):
    """Both validators see the same input; violations of both accumulate."""
    first: Validator[I, Any]
    second: Validator[I, O]

    def run(self, ctx: ValidationContext, value: I) -> O:
        first = ctx.accumulating(lambda: self.first.run(ctx, value))
        second = ctx.accumulating(lambda: self.second.run(ctx, value))
        first.unwrap()
        return second.unwrap()


@dataclass(frozen=True, slots=True)
class Or(Validator[I, O]):
    """First successful branch wins; ``second`` only runs if ``first`` fails."""
    first: Validator[I, O]
    second: Validator[I, O]

    def run(self, ctx: ValidationContext, value: I) -> O:
        return ctx.or_(lambda: self.first.run(ctx, value)).or_else(lambda: self.second.run(ctx, value))


@dataclass(frozen=True, slots=True)
class Then(Validator[I, O]):
    first: Validator[I, Any]
    second: Validator[Any, O]

    def run(self, ctx: ValidationContext, value: I) -> O:
        result = self.first.execute(ctx, value)
        if result.is_failure_like(): ctx.fail(result.messages)
        return self.second.run(ctx, result.value)


@dataclass(frozen=True, slots=True)
class Chain(Validator[I, O]):
    """Feeds ``first``'s output to ``second``.

    If ``first`` fails, ``second`` still checks the original input so both
    sets of violations accumulate (fail-fast stops at the first).
    """
    first: Validator[I, O]
    second: Validator[O, O]

    def run(self, ctx: ValidationContext, value: I) -> O:
        first = ctx.accumulating(lambda: self.first.run(ctx, value))
        output = self.second.run(ctx, first.value if first.is_ok() else value)
        first.unwrap()
        return output


@dataclass(frozen=True, slots=True)
class OnlyIf(Validator[I, Any]):
    validator: Validator[I, Any]
    condition: Callable[[I], bool]

    def run(self, ctx: ValidationContext, value: I) -> Any:
        return self.validator.run(ctx, value) if self.condition(value) else value


@dataclass(frozen=True, slots=True)
class WithMessage(Validator[I, O]):
    validator: Validator[I, O]
    provider: Callable[[list[Message]], Message | str]
    constraint_id: str = WITH_MESSAGE_CONSTRAINT_ID

    def run(self, ctx: ValidationContext, value: I) -> O:
        return ctx.with_message(self.provider, lambda: self.validator.run(ctx, value),
            input=value, constraint_id=self.constraint_id)


@dataclass(frozen=True, slots=True)
class NamedValidator(Validator[I, O]):
    validator: Validator[I, O]
    label: str

    def run(self, ctx: ValidationContext, value: I) -> O: return ctx.named(self.label, lambda: self.validator.run(ctx, value))


# ============================================================================
# Constrainable Builders
# ============================================================================

class ConstrainableValidator(Validator[I, O]):
    """Fluent base for typed builders.

    ``base`` produces the value (identity, transforms, conversions); every
    added constraint then checks that value and their violations accumulate
    in declaration order.
    """
    __slots__ = ("base", "constraints")

    def __init__(self, base: Validator[I, O] | None = None, constraints: tuple[Validator[O, Any], ...] = ()):
        self.base = base if base is not None else Identity()
        self.constraints = constraints

    def run(self, ctx: ValidationContext, value: I) -> O:
        output = self.base.run(ctx, value)
        outcomes = [ctx.accumulating(lambda c=c: c.run(ctx, output)) for c in self.constraints]
        for outcome in outcomes: outcome.unwrap()
        return output

    def __repr__(self) -> str: return f"{type(self).__name__}(base={self.base!r}, constraints={self.constraints!r})"

    def _new(self, base: Validator[I, O], constraints: tuple[Validator[O, Any], ...] = ()) -> Self:
        return type(self)(base, constraints)

    def check(self, validator: Validator[O, Any]) -> Self:
        """Add a validator whose violations accumulate with the other constraints."""
        return self._new(self.base, (*self.constraints, validator))

    def constrain(self, constraint_id: str, check: Check, message: MessageProvider | str | None = None, *,
                  args: tuple[Any, ...] = (), kwargs: dict[str, Any] | None = None) -> Self:
        return self.check(ConstraintValidator(Constraint(constraint_id, check, message, args, kwargs or {})))

    def chain(self, other: Validator[O, O]) -> Self:
        """Thread the built value through ``other`` (see ``Chain``)."""
        return self._new(Chain(self, other))

    def modify(self, transform: Callable[[O], O]) -> Self:
        """Transform the value; constraints added afterwards see the new value."""
        return self._new(Then(self, Transform(transform)))

    def _convert(self, builder: type[ConstrainableValidator], constraint_id: str, parse: Callable[[O], U],
                 *args: Any) -> Any:
        return builder(Then(self, Conversion(constraint_id, parse, args)))

    def literal(self, value: O) -> Self:
        return self.constrain("kova.literal.single", lambda cc: cc.input == value, args=(value,))

    def one_of(self, values: Iterable[O]) -> Self:
        choices = list(values)
        return self.constrain("kova.literal.list", lambda cc: cc.input in choices, args=(choices,))
