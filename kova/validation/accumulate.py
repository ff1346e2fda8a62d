"""Accumulation and Fail-Fast Control

Every violation is reported to the *sink* of the innermost scope. A sink
records the messages and returns the identity token of the boundary that
owns it; raising that token unwinds exactly to that boundary.

Scopes:
- ior: collects messages into a Success/Both/Failure outcome; in fail-fast
  mode the first violation cancels the scope
- accumulating: forwards messages to the enclosing scope and turns a local
  cancellation into an Err marker instead of unwinding further

Cancellation uses ValidationCancelled, a BaseException subclass matched by
token identity. Boundaries re-raise tokens they do not own; host exceptions
are never intercepted.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, NoReturn, TypeVar, Union, final

from .message import Message
from .result import Both, Failure, ScopeResult, Success

if TYPE_CHECKING:
    from .context import ValidationContext

T = TypeVar("T")
R = TypeVar("R")


class ValidationToken:
    """Identity of one recovery boundary."""
    __slots__ = ()

    def cancel(self) -> NoReturn: raise ValidationCancelled(self)


class ValidationCancelled(BaseException):
    """Internal signal unwinding to the boundary that owns ``token``."""

    def __init__(self, token: ValidationToken):
        self.token = token
        super().__init__("validation scope cancelled")


Sink = Callable[[list[Message]], ValidationToken]


def recover_validation(recover: Callable[[], R], block: Callable[[ValidationToken], R]) -> R:
    """Run ``block`` with a fresh token; ``recover()`` if that token is raised."""
    token = ValidationToken()
    try:
        return block(token)
    except ValidationCancelled as signal:
        if signal.token is not token: raise
        return recover()


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Block of an ``accumulating`` scope completed."""
    value: T

    def is_ok(self) -> bool: return True

    def unwrap(self) -> T: return self.value


@final
@dataclass(frozen=True, slots=True)
class Err:
    """Block was cancelled; its messages already reached the enclosing scope.

    Reading ``value`` propagates the failure to the enclosing boundary.
    """
    token: ValidationToken

    def is_ok(self) -> bool: return False

    def unwrap(self) -> NoReturn: self.token.cancel()

    @property
    def value(self) -> NoReturn: self.token.cancel()


Accumulated = Union[Ok[T], Err]


def accumulating(ctx: ValidationContext, block: Callable[[], T]) -> Accumulated[T]:
    outer = ctx.sink
    outer_token: ValidationToken | None = None

    def run(token: ValidationToken) -> Accumulated[T]:
        def sink(messages: list[Message]) -> ValidationToken:
            nonlocal outer_token
            outer_token = outer(messages)
            return token

        with ctx.using_sink(sink):
            return Ok(block())

    return recover_validation(lambda: Err(outer_token), run)


def ior(ctx: ValidationContext, block: Callable[[], T]) -> ScopeResult[T]:
    messages: list[Message] = []

    def run(token: ValidationToken) -> ScopeResult[T]:
        def sink(new: list[Message]) -> ValidationToken:
            messages.extend(new)
            if ctx.config.fail_fast: token.cancel()
            return token

        with ctx.using_sink(sink):
            value = block()
        return Both(value, list(messages)) if messages else Success(value)

    return recover_validation(lambda: Failure(list(messages)), run)


def bind(ctx: ValidationContext, result: ScopeResult[T]) -> T:
    """Re-enter a scope outcome into the current scope."""
    if isinstance(result, Success): return result.value
    if isinstance(result, Both):
        ctx.accumulate(result.messages)
        return result.value
    ctx.fail(result.messages)


def with_message(ctx: ValidationContext, input: Any, provider: Callable[[list[Message]], Message | str],
                 block: Callable[[], T], constraint_id: str) -> T:
    """Replace the messages of a failing ``block`` with one consolidated message."""
    result = ior(ctx, block)
    if not result.is_failure_like(): return result.value
    produced = provider(result.messages)
    message = produced if isinstance(produced, Message) else ctx.text(constraint_id, produced, input)
    return bind(ctx, Both(result.value, [message]) if isinstance(result, Both) else Failure([message]))


class Alternative(Generic[T]):
    """Outcome of an ``or`` chain, folded left-associatively.

    Usage:
        value = ctx.or_(lambda: first(ctx)).or_(lambda: second(ctx)).or_else(lambda: third(ctx))
    """
    __slots__ = ("ctx", "result")

    def __init__(self, ctx: ValidationContext, result: ScopeResult[T]):
        self.ctx = ctx
        self.result = result

    def or_(self, block: Callable[[], T]) -> Alternative[T]:
        if not self.result.is_failure_like(): return self
        other = ior(self.ctx, block)
        if not other.is_failure_like(): return Alternative(self.ctx, other)
        message = self.ctx.or_message(self.result.messages, other.messages)
        kept = self.result if isinstance(self.result, Both) else other
        folded = Both(kept.value, [message]) if isinstance(kept, Both) else Failure([message])
        return Alternative(self.ctx, folded)

    def or_else(self, block: Callable[[], T]) -> T: return self.or_(block).bind()

    def bind(self) -> T: return bind(self.ctx, self.result)
