"""Leaf Constraints

A Constraint is the lowest-level check: a predicate over a ConstraintContext
plus the message to report when it does not hold. Evaluation logs one
Satisfied or Violated entry and reports at most one Message.

Checks return a bool, or a ConstraintResult when they build their own
message (external constraint libraries).
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar, Union, final

from .context import ConstraintContext, ValidationContext
from .log import Satisfied, Violated
from .message import Message

T = TypeVar("T")


@final
@dataclass(frozen=True, slots=True)
class ConstraintSatisfied:
    pass


@final
@dataclass(frozen=True, slots=True)
class ConstraintViolated:
    message: Message


ConstraintResult = Union[ConstraintSatisfied, ConstraintViolated]
MessageProvider = Callable[[ConstraintContext[Any]], Union[Message, str]]
Check = Callable[[ConstraintContext[Any]], Union[bool, ConstraintResult]]


@dataclass(frozen=True, slots=True)
class Constraint(Generic[T]):
    """Predicate identified by ``id``.

    ``message`` is either explicit text, a provider over the
    ConstraintContext, or None for the resource template registered
    under ``id`` formatted with ``args``/``kwargs``.
    """
    id: str
    check: Check
    message: MessageProvider | str | None = None
    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)

    def message_for(self, cc: ConstraintContext[T]) -> Message:
        if self.message is None: return cc.resource()
        if isinstance(self.message, str): return cc.text(self.message)
        produced = self.message(cc)
        return cc.text(produced) if isinstance(produced, str) else produced

    def evaluate(self, ctx: ValidationContext, value: T) -> T:
        cc = ConstraintContext(value, self.id, ctx, self.args, self.kwargs)
        verdict = self.check(cc)
        if isinstance(verdict, ConstraintViolated):
            message = verdict.message
        elif isinstance(verdict, ConstraintSatisfied) or verdict:
            ctx.log(lambda: Satisfied(self.id, ctx.root, ctx.path.full_name, value))
            return value
        else:
            message = self.message_for(cc)
        ctx.log(lambda: Violated(self.id, ctx.root, ctx.path.full_name, value, self.args))
        ctx.fail(message)
