"""Validation Context

Per-call state threaded explicitly through every validator: configuration,
the current Path, the root label, the identity stack used for cycle
detection, and the sink of the innermost accumulation scope.

One instance is created per top-level ``try_validate``/``validate`` call and
is never shared across calls or threads.
"""
from __future__ import annotations

from collections.abc import Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Generic, Iterator, NoReturn, TypeVar

from kova.config import ValidationConfig
from .accumulate import Accumulated, Alternative, Sink, ValidationToken, accumulating, ior, with_message
from .log import LogEntry
from .message import (
    OR_CONSTRAINT_ID, WITH_MESSAGE_CONSTRAINT_ID, Message, OrMessage, ResourceMessage, TextMessage,
)
from .path import Named, Path, Segment

T = TypeVar("T")


def _unbound_sink(messages: list[Message]) -> ValidationToken:
    raise RuntimeError("no accumulation scope is active; run validators through try_validate or validate")


class ValidationContext:
    """Mutable traversal state owned by a single validation call."""
    __slots__ = ("config", "path", "root", "_visiting", "_sink")

    def __init__(self, config: ValidationConfig | None = None):
        self.config = config or ValidationConfig()
        self.path = Path()
        self.root = ""
        self._visiting: dict[int, Any] = {}
        self._sink: Sink = _unbound_sink

    # ========================================================================
    # Accumulation
    # ========================================================================

    @property
    def sink(self) -> Sink: return self._sink

    @contextmanager
    def using_sink(self, sink: Sink) -> Iterator[Sink]:
        previous, self._sink = self._sink, sink
        try:
            yield sink
        finally:
            self._sink = previous

    def accumulate(self, messages: Message | list[Message]) -> ValidationToken:
        """Report violations to the current scope; returns its boundary token."""
        return self._sink([messages] if isinstance(messages, Message) else list(messages))

    def fail(self, messages: Message | list[Message]) -> NoReturn:
        """Report violations and cancel up to the current scope's boundary."""
        self.accumulate(messages).cancel()

    def accumulating(self, block: Callable[[], T]) -> Accumulated[T]: return accumulating(self, block)

    def or_(self, block: Callable[[], T]) -> Alternative[T]: return Alternative(self, ior(self, block))

    def with_message(self, provider: Callable[[list[Message]], Message | str], block: Callable[[], T], *,
                     input: Any = None, constraint_id: str = WITH_MESSAGE_CONSTRAINT_ID) -> T:
        return with_message(self, input, provider, block, constraint_id)

    # ========================================================================
    # Traversal
    # ========================================================================

    @contextmanager
    def descend(self, segment: Segment) -> Iterator[Path]:
        previous, self.path = self.path, self.path.append(segment)
        try:
            yield self.path
        finally:
            self.path = previous

    @contextmanager
    def rooted(self, name: str) -> Iterator[str]:
        """Set the root label unless an enclosing schema already did."""
        previous = self.root
        if not self.root: self.root = name
        try:
            yield self.root
        finally:
            self.root = previous

    def named(self, label: str, block: Callable[[], T]) -> T:
        """Run ``block`` under a ``Named`` path segment."""
        with self.descend(Named(label)):
            return block()

    def is_visiting(self, obj: Any) -> bool: return id(obj) in self._visiting

    @contextmanager
    def visit(self, obj: Any) -> Iterator[Any]:
        self._visiting[id(obj)] = obj
        try:
            yield obj
        finally:
            del self._visiting[id(obj)]

    # ========================================================================
    # Messages, logging and time
    # ========================================================================

    def text(self, constraint_id: str, content: str, input: Any = None) -> TextMessage:
        return TextMessage(constraint_id=constraint_id, content=content, root=self.root, path=self.path, input=input)

    def resource(self, constraint_id: str, input: Any = None, *args: Any, **kwargs: Any) -> ResourceMessage:
        return ResourceMessage(constraint_id=constraint_id, root=self.root, path=self.path, input=input,
            args=args, kwargs=kwargs)

    def or_message(self, first: list[Message], second: list[Message]) -> OrMessage:
        return OrMessage(constraint_id=OR_CONSTRAINT_ID, root=self.root, path=self.path, args=(tuple(first), tuple(second)))

    def log(self, entry: Callable[[], LogEntry]) -> None:
        if self.config.logger is not None: self.config.logger(entry())

    def now(self) -> datetime: return self.config.clock()


@dataclass(frozen=True, slots=True)
class ConstraintContext(Generic[T]):
    """What a constraint check and its message provider can see."""
    input: T
    constraint_id: str
    validation: ValidationContext
    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)

    @property
    def root(self) -> str: return self.validation.root

    @property
    def path(self) -> Path: return self.validation.path

    @property
    def config(self) -> ValidationConfig: return self.validation.config

    def arg(self, key: int | str) -> Any: return self.args[key] if isinstance(key, int) else self.kwargs[key]

    def text(self, content: str) -> TextMessage: return self.validation.text(self.constraint_id, content, self.input)

    def resource(self, *args: Any, **kwargs: Any) -> ResourceMessage:
        """Resource message for this constraint; defaults to the constraint's own args."""
        if not args and not kwargs: args, kwargs = self.args, dict(self.kwargs)
        return self.validation.resource(self.constraint_id, self.input, *args, **kwargs)
