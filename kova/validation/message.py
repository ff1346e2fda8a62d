"""Validation Messages

Immutable records produced when a constraint is violated. Every message
carries the Path and root label active at the moment of failure.

Variants:
- TextMessage: caller-supplied final string
- ResourceMessage: constraint id + args, text resolved from a locale bundle
  on every access (the ambient locale is read at resolution time)
- OrMessage: both failed branches of an ``or``; nests left-associatively
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Iterator

from .path import Path
from .resources import format_template, get_locale, resolve_template

OR_CONSTRAINT_ID = "kova.or"
WITH_MESSAGE_CONSTRAINT_ID = "kova.withMessage"


@dataclass(frozen=True, slots=True, kw_only=True)
class Message(ABC):
    """Outcome of one failed constraint."""
    constraint_id: str
    root: str = ""
    path: Path = field(default_factory=Path)
    input: Any = None
    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)

    @abstractmethod
    def render(self, locale: str | None = None) -> str:
        """Message text in ``locale`` (the ambient locale when None)."""

    @property
    def text(self) -> str: return self.render()

    @property
    def descendants(self) -> list[Message]:
        """Messages nested in this message's arguments, depth-first."""
        return [d for child in _messages_in((*self.args, *self.kwargs.values())) for d in (child, *child.descendants)]

    def with_details(self, input: Any, constraint_id: str) -> Message:
        return replace(self, input=input, constraint_id=constraint_id)

    def to_dict(self) -> dict[str, Any]:
        return {"constraint_id": self.constraint_id, "root": self.root, "path": self.path.full_name,
            "input": self.input, "message": self.text}

    def __str__(self) -> str: return self.text


@dataclass(frozen=True, slots=True, kw_only=True)
class TextMessage(Message):
    content: str

    def render(self, locale: str | None = None) -> str: return self.content


@dataclass(frozen=True, slots=True, kw_only=True)
class ResourceMessage(Message):
    """Message whose text comes from the template registered under ``key``.

    ``key`` defaults to the constraint id and survives ``with_details``.
    """
    key: str = ""

    def __post_init__(self) -> None:
        if not self.key: object.__setattr__(self, "key", self.constraint_id)

    def render(self, locale: str | None = None) -> str:
        locale = locale or get_locale()
        return format_template(resolve_template(self.key, locale), self.args, self.kwargs, locale)


@dataclass(frozen=True, slots=True, kw_only=True)
class OrMessage(ResourceMessage):
    """Both branches of a disjunction failed; args are the two message lists."""
    constraint_id: str = OR_CONSTRAINT_ID

    @property
    def first(self) -> tuple[Message, ...]: return self.args[0]

    @property
    def second(self) -> tuple[Message, ...]: return self.args[1]


def _messages_in(values: Any) -> Iterator[Message]:
    for value in values:
        if isinstance(value, Message): yield value
        elif isinstance(value, (list, tuple)): yield from _messages_in(value)
