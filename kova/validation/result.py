"""Validation Results

Success/Failure sum type returned by ``try_validate``, modelled on
Result-style Ok/Err variants. ``Both`` is the internal third outcome of a
validation scope: a value was produced but messages were accumulated on the
way. Top-level calls fold ``Both`` into ``Failure``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, NoReturn, TypeVar, Union, final

from .errors import ValidationException
from .message import Message

T = TypeVar("T")
U = TypeVar("U")


@final
@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Validation passed; wraps the (possibly transformed) value."""
    value: T

    @property
    def messages(self) -> list[Message]: return []

    def is_success(self) -> bool: return True

    def is_failure(self) -> bool: return False

    def is_failure_like(self) -> bool: return False

    def unwrap(self) -> T: return self.value

    def unwrap_or(self, default: T) -> T: return self.value

    def map(self, f: Callable[[T], U]) -> Success[U]: return Success(f(self.value))

    def match(self, success: Callable[[T], U], failure: Callable[[list[Message]], U]) -> U:
        """Pattern match on the result. Forces exhaustive handling."""
        return success(self.value)

    def to_dict(self) -> dict[str, Any]: return {"valid": True}

    def __iter__(self) -> Iterator[T]: yield self.value


@final
@dataclass(frozen=True, slots=True)
class Failure:
    """Validation failed; carries a non-empty, ordered message list."""
    messages: list[Message]

    def __post_init__(self) -> None:
        if not self.messages: raise ValueError("Failure requires at least one message")

    def is_success(self) -> bool: return False

    def is_failure(self) -> bool: return True

    def is_failure_like(self) -> bool: return True

    def unwrap(self) -> NoReturn: raise ValidationException(self.messages)

    def unwrap_or(self, default: T) -> T: return default

    def map(self, f: Callable[[Any], U]) -> Failure: return self

    def match(self, success: Callable[[Any], U], failure: Callable[[list[Message]], U]) -> U:
        return failure(self.messages)

    def to_dict(self) -> dict[str, Any]: return {"valid": False, "errors": [m.to_dict() for m in self.messages]}

    def __iter__(self) -> Iterator[Any]: return iter(())


@final
@dataclass(frozen=True, slots=True)
class Both(Generic[T]):
    """Scope produced ``value`` while accumulating ``messages``."""
    value: T
    messages: list[Message]

    def is_success(self) -> bool: return False

    def is_failure(self) -> bool: return False

    def is_failure_like(self) -> bool: return True

    def to_result(self) -> Failure: return Failure(self.messages)


ValidationResult = Union[Success[T], Failure]
ScopeResult = Union[Success[T], Failure, Both[T]]
