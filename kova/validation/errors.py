"""Validation Error System

Constraint violations are data (Messages); the exceptions here cover the
boundaries around them:

- ValidationException: raised by ``validate`` with the full message list
- MessageError: raised inside a ``map`` transform to report a violation
- UnrecoveredSignalError: a cancellation signal escaped its boundary
- MissingResourceError: no template for a constraint id

Error Format:
{
    "error": {
        "type": "validation_error",
        "message": "Validation failed",
        "errors": [
            {
                "constraint_id": "kova.charSequence.min",
                "root": "User",
                "path": "name",
                "input": "abc",
                "message": "must be at least 5 characters"
            }
        ]
    }
}
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from .message import Message


class KovaError(Exception):
    """Base class for library errors."""


class ValidationException(KovaError):
    """Validation failed; carries every Message in evaluation order."""

    def __init__(self, messages: Sequence[Message]):
        self.messages: list[Message] = list(messages)
        super().__init__(self._summary())

    def _summary(self) -> str:
        return "Validation failed: " + "; ".join(
            f"{m.path.full_name}: {m.text}" if m.path.segments else m.text for m in self.messages)

    @property
    def first_message(self) -> Message | None: return self.messages[0] if self.messages else None

    def messages_at(self, path: str) -> list[Message]:
        """Messages whose rendered path equals ``path``."""
        return [m for m in self.messages if m.path.full_name == path]

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"type": "validation_error", "message": "Validation failed",
            "errors": [m.to_dict() for m in self.messages]}}


class MessageError(KovaError):
    """Raised from a transform to turn its failure into a validation message."""

    def __init__(self, message: Message | str):
        self.message = message
        super().__init__(message if isinstance(message, str) else message.text)


class UnrecoveredSignalError(KovaError, RuntimeError):
    """A cancellation signal reached the top level without a matching boundary."""


class MissingResourceError(KovaError, KeyError):
    """No message template exists for a constraint id."""

    def __init__(self, constraint_id: str, locale: str):
        self.constraint_id = constraint_id
        self.locale = locale
        super().__init__(f"no message template for '{constraint_id}' (locale '{locale}')")

    def __str__(self) -> str: return self.args[0]
