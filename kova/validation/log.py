"""Constraint evaluation log entries.

Emitted once per leaf constraint evaluation when ``ValidationConfig.logger``
is set. Entries are observational only.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class Satisfied:
    constraint_id: str
    root: str
    path: str
    input: Any

    def to_dict(self) -> dict[str, Any]:
        return {"event": "satisfied", "constraint_id": self.constraint_id, "root": self.root,
            "path": self.path, "input": self.input}


@dataclass(frozen=True, slots=True)
class Violated:
    constraint_id: str
    root: str
    path: str
    input: Any
    args: tuple[Any, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"event": "violated", "constraint_id": self.constraint_id, "root": self.root,
            "path": self.path, "input": self.input, "args": list(self.args)}


LogEntry = Union[Satisfied, Violated]
