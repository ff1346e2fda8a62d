"""Structural Location Paths

Immutable descriptors of where a value sits inside the object graph being
validated. Paths grow while traversal descends and shrink on return; every
Message captures the Path active at the moment of failure.

Rendering:
- Property/Named segments are dot-joined: ``address.street.name``
- Index segments attach directly: ``list[1]<iterable element>``
- Map segments attach directly: ``[b]<map value>``
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Union


@dataclass(frozen=True, slots=True)
class Property:
    """Named attribute or mapping key of a validated object."""
    name: str

    def render(self, first: bool) -> str: return self.name if first else f".{self.name}"


@dataclass(frozen=True, slots=True)
class Named:
    """Caller-chosen label for a captured sub-result."""
    label: str

    def render(self, first: bool) -> str: return self.label if first else f".{self.label}"


@dataclass(frozen=True, slots=True)
class Index:
    """Position of an element inside an iterable."""
    index: int

    def render(self, first: bool) -> str: return f"[{self.index}]<iterable element>"


@dataclass(frozen=True, slots=True)
class MapKey:
    """Key of a map entry, validated as a key."""
    key: Any

    def render(self, first: bool) -> str: return f"[{self.key}]<map key>"


@dataclass(frozen=True, slots=True)
class MapValue:
    """Value stored under ``key`` in a map."""
    key: Any

    def render(self, first: bool) -> str: return f"[{self.key}]<map value>"


@dataclass(frozen=True, slots=True)
class MapEntry:
    """Whole ``(key, value)`` entry of a map."""
    key: Any

    def render(self, first: bool) -> str: return f"[{self.key}]<map entry>"


Segment = Union[Property, Named, Index, MapKey, MapValue, MapEntry]


@dataclass(frozen=True, slots=True)
class Path:
    """Ordered, immutable sequence of segments."""
    segments: tuple[Segment, ...] = ()

    @classmethod
    def of(cls, *segments: Segment | str) -> Path:
        return cls(tuple(Property(s) if isinstance(s, str) else s for s in segments))

    def append(self, segment: Segment) -> Path: return Path((*self.segments, segment))

    @property
    def parent(self) -> Path: return Path(self.segments[:-1])

    @property
    def last(self) -> Segment | None: return self.segments[-1] if self.segments else None

    @property
    def full_name(self) -> str:
        return "".join(seg.render(i == 0) for i, seg in enumerate(self.segments))

    def is_empty(self) -> bool: return not self.segments

    def __len__(self) -> int: return len(self.segments)

    def __iter__(self) -> Iterator[Segment]: return iter(self.segments)

    def __str__(self) -> str: return self.full_name
