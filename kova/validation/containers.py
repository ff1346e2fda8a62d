"""Collection and Map Validators

Size and membership constraints plus per-element traversal. Element
validation runs under an ``Index``/``MapKey``/``MapValue``/``MapEntry`` path
segment; element failures are folded into one summarizing message on the
collection whose args carry the per-element messages.
"""
from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Callable

from .context import ValidationContext
from .message import Message
from .path import Index, MapEntry, MapKey, MapValue, Segment
from .validator import ConstrainableValidator, Validator

Items = Callable[[Any], Iterable[tuple[Segment, Any]]]


@dataclass(frozen=True, slots=True)
class Each(Validator[Any, Any]):
    """Validate every item; failures become one ``constraint_id`` message."""
    validator: Validator[Any, Any]
    constraint_id: str
    items: Items

    def run(self, ctx: ValidationContext, value: Any) -> Any:
        def each() -> Any:
            outcomes = [ctx.accumulating(lambda s=segment, i=item: self._item(ctx, s, i))
                for segment, item in self.items(value)]
            for outcome in outcomes: outcome.unwrap()
            return value

        def summarize(messages: list[Message]) -> Message: return ctx.resource(self.constraint_id, value, messages)

        return ctx.with_message(summarize, each, input=value, constraint_id=self.constraint_id)

    def _item(self, ctx: ValidationContext, segment: Segment, item: Any) -> Any:
        with ctx.descend(segment):
            return self.validator.run(ctx, item)


def _elements(value: Iterable[Any]) -> Iterable[tuple[Segment, Any]]:
    return ((Index(i), element) for i, element in enumerate(value))


def _keys(value: Mapping[Any, Any]) -> Iterable[tuple[Segment, Any]]: return ((MapKey(k), k) for k in value)


def _values(value: Mapping[Any, Any]) -> Iterable[tuple[Segment, Any]]:
    return ((MapValue(k), v) for k, v in value.items())


def _entries(value: Mapping[Any, Any]) -> Iterable[tuple[Segment, Any]]:
    return ((MapEntry(k), (k, v)) for k, v in value.items())


def _sized(compare: Callable[[int, int], bool], bound: int):
    """(check, message) pair for size constraints reporting the actual size."""
    return (lambda cc: compare(len(cc.input), bound)), (lambda cc: cc.resource(bound, len(cc.input)))


# ============================================================================
# Collections
# ============================================================================

class CollectionValidator(ConstrainableValidator[Collection[Any], Collection[Any]]):
    """Lists, tuples, sets and other sized iterables."""
    __slots__ = ()

    def min(self, size: int) -> CollectionValidator:
        check, message = _sized(lambda n, b: n >= b, size)
        return self.constrain("kova.collection.min", check, message, args=(size,))

    def max(self, size: int) -> CollectionValidator:
        check, message = _sized(lambda n, b: n <= b, size)
        return self.constrain("kova.collection.max", check, message, args=(size,))

    def length(self, size: int) -> CollectionValidator:
        check, message = _sized(lambda n, b: n == b, size)
        return self.constrain("kova.collection.length", check, message, args=(size,))

    def not_empty(self) -> CollectionValidator: return self.constrain("kova.collection.notEmpty", lambda cc: len(cc.input) > 0)

    def contains(self, element: Any) -> CollectionValidator:
        return self.constrain("kova.collection.contains", lambda cc: element in cc.input, args=(element,))

    def not_contains(self, element: Any) -> CollectionValidator:
        return self.constrain("kova.collection.notContains", lambda cc: element not in cc.input, args=(element,))

    def on_each(self, validator: Validator[Any, Any]) -> CollectionValidator:
        return self.check(Each(validator, "kova.collection.onEach", _elements))


# ============================================================================
# Maps
# ============================================================================

class MapValidator(ConstrainableValidator[Mapping[Any, Any], Mapping[Any, Any]]):
    __slots__ = ()

    def min(self, size: int) -> MapValidator:
        check, message = _sized(lambda n, b: n >= b, size)
        return self.constrain("kova.map.min", check, message, args=(size,))

    def max(self, size: int) -> MapValidator:
        check, message = _sized(lambda n, b: n <= b, size)
        return self.constrain("kova.map.max", check, message, args=(size,))

    def length(self, size: int) -> MapValidator:
        check, message = _sized(lambda n, b: n == b, size)
        return self.constrain("kova.map.length", check, message, args=(size,))

    def not_empty(self) -> MapValidator: return self.constrain("kova.map.notEmpty", lambda cc: len(cc.input) > 0)

    def contains_key(self, key: Any) -> MapValidator:
        return self.constrain("kova.map.containsKey", lambda cc: key in cc.input, args=(key,))

    def not_contains_key(self, key: Any) -> MapValidator:
        return self.constrain("kova.map.notContainsKey", lambda cc: key not in cc.input, args=(key,))

    def contains_value(self, value: Any) -> MapValidator:
        return self.constrain("kova.map.containsValue", lambda cc: value in cc.input.values(), args=(value,))

    def not_contains_value(self, value: Any) -> MapValidator:
        return self.constrain("kova.map.notContainsValue", lambda cc: value not in cc.input.values(), args=(value,))

    def on_each(self, validator: Validator[tuple[Any, Any], Any]) -> MapValidator:
        """Validate each ``(key, value)`` entry."""
        return self.check(Each(validator, "kova.map.onEach", _entries))

    def on_each_key(self, validator: Validator[Any, Any]) -> MapValidator:
        return self.check(Each(validator, "kova.map.onEachKey", _keys))

    def on_each_value(self, validator: Validator[Any, Any]) -> MapValidator:
        return self.check(Each(validator, "kova.map.onEachValue", _values))
