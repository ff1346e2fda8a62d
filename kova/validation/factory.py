"""Kova factory: entry points for every typed validator builder."""
from __future__ import annotations

from typing import Any, Callable, Iterable, NoReturn

from .comparables import ComparableValidator, NumberValidator
from .containers import CollectionValidator, MapValidator
from .errors import MessageError
from .literals import BooleanValidator, GenericValidator
from .message import Message
from .nullable import NullableValidator
from .schema import ObjectSchema
from .strings import StringValidator
from .temporal import TemporalValidator
from .validator import Validator, lazy


class Kova:
    """Static constructors for validators.

    Usage:
        Kova.string().min(1).max(50)
        Kova.int().min(0).max(150)
        Kova.list().not_empty().on_each(Kova.string().not_blank())
        Kova.map().on_each_value(Kova.int().positive())
        Kova.string().as_nullable().with_default("n/a")
    """

    @staticmethod
    def generic() -> GenericValidator: return GenericValidator()

    @staticmethod
    def string() -> StringValidator: return StringValidator()

    @staticmethod
    def comparable() -> ComparableValidator: return ComparableValidator()

    @staticmethod
    def number() -> NumberValidator: return NumberValidator()

    @staticmethod
    def int() -> NumberValidator: return NumberValidator()

    @staticmethod
    def float() -> NumberValidator: return NumberValidator()

    @staticmethod
    def decimal() -> NumberValidator: return NumberValidator()

    @staticmethod
    def bool() -> BooleanValidator: return BooleanValidator()

    @staticmethod
    def date() -> TemporalValidator: return TemporalValidator()

    @staticmethod
    def datetime() -> TemporalValidator: return TemporalValidator()

    @staticmethod
    def time() -> TemporalValidator: return TemporalValidator()

    @staticmethod
    def collection() -> CollectionValidator: return CollectionValidator()

    @staticmethod
    def list() -> CollectionValidator: return CollectionValidator()

    @staticmethod
    def set() -> CollectionValidator: return CollectionValidator()

    @staticmethod
    def map() -> MapValidator: return MapValidator()

    @staticmethod
    def nullable() -> NullableValidator: return NullableValidator()

    @staticmethod
    def literal(value: Any) -> GenericValidator:
        """Exact value, or one of several when given a list, tuple or set."""
        if isinstance(value, (list, tuple, frozenset, set)): return GenericValidator().one_of(value)
        return GenericValidator().literal(value)

    @staticmethod
    def one_of(values: Iterable[Any]) -> GenericValidator: return GenericValidator().one_of(values)

    @staticmethod
    def schema(name: str | type | None = None, /, **validators: Validator[Any, Any]) -> ObjectSchema:
        return ObjectSchema.of(name, **validators)

    @staticmethod
    def lazy(factory: Callable[[], Validator[Any, Any]]) -> Validator[Any, Any]: return lazy(factory)

    @staticmethod
    def error(message: Message | str) -> NoReturn:
        """Fail the enclosing ``map`` transform with ``message``."""
        raise MessageError(message)
