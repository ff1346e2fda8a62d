"""Boolean and general-purpose validators."""
from __future__ import annotations

from typing import Any

from .validator import ConstrainableValidator


class GenericValidator(ConstrainableValidator[Any, Any]):
    """Values of any type: equality, membership and custom constraints."""
    __slots__ = ()

    def eq_value(self, value: Any) -> GenericValidator:
        return self.constrain("kova.any.eq", lambda cc: cc.input == value, args=(value,))

    def not_eq_value(self, value: Any) -> GenericValidator:
        return self.constrain("kova.any.notEq", lambda cc: cc.input != value, args=(value,))


class BooleanValidator(ConstrainableValidator[bool, bool]):
    __slots__ = ()

    def is_true(self) -> BooleanValidator: return self.constrain("kova.boolean.isTrue", lambda cc: cc.input is True)

    def is_false(self) -> BooleanValidator: return self.constrain("kova.boolean.isFalse", lambda cc: cc.input is False)
