"""Comparable and Numeric Validators

Ordering constraints for anything supporting ``<``/``<=`` (numbers,
decimals, dates, strings) plus sign checks for numbers.
"""
from __future__ import annotations

from typing import Any

from .validator import ConstrainableValidator


class ComparableValidator(ConstrainableValidator[Any, Any]):
    __slots__ = ()

    def min(self, value: Any) -> ComparableValidator:
        return self.constrain("kova.comparable.min", lambda cc: cc.input >= value, args=(value,))

    def max(self, value: Any) -> ComparableValidator:
        return self.constrain("kova.comparable.max", lambda cc: cc.input <= value, args=(value,))

    def gt(self, value: Any) -> ComparableValidator:
        return self.constrain("kova.comparable.gt", lambda cc: cc.input > value, args=(value,))

    def gte(self, value: Any) -> ComparableValidator:
        return self.constrain("kova.comparable.gte", lambda cc: cc.input >= value, args=(value,))

    def lt(self, value: Any) -> ComparableValidator:
        return self.constrain("kova.comparable.lt", lambda cc: cc.input < value, args=(value,))

    def lte(self, value: Any) -> ComparableValidator:
        return self.constrain("kova.comparable.lte", lambda cc: cc.input <= value, args=(value,))

    def eq(self, value: Any) -> ComparableValidator:
        return self.constrain("kova.comparable.eq", lambda cc: cc.input == value, args=(value,))

    def not_eq(self, value: Any) -> ComparableValidator:
        return self.constrain("kova.comparable.notEq", lambda cc: cc.input != value, args=(value,))

    def between(self, low: Any, high: Any) -> ComparableValidator:
        """Inclusive range check."""
        return self.constrain("kova.comparable.between", lambda cc: low <= cc.input <= high, args=(low, high))


class NumberValidator(ComparableValidator):
    __slots__ = ()

    def positive(self) -> NumberValidator: return self.constrain("kova.number.positive", lambda cc: cc.input > 0)

    def negative(self) -> NumberValidator: return self.constrain("kova.number.negative", lambda cc: cc.input < 0)

    def not_positive(self) -> NumberValidator: return self.constrain("kova.number.notPositive", lambda cc: cc.input <= 0)

    def not_negative(self) -> NumberValidator: return self.constrain("kova.number.notNegative", lambda cc: cc.input >= 0)
