"""String Validators

Length, content and pattern constraints, transforms (``trim``, case
changes) and conversions to numbers, booleans and enums. Conversions return
the builder for the converted type, so ``Kova.string().to_int().min(0)``
chains naturally.
"""
from __future__ import annotations

import re
from decimal import Decimal
from enum import Enum
from .comparables import NumberValidator
from .literals import BooleanValidator, GenericValidator
from .validator import ConstrainableValidator, Conversion, Then

_BOOLEANS = {"true": True, "false": False}


def _to_bool(value: str) -> bool:
    if (parsed := _BOOLEANS.get(value.lower())) is None: raise ValueError(f"not a boolean: {value!r}")
    return parsed


class StringValidator(ConstrainableValidator[str, str]):
    __slots__ = ()

    # ========================================================================
    # Length
    # ========================================================================

    def min(self, length: int) -> StringValidator:
        return self.constrain("kova.charSequence.min", lambda cc: len(cc.input) >= length, args=(length,))

    def max(self, length: int) -> StringValidator:
        return self.constrain("kova.charSequence.max", lambda cc: len(cc.input) <= length, args=(length,))

    def length(self, length: int) -> StringValidator:
        return self.constrain("kova.charSequence.length", lambda cc: len(cc.input) == length, args=(length,))

    def not_blank(self) -> StringValidator: return self.constrain("kova.charSequence.notBlank", lambda cc: bool(cc.input.strip()))

    def blank(self) -> StringValidator: return self.constrain("kova.charSequence.blank", lambda cc: not cc.input.strip())

    def not_empty(self) -> StringValidator: return self.constrain("kova.charSequence.notEmpty", lambda cc: len(cc.input) > 0)

    def empty(self) -> StringValidator: return self.constrain("kova.charSequence.empty", lambda cc: len(cc.input) == 0)

    # ========================================================================
    # Content
    # ========================================================================

    def starts_with(self, prefix: str) -> StringValidator:
        return self.constrain("kova.charSequence.startsWith", lambda cc: cc.input.startswith(prefix), args=(prefix,))

    def not_starts_with(self, prefix: str) -> StringValidator:
        return self.constrain("kova.charSequence.notStartsWith", lambda cc: not cc.input.startswith(prefix), args=(prefix,))

    def ends_with(self, suffix: str) -> StringValidator:
        return self.constrain("kova.charSequence.endsWith", lambda cc: cc.input.endswith(suffix), args=(suffix,))

    def not_ends_with(self, suffix: str) -> StringValidator:
        return self.constrain("kova.charSequence.notEndsWith", lambda cc: not cc.input.endswith(suffix), args=(suffix,))

    def contains(self, infix: str) -> StringValidator:
        return self.constrain("kova.charSequence.contains", lambda cc: infix in cc.input, args=(infix,))

    def not_contains(self, infix: str) -> StringValidator:
        return self.constrain("kova.charSequence.notContains", lambda cc: infix not in cc.input, args=(infix,))

    def matches(self, pattern: str | re.Pattern[str]) -> StringValidator:
        regex = re.compile(pattern)
        return self.constrain("kova.charSequence.matches", lambda cc: regex.fullmatch(cc.input) is not None, args=(regex,))

    def not_matches(self, pattern: str | re.Pattern[str]) -> StringValidator:
        regex = re.compile(pattern)
        return self.constrain("kova.charSequence.notMatches", lambda cc: regex.fullmatch(cc.input) is None, args=(regex,))

    def uppercase(self) -> StringValidator: return self.constrain("kova.string.uppercase", lambda cc: cc.input == cc.input.upper())

    def lowercase(self) -> StringValidator: return self.constrain("kova.string.lowercase", lambda cc: cc.input == cc.input.lower())

    # ========================================================================
    # Transforms
    # ========================================================================

    def trim(self) -> StringValidator: return self.modify(str.strip)

    def to_upper_case(self) -> StringValidator: return self.modify(str.upper)

    def to_lower_case(self) -> StringValidator: return self.modify(str.lower)

    # ========================================================================
    # Conversions
    # ========================================================================

    def to_int(self) -> NumberValidator: return self._convert(NumberValidator, "kova.string.int", int)

    def to_float(self) -> NumberValidator: return self._convert(NumberValidator, "kova.string.float", float)

    def to_decimal(self) -> NumberValidator: return self._convert(NumberValidator, "kova.string.decimal", Decimal)

    def to_bool(self) -> BooleanValidator: return self._convert(BooleanValidator, "kova.string.bool", _to_bool)

    def to_enum(self, enum: type[Enum]) -> GenericValidator:
        """Parse a member name of ``enum``."""
        names = [member.name for member in enum]
        return GenericValidator(Then(self, Conversion("kova.string.enum", lambda name: enum[name], (names,), (KeyError,))))

    def is_int(self) -> StringValidator:
        """Check that the value parses as an integer without converting it."""
        return self.check(Conversion("kova.string.int", int))
