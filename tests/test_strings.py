"""Tests for string, comparable, literal and temporal builders."""

import re
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum

from kova.validation import Kova, ValidationConfig


class Color(Enum):
    RED = 1
    GREEN = 2


def texts(result) -> list[str]:
    return [m.text for m in result.messages]


class TestStringConstraints:
    """Tests for length, content and pattern checks."""

    def test_blank_and_empty(self) -> None:
        assert texts(Kova.string().not_blank().try_validate("  ")) == ["must not be blank"]
        assert texts(Kova.string().blank().try_validate("a")) == ["must be blank"]
        assert texts(Kova.string().empty().try_validate("a")) == ["must be empty"]

    def test_affixes(self) -> None:
        validator = Kova.string().starts_with("a").ends_with("z").not_contains("q")
        assert validator.try_validate("abz").is_success()
        assert texts(validator.try_validate("qq")) == ['must start with "a"', 'must end with "z"', 'must not contain "q"']
        assert texts(Kova.string().not_starts_with("a").not_ends_with("z").try_validate("az")) == [
            'must not start with "a"', 'must not end with "z"']
        assert texts(Kova.string().contains("@").try_validate("x")) == ['must contain "@"']

    def test_matches_whole_string(self) -> None:
        validator = Kova.string().matches(r"\d+")
        assert validator.try_validate("123").is_success()
        assert texts(validator.try_validate("12a")) == [r"must match pattern: \d+"]
        assert texts(Kova.string().not_matches(re.compile("[a-z]+")).try_validate("abc")) == [
            "must not match pattern: [a-z]+"]

    def test_case(self) -> None:
        assert texts(Kova.string().uppercase().try_validate("Ab")) == ["must be uppercase"]
        assert texts(Kova.string().lowercase().try_validate("Ab")) == ["must be lowercase"]


class TestTransformsAndConversions:
    """Tests for transforms and type conversions."""

    def test_trim_before_constraints(self) -> None:
        assert Kova.string().trim().min(3).try_validate("  abc ").unwrap() == "abc"
        assert texts(Kova.string().trim().not_empty().try_validate("   ")) == ["must not be empty"]

    def test_case_transforms(self) -> None:
        assert Kova.string().to_upper_case().uppercase().try_validate("abc").unwrap() == "ABC"
        assert Kova.string().to_lower_case().try_validate("ABC").unwrap() == "abc"

    def test_to_int(self) -> None:
        validator = Kova.string().to_int().min(0)
        assert validator.try_validate("5").unwrap() == 5
        [message] = validator.try_validate("five").messages
        assert (message.constraint_id, message.text, message.input) == ("kova.string.int", "must be a valid integer", "five")

    def test_conversion_stops_pipeline(self) -> None:
        assert texts(Kova.string().to_int().min(0).try_validate("x")) == ["must be a valid integer"]

    def test_to_float_and_decimal(self) -> None:
        assert Kova.string().to_float().try_validate("1.5").unwrap() == 1.5
        assert texts(Kova.string().to_float().try_validate("abc")) == ["must be a valid float"]
        assert Kova.string().to_decimal().try_validate("1.10").unwrap() == Decimal("1.10")
        assert texts(Kova.string().to_decimal().try_validate("1,10")) == ["must be a valid decimal number"]

    def test_to_bool(self) -> None:
        assert Kova.string().to_bool().is_true().try_validate("TRUE").unwrap() is True
        assert texts(Kova.string().to_bool().try_validate("yes")) == ['must be "true" or "false"']
        assert texts(Kova.string().to_bool().is_true().try_validate("false")) == ["must be true"]

    def test_to_enum(self) -> None:
        validator = Kova.string().to_enum(Color)
        assert validator.try_validate("RED").unwrap() is Color.RED
        assert texts(validator.try_validate("BLUE")) == ["must be one of: [RED, GREEN]"]

    def test_is_int_keeps_string(self) -> None:
        assert Kova.string().is_int().try_validate("12").unwrap() == "12"
        assert texts(Kova.string().is_int().max(1).try_validate("ab")) == [
            "must be a valid integer", "must be at most 1 characters"]


class TestComparables:
    """Tests for ordering and sign checks."""

    def test_bounds(self) -> None:
        assert texts(Kova.int().gt(1).gte(3).try_validate(1)) == [
            "must be greater than 1", "must be greater than or equal to 3"]
        assert texts(Kova.int().lte(0).not_eq(5).try_validate(5)) == [
            "must be less than or equal to 0", "must not be equal to 5"]

    def test_between_inclusive(self) -> None:
        validator = Kova.decimal().between(Decimal("1"), Decimal("2"))
        assert validator.try_validate(Decimal("2")).is_success()
        assert texts(validator.try_validate(Decimal("2.5"))) == ["must be within the range 1..2"]

    def test_signs(self) -> None:
        assert texts(Kova.float().negative().not_negative().try_validate(-1.0)) == ["must not be negative"]
        assert texts(Kova.number().not_positive().try_validate(1)) == ["must not be positive"]

    def test_comparable_strings(self) -> None:
        assert texts(Kova.comparable().max("m").try_validate("z")) == ["must be less than or equal to m"]


class TestLiterals:
    """Tests for literal, membership and boolean checks."""

    def test_literal(self) -> None:
        assert texts(Kova.literal("on").try_validate("off")) == ["must be on"]
        assert texts(Kova.literal(["a", "b"]).try_validate("c")) == ["must be one of: [a, b]"]
        assert Kova.one_of([1, 2]).try_validate(2).unwrap() == 2

    def test_generic_equality(self) -> None:
        assert texts(Kova.generic().eq_value(1).try_validate(2)) == ["must be equal to 1"]
        assert texts(Kova.generic().not_eq_value(1).try_validate(1)) == ["must not be equal to 1"]

    def test_booleans(self) -> None:
        assert texts(Kova.bool().is_false().try_validate(True)) == ["must be false"]
        assert Kova.bool().is_true().try_validate(True).unwrap() is True

    def test_string_literal(self) -> None:
        assert texts(Kova.string().literal("yes").try_validate("no")) == ["must be yes"]


class TestTemporal:
    """Tests for clock-relative checks."""

    def test_datetime(self, noon: ValidationConfig) -> None:
        later = datetime(2024, 1, 1, 13, 0)
        assert Kova.datetime().future().try_validate(later, noon).is_success()
        assert texts(Kova.datetime().past().try_validate(later, noon)) == ["must be in the past"]

    def test_present_is_inclusive(self, noon: ValidationConfig) -> None:
        now = datetime(2024, 1, 1, 12, 0)
        assert Kova.datetime().past_or_present().future_or_present().try_validate(now, noon).is_success()
        assert texts(Kova.datetime().future().try_validate(now, noon)) == ["must be in the future"]

    def test_date(self, noon: ValidationConfig) -> None:
        assert texts(Kova.date().future().try_validate(date(2024, 1, 1), noon)) == ["must be in the future"]
        assert Kova.date().past().try_validate(date(2023, 12, 31), noon).is_success()

    def test_time(self, noon: ValidationConfig) -> None:
        assert Kova.time().past().try_validate(time(11, 59), noon).is_success()
        assert texts(Kova.time().past().try_validate(time(12, 1), noon)) == ["must be in the past"]

    def test_aware_input(self) -> None:
        instant = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        config = ValidationConfig(fail_fast=False, clock=lambda: instant)
        tokyo = timezone(timedelta(hours=9))
        assert Kova.datetime().future().try_validate(datetime(2024, 1, 1, 22, 0, tzinfo=tokyo), config).is_success()
        assert texts(Kova.datetime().future().try_validate(datetime(2024, 1, 1, 20, 0, tzinfo=tokyo), config)) == [
            "must be in the future"]

    def test_pinned_clock_via_options(self, noon: ValidationConfig) -> None:
        later = noon.with_options(clock=lambda: datetime(2030, 1, 1))
        assert texts(Kova.date().future().try_validate(date(2025, 1, 1), later)) == ["must be in the future"]
