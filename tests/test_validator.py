"""Tests for the validator combinator algebra."""

import pytest

from kova.validation import (
    ConstraintViolated,
    Kova,
    Satisfied,
    ValidationConfig,
    ValidationContext,
    ValidationException,
    Violated,
    custom,
    lazy,
)


def texts(result) -> list[str]:
    return [m.text for m in result.messages]


class TestScenarios:
    """Concrete end-to-end behaviours."""

    def test_min_length(self) -> None:
        result = Kova.string().min(5).try_validate("abc")
        assert result.is_failure()
        [message] = result.messages
        assert message.text == "must be at least 5 characters"
        assert message.constraint_id == "kova.charSequence.min"
        assert message.input == "abc"
        assert message.path.full_name == ""

    def test_int_range(self) -> None:
        validator = Kova.int().min(3).max(10)
        assert validator.try_validate(7).unwrap() == 7
        assert texts(validator.try_validate(2)) == ["must be greater than or equal to 3"]

    def test_or_of_lengths(self) -> None:
        result = (Kova.string().length(2) | Kova.string().length(5)).try_validate("abc")
        assert texts(result) == [
            "at least one constraint must be satisfied: "
            "[[must be exactly 2 characters], [must be exactly 5 characters]]"]


class TestAnd:
    """Tests for conjunction."""

    def test_both_violations_accumulate(self) -> None:
        validator = Kova.string().min(5) & Kova.string().starts_with("x")
        assert texts(validator.try_validate("abc")) == ["must be at least 5 characters", 'must start with "x"']

    def test_plus_is_and(self) -> None:
        validator = Kova.string().min(5) + Kova.string().max(2)
        assert len(validator.try_validate("abc").messages) == 2

    def test_success_returns_second_output(self) -> None:
        validator = Kova.string().min(1).and_(Kova.string().map(str.upper))
        assert validator.try_validate("abc").unwrap() == "ABC"

    def test_builder_constraints_accumulate(self) -> None:
        result = Kova.string().min(5).max(2).try_validate("abc")
        assert texts(result) == ["must be at least 5 characters", "must be at most 2 characters"]


class TestOr:
    """Tests for disjunction."""

    def test_composite_message(self) -> None:
        result = (Kova.int().positive() | Kova.int().lt(0)).try_validate(0)
        [message] = result.messages
        assert message.constraint_id == "kova.or"
        assert message.text == "at least one constraint must be satisfied: [[must be positive], [must be less than 0]]"
        assert [m.constraint_id for m in message.args[0]] == ["kova.number.positive"]
        assert [m.constraint_id for m in message.args[1]] == ["kova.comparable.lt"]

    def test_second_branch_success(self) -> None:
        result = (Kova.string().length(2) | Kova.string().length(3)).try_validate("abc")
        assert result.unwrap() == "abc"

    def test_short_circuit_skips_second_branch(self, logged: ValidationConfig, entries: list) -> None:
        """The second branch never runs, so it logs nothing."""
        (Kova.int().positive() | Kova.int().lt(0)).try_validate(5, logged)
        assert [(type(e), e.constraint_id) for e in entries] == [(Satisfied, "kova.number.positive")]

    def test_three_way_nests_left(self) -> None:
        validator = Kova.int().positive() | Kova.int().lt(-10) | Kova.int().eq(100)
        [message] = validator.try_validate(0).messages
        [nested] = message.args[0]
        assert nested.constraint_id == "kova.or"
        assert [m.text for m in message.args[1]] == ["must be equal to 100"]

    def test_or_else_alias(self) -> None:
        assert Kova.int().positive().or_else(Kova.int().eq(0)).try_validate(0).unwrap() == 0


class TestPipelines:
    """Tests for then/compose/map."""

    def test_then_feeds_output(self) -> None:
        validator = Kova.string().trim().then(Kova.string().min(3))
        assert validator.try_validate("  abc  ").unwrap() == "abc"

    def test_then_short_circuits(self) -> None:
        calls = []

        @custom
        def record(ctx: ValidationContext, value: str) -> str:
            calls.append(value)
            return value

        result = Kova.string().not_empty().then(record).try_validate("")
        assert texts(result) == ["must not be empty"]
        assert calls == []

    def test_compose(self) -> None:
        validator = Kova.int().positive().compose(Kova.string().to_int())
        assert validator.try_validate("12").unwrap() == 12
        assert texts(validator.try_validate("-1")) == ["must be positive"]

    def test_chain_threads_output(self) -> None:
        validator = Kova.string().trim().chain(Kova.string().max(3))
        assert validator.try_validate("  abc  ").unwrap() == "abc"

    def test_chain_accumulates_when_first_fails(self) -> None:
        validator = Kova.string().min(5).chain(Kova.string().starts_with("x"))
        assert texts(validator.try_validate("abc")) == ["must be at least 5 characters", 'must start with "x"']

    def test_chain_fail_fast(self, fail_fast: ValidationConfig) -> None:
        validator = Kova.string().min(5).chain(Kova.string().starts_with("x"))
        assert texts(validator.try_validate("abc", fail_fast)) == ["must be at least 5 characters"]

    def test_map(self) -> None:
        assert Kova.string().map(len).try_validate("abcd").unwrap() == 4

    def test_map_reports_message_error(self) -> None:
        validator = Kova.string().map(lambda s: Kova.error("not allowed") if s == "x" else s)
        [message] = validator.try_validate("x").messages
        assert message.text == "not allowed"
        assert message.constraint_id == "kova.map"
        assert validator.try_validate("y").unwrap() == "y"

    def test_map_host_exception_propagates(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Kova.string().map(lambda s: 1 / 0).try_validate("a")


class TestConstrain:
    """Tests for the leaf constraint primitive."""

    def test_explicit_text(self) -> None:
        validator = Kova.int().constrain("even", lambda cc: cc.input % 2 == 0, "must be even")
        [message] = validator.try_validate(3).messages
        assert (message.constraint_id, message.text, message.input) == ("even", "must be even", 3)

    def test_message_provider(self) -> None:
        validator = Kova.int().constrain("even", lambda cc: cc.input % 2 == 0, lambda cc: f"{cc.input} is odd")
        assert texts(validator.try_validate(3)) == ["3 is odd"]

    def test_resource_default_uses_args(self) -> None:
        validator = Kova.generic().constrain("kova.comparable.max", lambda cc: cc.input <= 9, args=(9,))
        assert texts(validator.try_validate(10)) == ["must be less than or equal to 9"]

    def test_check_may_return_violation(self) -> None:
        validator = Kova.generic().constrain("ext", lambda cc: ConstraintViolated(cc.text("external says no")))
        assert texts(validator.try_validate(1)) == ["external says no"]

    def test_base_constrain_after_transform(self) -> None:
        validator = Kova.string().map(len).constrain("short", lambda cc: cc.input < 3, "too long")
        assert texts(validator.try_validate("abcd")) == ["too long"]

    def test_log_entries(self, logged: ValidationConfig, entries: list) -> None:
        Kova.string().min(1).max(2).try_validate("abc", logged)
        assert entries == [
            Satisfied("kova.charSequence.min", "", "", "abc"),
            Violated("kova.charSequence.max", "", "", "abc", (2,)),
        ]


class TestOnlyIfAndMessages:
    """Tests for only_if, with_message and named."""

    def test_only_if_skips(self) -> None:
        validator = Kova.string().min(5).only_if(lambda s: s.startswith("long"))
        assert validator.try_validate("abc").unwrap() == "abc"
        assert texts(validator.try_validate("long")) == ["must be at least 5 characters"]

    def test_with_message_text(self) -> None:
        [message] = Kova.string().min(5).max(2).with_message("invalid name").try_validate("abc").messages
        assert message.text == "invalid name"
        assert message.constraint_id == "kova.withMessage"
        assert message.input == "abc"

    def test_with_message_provider(self) -> None:
        validator = Kova.string().min(5).max(2).with_message(lambda messages: f"{len(messages)} problems", "name")
        [message] = validator.try_validate("abc").messages
        assert (message.text, message.constraint_id) == ("2 problems", "name")

    def test_with_message_passes_success(self) -> None:
        assert Kova.string().min(1).with_message("bad").try_validate("a").unwrap() == "a"

    def test_named(self) -> None:
        [message] = Kova.string().min(3).named("nick").try_validate("ab").messages
        assert message.path.full_name == "nick"


class TestFailFast:
    """Tests for fail-fast evaluation."""

    def test_prefix_of_accumulated_messages(self, fail_fast: ValidationConfig) -> None:
        validator = Kova.string().min(5).max(2).starts_with("x")
        everything = [m.constraint_id for m in validator.try_validate("abc").messages]
        first_only = [m.constraint_id for m in validator.try_validate("abc", fail_fast).messages]
        assert everything == ["kova.charSequence.min", "kova.charSequence.max", "kova.charSequence.startsWith"]
        assert first_only == everything[:1]

    def test_skipped_checks_do_not_log(self, entries: list) -> None:
        config = ValidationConfig(fail_fast=True, logger=entries.append)
        Kova.string().min(5).max(10).try_validate("abc", config)
        assert [type(e) for e in entries] == [Violated]


class TestEntryPoints:
    """Tests for validate/try_validate/execute on validators."""

    def test_validate_returns_value(self) -> None:
        assert Kova.string().trim().validate(" a ") == "a"

    def test_validate_raises(self) -> None:
        with pytest.raises(ValidationException) as info:
            Kova.string().min(5).validate("abc")
        assert [m.text for m in info.value.messages] == ["must be at least 5 characters"]

    def test_custom_validator(self) -> None:
        @custom
        def even(ctx: ValidationContext, value: int) -> int:
            if value % 2: ctx.fail(ctx.text("even", "must be even", value))
            return value

        assert even.try_validate(2).unwrap() == 2
        assert texts((even & Kova.int().positive()).try_validate(-1)) == ["must be even", "must be positive"]

    def test_lazy(self) -> None:
        assert texts(lazy(lambda: Kova.int().positive()).try_validate(-1)) == ["must be positive"]

    def test_called_inside_block(self) -> None:
        from kova.validation import try_validate
        result = try_validate(lambda ctx: Kova.string().min(5)(ctx, "abc"))
        assert texts(result) == ["must be at least 5 characters"]
