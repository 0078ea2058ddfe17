"""Tests for rule primitives: Min, Max, RangeInclusive, Enum, Regex."""

from __future__ import annotations

import re
from decimal import Decimal
from fractions import Fraction

import pytest

from rulecheck.errors import DomainConstraintError, Failure
from rulecheck.validation import Enum, Max, Min, RangeInclusive, Regex


class TestMin:
    @pytest.mark.parametrize(
        ("value", "valid"),
        [
            pytest.param(10, True, id="lower-limit"),
            pytest.param(11, True, id="normal"),
            pytest.param(8, False, id="failure"),
        ],
    )
    def test_bounds(self, value: int, valid: bool) -> None:
        assert Min(10)(value).is_ok() is valid

    def test_message_names_value_and_bound(self) -> None:
        assert Min(10)(8).unwrap_err() == Failure("8 is less than minimum 10")

    def test_decimal_and_fraction(self) -> None:
        assert Min(Decimal("1.5"))(Decimal("1.5")).is_ok()
        assert Min(Fraction(1, 3))(0.3).is_err()

    def test_nan_never_passes(self) -> None:
        assert Min(0)(float("nan")).is_err()

    @pytest.mark.parametrize(
        ("rule", "value"),
        [
            pytest.param(Min(0), Decimal("NaN"), id="decimal-nan-int-bound"),
            pytest.param(Min(Decimal("1")), Decimal("sNaN"), id="signaling-nan"),
            pytest.param(Max(Decimal("1")), float("nan"), id="float-nan-decimal-bound"),
            pytest.param(RangeInclusive(Decimal("0"), Decimal("9")), Decimal("NaN"), id="range"),
        ],
    )
    def test_nan_value_is_failure_not_exception(self, rule, value) -> None:
        failure = rule(value).unwrap_err()
        assert failure.message.startswith("expected real number, got ")

    @pytest.mark.parametrize("bound", [Decimal("NaN"), float("nan")])
    def test_nan_bound_rejected_at_construction(self, bound) -> None:
        with pytest.raises(DomainConstraintError, match="Min bound must be a real number"):
            Min(bound)
        with pytest.raises(DomainConstraintError, match="Max bound must be a real number"):
            Max(bound)

    def test_decimal_bound_with_float_value(self) -> None:
        assert Max(Decimal("1"))(0.5).is_ok()
        assert Max(Decimal("1"))(1.5).unwrap_err().message == "1.5 is greater than maximum Decimal('1')"

    def test_non_numeric_value_is_failure(self) -> None:
        failure = Min(10)("11").unwrap_err()
        assert failure.message == "expected real number, got str '11'"

    @pytest.mark.parametrize("bound", ["10", None, True, [1]])
    def test_non_numeric_bound_rejected_at_construction(self, bound: object) -> None:
        with pytest.raises(DomainConstraintError, match="Min bound must be a real number"):
            Min(bound)


class TestMax:
    @pytest.mark.parametrize(
        ("value", "valid"),
        [
            pytest.param(10.0, True, id="upper-limit"),
            pytest.param(9.0, True, id="normal"),
            pytest.param(10.00001, False, id="failure"),
        ],
    )
    def test_bounds(self, value: float, valid: bool) -> None:
        assert Max(10.0)(value).is_ok() is valid

    def test_message_names_value_and_bound(self) -> None:
        assert Max(10.0)(10.5).unwrap_err().message == "10.5 is greater than maximum 10.0"

    def test_non_numeric_bound_rejected(self) -> None:
        with pytest.raises(DomainConstraintError):
            Max("z")


class TestRangeInclusive:
    @pytest.mark.parametrize(
        ("value", "valid"),
        [
            pytest.param(10, True, id="lower-limit"),
            pytest.param(16, True, id="upper-limit"),
            pytest.param(9, False, id="lower-limit-failure"),
            pytest.param(17, False, id="upper-limit-failure"),
            pytest.param(12, True, id="normal"),
        ],
    )
    def test_bounds(self, value: int, valid: bool) -> None:
        assert RangeInclusive(10, 16)(value).is_ok() is valid

    def test_reports_min_failure_below_range(self) -> None:
        assert RangeInclusive(10, 16)(9).unwrap_err() == Min(10)(9).unwrap_err()

    def test_reports_max_failure_above_range(self) -> None:
        assert RangeInclusive(10, 16)(17).unwrap_err() == Max(16)(17).unwrap_err()

    def test_inverted_range_rejects_everything(self) -> None:
        inverted = RangeInclusive(5, 1)
        assert inverted(0).unwrap_err().message == "0 is less than minimum 5"
        assert inverted(3).unwrap_err().message == "3 is less than minimum 5"
        assert inverted(9).unwrap_err().message == "9 is greater than maximum 1"

    def test_equality_ignores_internal_chain(self) -> None:
        assert RangeInclusive(1, 2) == RangeInclusive(1, 2)
        assert RangeInclusive(1, 2).constraint_name == "range[1, 2]"

    def test_bad_bounds_rejected_at_construction(self) -> None:
        with pytest.raises(DomainConstraintError, match="Max bound"):
            RangeInclusive(1, "9")


class TestEnum:
    @pytest.mark.parametrize(
        ("value", "valid"),
        [
            pytest.param("hello", True, id="valid-1"),
            pytest.param("bar", True, id="valid-2"),
            pytest.param("helloee", False, id="invalid"),
        ],
    )
    def test_membership(self, value: str, valid: bool) -> None:
        assert Enum("hello", "bar", "foo")(value).is_ok() is valid

    def test_message_lists_value_and_allowed_set(self) -> None:
        failure = Enum("hello", "bar", "foo")("helloee").unwrap_err()
        assert failure.message == "'helloee' not in ['hello', 'bar', 'foo']"

    def test_empty_enum_always_fails(self) -> None:
        assert Enum()("anything").unwrap_err().message == "'anything' not in []"

    def test_unhashable_members(self) -> None:
        rule = Enum([1, 2], {"a": 1})
        assert rule([1, 2]).is_ok()
        assert rule({"a": 1}).is_ok()
        assert rule([2, 1]).is_err()

    def test_uses_equality_not_identity(self) -> None:
        assert Enum(1, 2)(1.0).is_ok()


class TestRegex:
    class MyString(str):
        pass

    @pytest.mark.parametrize(
        ("value", "valid"),
        [
            pytest.param("foo1y", True, id="valid-1"),
            pytest.param("foo1ttthsyy", True, id="valid-2"),
            pytest.param("fooy", False, id="invalid-no-digit"),
            pytest.param("fooOy", False, id="invalid-letter"),
        ],
    )
    def test_pattern(self, value: str, valid: bool) -> None:
        assert Regex("foo[1-7].*y")(self.MyString(value)).is_ok() is valid

    def test_unanchored_search(self) -> None:
        assert Regex("foo[1-7].*y")("xxfoo3yy").is_ok()

    def test_message_names_value_and_pattern(self) -> None:
        failure = Regex("foo[1-7].*y")("fooy").unwrap_err()
        assert failure.message == "'fooy' does not match pattern 'foo[1-7].*y'"

    def test_flags(self) -> None:
        assert Regex("^FOO", re.IGNORECASE)("foo").is_ok()
        assert Regex("^FOO")("foo").is_err()

    def test_malformed_pattern_is_failure_not_exception(self) -> None:
        rule = Regex("[unclosed(")
        result = rule("anything")
        assert result.is_err()
        assert result.unwrap_err().message.startswith("invalid pattern '[unclosed(':")
        # reported again on every application
        assert rule("again").is_err()

    def test_non_string_value_is_failure(self) -> None:
        assert Regex("1")(1).unwrap_err().message == "expected string, got int 1"

    def test_non_string_pattern_rejected_at_construction(self) -> None:
        with pytest.raises(DomainConstraintError, match="Regex pattern must be a string"):
            Regex(123)  # type: ignore[arg-type]


class TestRulePurity:
    @pytest.mark.parametrize(
        ("rule", "value"),
        [
            (Min(7), 3),
            (Max(7), 3),
            (RangeInclusive(1, 2), 5),
            (Enum("a"), "b"),
            (Regex("x+"), "y"),
            (Regex("("), "y"),
        ],
    )
    def test_same_input_same_result(self, rule, value) -> None:
        assert rule(value) == rule(value)

    def test_rules_are_frozen(self) -> None:
        rule = Min(3)
        with pytest.raises(AttributeError):
            rule.bound = 4  # type: ignore[misc]
