"""Tests for IntegerValidator rules and coercion."""

import math
from decimal import Decimal

import pytest

from dataknobs_validator import ErrorCode, IntegerValidator, ValidationError, integer
from dataknobs_validator.integers import coerce_integer


class TestIntegerType:
    """Test the integer type check."""

    @pytest.mark.parametrize("value", [0, -7, 10**30])
    def test_integers_pass(self, value):
        assert integer().validate(value).succeeded

    @pytest.mark.parametrize("value", ["12", 1.0, True, [1], Decimal("1")])
    def test_non_integers_fail(self, value):
        result = integer().validate(value)
        assert result.errors == (ValidationError("must be an integer", ErrorCode.NOT_INTEGER),)

    def test_range_rules_skip_non_integers(self):
        """Test that a wrong type is reported only by the type check."""
        result = integer().min(1).max(5).between(1, 5).multiple_of(2).even().validate("abc")
        assert result.codes == [ErrorCode.NOT_INTEGER]

    def test_entry_point(self):
        assert isinstance(integer(), IntegerValidator)


class TestRangeRules:
    """Test min, max, between, greater_than and less_than."""

    def test_min(self):
        assert integer().min(10).validate(10).succeeded
        result = integer().min(10).validate(9)
        assert result.errors == (
            ValidationError("must be at least 10", ErrorCode.TOO_SMALL),
        )

    def test_max(self):
        assert integer().max(10).validate(10).succeeded
        assert integer().max(10).validate(11).codes == [ErrorCode.TOO_LARGE]

    def test_between_is_inclusive(self):
        validator = integer().between(1, 3)
        assert validator.validate(1).succeeded
        assert validator.validate(3).succeeded
        result = validator.validate(4)
        assert result.codes == [ErrorCode.NOT_IN_RANGE]
        assert result.joined_message == "must be between 1 and 3"
        assert validator.rules[-1].params == {"min": 1, "max": 3}

    def test_between_rejects_inverted_bounds(self):
        with pytest.raises(ValueError):
            integer().between(5, 1)

    def test_greater_than_is_exclusive(self):
        assert integer().greater_than(5).validate(6).succeeded
        assert integer().greater_than(5).validate(5).codes == [ErrorCode.NOT_GREATER_THAN]

    def test_less_than_is_exclusive(self):
        assert integer().less_than(5).validate(4).succeeded
        assert integer().less_than(5).validate(5).codes == [ErrorCode.NOT_LESS_THAN]


class TestSignRules:
    """Test positive, negative, non_negative and non_positive."""

    @pytest.mark.parametrize(
        "method,passing,failing,code",
        [
            ("positive", 1, 0, ErrorCode.NOT_POSITIVE),
            ("negative", -1, 0, ErrorCode.NOT_NEGATIVE),
            ("non_negative", 0, -1, ErrorCode.NEGATIVE),
            ("non_positive", 0, 1, ErrorCode.POSITIVE),
        ],
    )
    def test_sign(self, method, passing, failing, code):
        validator = getattr(integer(), method)()
        assert validator.validate(passing).succeeded
        assert validator.validate(failing).codes == [code]

    @pytest.mark.parametrize(
        "method,code", [("positive", ErrorCode.NOT_POSITIVE), ("negative", ErrorCode.NOT_NEGATIVE)]
    )
    def test_sign_reports_non_integers(self, method, code):
        """Test that positive and negative report a non-integer themselves."""
        result = getattr(integer(), method)().validate("abc")
        assert result.errors == (
            ValidationError("must be an integer", ErrorCode.NOT_INTEGER),
            ValidationError("must be an integer", code),
        )

    def test_positive_and_even(self):
        result = integer().positive().even().validate(-3)
        assert result.joined_message == "must be positive, must be even"


class TestDivisibilityRules:
    """Test multiple_of, even and odd."""

    @pytest.mark.parametrize("value", [9, -9, 0, 300])
    def test_multiple_of_is_sign_agnostic(self, value):
        assert integer().multiple_of(3).validate(value).succeeded

    def test_multiple_of_negative_divisor(self):
        assert integer().multiple_of(-3).validate(9).succeeded

    def test_not_multiple_of(self):
        validator = integer().multiple_of(3)
        result = validator.validate(-10)
        assert result.codes == [ErrorCode.NOT_MULTIPLE_OF]
        assert result.errors[0].meta == {}
        assert validator.rules[-1].params == {"divisor": 3}

    def test_multiple_of_zero_rejected(self):
        with pytest.raises(ValueError):
            integer().multiple_of(0)

    def test_even_and_odd(self):
        assert integer().even().validate(-4).succeeded
        assert integer().even().validate(-3).codes == [ErrorCode.NOT_EVEN]
        assert integer().odd().validate(-3).succeeded
        assert integer().odd().validate(4).codes == [ErrorCode.NOT_ODD]


class TestCoercion:
    """Test the coerce transformation."""

    def test_string_is_parsed(self):
        result = integer().coerce().min(100).validate("150")
        assert result.succeeded
        assert result.value == 150

    def test_float_truncates(self):
        result = integer().coerce().validate(123.7)
        assert result.succeeded
        assert result.value == 123

    def test_negative_float_truncates_toward_zero(self):
        assert integer().coerce().validate(-2.9).value == -2

    @pytest.mark.parametrize("value", ["abc", "12.5", "0x1A", "1_000"])
    def test_unparseable_strings_pass_through(self, value):
        """Test that coercion failures are reported by the type check."""
        result = integer().coerce().validate(value)
        assert result.value == value
        assert result.codes == [ErrorCode.NOT_INTEGER]

    def test_overlong_digit_string_passes_through(self):
        """Test that digit strings beyond int()'s limit are left for the type check."""
        value = "9" * 5000
        result = integer().coerce().validate(value)
        assert result.codes == [ErrorCode.NOT_INTEGER]
        assert result.value == value

    @pytest.mark.parametrize(
        "value,expected",
        [(" 42 ", 42), ("+7", 7), ("-15", -15), (Decimal("9.99"), 9), (5, 5)],
    )
    def test_coerce_integer(self, value, expected):
        assert coerce_integer(value) == expected

    @pytest.mark.parametrize("value", [True, math.nan, math.inf, None, [1]])
    def test_coerce_integer_leaves_other_values(self, value):
        result = coerce_integer(value)
        assert result is value

    def test_coerce_then_range(self, percentage_validator):
        assert percentage_validator.validate("55").value == 55
        assert percentage_validator.validate("101").codes == [ErrorCode.NOT_IN_RANGE]
