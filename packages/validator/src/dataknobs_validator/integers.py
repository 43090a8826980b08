"""Integer validation rules and coercion.
"""

from __future__ import annotations

import re
from numbers import Number
from typing import Any

from .base import Validator
from .codes import ErrorCode

NOT_INTEGER_MESSAGE = "must be an integer"

DECIMAL_INTEGER_REGEX = re.compile(r"[+-]?[0-9]+", re.ASCII)


def is_integer(value: Any) -> bool:
    """Check for an ``int`` that is not a ``bool``."""
    return isinstance(value, int) and not isinstance(value, bool)


def coerce_integer(value: Any) -> Any:
    """Convert ``value`` to an ``int`` when it has an integer reading.

    Decimal-integer strings (surrounding whitespace and a sign are allowed)
    are parsed, and real numbers are truncated toward zero. Anything else,
    including booleans, NaN and infinities, is returned unchanged.

    Args:
        value: Value to coerce

    Returns:
        The coerced integer, or ``value`` itself
    """
    if is_integer(value) or isinstance(value, bool):
        return value

    if isinstance(value, str):
        text = value.strip()
        if DECIMAL_INTEGER_REGEX.fullmatch(text):
            try:
                return int(text)
            except ValueError:
                return value
        return value

    if isinstance(value, Number):
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError):
            return value

    return value


class IntegerValidator(Validator):
    """Validator for ``int`` values.

    The first rule checks the type and reports ``NOT_INTEGER``; the range and
    divisibility rules ignore anything that is not an integer. ``positive``
    and ``negative`` report a non-integer under their own code as well.
    """

    type_name = "integer"
    RULE_METHODS = Validator.RULE_METHODS | {
        "min", "max", "between", "greater_than", "less_than",
        "positive", "negative", "non_negative", "non_positive",
        "multiple_of", "even", "odd",
        "coerce",
    }

    def __init__(self) -> None:
        super().__init__()
        self._add_rule(
            ErrorCode.NOT_INTEGER,
            lambda value: is_integer(value) or NOT_INTEGER_MESSAGE,
            name="type",
        )

    def _add_integer_rule(self, code, check, message, name, **params) -> IntegerValidator:
        return self._add_rule(
            code,
            lambda value: check(value) if is_integer(value) else True,
            message=message,
            name=name,
            **params,
        )

    # Range

    def min(self, minimum: int, message: str | None = None) -> IntegerValidator:
        return self._add_integer_rule(
            ErrorCode.TOO_SMALL,
            lambda value: value >= minimum or f"must be at least {minimum}",
            message, "min", min=minimum,
        )

    def max(self, maximum: int, message: str | None = None) -> IntegerValidator:
        return self._add_integer_rule(
            ErrorCode.TOO_LARGE,
            lambda value: value <= maximum or f"must be at most {maximum}",
            message, "max", max=maximum,
        )

    def between(self, low: int, high: int, message: str | None = None) -> IntegerValidator:
        """Require ``low <= value <= high``.

        Raises:
            ValueError: If ``low`` is greater than ``high``
        """
        if low > high:
            raise ValueError(f"min ({low}) cannot be greater than max ({high})")
        return self._add_integer_rule(
            ErrorCode.NOT_IN_RANGE,
            lambda value: low <= value <= high or f"must be between {low} and {high}",
            message, "between", min=low, max=high,
        )

    def greater_than(self, bound: int, message: str | None = None) -> IntegerValidator:
        return self._add_integer_rule(
            ErrorCode.NOT_GREATER_THAN,
            lambda value: value > bound or f"must be greater than {bound}",
            message, "greater_than", bound=bound,
        )

    def less_than(self, bound: int, message: str | None = None) -> IntegerValidator:
        return self._add_integer_rule(
            ErrorCode.NOT_LESS_THAN,
            lambda value: value < bound or f"must be less than {bound}",
            message, "less_than", bound=bound,
        )

    # Sign

    def positive(self, message: str | None = None) -> IntegerValidator:
        def check(value: Any):
            if not is_integer(value):
                return NOT_INTEGER_MESSAGE
            return value > 0 or "must be positive"

        return self._add_rule(ErrorCode.NOT_POSITIVE, check, message=message, name="positive")

    def negative(self, message: str | None = None) -> IntegerValidator:
        def check(value: Any):
            if not is_integer(value):
                return NOT_INTEGER_MESSAGE
            return value < 0 or "must be negative"

        return self._add_rule(ErrorCode.NOT_NEGATIVE, check, message=message, name="negative")

    def non_negative(self, message: str | None = None) -> IntegerValidator:
        return self._add_integer_rule(
            ErrorCode.NEGATIVE,
            lambda value: value >= 0 or "must be non-negative",
            message, "non_negative",
        )

    def non_positive(self, message: str | None = None) -> IntegerValidator:
        return self._add_integer_rule(
            ErrorCode.POSITIVE,
            lambda value: value <= 0 or "must be non-positive",
            message, "non_positive",
        )

    # Divisibility

    def multiple_of(self, divisor: int, message: str | None = None) -> IntegerValidator:
        """Require ``value`` to be divisible by ``divisor``, whatever its sign.

        Raises:
            ValueError: If ``divisor`` is zero
        """
        if divisor == 0:
            raise ValueError("divisor cannot be zero")
        return self._add_integer_rule(
            ErrorCode.NOT_MULTIPLE_OF,
            lambda value: value % divisor == 0 or f"must be a multiple of {divisor}",
            message, "multiple_of", divisor=divisor,
        )

    def even(self, message: str | None = None) -> IntegerValidator:
        return self._add_integer_rule(
            ErrorCode.NOT_EVEN,
            lambda value: value % 2 == 0 or "must be even",
            message, "even",
        )

    def odd(self, message: str | None = None) -> IntegerValidator:
        return self._add_integer_rule(
            ErrorCode.NOT_ODD,
            lambda value: value % 2 != 0 or "must be odd",
            message, "odd",
        )

    # Transformations

    def coerce(self) -> IntegerValidator:
        """Parse strings and truncate floats to ``int`` before the rules run.

        Values without an integer reading are left alone, so the type check
        reports them as ``NOT_INTEGER``.
        """
        return self._add_transform(coerce_integer)
