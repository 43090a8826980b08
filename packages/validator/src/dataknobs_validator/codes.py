"""Error codes reported by the built-in rules.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Symbolic identifier naming the kind of a validation failure.

    Members compare equal to their string value, so ``ErrorCode.REQUIRED ==
    "required"``. Custom rules may use any plain string as a code.
    """

    # Base
    REQUIRED = "required"
    INVALID = "invalid"

    # String
    NOT_STRING = "not_string"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    INVALID_LENGTH = "invalid_length"
    INVALID_EMAIL = "invalid_email"
    INVALID_URL = "invalid_url"
    INVALID_FORMAT = "invalid_format"
    NOT_ALPHANUMERIC = "not_alphanumeric"
    NOT_ALPHA = "not_alpha"
    NOT_NUMERIC = "not_numeric"
    INVALID_PREFIX = "invalid_prefix"
    INVALID_SUFFIX = "invalid_suffix"

    # Integer
    NOT_INTEGER = "not_integer"
    TOO_SMALL = "too_small"
    TOO_LARGE = "too_large"
    NOT_IN_RANGE = "not_in_range"
    NOT_GREATER_THAN = "not_greater_than"
    NOT_LESS_THAN = "not_less_than"
    NOT_POSITIVE = "not_positive"
    NOT_NEGATIVE = "not_negative"
    NEGATIVE = "negative"
    POSITIVE = "positive"
    NOT_MULTIPLE_OF = "not_multiple_of"
    NOT_EVEN = "not_even"
    NOT_ODD = "not_odd"

    # Array
    NOT_ARRAY = "not_array"
    MIN_ITEMS = "min_items"
    MAX_ITEMS = "max_items"
    LENGTH = "length"
    UNIQUE = "unique"
    MISSING_ELEMENT = "missing_element"

    # Shared by string and array content checks
    EMPTY = "empty"

    def __str__(self) -> str:
        return self.value
