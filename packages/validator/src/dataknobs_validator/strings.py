"""String validation rules and transformations.
"""

from __future__ import annotations

import re
from re import Pattern as RegexPattern
from typing import Any

from .base import Validator
from .codes import ErrorCode

EMAIL_REGEX = re.compile(r"[\w+\-.]+@[a-z\d-]+(\.[a-z\d-]+)*\.[a-z]+", re.IGNORECASE | re.ASCII)
URL_REGEX = re.compile(r"https?://[^\s/$.?#].[^\s]*", re.IGNORECASE)
ALPHANUMERIC_REGEX = re.compile(r"[a-z0-9]+", re.IGNORECASE | re.ASCII)
ALPHA_REGEX = re.compile(r"[a-z]+", re.IGNORECASE | re.ASCII)
NUMERIC_REGEX = re.compile(r"[0-9]+", re.ASCII)


def _check_length(length: int, what: str) -> None:
    if length < 0:
        raise ValueError(f"{what} cannot be negative: {length}")


def _on_strings(fn):
    """Wrap a str -> str transformation so other values pass through."""

    def transformation(value: Any) -> Any:
        return fn(value) if isinstance(value, str) else value

    return transformation


class StringValidator(Validator):
    """Validator for ``str`` values.

    Installs a type check as its first rule; every other rule ignores values
    that are not strings, so a wrong type is reported once as ``NOT_STRING``.
    Pattern rules match the whole string.
    """

    type_name = "string"
    RULE_METHODS = Validator.RULE_METHODS | {
        "min", "max", "exact_length",
        "email", "url", "regex", "alphanumeric", "alpha", "numeric_string",
        "non_empty", "starts_with", "ends_with",
        "trim", "lowercase", "uppercase",
        "non_empty_string", "trimmed_email",
    }

    def __init__(self) -> None:
        super().__init__()
        self._add_rule(
            ErrorCode.NOT_STRING,
            lambda value: isinstance(value, str) or "must be a string",
            name="type",
        )

    def _add_string_rule(self, code, check, message, name, **params) -> StringValidator:
        return self._add_rule(
            code,
            lambda value: check(value) if isinstance(value, str) else True,
            message=message,
            name=name,
            **params,
        )

    def _add_match_rule(self, code, regex: RegexPattern, failure: str, message, name, **params):
        return self._add_string_rule(
            code,
            lambda value: regex.fullmatch(value) is not None or failure,
            message,
            name,
            **params,
        )

    # Length

    def min(self, length: int, message: str | None = None) -> StringValidator:
        """Require at least ``length`` characters."""
        _check_length(length, "min length")
        return self._add_string_rule(
            ErrorCode.TOO_SHORT,
            lambda value: len(value) >= length or f"must be at least {length} characters",
            message, "min", min=length,
        )

    def max(self, length: int, message: str | None = None) -> StringValidator:
        """Allow at most ``length`` characters."""
        _check_length(length, "max length")
        return self._add_string_rule(
            ErrorCode.TOO_LONG,
            lambda value: len(value) <= length or f"must be at most {length} characters",
            message, "max", max=length,
        )

    def exact_length(self, length: int, message: str | None = None) -> StringValidator:
        """Require exactly ``length`` characters."""
        _check_length(length, "length")
        return self._add_string_rule(
            ErrorCode.INVALID_LENGTH,
            lambda value: len(value) == length or f"must be exactly {length} characters",
            message, "exact_length", length=length,
        )

    # Format

    def email(self, message: str | None = None) -> StringValidator:
        return self._add_match_rule(
            ErrorCode.INVALID_EMAIL, EMAIL_REGEX, "must be a valid email", message, "email"
        )

    def url(self, message: str | None = None) -> StringValidator:
        """Require an ``http://`` or ``https://`` URL."""
        return self._add_match_rule(
            ErrorCode.INVALID_URL, URL_REGEX, "must be a valid URL", message, "url"
        )

    def regex(self, pattern: str | RegexPattern, message: str | None = None) -> StringValidator:
        """Require the whole string to match ``pattern``.

        Args:
            pattern: Regex pattern (string or compiled pattern)
            message: Optional custom error message

        Returns:
            Self for chaining
        """
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        return self._add_match_rule(
            ErrorCode.INVALID_FORMAT,
            compiled,
            f"must match pattern '{compiled.pattern}'",
            message,
            "regex",
            pattern=compiled.pattern,
        )

    def alphanumeric(self, message: str | None = None) -> StringValidator:
        return self._add_match_rule(
            ErrorCode.NOT_ALPHANUMERIC,
            ALPHANUMERIC_REGEX,
            "must contain only letters and numbers",
            message,
            "alphanumeric",
        )

    def alpha(self, message: str | None = None) -> StringValidator:
        return self._add_match_rule(
            ErrorCode.NOT_ALPHA, ALPHA_REGEX, "must contain only letters", message, "alpha"
        )

    def numeric_string(self, message: str | None = None) -> StringValidator:
        return self._add_match_rule(
            ErrorCode.NOT_NUMERIC, NUMERIC_REGEX, "must contain only numbers", message, "numeric_string"
        )

    # Content

    def non_empty(self, message: str | None = None) -> StringValidator:
        """Reject strings that are empty or only whitespace."""
        return self._add_string_rule(
            ErrorCode.EMPTY,
            lambda value: bool(value.strip()) or "cannot be empty or only whitespace",
            message, "non_empty",
        )

    def starts_with(self, prefix: str, message: str | None = None) -> StringValidator:
        return self._add_string_rule(
            ErrorCode.INVALID_PREFIX,
            lambda value: value.startswith(prefix) or f"must start with '{prefix}'",
            message, "starts_with", prefix=prefix,
        )

    def ends_with(self, suffix: str, message: str | None = None) -> StringValidator:
        return self._add_string_rule(
            ErrorCode.INVALID_SUFFIX,
            lambda value: value.endswith(suffix) or f"must end with '{suffix}'",
            message, "ends_with", suffix=suffix,
        )

    # Transformations

    def trim(self) -> StringValidator:
        """Strip leading and trailing whitespace before the rules run."""
        return self._add_transform(_on_strings(str.strip))

    def lowercase(self) -> StringValidator:
        return self._add_transform(_on_strings(str.lower))

    def uppercase(self) -> StringValidator:
        return self._add_transform(_on_strings(str.upper))

    # Composites

    def non_empty_string(self) -> StringValidator:
        """Shorthand for ``required().trim().non_empty()``."""
        return self.required().trim().non_empty()

    def trimmed_email(self) -> StringValidator:
        """Shorthand for ``trim().lowercase().email()``."""
        return self.trim().lowercase().email()
