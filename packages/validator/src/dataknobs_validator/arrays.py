"""Array validation rules, element-wise validation and transformations.
"""

from __future__ import annotations

from typing import Any

from .base import Validator
from .codes import ErrorCode
from .result import ValidationError
from .rules import NestedErrors

SEQUENCE_TYPES = (list, tuple)


def is_array(value: Any) -> bool:
    return isinstance(value, SEQUENCE_TYPES)


def _check_count(count: int, what: str) -> None:
    if count < 0:
        raise ValueError(f"{what} cannot be negative: {count}")


def _all_unique(items: list | tuple) -> bool:
    """Check that no two items are equal, without requiring hashability."""
    seen: list[Any] = []
    for item in items:
        if item in seen:
            return False
        seen.append(item)
    return True


def _flatten(items: list | tuple, depth: int | None) -> list:
    flat: list[Any] = []
    for item in items:
        if is_array(item) and (depth is None or depth > 0):
            flat.extend(_flatten(item, None if depth is None else depth - 1))
        else:
            flat.append(item)
    return flat


class ArrayValidator(Validator):
    """Validator for ``list`` and ``tuple`` values.

    The first rule checks the type and reports ``NOT_ARRAY``; the other rules
    and the transformations leave non-sequences alone.

    Use :meth:`of` to validate every element with another validator. Errors
    found inside element ``i`` are reported with ``i`` prepended to their
    path, so nested arrays produce paths such as ``(1, 1)``:

    ```python
    matrix = array().of(array().of(integer().positive()))
    result = matrix.validate([[1, 2], [3, -4]])
    result.errors[0].path  # (1, 1)
    ```
    """

    type_name = "array"
    RULE_METHODS = Validator.RULE_METHODS | {
        "min_items", "max_items", "exact_length", "non_empty", "unique",
        "contains", "includes",
        "compact", "flatten",
    }

    def __init__(self) -> None:
        super().__init__()
        self._add_rule(
            ErrorCode.NOT_ARRAY,
            lambda value: is_array(value) or "must be an array",
            name="type",
        )

    def _add_array_rule(self, code, check, message, name, **params) -> ArrayValidator:
        return self._add_rule(
            code,
            lambda value: check(value) if is_array(value) else True,
            message=message,
            name=name,
            **params,
        )

    # Size

    def min_items(self, count: int, message: str | None = None) -> ArrayValidator:
        _check_count(count, "min items")
        return self._add_array_rule(
            ErrorCode.MIN_ITEMS,
            lambda value: len(value) >= count or f"must have at least {count} items",
            message, "min_items", min=count,
        )

    def max_items(self, count: int, message: str | None = None) -> ArrayValidator:
        _check_count(count, "max items")
        return self._add_array_rule(
            ErrorCode.MAX_ITEMS,
            lambda value: len(value) <= count or f"must have at most {count} items",
            message, "max_items", max=count,
        )

    def exact_length(self, count: int, message: str | None = None) -> ArrayValidator:
        _check_count(count, "length")
        return self._add_array_rule(
            ErrorCode.LENGTH,
            lambda value: len(value) == count or f"must have exactly {count} items",
            message, "exact_length", length=count,
        )

    def non_empty(self, message: str | None = None) -> ArrayValidator:
        return self._add_array_rule(
            ErrorCode.EMPTY,
            lambda value: len(value) > 0 or "cannot be empty",
            message, "non_empty",
        )

    # Content

    def unique(self, message: str | None = None) -> ArrayValidator:
        """Reject arrays holding two equal elements."""
        return self._add_array_rule(
            ErrorCode.UNIQUE,
            lambda value: _all_unique(value) or "must contain unique elements",
            message, "unique",
        )

    def contains(self, element: Any, message: str | None = None) -> ArrayValidator:
        return self._add_array_rule(
            ErrorCode.MISSING_ELEMENT,
            lambda value: element in value or f"must contain {element!r}",
            message, "contains", element=element,
        )

    includes = contains

    def of(self, validator: Validator) -> ArrayValidator:
        """Validate every element with ``validator``.

        Args:
            validator: Validator applied to each element in turn

        Returns:
            Self for chaining

        Raises:
            TypeError: If ``validator`` is not a Validator
        """
        if not isinstance(validator, Validator):
            raise TypeError(
                f"of() expects a Validator, got {type(validator).__name__}"
            )

        def check(value: Any):
            errors = _validate_elements(value, validator)
            return NestedErrors(errors) if errors else True

        return self._add_array_rule(ErrorCode.INVALID, check, None, "of")

    # Transformations

    def compact(self) -> ArrayValidator:
        """Drop ``None`` elements before the rules run."""
        return self._add_transform(
            lambda value: [item for item in value if item is not None]
            if is_array(value) else value
        )

    def flatten(self, depth: int | None = None) -> ArrayValidator:
        """Flatten nested lists and tuples.

        Args:
            depth: Number of nesting levels to remove; all levels when None

        Returns:
            Self for chaining
        """
        if depth is not None:
            _check_count(depth, "flatten depth")
        return self._add_transform(
            lambda value: _flatten(value, depth) if is_array(value) else value
        )


def _validate_elements(items: list | tuple, validator: Validator) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for index, item in enumerate(items):
        result = validator.validate(item)
        if result.succeeded:
            continue
        errors.extend(error.with_prefix(index) for error in result.errors)
    return errors
