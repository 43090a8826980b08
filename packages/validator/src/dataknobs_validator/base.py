"""Validator base class: presence gate, transformations and rule execution.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, ClassVar

from .codes import ErrorCode
from .result import ValidationError, ValidationResult
from .rules import Rule, RuleOutcome

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "is required"

Transformation = Callable[[Any], Any]


def is_absent(value: Any) -> bool:
    """Check whether a value counts as missing: ``None`` or the empty string."""
    return value is None or (isinstance(value, str) and value == "")


class Validator:
    """Base class for all validators.

    A validator is built by chaining calls that each append a rule or a
    transformation and return the same instance. Calling :meth:`validate`
    then runs the pipeline against one value:

    1. A required validator fails absent values (``None`` or ``""``) with a
       single ``REQUIRED`` error; an optional one accepts them. Either way
       nothing else runs and the value is returned untouched.
    2. Transformations run in the order they were added.
    3. Every rule runs against the transformed value and all failures are
       collected.

    Example:
        ```python
        result = string().trim().min(3).validate("  hi  ")
        result.failed          # True
        result.value           # 'hi'
        result.joined_message  # 'must be at least 3 characters'
        ```

    Subclasses add typed rule methods on top of :meth:`_add_rule` and
    :meth:`_add_transform`.
    """

    #: Name under which the factory builds this validator type
    type_name: ClassVar[str] = "any"

    #: Builder methods that configuration may invoke
    RULE_METHODS: ClassVar[frozenset[str]] = frozenset({"required", "optional"})

    def __init__(self) -> None:
        self._rules: list[Rule] = []
        self._transformations: list[Transformation] = []
        self._required = False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(required={self._required}, "
            f"rules={[rule.name for rule in self._rules]}, "
            f"transformations={len(self._transformations)})"
        )

    @property
    def is_required(self) -> bool:
        return self._required

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    @property
    def transformations(self) -> tuple[Transformation, ...]:
        return tuple(self._transformations)

    def required(self) -> Validator:
        """Reject absent values (``None`` or ``""``) with a ``REQUIRED`` error."""
        self._required = True
        return self

    def optional(self) -> Validator:
        """Accept absent values without running any rule (the default)."""
        self._required = False
        return self

    def custom(
        self,
        check: Callable[[Any], RuleOutcome],
        message: str | None = None,
        code: ErrorCode | str = ErrorCode.INVALID,
    ) -> Validator:
        """Add a caller-supplied rule.

        Args:
            check: Callable returning True to pass, or False, a message
                string or a ValidationError to fail
            message: Message reported instead of the one ``check`` returns
            code: Code for string and False failures

        Returns:
            Self for chaining
        """
        return self._add_rule(code, check, message=message, name="custom")

    def transform(self, fn: Transformation) -> Validator:
        """Add a caller-supplied transformation, run before any rule."""
        return self._add_transform(fn)

    def validate(self, value: Any) -> ValidationResult:
        """Run the pipeline against ``value``.

        Args:
            value: Value to validate

        Returns:
            ValidationResult carrying every error and the transformed value
        """
        if is_absent(value):
            if self._required:
                return ValidationResult.failure(
                    value, [ValidationError(REQUIRED_MESSAGE, ErrorCode.REQUIRED)]
                )
            return ValidationResult.success(value)

        # Snapshot so builder calls made meanwhile cannot affect this run
        transformations = tuple(self._transformations)
        rules = tuple(self._rules)

        transformed = value
        for transformation in transformations:
            transformed = transformation(transformed)

        errors: list[ValidationError] = []
        for rule in rules:
            errors.extend(rule.evaluate(transformed))

        logger.debug(
            f"{type(self).__name__} ran {len(rules)} rules, {len(errors)} errors"
        )

        if errors:
            return ValidationResult.failure(transformed, errors)
        return ValidationResult.success(transformed)

    def _add_rule(
        self,
        code: ErrorCode | str,
        check: Callable[[Any], RuleOutcome],
        message: str | None = None,
        name: str | None = None,
        **params: Any,
    ) -> Validator:
        """Append a rule (used by subclasses).

        Args:
            code: Code attached to failures reported as strings
            check: Callable receiving the transformed value
            message: Optional custom message overriding the check's own
            name: Rule name, defaults to the code
            **params: Rule parameters, kept on the Rule for introspection

        Returns:
            Self for chaining
        """
        self._rules.append(
            Rule(
                name=name or str(code),
                code=code,
                check=check,
                message=message,
                params=params,
            )
        )
        return self

    def _add_transform(self, fn: Transformation) -> Validator:
        """Append a transformation (used by subclasses)."""
        self._transformations.append(fn)
        return self
