"""Rule definitions and the outcomes a rule check may produce.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Union

from .codes import ErrorCode
from .result import ValidationError

DEFAULT_FAILURE_MESSAGE = "is invalid"


@dataclass(frozen=True)
class NestedErrors:
    """Outcome of a rule that validated the parts of a value.

    Every error is collected into the result as-is, so a single rule can
    contribute many errors.
    """

    errors: tuple[ValidationError, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))


# What a rule check may return: True to pass, or a failure descriptor
RuleOutcome = Union[bool, str, ValidationError, NestedErrors]


@dataclass(frozen=True)
class Rule:
    """A named, parameterized check appended to a validator.

    Attributes:
        name: Name of the builder method that added the rule
        code: Code given to string failures reported by ``check``
        check: Callable receiving the transformed value
        message: Custom message replacing the one ``check`` reports
        params: Rule parameters, kept for introspection; errors carry empty meta
    """

    name: str
    code: ErrorCode | str
    check: Callable[[Any], RuleOutcome]
    message: str | None = None
    params: dict[str, Any] = field(default_factory=dict, hash=False)

    def evaluate(self, value: Any) -> list[ValidationError]:
        """Run the check and normalize its outcome into a list of errors.

        Args:
            value: The (transformed) value under validation

        Returns:
            Empty list when the rule passes
        """
        outcome = self.check(value)

        if outcome is True:
            return []
        if isinstance(outcome, NestedErrors):
            return list(outcome.errors)
        if isinstance(outcome, ValidationError):
            return [outcome]

        if self.message is not None:
            message = self.message
        elif isinstance(outcome, str):
            message = outcome
        else:
            message = DEFAULT_FAILURE_MESSAGE
        return [ValidationError(message, self.code)]
