"""Validation result types: structured error records and the pipeline outcome.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from .codes import ErrorCode
from .exceptions import SerializationError

PathSegment = int | str


def _normalize_code(code: ErrorCode | str) -> ErrorCode | str:
    """Promote known string codes to their ErrorCode member."""
    if isinstance(code, ErrorCode):
        return code
    try:
        return ErrorCode(code)
    except ValueError:
        return code


@dataclass(frozen=True)
class ValidationError:
    """Immutable record of one failed rule.

    This is a value object, not an exception: it is collected into a
    :class:`ValidationResult` and never raised. Errors reported by nested
    element validation carry the element's position in ``path``; an empty
    path designates the validated value itself.
    """

    message: str
    code: ErrorCode | str = ErrorCode.INVALID
    path: tuple[PathSegment, ...] = ()
    meta: dict[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", _normalize_code(self.code))
        if not isinstance(self.path, tuple):
            object.__setattr__(self, "path", tuple(self.path))

    def with_prefix(self, *segments: PathSegment) -> ValidationError:
        """Copy this error with ``segments`` prepended to its path.

        Args:
            segments: Path segments leading from the outer value to this one

        Returns:
            New ValidationError with the same message, code and meta
        """
        return ValidationError(
            message=self.message,
            code=self.code,
            path=(*segments, *self.path),
            meta=dict(self.meta),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary of builtin types."""
        return {
            "message": self.message,
            "code": str(self.code),
            "path": list(self.path),
            "meta": dict(self.meta),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValidationError:
        """Rebuild an error from the output of :meth:`to_dict`.

        Args:
            data: Mapping with ``message`` and ``code`` and optionally
                ``path`` and ``meta``

        Returns:
            The restored ValidationError

        Raises:
            SerializationError: If required keys are missing or malformed
        """
        if not isinstance(data, dict):
            raise SerializationError(
                f"Expected a mapping, got {type(data).__name__}",
                context={"data": data},
            )
        for key in ("message", "code"):
            if key not in data:
                raise SerializationError(
                    f"Missing required key '{key}'", context={"data": data}
                )

        path = data.get("path") or []
        meta = data.get("meta") or {}
        if not isinstance(path, (list, tuple)) or not isinstance(meta, dict):
            raise SerializationError(
                "'path' must be a list and 'meta' a mapping",
                context={"data": data},
            )
        return cls(
            message=str(data["message"]),
            code=data["code"],
            path=tuple(path),
            meta=dict(meta),
        )


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of running a validator against one input value.

    ``value`` is the input after all transformations, surfaced even when
    validation fails; when the value was absent (``None`` or ``""``) it is
    the untransformed input.
    """

    succeeded: bool
    errors: tuple[ValidationError, ...] = ()
    value: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))
        if self.succeeded == bool(self.errors):
            raise ValueError(
                "A result succeeds if and only if it has no errors "
                f"(succeeded={self.succeeded}, errors={len(self.errors)})"
            )

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.succeeded

    @property
    def failed(self) -> bool:
        return not self.succeeded

    @property
    def joined_message(self) -> str:
        """All error messages separated by ", " (empty when there are none)."""
        return ", ".join(error.message for error in self.errors)

    @property
    def codes(self) -> list[ErrorCode | str]:
        return [error.code for error in self.errors]

    def errors_at(self, path: Sequence[PathSegment]) -> list[ValidationError]:
        """Errors reported for exactly ``path``; ``()`` selects root errors."""
        wanted = tuple(path)
        return [error for error in self.errors if error.path == wanted]

    def to_dict(self) -> dict[str, Any]:
        return {
            "succeeded": self.succeeded,
            "errors": [error.to_dict() for error in self.errors],
            "value": self.value,
        }

    @classmethod
    def success(cls, value: Any) -> ValidationResult:
        """Create a successful validation result.

        Args:
            value: The validated value

        Returns:
            Successful ValidationResult
        """
        return cls(succeeded=True, errors=(), value=value)

    @classmethod
    def failure(cls, value: Any, errors: Iterable[ValidationError]) -> ValidationResult:
        """Create a failed validation result.

        Args:
            value: The value that failed validation
            errors: One or more errors

        Returns:
            Failed ValidationResult
        """
        return cls(succeeded=False, errors=tuple(errors), value=value)


# Short alias matching the name used throughout the docs
Result = ValidationResult
