"""Exception hierarchy for the validator package.

Validation failures are never raised: they are reported as
:class:`~dataknobs_validator.result.ValidationError` records inside a
:class:`~dataknobs_validator.result.ValidationResult`. The exceptions here
are reserved for mistakes made while *building* validators, such as a
malformed configuration mapping or an unreadable configuration file.

Example:
    ```python
    from dataknobs_validator.exceptions import ConfigurationError, ValidatorError

    try:
        validator = load_validator("rules/user.yaml")
    except ConfigurationError as e:
        logger.error(f"Bad validator config: {e}")
        if e.context:
            logger.error(f"Context: {e.context}")
    ```
"""

from typing import Any, Dict


class ValidatorError(Exception):
    """Base exception for the validator package.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (rule names, paths, etc.)
        details: Alternative to context (both are supported)

    Example:
        ```python
        error = ValidatorError(
            "Unknown rule",
            context={"rule": "minimum", "validator": "string"}
        )
        str(error)
        # 'Unknown rule'
        error.context
        # {'rule': 'minimum', 'validator': 'string'}
        ```
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        # Details takes precedence if both are provided
        self.context = details or context or {}
        self.details = self.context


class ConfigurationError(ValidatorError):
    """Raised when a validator cannot be built from configuration.

    Common scenarios include:
    - Unknown validator type
    - Unknown rule name, or a rule not offered by the validator type
    - Rule arguments rejected by the rule method
    - Missing or unsupported configuration file

    Example:
        ```python
        raise ConfigurationError(
            "Unknown validator type: 'float'",
            context={"type": "float", "available": ["array", "integer", "string"]}
        )
        ```
    """

    pass


class SerializationError(ValidatorError):
    """Raised when a serialized validation error cannot be restored.

    Example:
        ```python
        raise SerializationError(
            "Missing required key 'code'",
            context={"data": {"message": "is required"}}
        )
        ```
    """

    pass


__all__ = [
    "ValidatorError",
    "ConfigurationError",
    "SerializationError",
]
