"""DataKnobs Validator Package

Fluent, chainable validation of single values with structured errors:

```python
from dataknobs_validator import array, integer, string

result = string().trim().min(5).validate("  hello  ")
result.succeeded  # True
result.value      # 'hello'

result = array().of(integer().positive()).validate([1, -2])
result.errors[0].path  # (1,)
result.errors[0].code  # ErrorCode.NOT_POSITIVE
```
"""

from .arrays import ArrayValidator
from .base import Validator
from .codes import ErrorCode
from .exceptions import ConfigurationError, SerializationError, ValidatorError
from .factory import (
    FactoryBase,
    ValidatorFactory,
    available_types,
    load_validator,
    validator_factory,
)
from .integers import IntegerValidator
from .result import Result, ValidationError, ValidationResult
from .rules import NestedErrors, Rule
from .strings import StringValidator

__version__ = "0.1.0"


def string() -> StringValidator:
    """Create a new string validator."""
    return StringValidator()


def integer() -> IntegerValidator:
    """Create a new integer validator."""
    return IntegerValidator()


def array() -> ArrayValidator:
    """Create a new array validator."""
    return ArrayValidator()


__all__ = [
    # Entry points
    "string",
    "integer",
    "array",
    # Validators
    "Validator",
    "StringValidator",
    "IntegerValidator",
    "ArrayValidator",
    # Results
    "ValidationError",
    "ValidationResult",
    "Result",
    "ErrorCode",
    "Rule",
    "NestedErrors",
    # Configuration
    "FactoryBase",
    "ValidatorFactory",
    "validator_factory",
    "load_validator",
    "available_types",
    # Exceptions
    "ValidatorError",
    "ConfigurationError",
    "SerializationError",
]
