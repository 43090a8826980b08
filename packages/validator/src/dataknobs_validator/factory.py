"""Factories building validators from configuration mappings and files."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Type, Union

import yaml  # type: ignore[import-untyped]

from .arrays import ArrayValidator
from .base import Validator
from .exceptions import ConfigurationError
from .integers import IntegerValidator
from .strings import StringValidator

logger = logging.getLogger(__name__)

VALIDATOR_TYPES: Dict[str, Type[Validator]] = {
    cls.type_name: cls for cls in (StringValidator, IntegerValidator, ArrayValidator)
}


class FactoryBase:
    """Base class for factory objects.

    Factories that inherit from this should implement
    the create method.
    """

    def create(self, **config: Any) -> Any:
        """Create an object from configuration.

        Args:
            **config: Configuration parameters

        Returns:
            Created object
        """
        raise NotImplementedError("Subclasses must implement create method")


class ValidatorFactory(FactoryBase):
    """Factory for creating validators from configuration.

    Configuration Options:
        type (str): Validator type (string, integer, array)
        required (bool): Whether absent values fail (default: False)
        rules (list): Rule and transformation entries, applied in order
        of (dict): Array only; configuration of the element validator

    Rule Entry Forms:
        - A bare name for rules without arguments: ``trim``
        - A one-key mapping, ``{min: 3}``; a list value is spread into
          positional arguments and a mapping value is passed as keywords
        - The long form ``{name: contains, args: [3], kwargs: {}, message: ...}``

    Example Configuration:
        type: array
        required: true
        rules:
          - min_items: 1
          - unique
        of:
          type: string
          rules:
            - trim
            - lowercase
            - email
            - name: ends_with
              args: ["@example.com"]
              message: "must be a company address"
    """

    def create(self, **config: Any) -> Validator:
        """Create a Validator instance from configuration.

        Args:
            **config: Validator configuration

        Returns:
            Validator instance

        Raises:
            ConfigurationError: If the configuration cannot be applied
        """
        type_name = config.get("type")
        if type_name not in VALIDATOR_TYPES:
            raise ConfigurationError(
                f"Unknown validator type: {type_name!r}",
                context={"type": type_name, "available": sorted(VALIDATOR_TYPES)},
            )

        logger.info(f"Creating {type_name} validator")

        validator = VALIDATOR_TYPES[type_name]()
        if config.get("required", False):
            validator.required()

        rules = config.get("rules") or []
        if not isinstance(rules, list):
            raise ConfigurationError(
                "'rules' must be a list", context={"type": type_name, "rules": rules}
            )
        for entry in rules:
            self._apply_rule(validator, entry)

        if "of" in config:
            if not isinstance(validator, ArrayValidator):
                raise ConfigurationError(
                    "'of' is only supported by array validators",
                    context={"type": type_name},
                )
            element_config = config["of"]
            if not isinstance(element_config, dict):
                raise ConfigurationError(
                    "'of' must be a validator configuration mapping",
                    context={"of": element_config},
                )
            validator.of(self.create(**element_config))

        return validator

    def _apply_rule(self, validator: Validator, entry: Union[str, Dict[str, Any]]) -> None:
        """Invoke the builder method described by a rule entry.

        Args:
            validator: Validator to add the rule to
            entry: Rule entry in one of the supported forms
        """
        name, args, kwargs = self._parse_rule(entry)

        if name not in validator.RULE_METHODS:
            logger.warning(f"Unknown rule for {validator.type_name} validator: {name}")
            raise ConfigurationError(
                f"Unknown rule {name!r} for {validator.type_name} validator",
                context={
                    "rule": name,
                    "validator": validator.type_name,
                    "available": sorted(validator.RULE_METHODS),
                },
            )

        try:
            getattr(validator, name)(*args, **kwargs)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Invalid arguments for rule {name!r}: {e}",
                context={"rule": name, "args": args, "kwargs": kwargs},
            ) from e

    def _parse_rule(self, entry: Union[str, Dict[str, Any]]) -> tuple:
        """Split a rule entry into method name, positional and keyword arguments."""
        if isinstance(entry, str):
            return entry, [], {}

        if not isinstance(entry, dict):
            raise ConfigurationError(
                f"Rule entry must be a name or a mapping, got {type(entry).__name__}",
                context={"entry": entry},
            )

        if "name" in entry:
            args = entry.get("args")
            kwargs = entry.get("kwargs")
            if args is None:
                args = []
            elif not isinstance(args, list):
                args = [args]
            if kwargs is None:
                kwargs = {}
            elif not isinstance(kwargs, dict):
                raise ConfigurationError(
                    "'kwargs' must be a mapping",
                    context={"entry": entry},
                )
            kwargs = dict(kwargs)
            if "message" in entry:
                kwargs["message"] = entry["message"]
            return entry["name"], list(args), kwargs

        if len(entry) != 1:
            raise ConfigurationError(
                "Short rule entries must have exactly one key",
                context={"entry": entry},
            )

        name, value = next(iter(entry.items()))
        if value is None:
            return name, [], {}
        if isinstance(value, list):
            return name, list(value), {}
        if isinstance(value, dict):
            return name, [], dict(value)
        return name, [value], {}


def load_validator(path: Union[str, Path]) -> Validator:
    """Build a validator from a YAML or JSON configuration file.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` file holding one
            validator configuration mapping

    Returns:
        Validator instance

    Raises:
        ConfigurationError: If the file is missing, unsupported or invalid
    """
    path = Path(path).resolve()

    if not path.exists():
        raise ConfigurationError(
            f"Validator configuration file not found: {path}", context={"path": str(path)}
        )

    suffix = path.suffix.lower()
    with open(path) as f:
        try:
            if suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(f)
            elif suffix == ".json":
                data = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported file format: {suffix}", context={"path": str(path)}
                )
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Cannot parse validator configuration: {e}", context={"path": str(path)}
            ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            "Validator configuration must be a mapping", context={"path": str(path)}
        )

    logger.info(f"Loading validator from {path}")
    return validator_factory.create(**data)


def available_types() -> List[str]:
    return sorted(VALIDATOR_TYPES)


# Create singleton instance for registration
validator_factory = ValidatorFactory()
