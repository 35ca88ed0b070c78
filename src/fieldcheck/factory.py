"""Factory for building validators from plain configuration.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

import yaml

from .exceptions import ConfigurationError
from .field import FieldValidator
from .validator import Validator

logger = logging.getLogger(__name__)


class ValidatorFactory:
    """Factory for creating validators from configuration.

    Configuration Options:
        fields (dict | list): Field definitions, either a mapping of field name
            to check options or a list of entries each carrying a ``name``

    Check Options:
        presence: ``{}`` or ``true``
        length: ``is``, ``min``, ``max``
        numericality: ``greater_than``, ``greater_than_or_equal_to``,
            ``equal_to``, ``less_than``, ``less_than_or_equal_to``,
            ``divisible_by``, ``only_integer`` (camelCase also accepted)
        inclusion: ``values``, or ``enum`` as a list or name -> value mapping
        format: ``pattern`` (regex string), ``details``

    Example Configuration:
        fields:
          - name: username
            presence: {}
            length:
              min: 3
              max: 20
            format:
              pattern: "[a-zA-Z0-9_]+"
          - name: age
            numericality:
              only_integer: true
              greater_than_or_equal_to: 13
    """

    def create(self, **config: Any) -> Validator:
        """Create a Validator from configuration.

        Args:
            **config: Validator configuration

        Returns:
            Validator instance

        Raises:
            ConfigurationError: If the configuration has an unusable shape
        """
        fields = self._normalize_fields(config.get("fields", {}))
        logger.info(f"Creating validator for fields: {list(fields)}")

        return Validator({
            name: FieldValidator(self._prepare_options(name, options))
            for name, options in fields.items()
        })

    def from_yaml(self, text: str) -> Validator:
        """Create a Validator from YAML text.

        Args:
            text: YAML document with the validator configuration

        Returns:
            Validator instance

        Raises:
            ConfigurationError: If the YAML cannot be parsed or is not a mapping
        """
        try:
            config = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid validator YAML: {e}") from e

        if config is None:
            config = {}
        if not isinstance(config, Mapping):
            raise ConfigurationError(
                f"Validator configuration must be a mapping, got {type(config).__name__}"
            )
        return self.create(**config)

    def _normalize_fields(self, fields: Any) -> dict[str, Any]:
        """Turn either supported ``fields`` layout into a name -> options dict."""
        if isinstance(fields, Mapping):
            return dict(fields)
        if not isinstance(fields, list):
            raise ConfigurationError(
                f"'fields' must be a mapping or a list, got {type(fields).__name__}"
            )

        normalized: dict[str, Any] = {}
        for index, entry in enumerate(fields):
            if not isinstance(entry, Mapping) or not entry.get("name"):
                raise ConfigurationError(
                    "Field entry is missing 'name'", context={"index": index}
                )
            options = dict(entry)
            name = options.pop("name")
            if name in normalized:
                logger.warning(f"Field '{name}' defined more than once, keeping the last one")
            normalized[name] = options
        return normalized

    def _prepare_options(self, name: str, options: Any) -> dict[str, Any]:
        """Convert configuration values into check constructor arguments."""
        if options is None:
            return {}
        if not isinstance(options, Mapping):
            raise ConfigurationError(
                f"Options for field '{name}' must be a mapping, got {type(options).__name__}",
                context={"field": name},
            )

        prepared = dict(options)

        inclusion = prepared.get("inclusion")
        if isinstance(inclusion, Mapping) and isinstance(inclusion.get("enum"), list):
            inclusion = dict(inclusion)
            enum_values = inclusion.pop("enum")
            inclusion.setdefault("values", enum_values)
            prepared["inclusion"] = inclusion

        fmt = prepared.get("format")
        if isinstance(fmt, Mapping) and isinstance(fmt.get("pattern"), str):
            fmt = dict(fmt)
            try:
                fmt["pattern"] = re.compile(fmt["pattern"])
            except re.error as e:
                raise ConfigurationError(
                    f"Invalid pattern for field '{name}': {e}",
                    context={"field": name, "pattern": fmt["pattern"]},
                ) from e
            prepared["format"] = fmt

        return prepared


# Singleton instance for registration
validator_factory = ValidatorFactory()
