"""Per-field composition of primitive checks.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from typing import Any, Union

from .checks import CHECK_TYPES, Check
from .exceptions import ConfigurationError
from .result import ValidationError
from .translate import TranslateFn, translate_default

logger = logging.getLogger(__name__)

#: A single-constraint rule: True on pass, the translated message on failure
FieldRule = Callable[[Any], Union[bool, str]]

#: Options for one field: check name -> check configuration or instance
FieldOptions = Mapping[str, Any]

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")

# Configuration keys that are not valid Python parameter names
_RESERVED_KEYS = {"is": "is_"}


def _snake_case(key: str) -> str:
    key = _RESERVED_KEYS.get(key, key)
    return _CAMEL_BOUNDARY.sub(r"_\1", key).lower()


def build_check(check_type: type[Check], config: Any) -> Check:
    """Build a check from its configuration.

    Args:
        check_type: Check class to instantiate
        config: A mapping of attributes (snake_case or camelCase keys), ``True``
            for a check without attributes, or an already built check

    Returns:
        Check instance

    Raises:
        ConfigurationError: If the configuration is not a mapping or instance
    """
    if isinstance(config, check_type):
        return config
    if config is True:
        return check_type()
    if not isinstance(config, Mapping):
        raise ConfigurationError(
            f"Options for '{check_type.name}' must be a mapping, got {type(config).__name__}",
            context={"check": check_type.name},
        )

    accepted = check_type.attributes
    kwargs = {}
    for key, value in config.items():
        attr = _snake_case(str(key))
        if attr not in accepted:
            logger.warning(f"Ignoring unknown option '{key}' for {check_type.name} check")
            continue
        kwargs[attr] = value
    return check_type(**kwargs)


class FieldValidator:
    """Ordered checks for a single field.

    Checks always run in the order presence, length, numericality, inclusion,
    format, whatever order the options name them in, and evaluation stops at
    the first failure.

    Example:
        ```python
        title = FieldValidator({"presence": {}, "length": {"max": 2}})
        title.check("")     # ValidationError(kind='presence')
        title.check("bad")  # ValidationError(kind='tooLong', options={'count': 2})
        ```
    """

    def __init__(self, options: FieldOptions | None = None):
        """Initialize field validator.

        Args:
            options: Check name -> configuration; names that are not one of the
                five check kinds are ignored
        """
        options = options or {}
        known = {check_type.name for check_type in CHECK_TYPES}
        for name in options:
            if name not in known:
                logger.warning(f"Ignoring unknown check '{name}'")

        checks = []
        for check_type in CHECK_TYPES:
            config = options.get(check_type.name)
            if config is None or config is False:
                continue
            checks.append(build_check(check_type, config))
        self._checks: tuple[Check, ...] = tuple(checks)

    @property
    def checks(self) -> tuple[Check, ...]:
        return self._checks

    @property
    def kinds(self) -> list[str]:
        """Names of the configured checks, in evaluation order."""
        return [c.name for c in self._checks]

    def __len__(self) -> int:
        return len(self._checks)

    def __repr__(self) -> str:
        return f"FieldValidator({list(self._checks)!r})"

    def check(self, value: Any) -> ValidationError | None:
        """Return the first error produced by the checks, or None."""
        for c in self._checks:
            err = c.check(value)
            if err is not None:
                return err
        return None

    def rules(self, translate: TranslateFn | None = None) -> list[FieldRule]:
        """Build one rule per check, for displaying constraints one at a time.

        Args:
            translate: Error translator; defaults to ``translate_default``

        Returns:
            Rules in evaluation order
        """
        translate_fn = translate or translate_default
        return [self._rule(c, translate_fn) for c in self._checks]

    @staticmethod
    def _rule(c: Check, translate: TranslateFn) -> FieldRule:
        def rule(value: Any) -> bool | str:
            err = c.check(value)
            if err is not None:
                return translate(err)
            return True

        rule.__name__ = f"{c.name}_rule"
        return rule
