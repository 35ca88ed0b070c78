"""Rendering of structured errors as human-readable messages.

A message template is plain text with ``{{name}}`` placeholders that are
filled from the error's options:

    ```python
    translate_default(ValidationError("tooLong", {"count": 2}))
    # 'is too long (maximum is 2 characters)'
    ```
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any

from .result import ValidationError

#: Signature of a translator accepted by ``rules()``
TranslateFn = Callable[[ValidationError], str]

FALLBACK_MESSAGE = "is invalid"

DEFAULT_MESSAGES: Mapping[str, str] = {
    "invalid": "is invalid",
    "presence": "can't be blank",
    "wrongLength": "is the wrong length (should be {{count}} characters)",
    "tooShort": "is too short (minimum is {{count}} characters)",
    "tooLong": "is too long (maximum is {{count}} characters)",
    "notInteger": "is not an integer",
    "greaterThan": "must be greater than {{count}}",
    "greaterThanOrEqualTo": "must be greater than or equal to {{count}}",
    "equalTo": "equal to {{count}}",
    "lessThan": "must be less than {{count}}",
    "lessThanOrEqualTo": "must be less than or equal to {{count}}",
    "divisibleBy": "must be divisible by {{count}}",
}

PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(_stringify(v) for v in value)
    return str(value)


def render(template: str, options: Mapping[str, Any] | None) -> str:
    """Substitute ``{{name}}`` placeholders with stringified options.

    Args:
        template: Message template
        options: Values to substitute; missing names render as empty text

    Returns:
        Rendered message
    """
    opts = options or {}
    return PLACEHOLDER.sub(lambda m: _stringify(opts.get(m.group(1))), template)


class Translator:
    """Translator backed by a message table.

    Entries in ``messages`` override the defaults for the same kind; kinds
    found in neither render as ``fallback``.

    Example:
        ```python
        terse = Translator({"presence": "required"})
        rules = validator.field("title").rules(terse)
        ```
    """

    def __init__(self, messages: Mapping[str, str] | None = None, fallback: str = FALLBACK_MESSAGE):
        """Initialize translator.

        Args:
            messages: Templates by error kind, merged over ``DEFAULT_MESSAGES``
            fallback: Message for kinds without a template
        """
        self.messages = {**DEFAULT_MESSAGES, **(messages or {})}
        self.fallback = fallback

    def __call__(self, error: ValidationError) -> str:
        template = self.messages.get(error.kind, self.fallback)
        return render(template, error.options)


_default_translator = Translator()


def translate_default(error: ValidationError) -> str:
    """Translate an error with the default message table."""
    return _default_translator(error)
