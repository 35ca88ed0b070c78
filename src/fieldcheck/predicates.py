"""Value predicates shared by the checks.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence, Set
from numbers import Real
from typing import Any

# Whole-string numeric grammar accepted when coercing text to a number
NUMERIC_STRING = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*")

_BLANK_STRING = re.compile(r"\s*")


def is_defined(value: Any) -> bool:
    return value is not None


def is_blank(value: Any) -> bool:
    """Return True for ``None`` and for strings made only of whitespace.

    Numbers (zero included), booleans, containers and any other object are
    never blank.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return _BLANK_STRING.fullmatch(value) is not None
    return False


def is_number(value: Any) -> bool:
    """Return True for real numbers other than ``bool`` and NaN."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if isinstance(value, int):
        return True
    return not math.isnan(value)


def to_text(value: Any) -> str:
    """Render a value as text for pattern matching.

    Booleans render as ``"true"``/``"false"`` and whole floats without their
    fractional part (``1.0`` -> ``"1"``); anything else goes through ``str()``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_integer(value: Any) -> bool:
    return is_number(value) and value % 1 == 0


def to_number(value: Any) -> Any:
    """Coerce a numeric string to ``int`` or ``float``.

    Strings outside the numeric grammar and non-string values are returned
    unchanged so that the caller's number test rejects them.
    """
    if not isinstance(value, str) or NUMERIC_STRING.fullmatch(value) is None:
        return value
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


def has_length(value: Any) -> bool:
    """Return True for values with a meaningful length.

    Only strings, bytes and explicit collection types qualify; arbitrary
    objects implementing ``__len__`` are not accepted.
    """
    return isinstance(value, (str, bytes, bytearray, Sequence, Set, Mapping))


def _same_kind(a: Any, b: Any) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool)
    if isinstance(a, Real) or isinstance(b, Real):
        return isinstance(a, Real) and isinstance(b, Real)
    if isinstance(a, str) or isinstance(b, str):
        return isinstance(a, str) and isinstance(b, str)
    return type(a) is type(b)


def strict_contains(values: Sequence[Any], value: Any) -> bool:
    """Type-sensitive membership test.

    ``"2"`` is not a member of ``[2]`` and ``False`` is not a member of ``[0]``,
    while ``2`` and ``2.0`` are the same number.
    """
    return any(_same_kind(candidate, value) and candidate == value for candidate in values)
