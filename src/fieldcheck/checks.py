"""Primitive checks with a single, total ``check`` operation.

Each check holds its own configuration, fixed at construction, and reports a
failed value as a :class:`~fieldcheck.result.ValidationError`. Checks never
raise for any input, whatever its type.
"""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from enum import Enum
from re import Pattern as RegexPattern
from typing import Any

from .predicates import (
    has_length,
    is_blank,
    is_integer,
    is_number,
    strict_contains,
    to_number,
    to_text,
)
from .result import ValidationError


class _MalformedBound:
    """Stands in for a configured bound that is not a number."""

    def __repr__(self) -> str:
        return "<malformed>"


#: Bound that fails every value it is checked against
MALFORMED = _MalformedBound()


def to_bound(value: Any) -> Any:
    """Convert a configured bound to a number, or MALFORMED if it is not one."""
    if value is None:
        return None
    value = to_number(value)
    return value if is_number(value) else MALFORMED


class Check(ABC):
    """Base class for all primitive checks."""

    #: Option name under which the check is configured on a field
    name: str = ""
    #: Constructor parameters accepted from configuration
    attributes: tuple[str, ...] = ()

    @abstractmethod
    def check(self, value: Any) -> ValidationError | None:
        """Check a value.

        Args:
            value: Value to check

        Returns:
            The failure as a ValidationError, or None if the value passes
        """

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in vars(self).items() if v is not None)
        return f"{type(self).__name__}({attrs})"


class Presence(Check):
    """Value must not be blank."""

    name = "presence"

    def check(self, value: Any) -> ValidationError | None:
        if is_blank(value):
            return ValidationError("presence")
        return None


class Length(Check):
    """Length of a string or collection must match the configured bounds."""

    name = "length"
    attributes = ("is_", "min", "max")

    def __init__(self, is_: int | None = None, min: int | None = None, max: int | None = None):
        """Initialize length check.

        Args:
            is_: Exact length
            min: Minimum length (inclusive)
            max: Maximum length (inclusive)

        Bounds that are not numbers make every non-blank value invalid.
        """
        self.is_ = to_bound(is_)
        self.min = to_bound(min)
        self.max = to_bound(max)

    def check(self, value: Any) -> ValidationError | None:
        if is_blank(value):
            return None
        if not has_length(value):
            return ValidationError("invalid")

        if MALFORMED in (self.is_, self.min, self.max):
            return ValidationError("invalid")

        length = len(value)
        if self.is_ is not None and length != self.is_:
            return ValidationError("wrongLength", {"count": self.is_})
        if self.min is not None and length < self.min:
            return ValidationError("tooShort", {"count": self.min})
        if self.max is not None and length > self.max:
            return ValidationError("tooLong", {"count": self.max})
        return None


class Numericality(Check):
    """Value must be a number (or numeric string) within the configured bounds."""

    name = "numericality"
    attributes = (
        "greater_than",
        "greater_than_or_equal_to",
        "equal_to",
        "less_than",
        "less_than_or_equal_to",
        "divisible_by",
        "only_integer",
    )

    # Bound attribute and the error kind it reports, in evaluation order
    BOUNDS = (
        ("greater_than", "greaterThan"),
        ("greater_than_or_equal_to", "greaterThanOrEqualTo"),
        ("equal_to", "equalTo"),
        ("less_than", "lessThan"),
        ("less_than_or_equal_to", "lessThanOrEqualTo"),
        ("divisible_by", "divisibleBy"),
    )

    def __init__(
        self,
        greater_than: float | None = None,
        greater_than_or_equal_to: float | None = None,
        equal_to: float | None = None,
        less_than: float | None = None,
        less_than_or_equal_to: float | None = None,
        divisible_by: float | None = None,
        only_integer: bool = False,
    ):
        """Initialize numericality check.

        Args:
            greater_than: Exclusive lower bound
            greater_than_or_equal_to: Inclusive lower bound
            equal_to: Exact value
            less_than: Exclusive upper bound
            less_than_or_equal_to: Inclusive upper bound
            divisible_by: Value must be a multiple of this
            only_integer: If True, reject values with a fractional part

        Bounds given as numeric strings are converted to numbers; any other
        non-number bound makes every non-blank value invalid.
        """
        self.greater_than = to_bound(greater_than)
        self.greater_than_or_equal_to = to_bound(greater_than_or_equal_to)
        self.equal_to = to_bound(equal_to)
        self.less_than = to_bound(less_than)
        self.less_than_or_equal_to = to_bound(less_than_or_equal_to)
        self.divisible_by = to_bound(divisible_by)
        self.only_integer = only_integer

    @staticmethod
    def _violates(attr: str, value: float, bound: float) -> bool:
        if attr == "greater_than":
            return value <= bound
        if attr == "greater_than_or_equal_to":
            return value < bound
        if attr == "equal_to":
            return value != bound
        if attr == "less_than":
            return value >= bound
        if attr == "less_than_or_equal_to":
            return value > bound
        if bound == 0:
            return True
        return value % bound != 0

    def check(self, value: Any) -> ValidationError | None:
        if is_blank(value):
            return None

        value = to_number(value)
        if not is_number(value) or (isinstance(value, float) and math.isinf(value)):
            return ValidationError("invalid")
        if self.only_integer is True and not is_integer(value):
            return ValidationError("notInteger")

        for attr, kind in self.BOUNDS:
            bound = getattr(self, attr)
            if bound is MALFORMED:
                return ValidationError("invalid")
            if bound is not None and self._violates(attr, value, bound):
                return ValidationError(kind, {"count": bound})
        return None


class Inclusion(Check):
    """Value must be one of an allowed list of values."""

    name = "inclusion"
    attributes = ("values", "enum")

    def __init__(
        self,
        values: Iterable[Any] | None = None,
        enum: type[Enum] | Mapping[Any, Any] | None = None,
    ):
        """Initialize inclusion check.

        Only the allowed values are kept; an ``enum`` source is converted once,
        here, and then dropped.

        Args:
            values: Allowed values, in display order
            enum: Enum class or mapping to derive the allowed values from,
                ignored when ``values`` is given
        """
        if values is not None:
            self.values: tuple[Any, ...] | None = tuple(values)
        elif enum is not None:
            self.values = self.from_enum(enum).values
        else:
            self.values = None

    @classmethod
    def from_enum(cls, source: type[Enum] | Mapping[Any, Any]) -> Inclusion:
        """Build an inclusion check from the member values of an enum.

        Numeric and string member values are kept in declaration order; any
        other member value is skipped.

        Args:
            source: Enum class, or a mapping of member names to values

        Returns:
            Inclusion check allowing the derived values
        """
        if isinstance(source, Mapping):
            members = list(source.values())
        else:
            members = [member.value for member in source]
        return cls(values=[v for v in members if is_number(v) or isinstance(v, str)])

    def check(self, value: Any) -> ValidationError | None:
        if value is None:
            return None
        if isinstance(value, str) and is_blank(value):
            return None

        if self.values is None or not strict_contains(self.values, value):
            values = list(self.values) if self.values is not None else None
            return ValidationError("inclusion", {"values": values})
        return None


class Format(Check):
    """Text form of a value must match a regular expression in full."""

    name = "format"
    attributes = ("pattern", "details")

    def __init__(self, pattern: str | RegexPattern[str] | None = None, details: str | None = None):
        """Initialize format check.

        Args:
            pattern: Regex pattern (string or compiled pattern); anything else
                counts as no pattern
            details: Free-form context reported with the error
        """
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        elif not isinstance(pattern, re.Pattern) or not isinstance(pattern.pattern, str):
            pattern = None
        self.pattern = pattern
        self.details = details

    def _matches(self, value: Any) -> bool:
        if self.pattern is None:
            return False
        return self.pattern.fullmatch(to_text(value)) is not None

    def check(self, value: Any) -> ValidationError | None:
        if value is None:
            return None
        if isinstance(value, str) and is_blank(value):
            return None

        if not self._matches(value):
            return ValidationError("invalid", {"details": self.details})
        return None


#: Check classes in the order they run on a field
CHECK_TYPES: tuple[type[Check], ...] = (Presence, Length, Numericality, Inclusion, Format)
