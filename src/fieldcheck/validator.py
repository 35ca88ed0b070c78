"""Record-level validator keyed by field name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from .exceptions import RecordValidationError
from .field import FieldOptions, FieldRule, FieldValidator
from .result import ValidationError
from .translate import TranslateFn, translate_default

logger = logging.getLogger(__name__)


def read_field(record: Any, name: str) -> Any:
    """Read a field off a record.

    Mappings are read by key and any other object by attribute; a missing
    field reads as None.
    """
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


class Validator:
    """Validator for records with a fixed set of configured fields.

    Only fields named in the configuration are ever validated; anything else
    on a record is ignored. The configuration is turned into one
    :class:`FieldValidator` per field when the validator is created and is not
    changed afterwards, so a validator can be shared freely.

    Example:
        ```python
        validator = Validator({
            "title": {"presence": {}, "length": {"max": 40}},
            "count": {"numericality": {"only_integer": True, "greater_than": 0}},
        })

        validator.validate({"count": 0})
        # {'title': ValidationError(kind='presence'),
        #  'count': ValidationError(kind='greaterThan', options={'count': 0})}
        ```
    """

    def __init__(self, config: Mapping[str, FieldOptions | FieldValidator] | None = None):
        """Initialize validator.

        Args:
            config: Field name -> field options (or a built FieldValidator),
                in the order fields should be validated
        """
        fields: dict[str, FieldValidator] = {}
        for name, options in (config or {}).items():
            if isinstance(options, FieldValidator):
                fields[name] = options
            else:
                fields[name] = FieldValidator(options)
        self._fields = fields
        logger.debug(f"Built validator for fields: {list(fields)}")

    @property
    def fields(self) -> Mapping[str, FieldValidator]:
        """Read-only view of the field validators."""
        return MappingProxyType(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Validator(fields={list(self._fields)!r})"

    def field(self, name: str) -> FieldValidator | None:
        """Return the validator of a field, or None if it is not configured."""
        return self._fields.get(name)

    def check(self, name: str, value: Any) -> ValidationError | None:
        """Check a single value for the named field.

        Fields that are not configured always pass.
        """
        fv = self._fields.get(name)
        return fv.check(value) if fv is not None else None

    def validate(self, record: Any) -> dict[str, ValidationError]:
        """Validate all configured fields of a record.

        Args:
            record: Mapping or object holding the field values

        Returns:
            Field name -> error, for the failing fields only
        """
        errors: dict[str, ValidationError] = {}
        for name in self._fields:
            err = self.check(name, read_field(record, name))
            if err is not None:
                errors[name] = err
        return errors

    def is_valid(self, record: Any) -> bool:
        """Return True if every configured field passes, stopping at the first failure."""
        for name in self._fields:
            if self.check(name, read_field(record, name)) is not None:
                return False
        return True

    def assert_valid(self, record: Any) -> None:
        """Validate a record and raise if any field fails.

        Raises:
            RecordValidationError: With the per-field errors attached
        """
        errors = self.validate(record)
        if errors:
            raise RecordValidationError(errors)

    def rules(self, translate: TranslateFn | None = None) -> dict[str, list[FieldRule]]:
        """Rules of every configured field, see :meth:`FieldValidator.rules`."""
        return {name: fv.rules(translate) for name, fv in self._fields.items()}

    def messages(self, record: Any, translate: TranslateFn | None = None) -> dict[str, str]:
        """Validate a record and translate the errors of the failing fields."""
        translate_fn = translate or translate_default
        return {name: translate_fn(err) for name, err in self.validate(record).items()}
