"""Exception hierarchy for the fieldcheck package.

Validation itself never raises: failed checks are reported as
:class:`~fieldcheck.result.ValidationError` records. Exceptions are reserved
for misuse at the edges, such as a configuration that cannot be turned into a
validator, or an explicit request to fail loudly via
:meth:`~fieldcheck.validator.Validator.assert_valid`.

Example:
    ```python
    from fieldcheck.exceptions import FieldcheckError

    try:
        validator.assert_valid(record)
    except FieldcheckError as e:
        logger.error(f"Error: {e}")
        if e.context:
            logger.error(f"Context: {e.context}")
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .result import ValidationError


class FieldcheckError(Exception):
    """Base exception for all fieldcheck errors.

    Attributes:
        context: Dictionary containing contextual information about the error
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """Initialize the exception with optional context.

        Args:
            message: Error message
            context: Optional context dictionary
        """
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(FieldcheckError):
    """Raised when a validator configuration has an unusable shape."""

    pass


class RecordValidationError(FieldcheckError):
    """Raised by ``Validator.assert_valid`` when a record fails validation."""

    def __init__(self, errors: Mapping[str, ValidationError]):
        self.errors = dict(errors)
        names = ", ".join(self.errors)
        super().__init__(
            f"Record failed validation for fields: {names}",
            context={name: err.to_dict() for name, err in self.errors.items()},
        )
