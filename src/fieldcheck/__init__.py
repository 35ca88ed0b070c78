"""Declarative field validation.

Configure checks per field, then validate records against them:

- Checks: Presence, Length, Numericality, Inclusion, Format
- FieldValidator: ordered checks for one field, with per-check rules
- Validator: record-level validation keyed by field name
- Translator: error-to-message rendering from a template table
- ValidatorFactory: validators from plain or YAML configuration

Example:
    ```python
    from fieldcheck import Validator

    validator = Validator({
        "title": {"presence": {}, "length": {"max": 40}},
        "kind": {"inclusion": {"values": [0, 1, 2]}},
    })
    validator.validate({"kind": 7})
    # {'title': ValidationError(kind='presence'),
    #  'kind': ValidationError(kind='inclusion', options={'values': [0, 1, 2]})}
    ```
"""

from .checks import CHECK_TYPES, Check, Format, Inclusion, Length, Numericality, Presence
from .exceptions import ConfigurationError, FieldcheckError, RecordValidationError
from .factory import ValidatorFactory, validator_factory
from .field import FieldRule, FieldValidator
from .result import ValidationError
from .translate import DEFAULT_MESSAGES, Translator, translate_default
from .validator import Validator

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Result types
    "ValidationError",
    # Checks
    "Check",
    "Presence",
    "Length",
    "Numericality",
    "Inclusion",
    "Format",
    "CHECK_TYPES",
    # Validators
    "FieldValidator",
    "FieldRule",
    "Validator",
    # Messages
    "DEFAULT_MESSAGES",
    "Translator",
    "translate_default",
    # Factories
    "ValidatorFactory",
    "validator_factory",
    # Exceptions
    "FieldcheckError",
    "ConfigurationError",
    "RecordValidationError",
]
