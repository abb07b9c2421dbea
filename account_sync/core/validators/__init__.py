"""
Row validator implementations.

Provides validators for required (aliased) fields, enumerated values and
multi-value tag fields.
"""

from .allowed_value_validator import AllowedValueValidator
from .base_validator import BaseValidator, ValidationError
from .required_field_validator import RequiredFieldValidator
from .tag_set_validator import TagSetValidator

__all__ = [
    "BaseValidator",
    "ValidationError",
    "RequiredFieldValidator",
    "AllowedValueValidator",
    "TagSetValidator",
]
