"""
AllowedValueValidator - normalizes a field to a member of a fixed set.
"""

from typing import Any

from .base_validator import BaseValidator


class AllowedValueValidator(BaseValidator):
    """
    Keeps a value that belongs to the allowed set, otherwise returns the default.

    Never raises: unknown or missing values are silently replaced.

    Parameters:
        allowed: Iterable of accepted values (case-sensitive)
        default: Value used for anything outside the set
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        if "allowed" not in self.parameters:
            raise ValueError("AllowedValueValidator requires 'allowed' parameter")
        self.allowed = frozenset(self.parameters["allowed"])
        self.default = self.parameters.get("default")

    def validate(self, record: dict[str, Any]) -> Any:
        value = record.get(self.field_name)
        if value in self.allowed:
            return value
        return self.default

    @property
    def rule_type(self) -> str:
        return "allowed_value"
