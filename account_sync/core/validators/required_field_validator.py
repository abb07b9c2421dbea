"""
RequiredFieldValidator - resolves a required field from one of several header aliases.
"""

from typing import Any, Dict
from .base_validator import BaseValidator, ValidationError


class RequiredFieldValidator(BaseValidator):
    """
    Returns the first non-empty value among a field's aliases.

    Aliases are tried in order; the field's own name is used when no
    aliases are configured. Fails if every alias is missing, None or empty.
    """

    def __init__(self, field_name: str, parameters: Dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        self.aliases: list[str] = list(self.parameters.get("aliases") or [field_name])

    def validate(self, record: Dict[str, Any]) -> str:
        """
        Resolve the required field.

        Args:
            record: Raw row keyed by normalized header

        Returns:
            The first non-empty alias value

        Raises:
            ValidationError: If no alias carries a value
        """
        for alias in self.aliases:
            value = record.get(alias)
            if isinstance(value, str) and value.strip() != "":
                return value

        raise ValidationError(
            rule_name="required_field",
            field_name=self.field_name,
            message=f"Missing {self.field_name}"
        )

    @property
    def rule_type(self) -> str:
        return "required_field"
