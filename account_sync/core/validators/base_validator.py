"""
Base validator interface for account row rules.

Validators read one canonical field out of a raw row mapping and return its
normalized value. A validator that cannot produce a usable value raises
ValidationError, which rejects the row but not the batch.
"""

from abc import ABC, abstractmethod
from typing import Any


class ValidationError(Exception):
    """Raised when a row cannot be accepted."""

    def __init__(self, rule_name: str, field_name: str, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name}: {message}")


class BaseValidator(ABC):
    """
    Abstract base class for all row validators.

    Each validator implements one rule type
    (required_field, allowed_value, tag_set).
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        """
        Initialize validator.

        Args:
            field_name: Canonical field this validator produces
            parameters: Rule-specific parameters (e.g., allowed values)
        """
        self.field_name = field_name
        self.parameters = parameters or {}

    @abstractmethod
    def validate(self, record: dict[str, Any]) -> Any:
        """
        Produce the normalized value of field_name from a raw row.

        Args:
            record: Raw row keyed by normalized header

        Returns:
            Normalized value (may be None)

        Raises:
            ValidationError: If the row must be rejected
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name}, params={self.parameters})"
