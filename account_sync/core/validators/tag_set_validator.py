"""
TagSetValidator - splits a multi-value field and keeps recognized tags.
"""

import re
from typing import Any

from .base_validator import BaseValidator


class TagSetValidator(BaseValidator):
    """
    Splits a tag field on commas or semicolons and filters it against the allowed tags.

    Unrecognized tags are dropped without error. Source order is kept.
    Returns None rather than an empty list when nothing survives, so an
    account written from the row stores "no tags" as NULL.

    Parameters:
        allowed: Iterable of accepted tags (case-sensitive)
        separators: Characters that separate tags (default ",;")
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        if "allowed" not in self.parameters:
            raise ValueError("TagSetValidator requires 'allowed' parameter")
        self.allowed = frozenset(self.parameters["allowed"])
        separators = self.parameters.get("separators", ",;")
        self._split_pattern = re.compile(f"[{re.escape(separators)}]")

    def validate(self, record: dict[str, Any]) -> list[str] | None:
        raw = record.get(self.field_name)
        if not raw:
            return None

        tags = [
            piece.strip()
            for piece in self._split_pattern.split(raw)
            if piece.strip() in self.allowed
        ]
        return tags or None

    @property
    def rule_type(self) -> str:
        return "tag_set"
