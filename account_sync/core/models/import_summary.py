"""
ImportSummary model representing the tallies of one import run.
"""

from typing import List

from pydantic import BaseModel, Field


class ImportSummary(BaseModel):
    """
    Counts reported to the user after an import completes.

    Attributes:
        created: Rows inserted as new accounts
        updated: Rows applied to an existing account
        skipped: Rows rejected during validation
        failed: Rows whose lookup or write was rejected by the store
        errors: Validation messages for skipped rows
        failures: Store messages for failed rows
    """

    created: int = Field(0, ge=0)
    updated: int = Field(0, ge=0)
    skipped: int = Field(0, ge=0)
    failed: int = Field(0, ge=0)
    errors: List[str] = Field(default_factory=list)
    failures: List[str] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return self.created + self.updated + self.skipped + self.failed

    def describe(self) -> str:
        """Human-readable one-line summary used in the completion notification."""
        text = f"Created {self.created} new accounts, updated {self.updated} existing accounts"
        if self.skipped > 0:
            text += f". {self.skipped} rows had errors."
        if self.failed > 0:
            text += f"{'' if self.skipped > 0 else '.'} {self.failed} rows failed to save."
        return text
