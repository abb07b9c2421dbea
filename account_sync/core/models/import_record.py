"""
ImportRecord model representing one validated CSV row (ephemeral).
"""

from typing import Any, List

from pydantic import BaseModel, Field


class ImportRecord(BaseModel):
    """
    A validated account row, built once per input line and consumed by reconciliation.

    Note: ImportRecord is never persisted as-is. The reconciliation engine
    turns it into an insert or an update payload for the account store.

    Attributes:
        id: Stored account id, present only if the row supplied one
        company_name: Natural key used when id is absent or stale
        status: Normalized status (always a vocabulary member)
        tags: Recognized tags, or None when no tag survived filtering
        created_by / account_owner / modified_by: Audit fields
        line_number: 1-based source line (not part of the payload)
    """

    id: str | None = None
    company_name: str = Field(..., min_length=1)
    email: str | None = None
    region: str | None = None
    country: str | None = None
    website: str | None = None
    company_type: str | None = None
    tags: List[str] | None = None
    status: str = "New"
    notes: str | None = None
    industry: str | None = None
    phone: str | None = None
    created_by: str | None = None
    account_owner: str | None = None
    modified_by: str | None = None
    line_number: int | None = Field(None, ge=1)

    def to_payload(self) -> dict[str, Any]:
        """Column values to write, without the id (the store owns it)."""
        return self.model_dump(exclude={"id", "line_number"})

    class Config:
        json_schema_extra = {
            "example": {
                "id": "0b7c7e9e-4f43-4bb1-9a76-2f0f4b3a1c55",
                "company_name": "Acme, Inc.",
                "email": "sales@acme.example",
                "country": "Germany",
                "tags": ["AUTOSAR", "BSW"],
                "status": "Hot",
                "created_by": "user-123",
                "account_owner": "user-123",
                "modified_by": "user-123",
                "line_number": 2,
            }
        }


class RecordBatch(BaseModel):
    """
    Result of building records from an import file.

    Attributes:
        records: Rows that passed validation
        errors: One message per rejected row, e.g. "Row 4: Missing company_name"
    """

    records: List[ImportRecord] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)

    @property
    def skipped(self) -> int:
        return len(self.errors)
