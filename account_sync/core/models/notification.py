"""
Caller-facing models: notifications, export files and operation state.
"""

from typing import Literal

from pydantic import BaseModel, Field

from .import_summary import ImportSummary


class Notification(BaseModel):
    """
    A single message shown to the user when an operation finishes.

    Attributes:
        title: Short headline, e.g. "Import Successful"
        description: Details, e.g. the created/updated counts
        variant: "default" for success and notices, "destructive" for failures
    """

    title: str = Field(..., min_length=1)
    description: str
    variant: Literal["default", "destructive"] = "default"

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


class ExportFile(BaseModel):
    """Rendered CSV export ready to be written or downloaded."""

    filename: str = Field(..., min_length=1)
    content: str
    row_count: int = Field(0, ge=0)


class OperationReport(BaseModel):
    """
    Everything an import or export hands back to its caller.

    Exactly one notification is always present. The summary is set after an
    import that reached reconciliation, the export file after an export that
    produced rows.
    """

    notification: Notification
    summary: ImportSummary | None = None
    export_file: ExportFile | None = None


class OperationState(BaseModel):
    """
    Busy flags owned by the caller and passed into each operation.

    The service sets a flag when an operation starts and always clears it
    when the operation ends, whether it succeeded or not.
    """

    is_importing: bool = False
    is_exporting: bool = False
