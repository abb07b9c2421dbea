"""
Core data models for account import/export.

All models use Pydantic for runtime validation and type safety.
"""

from .import_record import ImportRecord, RecordBatch
from .import_summary import ImportSummary
from .notification import ExportFile, Notification, OperationReport, OperationState

__all__ = [
    "ImportRecord",
    "RecordBatch",
    "ImportSummary",
    "Notification",
    "ExportFile",
    "OperationReport",
    "OperationState",
]
