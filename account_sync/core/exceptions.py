"""
Exception hierarchy for account import/export.

Fatal errors abort a whole import or export and are converted into a
user-facing notification by the service layer. Row-level problems use
ValidationError from the validators package instead and never abort a batch.
"""


class AccountSyncError(Exception):
    """Base class for all account-sync errors."""


class ImportAbortedError(AccountSyncError):
    """Raised when an import cannot proceed at all."""


class UnauthenticatedError(ImportAbortedError):
    """No acting user was supplied."""

    def __init__(self, message: str = "User not authenticated"):
        super().__init__(message)


class InsufficientRowsError(ImportAbortedError):
    """The file has no header row or no data rows."""

    def __init__(self, message: str = "CSV file must have headers and at least one data row"):
        super().__init__(message)


class NoValidRecordsError(ImportAbortedError):
    """Every data row was rejected during validation."""

    def __init__(self, message: str = "No valid records found in CSV", errors: list[str] | None = None):
        self.errors = errors or []
        super().__init__(message)


class ExportError(AccountSyncError):
    """Raised when accounts cannot be read for export."""


class StoreError(AccountSyncError):
    """Raised by an AccountStore when a query cannot be answered."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"[{operation}] {message}")
