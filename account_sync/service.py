"""
Account import/export orchestration.

Coordinates the flow:
    import: read rows -> build records -> reconcile -> notify
    export: list accounts -> serialize -> notify

Every fatal error is caught here and turned into a destructive
Notification; nothing raised below this layer reaches the caller.
"""

from datetime import date
from typing import Callable

from account_sync.core.exceptions import (
    AccountSyncError,
    NoValidRecordsError,
    StoreError,
    UnauthenticatedError,
)
from account_sync.core.models import (
    ExportFile,
    ImportSummary,
    Notification,
    OperationReport,
    OperationState,
)
from account_sync.core.record_builder import RecordBuilder
from account_sync.core.vocabulary import AccountVocabulary
from account_sync.observability import metrics
from account_sync.observability.logger import get_logger, log_operation
from account_sync.readers.csv_parser import QuoteMode
from account_sync.reconcile.engine import ReconciliationEngine
from account_sync.store.base import AccountStore
from account_sync.writers.csv_writer import AccountCsvWriter, export_filename

logger = get_logger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred"


class ImportExportService:
    """
    Runs account imports and exports against one account store.

    The caller owns an OperationState and passes it in; its busy flags are
    set while an operation runs and cleared when it finishes.
    """

    def __init__(
        self,
        store: AccountStore,
        vocabulary: AccountVocabulary | None = None,
        quote_mode: QuoteMode = "toggle",
        on_import_complete: Callable[[], None] | None = None,
        engine: ReconciliationEngine | None = None,
    ):
        """
        Initialize import/export service.

        Args:
            store: Account store
            vocabulary: Valid statuses and tags (built-in set if None)
            quote_mode: CSV quote handling for imports
            on_import_complete: Called after every successful import
            engine: Reconciliation engine (one over store if None)
        """
        self.store = store
        self.record_builder = RecordBuilder(vocabulary=vocabulary, quote_mode=quote_mode)
        self.engine = engine or ReconciliationEngine(store)
        self.writer = AccountCsvWriter()
        self.on_import_complete = on_import_complete

    # =======================
    # IMPORT
    # =======================

    def import_text(self, text: str, acting_user_id: str | None) -> ImportSummary:
        """
        Import CSV content and return the tallies.

        Args:
            text: Whole file content
            acting_user_id: User performing the import

        Returns:
            ImportSummary

        Raises:
            UnauthenticatedError: If no acting user is given
            InsufficientRowsError: If there is no header or no data row
            NoValidRecordsError: If every row was rejected
        """
        if not acting_user_id:
            raise UnauthenticatedError()

        batch = self.record_builder.build_text(text, acting_user_id)
        if not batch.records:
            raise NoValidRecordsError(errors=batch.errors)

        logger.info(
            f"Reconciling {len(batch.records)} records ({batch.skipped} rows rejected)",
            extra={"user_id": acting_user_id}
        )

        summary = ImportSummary(skipped=batch.skipped, errors=list(batch.errors))
        return self.engine.reconcile(batch.records, summary)

    def handle_import(
        self,
        text: str,
        acting_user_id: str | None,
        state: OperationState | None = None
    ) -> OperationReport:
        """
        Import CSV content and report the outcome as a notification.

        Never raises; fatal errors become a "Import Failed" notification.
        """
        state = state or OperationState()
        state.is_importing = True

        try:
            with log_operation("Importing accounts", logger=logger, user_id=acting_user_id) as op:
                summary = self.import_text(text, acting_user_id)
            metrics.record_import_summary(summary, op.elapsed)
            logger.info(
                summary.describe(),
                extra={
                    "rows_created": summary.created,
                    "rows_updated": summary.updated,
                    "rows_skipped": summary.skipped,
                    "rows_failed": summary.failed,
                }
            )

            if self.on_import_complete is not None:
                self.on_import_complete()

            return OperationReport(
                notification=Notification(title="Import Successful", description=summary.describe()),
                summary=summary,
            )
        except AccountSyncError as e:
            metrics.record_import_failure()
            return OperationReport(notification=self._failure("Import Failed", str(e)))
        except Exception as e:  # noqa: BLE001 - surfaced as a notification
            metrics.record_import_failure()
            logger.error(f"Unexpected import error: {e}", exc_info=True)
            return OperationReport(notification=self._failure("Import Failed", str(e)))
        finally:
            state.is_importing = False

    # =======================
    # EXPORT
    # =======================

    def export_accounts(self, today: date | None = None) -> ExportFile | None:
        """
        Serialize every stored account, newest first.

        Returns:
            ExportFile, or None when there are no accounts

        Raises:
            StoreError: If accounts cannot be listed
        """
        accounts = self.store.list_accounts(order_by="created_at", descending=True)
        if not accounts:
            return None

        return ExportFile(
            filename=export_filename(today),
            content=self.writer.write(accounts),
            row_count=len(accounts),
        )

    def handle_export(self, state: OperationState | None = None, today: date | None = None) -> OperationReport:
        """
        Export accounts and report the outcome as a notification.

        An empty account list yields a "No Data" notice, not an error.
        """
        state = state or OperationState()
        state.is_exporting = True

        try:
            with log_operation("Exporting accounts", logger=logger):
                export_file = self.export_accounts(today)
        except StoreError as e:
            metrics.record_store_error(e.operation)
            metrics.record_export("failure")
            return OperationReport(notification=self._failure("Export Failed", e.message))
        except Exception as e:  # noqa: BLE001 - surfaced as a notification
            metrics.record_export("failure")
            logger.error(f"Unexpected export error: {e}", exc_info=True)
            return OperationReport(notification=self._failure("Export Failed", str(e)))
        finally:
            state.is_exporting = False

        if export_file is None:
            metrics.record_export("empty")
            return OperationReport(
                notification=Notification(title="No Data", description="No accounts to export.")
            )

        metrics.record_export("success", export_file.row_count)
        return OperationReport(
            notification=Notification(
                title="Export Successful",
                description=f"Exported {export_file.row_count} accounts to CSV.",
            ),
            export_file=export_file,
        )

    @staticmethod
    def _failure(title: str, message: str) -> Notification:
        return Notification(title=title, description=message or UNEXPECTED_ERROR, variant="destructive")
