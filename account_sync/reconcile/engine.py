"""
Reconciliation of import records against stored accounts.

Resolution order per record:
    1. id lookup (if the record carries an id)
    2. company_name lookup
    3. insert

Records are processed strictly one after another; a record's lookups start
only after the previous record's write returned. There is no transaction
across records.
"""

from datetime import datetime, timezone
from typing import Callable, Iterable, Literal

from account_sync.core.exceptions import StoreError
from account_sync.core.models import ImportRecord, ImportSummary
from account_sync.observability.logger import get_logger
from account_sync.observability.metrics import record_store_error
from account_sync.store.base import AccountStore, StoreResult

logger = get_logger(__name__)

Outcome = Literal["created", "updated", "failed"]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ReconciliationEngine:
    """
    Decides create-or-update for each record and applies it to the store.

    A record whose id no longer exists falls back to the company name
    lookup. A write the store rejects, or a lookup the store cannot answer,
    counts the row as failed; it is never retried.
    """

    def __init__(self, store: AccountStore, clock: Callable[[], datetime] = _utc_now):
        """
        Initialize reconciliation engine.

        Args:
            store: Account store to read from and write to
            clock: Source of updated_at timestamps
        """
        self.store = store
        self.clock = clock

    def reconcile(self, records: Iterable[ImportRecord], summary: ImportSummary | None = None) -> ImportSummary:
        """
        Reconcile records in order and tally the outcomes.

        Args:
            records: Validated import records
            summary: Summary to add to (a fresh one if None)

        Returns:
            The summary with created/updated/failed counts incremented
        """
        summary = summary or ImportSummary()

        for record in records:
            outcome, error = self.reconcile_record(record)
            if outcome == "created":
                summary.created += 1
            elif outcome == "updated":
                summary.updated += 1
            else:
                summary.failed += 1
                summary.failures.append(f"Row {record.line_number or '?'}: {error}")

        return summary

    def reconcile_record(self, record: ImportRecord) -> tuple[Outcome, str | None]:
        """
        Reconcile one record.

        Returns:
            (outcome, error message or None)
        """
        payload = record.to_payload()

        try:
            if record.id:
                existing = self.store.find_one("id", record.id)
                if existing:
                    return self._update(record, payload, existing["id"])
                logger.debug(
                    f"Account id {record.id} not found, matching on company name",
                    extra={"line_number": record.line_number}
                )

            existing = self.store.find_one("company_name", record.company_name)
        except StoreError as e:
            record_store_error(e.operation)
            logger.error(
                f"Lookup failed for {record.company_name!r}: {e.message}",
                extra={"line_number": record.line_number}
            )
            return "failed", e.message

        if existing:
            return self._update(record, payload, existing["id"])
        return self._apply("created", record, self.store.insert(payload))

    def _update(self, record: ImportRecord, payload: dict, account_id: str) -> tuple[Outcome, str | None]:
        payload = {**payload, "updated_at": self.clock()}
        return self._apply("updated", record, self.store.update(payload, str(account_id)))

    def _apply(self, outcome: Outcome, record: ImportRecord, result: StoreResult) -> tuple[Outcome, str | None]:
        if result.ok:
            return outcome, None

        operation = "insert" if outcome == "created" else "update"
        record_store_error(operation)
        logger.error(
            f"Failed to save {record.company_name!r}: {result.error}",
            extra={"line_number": record.line_number, "store_operation": operation}
        )
        return "failed", result.error
