"""
In-memory account store used for dry runs and tests.
"""

from datetime import datetime, timezone
from threading import Lock
from typing import Any, Callable, Iterable
from uuid import uuid4

from account_sync.core.exceptions import StoreError

from .base import AccountStore, StoreResult


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryAccountStore(AccountStore):
    """
    Dict-backed AccountStore.

    Assigns UUID ids and created_at/updated_at timestamps on insert. Every
    call is appended to ``calls`` as (operation, argument) so callers can
    assert on the exact sequence of store traffic.

    Writes for company names listed in ``failing_names`` report an error,
    which lets tests exercise per-row failure handling.
    """

    def __init__(
        self,
        accounts: Iterable[dict[str, Any]] = (),
        failing_names: Iterable[str] = (),
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._lock = Lock()
        self._rows: dict[str, dict[str, Any]] = {}
        self.failing_names = set(failing_names)
        self.clock = clock
        self.calls: list[tuple[str, Any]] = []
        self.fail_list = False

        for account in accounts:
            self._seed(account)

    def _seed(self, account: dict[str, Any]) -> None:
        row = dict(account)
        row.setdefault("id", str(uuid4()))
        row.setdefault("created_at", self.clock())
        row.setdefault("updated_at", row["created_at"])
        self._rows[str(row["id"])] = row

    @property
    def accounts(self) -> list[dict[str, Any]]:
        """Snapshot of stored rows in insertion order."""
        with self._lock:
            return [dict(row) for row in self._rows.values()]

    def find_one(self, column: str, value: Any) -> dict[str, Any] | None:
        self.check_lookup_column(column)
        self.calls.append(("find_one", (column, value)))

        with self._lock:
            matches = [row for row in self._rows.values() if row.get(column) == value]

        if len(matches) > 1:
            raise StoreError("find_one", f"{len(matches)} accounts match {column}={value!r}")
        return dict(matches[0]) if matches else None

    def insert(self, row: dict[str, Any]) -> StoreResult:
        self.check_payload(row)
        self.calls.append(("insert", row.get("company_name")))

        if row.get("company_name") in self.failing_names:
            return StoreResult.failure(f"insert rejected for {row.get('company_name')!r}")

        now = self.clock()
        stored = dict(row)
        stored["id"] = str(uuid4())
        stored["created_at"] = now
        stored.setdefault("updated_at", now)
        if stored.get("tags") is not None:
            stored["tags"] = list(stored["tags"])

        with self._lock:
            self._rows[stored["id"]] = stored
        return StoreResult.success(stored["id"])

    def update(self, row: dict[str, Any], account_id: str) -> StoreResult:
        self.check_payload(row)
        self.calls.append(("update", account_id))

        if row.get("company_name") in self.failing_names:
            return StoreResult.failure(f"update rejected for {row.get('company_name')!r}")

        with self._lock:
            existing = self._rows.get(account_id)
            if existing is None:
                return StoreResult.failure(f"account {account_id} not found")
            existing.update(row)
            if existing.get("tags") is not None:
                existing["tags"] = list(existing["tags"])
        return StoreResult.success(account_id)

    def list_accounts(self, order_by: str = "created_at", descending: bool = True) -> list[dict[str, Any]]:
        self.calls.append(("list_accounts", order_by))

        if self.fail_list:
            raise StoreError("list_accounts", "listing accounts failed")

        # Rows without the sort key go last
        with self._lock:
            present = [dict(r) for r in self._rows.values() if r.get(order_by) is not None]
            missing = [dict(r) for r in self._rows.values() if r.get(order_by) is None]
        present.sort(key=lambda r: r[order_by], reverse=descending)
        return present + missing
