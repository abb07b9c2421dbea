"""
Account store contract consumed by the reconciliation engine.

Mirrors a generic table API: find zero-or-one row by a column, insert a row,
update a row by id, list rows in a given order. Writes report failure
through StoreResult instead of raising, so one bad row cannot abort a batch.
Reads raise StoreError.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

ACCOUNTS_TABLE = "accounts"

# Columns the engine may look accounts up by
LOOKUP_COLUMNS: tuple[str, ...] = ("id", "company_name")

# Columns the store accepts in insert/update payloads
WRITABLE_COLUMNS: tuple[str, ...] = (
    "company_name",
    "email",
    "region",
    "country",
    "website",
    "company_type",
    "tags",
    "status",
    "notes",
    "industry",
    "phone",
    "created_by",
    "account_owner",
    "modified_by",
    "updated_at",
)


class StoreResult(BaseModel):
    """
    Outcome of a write.

    Attributes:
        ok: Whether the store accepted the write
        account_id: Id of the inserted or updated account
        error: Store error message when ok is False
    """

    ok: bool
    account_id: str | None = None
    error: str | None = None

    @classmethod
    def success(cls, account_id: str | None = None) -> "StoreResult":
        return cls(ok=True, account_id=account_id)

    @classmethod
    def failure(cls, error: str) -> "StoreResult":
        return cls(ok=False, error=error)


class AccountStore(ABC):
    """Abstract persistence interface for the accounts collection."""

    table = ACCOUNTS_TABLE

    @abstractmethod
    def find_one(self, column: str, value: Any) -> dict[str, Any] | None:
        """
        Return the single account whose column equals value, or None.

        Raises:
            StoreError: If the query fails or matches more than one account
        """

    @abstractmethod
    def insert(self, row: dict[str, Any]) -> StoreResult:
        """Insert a new account; the store assigns id and timestamps."""

    @abstractmethod
    def update(self, row: dict[str, Any], account_id: str) -> StoreResult:
        """Update the account with the given id."""

    @abstractmethod
    def list_accounts(self, order_by: str = "created_at", descending: bool = True) -> list[dict[str, Any]]:
        """
        Return every account in the requested order.

        Raises:
            StoreError: If the query fails
        """

    @staticmethod
    def check_lookup_column(column: str) -> str:
        if column not in LOOKUP_COLUMNS:
            raise ValueError(f"Unsupported lookup column: {column}")
        return column

    @staticmethod
    def check_payload(row: dict[str, Any]) -> dict[str, Any]:
        unknown = sorted(set(row) - set(WRITABLE_COLUMNS))
        if unknown:
            raise ValueError(f"Unsupported account columns: {', '.join(unknown)}")
        return row
