"""
PostgreSQL-backed account store.

Table layout lives in docker/init-db.sql. Column names in generated SQL come
only from LOOKUP_COLUMNS / WRITABLE_COLUMNS, never from file headers.
"""

from typing import Any

import psycopg
from psycopg import sql

from account_sync.core.exceptions import StoreError
from account_sync.observability.logger import get_logger

from .base import AccountStore, StoreResult
from .connection import DatabaseConnectionPool

logger = get_logger(__name__)

ORDERABLE_COLUMNS: tuple[str, ...] = ("created_at", "updated_at", "company_name")


class PostgresAccountStore(AccountStore):
    """
    AccountStore over a psycopg connection pool.

    Each call runs in its own transaction, so a failure partway through an
    import leaves earlier rows committed.
    """

    def __init__(self, pool: DatabaseConnectionPool):
        """
        Initialize account store.

        Args:
            pool: Open database connection pool
        """
        self.pool = pool

    def find_one(self, column: str, value: Any) -> dict[str, Any] | None:
        self.check_lookup_column(column)

        # Compare as text so a malformed id is simply "not found"
        query = sql.SQL("SELECT * FROM {table} WHERE {column}::text = %s LIMIT 2").format(
            table=sql.Identifier(self.table),
            column=sql.Identifier(column),
        )

        try:
            rows = self.pool.execute_query(query, (str(value),))
        except psycopg.Error as e:
            raise StoreError("find_one", str(e)) from e

        if len(rows) > 1:
            raise StoreError("find_one", f"multiple accounts match {column}={value!r}")
        if not rows:
            return None
        return {**rows[0], "id": str(rows[0]["id"])}

    def insert(self, row: dict[str, Any]) -> StoreResult:
        self.check_payload(row)
        columns = list(row)

        command = sql.SQL("INSERT INTO {table} ({columns}) VALUES ({values}) RETURNING id").format(
            table=sql.Identifier(self.table),
            columns=sql.SQL(", ").join(sql.Identifier(c) for c in columns),
            values=sql.SQL(", ").join(sql.Placeholder() for _ in columns),
        )

        try:
            returned = self.pool.execute_returning(command, tuple(row[c] for c in columns))
        except psycopg.Error as e:
            logger.error(
                f"Insert failed for account {row.get('company_name')!r}: {e}",
                extra={"operation": "insert"}
            )
            return StoreResult.failure(str(e))

        return StoreResult.success(str(returned["id"]) if returned else None)

    def update(self, row: dict[str, Any], account_id: str) -> StoreResult:
        self.check_payload(row)
        columns = list(row)

        command = sql.SQL("UPDATE {table} SET {assignments} WHERE id::text = %s").format(
            table=sql.Identifier(self.table),
            assignments=sql.SQL(", ").join(
                sql.SQL("{} = {}").format(sql.Identifier(c), sql.Placeholder()) for c in columns
            ),
        )

        try:
            affected = self.pool.execute_command(
                command, tuple(row[c] for c in columns) + (str(account_id),)
            )
        except psycopg.Error as e:
            logger.error(
                f"Update failed for account {account_id}: {e}",
                extra={"operation": "update"}
            )
            return StoreResult.failure(str(e))

        if affected == 0:
            return StoreResult.failure(f"account {account_id} not found")
        return StoreResult.success(str(account_id))

    def list_accounts(self, order_by: str = "created_at", descending: bool = True) -> list[dict[str, Any]]:
        if order_by not in ORDERABLE_COLUMNS:
            raise ValueError(f"Unsupported order column: {order_by}")

        query = sql.SQL("SELECT * FROM {table} ORDER BY {column} {direction}").format(
            table=sql.Identifier(self.table),
            column=sql.Identifier(order_by),
            direction=sql.SQL("DESC" if descending else "ASC"),
        )

        try:
            rows = self.pool.execute_query(query)
        except psycopg.Error as e:
            raise StoreError("list_accounts", str(e)) from e

        # uuid columns come back as UUID objects
        return [{**row, "id": str(row["id"])} for row in rows]
