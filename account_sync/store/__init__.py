"""
Account persistence: the store contract and its implementations.
"""

from .base import ACCOUNTS_TABLE, LOOKUP_COLUMNS, WRITABLE_COLUMNS, AccountStore, StoreResult
from .connection import DatabaseConnectionPool
from .memory import InMemoryAccountStore
from .postgres import PostgresAccountStore

__all__ = [
    "ACCOUNTS_TABLE",
    "LOOKUP_COLUMNS",
    "WRITABLE_COLUMNS",
    "AccountStore",
    "StoreResult",
    "DatabaseConnectionPool",
    "InMemoryAccountStore",
    "PostgresAccountStore",
]
