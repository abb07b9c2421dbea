"""
Pytest configuration and fixtures for account-sync tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import os
from datetime import datetime, timedelta, timezone
from typing import Generator

import pytest
from testcontainers.postgres import PostgresContainer

from account_sync.store import InMemoryAccountStore
from account_sync.store.connection import DatabaseConnectionPool

ROOT_DIR = os.path.dirname(os.path.dirname(__file__))


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that require Docker containers"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that test the full import/export flow"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take more than 5 seconds to run"
    )


# =======================
# STORE FIXTURES
# =======================

class TickingClock:
    """Deterministic clock that advances one second per call."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def memory_store(clock) -> InMemoryAccountStore:
    """Empty in-memory account store with a deterministic clock"""
    return InMemoryAccountStore(clock=clock)


# =======================
# DATABASE FIXTURES (Testcontainers)
# =======================

@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """
    Start PostgreSQL container for integration tests

    Yields:
        PostgresContainer instance
    """
    with PostgresContainer(
        image="postgres:16.2-alpine",
        username="test_crm",
        password="test_password",
        dbname="test_crm"
    ) as postgres:
        yield postgres


@pytest.fixture(scope="session")
def pg_pool(postgres_container) -> Generator[DatabaseConnectionPool, None, None]:
    """
    Open a connection pool against the container and create the accounts table

    Yields:
        Open DatabaseConnectionPool
    """
    pool = DatabaseConnectionPool(
        host=postgres_container.get_container_host_ip(),
        port=int(postgres_container.get_exposed_port(5432)),
        database="test_crm",
        user="test_crm",
        password="test_password",
    )
    pool.open()

    init_sql_path = os.path.join(ROOT_DIR, "docker", "init-db.sql")
    with open(init_sql_path, "r") as f:
        pool.execute_command(f.read())

    yield pool

    pool.close()


@pytest.fixture(scope="function")
def clean_db(pg_pool) -> Generator[DatabaseConnectionPool, None, None]:
    """
    Provide a pool over an empty accounts table

    Yields:
        DatabaseConnectionPool
    """
    pg_pool.execute_command("TRUNCATE TABLE accounts")
    yield pg_pool


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture(scope="session")
def test_data_dir() -> str:
    """
    Get path to test data fixtures directory

    Returns:
        Path to tests/fixtures directory
    """
    return os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def accounts_csv(test_data_dir) -> str:
    """Content of the sample import file"""
    with open(os.path.join(test_data_dir, "accounts.csv"), encoding="utf-8") as f:
        return f.read()


# =======================
# CONFIGURATION FIXTURES
# =======================

@pytest.fixture(scope="session", autouse=True)
def test_env_vars():
    """
    Load config/test.env into the environment
    """
    from dotenv import load_dotenv

    env_path = os.path.join(ROOT_DIR, "config", "test.env")

    if os.path.exists(env_path):
        load_dotenv(env_path, override=True)
