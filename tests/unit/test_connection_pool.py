"""
Unit tests for database connection pool

Configuration checks run without a database; the rest use testcontainers.
"""
import pytest

from account_sync.store.connection import DatabaseConnectionPool


def make_pool(postgres_container, **kwargs) -> DatabaseConnectionPool:
    return DatabaseConnectionPool(
        host=postgres_container.get_container_host_ip(),
        port=int(postgres_container.get_exposed_port(5432)),
        database="test_crm",
        user="test_crm",
        password="test_password",
        **kwargs,
    )


@pytest.mark.unit
def test_password_required(monkeypatch):
    """Test that a missing password is rejected before connecting"""
    monkeypatch.delenv("DB_PASSWORD", raising=False)

    with pytest.raises(ValueError, match="password"):
        DatabaseConnectionPool(host="localhost")


@pytest.mark.unit
def test_settings_from_environment(monkeypatch):
    """Test that DB_* variables fill in missing arguments"""
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_PORT", "6543")
    monkeypatch.setenv("DB_NAME", "accounts")
    monkeypatch.setenv("DB_PASSWORD", "secret")

    pool = DatabaseConnectionPool()

    assert pool.host == "db.internal"
    assert pool.port == 6543
    assert "dbname=accounts" in pool.conninfo
    assert not pool.is_open


@pytest.mark.unit
def test_closed_pool_raises():
    pool = DatabaseConnectionPool(host="localhost", password="secret")

    with pytest.raises(RuntimeError):
        pool.execute_query("SELECT 1")


@pytest.mark.integration
def test_connection_pool_initialization(postgres_container):
    """Test that connection pool initializes correctly"""
    pool = make_pool(postgres_container, min_size=2, max_size=5)

    pool.open()

    assert pool.is_open
    assert pool._pool.min_size == 2
    assert pool._pool.max_size == 5

    pool.close()
    assert not pool.is_open


@pytest.mark.integration
def test_execute_query(postgres_container):
    """Test executing a query using the pool"""
    pool = make_pool(postgres_container)
    pool.open()

    result = pool.execute_query("SELECT 42 as answer")
    assert len(result) == 1
    assert result[0]["answer"] == 42

    pool.close()


@pytest.mark.integration
def test_execute_command_and_returning(clean_db):
    """Test INSERT ... RETURNING and UPDATE row counts"""
    returned = clean_db.execute_returning(
        "INSERT INTO accounts (company_name) VALUES (%s) RETURNING id, status",
        ("Acme",),
    )

    assert returned["id"] is not None
    assert returned["status"] == "New"

    rowcount = clean_db.execute_command(
        "UPDATE accounts SET phone = %s WHERE company_name = %s",
        ("555-0100", "Acme"),
    )
    assert rowcount == 1


@pytest.mark.integration
def test_context_manager(postgres_container):
    """Test using pool as context manager"""
    with make_pool(postgres_container) as pool:
        result = pool.execute_query("SELECT 1 as test")
        assert result[0]["test"] == 1

    # Pool should be closed after context
    with pytest.raises(RuntimeError):
        pool.execute_query("SELECT 1")
