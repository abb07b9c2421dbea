"""
Unit tests for the in-memory account store.
"""

import pytest

from account_sync.core.exceptions import StoreError
from account_sync.store import InMemoryAccountStore


@pytest.mark.unit
class TestInMemoryAccountStore:
    """Tests for InMemoryAccountStore"""

    def test_insert_assigns_id_and_timestamps(self, memory_store):
        result = memory_store.insert({"company_name": "Acme", "tags": ("OTA",)})

        assert result.ok
        stored = memory_store.find_one("id", result.account_id)
        assert stored["company_name"] == "Acme"
        assert stored["tags"] == ["OTA"]
        assert stored["created_at"] is not None
        assert stored["updated_at"] == stored["created_at"]

    def test_find_one_missing_returns_none(self, memory_store):
        assert memory_store.find_one("company_name", "Nobody") is None

    def test_find_one_multiple_matches_raises(self, clock):
        store = InMemoryAccountStore(
            [{"company_name": "Acme"}, {"company_name": "Acme"}], clock=clock
        )

        with pytest.raises(StoreError) as exc_info:
            store.find_one("company_name", "Acme")
        assert exc_info.value.operation == "find_one"

    def test_find_one_rejects_other_columns(self, memory_store):
        with pytest.raises(ValueError, match="Unsupported lookup column"):
            memory_store.find_one("email", "x@y.example")

    def test_insert_rejects_unknown_columns(self, memory_store):
        with pytest.raises(ValueError, match="favourite_colour"):
            memory_store.insert({"company_name": "Acme", "favourite_colour": "blue"})

    def test_update_missing_account_fails(self, memory_store):
        result = memory_store.update({"company_name": "Acme"}, "acc-404")
        assert not result.ok
        assert "not found" in result.error

    def test_update_merges_fields(self, clock):
        store = InMemoryAccountStore([{"id": "acc-1", "company_name": "Acme", "phone": "1"}], clock=clock)

        result = store.update({"email": "a@acme.example"}, "acc-1")

        assert result.ok
        assert store.accounts[0]["phone"] == "1"
        assert store.accounts[0]["email"] == "a@acme.example"

    def test_failing_names(self, clock):
        store = InMemoryAccountStore(failing_names=["Broken"], clock=clock)

        assert not store.insert({"company_name": "Broken"}).ok
        assert store.accounts == []

    def test_list_newest_first(self, memory_store):
        for name in ("A", "B", "C"):
            memory_store.insert({"company_name": name})

        names = [a["company_name"] for a in memory_store.list_accounts()]
        assert names == ["C", "B", "A"]

        names = [a["company_name"] for a in memory_store.list_accounts(descending=False)]
        assert names == ["A", "B", "C"]

    def test_accounts_snapshot_is_a_copy(self, memory_store):
        memory_store.insert({"company_name": "Acme"})
        memory_store.accounts[0]["company_name"] = "Changed"
        assert memory_store.accounts[0]["company_name"] == "Acme"
