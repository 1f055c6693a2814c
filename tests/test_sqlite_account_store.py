"""Tests for the SQLite account store (labels, scopes, negatives)."""

import pytest

from intentguard.adapters.sqlite_account_store import SqliteAccountStore
from intentguard.ports.exclusion_store import ExclusionStorePort
from intentguard.ports.label_store import LabelStorePort


@pytest.fixture
def store(tmp_path):
    return SqliteAccountStore(str(tmp_path / "nested" / "account.db"))


def test_implements_ports(store):
    assert isinstance(store, LabelStorePort)
    assert isinstance(store, ExclusionStorePort)


def test_ensure_label_is_get_or_create(store):
    first = store.ensure_label_exists("ENFORCE_PRIVATE_TERM")
    second = store.ensure_label_exists("ENFORCE_PRIVATE_TERM")
    assert first.label_id == second.label_id
    assert first.name == "ENFORCE_PRIVATE_TERM"


def test_list_scopes_with_label_filters_status(store):
    store.upsert_scope("1001", "Naples", "ENABLED")
    store.upsert_scope("1002", "Rome", "paused")
    store.upsert_scope("1003", "Unlabeled", "ENABLED")
    store.attach_label("1001", "ENFORCE_PRIVATE_TERM")
    store.attach_label("1002", "ENFORCE_PRIVATE_TERM")

    enabled = store.list_scopes_with_label("ENFORCE_PRIVATE_TERM", "ENABLED")
    assert [s.scope_id for s in enabled] == ["1001"]
    assert enabled[0].name == "Naples"

    any_status = store.list_scopes_with_label("ENFORCE_PRIVATE_TERM", None)
    assert [s.scope_id for s in any_status] == ["1001", "1002"]


def test_missing_label_lists_nothing(store):
    assert store.list_scopes_with_label("NOPE") == []


def test_exact_exclusions_only(store):
    store.add_negative("1001", "[bus tours]", "EXACT")
    store.add_negative("1001", "free", "BROAD")
    assert store.list_exact_exclusions("1001") == ["[bus tours]"]


def test_create_exact_exclusion_wraps_and_is_idempotent(store):
    store.create_exact_exclusion("1001", "cheap tours")
    store.create_exact_exclusion("1001", "Cheap Tours")
    assert store.list_exact_exclusions("1001") == ["[cheap tours]"]
    assert store.add_negative("1001", "cheap tours") is False


def test_add_negative_rejects_unknown_match_type(store):
    with pytest.raises(ValueError):
        store.add_negative("1001", "x", "FUZZY")


def test_list_negatives(store):
    store.add_negative("1001", "[bus tours]")
    store.add_negative("1001", "free", "broad")
    assert store.list_negatives("1001") == [
        {"text": "[bus tours]", "match_type": "EXACT"},
        {"text": "free", "match_type": "BROAD"},
    ]
