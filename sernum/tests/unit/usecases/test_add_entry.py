import pytest

from sernum.adapters.entry_store_memory import EntryStoreMemory
from sernum.domain.errors import DuplicateEntry, PersistenceFailure
from sernum.usecases.add_entry import AddEntry


def test_add_entry_creates_and_commits():
    store = EntryStoreMemory()
    entry = AddEntry(store)("SN-1")

    assert entry is not None
    assert entry.value == "SN-1"
    assert [e.value for e in store.committed()] == ["SN-1"]


def test_add_entry_empty_is_noop():
    store = EntryStoreMemory(["A1"])
    assert AddEntry(store)("") is None
    assert store.commits == 0
    assert [e.value for e in store.query_all()] == ["A1"]


def test_add_entry_duplicate_is_exact_match():
    store = EntryStoreMemory(["A1"])
    uc = AddEntry(store)

    with pytest.raises(DuplicateEntry) as info:
        uc("A1")
    assert info.value.code == "DUPLICATE_ENTRY"
    assert store.commits == 0

    # No normalization: case and whitespace variants are distinct values.
    uc("a1")
    uc(" A1")
    assert [e.value for e in store.query_all()] == ["A1", "a1", " A1"]


def test_add_entry_commit_failure_rolls_back():
    store = EntryStoreMemory(["A1"])
    store.commit_error = "disk full"

    with pytest.raises(PersistenceFailure) as info:
        AddEntry(store)("B2")

    assert info.value.code == "PERSISTENCE_FAILED"
    assert "disk full" in info.value.message
    assert [e.value for e in store.query_all()] == ["A1"]
