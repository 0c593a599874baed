import pytest

from sernum.adapters.entry_store_memory import EntryStoreMemory
from sernum.domain.entities import EntryId
from sernum.domain.errors import PersistenceFailure
from sernum.usecases.delete_all_entries import DeleteAllEntries
from sernum.usecases.delete_entries import DeleteEntries


def test_delete_entries_removes_exactly_requested_and_commits_once():
    store = EntryStoreMemory(["A1", "B2", "C3"])
    a1, _, c3 = store.query_all()

    removed = DeleteEntries(store)([a1.id, c3.id])

    assert removed == 2
    assert store.commits == 1
    assert [e.value for e in store.committed()] == ["B2"]


def test_delete_entries_skips_unknown_ids_and_empty_requests():
    store = EntryStoreMemory(["A1"])
    uc = DeleteEntries(store)

    assert uc([]) == 0
    assert uc([EntryId("missing")]) == 0
    assert store.commits == 0


def test_delete_entries_commit_failure_restores_entries():
    store = EntryStoreMemory(["A1", "B2"])
    store.commit_error = "read-only"
    first = store.query_all()[0]

    with pytest.raises(PersistenceFailure):
        DeleteEntries(store)([first.id])

    assert [e.value for e in store.query_all()] == ["A1", "B2"]


@pytest.mark.parametrize("values", [[], ["A1"], ["A1", "B2", "C3", "D4"]])
def test_delete_all_entries_empties_store(values):
    store = EntryStoreMemory(values)

    removed = DeleteAllEntries(store)()

    assert removed == len(values)
    assert store.query_all() == []
    assert store.committed() == []


def test_delete_all_entries_commit_failure():
    store = EntryStoreMemory(["A1"])
    store.commit_error = "locked"

    with pytest.raises(PersistenceFailure):
        DeleteAllEntries(store)()
    assert [e.value for e in store.query_all()] == ["A1"]
