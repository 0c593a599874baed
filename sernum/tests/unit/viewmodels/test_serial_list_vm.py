from __future__ import annotations

from typing import List

import pytest

from sernum.adapters.entry_store_memory import EntryStoreMemory
from sernum.domain.csv_export import decode_values
from sernum.domain.entities import EntryId
from sernum.domain.errors import DuplicateEntry, ExportFailure, PersistenceFailure
from sernum.viewmodels.serial_list_vm import SerialListVM


class _MemorySink:
    def __init__(self) -> None:
        self.payloads: List[bytes] = []

    def write(self, data: bytes, destination: str) -> str:
        self.payloads.append(data)
        return destination


class _BrokenSink:
    def write(self, data: bytes, destination: str) -> str:
        raise OSError("device not ready")


def _vm(*values: str) -> SerialListVM:
    return SerialListVM(EntryStoreMemory(list(values)))


def _ids_for(vm: SerialListVM, *values: str) -> List[EntryId]:
    return [entry.id for entry in vm.entries if entry.value in values]


def test_add_new_value_grows_list_by_one():
    vm = _vm("A1")

    assert vm.cmd_add("B2") is True

    assert len(vm) == 2
    assert vm.entries[-1].value == "B2"
    assert vm.error_message is None


def test_add_uses_pending_input_and_clears_it():
    vm = _vm()
    vm.set_input("X1")

    assert vm.cmd_add() is True

    assert vm.values == ["X1"]
    assert vm.input_text == ""


def test_add_duplicate_sets_error_and_keeps_list_and_input():
    vm = _vm("A1")
    vm.set_input("A1")

    assert vm.cmd_add() is False

    assert vm.values == ["A1"]
    assert isinstance(vm.last_error, DuplicateEntry)
    assert vm.error_message == "Serial number 'A1' already exists."
    assert vm.input_text == "A1"


def test_add_empty_is_silent_noop():
    vm = _vm("A1")

    assert vm.cmd_add("") is True

    assert vm.values == ["A1"]
    assert vm.error_message is None
    assert vm.last_error is None


def test_add_commit_failure_surfaces_persistence_failure():
    store = EntryStoreMemory(["A1"])
    vm = SerialListVM(store)
    store.commit_error = "disk full"
    vm.set_input("B2")

    assert vm.cmd_add() is False

    assert isinstance(vm.last_error, PersistenceFailure)
    assert "disk full" in (vm.error_message or "")
    assert vm.values == ["A1"]
    assert vm.input_text == "B2"


def test_successful_operation_clears_previous_error():
    vm = _vm("A1")
    vm.cmd_add("A1")
    assert vm.error_message is not None

    vm.cmd_add("B2")

    assert vm.error_message is None
    assert vm.last_error is None


def test_delete_selected_removes_exactly_selection_and_clears_it():
    vm = _vm("A1", "B2", "C3", "D4")
    vm.set_selection(_ids_for(vm, "B2", "D4"))

    assert vm.cmd_delete_selected() is True

    assert vm.values == ["A1", "C3"]
    assert vm.get_selection() == set()
    assert vm.can_delete_selected is False


def test_delete_selected_with_empty_selection_is_noop():
    store = EntryStoreMemory(["A1"])
    vm = SerialListVM(store)

    assert vm.cmd_delete_selected() is True

    assert vm.values == ["A1"]
    assert store.commits == 0
    assert vm.error_message is None


def test_delete_selected_commit_failure_keeps_selection():
    store = EntryStoreMemory(["A1", "B2"])
    vm = SerialListVM(store)
    vm.set_selection(_ids_for(vm, "A1"))
    store.commit_error = "locked"

    assert vm.cmd_delete_selected() is False

    assert vm.values == ["A1", "B2"]
    assert vm.get_selection() == set(_ids_for(vm, "A1"))
    assert isinstance(vm.last_error, PersistenceFailure)


def test_delete_at_positions_ignores_out_of_range():
    vm = _vm("A1", "B2", "C3")

    assert vm.cmd_delete_at([0, 2, 7, -1]) is True

    assert vm.values == ["B2"]


def test_delete_entry_prunes_it_from_selection():
    vm = _vm("A1", "B2")
    a1, b2 = vm.entries
    vm.set_selection([a1.id, b2.id])

    vm.cmd_delete_entry(a1.id)

    assert vm.get_selection() == {b2.id}


@pytest.mark.parametrize("count", [0, 1, 5])
def test_delete_all_yields_empty_list(count):
    vm = _vm(*[f"SN{i}" for i in range(count)])
    vm.set_selection([e.id for e in vm.entries])

    assert vm.cmd_delete_all() is True

    assert len(vm) == 0
    assert vm.get_selection() == set()


def test_selection_only_accepts_live_entries():
    vm = _vm("A1")
    a1 = vm.entries[0]

    vm.set_selection([a1.id, EntryId("ghost")])
    assert vm.get_selection() == {a1.id}

    vm.toggle_selection(EntryId("ghost"))
    assert vm.get_selection() == {a1.id}

    vm.toggle_selection(a1.id)
    assert vm.get_selection() == set()


def test_refresh_prunes_selection_after_external_delete():
    store = EntryStoreMemory(["A1", "B2"])
    vm = SerialListVM(store)
    a1 = vm.entries[0]
    vm.set_selection([a1.id])

    store.delete(a1.id)
    store.commit()
    vm.refresh()

    assert vm.get_selection() == set()
    assert vm.values == ["B2"]


def test_export_writes_csv_and_sets_notice():
    vm = _vm("A1", "B2")
    sink = _MemorySink()

    assert vm.cmd_export(sink, "out.csv") is True

    assert sink.payloads == [b"Serial Number\nA1\nB2"]
    assert vm.notice == "Exported 2 serial numbers."
    assert vm.last_export is not None
    assert vm.last_export.location == "out.csv"


def test_export_round_trip_matches_store_order():
    vm = _vm("Z9", "A1", "M5")
    sink = _MemorySink()
    vm.cmd_export(sink, "out.csv")

    assert decode_values(sink.payloads[0]) == vm.values


def test_export_failure_sets_error():
    vm = _vm("A1")

    assert vm.cmd_export(_BrokenSink(), "out.csv") is False

    assert isinstance(vm.last_error, ExportFailure)
    assert vm.error_message == "Export failed: device not ready"
    assert vm.notice is None


def test_dismiss_clears_transient_messages_and_notifies():
    messages = []
    vm = SerialListVM(
        EntryStoreMemory(["A1"]),
        on_message_changed=lambda err, notice: messages.append((err, notice)),
    )
    vm.cmd_add("A1")
    vm.dismiss_error()

    assert vm.error_message is None
    assert messages == [("Serial number 'A1' already exists.", None), (None, None)]


def test_observers_receive_entries_and_selection():
    seen_entries = []
    seen_selection = []
    vm = SerialListVM(
        EntryStoreMemory(),
        on_entries_changed=lambda entries: seen_entries.append([e.value for e in entries]),
        on_selection_changed=lambda sel: seen_selection.append(set(sel)),
    )
    vm.cmd_add("X1")
    vm.set_selection([vm.entries[0].id])

    assert seen_entries == [[], ["X1"]]
    assert seen_selection == [{vm.entries[0].id}]


def test_concrete_scenario():
    vm = _vm()

    assert vm.cmd_add("X1") is True
    assert vm.cmd_add("X1") is False
    assert isinstance(vm.last_error, DuplicateEntry)
    assert len(vm) == 1

    assert vm.cmd_add("X2") is True
    assert len(vm) == 2

    vm.set_selection(_ids_for(vm, "X1"))
    assert vm.cmd_delete_selected() is True

    assert len(vm) == 1
    assert vm.values == ["X2"]
