"""List controller for the serial number list.

Call context:
    ``sernum.app.main.App`` (Tk) and ``sernum.web_ui.runtime.WebRuntime``
    (NiceGUI) create one instance per session and forward user intents to its
    ``cmd_*`` methods. Views re-render from ``entries``, ``selection``,
    ``error_message`` and ``notice`` via the observer callbacks.

The controller owns session state only (pending input, selection, transient
messages). Durable entry lifetime belongs to the injected entry store; every
mutation goes through a use case that commits or rolls back.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Set

from ..domain.entities import EntryId, SerialNumberEntry
from ..domain.ports import EntryStorePort, ExportSinkPort, UseCaseError
from ..usecases.add_entry import AddEntry
from ..usecases.delete_all_entries import DeleteAllEntries
from ..usecases.delete_entries import DeleteEntries
from ..usecases.export_entries import ExportEntries, ExportResult

EntriesCallback = Callable[[List[SerialNumberEntry]], None]
SelectionCallback = Callable[[Set[EntryId]], None]
MessageCallback = Callable[[Optional[str], Optional[str]], None]


class SerialListVM:
    """Working view of the entry store plus session-scoped UI state."""

    def __init__(
        self,
        store: EntryStorePort,
        *,
        on_entries_changed: Optional[EntriesCallback] = None,
        on_selection_changed: Optional[SelectionCallback] = None,
        on_message_changed: Optional[MessageCallback] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self._store = store
        self.uc_add = AddEntry(store)
        self.uc_delete = DeleteEntries(store)
        self.uc_delete_all = DeleteAllEntries(store)

        self.on_entries_changed = on_entries_changed
        self.on_selection_changed = on_selection_changed
        self.on_message_changed = on_message_changed

        self.input_text: str = ""
        self.error_message: Optional[str] = None
        self.notice: Optional[str] = None
        self.last_error: Optional[UseCaseError] = None
        self.last_export: Optional[ExportResult] = None

        self._entries: List[SerialNumberEntry] = []
        self._selected: Set[EntryId] = set()
        self.refresh()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def entries(self) -> List[SerialNumberEntry]:
        return list(self._entries)

    @property
    def values(self) -> List[str]:
        return [entry.value for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def can_delete_selected(self) -> bool:
        return bool(self._selected)

    @property
    def can_export(self) -> bool:
        return bool(self._entries)

    # ------------------------------------------------------------------
    # Selection API (called by views)
    # ------------------------------------------------------------------
    def set_selection(self, entry_ids: Iterable[EntryId]) -> None:
        live = {entry.id for entry in self._entries}
        self._selected = {eid for eid in entry_ids if eid in live}
        self._emit_selection()

    def toggle_selection(self, entry_id: EntryId) -> None:
        if entry_id in self._selected:
            self._selected.discard(entry_id)
        elif any(entry.id == entry_id for entry in self._entries):
            self._selected.add(entry_id)
        self._emit_selection()

    def clear_selection(self) -> None:
        if self._selected:
            self._selected = set()
            self._emit_selection()

    def get_selection(self) -> Set[EntryId]:
        return set(self._selected)

    def selected_entries(self) -> List[SerialNumberEntry]:
        return [entry for entry in self._entries if entry.id in self._selected]

    def set_input(self, text: str) -> None:
        self.input_text = text if isinstance(text, str) else str(text or "")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def cmd_add(self, value: Optional[str] = None) -> bool:
        """Add ``value`` (or the pending input). Empty input is a silent no-op."""
        text = self.input_text if value is None else value
        if not text:
            return True
        try:
            self.uc_add(text)
        except UseCaseError as err:
            self._fail(err)
            self.refresh()
            return False
        self._log.info("Added serial number %r", text)
        self.input_text = ""
        self._succeed()
        self.refresh()
        return True

    def cmd_delete_at(self, positions: Iterable[int]) -> bool:
        """Delete entries by position in the current ordered view."""
        ids: List[EntryId] = []
        for pos in positions:
            if 0 <= pos < len(self._entries):
                ids.append(self._entries[pos].id)
            else:
                self._log.debug("Ignoring out-of-range position %s", pos)
        return self._delete(ids)

    def cmd_delete_entry(self, entry_id: EntryId) -> bool:
        return self._delete([entry_id])

    def cmd_delete_selected(self) -> bool:
        """Delete every selected entry; empty selection is a no-op."""
        if not self._selected:
            return True
        ok = self._delete(list(self._selected))
        if ok:
            self.clear_selection()
        return ok

    def cmd_delete_all(self) -> bool:
        try:
            removed = self.uc_delete_all()
        except UseCaseError as err:
            self._fail(err)
            self.refresh()
            return False
        self._log.info("Deleted all %d serial numbers", removed)
        self._succeed()
        self.refresh()
        self.clear_selection()
        return True

    def cmd_export(self, sink: ExportSinkPort, destination: str) -> bool:
        """Export the current entries as CSV through ``sink``."""
        try:
            result = ExportEntries(sink)(self.entries, destination)
        except UseCaseError as err:
            self._fail(err)
            return False
        self.last_export = result
        self._log.info("Exported %d serial numbers to %s", result.count, result.location)
        self._succeed(notice=f"Exported {result.count} serial numbers.")
        return True

    def refresh(self) -> None:
        """Re-read the store and drop selection members that no longer exist."""
        self._entries = self._store.query_all()
        self._emit_entries()
        live = {entry.id for entry in self._entries}
        if not self._selected <= live:
            self._selected &= live
            self._emit_selection()

    # ------------------------------------------------------------------
    # Transient messages
    # ------------------------------------------------------------------
    def dismiss_error(self) -> None:
        if self.error_message is not None:
            self.error_message = None
            self._emit_message()

    def dismiss_notice(self) -> None:
        if self.notice is not None:
            self.notice = None
            self._emit_message()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _delete(self, ids: List[EntryId]) -> bool:
        if not ids:
            return True
        try:
            removed = self.uc_delete(ids)
        except UseCaseError as err:
            self._fail(err)
            self.refresh()
            return False
        self._log.info("Deleted %d serial number(s)", removed)
        self._succeed()
        self.refresh()
        return True

    def _fail(self, err: UseCaseError) -> None:
        self._log.warning("%s: %s", err.code, err.message)
        self.last_error = err
        self.error_message = err.message
        self.notice = None
        self._emit_message()

    def _succeed(self, notice: Optional[str] = None) -> None:
        self.last_error = None
        self.error_message = None
        self.notice = notice
        self._emit_message()

    def _emit_entries(self) -> None:
        if self.on_entries_changed:
            self.on_entries_changed(self.entries)

    def _emit_selection(self) -> None:
        if self.on_selection_changed:
            self.on_selection_changed(self.get_selection())

    def _emit_message(self) -> None:
        if self.on_message_changed:
            self.on_message_changed(self.error_message, self.notice)


__all__ = ["SerialListVM"]
