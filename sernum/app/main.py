# sernum/app/main.py
from __future__ import annotations
import logging
import os
from tkinter import filedialog, messagebox
from typing import Dict, List, Optional, Set

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.serial_list_view import SerialListView
from .views.settings_dialog import SettingsDialog

# ---- ViewModels ----
from ..viewmodels.serial_list_vm import SerialListVM
from ..viewmodels.settings_vm import SettingsVM

# ---- Adapters & wiring ----
from ..adapters.storage_local import StorageLocal
from ..domain.entities import EntryId, SerialNumberEntry
from ..domain.errors import StoreError
from .controller import AppController
from ..utils import logging as logging_utils

logging_utils.configure_root()


class App:
    """Bootstrap: wire Views <-> ViewModels and the local entry store."""

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)
        self.win = MainWindowView(
            on_add=self._on_add,
            on_delete_selected=self._on_delete_selected,
            on_delete_all=self._on_delete_all,
            on_export=self._on_export,
            on_share=self._on_share,
            on_open_settings=self._on_open_settings,
            on_quit=self._on_quit,
        )
        self._message_after_id: Optional[str] = None

        # ---- Settings & storage ----
        self.settings_vm = SettingsVM()
        self._storage_root = os.environ.get("SERNUM_STORAGE_ROOT") or "."
        self._storage = StorageLocal(root_dir=self._storage_root)
        self._load_user_settings()
        self.controller = AppController(self.settings_vm, self._storage)

        # ---- Subviews ----
        self.list_view = SerialListView(self.win.list_host)
        self.list_view.pack(fill="both", expand=True)
        self.list_view.on_select = self._on_view_selection
        self.list_view.on_delete_selected = self._on_delete_selected
        self.list_view.on_delete_row = self._on_delete_row

        self.win.set_share_available(self.controller.share_sink() is not None)

        # ---- List controller ----
        self.list_vm: Optional[SerialListVM] = None
        self._bind_store()
        self.win.focus_input()

    # ==================================================================
    # Wiring helpers
    # ==================================================================
    def _load_user_settings(self) -> None:
        payload: Optional[Dict] = None
        try:
            payload = self._storage.load_user_settings()
        except (OSError, ValueError) as exc:
            self.win.show_toast(f"Could not load settings: {exc}", level="error")
        if payload is not None:
            try:
                self.settings_vm.apply_dict(payload)
            except ValueError as exc:
                self.win.show_toast(str(exc), level="error")
        self._apply_logging_preferences()

    def _apply_logging_preferences(self) -> None:
        level = logging_utils.apply_gui_preferences(self.settings_vm.debug_logging)
        self._log.debug("Log level set to %s", logging.getLevelName(level))

    def _bind_store(self) -> None:
        try:
            store = self.controller.entry_store()
        except StoreError as exc:
            self._log.error("Could not open entry store: %s", exc)
            messagebox.showerror("Serial Numbers", f"Could not open the entry store:\n{exc}", parent=self.win)
            self.win.destroy()
            raise SystemExit(1) from exc
        self._log.info("Using entry store %s", self.controller.store_path)
        self.list_vm = SerialListVM(
            store,
            on_entries_changed=self._apply_entries,
            on_selection_changed=self._apply_selection,
            on_message_changed=self._apply_message,
        )

    # ==================================================================
    # User intents
    # ==================================================================
    def _on_add(self, text: str) -> None:
        self.list_vm.set_input(text)
        if self.list_vm.cmd_add():
            self.win.set_input(self.list_vm.input_text)
        self.win.focus_input()

    def _on_view_selection(self, ids: List[str]) -> None:
        self.list_vm.set_selection(EntryId(i) for i in ids)

    def _on_delete_selected(self) -> None:
        self.list_vm.cmd_delete_selected()

    def _on_delete_row(self, entry_id: str) -> None:
        self.list_vm.cmd_delete_entry(EntryId(entry_id))

    def _on_delete_all(self) -> None:
        count = len(self.list_vm)
        if count and not messagebox.askyesno(
            "Delete All",
            f"Delete all {count} serial numbers?",
            parent=self.win,
        ):
            return
        self.list_vm.cmd_delete_all()

    def _on_export(self) -> None:
        path = filedialog.asksaveasfilename(
            parent=self.win,
            defaultextension=".csv",
            filetypes=[("CSV", "*.csv")],
            initialfile=self.settings_vm.export_filename,
            initialdir=self.settings_vm.export_dir,
            title="Export Serial Numbers",
        )
        if not path:
            return
        if self.list_vm.cmd_export(self.controller.file_sink(), path):
            self.settings_vm.export_dir = os.path.dirname(path)

    def _on_share(self) -> None:
        sink = self.controller.share_sink()
        if sink is None:
            self.win.show_toast("Sharing not supported on this platform.", level="error")
            return
        self.list_vm.cmd_export(sink, self.settings_vm.export_filename)

    def _on_open_settings(self) -> None:
        dlg: Optional[SettingsDialog] = None

        def on_browse() -> None:
            selected = filedialog.askdirectory(
                parent=dlg,
                initialdir=self.settings_vm.export_dir or None,
                title="Select Export Folder",
            )
            if selected:
                dlg.set_export_dir(os.path.normpath(selected))

        def on_save(payload: dict) -> None:
            if self._apply_settings(payload):
                dlg.destroy()

        dlg = SettingsDialog(self.win, on_browse_export_dir=on_browse, on_save=on_save)
        dlg.load(self.settings_vm.to_dict())

    def _apply_settings(self, payload: dict) -> bool:
        """Apply and persist settings; a store that cannot be opened is rejected."""
        previous = self.settings_vm.to_dict()
        previous_store = self.controller.store_path
        try:
            self.settings_vm.apply_dict(payload)
            if self.controller.store_path != previous_store:
                self.controller.entry_store()
            self._storage.save_user_settings(self.settings_vm.to_dict())
        except (OSError, ValueError, StoreError) as exc:
            self.settings_vm.apply_dict(previous)
            self._log.warning("Settings rejected: %s", exc)
            self.win.show_toast(f"Could not save settings: {exc}", level="error")
            return False
        self._apply_logging_preferences()
        if self.controller.store_path != previous_store:
            self._bind_store()
        self.win.show_toast("Settings saved.")
        return True

    def _on_quit(self) -> None:
        self._log.info("Quit requested")
        self.controller.close()
        self.win.destroy()

    # ==================================================================
    # VM -> View glue
    # ==================================================================
    def _apply_entries(self, entries: List[SerialNumberEntry]) -> None:
        self.list_view.set_rows(entries)
        self.win.set_count(len(entries))
        self.win.set_export_enabled(bool(entries))

    def _apply_selection(self, selection: Set[EntryId]) -> None:
        self.list_view.set_selection(sorted(selection))
        self.win.set_delete_selected_enabled(bool(selection))

    def _apply_message(self, error: Optional[str], notice: Optional[str]) -> None:
        if self._message_after_id is not None:
            self.win.after_cancel(self._message_after_id)
            self._message_after_id = None
        if error:
            self.win.show_toast(error, level="error")
        elif notice:
            self.win.show_toast(notice)
        else:
            self.win.show_toast("Ready.")
            return
        timeout = self.settings_vm.notice_timeout_ms
        if timeout > 0:
            self._message_after_id = self.win.after(timeout, self._dismiss_messages)

    def _dismiss_messages(self) -> None:
        self._message_after_id = None
        self.list_vm.dismiss_error()
        self.list_vm.dismiss_notice()


def main() -> None:
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
