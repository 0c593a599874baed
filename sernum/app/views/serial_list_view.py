"""List view for serial number entries.

The view renders rows and emits select/delete callbacks to the app
presenter layer.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, List, Optional, Sequence


class SerialListView(ttk.Frame):
    """
    Single-column table of serial numbers with multi-selection.

    Delete/BackSpace while the table has focus requests deletion of the
    selection; the context menu deletes the row under the cursor.
    """

    def __init__(self, parent, **kwargs):
        super().__init__(parent, **kwargs)

        self.tree = ttk.Treeview(
            self,
            columns=("value",),
            show="headings",
            selectmode="extended",
        )
        self.tree.heading("value", text="Serial Number")
        self.tree.column("value", anchor=tk.W, stretch=True)

        vsb = ttk.Scrollbar(self, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=vsb.set)

        self.tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        vsb.pack(side=tk.RIGHT, fill=tk.Y)

        self.on_select: Optional[Callable[[List[str]], None]] = None
        self.on_delete_selected: Optional[Callable[[], None]] = None
        self.on_delete_row: Optional[Callable[[str], None]] = None

        self._menu = tk.Menu(self, tearoff=0)
        self._menu.add_command(label="Delete", command=self._on_menu_delete)
        self._menu_row: Optional[str] = None

        self.tree.bind("<<TreeviewSelect>>", self._on_select_changed)
        self.tree.bind("<Delete>", self._on_delete_key)
        self.tree.bind("<BackSpace>", self._on_delete_key)
        self.tree.bind("<Button-3>", self._on_context_menu)
        self.tree.bind("<Button-2>", self._on_context_menu)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_rows(self, rows: Sequence) -> None:
        """Replace rows; each row needs ``id`` and ``value`` attributes."""
        selected = set(self.tree.selection())
        self.tree.delete(*self.tree.get_children())
        for row in rows:
            self.tree.insert("", tk.END, iid=row.id, values=(row.value,))
        keep = [iid for iid in selected if self.tree.exists(iid)]
        if keep:
            self.tree.selection_set(keep)

    def set_selection(self, entry_ids: Sequence[str]) -> None:
        current = set(self.tree.selection())
        wanted = {iid for iid in entry_ids if self.tree.exists(iid)}
        if current != wanted:
            self.tree.selection_set(list(wanted))

    def selected_ids(self) -> List[str]:
        return list(self.tree.selection())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _on_select_changed(self, _event=None) -> None:
        if self.on_select:
            self.on_select(self.selected_ids())

    def _on_delete_key(self, _event=None):
        if self.on_delete_selected and self.tree.selection():
            self.on_delete_selected()
        return "break"

    def _on_context_menu(self, event) -> None:
        row = self.tree.identify_row(event.y)
        if not row:
            return
        self._menu_row = row
        try:
            self._menu.tk_popup(event.x_root, event.y_root)
        finally:
            self._menu.grab_release()

    def _on_menu_delete(self) -> None:
        row, self._menu_row = self._menu_row, None
        if row and self.on_delete_row:
            self.on_delete_row(row)


__all__ = ["SerialListView"]
