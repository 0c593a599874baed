"""
MainWindowView
---------------
Tkinter main window for the serial number list.
This file contains **only View code**: no persistence, no domain logic. It
exposes callback hooks that are expected to be connected to ViewModels.

The window provides:
  * Input row (entry + Add button)
  * Host frame for the SerialListView
  * Toolbar with list actions (delete selected/all, export, share, settings)
  * StatusBar at the bottom for errors and notices
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional


class MainWindowView(tk.Tk):
    """Top-level application window.

    UI-only. Wires UI events to callbacks passed to the constructor.
    """

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        *,
        on_add: Optional[Callable[[str], None]] = None,
        on_delete_selected: OnVoid = None,
        on_delete_all: OnVoid = None,
        on_export: OnVoid = None,
        on_share: OnVoid = None,
        on_open_settings: OnVoid = None,
        on_quit: OnVoid = None,
    ) -> None:
        super().__init__()

        self.title("Serial Numbers")
        self.geometry("520x640")
        self.minsize(360, 420)

        self._on_add = on_add
        self._on_delete_selected = on_delete_selected
        self._on_delete_all = on_delete_all
        self._on_export = on_export
        self._on_share = on_share
        self._on_open_settings = on_open_settings
        self._on_quit = on_quit

        # Rows: input, list, toolbar, status
        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_input_row(self)
        self.list_host = ttk.Frame(self)
        self.list_host.grid(row=1, column=0, sticky="nsew", padx=8, pady=4)
        self._build_toolbar(self)
        self._build_statusbar(self)

        self.bind("<Control-q>", lambda e: self._on_quit and self._on_quit())
        self.bind("<Control-e>", lambda e: self._on_export and self._on_export())
        self.protocol("WM_DELETE_WINDOW", lambda: self._on_quit() if self._on_quit else self.destroy())

    # ------------------------------------------------------------------
    # Input row
    # ------------------------------------------------------------------
    def _build_input_row(self, parent: tk.Widget) -> None:
        row = ttk.Frame(parent)
        row.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 4))
        row.columnconfigure(0, weight=1)

        self.input_var = tk.StringVar(value="")
        self.entry = ttk.Entry(row, textvariable=self.input_var)
        self.entry.grid(row=0, column=0, sticky="ew", padx=(0, 6))
        self.entry.bind("<Return>", lambda e: self._submit())
        ttk.Button(row, text="Add", command=self._submit).grid(row=0, column=1)

    def _submit(self) -> None:
        if self._on_add:
            self._on_add(self.input_var.get())

    # ------------------------------------------------------------------
    # Toolbar
    # ------------------------------------------------------------------
    def _build_toolbar(self, parent: tk.Widget) -> None:
        toolbar = ttk.Frame(parent)
        toolbar.grid(row=2, column=0, sticky="ew", padx=8, pady=4)

        self.btn_delete_selected = ttk.Button(
            toolbar, text="Delete Selected", command=self._on_delete_selected, state="disabled"
        )
        self.btn_delete_selected.grid(row=0, column=0, padx=(0, 6))
        self.btn_delete_all = ttk.Button(toolbar, text="Delete All", command=self._on_delete_all)
        self.btn_delete_all.grid(row=0, column=1, padx=6)

        self.btn_export = ttk.Button(toolbar, text="Export CSV", command=self._on_export)
        self.btn_export.grid(row=0, column=2, padx=(24, 6))
        self.btn_share = ttk.Button(toolbar, text="Share", command=self._on_share)
        self.btn_share.grid(row=0, column=3, padx=6)

        ttk.Button(toolbar, text="Settings", command=self._on_open_settings).grid(
            row=0, column=4, padx=(24, 6)
        )
        ttk.Button(toolbar, text="Quit", command=self._on_quit).grid(row=0, column=5, padx=6)

    # ------------------------------------------------------------------
    # StatusBar
    # ------------------------------------------------------------------
    def _build_statusbar(self, parent: tk.Widget) -> None:
        status = ttk.Frame(parent)
        status.grid(row=3, column=0, sticky="ew", padx=8, pady=(4, 8))
        status.columnconfigure(1, weight=1)

        ttk.Label(status, text="Entries:").grid(row=0, column=0, sticky="w")
        self.lbl_count = ttk.Label(status, text="0")
        self.lbl_count.grid(row=0, column=1, sticky="w")

        self.status_message_var = tk.StringVar(value="Ready.")
        self.lbl_status = ttk.Label(status, textvariable=self.status_message_var)
        self.lbl_status.grid(row=0, column=2, sticky="e")

    # ------------------------------------------------------------------
    # Public API (called by VMs/presenters)
    # ------------------------------------------------------------------
    def set_input(self, text: str) -> None:
        self.input_var.set(text)

    def set_count(self, count: int) -> None:
        self.lbl_count.configure(text=str(count))

    def set_delete_selected_enabled(self, enabled: bool) -> None:
        self.btn_delete_selected.configure(state="normal" if enabled else "disabled")

    def set_export_enabled(self, enabled: bool) -> None:
        state = "normal" if enabled else "disabled"
        self.btn_export.configure(state=state)
        self.btn_delete_all.configure(state=state)

    def set_share_available(self, available: bool) -> None:
        if not available:
            self.btn_share.grid_remove()

    def set_status_message(self, text: str) -> None:
        self.status_message_var.set(text)

    def show_toast(self, message: str, level: str = "info") -> None:
        """
        Lightweight user feedback in the statusbar.
        level selects the text color ("error" is red).
        """
        self.lbl_status.configure(foreground="#b42318" if level == "error" else "")
        self.status_message_var.set(message)

    def focus_input(self) -> None:
        self.entry.focus_set()
