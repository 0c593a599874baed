from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

log = logging.getLogger(__name__)


class SettingsDialog(tk.Toplevel):
    """Modal dialog to edit app settings (UI-only)."""

    OnVoid = Optional[Callable[[], None]]
    OnSave = Optional[Callable[[dict], None]]

    def __init__(
        self,
        parent: tk.Widget,
        *,
        on_browse_export_dir: OnVoid = None,
        on_save: OnSave = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__(parent)
        self.title("Settings")
        self.transient(parent)
        self.resizable(False, False)

        self._on_browse_export_dir = on_browse_export_dir
        self._on_save = on_save
        self._on_close = on_close

        self.protocol("WM_DELETE_WINDOW", self._on_close_clicked)

        self.store_path_var = tk.StringVar(value="")
        self.export_dir_var = tk.StringVar(value=".")
        self.export_filename_var = tk.StringVar(value="")
        self.notice_timeout_var = tk.StringVar(value="3000")
        self.debug_logging_var = tk.BooleanVar(value=False)

        self._build_ui()

        self.update_idletasks()
        self.grab_set()
        self.focus_set()

    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        pad = dict(padx=8, pady=6)

        storage = ttk.Labelframe(self, text="Storage")
        storage.grid(row=0, column=0, sticky="ew", **pad)
        storage.columnconfigure(1, weight=1)
        ttk.Label(storage, text="Store file:").grid(row=0, column=0, sticky="w")
        ttk.Entry(storage, textvariable=self.store_path_var, width=40).grid(
            row=0, column=1, columnspan=2, sticky="ew"
        )

        export = ttk.Labelframe(self, text="Export")
        export.grid(row=1, column=0, sticky="ew", **pad)
        export.columnconfigure(1, weight=1)
        ttk.Label(export, text="Folder:").grid(row=0, column=0, sticky="w")
        ttk.Entry(export, textvariable=self.export_dir_var, width=40).grid(
            row=0, column=1, sticky="ew", padx=(0, 6)
        )
        ttk.Button(export, text="Browse...", command=lambda: self._safe(self._on_browse_export_dir)).grid(
            row=0, column=2
        )
        ttk.Label(export, text="File name:").grid(row=1, column=0, sticky="w")
        ttk.Entry(export, textvariable=self.export_filename_var, width=40).grid(
            row=1, column=1, columnspan=2, sticky="ew"
        )

        flags = ttk.Frame(self)
        flags.grid(row=2, column=0, sticky="ew", **pad)
        ttk.Label(flags, text="Message timeout (ms):").pack(side="left")
        ttk.Entry(flags, textvariable=self.notice_timeout_var, width=8).pack(side="left", padx=(4, 0))
        ttk.Checkbutton(flags, text="Enable debug logging", variable=self.debug_logging_var).pack(
            side="left", padx=(12, 0)
        )

        footer = ttk.Frame(self)
        footer.grid(row=3, column=0, sticky="ew", **pad)
        ttk.Button(footer, text="Save", command=self._emit_save).pack(side="right", padx=(0, 6))
        ttk.Button(footer, text="Close", command=self._on_close_clicked).pack(side="right")

    # ------------------------------------------------------------------
    def _emit_save(self) -> None:
        settings = {
            "store_path": self.store_path_var.get().strip(),
            "export_dir": self.export_dir_var.get().strip() or ".",
            "export_filename": self.export_filename_var.get().strip(),
            "notice_timeout_ms": self._parse_int(self.notice_timeout_var.get(), 3000),
            "debug_logging": bool(self.debug_logging_var.get()),
        }
        if self._on_save:
            self._on_save(settings)

    def _on_close_clicked(self) -> None:
        self._safe(self._on_close)
        try:
            if self.winfo_exists():
                self.destroy()
        except tk.TclError:
            pass

    # ------------------------------------------------------------------
    # Public setters to initialize dialog fields from VM
    # ------------------------------------------------------------------
    def load(self, payload: dict) -> None:
        self.store_path_var.set(payload.get("store_path", ""))
        self.export_dir_var.set(payload.get("export_dir", "."))
        self.export_filename_var.set(payload.get("export_filename", ""))
        self.notice_timeout_var.set(str(payload.get("notice_timeout_ms", 3000)))
        self.debug_logging_var.set(bool(payload.get("debug_logging")))

    def set_export_dir(self, path: str) -> None:
        self.export_dir_var.set(path)

    # ------------------------------------------------------------------
    @staticmethod
    def _parse_int(text: str, default: int) -> int:
        try:
            return int(text)
        except ValueError:
            return default

    def _safe(self, fn: OnVoid) -> None:
        if fn:
            try:
                fn()
            except Exception:  # pragma: no cover - GUI logging only
                log.exception("SettingsDialog callback failed")
