"""NiceGUI runtime orchestration for the serial number list.

This module composes the existing viewmodels and adapters for the web
runtime. It does not import NiceGUI itself; the page module injects the
browser download function.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, Optional

from sernum.adapters.storage_local import StorageLocal
from sernum.app.controller import AppController
from sernum.domain.ports import ExportSinkPort
from sernum.utils import logging as logging_utils
from sernum.viewmodels.serial_list_vm import SerialListVM
from sernum.viewmodels.settings_vm import SettingsVM


LOGGER = logging.getLogger(__name__)

Downloader = Callable[..., Any]


class DownloadExportSink(ExportSinkPort):
    """Hand exported bytes to the browser as a file download."""

    def __init__(self, download: Downloader) -> None:
        self._download = download

    def write(self, data: bytes, destination: str) -> str:
        filename = os.path.basename(destination or "") or "export.csv"
        self._download(data, filename=filename)
        return filename


class WebRuntime:
    """Shared state for all browser sessions of one server process."""

    def __init__(self, storage_root: Optional[str] = None) -> None:
        root = storage_root or os.environ.get("SERNUM_STORAGE_ROOT") or "."
        self.settings_vm = SettingsVM()
        self.storage = StorageLocal(root_dir=root)
        self.status_message = "Ready."
        self._load_user_settings()
        self.controller = AppController(self.settings_vm, self.storage)

    def _load_user_settings(self) -> None:
        try:
            payload = self.storage.load_user_settings()
            if payload is not None:
                self.settings_vm.apply_dict(payload)
        except (OSError, ValueError) as exc:
            LOGGER.warning("Could not load settings: %s", exc)
            self.status_message = f"Could not load settings: {exc}"
        logging_utils.apply_gui_preferences(self.settings_vm.debug_logging)

    def new_session(self, **callbacks: Any) -> SerialListVM:
        """Create a list controller for one page; selection stays per page.

        Raises ``StoreError`` when the store file cannot be read.
        """
        store = self.controller.entry_store()
        return SerialListVM(store, **callbacks)

    def export_sink(self, download: Downloader) -> DownloadExportSink:
        return DownloadExportSink(download)

    @property
    def export_filename(self) -> str:
        return self.settings_vm.export_filename

    @property
    def notice_timeout_s(self) -> float:
        return self.settings_vm.notice_timeout_ms / 1000.0

    def settings_payload(self) -> Dict[str, Any]:
        return self.settings_vm.to_dict()


DELETE_KEYS = frozenset({"Delete", "Backspace"})


def handle_list_key(vm: SerialListVM, key: str) -> bool:
    """Route a page-level key press; Delete/Backspace act as delete-selected."""
    if key not in DELETE_KEYS:
        return False
    vm.cmd_delete_selected()
    return True
