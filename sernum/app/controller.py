"""Adapter wiring for the desktop app runtime.

This module owns construction of the entry store and export sinks that
depend on values in :class:`sernum.viewmodels.settings_vm.SettingsVM`. It is
invoked by the app bootstrap before building the list controller.
"""

from __future__ import annotations

import os
from typing import Optional

from ..adapters.entry_store_local import EntryStoreLocal
from ..adapters.export_file import FileExportSink
from ..adapters.export_share import ShareExportSink, can_open_with_platform
from ..adapters.storage_local import StorageLocal
from ..viewmodels.settings_vm import SettingsVM


class AppController:
    """Create and cache runtime adapters from settings state.

    Call chain:
        ``sernum.app.main.App`` and ``sernum.web_ui.runtime.WebRuntime``
        create one instance and ask it for the entry store and sinks.
    """

    def __init__(self, settings_vm: SettingsVM, storage: StorageLocal) -> None:
        self.settings_vm = settings_vm
        self.storage = storage
        self._store: Optional[EntryStoreLocal] = None
        self._file_sink: Optional[FileExportSink] = None
        self._share_sink: Optional[ShareExportSink] = None

    @property
    def store_path(self) -> str:
        return self.storage.resolve(self.settings_vm.store_path)

    def reset(self) -> None:
        """Drop cached adapters so the next access rebuilds them from settings."""
        self._store = None
        self._file_sink = None

    def entry_store(self) -> EntryStoreLocal:
        """Return the entry store; raises ``StoreError`` if the file is unreadable."""
        if self._store is None or self._store.path != self.store_path:
            self._store = EntryStoreLocal(self.store_path)
        return self._store

    def file_sink(self) -> FileExportSink:
        if self._file_sink is None:
            self._file_sink = FileExportSink()
        return self._file_sink

    def share_sink(self) -> Optional[ShareExportSink]:
        """Share sink, or ``None`` when the platform has no default opener."""
        if not can_open_with_platform():
            return None
        if self._share_sink is None:
            self._share_sink = ShareExportSink()
        return self._share_sink

    def default_export_path(self) -> str:
        return os.path.join(self.settings_vm.export_dir, self.settings_vm.export_filename)

    def close(self) -> None:
        """Remove files left behind by the share sink."""
        if self._share_sink is not None:
            self._share_sink.cleanup()
