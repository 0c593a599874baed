from __future__ import annotations
from typing import Dict, List, Optional, Protocol

from .entities import EntryId, SerialNumberEntry


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class EntryStorePort(Protocol):
    """Embedded persistent collection of serial number entries.

    Mutations stay pending until ``commit``. ``query_all`` reflects pending
    mutations, in store iteration order.
    """

    def insert(self, value: str) -> SerialNumberEntry: ...
    def delete(self, entry_id: EntryId) -> None: ...
    def query_all(self) -> List[SerialNumberEntry]: ...
    def commit(self) -> None: ...  # raises StoreError
    def rollback(self) -> None: ...


class ExportSinkPort(Protocol):
    """Destination for exported bytes (file on desktop, share/download elsewhere)."""

    def write(self, data: bytes, destination: str) -> str: ...  # returns written location


class SettingsStoragePort(Protocol):
    """Persistence for user settings."""

    def save_user_settings(self, payload: Dict) -> None: ...
    def load_user_settings(self) -> Optional[Dict]: ...
