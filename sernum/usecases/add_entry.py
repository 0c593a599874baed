from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..domain.entities import SerialNumberEntry
from ..domain.errors import DuplicateEntry
from ..domain.ports import EntryStorePort
from .error_mapping import map_store_error


@dataclass
class AddEntry:
    """Create one entry and commit it.

    Returns ``None`` for empty input (silent no-op). Raises ``DuplicateEntry``
    when the exact value already exists and ``PersistenceFailure`` when the
    commit fails; in the latter case the pending insert is rolled back.
    """

    store: EntryStorePort

    def __call__(self, value: str) -> Optional[SerialNumberEntry]:
        if not value:
            return None
        if any(entry.value == value for entry in self.store.query_all()):
            raise DuplicateEntry(value)
        entry = self.store.insert(value)
        try:
            self.store.commit()
        except Exception as exc:
            self.store.rollback()
            raise map_store_error(exc) from exc
        return entry
