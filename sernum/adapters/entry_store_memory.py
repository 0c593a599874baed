from __future__ import annotations
from itertools import count
from typing import List, Optional

from sernum.domain.entities import EntryId, SerialNumberEntry
from sernum.domain.errors import StoreError
from sernum.domain.ports import EntryStorePort


class EntryStoreMemory(EntryStorePort):
    """In-memory entry store used for tests and offline development.

    Set ``commit_error`` to make every following ``commit`` raise
    ``StoreError`` with that message.
    """

    def __init__(self, values: Optional[List[str]] = None) -> None:
        self._ids = count(1)
        self._committed: List[SerialNumberEntry] = [self._new(v) for v in values or []]
        self._working: List[SerialNumberEntry] = list(self._committed)
        self.commit_error: Optional[str] = None
        self.commits = 0

    def _new(self, value: str) -> SerialNumberEntry:
        return SerialNumberEntry(id=EntryId(f"mem-{next(self._ids)}"), value=value)

    def insert(self, value: str) -> SerialNumberEntry:
        entry = self._new(value)
        self._working.append(entry)
        return entry

    def delete(self, entry_id: EntryId) -> None:
        self._working = [e for e in self._working if e.id != entry_id]

    def query_all(self) -> List[SerialNumberEntry]:
        return list(self._working)

    def committed(self) -> List[SerialNumberEntry]:
        return list(self._committed)

    def commit(self) -> None:
        if self.commit_error is not None:
            raise StoreError(self.commit_error)
        self._committed = list(self._working)
        self.commits += 1

    def rollback(self) -> None:
        self._working = list(self._committed)
