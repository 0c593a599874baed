from __future__ import annotations
from dataclasses import dataclass

from ..domain.ports import EntryStorePort
from .error_mapping import map_store_error


@dataclass
class DeleteAllEntries:
    store: EntryStorePort

    def __call__(self) -> int:
        entries = self.store.query_all()
        try:
            for entry in entries:
                self.store.delete(entry.id)
            self.store.commit()
        except Exception as exc:
            self.store.rollback()
            raise map_store_error(exc) from exc
        return len(entries)
