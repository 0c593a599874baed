from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from ..domain.entities import EntryId
from ..domain.ports import EntryStorePort
from .error_mapping import map_store_error


@dataclass
class DeleteEntries:
    """Delete the given entries and commit once.

    Unknown ids are skipped. Returns the number of entries removed; an empty
    request does not touch the store.
    """

    store: EntryStorePort

    def __call__(self, entry_ids: Iterable[EntryId]) -> int:
        wanted = set(entry_ids)
        if not wanted:
            return 0
        targets = [entry.id for entry in self.store.query_all() if entry.id in wanted]
        if not targets:
            return 0
        try:
            for entry_id in targets:
                self.store.delete(entry_id)
            self.store.commit()
        except Exception as exc:
            self.store.rollback()
            raise map_store_error(exc) from exc
        return len(targets)
