from __future__ import annotations

import json
import logging
import os
import tempfile
import uuid
from typing import Any, Dict, List

from sernum.domain.entities import EntryId, SerialNumberEntry
from sernum.domain.errors import StoreError
from sernum.domain.ports import EntryStorePort

_FORMAT_VERSION = 1


class EntryStoreLocal(EntryStorePort):
    """Local filesystem entry store (one JSON document per store).

    The store keeps a committed snapshot and a working copy. Mutations touch
    the working copy only; ``commit`` writes the working copy to a temporary
    file next to the target and swaps it in with ``os.replace`` so a commit
    either lands completely or not at all.
    """

    def __init__(self, path: str) -> None:
        self._log = logging.getLogger(__name__)
        self.path = path
        self._committed: List[SerialNumberEntry] = self._load()
        self._working: List[SerialNumberEntry] = list(self._committed)

    # ---- Port API ----
    def insert(self, value: str) -> SerialNumberEntry:
        entry = SerialNumberEntry(id=EntryId(uuid.uuid4().hex), value=value)
        self._working.append(entry)
        return entry

    def delete(self, entry_id: EntryId) -> None:
        before = len(self._working)
        self._working = [e for e in self._working if e.id != entry_id]
        if len(self._working) == before:
            self._log.debug("Delete ignored, unknown entry id %s", entry_id)

    def query_all(self) -> List[SerialNumberEntry]:
        return list(self._working)

    def commit(self) -> None:
        if self._working == self._committed:
            return
        payload = {
            "version": _FORMAT_VERSION,
            "entries": [entry.to_dict() for entry in self._working],
        }
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=".entries-", suffix=".tmp", dir=directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, ensure_ascii=False, indent=2)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except OSError as exc:
            raise StoreError(str(exc)) from exc
        self._committed = list(self._working)
        self._log.debug("Committed %d entries to %s", len(self._committed), self.path)

    def rollback(self) -> None:
        self._working = list(self._committed)

    # ---- Loading ----
    def _load(self) -> List[SerialNumberEntry]:
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, ValueError) as exc:
            raise StoreError(f"Could not read {self.path}: {exc}") from exc
        return self._parse(payload)

    def _parse(self, payload: Any) -> List[SerialNumberEntry]:
        if not isinstance(payload, dict) or not isinstance(payload.get("entries"), list):
            raise StoreError(f"Unexpected store format in {self.path}")
        entries: List[SerialNumberEntry] = []
        seen: Dict[str, str] = {}
        for raw in payload["entries"]:
            try:
                entry = SerialNumberEntry.from_dict(raw)
            except (KeyError, TypeError, ValueError) as exc:
                raise StoreError(f"Invalid entry in {self.path}: {exc}") from exc
            if entry.value in seen:
                self._log.warning("Skipping duplicate value %r in %s", entry.value, self.path)
                continue
            seen[entry.value] = entry.id
            entries.append(entry)
        return entries
