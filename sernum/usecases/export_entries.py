from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..domain.csv_export import encode_entries, unsafe_values
from ..domain.entities import SerialNumberEntry
from ..domain.ports import ExportSinkPort
from .error_mapping import map_export_error

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportResult:
    location: str
    count: int


@dataclass
class ExportEntries:
    """Serialize entries to CSV and hand the bytes to the sink."""

    sink: ExportSinkPort

    def __call__(self, entries: Sequence[SerialNumberEntry], destination: str) -> ExportResult:
        unsafe = unsafe_values(entries)
        if unsafe:
            log.warning("Exporting %d value(s) that are not CSV-safe: %s", len(unsafe), unsafe)
        data = encode_entries(entries)
        try:
            location = self.sink.write(data, destination)
        except Exception as exc:
            raise map_export_error(exc) from exc
        return ExportResult(location=location, count=len(entries))
