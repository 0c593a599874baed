"""Domain package exports for value objects, ports and errors."""

from .csv_export import CSV_HEADER, decode_values, encode_entries
from .entities import EntryId, SerialNumberEntry
from .errors import DuplicateEntry, ExportFailure, PersistenceFailure, StoreError
from .ports import EntryStorePort, ExportSinkPort, UseCaseError

__all__ = [
    "CSV_HEADER",
    "DuplicateEntry",
    "EntryId",
    "EntryStorePort",
    "ExportFailure",
    "ExportSinkPort",
    "PersistenceFailure",
    "SerialNumberEntry",
    "StoreError",
    "UseCaseError",
    "decode_values",
    "encode_entries",
]
