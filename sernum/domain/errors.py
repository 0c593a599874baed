"""Domain-level error types for use-case and adapter mapping.

Adapters raise ``StoreError`` (or plain ``OSError`` for sinks); use cases
translate those into the user-presentable ``UseCaseError`` subclasses below.
"""

from __future__ import annotations

from .ports import UseCaseError


class StoreError(Exception):
    """Raised by entry store adapters when loading or committing fails."""


class DuplicateEntry(UseCaseError):
    """Add rejected because the exact value is already present."""

    def __init__(self, value: str) -> None:
        super().__init__("DUPLICATE_ENTRY", f"Serial number '{value}' already exists.")
        self.value = value


class PersistenceFailure(UseCaseError):
    """Store commit failed; wraps the underlying store message."""

    def __init__(self, detail: str) -> None:
        detail = (detail or "").strip() or "unknown error"
        super().__init__("PERSISTENCE_FAILED", f"Could not save changes: {detail}")
        self.detail = detail


class ExportFailure(UseCaseError):
    """Export sink write failed; wraps the underlying I/O message."""

    def __init__(self, detail: str) -> None:
        detail = (detail or "").strip() or "unknown error"
        super().__init__("EXPORT_FAILED", f"Export failed: {detail}")
        self.detail = detail


__all__ = ["DuplicateEntry", "ExportFailure", "PersistenceFailure", "StoreError"]
