"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from sernum.domain.errors import ExportFailure, PersistenceFailure, StoreError
from sernum.domain.ports import UseCaseError


def map_store_error(exc: Exception) -> UseCaseError:
    """Map entry store exceptions to ``PersistenceFailure``.

    ``UseCaseError`` instances pass through untouched so nested use cases keep
    their original code.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, StoreError):
        return PersistenceFailure(str(exc))
    return PersistenceFailure(_describe(exc))


def map_export_error(exc: Exception) -> UseCaseError:
    """Map export sink exceptions to ``ExportFailure``."""
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, PermissionError):
        return ExportFailure(_compose("Permission denied", exc.filename))
    if isinstance(exc, FileNotFoundError):
        return ExportFailure(_compose("Folder not found", exc.filename))
    return ExportFailure(_describe(exc))


def _compose(base: str, hint: Optional[str]) -> str:
    hint_text = str(hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    return base


def _describe(exc: Exception) -> str:
    text = str(exc).strip()
    return text or exc.__class__.__name__


__all__ = ["map_export_error", "map_store_error"]
