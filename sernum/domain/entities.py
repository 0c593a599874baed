"""Typed domain entities for the serial number list.

Entries are immutable value objects. Identity is assigned by the entry store
and is opaque to every other layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

EntryId = NewType("EntryId", str)


@dataclass(frozen=True)
class SerialNumberEntry:
    """One persisted serial number record."""

    id: EntryId
    value: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("SerialNumberEntry requires a store-assigned id.")
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("SerialNumberEntry value must be a non-empty string.")

    def to_dict(self) -> dict:
        return {"id": str(self.id), "value": self.value}

    @classmethod
    def from_dict(cls, payload: dict) -> "SerialNumberEntry":
        return cls(id=EntryId(str(payload["id"])), value=str(payload["value"]))


__all__ = ["EntryId", "SerialNumberEntry"]
