"""CSV serialization of the serial number list.

The format is deliberately minimal: a ``Serial Number`` header followed by one
value per line, newline separated, UTF-8, without quoting. Values containing a
comma, quote or line break produce output that is not RFC 4180 safe; callers
can detect those with :func:`unsafe_values`.
"""

from __future__ import annotations

from typing import Iterable, List

from .entities import SerialNumberEntry

CSV_HEADER = "Serial Number"
CSV_ENCODING = "utf-8"
_UNSAFE_CHARS = (",", '"', "\n", "\r")


def encode_entries(entries: Iterable[SerialNumberEntry]) -> bytes:
    """Return CSV bytes for ``entries`` in the given order.

    Example:
        ``["A1", "B2"]`` -> ``b"Serial Number\\nA1\\nB2"``
    """
    lines = [CSV_HEADER]
    lines.extend(entry.value for entry in entries)
    return "\n".join(lines).encode(CSV_ENCODING)


def decode_values(data: bytes) -> List[str]:
    """Read the value column back from exported CSV bytes (header skipped)."""
    text = data.decode(CSV_ENCODING)
    lines = text.split("\n")
    if not lines or lines[0] != CSV_HEADER:
        raise ValueError(f"CSV payload does not start with '{CSV_HEADER}' header.")
    return [line for line in lines[1:] if line]


def unsafe_values(entries: Iterable[SerialNumberEntry]) -> List[str]:
    """Values that would break the unquoted CSV layout."""
    return [
        entry.value
        for entry in entries
        if any(ch in entry.value for ch in _UNSAFE_CHARS)
    ]


__all__ = ["CSV_ENCODING", "CSV_HEADER", "decode_values", "encode_entries", "unsafe_values"]
