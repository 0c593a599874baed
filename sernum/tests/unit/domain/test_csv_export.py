import pytest

from sernum.domain.csv_export import CSV_HEADER, decode_values, encode_entries, unsafe_values
from sernum.domain.entities import EntryId, SerialNumberEntry


def _entries(*values):
    return [SerialNumberEntry(id=EntryId(f"id-{i}"), value=v) for i, v in enumerate(values)]


def test_encode_entries_header_then_values_without_trailing_newline():
    assert encode_entries(_entries("A1", "B2")) == b"Serial Number\nA1\nB2"


def test_encode_entries_empty_list_is_header_only():
    assert encode_entries([]) == CSV_HEADER.encode("utf-8")


def test_encode_entries_utf8_and_no_quoting():
    data = encode_entries(_entries("SN-ü1", "X,Y"))
    assert data == "Serial Number\nSN-ü1\nX,Y".encode("utf-8")


def test_decode_values_returns_body_in_export_order():
    entries = _entries("Z9", "A1", "M5")
    assert decode_values(encode_entries(entries)) == ["Z9", "A1", "M5"]


def test_decode_values_rejects_missing_header():
    with pytest.raises(ValueError):
        decode_values(b"A1\nB2")


def test_unsafe_values_flags_separators_quotes_and_newlines():
    entries = _entries("OK1", "has,comma", 'has"quote', "line\nbreak")
    assert unsafe_values(entries) == ["has,comma", 'has"quote', "line\nbreak"]
