import struct
import pytest

from smbdump.walker  import walk
from smbdump.logging import TruncationFault
from conftest import structure, end_of_table, body

def collect(table, length = None):
    """ Structures yielded before the walk ended, and fault if any. """
    out = []
    try:
        for raw in walk(table, len(table) if length is None else length):
            out.append(raw)
    except TruncationFault as e:
        return out, e
    return out, None

def test_walk_ends_with_end_of_table():
    first = structure(1, 0x0100, body(8), (b"Acme", b"Widget"))
    table = first + end_of_table()
    out, fault = collect(table)
    assert fault is None
    assert [r.header.type_code for r in out] == [1, 127]
    assert out[0].header.length == 8
    assert out[0].header.handle == 0x0100
    assert out[0].string_bytes == b"Acme\0Widget\0\0"
    assert out[1].offset == len(first)

def test_walk_stops_after_end_of_table():
    table = structure(1, 1, body(8)) + end_of_table() + structure(2, 2, body(8))
    out, fault = collect(table)
    assert fault is None
    assert [r.header.type_code for r in out] == [1, 127]

def test_walk_without_end_of_table():
    table = structure(1, 1, body(8)) + structure(2, 2, body(8))
    out, fault = collect(table)
    assert [r.header.type_code for r in out] == [1, 2]
    assert fault is not None
    assert fault.offset == len(table)

def test_walk_truncated_header():
    table = structure(1, 1, body(8)) + b"\x02\x08"
    out, fault = collect(table)
    assert len(out) == 1
    assert fault is not None

def test_walk_truncated_formatted_area():
    table = struct.pack("<BBH", 1, 0x1B, 1) + b"\0" * 4
    out, fault = collect(table)
    assert out == []
    assert fault is not None
    assert fault.offset == 0

def test_walk_invalid_length():
    table = struct.pack("<BBH", 1, 2, 1) + b"\0\0" + end_of_table()
    out, fault = collect(table)
    assert out == []
    assert "invalid length" in fault.message

def test_walk_unterminated_strings():
    table = structure(1, 1, body(8), (b"Acme",))[:-2]
    out, fault = collect(table)
    assert out == []
    assert fault is not None

def test_walk_respects_declared_length():
    first = structure(1, 1, body(8))
    table = first + end_of_table()
    out, fault = collect(table, len(first))
    assert len(out) == 1
    assert fault is not None

def test_walk_is_lazy():
    table = structure(1, 1, body(8)) + b"\x02"
    it = walk(table, len(table))
    assert next(it).header.type_code == 1
    with pytest.raises(TruncationFault):
        next(it)
