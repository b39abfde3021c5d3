import struct
import pytest

from smbdump.entrypoint import EntryPoint, resolve_entry_point
from smbdump.logging    import EntryPointMalformed
from conftest import sm3_entry_point, sm_entry_point

def test_sm3_entry_point(logger):
    ep = resolve_entry_point(sm3_entry_point(3, 4, 0, 0x1234, 0x7F000000), logger)
    assert ep.version == (3, 4, 0)
    assert ep.table_length == 0x1234
    assert ep.table_address == 0x7F000000
    assert ep.anchor == "_SM3_"
    assert ep.version_string == "3.4.0"
    assert logger.warnings == []

def test_sm_entry_point(logger):
    ep = resolve_entry_point(sm_entry_point(2, 8, 0x500, 40), logger)
    assert ep.version == (2, 8, 0)
    assert ep.table_length == 0x500
    assert ep.structure_count == 40
    assert ep.max_structure_size == 0x80
    assert ep.table_address == 0x000F0000
    assert ep.anchor == "_SM_"
    assert ep.version_string == "2.8"
    assert logger.warnings == []

def test_sm3_wrong_length():
    data = bytearray(sm3_entry_point(3, 0, 0, 100))
    data[6] = 0x1F
    with pytest.raises(EntryPointMalformed):
        resolve_entry_point(data)

def test_sm3_wrong_revision():
    data = bytearray(sm3_entry_point(3, 0, 0, 100))
    data[0x0A] = 2
    with pytest.raises(EntryPointMalformed):
        resolve_entry_point(data)

def test_sm3_truncated():
    with pytest.raises(EntryPointMalformed):
        resolve_entry_point(sm3_entry_point(3, 0, 0, 100)[:20])

def test_sm_wrong_length():
    data = bytearray(sm_entry_point(2, 7, 100, 3))
    data[5] = 0x1E
    with pytest.raises(EntryPointMalformed):
        resolve_entry_point(data)

def test_sm_missing_dmi_anchor():
    data = bytearray(sm_entry_point(2, 7, 100, 3))
    data[0x10:0x15] = b"_XYZ_"
    with pytest.raises(EntryPointMalformed):
        resolve_entry_point(data)

def test_no_anchor():
    with pytest.raises(EntryPointMalformed):
        resolve_entry_point(b"\0" * 0x20)

def test_checksum_mismatch_is_warning(logger):
    data = bytearray(sm3_entry_point(3, 2, 0, 100))
    data[5] ^= 0xFF
    ep = resolve_entry_point(data, logger)
    assert ep.table_length == 100
    assert len(logger.warnings) == 1
    assert "checksum" in logger.warnings[0]

def test_intermediate_checksum_mismatch_is_warning(logger):
    data = bytearray(sm_entry_point(2, 4, 100, 3))
    data[0x15] ^= 0x01
    ep = resolve_entry_point(data, logger)
    assert ep.version == (2, 4, 0)
    assert any("Intermediate" in w for w in logger.warnings)

def test_raw_smbios_data():
    table = b"\x7f\x04\xff\xff\0\0"
    ep, out = EntryPoint.from_raw_smbios_data(struct.pack("<BBBBI", 0, 3, 2, 1, len(table)) + table + b"junk")
    assert ep.version == (3, 2, 1)
    assert ep.table_length == len(table)
    assert ep.anchor is None
    assert out == table

def test_raw_smbios_data_legacy_ignores_docrev():
    ep, _ = EntryPoint.from_raw_smbios_data(struct.pack("<BBBBI", 0, 2, 7, 5, 0))
    assert ep.version == (2, 7, 0)
    assert ep.version_string == "2.7"

def test_raw_smbios_data_too_short():
    with pytest.raises(EntryPointMalformed):
        EntryPoint.from_raw_smbios_data(b"\0\3\2")
