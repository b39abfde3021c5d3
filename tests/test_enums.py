import pytest

from smbdump.enums  import DenseEnum, SparseEnum, RangeEnum, FlagTable, bits
from smbdump.labels import *

def test_bits():
    assert list(bits(0)) == []
    assert list(bits(0b1010)) == [1, 3]

def test_dense_enum():
    assert STATUS(3) == "OK"
    assert STATUS(3).code == 3
    assert STATUS(0) == "Reserved"
    assert STATUS(7) == "Reserved"
    assert CACHE_LOCATION(0) == "Internal"
    assert CACHE_LOCATION(2) == "Reserved"

def test_dense_enum_fallback():
    e = DenseEnum(("A", "B"), fallback="Other")
    assert e(1) == "A"
    assert e(3) == "Other"
    assert e(0) == "Other"

def test_sparse_enum():
    assert PROCESSOR_FAMILY(0xB3) == "Xeon"
    assert PROCESSOR_FAMILY(0x101) == "ARMv8"
    assert PROCESSOR_FAMILY(0xFF) == "Reserved"
    assert SparseEnum(((5, "Five"),), fallback="Nope")(6) == "Nope"

def test_range_enum():
    assert BOOT_STATUS(0) == "No errors detected"
    assert BOOT_STATUS(9) == "Reserved"
    assert BOOT_STATUS(130) == "OEM-specific"
    assert BOOT_STATUS(200) == "Product-specific"
    assert STRUCTURE_TYPE(17) == "Memory Device"
    assert STRUCTURE_TYPE(60) == "Unknown"
    assert STRUCTURE_TYPE(126) == "Inactive"
    assert STRUCTURE_TYPE(127) == "End of Table"
    assert STRUCTURE_TYPE(200) == "OEM-specific"
    assert EVENT_LOG_TYPE(0xFF) == "End of log"
    assert EVENT_LOG_TYPE(0x0F) == "Reserved"
    assert EVENT_LOG_TYPE(0x40) == "Unused"

def test_range_enum_rejects_overlap():
    with pytest.raises(AssertionError):
        RangeEnum(((0, 5, "A"), (5, 9, "B")))

def test_flag_table_ascending_without_reserved_bits():
    flags = FIRMWARE_CHARACTERISTICS(0b10011 | (1 << 7))
    assert flags == ["ISA is supported", "PCI is supported"]
    assert [f.code for f in flags] == [4, 7]

def test_flag_table_explicit_bits():
    t = FlagTable(("Zero", None, (5, "Five")))
    assert t(0b100101) == ["Zero", "Five"]
