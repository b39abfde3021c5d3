from collections import OrderedDict

from smbdump.types import *

def test_size_from_bytes_is_normalized():
    assert Size.from_bytes(17179869184) == Size(16, "GiB")
    assert Size.from_bytes(98304) == Size(96, "KiB")
    assert Size.from_bytes(1000) == Size(1000, "B")

def test_size_keeps_unit():
    assert Size(2048, "MiB") != Size(2, "GiB")
    assert Size(2048, "MiB").bytes == Size(2, "GiB").bytes
    assert Size(2048, "MiB").normalized() == Size(2, "GiB")
    assert str(Size(2048, "MiB")) == "2048 MiB"

def test_quantity():
    assert str(Quantity(1.5, "V")) == "1.5 V"
    assert str(Quantity(2.0, "V")) == "2 V"
    assert str(Quantity(2400, "MT/s")) == "2400 MT/s"
    assert Quantity(12 / 10.0, "V") == Quantity(1.2, "V")

def test_hex():
    assert str(Hex(0x100)) == "0x0100"
    assert str(Hex(0x1F, 2)) == "0x1F"
    assert Hex(0x100) == 0x100

def test_label_and_special_are_strings():
    assert Label("Desktop", 3) == "Desktop"
    assert Label("Desktop", 3).code == 3
    assert UNKNOWN == "Unknown"

def test_to_plain():
    v = to_plain(OrderedDict([("a", Size(1, "KiB")), ("b", [Hex(1), Label("x", 1)]), ("c", True)]))
    assert v == OrderedDict([("a", "1 KiB"), ("b", ["0x0001", "x"]), ("c", True)])
    assert type(v["b"][1]) is str

def test_decoded_structure():
    s = DecodedStructure(1, 0x100, 27, "System Information", "system")
    s.fields["manufacturer"] = "Acme"
    s.fields["version"] = None
    assert not s.is_generic
    assert "version" in s
    assert s["manufacturer"] == "Acme"
    assert list(s.present()) == ["manufacturer"]
    d = s.as_dict()
    assert d["handle"] == "0x0100"
    assert d["fields"] == OrderedDict([("manufacturer", "Acme")])
    assert "warnings" not in d
