import sys
import pytest

from smbdump            import platform
from smbdump.entrypoint import EntryPoint, resolve_entry_point
from smbdump.logging    import AcquisitionError
from conftest import sm3_entry_point, end_of_table

def test_read_files(tmp_path):
    ep = tmp_path / "smbios_entry_point"
    dmi = tmp_path / "DMI"
    ep.write_bytes(sm3_entry_point(3, 0, 0, 6))
    dmi.write_bytes(end_of_table())
    assert platform.read_files(str(ep), str(dmi)) == (sm3_entry_point(3, 0, 0, 6), end_of_table())

def test_read_files_missing(tmp_path):
    with pytest.raises(AcquisitionError) as e:
        platform.read_files(str(tmp_path / "nope"), str(tmp_path / "nope2"))
    assert "nope" in e.value.message

def test_read_sysfs_uses_configured_paths(tmp_path, monkeypatch):
    ep = tmp_path / "ep"
    dmi = tmp_path / "dmi"
    ep.write_bytes(b"EP")
    dmi.write_bytes(b"TABLE")
    monkeypatch.setattr(platform, "SYSFS_ENTRY_POINT", str(ep))
    monkeypatch.setattr(platform, "SYSFS_TABLE", str(dmi))
    assert platform.read_sysfs() == (b"EP", b"TABLE")

def test_entry_point_bytes_resolve_back(logger):
    ep = EntryPoint((3, 5, 1), 0x1234)
    data = platform.entry_point_bytes(ep)
    again = resolve_entry_point(data, logger)
    assert again.version == (3, 5, 1)
    assert again.table_length == 0x1234
    assert again.table_address == 0
    assert logger.warnings == []

@pytest.mark.skipif(sys.platform.startswith("win"), reason="GetSystemFirmwareTable exists on Windows")
def test_read_windows_unavailable():
    with pytest.raises(AcquisitionError):
        platform.read_windows()
