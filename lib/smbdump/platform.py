""" Acquisition of SMBIOS entry point and structure table.

    Linux exports both in sysfs, Windows returns table prefixed by
    RawSMBIOSData header from GetSystemFirmwareTable('RSMB'). Entry point
    is then synthesized, so that callers always get (entry point, table). """

import ctypes, struct, sys
from .entrypoint import EntryPoint, SM3_ANCHOR, SM3_LENGTH, SM3_REVISION
from .logging    import AcquisitionError, EntryPointMalformed
from .utils      import checksum

MYPY=False
if MYPY:
    from typing import Tuple

__all__ = ["read_files", "read_sysfs", "read_windows", "fetch_table_bytes", "entry_point_bytes",
           "SYSFS_ENTRY_POINT", "SYSFS_TABLE"]

SYSFS_ENTRY_POINT = "/sys/firmware/dmi/tables/smbios_entry_point"
SYSFS_TABLE       = "/sys/firmware/dmi/tables/DMI"

RSMB = struct.unpack(">I", b"RSMB")[0]

def read_files(entry_point_path, table_path): # type: (str, str) -> Tuple[bytes, bytes]
    out = []
    for path in (entry_point_path, table_path):
        try:
            with open(path, "rb") as f:
                out.append(f.read())
        except (IOError, OSError) as e:
            raise AcquisitionError("Cannot read %s: %s" % (path, e.strerror or e))
    return out[0], out[1]

def read_sysfs(): # type: () -> Tuple[bytes, bytes]
    return read_files(SYSFS_ENTRY_POINT, SYSFS_TABLE)

def entry_point_bytes(ep): # type: (EntryPoint) -> bytes
    """ 64-bit entry point describing table that comes without one. """
    data = bytearray(SM3_ANCHOR + struct.pack("<BBBBBBBIQ", 0, SM3_LENGTH, ep.major, ep.minor,
        ep.docrev, SM3_REVISION, 0, ep.table_length, ep.table_address or 0))
    data[5] = checksum(data)
    return bytes(data)

def read_windows(): # type: () -> Tuple[bytes, bytes]
    try:
        kernel32 = ctypes.WinDLL('kernel32', use_last_error=True) # type: ignore
    except (AttributeError, OSError):
        raise AcquisitionError("GetSystemFirmwareTable is not available on this system")
    kernel32.GetSystemFirmwareTable.argtypes = [ctypes.c_ulong, ctypes.c_ulong, ctypes.c_void_p, ctypes.c_ulong]
    kernel32.GetSystemFirmwareTable.restype  = ctypes.c_uint

    ctypes.set_last_error(0) # type: ignore
    size = kernel32.GetSystemFirmwareTable(RSMB, 0, None, 0)
    if size == 0:
        raise AcquisitionError("GetSystemFirmwareTable('RSMB') failed: %s"
            % (ctypes.FormatError(ctypes.get_last_error()),)) # type: ignore
    buf = ctypes.create_string_buffer(size)
    ret = kernel32.GetSystemFirmwareTable(RSMB, 0, buf, size)
    if ret == 0 or ret > size:
        raise AcquisitionError("GetSystemFirmwareTable('RSMB') failed: %s"
            % (ctypes.FormatError(ctypes.get_last_error()),)) # type: ignore
    try:
        ep, table = EntryPoint.from_raw_smbios_data(buf.raw[:ret])
    except EntryPointMalformed as e:
        raise AcquisitionError(e.message)
    return entry_point_bytes(ep), table

def fetch_table_bytes(): # type: () -> Tuple[bytes, bytes]
    """ Entry point and structure table of running system. """
    if sys.platform.startswith("win"):
        return read_windows()
    return read_sysfs()
