""" SMBIOS entry point (anchor) structures.

    Legacy 32-bit entry point starts with "_SM_" and embeds intermediate
    "_DMI_" anchor, 64-bit entry point starts with "_SM3_". Both give
    version of SMBIOS and length of structure table. """

import struct
from collections import namedtuple
from .logging import *
from .utils   import checksum

MYPY=False
if MYPY:
    from typing import Optional, Tuple, Union

__all__ = ["EntryPoint", "resolve_entry_point", "SM_ANCHOR", "SM3_ANCHOR", "DMI_ANCHOR"]

SM_ANCHOR  = b"_SM_"
SM3_ANCHOR = b"_SM3_"
DMI_ANCHOR = b"_DMI_"

SM_LENGTH  = 0x1F
SM3_LENGTH = 0x18
SM3_REVISION = 0x01

RAW_SMBIOS_HEADER = struct.Struct("<BBBBI")

_EntryPointBase = namedtuple("_EntryPointBase", ("version", "table_length", "anchor",
    "table_address", "structure_count", "max_structure_size"))

class EntryPoint(_EntryPointBase):
    """ Version (major, minor, docrev) and length of structure table.
        Other attributes are informational and may be None when source does
        not carry them. """
    __slots__ = ()

    def __new__(cls, version, table_length, anchor = None, table_address = None,
                structure_count = None, max_structure_size = None):
        # type: (Tuple[int, int, int], int, Optional[str], Optional[int], Optional[int], Optional[int]) -> EntryPoint
        return super(EntryPoint, cls).__new__(cls, tuple(version), table_length, anchor,
            table_address, structure_count, max_structure_size)

    @property
    def major(self): # type: () -> int
        return self.version[0]

    @property
    def minor(self): # type: () -> int
        return self.version[1]

    @property
    def docrev(self): # type: () -> int
        return self.version[2]

    @property
    def version_string(self): # type: () -> str
        if self.major >= 3:
            return "%d.%d.%d" % self.version
        return "%d.%d" % (self.major, self.minor)

    @classmethod
    def from_raw_smbios_data(cls, data): # type: (Union[bytes, bytearray]) -> Tuple[EntryPoint, bytes]
        """ Windows GetSystemFirmwareTable('RSMB') returns RawSMBIOSData:
            8 byte header (calling method, major, minor, DMI revision, length)
            followed by structure table. """
        if len(data) < RAW_SMBIOS_HEADER.size:
            raise EntryPointMalformed("RawSMBIOSData too short (%d bytes)" % (len(data),))
        _, major, minor, dmirev, length = RAW_SMBIOS_HEADER.unpack_from(data, 0)
        docrev = dmirev if major >= 3 else 0
        table = bytes(data[RAW_SMBIOS_HEADER.size:RAW_SMBIOS_HEADER.size + length])
        return cls((major, minor, docrev), length), table

def _resolve_sm(data, logger): # type: (bytes, Logger) -> EntryPoint
    if len(data) < 6 or data[5] != SM_LENGTH:
        raise EntryPointMalformed("Entry point length is %s, expected %d"
            % (data[5] if len(data) > 5 else "missing", SM_LENGTH))
    if len(data) < SM_LENGTH:
        raise EntryPointMalformed("Entry point truncated to %d bytes" % (len(data),))
    if data[0x10:0x15] != DMI_ANCHOR:
        raise EntryPointMalformed("Intermediate anchor %r not found" % (DMI_ANCHOR,))
    if sum(bytearray(data[:SM_LENGTH])) % 256 != 0:
        logger.warning("Entry point has wrong checksum, expected %d, got %d"
            % (checksum(data[:4] + data[5:SM_LENGTH]), data[4]))
    if sum(bytearray(data[0x10:SM_LENGTH])) % 256 != 0:
        logger.warning("Intermediate entry point has wrong checksum, expected %d, got %d"
            % (checksum(data[0x10:0x15] + data[0x16:SM_LENGTH]), data[0x15]))
    max_size, = struct.unpack_from("<H", data, 0x08)
    length, address, count = struct.unpack_from("<HIH", data, 0x16)
    return EntryPoint((data[6], data[7], 0), length, "_SM_", address, count, max_size)

def _resolve_sm3(data, logger): # type: (bytes, Logger) -> EntryPoint
    if len(data) < 7 or data[6] != SM3_LENGTH:
        raise EntryPointMalformed("Entry point length is %s, expected %d"
            % (data[6] if len(data) > 6 else "missing", SM3_LENGTH))
    if len(data) < SM3_LENGTH:
        raise EntryPointMalformed("Entry point truncated to %d bytes" % (len(data),))
    if data[0x0A] != SM3_REVISION:
        raise EntryPointMalformed("Unsupported entry point revision %d" % (data[0x0A],))
    if sum(bytearray(data[:SM3_LENGTH])) % 256 != 0:
        logger.warning("Entry point has wrong checksum, expected %d, got %d"
            % (checksum(data[:5] + data[6:SM3_LENGTH]), data[5]))
    length, address = struct.unpack_from("<IQ", data, 0x0C)
    return EntryPoint((data[7], data[8], data[9]), length, "_SM3_", address)

def resolve_entry_point(data, logger = None): # type: (Union[bytes, bytearray], Optional[Logger]) -> EntryPoint
    """ Parse entry point, raise EntryPointMalformed when it is not valid. """
    if logger is None:
        logger = StdErrLogger()
    data = bytes(data)
    if data.startswith(SM3_ANCHOR):
        return _resolve_sm3(data, logger)
    if data.startswith(SM_ANCHOR):
        return _resolve_sm(data, logger)
    raise EntryPointMalformed("No SMBIOS anchor found, data starts with %r" % (data[:5],))
