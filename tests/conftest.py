import struct
import pytest

from smbdump.decoder    import Decoder
from smbdump.entrypoint import EntryPoint
from smbdump.logging    import Logger
from smbdump.utils      import checksum

# {{{ table builders
def body(length, *items):
    """ Formatted area of structure with given length, header excluded.
        Items are (offset, struct format, value), offsets include header. """
    data = bytearray(length)
    for offset, fmt, value in items:
        struct.pack_into("<" + fmt, data, offset, value)
    return bytes(data[4:])

def structure(type_code, handle, formatted, strings = ()):
    """ Header, formatted area and string table. Strings are bytes. """
    data = struct.pack("<BBH", type_code, 4 + len(formatted), handle) + bytes(formatted)
    if strings:
        return data + b"".join(s + b"\0" for s in strings) + b"\0"
    return data + b"\0\0"

def end_of_table(handle = 0xFFFF):
    return structure(127, handle, b"")

def sm3_entry_point(major, minor, docrev, length, address = 0x7AF00000):
    data = bytearray(b"_SM3_" + struct.pack("<BBBBBBBIQ", 0, 0x18, major, minor, docrev, 1, 0, length, address))
    data[5] = checksum(data)
    return bytes(data)

def sm_entry_point(major, minor, length, count, address = 0x000F0000, max_size = 0x80):
    data = bytearray(0x1F)
    data[0:4] = b"_SM_"
    data[5] = 0x1F
    data[6] = major
    data[7] = minor
    struct.pack_into("<H", data, 0x08, max_size)
    data[0x10:0x15] = b"_DMI_"
    struct.pack_into("<HIH", data, 0x16, length, address, count)
    data[0x1E] = (major << 4) | minor
    data[0x15] = checksum(data[0x10:0x1F])
    data[0x04] = checksum(data)
    return bytes(data)
# }}}

class RecordingLogger(Logger):
    """ Keeps messages, never raises. """
    def __init__(self):
        self.infos    = []
        self.warnings = []
        self.errors   = []

    def info(self, msg):
        self.infos.append(msg)

    def warning(self, msg):
        self.warnings.append(msg)

    def decodererror(self, msg):
        self.errors.append(msg)

def decode_table(table, version = (3, 8, 0), logger = None):
    if logger is None:
        logger = RecordingLogger()
    return Decoder(logger).decode(EntryPoint(version, len(table)), table)

def decode_one(type_code, formatted, strings = (), version = (3, 8, 0), logger = None, handle = 0x0100):
    """ Decode single structure followed by End of Table. """
    table = decode_table(structure(type_code, handle, formatted, strings) + end_of_table(), version, logger)
    assert len(table) == 2
    return table[0]

@pytest.fixture
def logger():
    return RecordingLogger()
