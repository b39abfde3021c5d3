import struct
from collections import namedtuple
from .logging import TruncationFault

MYPY=False
if MYPY:
    from typing import Iterator, Union

__all__ = ["StructureHeader", "RawStructure", "walk", "HEADER_LEN", "END_OF_TABLE"]

HEADER_LEN   = 4
END_OF_TABLE = 127

StructureHeader = namedtuple("StructureHeader", ("type_code", "length", "handle"))

# offset is position of the structure in table, string_bytes include
# terminating double NUL
RawStructure = namedtuple("RawStructure", ("header", "formatted", "string_bytes", "offset"))

def walk(table, table_length): # type: (Union[bytes, bytearray], int) -> Iterator[RawStructure]
    """ Iterate over structures of the table, in table order.

        Walk ends after End of Table structure (type 127). TruncationFault is
        raised when structure would need bytes beyond table length or when
        table is exhausted without End of Table, all structures before it
        were already yielded. """
    data  = bytes(table)
    bound = min(len(data), table_length)
    cursor = 0
    while cursor < bound:
        if cursor + HEADER_LEN > bound:
            raise TruncationFault("Structure header at offset 0x%04X exceeds table length %d"
                % (cursor, bound), cursor)
        type_code, length, handle = struct.unpack_from("<BBH", data, cursor)
        if length < HEADER_LEN:
            raise TruncationFault("Structure at offset 0x%04X (type %d) has invalid length %d"
                % (cursor, type_code, length), cursor)
        end = cursor + length
        if end > bound:
            raise TruncationFault("Structure at offset 0x%04X (type %d, length %d) exceeds table length %d"
                % (cursor, type_code, length, bound), cursor)
        pos = data.find(b"\0\0", end, bound)
        if pos < 0:
            raise TruncationFault("Strings of structure at offset 0x%04X (type %d) are not terminated"
                % (cursor, type_code), cursor)
        nxt = pos + 2
        yield RawStructure(StructureHeader(type_code, length, handle),
                           data[cursor:end], data[end:nxt], cursor)
        if type_code == END_OF_TABLE:
            return
        cursor = nxt
    raise TruncationFault("End of Table structure not found within %d bytes" % (bound,), cursor)
