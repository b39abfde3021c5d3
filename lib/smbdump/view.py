import struct
from .logging import FieldOutOfRange
from .strings import StringTable

MYPY=False
if MYPY:
    from typing import Callable, Iterator, Optional, Union

__all__ = ["StructureView", "sub_records"]

_FORMATS = {1: "<B", 2: "<H", 4: "<I", 8: "<Q"}

class StructureView(object):
    """ Bounds checked little endian access to formatted area of one
        structure. Reads beyond declared length raise FieldOutOfRange. """
    data    = None # type: bytes
    length  = None # type: int
    strings = None # type: StringTable
    warn    = None # type: Callable[[str], None]

    def __init__(self, data, length, strings, warn): # type: (bytes, int, StringTable, Callable[[str], None]) -> None
        self.data    = data
        self.length  = min(length, len(data))
        self.strings = strings
        self.warn    = warn

    def fits(self, offset, size = 1): # type: (int, int) -> bool
        return offset >= 0 and offset + size <= self.length

    def _check(self, offset, size): # type: (int, int) -> None
        if not self.fits(offset, size):
            raise FieldOutOfRange("Field at offset 0x%02X (%d bytes) exceeds structure length %d"
                % (offset, size, self.length))

    def uint(self, offset, size): # type: (int, int) -> int
        self._check(offset, size)
        return struct.unpack_from(_FORMATS[size], self.data, offset)[0]

    def u8(self, offset): # type: (int) -> int
        return self.uint(offset, 1)

    def u16(self, offset): # type: (int) -> int
        return self.uint(offset, 2)

    def u32(self, offset): # type: (int) -> int
        return self.uint(offset, 4)

    def u64(self, offset): # type: (int) -> int
        return self.uint(offset, 8)

    def s16(self, offset): # type: (int) -> int
        self._check(offset, 2)
        return struct.unpack_from("<h", self.data, offset)[0]

    def raw(self, offset, size): # type: (int, int) -> bytes
        self._check(offset, size)
        return self.data[offset:offset + size]

    def string(self, offset): # type: (int) -> Optional[str]
        """ String referenced by index stored at offset. """
        return self.strings.get(self.u8(offset), self.warn)

def sub_records(view, start, end, header_size, size_of, count = None, what = "record"):
    # type: (StructureView, int, int, int, Callable[[StructureView, int], int], Optional[int], str) -> Iterator[int]
    """ Walk self-delimited records in view between start and end, yield
        offset of each record. `size_of` returns whole size of record at
        given offset (header included). Walk stops at end of byte budget,
        after `count` records, or with warning when record would overrun
        the budget. """
    end = min(end, view.length)
    pos = start
    n = 0
    while count is None or n < count:
        if pos >= end:
            if count is not None:
                view.warn("Only %d of %d %ss fit into structure" % (n, count, what))
            return
        if pos + header_size > end:
            view.warn("Header of %s %d at offset 0x%02X overruns structure" % (what, n + 1, pos))
            return
        size = size_of(view, pos)
        if size < header_size:
            view.warn("%s %d at offset 0x%02X has invalid length %d" % (what.capitalize(), n + 1, pos, size))
            return
        if pos + size > end:
            view.warn("%s %d at offset 0x%02X (%d bytes) overruns structure" % (what.capitalize(), n + 1, pos, size))
            return
        yield pos
        pos += size
        n += 1
