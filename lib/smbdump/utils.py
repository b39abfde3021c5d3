MYPY = False
__all__ = ["checksum", "getbits", "all_ones", "from_bcd", "hexdump", "printable"]

if MYPY:
    from typing import Optional, Union

def checksum(b): # type: (Union[bytes, bytearray]) -> int
    """ Calculate checksum byte c, so that sum(b) + c is zero (modulo 256). """
    return (256 * len(b) - sum(bytearray(b))) % 256

def getbits(value, hi, lo): # type: (int, int, int) -> int
    """ Return bits hi..lo (both inclusive) of value, shifted down to bit 0. """
    assert hi >= lo
    return (value >> lo) & ((1 << (hi - lo + 1)) - 1)

def all_ones(value, size): # type: (int, int) -> bool
    """ True if `size` bytes wide value has all bits set. """
    return value == (1 << (8 * size)) - 1

def from_bcd(b): # type: (int) -> Optional[int]
    """ Decode packed BCD byte, None if any nibble is not a decimal digit. """
    hi, lo = b >> 4, b & 0x0f
    if hi > 9 or lo > 9:
        return None
    return hi * 10 + lo

def hexdump(data): # type: (Union[bytes, bytearray]) -> str
    return ' '.join('%02X' % x for x in bytearray(data))

def printable(s): # type: (str) -> str
    """ Replace control characters by '.', as dmidecode does. """
    return ''.join('.' if ord(c) < 0x20 or ord(c) == 0x7f else c for c in s)
