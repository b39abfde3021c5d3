MYPY=False
if MYPY:
    from typing import Tuple, Optional, Callable, Union

from .utils import printable

__all__ = ["StringTable"]

class StringTable(object):
    """ Strings following formatted area of one structure.

        Strings are referenced from formatted area by 1-based index, index 0
        means that the string is not present at all. Table is built for one
        structure and never reused. """
    strings = None # type: Tuple[str, ...]

    def __init__(self, strings): # type: (Tuple[str, ...]) -> None
        self.strings = strings

    @classmethod
    def from_bytes(cls, data): # type: (Union[bytes, bytearray]) -> StringTable
        """ Split string area (including terminating double NUL) to strings.
            Undecodable bytes are replaced, control characters become ".". """
        return cls(tuple(printable(s.decode('utf8', 'replace')) for s in bytes(data).split(b'\0') if s))

    def __len__(self): # type: () -> int
        return len(self.strings)

    def __iter__(self):
        return iter(self.strings)

    def get(self, index, warn = None): # type: (int, Optional[Callable[[str], None]]) -> Optional[str]
        if index == 0:
            return None
        if index > len(self.strings):
            if warn is not None:
                warn("String index %d out of range, structure has %d strings" % (index, len(self.strings)))
            return None
        return self.strings[index - 1]
