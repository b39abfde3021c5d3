from collections import OrderedDict
MYPY=False
if MYPY:
    from typing import Union, Dict, List, Optional, Any, Iterator
    from .entrypoint import EntryPoint
    from .logging import TruncationFault

__all__ = ["Label", "Special", "Hex", "Size", "Quantity", "DecodedStructure",
           "SmbiosTable", "UNKNOWN", "NOT_PROVIDED", "NONE", "NOT_APPLICABLE", "OTHER",
           "UNSPECIFIED", "NO_ERROR", "NOT_AVAILABLE",
           "to_plain"]

class Label(str):
    """ Human readable name of an enumerated code. Remembers the code it was
        resolved from, None for labels that do not come from a single code. """
    code = None # type: Optional[int]
    def __new__(cls, text, code = None): # type: (str, Optional[int]) -> Label
        self = super(Label, cls).__new__(cls, text)
        self.code = code
        return self

class Special(str):
    """ Stands in place of a value, when firmware marks field as unknown,
        not provided or not applicable. Field itself is present. """
    pass

UNKNOWN        = Special("Unknown")
NOT_PROVIDED   = Special("Not Provided")
NONE           = Special("None")
NOT_APPLICABLE = Special("Not Applicable")
OTHER          = Special("Other")
UNSPECIFIED    = Special("Unspecified")
NO_ERROR       = Special("No Error")
NOT_AVAILABLE  = Special("Not Available")

class Hex(int):
    """ Integer that is rendered in hexadecimal (handles, addresses, IDs). """
    width = 4 # type: int
    def __new__(cls, value, width = 4): # type: (int, int) -> Hex
        self = super(Hex, cls).__new__(cls, value)
        self.width = width
        return self

    def __str__(self): # type: () -> str
        return "0x%0*X" % (self.width, int(self))

    def __repr__(self): # type: () -> str
        return "Hex(%s)" % (str(self),)

class Size(object):
    """ Memory or storage size with explicit binary unit. """
    UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")
    __slots__ = ("amount", "unit")

    def __init__(self, amount, unit): # type: (int, str) -> None
        assert unit in self.UNITS
        self.amount = amount
        self.unit   = unit

    @classmethod
    def from_bytes(cls, value): # type: (int) -> Size
        return cls(value, "B").normalized()

    @property
    def bytes(self): # type: () -> int
        return self.amount << (10 * self.UNITS.index(self.unit))

    def normalized(self): # type: () -> Size
        """ Same size in the largest unit that still gives an integer amount. """
        b = self.bytes
        if b == 0:
            return Size(0, "B")
        i = 0
        while i + 1 < len(self.UNITS) and b % (1 << (10 * (i + 1))) == 0:
            i += 1
        return Size(b >> (10 * i), self.UNITS[i])

    def __eq__(self, other): # type: (Any) -> bool
        if not isinstance(other, Size):
            return NotImplemented
        return (self.amount, self.unit) == (other.amount, other.unit)

    def __ne__(self, other): # type: (Any) -> bool
        r = self.__eq__(other)
        if r is NotImplemented:
            return r
        return not r

    def __hash__(self): # type: () -> int
        return hash((self.amount, self.unit))

    def __str__(self): # type: () -> str
        return "%d %s" % (self.amount, self.unit)

    def __repr__(self): # type: () -> str
        return "Size(%d, %r)" % (self.amount, self.unit)

class Quantity(object):
    """ Physical quantity: speed, voltage, temperature, ... """
    __slots__ = ("value", "unit")

    def __init__(self, value, unit): # type: (Union[int, float], str) -> None
        self.value = value
        self.unit  = unit

    def __eq__(self, other): # type: (Any) -> bool
        if not isinstance(other, Quantity):
            return NotImplemented
        return (self.value, self.unit) == (other.value, other.unit)

    def __ne__(self, other): # type: (Any) -> bool
        r = self.__eq__(other)
        if r is NotImplemented:
            return r
        return not r

    def __hash__(self): # type: () -> int
        return hash((self.value, self.unit))

    def __str__(self): # type: () -> str
        if isinstance(self.value, float):
            return "%s %s" % (("%.3f" % self.value).rstrip('0').rstrip('.'), self.unit)
        return "%d %s" % (self.value, self.unit)

    def __repr__(self): # type: () -> str
        return "Quantity(%r, %r)" % (self.value, self.unit)

def to_plain(v): # type: (Any) -> Any
    """ Convert decoded value into nested OrderedDicts, lists, ints, bools and strings. """
    if isinstance(v, dict):
        return OrderedDict((k, to_plain(x)) for k, x in v.items())
    if isinstance(v, (list, tuple)):
        return [to_plain(x) for x in v]
    if isinstance(v, (Size, Quantity, Hex)):
        return str(v)
    if isinstance(v, str):
        return str(v)
    return v

class DecodedStructure(object):
    """ One decoded SMBIOS structure. `fields` keeps fields in table order,
        absent fields (not covered by structure length) have value None. """
    type_code = None # type: int
    handle    = None # type: int
    length    = None # type: int
    name      = None # type: str
    key       = None # type: str
    fields    = None # type: OrderedDict[str, Any]
    warnings  = None # type: List[str]

    def __init__(self, type_code, handle, length, name, key): # type: (int, int, int, str, str) -> None
        self.type_code = type_code
        self.handle    = handle
        self.length    = length
        self.name      = name
        self.key       = key
        self.fields    = OrderedDict()
        self.warnings  = []

    def __getitem__(self, name): # type: (str) -> Any
        return self.fields[name]

    def __contains__(self, name): # type: (str) -> bool
        return name in self.fields

    def get(self, name, default = None): # type: (str, Any) -> Any
        return self.fields.get(name, default)

    @property
    def is_generic(self): # type: () -> bool
        """ Structures without field decoding (OEM, Inactive, End of Table, unknown). """
        return len(self.fields) == 0

    def present(self): # type: () -> OrderedDict[str, Any]
        return OrderedDict((k, v) for k, v in self.fields.items() if v is not None)

    def as_dict(self): # type: () -> OrderedDict[str, Any]
        out = OrderedDict() # type: OrderedDict[str, Any]
        out["handle"] = str(Hex(self.handle))
        out["type"]   = self.type_code
        out["length"] = self.length
        out["name"]   = self.name
        out["fields"] = to_plain(self.present())
        if self.warnings:
            out["warnings"] = list(self.warnings)
        return out

    def __repr__(self): # type: () -> str
        return "<DecodedStructure type %d handle 0x%04X %s>" % (self.type_code, self.handle, self.name)

class SmbiosTable(object):
    """ Result of decoding: entry point, structures in table order and
        truncation fault that ended the walk, if any. """
    entry_point = None # type: EntryPoint
    structures  = None # type: List[DecodedStructure]
    fault       = None # type: Optional[TruncationFault]

    def __init__(self, entry_point, structures, fault = None): # type: (EntryPoint, List[DecodedStructure], Optional[TruncationFault]) -> None
        self.entry_point = entry_point
        self.structures  = structures
        self.fault       = fault

    def __iter__(self): # type: () -> Iterator[DecodedStructure]
        return iter(self.structures)

    def __len__(self): # type: () -> int
        return len(self.structures)

    def __getitem__(self, i): # type: (int) -> DecodedStructure
        return self.structures[i]

    def as_dict(self): # type: () -> OrderedDict[str, Any]
        out = OrderedDict() # type: OrderedDict[str, Any]
        ep = OrderedDict() # type: OrderedDict[str, Any]
        ep["version"]      = self.entry_point.version_string
        ep["table_length"] = self.entry_point.table_length
        if self.entry_point.anchor is not None:
            ep["anchor"] = self.entry_point.anchor
        if self.entry_point.table_address is not None:
            ep["table_address"] = str(Hex(self.entry_point.table_address, 8))
        out["entry_point"] = ep
        out["structure"]   = [s.as_dict() for s in self.structures]
        if self.fault is not None:
            out["fault"] = self.fault.message
        return out
