MYPY=False
from collections import OrderedDict
from .types import *

__all__=["dump", "dump_str"]

ESCAPES = {
    '"':  '\\"',
    '\\': '\\\\',
    '\b': '\\b',
    '\t': '\\t',
    '\n': '\\n',
    '\f': '\\f',
    '\r': '\\r',
}

def dump_str(v): # type: (str) -> str
    """ TOML basic string. Control characters are escaped as \\uXXXX. """
    out = []
    for c in v:
        if c in ESCAPES:
            out.append(ESCAPES[c])
        elif ord(c) < 0x20 or ord(c) == 0x7f:
            out.append('\\u%04X' % (ord(c),))
        else:
            out.append(c)
    return '"%s"' % (''.join(out),)

if MYPY:
    from typing import Any
    def dump(table): # type: (SmbiosTable) -> bytes
        """ Dumps decoded table into TOML. Returns utf-8 encoded bytes. """
        return b''
else:
    import toml
    class SmbiosTomlEncoder(toml.TomlEncoder):
        def __init__(self, _dict = OrderedDict, preserve = False):
            super(SmbiosTomlEncoder, self).__init__(_dict, preserve)

        def dump_value(self, v):
            # toml escapes strings through repr() and breaks on \x sequences
            if isinstance(v, str):
                return dump_str(v)
            return super(SmbiosTomlEncoder, self).dump_value(v)

    def dump(table):
        """ Dumps decoded table into TOML. Returns utf-8 encoded bytes. """
        return toml.dumps(table.as_dict(), SmbiosTomlEncoder()).encode('utf8')
