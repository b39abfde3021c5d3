import yaml
from collections import OrderedDict
from .types import *

MYPY=False
if MYPY:
    from typing import Any

__all__=["dump", "SmbiosDumper"]

class SmbiosDumper(yaml.SafeDumper):
    """ Safe dumper that keeps structures and fields in table order. """
    pass

def _represent_ordered(dumper, data): # type: (SmbiosDumper, OrderedDict) -> Any
    return dumper.represent_mapping('tag:yaml.org,2002:map', data.items())

SmbiosDumper.add_representer(OrderedDict, _represent_ordered)

def dump(table): # type: (SmbiosTable) -> bytes
    """ Dumps decoded table into YAML. Returns utf-8 encoded bytes. """
    return yaml.dump(table.as_dict(), Dumper=SmbiosDumper, default_flow_style=False,
                     allow_unicode=True, encoding='utf-8')
