""" Human readable text report, in the manner of dmidecode. """

from .types import *

MYPY=False
if MYPY:
    from typing import Any, List

__all__ = ["render", "title"]

ACRONYMS = {
    "id": "ID", "uuid": "UUID", "sku": "SKU", "oem": "OEM", "rom": "ROM",
    "ecc": "ECC", "sram": "SRAM", "ipmi": "IPMI", "i2c": "I2C", "nv": "NV",
    "l1": "L1", "l2": "L2", "l3": "L3", "tpm": "TPM", "rcd": "RCD",
    "pmic0": "PMIC0", "sbds": "SBDS",
}

def title(key): # type: (str) -> str
    """ Field key to field name: contained_object_handles -> Contained Object Handles """
    return " ".join(ACRONYMS.get(w, w.capitalize()) for w in key.split("_"))

def value_str(v): # type: (Any) -> str
    if v is True:
        return "Yes"
    if v is False:
        return "No"
    if isinstance(v, dict):
        return ", ".join("%s: %s" % (title(k), value_str(x)) for k, x in v.items() if x is not None)
    return str(v)

def render_field(lines, key, v): # type: (List[str], str, Any) -> None
    if isinstance(v, list):
        if not v:
            lines.append("\t%s: None" % (title(key),))
            return
        lines.append("\t%s:" % (title(key),))
        for x in v:
            lines.append("\t\t%s" % (value_str(x),))
        return
    lines.append("\t%s: %s" % (title(key), value_str(v)))

def render_structure(s): # type: (DecodedStructure) -> List[str]
    lines = ["Handle 0x%04X, DMI type %d, %d bytes" % (s.handle, s.type_code, s.length), s.name]
    for k, v in s.present().items():
        render_field(lines, k, v)
    for w in s.warnings:
        lines.append("\tWarning: %s" % (w,))
    return lines

def render(table): # type: (SmbiosTable) -> str
    ep = table.entry_point
    lines = ["SMBIOS %s present." % (ep.version_string,)]
    if ep.table_address is not None:
        lines.append("Table at %s, %d bytes." % (Hex(ep.table_address, 8), ep.table_length))
    else:
        lines.append("Table is %d bytes." % (ep.table_length,))
    lines.append("")
    for s in table:
        lines.extend(render_structure(s))
        lines.append("")
    if table.fault is not None:
        lines.append("Truncated: %s" % (table.fault.message,))
        lines.append("")
    return "\n".join(lines)
