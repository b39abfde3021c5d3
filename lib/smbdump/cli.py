""" dmidump [ENTRY_POINT_FILE TABLE_FILE [OUTPUT]]

    Decode SMBIOS tables of running system, or of entry point and table
    dumps (e.g. copies of /sys/firmware/dmi/tables/*). Output format is
    selected by extension of OUTPUT: .yml or .yaml for YAML, .toml for
    TOML, text report otherwise. Exits with 2 when table is truncated.

    https://www.dmtf.org/sites/default/files/standards/documents/DSP0134_3.8.0.pdf
"""

import sys
from .decoder  import decode
from .logging  import LenientLogger, DecoderError, AcquisitionError
from .         import platform, report, ftoml, fyaml

MYPY = False
if MYPY:
    from typing import Tuple, List, Optional

EXIT_TRUNCATED = 2

def error(msg): # type: (str) -> None
    sys.stderr.write("Err: %s\n" % (msg,))
    sys.exit(1)

def read_input(args): # type: (List[str]) -> Tuple[bytes, bytes] # {{{
    if len(args) == 1:
        error("table file is required together with entry point file")
    try:
        if len(args) > 1:
            data = platform.read_files(args[0], args[1])
        else:
            data = platform.fetch_table_bytes()
    except AcquisitionError as e:
        error(e.message)
    return data
# }}}

def process_data(entry_point, table_bytes, output): # type: (bytes, bytes, Optional[str]) -> Tuple[bytes, bool] # {{{
    try:
        table = decode(entry_point, table_bytes, LenientLogger())
    except DecoderError as e:
        error(e.message)
    name = (output or "").lower()
    if name.endswith((".yml", ".yaml")):
        data_out = fyaml.dump(table)
    elif name.endswith(".toml"):
        data_out = ftoml.dump(table)
    else:
        data_out = report.render(table).encode('utf-8')
    return data_out, table.fault is not None
# }}}

def write_output(data_out, output): # type: (bytes, Optional[str]) -> None # {{{
    if output is not None:
        try:
            with open(output, "wb") as f:
                f.write(data_out)
        except (IOError, OSError) as e:
            error("Cannot write %s: %s" % (output, e.strerror or e))
    else:
        sys.stdout.buffer.write(data_out)
        sys.stdout.flush()
# }}}

def main(argv = None): # type: (Optional[List[str]]) -> int
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 3 or any(a in ("-h", "--help") for a in args):
        sys.stderr.write(__doc__)
        return 1
    entry_point, table_bytes = read_input(args)
    output = args[2] if len(args) > 2 else None
    data_out, truncated = process_data(entry_point, table_bytes, output)
    write_output(data_out, output)
    return EXIT_TRUNCATED if truncated else 0
