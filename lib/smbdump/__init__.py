from .decoder    import decode, Decoder
from .entrypoint import EntryPoint, resolve_entry_point
from .platform   import fetch_table_bytes
from .logging    import *
from .types      import *
