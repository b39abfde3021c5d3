from .specification import *
from .logging       import *
from .types         import *
from .utils         import *
from .labels        import *
from .entrypoint    import EntryPoint, resolve_entry_point
from .strings       import StringTable
from .view          import StructureView, sub_records
from .walker        import walk, END_OF_TABLE

import uuid
from collections import OrderedDict

MYPY = False
if MYPY:
    from typing import Optional, Tuple, Union, Dict, Callable, Type, List, Any, Iterator, Set
    from .walker import RawStructure
    Fields = OrderedDict[str, Any]

UUID_NOT_PRESENT  = Special("Not Present")
UUID_NOT_SETTABLE = Special("Not Settable")
SEE_EVENT_LOG     = Special("See Event Log")
OK                = Special("OK")

MODULE_SIZE_SPECIAL = {
    0x7D: Special("Not Determinable"),
    0x7E: Special("Module Installed But Not Enabled"),
    0x7F: Special("Not Installed"),
}

# {{{ auxiliary functions
def replace(out, old, new): # type: (Fields, str, List[Tuple[str, Any]]) -> None
    """ Replace field `old` by fields `new` at the same position. """
    items = list(out.items())
    out.clear()
    for k, v in items:
        if k == old:
            for nk, nv in new:
                out[nk] = nv
        else:
            out[k] = v

def pci_address(segment, bus, devfn): # type: (Optional[int], Optional[int], Optional[int]) -> Any
    if segment is None or bus is None or devfn is None:
        return None
    if segment == 0xFFFF and bus == 0xFF and devfn == 0xFF:
        return NOT_APPLICABLE
    return "%04x:%02x:%02x.%x" % (segment, bus, devfn >> 3, devfn & 7)

def fixed_size(size): # type: (int) -> Callable[[StructureView, int], int]
    return lambda view, pos: size

def byte_prefixed(pos_of_length, extra): # type: (int, int) -> Callable[[StructureView, int], int]
    """ Record size stored in a byte of the record header. """
    return lambda view, pos: view.u8(pos + pos_of_length) + extra

def key_of(name): # type: (str) -> str
    return name.lower().replace("-", "_").replace(" ", "_")
# }}}

class Decoder(object):
    logger             = None # type: Logger
    field_decoders     = None # type: Dict[Type[FieldSpec], Callable[[FieldSpec, StructureView, int], Any]]
    structure_decoders = None # type: Dict[int, Callable[[StructureView, Fields], None]]

    def __init__(self, logger = None): # type: (Optional[Logger]) -> None
        if logger is None:
            self.logger = StdErrLogger()
        else:
            self.logger = logger

        self.field_decoders = dict()
        self.field_decoders[Int]   = self.decode_int
        self.field_decoders[Bit]   = self.decode_bit
        self.field_decoders[Str]   = self.decode_str
        self.field_decoders[Bytes] = self.decode_bytes
        self.field_decoders[Uuid]  = self.decode_uuid

        self.structure_decoders = dict()
        self.structure_decoders[0]  = self.decode_platform_firmware
        self.structure_decoders[2]  = self.decode_baseboard
        self.structure_decoders[3]  = self.decode_enclosure
        self.structure_decoders[4]  = self.decode_processor
        self.structure_decoders[5]  = self.decode_memory_controller
        self.structure_decoders[6]  = self.decode_memory_module
        self.structure_decoders[7]  = self.decode_cache
        self.structure_decoders[9]  = self.decode_system_slot
        self.structure_decoders[10] = self.decode_onboard_devices
        self.structure_decoders[11] = self.decode_string_list
        self.structure_decoders[12] = self.decode_string_list
        self.structure_decoders[13] = self.decode_firmware_language
        self.structure_decoders[14] = self.decode_group_associations
        self.structure_decoders[15] = self.decode_event_log
        self.structure_decoders[16] = self.decode_physical_memory_array
        self.structure_decoders[17] = self.decode_memory_device
        self.structure_decoders[19] = self.decode_mapped_address
        self.structure_decoders[20] = self.decode_mapped_address
        self.structure_decoders[22] = self.decode_portable_battery
        self.structure_decoders[25] = self.decode_power_controls
        self.structure_decoders[31] = self.decode_boot_integrity_services
        self.structure_decoders[37] = self.decode_memory_channel
        self.structure_decoders[38] = self.decode_ipmi_device
        self.structure_decoders[40] = self.decode_additional_information
        self.structure_decoders[41] = self.decode_onboard_device
        self.structure_decoders[42] = self.decode_host_interface
        self.structure_decoders[43] = self.decode_tpm_device
        self.structure_decoders[44] = self.decode_processor_additional_information
        self.structure_decoders[45] = self.decode_firmware_inventory

    def decodererror(self, msg): # type: (str) -> None
        self.logger.decodererror(msg)
    def warning(self, msg): # type: (str) -> None
        self.logger.warning(msg)
    def info(self, msg): # type: (str) -> None
        self.logger.info(msg)

    version   = None # type: Tuple[int, int, int]
    current   = None # type: DecodedStructure
    msgprefix = None # type: str

    def structure_warning(self, msg): # type: (str) -> None
        """ Decode warning of structure being decoded, kept with the
            structure and forwarded to logger. """
        self.current.warnings.append(msg)
        self.warning("%s%s" % (self.msgprefix, msg))

    # {{{ Field decoders
    # Field decoders are allowed to raise FieldOutOfRange only by accessing `view`

    def decode_int(self, spec, view, offset): # type: (FieldSpec, StructureView, int) -> Any
        assert isinstance(spec, Int)
        v = view.uint(offset, spec.size)
        if spec.lo is not None:
            assert spec.hi is not None
            v = getbits(v, spec.hi, spec.lo)
        if v in spec.special:
            return spec.special[v]
        if spec.table is not None:
            return spec.table(v)
        if spec.signed and v >= 1 << (8 * spec.size - 1):
            v -= 1 << (8 * spec.size)
        if spec.divisor is not None:
            v = v / float(spec.divisor)
        if spec.unit is not None:
            return Quantity(v, spec.unit)
        if spec.hexa:
            return Hex(v, 2 * spec.size)
        return v

    def decode_bit(self, spec, view, offset): # type: (FieldSpec, StructureView, int) -> Any
        assert isinstance(spec, Bit)
        return bool((view.uint(offset, spec.size) >> spec.bit) & 1)

    def decode_str(self, spec, view, offset): # type: (FieldSpec, StructureView, int) -> Any
        return view.string(offset)

    def decode_bytes(self, spec, view, offset): # type: (FieldSpec, StructureView, int) -> Any
        return hexdump(view.raw(offset, spec.size))

    def decode_uuid(self, spec, view, offset): # type: (FieldSpec, StructureView, int) -> Any
        """ Since SMBIOS 2.6 the first three fields are little endian. """
        data = view.raw(offset, spec.size)
        if all_ones(int.from_bytes(data, 'little'), spec.size):
            return UUID_NOT_PRESENT
        if not any(bytearray(data)):
            return UUID_NOT_SETTABLE
        if self.version[:2] >= (2, 6):
            return str(uuid.UUID(bytes_le=data)).upper()
        return str(uuid.UUID(bytes=data)).upper()
    # }}}

    def decode_fields(self, view, specs, out, shift = 0): # type: (StructureView, Tuple[FieldSpec, ...], Fields, int) -> None
        """ Decode fields in order, the first field that does not fit into
            structure and all fields after it are absent (None). """
        present = True
        for spec in specs:
            offset = spec.offset + shift
            if present and not view.fits(offset, spec.size):
                present = False
                if view.fits(offset):
                    self.structure_warning("Field %s at offset 0x%02X is truncated by structure length %d"
                        % (spec.name.lstrip("_"), offset, view.length))
            if not present:
                out[spec.name] = None
                continue
            decoder = None # type: Optional[Callable[[FieldSpec, StructureView, int], Any]]
            for t, d in self.field_decoders.items():
                if isinstance(spec, t):
                    decoder = d
                    break
            assert decoder is not None
            out[spec.name] = decoder(spec, view, offset)

    def absent(self, specs, out): # type: (Tuple[FieldSpec, ...], Fields) -> None
        for spec in specs:
            out[spec.name] = None

    def handle_list(self, view, start, count, what): # type: (StructureView, int, int, str) -> List[Hex]
        return [Hex(view.u16(pos)) for pos in sub_records(view, start, view.length, 2, fixed_size(2), count, what)]

    # {{{ Structure decoders
    def decode_platform_firmware(self, view, out): # type: (StructureView, Fields) -> None
        segment = out["starting_address_segment"]
        if segment is None:
            runtime = None
        elif segment == 0:
            runtime = NOT_APPLICABLE
        else:
            runtime = Size.from_bytes((0x10000 - segment) * 16)
        replace(out, "starting_address_segment", [("starting_address_segment", segment), ("runtime_size", runtime)])

        rom = out["_rom_size"]
        if rom is None:
            size = None
        elif rom == 0xFF:
            ext = out["_extended_rom_size"]
            if ext is None:
                size = UNKNOWN
            elif getbits(ext, 15, 14) > 1:
                self.structure_warning("Extended ROM size uses reserved unit %d" % (getbits(ext, 15, 14),))
                size = UNKNOWN
            else:
                size = Size(getbits(ext, 13, 0), str(EXTENDED_ROM_UNIT(getbits(ext, 15, 14))))
        else:
            size = Size((rom + 1) * 64, "KiB").normalized()
        replace(out, "_rom_size", [("rom_size", size)])

        for name, major, minor in (("firmware_release", "_firmware_major", "_firmware_minor"),
                                   ("embedded_controller_firmware_release", "_controller_major", "_controller_minor")):
            if out[major] is None or out[minor] is None:
                value = None
            elif out[major] == 0xFF and out[minor] == 0xFF:
                value = NOT_APPLICABLE
            else:
                value = "%d.%d" % (out[major], out[minor])
            replace(out, major, [(name, value)])

    def decode_baseboard(self, view, out): # type: (StructureView, Fields) -> None
        count = out["_handle_count"]
        handles = None if count is None else self.handle_list(view, 0x0F, count, "contained object handle")
        replace(out, "_handle_count", [("contained_object_handles", handles)])

    def decode_enclosure(self, view, out): # type: (StructureView, Fields) -> None
        n, m = out["_element_count"], out["_element_length"]
        if n is None or m is None:
            replace(out, "_element_count", [("contained_elements", None)])
            self.absent(ENCLOSURE_TAIL, out)
            return
        elements = [] # type: List[Fields]
        if n and m != 3:
            self.structure_warning("Contained element record length is %d, expected 3" % (m,))
        if n and m >= 3:
            for pos in sub_records(view, 0x15, 0x15 + n * m, m, fixed_size(m), n, "contained element"):
                code = view.u8(pos)
                e = OrderedDict() # type: Fields
                if code & 0x80:
                    e["type"] = STRUCTURE_TYPE(code & 0x7F)
                else:
                    e["type"] = BASEBOARD_TYPE(code & 0x7F)
                e["minimum"] = view.u8(pos + 1)
                e["maximum"] = view.u8(pos + 2)
                elements.append(e)
        replace(out, "_element_count", [("contained_elements", elements)])
        self.decode_fields(view, ENCLOSURE_TAIL, out, n * m)

    def processor_family(self, out): # type: (Fields) -> Any
        code = out["_family"]
        manufacturer = out["manufacturer"] or ""
        if code is None:
            return None
        if code == 0xFE:
            if out["_family_2"] is None:
                return UNKNOWN
            return PROCESSOR_FAMILY(out["_family_2"])
        if code == 0xBE:
            if "Intel" in manufacturer:
                return Label("Core 2", code)
            if "AMD" in manufacturer or "Advanced Micro Devices" in manufacturer:
                return Label("K7", code)
            return Label("Core 2 or K7", code)
        # Alpha code was used for Pentium Pro by SMBIOS 2.0 firmware
        if code == 0x30 and out["l1_cache_handle"] is None and "Intel" in manufacturer:
            return Label("Pentium Pro", code)
        return PROCESSOR_FAMILY(code)

    def processor_count(self, short, wide): # type: (Optional[int], Optional[int]) -> Any
        if short is None:
            return None
        if short == 0xFF:
            if wide is None or wide == 0:
                return UNKNOWN
            return wide
        if short == 0:
            return UNKNOWN
        return short

    def decode_processor(self, view, out): # type: (StructureView, Fields) -> None
        replace(out, "_family", [("family", self.processor_family(out))])

        v = out["_voltage"]
        if v is None:
            voltage = None # type: Any
        elif v & 0x80:
            voltage = Quantity((v & 0x7F) / 10.0, "V")
        else:
            voltage = PROCESSOR_VOLTAGE(v & 0x07)
        replace(out, "_voltage", [("voltage", voltage)])

        u = out["_upgrade"]
        if u is None:
            upgrade = None # type: Any
        elif u == 0xFE:
            upgrade = out["socket_type"] if out["socket_type"] is not None else UNKNOWN
        else:
            upgrade = PROCESSOR_UPGRADE(u)
        replace(out, "_upgrade", [("upgrade", upgrade)])

        for name, short, wide in (("core_count", "_core_count", "_core_count_2"),
                                  ("core_enabled", "_core_enabled", "_core_enabled_2"),
                                  ("thread_count", "_thread_count", "_thread_count_2")):
            replace(out, short, [(name, self.processor_count(out[short], out[wide]))])

    def decode_memory_controller(self, view, out): # type: (StructureView, Fields) -> None
        n = out["_maximum_module_size"]
        slots = out["associated_memory_slots"]
        if n is None:
            module, total = None, None
        else:
            module = Size(1 << n, "MiB").normalized()
            total = None if slots is None else Size((1 << n) * slots, "MiB").normalized()
        replace(out, "_maximum_module_size", [("maximum_module_size", module), ("maximum_total_size", total)])
        if slots is None:
            out["memory_module_handles"] = None
            self.absent(MEMORY_CONTROLLER_TAIL, out)
            return
        out["memory_module_handles"] = self.handle_list(view, 0x0F, slots, "memory module handle")
        self.decode_fields(view, MEMORY_CONTROLLER_TAIL, out, 2 * slots)

    def module_size(self, code): # type: (Optional[int]) -> Tuple[Any, Any]
        if code is None:
            return None, None
        n = code & 0x7F
        if n in MODULE_SIZE_SPECIAL:
            return MODULE_SIZE_SPECIAL[n], None
        return Size(1 << n, "MiB").normalized(), Label("Double-bank" if code & 0x80 else "Single-bank")

    def decode_memory_module(self, view, out): # type: (StructureView, Fields) -> None
        b = out["_bank_connections"]
        if b is None:
            banks = None # type: Any
        elif b == 0xFF:
            banks = NONE
        else:
            banks = [x for x in (b >> 4, b & 0x0F) if x != 0x0F]
        replace(out, "_bank_connections", [("bank_connections", banks)])

        for name in ("installed", "enabled"):
            size, connection = self.module_size(out["_%s_size" % (name,)])
            replace(out, "_%s_size" % (name,), [("%s_size" % (name,), size), ("%s_connection" % (name,), connection)])

        e = out["_error_status"]
        if e is None:
            status = None # type: Any
        elif e & 0x04:
            status = SEE_EVENT_LOG
        elif e & 0x03 == 0:
            status = OK
        else:
            status = MODULE_ERROR_STATUS(e & 0x03)
        replace(out, "_error_status", [("error_status", status)])

    def cache_size(self, size, size2): # type: (Optional[int], Optional[int]) -> Any
        """ Size in 1 KiB or 64 KiB granularity, 32-bit size 2 when 16-bit size is saturated. """
        if size is None:
            return None
        if size == 0xFFFF:
            if size2 is None:
                return UNKNOWN
            granularity = 64 if size2 & 0x80000000 else 1
            return Size((size2 & 0x7FFFFFFF) * granularity, "KiB").normalized()
        granularity = 64 if size & 0x8000 else 1
        return Size((size & 0x7FFF) * granularity, "KiB").normalized()

    def decode_cache(self, view, out): # type: (StructureView, Fields) -> None
        cfg = out["_configuration"]
        if cfg is None:
            config = [(n, None) for n in ("level", "socketed", "location", "enabled", "operational_mode")]
        else:
            config = [
                ("level",            "L%d" % (getbits(cfg, 2, 0) + 1,)),
                ("socketed",         bool(cfg & 0x08)),
                ("location",         CACHE_LOCATION(getbits(cfg, 6, 5))),
                ("enabled",          bool(cfg & 0x80)),
                ("operational_mode", CACHE_MODE(getbits(cfg, 9, 8))),
            ]
        replace(out, "_configuration", config)
        replace(out, "_maximum_size", [("maximum_size", self.cache_size(out["_maximum_size"], out["_maximum_size_2"]))])
        replace(out, "_installed_size", [("installed_size", self.cache_size(out["_installed_size"], out["_installed_size_2"]))])

    def decode_system_slot(self, view, out): # type: (StructureView, Fields) -> None
        replace(out, "_segment", [("bus_address", pci_address(out["_segment"], out["_bus"], out["_devfn"]))])
        count = out["_peer_count"]
        if count is None:
            replace(out, "_peer_count", [("peer_groups", None)])
            self.absent(SLOT_TAIL, out)
            return
        groups = [] # type: List[Fields]
        for pos in sub_records(view, 0x13, view.length, 5, fixed_size(5), count, "peer group"):
            g = OrderedDict() # type: Fields
            g["bus_address"]    = pci_address(view.u16(pos), view.u8(pos + 2), view.u8(pos + 3))
            g["data_bus_width"] = view.u8(pos + 4)
            groups.append(g)
        replace(out, "_peer_count", [("peer_groups", groups)])
        self.decode_fields(view, SLOT_TAIL, out, 5 * count)

    def decode_onboard_devices(self, view, out): # type: (StructureView, Fields) -> None
        devices = [] # type: List[Fields]
        for i in range((view.length - 4) // 2):
            pos = 4 + 2 * i
            code = view.u8(pos)
            d = OrderedDict() # type: Fields
            d["type"]        = ONBOARD_DEVICE_TYPE(code & 0x7F)
            d["enabled"]     = bool(code & 0x80)
            d["description"] = view.string(pos + 1)
            devices.append(d)
        out["devices"] = devices

    def string_list(self, view, count): # type: (StructureView, int) -> List[str]
        strings = [view.strings.get(i + 1, view.warn) for i in range(count)]
        return [s for s in strings if s is not None]

    def decode_string_list(self, view, out): # type: (StructureView, Fields) -> None
        """ OEM strings and system configuration options. """
        count = out["_count"]
        replace(out, "_count", [("strings", None if count is None else self.string_list(view, count))])

    def decode_firmware_language(self, view, out): # type: (StructureView, Fields) -> None
        n = out["installable_languages"]
        languages = None if n is None else self.string_list(view, n)
        flags = out["_flags"]
        if flags is None or self.version[:2] < (2, 1):
            language_format = None # type: Any
        else:
            language_format = Label("Abbreviated" if flags & 0x01 else "Long")
        replace(out, "installable_languages", [("installable_languages", n), ("languages", languages)])
        replace(out, "_flags", [("language_format", language_format)])

    def decode_group_associations(self, view, out): # type: (StructureView, Fields) -> None
        items = [] # type: List[Fields]
        for i in range((view.length - 5) // 3):
            pos = 5 + 3 * i
            item = OrderedDict() # type: Fields
            item["type"]   = STRUCTURE_TYPE(view.u8(pos))
            item["handle"] = Hex(view.u16(pos + 1))
            items.append(item)
        out["items"] = items

    def decode_event_log(self, view, out): # type: (StructureView, Fields) -> None
        method = out["access_method"]
        address = out["_access_address"]
        if method is None or address is None:
            access = None # type: Any
        elif method.code in (0, 1, 2):
            access = "Index 0x%04X, Data 0x%04X" % (address & 0xFFFF, address >> 16)
        elif method.code == 4:
            access = "GPNV handle %s" % (Hex(address & 0xFFFF),)
        else:
            access = Hex(address, 8)
        replace(out, "_access_address", [("access_address", access)])

        x, y = out["_descriptor_count"], out["_descriptor_length"]
        if x is None or y is None:
            descriptors = None # type: Any
        elif y < 2:
            if x:
                self.structure_warning("Log type descriptor length %d is too small" % (y,))
            descriptors = []
        else:
            descriptors = []
            for pos in sub_records(view, 0x17, view.length, y, fixed_size(y), x, "log type descriptor"):
                d = OrderedDict() # type: Fields
                d["type"]        = EVENT_LOG_TYPE(view.u8(pos))
                d["data_format"] = EVENT_LOG_DATA_FORMAT(view.u8(pos + 1))
                descriptors.append(d)
        replace(out, "_descriptor_count", [("supported_log_types", descriptors)])

    def decode_physical_memory_array(self, view, out): # type: (StructureView, Fields) -> None
        cap = out["_maximum_capacity"]
        if cap is None:
            capacity = None # type: Any
        elif cap == 0x80000000:
            ext = out["_extended_maximum_capacity"]
            capacity = UNKNOWN if ext is None else Size.from_bytes(ext)
        else:
            capacity = Size(cap, "KiB").normalized()
        replace(out, "_maximum_capacity", [("maximum_capacity", capacity)])

    def memory_speed(self, speed, extended): # type: (Optional[int], Optional[int]) -> Any
        if speed is None:
            return None
        if speed == 0:
            return UNKNOWN
        if speed == 0xFFFF:
            if extended is None:
                return UNKNOWN
            return Quantity(extended & 0x7FFFFFFF, "MT/s")
        return Quantity(speed, "MT/s")

    def wide_size(self, value): # type: (Optional[int]) -> Any
        if value is None:
            return None
        if value == 0:
            return NONE
        if all_ones(value, 8):
            return UNKNOWN
        return Size.from_bytes(value)

    def decode_memory_device(self, view, out): # type: (StructureView, Fields) -> None
        s = out["_size"]
        if s is None:
            size = None # type: Any
        elif s == 0:
            size = Special("No Module Installed")
        elif s == 0xFFFF:
            size = UNKNOWN
        elif s == 0x7FFF:
            ext = out["_extended_size"]
            size = UNKNOWN if ext is None else Size(ext & 0x7FFFFFFF, "MiB")
        else:
            size = Size(s & 0x7FFF, "KiB" if s & 0x8000 else "MiB")
        replace(out, "_size", [("size", size)])

        ds = out["_device_set"]
        replace(out, "_device_set", [("device_set", {None: None, 0: NONE, 0xFF: UNKNOWN}.get(ds, ds))])

        replace(out, "_speed", [("speed", self.memory_speed(out["_speed"], out["_extended_speed"]))])
        replace(out, "_configured_speed", [("configured_memory_speed",
            self.memory_speed(out["_configured_speed"], out["_extended_configured_speed"]))])
        for name in ("non_volatile_size", "volatile_size", "cache_size", "logical_size"):
            replace(out, "_" + name, [(name, self.wide_size(out["_" + name]))])

    def address_range(self, out): # type: (Fields) -> List[Tuple[str, Any]]
        start, end = out["_start"], out["_end"]
        if start is None or end is None:
            return [("starting_address", None), ("ending_address", None), ("range_size", None)]
        if start == 0xFFFFFFFF:
            if out["_extended_start"] is None or out["_extended_end"] is None:
                return [("starting_address", UNKNOWN), ("ending_address", UNKNOWN), ("range_size", UNKNOWN)]
            first, last = out["_extended_start"], out["_extended_end"]
        else:
            first, last = start << 10, ((end + 1) << 10) - 1
        if last < first:
            self.structure_warning("Ending address 0x%X is below starting address 0x%X" % (last, first))
            size = UNKNOWN # type: Any
        else:
            size = Size.from_bytes(last - first + 1)
        return [("starting_address", Hex(first, 11)), ("ending_address", Hex(last, 11)), ("range_size", size)]

    def decode_mapped_address(self, view, out): # type: (StructureView, Fields) -> None
        """ Memory array and memory device mapped addresses. """
        replace(out, "_start", self.address_range(out))

    def decode_portable_battery(self, view, out): # type: (StructureView, Fields) -> None
        date = out["_sbds_manufacture_date"]
        if out["manufacture_date"] is None and date is not None:
            out["manufacture_date"] = "%04d-%02d-%02d" % (1980 + (date >> 9), getbits(date, 8, 5), getbits(date, 4, 0))
        serial = out["_sbds_serial_number"]
        if out["serial_number"] is None and serial is not None:
            out["serial_number"] = "%04X" % (serial,)

        code = out["_chemistry"]
        if code is None:
            chemistry = None # type: Any
        elif code == 0x02 and out["_sbds_chemistry"] is not None:
            chemistry = out["_sbds_chemistry"]
        else:
            chemistry = BATTERY_CHEMISTRY(code)
        replace(out, "_chemistry", [("chemistry", chemistry)])

        cap = out["_design_capacity"]
        multiplier = out["_capacity_multiplier"]
        if cap is None:
            capacity = None # type: Any
        elif cap == 0:
            capacity = UNKNOWN
        else:
            capacity = Quantity(cap * (multiplier or 1), "mWh")
        replace(out, "_design_capacity", [("design_capacity", capacity)])

    def decode_power_controls(self, view, out): # type: (StructureView, Fields) -> None
        names = ("_month", "_day", "_hour", "_minute", "_second")
        limits = ((1, 12), (1, 31), (0, 23), (0, 59), (0, 59))
        if any(out[n] is None for n in names):
            value = None
        else:
            parts = [] # type: List[str]
            for n, (lo, hi) in zip(names, limits):
                v = from_bcd(out[n])
                parts.append("*" if v is None or v < lo or v > hi else "%02d" % (v,))
            value = "%s-%s %s:%s:%s" % tuple(parts)
        replace(out, "_month", [("next_scheduled_power_on", value)])

    def decode_boot_integrity_services(self, view, out): # type: (StructureView, Fields) -> None
        if out["checksum"] is not None and sum(bytearray(view.raw(0, view.length))) % 256 != 0:
            self.structure_warning("Structure has wrong checksum")

    def decode_memory_channel(self, view, out): # type: (StructureView, Fields) -> None
        count = out["_device_count"]
        if count is None:
            devices = None # type: Any
        else:
            devices = []
            for pos in sub_records(view, 0x07, view.length, 3, fixed_size(3), count, "memory device"):
                d = OrderedDict() # type: Fields
                d["load"]   = view.u8(pos)
                d["handle"] = Hex(view.u16(pos + 1))
                devices.append(d)
        replace(out, "_device_count", [("devices", devices)])

    def decode_ipmi_device(self, view, out): # type: (StructureView, Fields) -> None
        r = out["_revision"]
        replace(out, "_revision", [("specification_version", None if r is None else "%d.%d" % (r >> 4, r & 0x0F))])
        a = out["_i2c_target_address"]
        replace(out, "_i2c_target_address", [("i2c_target_address", None if a is None else Hex(a >> 1, 2))])

        interface, base, modifier = out["interface_type"], out["_base_address"], out["_modifier"]
        if base is None:
            address = [("base_address", None), ("base_address_type", None)] # type: List[Tuple[str, Any]]
        elif interface.code == 4:
            address = [("base_address", Hex(base >> 1, 2)), ("base_address_type", Label("SMBus"))]
        else:
            lsb = 0 if modifier is None else getbits(modifier, 4, 4)
            address = [("base_address", Hex((base & ~1) | lsb, 16)),
                       ("base_address_type", Label("I/O" if base & 1 else "Memory"))]
        replace(out, "_base_address", address)

        if modifier is None:
            info = [("register_spacing", None), ("interrupt_polarity", None), ("interrupt_trigger_mode", None)]
        else:
            info = [("register_spacing", IPMI_REGISTER_SPACING(getbits(modifier, 7, 6)))]
            if modifier & 0x08:
                info.append(("interrupt_polarity", Label("Active High" if modifier & 0x02 else "Active Low")))
                info.append(("interrupt_trigger_mode", Label("Level" if modifier & 0x01 else "Edge")))
            else:
                info.append(("interrupt_polarity", NOT_APPLICABLE))
                info.append(("interrupt_trigger_mode", NOT_APPLICABLE))
        replace(out, "_modifier", info)

    def decode_additional_information(self, view, out): # type: (StructureView, Fields) -> None
        count = out["_count"]
        if count is None:
            replace(out, "_count", [("entries", None)])
            return
        entries = [] # type: List[Fields]
        for pos in sub_records(view, 0x05, view.length, 5, byte_prefixed(0, 0), count, "entry"):
            n = view.u8(pos) - 5
            e = OrderedDict() # type: Fields
            e["referenced_handle"] = Hex(view.u16(pos + 1))
            e["referenced_offset"] = Hex(view.u8(pos + 3), 2)
            e["string"]            = view.string(pos + 4)
            if n in (1, 2, 4):
                e["value"] = Hex(view.uint(pos + 5, n), 2 * n)
            elif n > 0:
                e["value"] = hexdump(view.raw(pos + 5, n))
            entries.append(e)
        replace(out, "_count", [("entries", entries)])

    def decode_onboard_device(self, view, out): # type: (StructureView, Fields) -> None
        replace(out, "_segment", [("bus_address", pci_address(out["_segment"], out["_bus"], out["_devfn"]))])

    def decode_host_interface(self, view, out): # type: (StructureView, Fields) -> None
        n = out["_specific_data_length"]
        if n is None:
            replace(out, "_specific_data_length", [("interface_specific_data", None), ("protocols", None)])
            return
        if not view.fits(0x06, n + 1):
            self.structure_warning("Interface specific data (%d bytes) overruns structure" % (n,))
            replace(out, "_specific_data_length", [("interface_specific_data", None), ("protocols", None)])
            return
        protocols = [] # type: List[Fields]
        for pos in sub_records(view, 0x07 + n, view.length, 2, byte_prefixed(1, 2), view.u8(0x06 + n), "protocol record"):
            p = OrderedDict() # type: Fields
            p["type"] = HOST_INTERFACE_PROTOCOL(view.u8(pos))
            p["data"] = hexdump(view.raw(pos + 2, view.u8(pos + 1)))
            protocols.append(p)
        replace(out, "_specific_data_length", [("interface_specific_data", hexdump(view.raw(0x06, n))),
                                               ("protocols", protocols)])

    def decode_tpm_device(self, view, out): # type: (StructureView, Fields) -> None
        vendor = None # type: Optional[str]
        if out["_vendor_id"] is not None:
            # NUL terminated unless all 4 bytes are used
            raw = view.raw(0x04, 4).split(b'\0', 1)[0]
            vendor = ''.join(chr(c) if 0x20 <= c < 0x7f else '.' for c in bytearray(raw))
        replace(out, "_vendor_id", [("vendor_id", vendor)])

        major, minor, fw = out["_major"], out["_minor"], out["firmware_version_1"]
        if major is None or minor is None:
            version = [("specification_version", None), ("firmware_revision", None)] # type: List[Tuple[str, Any]]
        else:
            if fw is None:
                revision = None # type: Any
            elif major == 1:
                revision = "%d.%d" % (view.u8(0x0C), view.u8(0x0D))
            elif major == 2:
                revision = "%d.%d" % (fw >> 16, fw & 0xFFFF)
            else:
                revision = UNKNOWN
            version = [("specification_version", "%d.%d" % (major, minor)), ("firmware_revision", revision)]
        replace(out, "_major", version)

    def decode_processor_additional_information(self, view, out): # type: (StructureView, Fields) -> None
        if out["referenced_handle"] is None:
            out["blocks"] = None
            return
        blocks = [] # type: List[Fields]
        for pos in sub_records(view, 0x06, view.length, 2, byte_prefixed(0, 2), None, "processor-specific block"):
            b = OrderedDict() # type: Fields
            b["architecture"] = PROCESSOR_ARCHITECTURE(view.u8(pos + 1))
            b["data"]         = hexdump(view.raw(pos + 2, view.u8(pos)))
            blocks.append(b)
        out["blocks"] = blocks

    def decode_firmware_inventory(self, view, out): # type: (StructureView, Fields) -> None
        size = out["_image_size"]
        if size is None:
            image = None # type: Any
        elif all_ones(size, 8):
            image = UNKNOWN
        else:
            image = Size.from_bytes(size)
        replace(out, "_image_size", [("image_size", image)])
        count = out["_component_count"]
        handles = None if count is None else self.handle_list(view, 0x18, count, "associated component handle")
        replace(out, "_component_count", [("associated_components", handles)])
    # }}}

    def decode_structure(self, raw, version): # type: (RawStructure, Tuple[int, int, int]) -> DecodedStructure
        header = raw.header
        name = str(STRUCTURE_TYPE(header.type_code))
        spec = SPEC_BY_TYPE.get(header.type_code)
        ds = DecodedStructure(header.type_code, header.handle, header.length, name,
                              spec.key if spec is not None else key_of(name))
        self.current   = ds
        self.version   = tuple(version)
        self.msgprefix = "Handle 0x%04X: " % (header.handle,)
        view = StructureView(raw.formatted, header.length, StringTable.from_bytes(raw.string_bytes),
                             self.structure_warning)
        try:
            if spec is None:
                if header.type_code < 126:
                    self.structure_warning("Structure type %d is not known" % (header.type_code,))
                return ds
            try:
                self.decode_fields(view, spec.fields, ds.fields)
                hook = self.structure_decoders.get(header.type_code)
                if hook is not None:
                    hook(view, ds.fields)
            except FieldOutOfRange as e:
                self.structure_warning(e.message)
            for k in [k for k in ds.fields if k.startswith("_")]:
                del ds.fields[k]
            return ds
        finally:
            self.current   = None # type: ignore
            self.msgprefix = None # type: ignore

    def iter_structures(self, entry_point, table): # type: (EntryPoint, Union[bytes, bytearray]) -> Iterator[DecodedStructure]
        """ Decode structures lazily, in table order. TruncationFault is
            raised after all structures before it were yielded. """
        for raw in walk(table, entry_point.table_length):
            yield self.decode_structure(raw, entry_point.version)

    def decode(self, entry_point, table): # type: (Union[EntryPoint, bytes, bytearray], Union[bytes, bytearray]) -> SmbiosTable
        if not isinstance(entry_point, EntryPoint):
            entry_point = resolve_entry_point(entry_point, self.logger)
        table = bytes(table)
        structures = [] # type: List[DecodedStructure]
        handles = set() # type: Set[int]
        fault = None # type: Optional[TruncationFault]
        end = 0
        try:
            for raw in walk(table, entry_point.table_length):
                if raw.header.handle in handles and raw.header.type_code != END_OF_TABLE:
                    self.decodererror("Handle 0x%04X is used by more than one structure" % (raw.header.handle,))
                handles.add(raw.header.handle)
                structures.append(self.decode_structure(raw, entry_point.version))
                end = raw.offset + len(raw.formatted) + len(raw.string_bytes)
        except TruncationFault as e:
            fault = e
            self.warning(e.message)
        else:
            bound = min(len(table), entry_point.table_length)
            if end < bound:
                self.info("Ignoring %d bytes after End of Table structure" % (bound - end,))
        if entry_point.structure_count is not None and entry_point.structure_count != len(structures):
            self.info("Entry point announces %d structures, table has %d"
                % (entry_point.structure_count, len(structures)))
        return SmbiosTable(entry_point, structures, fault)

def decode(entry_point, table, logger = None):
    # type: (Union[EntryPoint, bytes, bytearray], Union[bytes, bytearray], Optional[Logger]) -> SmbiosTable
    """ Decode SMBIOS structure table. `entry_point` is either raw entry
        point bytes or EntryPoint. Without logger, violations of the
        standard (duplicate handles) are reported by LenientLogger and
        decoding continues. Decoder itself defaults to StdErrLogger, which
        raises DecoderError on them. """
    if logger is None:
        logger = LenientLogger()
    d = Decoder(logger)
    return d.decode(entry_point, table)
