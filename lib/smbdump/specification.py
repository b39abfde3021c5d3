""" Layout of SMBIOS structures (DSP0134).

    Each structure type is described by ordered tuple of fields of its
    formatted area. Field is decoded only when structure length covers it,
    all fields after first missing one are missing as well. Fields with name
    starting with underscore are raw values consumed by structure specific
    decoders, they never appear in output. """

from .labels import *
from .types  import *

MYPY=False
if MYPY:
    from typing import Tuple, Optional, Dict, Callable, Union, Any
    Resolver = Callable[[int], Any]

# {{{ Field types
class FieldSpec(object):
    """ Field of formatted area at fixed offset (header included). """
    offset = None # type: int
    name   = None # type: str
    size   = None # type: int
    def __init__(self, offset, name): # type: (int, str) -> None
        self.offset = offset
        self.name   = name

class Int(FieldSpec):
    """ Little endian unsigned integer. Optional processing, in this order:
        bits lo..hi are extracted, values in `special` are substituted,
        then value is either resolved by `table`, or divided by `divisor`
        and wrapped in Quantity with `unit`, or rendered hexadecimal. """
    table   = None # type: Optional[Resolver]
    lo      = None # type: Optional[int]
    hi      = None # type: Optional[int]
    special = None # type: Dict[int, Special]
    unit    = None # type: Optional[str]
    divisor = None # type: Optional[int]
    signed  = None # type: bool
    hexa    = None # type: bool

    def __init__(self, offset, name, table = None, lo = None, hi = None, special = None,
                 unit = None, divisor = None, signed = False, hexa = False):
        # type: (int, str, Optional[Resolver], Optional[int], Optional[int], Optional[Dict[int, Special]], Optional[str], Optional[int], bool, bool) -> None
        super(Int, self).__init__(offset, name)
        self.table   = table
        self.lo      = lo
        self.hi      = hi
        self.special = special or {}
        self.unit    = unit
        self.divisor = divisor
        self.signed  = signed
        self.hexa    = hexa

class Byte(Int):
    size = 1

class Word(Int):
    size = 2

class DWord(Int):
    size = 4

class QWord(Int):
    size = 8

class Handle(Word):
    """ Handle of other structure. """
    def __init__(self, offset, name, special = None): # type: (int, str, Optional[Dict[int, Special]]) -> None
        super(Handle, self).__init__(offset, name, special=special, hexa=True)

class Bit(FieldSpec):
    """ Single bit of a byte (or wider field), decoded as bool. """
    bit = None # type: int
    def __init__(self, offset, name, bit, size = 1): # type: (int, str, int, int) -> None
        super(Bit, self).__init__(offset, name)
        self.bit  = bit
        self.size = size

class Str(FieldSpec):
    """ Index into string table of the structure. """
    size = 1

class Bytes(FieldSpec):
    """ Uninterpreted bytes, rendered as hex dump. """
    def __init__(self, offset, name, size): # type: (int, str, int) -> None
        super(Bytes, self).__init__(offset, name)
        self.size = size

class Uuid(FieldSpec):
    """ 16 byte UUID, byte order depends on SMBIOS version. """
    size = 16
# }}}

class StructureSpec(object):
    """ Structure type: code, key (used as name in output) and fields. """
    type_code = None # type: int
    key       = None # type: str
    fields    = None # type: Tuple[FieldSpec, ...]
    def __init__(self, type_code, key, fields): # type: (int, str, Tuple[FieldSpec, ...]) -> None
        self.type_code = type_code
        self.key       = key
        self.fields    = fields
        prev = 0
        for f in fields:
            assert f.offset >= prev, "%s.%s out of order" % (key, f.name)
            prev = f.offset

    @property
    def name(self): # type: () -> str
        return str(STRUCTURE_TYPE(self.type_code))

HANDLE_NONE     = {0xFFFF: NOT_PROVIDED}
HANDLE_ERROR    = {0xFFFE: NOT_PROVIDED, 0xFFFF: NO_ERROR}
ZERO_UNKNOWN    = {0: UNKNOWN}
PROBE_UNKNOWN   = {0x8000: UNKNOWN}

def probe(type_code, key, value_unit, value_divisor, resolution_divisor, tolerance_divisor, signed):
    # type: (int, str, str, Optional[int], int, Optional[int], bool) -> StructureSpec
    """ Voltage, temperature and current probes share one layout. """
    return StructureSpec(type_code, key, (
        Str  (0x04, "description"),
        Byte (0x05, "location", PROBE_LOCATION, lo=0, hi=4),
        Byte (0x05, "status", STATUS, lo=5, hi=7),
        Word (0x06, "maximum_value", special=PROBE_UNKNOWN, unit=value_unit, divisor=value_divisor, signed=signed),
        Word (0x08, "minimum_value", special=PROBE_UNKNOWN, unit=value_unit, divisor=value_divisor, signed=signed),
        Word (0x0A, "resolution", special=PROBE_UNKNOWN, unit=value_unit, divisor=resolution_divisor),
        Word (0x0C, "tolerance", special=PROBE_UNKNOWN, unit=value_unit, divisor=tolerance_divisor),
        Word (0x0E, "accuracy", special=PROBE_UNKNOWN, unit="%", divisor=100),
        DWord(0x10, "oem_specific_information", hexa=True),
        Word (0x14, "nominal_value", special=PROBE_UNKNOWN, unit=value_unit, divisor=value_divisor, signed=signed),
    ))

def memory_error(type_code, key, address, sentinel):
    # type: (int, str, Callable[..., Int], int) -> StructureSpec
    size = address(0, "").size
    return StructureSpec(type_code, key, (
        Byte (0x04, "type", MEMORY_ERROR_TYPE),
        Byte (0x05, "granularity", MEMORY_ERROR_GRANULARITY),
        Byte (0x06, "operation", MEMORY_ERROR_OPERATION),
        DWord(0x07, "vendor_syndrome", special=ZERO_UNKNOWN, hexa=True),
        address(0x0B, "memory_array_error_address", special={sentinel: UNKNOWN}, hexa=True),
        address(0x0B + size, "device_error_address", special={sentinel: UNKNOWN}, hexa=True),
        DWord(0x0B + 2 * size, "error_resolution", special={0x80000000: UNKNOWN}, unit="B"),
    ))

STRUCTURES = (
    StructureSpec(0, "platform_firmware", (
        Str  (0x04, "vendor"),
        Str  (0x05, "version"),
        Word (0x06, "starting_address_segment", hexa=True),
        Str  (0x08, "release_date"),
        Byte (0x09, "_rom_size"),
        QWord(0x0A, "characteristics", FIRMWARE_CHARACTERISTICS),
        Byte (0x12, "characteristics_extension_1", FIRMWARE_CHARACTERISTICS_EXT1),
        Byte (0x13, "characteristics_extension_2", FIRMWARE_CHARACTERISTICS_EXT2),
        Byte (0x14, "_firmware_major"),
        Byte (0x15, "_firmware_minor"),
        Byte (0x16, "_controller_major"),
        Byte (0x17, "_controller_minor"),
        Word (0x18, "_extended_rom_size"),
    )),
    StructureSpec(1, "system", (
        Str  (0x04, "manufacturer"),
        Str  (0x05, "product_name"),
        Str  (0x06, "version"),
        Str  (0x07, "serial_number"),
        Uuid (0x08, "uuid"),
        Byte (0x18, "wake_up_type", WAKE_UP_TYPE),
        Str  (0x19, "sku_number"),
        Str  (0x1A, "family"),
    )),
    StructureSpec(2, "baseboard", (
        Str  (0x04, "manufacturer"),
        Str  (0x05, "product_name"),
        Str  (0x06, "version"),
        Str  (0x07, "serial_number"),
        Str  (0x08, "asset_tag"),
        Byte (0x09, "features", BASEBOARD_FEATURES),
        Str  (0x0A, "location_in_chassis"),
        Handle(0x0B, "chassis_handle"),
        Byte (0x0D, "board_type", BASEBOARD_TYPE),
        Byte (0x0E, "_handle_count"),
    )),
    StructureSpec(3, "enclosure", (
        Str  (0x04, "manufacturer"),
        Byte (0x05, "type", CHASSIS_TYPE, lo=0, hi=6),
        Bit  (0x05, "lock_present", 7),
        Str  (0x06, "version"),
        Str  (0x07, "serial_number"),
        Str  (0x08, "asset_tag"),
        Byte (0x09, "boot_up_state", CHASSIS_STATE),
        Byte (0x0A, "power_supply_state", CHASSIS_STATE),
        Byte (0x0B, "thermal_state", CHASSIS_STATE),
        Byte (0x0C, "security_status", CHASSIS_SECURITY_STATUS),
        DWord(0x0D, "oem_information", hexa=True),
        Byte (0x11, "height", special={0: UNSPECIFIED}, unit="U"),
        Byte (0x12, "number_of_power_cords", special={0: UNSPECIFIED}),
        Byte (0x13, "_element_count"),
        Byte (0x14, "_element_length"),
    )),
    StructureSpec(4, "processor", (
        Str  (0x04, "socket_designation"),
        Byte (0x05, "type", PROCESSOR_TYPE),
        Byte (0x06, "_family"),
        Str  (0x07, "manufacturer"),
        Bytes(0x08, "id", 8),
        Str  (0x10, "version"),
        Byte (0x11, "_voltage"),
        Word (0x12, "external_clock", special=ZERO_UNKNOWN, unit="MHz"),
        Word (0x14, "max_speed", special=ZERO_UNKNOWN, unit="MHz"),
        Word (0x16, "current_speed", special=ZERO_UNKNOWN, unit="MHz"),
        Bit  (0x18, "socket_populated", 6),
        Byte (0x18, "status", PROCESSOR_STATUS, lo=0, hi=2),
        Byte (0x19, "_upgrade"),
        Handle(0x1A, "l1_cache_handle", HANDLE_NONE),
        Handle(0x1C, "l2_cache_handle", HANDLE_NONE),
        Handle(0x1E, "l3_cache_handle", HANDLE_NONE),
        Str  (0x20, "serial_number"),
        Str  (0x21, "asset_tag"),
        Str  (0x22, "part_number"),
        Byte (0x23, "_core_count"),
        Byte (0x24, "_core_enabled"),
        Byte (0x25, "_thread_count"),
        Word (0x26, "characteristics", PROCESSOR_CHARACTERISTICS),
        Word (0x28, "_family_2"),
        Word (0x2A, "_core_count_2"),
        Word (0x2C, "_core_enabled_2"),
        Word (0x2E, "_thread_count_2"),
        Word (0x30, "thread_enabled", special=ZERO_UNKNOWN),
        Str  (0x32, "socket_type"),
    )),
    StructureSpec(5, "memory_controller", (
        Byte (0x04, "error_detecting_method", ERROR_DETECTING_METHOD),
        Byte (0x05, "error_correcting_capabilities", ERROR_CORRECTING_CAPABILITY),
        Byte (0x06, "supported_interleave", INTERLEAVE),
        Byte (0x07, "current_interleave", INTERLEAVE),
        Byte (0x08, "_maximum_module_size"),
        Word (0x09, "supported_speeds", MEMORY_SPEEDS),
        Word (0x0B, "supported_memory_types", MEMORY_MODULE_TYPES),
        Byte (0x0D, "memory_module_voltage", MODULE_VOLTAGE, lo=0, hi=2),
        Byte (0x0E, "associated_memory_slots"),
    )),
    StructureSpec(6, "memory_module", (
        Str  (0x04, "socket_designation"),
        Byte (0x05, "_bank_connections"),
        Byte (0x06, "current_speed", special=ZERO_UNKNOWN, unit="ns"),
        Word (0x07, "type", MEMORY_MODULE_TYPES),
        Byte (0x09, "_installed_size"),
        Byte (0x0A, "_enabled_size"),
        Byte (0x0B, "_error_status"),
    )),
    StructureSpec(7, "cache", (
        Str  (0x04, "socket_designation"),
        Word (0x05, "_configuration"),
        Word (0x07, "_maximum_size"),
        Word (0x09, "_installed_size"),
        Word (0x0B, "supported_sram_types", SRAM_TYPES),
        Word (0x0D, "installed_sram_type", SRAM_TYPES),
        Byte (0x0F, "speed", special=ZERO_UNKNOWN, unit="ns"),
        Byte (0x10, "error_correction_type", CACHE_ECC_TYPE),
        Byte (0x11, "system_type", SYSTEM_CACHE_TYPE),
        Byte (0x12, "associativity", CACHE_ASSOCIATIVITY),
        DWord(0x13, "_maximum_size_2"),
        DWord(0x17, "_installed_size_2"),
    )),
    StructureSpec(8, "port_connector", (
        Str  (0x04, "internal_reference_designator"),
        Byte (0x05, "internal_connector_type", CONNECTOR_TYPE),
        Str  (0x06, "external_reference_designator"),
        Byte (0x07, "external_connector_type", CONNECTOR_TYPE),
        Byte (0x08, "port_type", PORT_TYPE),
    )),
    StructureSpec(9, "system_slot", (
        Str  (0x04, "designation"),
        Byte (0x05, "type", SLOT_TYPE),
        Byte (0x06, "data_bus_width", SLOT_WIDTH),
        Byte (0x07, "current_usage", SLOT_USAGE),
        Byte (0x08, "length", SLOT_LENGTH),
        Word (0x09, "id"),
        Byte (0x0B, "characteristics_1", SLOT_CHARACTERISTICS1),
        Byte (0x0C, "characteristics_2", SLOT_CHARACTERISTICS2),
        Word (0x0D, "_segment"),
        Byte (0x0F, "_bus"),
        Byte (0x10, "_devfn"),
        Byte (0x11, "data_bus_width_base"),
        Byte (0x12, "_peer_count"),
    )),
    StructureSpec(10, "onboard_devices", ()),
    StructureSpec(11, "oem_strings", (
        Byte (0x04, "_count"),
    )),
    StructureSpec(12, "configuration_options", (
        Byte (0x04, "_count"),
    )),
    StructureSpec(13, "firmware_language", (
        Byte (0x04, "installable_languages"),
        Byte (0x05, "_flags"),
        Str  (0x15, "current_language"),
    )),
    StructureSpec(14, "group_associations", (
        Str  (0x04, "name"),
    )),
    StructureSpec(15, "event_log", (
        Word (0x04, "area_length", unit="B"),
        Word (0x06, "header_start_offset", hexa=True),
        Word (0x08, "data_start_offset", hexa=True),
        Byte (0x0A, "access_method", EVENT_LOG_ACCESS_METHOD),
        Byte (0x0B, "status", EVENT_LOG_STATUS),
        DWord(0x0C, "change_token", hexa=True),
        DWord(0x10, "_access_address"),
        Byte (0x14, "header_format", EVENT_LOG_HEADER_FORMAT),
        Byte (0x15, "_descriptor_count"),
        Byte (0x16, "_descriptor_length"),
    )),
    StructureSpec(16, "physical_memory_array", (
        Byte (0x04, "location", MEMORY_ARRAY_LOCATION),
        Byte (0x05, "use", MEMORY_ARRAY_USE),
        Byte (0x06, "error_correction_type", MEMORY_ARRAY_ECC),
        DWord(0x07, "_maximum_capacity"),
        Handle(0x0B, "error_information_handle", HANDLE_ERROR),
        Word (0x0D, "number_of_devices"),
        QWord(0x0F, "_extended_maximum_capacity"),
    )),
    StructureSpec(17, "memory_device", (
        Handle(0x04, "array_handle"),
        Handle(0x06, "error_information_handle", HANDLE_ERROR),
        Word (0x08, "total_width", special={0xFFFF: UNKNOWN}, unit="bits"),
        Word (0x0A, "data_width", special={0xFFFF: UNKNOWN}, unit="bits"),
        Word (0x0C, "_size"),
        Byte (0x0E, "form_factor", MEMORY_FORM_FACTOR),
        Byte (0x0F, "_device_set"),
        Str  (0x10, "locator"),
        Str  (0x11, "bank_locator"),
        Byte (0x12, "type", MEMORY_DEVICE_TYPE),
        Word (0x13, "type_detail", MEMORY_TYPE_DETAIL),
        Word (0x15, "_speed"),
        Str  (0x17, "manufacturer"),
        Str  (0x18, "serial_number"),
        Str  (0x19, "asset_tag"),
        Str  (0x1A, "part_number"),
        Byte (0x1B, "rank", lo=0, hi=3, special=ZERO_UNKNOWN),
        DWord(0x1C, "_extended_size"),
        Word (0x20, "_configured_speed"),
        Word (0x22, "minimum_voltage", special=ZERO_UNKNOWN, unit="mV"),
        Word (0x24, "maximum_voltage", special=ZERO_UNKNOWN, unit="mV"),
        Word (0x26, "configured_voltage", special=ZERO_UNKNOWN, unit="mV"),
        Byte (0x28, "memory_technology", MEMORY_TECHNOLOGY),
        Word (0x29, "operating_mode_capability", MEMORY_OPERATING_MODES),
        Str  (0x2B, "firmware_version"),
        Word (0x2C, "module_manufacturer_id", special=ZERO_UNKNOWN, hexa=True),
        Word (0x2E, "module_product_id", special=ZERO_UNKNOWN, hexa=True),
        Word (0x30, "subsystem_controller_manufacturer_id", special=ZERO_UNKNOWN, hexa=True),
        Word (0x32, "subsystem_controller_product_id", special=ZERO_UNKNOWN, hexa=True),
        QWord(0x34, "_non_volatile_size"),
        QWord(0x3C, "_volatile_size"),
        QWord(0x44, "_cache_size"),
        QWord(0x4C, "_logical_size"),
        DWord(0x54, "_extended_speed"),
        DWord(0x58, "_extended_configured_speed"),
        Word (0x5C, "pmic0_manufacturer_id", special=ZERO_UNKNOWN, hexa=True),
        Word (0x5E, "pmic0_revision", special={0xFF00: UNKNOWN}, hexa=True),
        Word (0x60, "rcd_manufacturer_id", special=ZERO_UNKNOWN, hexa=True),
        Word (0x62, "rcd_revision", special={0xFF00: UNKNOWN}, hexa=True),
    )),
    memory_error(18, "memory_error_32", DWord, 0x80000000),
    StructureSpec(19, "memory_array_mapped_address", (
        DWord(0x04, "_start"),
        DWord(0x08, "_end"),
        Handle(0x0C, "array_handle"),
        Byte (0x0E, "partition_width", special=ZERO_UNKNOWN),
        QWord(0x0F, "_extended_start"),
        QWord(0x17, "_extended_end"),
    )),
    StructureSpec(20, "memory_device_mapped_address", (
        DWord(0x04, "_start"),
        DWord(0x08, "_end"),
        Handle(0x0C, "device_handle"),
        Handle(0x0E, "array_mapped_address_handle"),
        Byte (0x10, "partition_row_position", special={0xFF: UNKNOWN}),
        Byte (0x11, "interleave_position", special={0: NOT_APPLICABLE, 0xFF: UNKNOWN}),
        Byte (0x12, "interleaved_data_depth", special={0: NOT_APPLICABLE, 0xFF: UNKNOWN}),
        QWord(0x13, "_extended_start"),
        QWord(0x1B, "_extended_end"),
    )),
    StructureSpec(21, "pointing_device", (
        Byte (0x04, "type", POINTING_DEVICE_TYPE),
        Byte (0x05, "interface", POINTING_DEVICE_INTERFACE),
        Byte (0x06, "buttons"),
    )),
    StructureSpec(22, "portable_battery", (
        Str  (0x04, "location"),
        Str  (0x05, "manufacturer"),
        Str  (0x06, "manufacture_date"),
        Str  (0x07, "serial_number"),
        Str  (0x08, "name"),
        Byte (0x09, "_chemistry"),
        Word (0x0A, "_design_capacity"),
        Word (0x0C, "design_voltage", special=ZERO_UNKNOWN, unit="mV"),
        Str  (0x0E, "sbds_version"),
        Byte (0x0F, "maximum_error", special={0xFF: UNKNOWN}, unit="%"),
        Word (0x10, "_sbds_serial_number"),
        Word (0x12, "_sbds_manufacture_date"),
        Str  (0x14, "_sbds_chemistry"),
        Byte (0x15, "_capacity_multiplier"),
        DWord(0x16, "oem_specific_information", hexa=True),
    )),
    StructureSpec(23, "system_reset", (
        Byte (0x04, "status", ENABLED, lo=0, hi=0),
        Byte (0x04, "boot_option", BOOT_OPTION, lo=1, hi=2),
        Byte (0x04, "boot_option_on_limit", BOOT_OPTION, lo=3, hi=4),
        Bit  (0x04, "watchdog_timer", 5),
        Word (0x05, "reset_count", special={0xFFFF: UNKNOWN}),
        Word (0x07, "reset_limit", special={0xFFFF: UNKNOWN}),
        Word (0x09, "timer_interval", special={0xFFFF: UNKNOWN}, unit="min"),
        Word (0x0B, "timeout", special={0xFFFF: UNKNOWN}, unit="min"),
    )),
    StructureSpec(24, "hardware_security", (
        Byte (0x04, "power_on_password_status", HARDWARE_SECURITY_STATUS, lo=6, hi=7),
        Byte (0x04, "keyboard_password_status", HARDWARE_SECURITY_STATUS, lo=4, hi=5),
        Byte (0x04, "administrator_password_status", HARDWARE_SECURITY_STATUS, lo=2, hi=3),
        Byte (0x04, "front_panel_reset_status", HARDWARE_SECURITY_STATUS, lo=0, hi=1),
    )),
    StructureSpec(25, "system_power_controls", (
        Byte (0x04, "_month"),
        Byte (0x05, "_day"),
        Byte (0x06, "_hour"),
        Byte (0x07, "_minute"),
        Byte (0x08, "_second"),
    )),
    probe(26, "voltage_probe", "mV", None, 10, None, False),
    StructureSpec(27, "cooling_device", (
        Handle(0x04, "temperature_probe_handle", HANDLE_NONE),
        Byte (0x06, "type", COOLING_DEVICE_TYPE, lo=0, hi=4),
        Byte (0x06, "status", STATUS, lo=5, hi=7),
        Byte (0x07, "cooling_unit_group", special={0: NONE}),
        DWord(0x08, "oem_specific_information", hexa=True),
        Word (0x0C, "nominal_speed", special=PROBE_UNKNOWN, unit="rpm"),
        Str  (0x0E, "description"),
    )),
    probe(28, "temperature_probe", "°C", 10, 1000, 10, True),
    probe(29, "current_probe", "mA", None, 10, None, False),
    StructureSpec(30, "remote_access", (
        Str  (0x04, "manufacturer_name"),
        Byte (0x05, "inbound_connection", ENABLED, lo=0, hi=0),
        Byte (0x05, "outbound_connection", ENABLED, lo=1, hi=1),
    )),
    StructureSpec(31, "boot_integrity_services", (
        Byte (0x04, "checksum", hexa=True),
        DWord(0x08, "entry_point_16", hexa=True),
        DWord(0x0C, "entry_point_32", hexa=True),
    )),
    StructureSpec(32, "system_boot", (
        Byte (0x0A, "status", BOOT_STATUS),
    )),
    memory_error(33, "memory_error_64", QWord, 0x8000000000000000),
    StructureSpec(34, "management_device", (
        Str  (0x04, "description"),
        Byte (0x05, "type", MANAGEMENT_DEVICE_TYPE),
        DWord(0x06, "address", hexa=True),
        Byte (0x0A, "address_type", MANAGEMENT_ADDRESS_TYPE),
    )),
    StructureSpec(35, "management_device_component", (
        Str  (0x04, "description"),
        Handle(0x05, "management_device_handle"),
        Handle(0x07, "component_handle"),
        Handle(0x09, "threshold_handle", HANDLE_NONE),
    )),
    StructureSpec(36, "management_device_threshold", (
        Word (0x04, "lower_non_critical", special={0x8000: NOT_AVAILABLE}),
        Word (0x06, "upper_non_critical", special={0x8000: NOT_AVAILABLE}),
        Word (0x08, "lower_critical", special={0x8000: NOT_AVAILABLE}),
        Word (0x0A, "upper_critical", special={0x8000: NOT_AVAILABLE}),
        Word (0x0C, "lower_non_recoverable", special={0x8000: NOT_AVAILABLE}),
        Word (0x0E, "upper_non_recoverable", special={0x8000: NOT_AVAILABLE}),
    )),
    StructureSpec(37, "memory_channel", (
        Byte (0x04, "type", MEMORY_CHANNEL_TYPE),
        Byte (0x05, "maximal_load"),
        Byte (0x06, "_device_count"),
    )),
    StructureSpec(38, "ipmi_device", (
        Byte (0x04, "interface_type", IPMI_INTERFACE_TYPE),
        Byte (0x05, "_revision"),
        Byte (0x06, "_i2c_target_address"),
        Byte (0x07, "nv_storage_device_address", special={0xFF: NONE}, hexa=True),
        QWord(0x08, "_base_address"),
        Byte (0x10, "_modifier"),
        Byte (0x11, "interrupt_number", special={0: UNSPECIFIED}),
    )),
    StructureSpec(39, "power_supply", (
        Byte (0x04, "power_unit_group"),
        Str  (0x05, "location"),
        Str  (0x06, "name"),
        Str  (0x07, "manufacturer"),
        Str  (0x08, "serial_number"),
        Str  (0x09, "asset_tag"),
        Str  (0x0A, "model_part_number"),
        Str  (0x0B, "revision"),
        Word (0x0C, "max_power_capacity", special={0x8000: UNKNOWN}, unit="W"),
        Bit  (0x0E, "hot_replaceable", 0, size=2),
        Bit  (0x0E, "present", 1, size=2),
        Bit  (0x0E, "unplugged", 2, size=2),
        Word (0x0E, "input_voltage_range_switching", POWER_SUPPLY_RANGE_SWITCHING, lo=3, hi=6),
        Word (0x0E, "status", STATUS, lo=7, hi=9),
        Word (0x0E, "type", POWER_SUPPLY_TYPE, lo=10, hi=13),
        Handle(0x10, "input_voltage_probe_handle", HANDLE_NONE),
        Handle(0x12, "cooling_device_handle", HANDLE_NONE),
        Handle(0x14, "input_current_probe_handle", HANDLE_NONE),
    )),
    StructureSpec(40, "additional_information", (
        Byte (0x04, "_count"),
    )),
    StructureSpec(41, "onboard_device", (
        Str  (0x04, "reference_designation"),
        Byte (0x05, "type", ONBOARD_DEVICE_TYPE, lo=0, hi=6),
        Byte (0x05, "status", ENABLED, lo=7, hi=7),
        Byte (0x06, "type_instance"),
        Word (0x07, "_segment"),
        Byte (0x09, "_bus"),
        Byte (0x0A, "_devfn"),
    )),
    StructureSpec(42, "host_interface", (
        Byte (0x04, "interface_type", HOST_INTERFACE_TYPE),
        Byte (0x05, "_specific_data_length"),
    )),
    StructureSpec(43, "tpm_device", (
        Bytes(0x04, "_vendor_id", 4),
        Byte (0x08, "_major"),
        Byte (0x09, "_minor"),
        DWord(0x0A, "firmware_version_1", hexa=True),
        DWord(0x0E, "firmware_version_2", hexa=True),
        Str  (0x12, "description"),
        QWord(0x13, "characteristics", TPM_CHARACTERISTICS),
        DWord(0x1B, "oem_defined", hexa=True),
    )),
    StructureSpec(44, "processor_additional_information", (
        Handle(0x04, "referenced_handle"),
    )),
    StructureSpec(45, "firmware_inventory", (
        Str  (0x04, "component_name"),
        Str  (0x05, "version"),
        Byte (0x06, "version_format", FIRMWARE_VERSION_FORMAT),
        Str  (0x07, "firmware_id"),
        Byte (0x08, "firmware_id_format", FIRMWARE_ID_FORMAT),
        Str  (0x09, "release_date"),
        Str  (0x0A, "manufacturer"),
        Str  (0x0B, "lowest_supported_version"),
        QWord(0x0C, "_image_size"),
        Word (0x14, "characteristics", FIRMWARE_CHARACTERISTICS_INVENTORY),
        Byte (0x16, "state", FIRMWARE_STATE),
        Byte (0x17, "_component_count"),
    )),
    StructureSpec(46, "string_property", (
        Word (0x04, "property_id", STRING_PROPERTY_ID),
        Str  (0x06, "value"),
        Handle(0x07, "parent_handle"),
    )),
)

SPEC_BY_TYPE = dict((s.type_code, s) for s in STRUCTURES) # type: Dict[int, StructureSpec]

# {{{ Fields after variable length arrays, offsets as if array was empty
ENCLOSURE_TAIL = (
    Str  (0x15, "sku_number"),
)

MEMORY_CONTROLLER_TAIL = (
    Byte (0x0F, "enabled_error_correcting_capabilities", ERROR_CORRECTING_CAPABILITY),
)

SLOT_TAIL = (
    Byte (0x13, "information"),
    Byte (0x14, "physical_width", SLOT_WIDTH),
    Word (0x15, "pitch", special=ZERO_UNKNOWN, unit="mm", divisor=100),
    Byte (0x17, "height", SLOT_HEIGHT),
)
# }}}
