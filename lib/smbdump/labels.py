""" Label tables for enumerated SMBIOS values (DSP0134 3.8).

    Dense tables are indexed from code 1 unless base says otherwise. """

from .enums import DenseEnum, SparseEnum, RangeEnum, FlagTable

# {{{ Common
STRUCTURE_NAMES = (
    "Platform Firmware Information",
    "System Information",
    "Baseboard Information",
    "System Enclosure",
    "Processor Information",
    "Memory Controller Information",
    "Memory Module Information",
    "Cache Information",
    "Port Connector Information",
    "System Slots",
    "On Board Devices Information",
    "OEM Strings",
    "System Configuration Options",
    "Firmware Language Information",
    "Group Associations",
    "System Event Log",
    "Physical Memory Array",
    "Memory Device",
    "32-bit Memory Error Information",
    "Memory Array Mapped Address",
    "Memory Device Mapped Address",
    "Built-in Pointing Device",
    "Portable Battery",
    "System Reset",
    "Hardware Security",
    "System Power Controls",
    "Voltage Probe",
    "Cooling Device",
    "Temperature Probe",
    "Electrical Current Probe",
    "Out-of-band Remote Access",
    "Boot Integrity Services",
    "System Boot Information",
    "64-bit Memory Error Information",
    "Management Device",
    "Management Device Component",
    "Management Device Threshold Data",
    "Memory Channel",
    "IPMI Device Information",
    "System Power Supply",
    "Additional Information",
    "On Board Devices Extended Information",
    "Management Controller Host Interface",
    "TPM Device",
    "Processor Additional Information",
    "Firmware Inventory Information",
    "String Property",
)

STRUCTURE_TYPE = RangeEnum((
    (0, len(STRUCTURE_NAMES) - 1, DenseEnum(STRUCTURE_NAMES, base=0)),
    (126, 126, "Inactive"),
    (127, 127, "End of Table"),
    (128, 255, "OEM-specific"),
), fallback="Unknown")

ENABLED = DenseEnum(("Disabled", "Enabled"), base=0)

STATUS = DenseEnum((
    "Other",
    "Unknown",
    "OK",
    "Non-critical",
    "Critical",
    "Non-recoverable",
))

BASEBOARD_TYPE = DenseEnum((
    "Unknown",
    "Other",
    "Server Blade",
    "Connectivity Switch",
    "System Management Module",
    "Processor Module",
    "I/O Module",
    "Memory Module",
    "Daughter Board",
    "Motherboard",
    "Processor/Memory Module",
    "Processor/IO Module",
    "Interconnect Board",
))

MEMORY_MODULE_TYPES = FlagTable((
    "Other",
    "Unknown",
    "Standard",
    "Fast Page Mode",
    "EDO",
    "Parity",
    "ECC",
    "SIMM",
    "DIMM",
    "Burst EDO",
    "SDRAM",
))

ONBOARD_DEVICE_TYPE = DenseEnum((
    "Other",
    "Unknown",
    "Video",
    "SCSI Controller",
    "Ethernet",
    "Token Ring",
    "Sound",
    "PATA Controller",
    "SATA Controller",
    "SAS Controller",
    "Wireless LAN",
    "Bluetooth",
    "WWAN",
    "eMMC",
    "NVMe Controller",
    "UFS Controller",
))
# }}}

# {{{ Platform firmware (type 0)
FIRMWARE_CHARACTERISTICS = FlagTable((
    "Unknown",
    "Characteristics not supported",
    "ISA is supported",
    "MCA is supported",
    "EISA is supported",
    "PCI is supported",
    "PC Card (PCMCIA) is supported",
    "Plug and Play is supported",
    "APM is supported",
    "Firmware is upgradeable",
    "Firmware shadowing is allowed",
    "VL-VESA is supported",
    "ESCD support is available",
    "Boot from CD is supported",
    "Selectable boot is supported",
    "Firmware ROM is socketed",
    "Boot from PC Card (PCMCIA) is supported",
    "EDD is supported",
    "Japanese floppy for NEC 9800 1.2 MB is supported (int 13h)",
    "Japanese floppy for Toshiba 1.2 MB is supported (int 13h)",
    "5.25\"/360 kB floppy services are supported (int 13h)",
    "5.25\"/1.2 MB floppy services are supported (int 13h)",
    "3.5\"/720 kB floppy services are supported (int 13h)",
    "3.5\"/2.88 MB floppy services are supported (int 13h)",
    "Print screen service is supported (int 5h)",
    "8042 keyboard services are supported (int 9h)",
    "Serial services are supported (int 14h)",
    "Printer services are supported (int 17h)",
    "CGA/mono video services are supported (int 10h)",
    "NEC PC-98",
), first_bit=2)

FIRMWARE_CHARACTERISTICS_EXT1 = FlagTable((
    "ACPI is supported",
    "USB legacy is supported",
    "AGP is supported",
    "I2O boot is supported",
    "LS-120 boot is supported",
    "ATAPI Zip drive boot is supported",
    "IEEE 1394 boot is supported",
    "Smart battery is supported",
))

FIRMWARE_CHARACTERISTICS_EXT2 = FlagTable((
    "BIOS boot specification is supported",
    "Function key-initiated network boot is supported",
    "Targeted content distribution is supported",
    "UEFI is supported",
    "System is a virtual machine",
    "Manufacturing mode is supported",
    "Manufacturing mode is enabled",
))

EXTENDED_ROM_UNIT = DenseEnum(("MiB", "GiB"), base=0)
# }}}

# {{{ System (type 1), enclosure (type 3)
WAKE_UP_TYPE = DenseEnum((
    "Other",
    "Unknown",
    "APM Timer",
    "Modem Ring",
    "LAN Remote",
    "Power Switch",
    "PCI PME#",
    "AC Power Restored",
))

BASEBOARD_FEATURES = FlagTable((
    "Board is a hosting board",
    "Board requires at least one daughter board",
    "Board is removable",
    "Board is replaceable",
    "Board is hot swappable",
))

CHASSIS_TYPE = DenseEnum((
    "Other",
    "Unknown",
    "Desktop",
    "Low Profile Desktop",
    "Pizza Box",
    "Mini Tower",
    "Tower",
    "Portable",
    "Laptop",
    "Notebook",
    "Hand Held",
    "Docking Station",
    "All in One",
    "Sub Notebook",
    "Space-saving",
    "Lunch Box",
    "Main Server Chassis",
    "Expansion Chassis",
    "Sub Chassis",
    "Bus Expansion Chassis",
    "Peripheral Chassis",
    "RAID Chassis",
    "Rack Mount Chassis",
    "Sealed-case PC",
    "Multi-system",
    "Compact PCI",
    "Advanced TCA",
    "Blade",
    "Blade Enclosure",
    "Tablet",
    "Convertible",
    "Detachable",
    "IoT Gateway",
    "Embedded PC",
    "Mini PC",
    "Stick PC",
))

CHASSIS_STATE = DenseEnum((
    "Other",
    "Unknown",
    "Safe",
    "Warning",
    "Critical",
    "Non-recoverable",
))

CHASSIS_SECURITY_STATUS = DenseEnum((
    "Other",
    "Unknown",
    "None",
    "External Interface Locked Out",
    "External Interface Enabled",
))
# }}}

# {{{ Processor (type 4)
PROCESSOR_TYPE = DenseEnum((
    "Other",
    "Unknown",
    "Central Processor",
    "Math Processor",
    "DSP Processor",
    "Video Processor",
))

# 0xBE is resolved by manufacturer, 0xFE means "see family 2"
PROCESSOR_FAMILY = SparseEnum((
    (0x01, "Other"),
    (0x02, "Unknown"),
    (0x03, "8086"),
    (0x04, "80286"),
    (0x05, "i386"),
    (0x06, "i486"),
    (0x07, "8087"),
    (0x08, "80287"),
    (0x09, "80387"),
    (0x0A, "80487"),
    (0x0B, "Pentium"),
    (0x0C, "Pentium Pro"),
    (0x0D, "Pentium II"),
    (0x0E, "Pentium MMX"),
    (0x0F, "Celeron"),
    (0x10, "Pentium II Xeon"),
    (0x11, "Pentium III"),
    (0x12, "M1"),
    (0x13, "M2"),
    (0x14, "Celeron M"),
    (0x15, "Pentium 4 HT"),
    (0x16, "Intel"),
    (0x18, "Duron"),
    (0x19, "K5"),
    (0x1A, "K6"),
    (0x1B, "K6-2"),
    (0x1C, "K6-3"),
    (0x1D, "Athlon"),
    (0x1E, "AMD29000"),
    (0x1F, "K6-2+"),
    (0x20, "Power PC"),
    (0x21, "Power PC 601"),
    (0x22, "Power PC 603"),
    (0x23, "Power PC 603+"),
    (0x24, "Power PC 604"),
    (0x25, "Power PC 620"),
    (0x26, "Power PC x704"),
    (0x27, "Power PC 750"),
    (0x28, "Core Duo"),
    (0x29, "Core Duo Mobile"),
    (0x2A, "Core Solo Mobile"),
    (0x2B, "Atom"),
    (0x2C, "Core M"),
    (0x2D, "Core m3"),
    (0x2E, "Core m5"),
    (0x2F, "Core m7"),
    (0x30, "Alpha"),
    (0x31, "Alpha 21064"),
    (0x32, "Alpha 21066"),
    (0x33, "Alpha 21164"),
    (0x34, "Alpha 21164PC"),
    (0x35, "Alpha 21164a"),
    (0x36, "Alpha 21264"),
    (0x37, "Alpha 21364"),
    (0x38, "Turion II Ultra Dual-Core Mobile M"),
    (0x39, "Turion II Dual-Core Mobile M"),
    (0x3A, "Athlon II Dual-Core M"),
    (0x3B, "Opteron 6100"),
    (0x3C, "Opteron 4100"),
    (0x3D, "Opteron 6200"),
    (0x3E, "Opteron 4200"),
    (0x3F, "FX"),
    (0x40, "MIPS"),
    (0x41, "MIPS R4000"),
    (0x42, "MIPS R4200"),
    (0x43, "MIPS R4400"),
    (0x44, "MIPS R4600"),
    (0x45, "MIPS R10000"),
    (0x46, "C-Series"),
    (0x47, "E-Series"),
    (0x48, "A-Series"),
    (0x49, "G-Series"),
    (0x4A, "Z-Series"),
    (0x4B, "R-Series"),
    (0x4C, "Opteron 4300"),
    (0x4D, "Opteron 6300"),
    (0x4E, "Opteron 3300"),
    (0x4F, "FirePro"),
    (0x50, "SPARC"),
    (0x51, "SuperSPARC"),
    (0x52, "MicroSPARC II"),
    (0x53, "MicroSPARC IIep"),
    (0x54, "UltraSPARC"),
    (0x55, "UltraSPARC II"),
    (0x56, "UltraSPARC IIi"),
    (0x57, "UltraSPARC III"),
    (0x58, "UltraSPARC IIIi"),
    (0x60, "68040"),
    (0x61, "68xxx"),
    (0x62, "68000"),
    (0x63, "68010"),
    (0x64, "68020"),
    (0x65, "68030"),
    (0x66, "Athlon X4"),
    (0x67, "Opteron X1000"),
    (0x68, "Opteron X2000"),
    (0x69, "Opteron A-Series"),
    (0x6A, "Opteron X3000"),
    (0x6B, "Zen"),
    (0x70, "Hobbit"),
    (0x78, "Crusoe TM5000"),
    (0x79, "Crusoe TM3000"),
    (0x7A, "Efficeon TM8000"),
    (0x80, "Weitek"),
    (0x82, "Itanium"),
    (0x83, "Athlon 64"),
    (0x84, "Opteron"),
    (0x85, "Sempron"),
    (0x86, "Turion 64"),
    (0x87, "Dual-Core Opteron"),
    (0x88, "Athlon 64 X2"),
    (0x89, "Turion 64 X2"),
    (0x8A, "Quad-Core Opteron"),
    (0x8B, "Third-Generation Opteron"),
    (0x8C, "Phenom FX"),
    (0x8D, "Phenom X4"),
    (0x8E, "Phenom X2"),
    (0x8F, "Athlon X2"),
    (0x90, "PA-RISC"),
    (0x91, "PA-RISC 8500"),
    (0x92, "PA-RISC 8000"),
    (0x93, "PA-RISC 7300LC"),
    (0x94, "PA-RISC 7200"),
    (0x95, "PA-RISC 7100LC"),
    (0x96, "PA-RISC 7100"),
    (0xA0, "V30"),
    (0xA1, "Quad-Core Xeon 3200"),
    (0xA2, "Dual-Core Xeon 3000"),
    (0xA3, "Quad-Core Xeon 5300"),
    (0xA4, "Dual-Core Xeon 5100"),
    (0xA5, "Dual-Core Xeon 5000"),
    (0xA6, "Dual-Core Xeon LV"),
    (0xA7, "Dual-Core Xeon ULV"),
    (0xA8, "Dual-Core Xeon 7100"),
    (0xA9, "Quad-Core Xeon 5400"),
    (0xAA, "Quad-Core Xeon"),
    (0xAB, "Dual-Core Xeon 5200"),
    (0xAC, "Dual-Core Xeon 7200"),
    (0xAD, "Quad-Core Xeon 7300"),
    (0xAE, "Quad-Core Xeon 7400"),
    (0xAF, "Multi-Core Xeon 7400"),
    (0xB0, "Pentium III Xeon"),
    (0xB1, "Pentium III Speedstep"),
    (0xB2, "Pentium 4"),
    (0xB3, "Xeon"),
    (0xB4, "AS400"),
    (0xB5, "Xeon MP"),
    (0xB6, "Athlon XP"),
    (0xB7, "Athlon MP"),
    (0xB8, "Itanium 2"),
    (0xB9, "Pentium M"),
    (0xBA, "Celeron D"),
    (0xBB, "Pentium D"),
    (0xBC, "Pentium EE"),
    (0xBD, "Core Solo"),
    (0xBF, "Core 2 Duo"),
    (0xC0, "Core 2 Solo"),
    (0xC1, "Core 2 Extreme"),
    (0xC2, "Core 2 Quad"),
    (0xC3, "Core 2 Extreme Mobile"),
    (0xC4, "Core 2 Duo Mobile"),
    (0xC5, "Core 2 Solo Mobile"),
    (0xC6, "Core i7"),
    (0xC7, "Dual-Core Celeron"),
    (0xC8, "IBM390"),
    (0xC9, "G4"),
    (0xCA, "G5"),
    (0xCB, "ESA/390 G6"),
    (0xCC, "z/Architecture"),
    (0xCD, "Core i5"),
    (0xCE, "Core i3"),
    (0xCF, "Core i9"),
    (0xD0, "Xeon D"),
    (0xD2, "C7-M"),
    (0xD3, "C7-D"),
    (0xD4, "C7"),
    (0xD5, "Eden"),
    (0xD6, "Multi-Core Xeon"),
    (0xD7, "Dual-Core Xeon 3xxx"),
    (0xD8, "Quad-Core Xeon 3xxx"),
    (0xD9, "Nano"),
    (0xDA, "Dual-Core Xeon 5xxx"),
    (0xDB, "Quad-Core Xeon 5xxx"),
    (0xDD, "Dual-Core Xeon 7xxx"),
    (0xDE, "Quad-Core Xeon 7xxx"),
    (0xDF, "Multi-Core Xeon 7xxx"),
    (0xE0, "Multi-Core Xeon 3400"),
    (0xE4, "Opteron 3000"),
    (0xE5, "Sempron II"),
    (0xE6, "Embedded Opteron Quad-Core"),
    (0xE7, "Phenom Triple-Core"),
    (0xE8, "Turion Ultra Dual-Core Mobile"),
    (0xE9, "Turion Dual-Core Mobile"),
    (0xEA, "Athlon Dual-Core"),
    (0xEB, "Sempron SI"),
    (0xEC, "Phenom II"),
    (0xED, "Athlon II"),
    (0xEE, "Six-Core Opteron"),
    (0xEF, "Sempron M"),
    (0xFA, "i860"),
    (0xFB, "i960"),
    (0x100, "ARMv7"),
    (0x101, "ARMv8"),
    (0x102, "ARMv9"),
    (0x104, "SH-3"),
    (0x105, "SH-4"),
    (0x118, "ARM"),
    (0x119, "StrongARM"),
    (0x12C, "6x86"),
    (0x12D, "MediaGX"),
    (0x12E, "MII"),
    (0x140, "WinChip"),
    (0x15E, "DSP"),
    (0x1F4, "Video Processor"),
    (0x200, "RV32"),
    (0x201, "RV64"),
    (0x202, "RV128"),
    (0x258, "LoongArch"),
    (0x259, "Loongson 1"),
    (0x25A, "Loongson 2"),
    (0x25B, "Loongson 3"),
    (0x25C, "Loongson 2K"),
    (0x25D, "Loongson 3A"),
    (0x25E, "Loongson 3B"),
    (0x25F, "Loongson 3C"),
    (0x260, "Loongson 3D"),
    (0x261, "Loongson 3E"),
    (0x262, "Dual-Core Loongson 2K 2xxx"),
    (0x26C, "Quad-Core Loongson 3A 5xxx"),
    (0x26D, "Multi-Core Loongson 3A 5xxx"),
    (0x26E, "Quad-Core Loongson 3B 5xxx"),
    (0x26F, "Multi-Core Loongson 3B 5xxx"),
    (0x270, "Multi-Core Loongson 3C 5xxx"),
    (0x271, "Multi-Core Loongson 3D 5xxx"),
    (0x300, "Core 3"),
    (0x301, "Core 5"),
    (0x302, "Core 7"),
    (0x303, "Core 9"),
    (0x304, "Core Ultra 3"),
    (0x305, "Core Ultra 5"),
    (0x306, "Core Ultra 7"),
    (0x307, "Core Ultra 9"),
))

PROCESSOR_VOLTAGE = FlagTable((
    "5.0 V",
    "3.3 V",
    "2.9 V",
))

PROCESSOR_STATUS = SparseEnum((
    (0, "Unknown"),
    (1, "Enabled"),
    (2, "Disabled By User"),
    (3, "Disabled By Firmware"),
    (4, "Idle"),
    (7, "Other"),
))

PROCESSOR_UPGRADE = DenseEnum((
    "Other",
    "Unknown",
    "Daughter Board",
    "ZIF Socket",
    "Replaceable Piggy Back",
    "None",
    "LIF Socket",
    "Slot 1",
    "Slot 2",
    "370-pin Socket",
    "Slot A",
    "Slot M",
    "Socket 423",
    "Socket A (Socket 462)",
    "Socket 478",
    "Socket 754",
    "Socket 940",
    "Socket 939",
    "Socket mPGA604",
    "Socket LGA771",
    "Socket LGA775",
    "Socket S1",
    "Socket AM2",
    "Socket F (1207)",
    "Socket LGA1366",
    "Socket G34",
    "Socket AM3",
    "Socket C32",
    "Socket LGA1156",
    "Socket LGA1567",
    "Socket PGA988A",
    "Socket BGA1288",
    "Socket rPGA988B",
    "Socket BGA1023",
    "Socket BGA1224",
    "Socket LGA1155",
    "Socket LGA1356",
    "Socket LGA2011",
    "Socket FS1",
    "Socket FS2",
    "Socket FM1",
    "Socket FM2",
    "Socket LGA2011-3",
    "Socket LGA1356-3",
    "Socket LGA1150",
    "Socket BGA1168",
    "Socket BGA1234",
    "Socket BGA1364",
    "Socket AM4",
    "Socket LGA1151",
    "Socket BGA1356",
    "Socket BGA1440",
    "Socket BGA1515",
    "Socket LGA3647-1",
    "Socket SP3",
    "Socket SP3r2",
    "Socket LGA2066",
    "Socket BGA1392",
    "Socket BGA1510",
    "Socket BGA1528",
    "Socket LGA4189",
    "Socket LGA1200",
    "Socket LGA4677",
    "Socket LGA1700",
    "Socket BGA1744",
    "Socket BGA1781",
    "Socket BGA1211",
    "Socket BGA2422",
    "Socket LGA1211",
    "Socket LGA2422",
    "Socket LGA5773",
    "Socket BGA5773",
    "Socket AM5",
    "Socket SP5",
    "Socket SP6",
    "Socket BGA883",
    "Socket BGA1190",
    "Socket BGA4129",
    "Socket LGA4710",
    "Socket LGA7529",
    "Socket BGA1964",
    "Socket BGA1792",
    "Socket BGA2049",
    "Socket BGA2551",
    "Socket LGA1851",
    "Socket BGA2114",
    "Socket BGA2833",
))

PROCESSOR_CHARACTERISTICS = FlagTable((
    "Unknown",
    "64-bit capable",
    "Multi-Core",
    "Hardware Thread",
    "Execute Protection",
    "Enhanced Virtualization",
    "Power/Performance Control",
    "128-bit Capable",
    "Arm64 SoC ID",
), first_bit=1)

PROCESSOR_ARCHITECTURE = DenseEnum((
    "IA32 (x86)",
    "x64 (x86-64, Intel64, AMD64, EM64T)",
    "Intel Itanium architecture",
    "32-bit ARM (Aarch32)",
    "64-bit ARM (Aarch64)",
    "32-bit RISC-V (RV32)",
    "64-bit RISC-V (RV64)",
    "128-bit RISC-V (RV128)",
    "32-bit LoongArch (LoongArch32)",
    "64-bit LoongArch (LoongArch64)",
))
# }}}

# {{{ Memory controller and module (types 5, 6)
ERROR_DETECTING_METHOD = DenseEnum((
    "Other",
    "Unknown",
    "None",
    "8-bit Parity",
    "32-bit ECC",
    "64-bit ECC",
    "128-bit ECC",
    "CRC",
))

ERROR_CORRECTING_CAPABILITY = FlagTable((
    "Other",
    "Unknown",
    "None",
    "Single-bit Error Correcting",
    "Double-bit Error Correcting",
    "Error Scrubbing",
))

INTERLEAVE = DenseEnum((
    "Other",
    "Unknown",
    "One-way Interleave",
    "Two-way Interleave",
    "Four-way Interleave",
    "Eight-way Interleave",
    "Sixteen-way Interleave",
))

MEMORY_SPEEDS = FlagTable((
    "Other",
    "Unknown",
    "70 ns",
    "60 ns",
    "50 ns",
))

MODULE_VOLTAGE = FlagTable((
    "5.0 V",
    "3.3 V",
    "2.9 V",
))

MODULE_ERROR_STATUS = FlagTable((
    "Uncorrectable Errors",
    "Correctable Errors",
))
# }}}

# {{{ Cache (type 7)
CACHE_LOCATION = DenseEnum((
    "Internal",
    "External",
    None,
    "Unknown",
), base=0)

CACHE_MODE = DenseEnum((
    "Write Through",
    "Write Back",
    "Varies With Memory Address",
    "Unknown",
), base=0)

SRAM_TYPES = FlagTable((
    "Other",
    "Unknown",
    "Non-Burst",
    "Burst",
    "Pipeline Burst",
    "Synchronous",
    "Asynchronous",
))

CACHE_ECC_TYPE = DenseEnum((
    "Other",
    "Unknown",
    "None",
    "Parity",
    "Single-bit ECC",
    "Multi-bit ECC",
))

SYSTEM_CACHE_TYPE = DenseEnum((
    "Other",
    "Unknown",
    "Instruction",
    "Data",
    "Unified",
))

CACHE_ASSOCIATIVITY = DenseEnum((
    "Other",
    "Unknown",
    "Direct Mapped",
    "2-way Set-associative",
    "4-way Set-associative",
    "Fully Associative",
    "8-way Set-associative",
    "16-way Set-associative",
    "12-way Set-associative",
    "24-way Set-associative",
    "32-way Set-associative",
    "48-way Set-associative",
    "64-way Set-associative",
    "20-way Set-associative",
))
# }}}

# {{{ Port connector (type 8)
_CONNECTOR_TYPES = (
    "None",
    "Centronics",
    "Mini Centronics",
    "Proprietary",
    "DB-25 male",
    "DB-25 female",
    "DB-15 male",
    "DB-15 female",
    "DB-9 male",
    "DB-9 female",
    "RJ-11",
    "RJ-45",
    "50 Pin MiniSCSI",
    "Mini DIN",
    "Micro DIN",
    "PS/2",
    "Infrared",
    "HP-HIL",
    "Access Bus (USB)",
    "SSA SCSI",
    "Circular DIN-8 male",
    "Circular DIN-8 female",
    "On Board IDE",
    "On Board Floppy",
    "9 Pin Dual Inline (pin 10 cut)",
    "25 Pin Dual Inline (pin 26 cut)",
    "50 Pin Dual Inline",
    "68 Pin Dual Inline",
    "On Board Sound Input From CD-ROM",
    "Mini Centronics Type-14",
    "Mini Centronics Type-26",
    "Mini Jack (headphones)",
    "BNC",
    "IEEE 1394",
    "SAS/SATA Plug Receptacle",
    "USB Type-C Receptacle",
)

CONNECTOR_TYPE = SparseEnum(
    tuple(enumerate(_CONNECTOR_TYPES)) + (
    (0xA0, "PC-98"),
    (0xA1, "PC-98 Hireso"),
    (0xA2, "PC-H98"),
    (0xA3, "PC-98 Note"),
    (0xA4, "PC-98 Full"),
    (0xFF, "Other"),
))

_PORT_TYPES = (
    "None",
    "Parallel Port XT/AT Compatible",
    "Parallel Port PS/2",
    "Parallel Port ECP",
    "Parallel Port EPP",
    "Parallel Port ECP/EPP",
    "Serial Port XT/AT Compatible",
    "Serial Port 16450 Compatible",
    "Serial Port 16550 Compatible",
    "Serial Port 16550A Compatible",
    "SCSI Port",
    "MIDI Port",
    "Joystick Port",
    "Keyboard Port",
    "Mouse Port",
    "SSA SCSI",
    "USB",
    "Firewire (IEEE P1394)",
    "PCMCIA Type I",
    "PCMCIA Type II",
    "PCMCIA Type III",
    "Cardbus",
    "Access Bus Port",
    "SCSI II",
    "SCSI Wide",
    "PC-98",
    "PC-98 Hireso",
    "PC-H98",
    "Video Port",
    "Audio Port",
    "Modem Port",
    "Network Port",
    "SATA",
    "SAS",
    "MFDP (Multi-Function Display Port)",
    "Thunderbolt",
)

PORT_TYPE = SparseEnum(
    tuple(enumerate(_PORT_TYPES)) + (
    (0xA0, "8251 Compatible"),
    (0xA1, "8251 FIFO Compatible"),
    (0xFF, "Other"),
))
# }}}

# {{{ System slots (type 9)
SLOT_TYPE = SparseEnum((
    (0x01, "Other"),
    (0x02, "Unknown"),
    (0x03, "ISA"),
    (0x04, "MCA"),
    (0x05, "EISA"),
    (0x06, "PCI"),
    (0x07, "PC Card (PCMCIA)"),
    (0x08, "VLB"),
    (0x09, "Proprietary"),
    (0x0A, "Processor Card"),
    (0x0B, "Proprietary Memory Card"),
    (0x0C, "I/O Riser Card"),
    (0x0D, "NuBus"),
    (0x0E, "PCI-66"),
    (0x0F, "AGP"),
    (0x10, "AGP 2x"),
    (0x11, "AGP 4x"),
    (0x12, "PCI-X"),
    (0x13, "AGP 8x"),
    (0x14, "M.2 Socket 1-DP"),
    (0x15, "M.2 Socket 1-SD"),
    (0x16, "M.2 Socket 2"),
    (0x17, "M.2 Socket 3"),
    (0x18, "MXM Type I"),
    (0x19, "MXM Type II"),
    (0x1A, "MXM Type III"),
    (0x1B, "MXM Type III-HE"),
    (0x1C, "MXM Type IV"),
    (0x1D, "MXM 3.0 Type A"),
    (0x1E, "MXM 3.0 Type B"),
    (0x1F, "PCI Express 2 SFF-8639 (U.2)"),
    (0x20, "PCI Express 3 SFF-8639 (U.2)"),
    (0x21, "PCI Express Mini 52-pin with bottom-side keep-outs"),
    (0x22, "PCI Express Mini 52-pin without bottom-side keep-outs"),
    (0x23, "PCI Express Mini 76-pin"),
    (0x24, "PCI Express 4 SFF-8639 (U.2)"),
    (0x25, "PCI Express 5 SFF-8639 (U.2)"),
    (0x26, "OCP NIC 3.0 Small Form Factor (SFF)"),
    (0x27, "OCP NIC 3.0 Large Form Factor (LFF)"),
    (0x28, "OCP NIC Prior to 3.0"),
    (0x30, "CXL FLexbus 1.0"),
    (0xA0, "PC-98/C20"),
    (0xA1, "PC-98/C24"),
    (0xA2, "PC-98/E"),
    (0xA3, "PC-98/Local Bus"),
    (0xA4, "PC-98/Card"),
    (0xA5, "PCI Express"),
    (0xA6, "PCI Express x1"),
    (0xA7, "PCI Express x2"),
    (0xA8, "PCI Express x4"),
    (0xA9, "PCI Express x8"),
    (0xAA, "PCI Express x16"),
    (0xAB, "PCI Express 2"),
    (0xAC, "PCI Express 2 x1"),
    (0xAD, "PCI Express 2 x2"),
    (0xAE, "PCI Express 2 x4"),
    (0xAF, "PCI Express 2 x8"),
    (0xB0, "PCI Express 2 x16"),
    (0xB1, "PCI Express 3"),
    (0xB2, "PCI Express 3 x1"),
    (0xB3, "PCI Express 3 x2"),
    (0xB4, "PCI Express 3 x4"),
    (0xB5, "PCI Express 3 x8"),
    (0xB6, "PCI Express 3 x16"),
    (0xB7, "PCI Express 4"),
    (0xB8, "PCI Express 4 x1"),
    (0xB9, "PCI Express 4 x2"),
    (0xBA, "PCI Express 4 x4"),
    (0xBB, "PCI Express 4 x8"),
    (0xBC, "PCI Express 4 x16"),
    (0xBD, "PCI Express 5"),
    (0xBE, "PCI Express 5 x1"),
    (0xBF, "PCI Express 5 x2"),
    (0xC0, "PCI Express 5 x4"),
    (0xC1, "PCI Express 5 x8"),
    (0xC2, "PCI Express 5 x16"),
    (0xC3, "PCI Express 6+"),
    (0xC4, "EDSFF E1"),
    (0xC5, "EDSFF E3"),
))

SLOT_WIDTH = DenseEnum((
    "Other",
    "Unknown",
    "8 bit",
    "16 bit",
    "32 bit",
    "64 bit",
    "128 bit",
    "x1",
    "x2",
    "x4",
    "x8",
    "x12",
    "x16",
    "x32",
))

SLOT_USAGE = DenseEnum((
    "Other",
    "Unknown",
    "Available",
    "In Use",
    "Unavailable",
))

SLOT_LENGTH = DenseEnum((
    "Other",
    "Unknown",
    "Short",
    "Long",
    "2.5\" drive form factor",
    "3.5\" drive form factor",
))

SLOT_CHARACTERISTICS1 = FlagTable((
    "Unknown",
    "5.0 V is provided",
    "3.3 V is provided",
    "Opening is shared",
    "PC Card-16 is supported",
    "Cardbus is supported",
    "Zoom Video is supported",
    "Modem ring resume is supported",
))

SLOT_CHARACTERISTICS2 = FlagTable((
    "PME signal is supported",
    "Hot-plug devices are supported",
    "SMBus signal is supported",
    "PCIe slot bifurcation is supported",
    "Async/surprise removal is supported",
    "Flexbus slot, CXL 1.0 capable",
    "Flexbus slot, CXL 2.0 capable",
    "Flexbus slot, CXL 3.0 capable",
))

SLOT_HEIGHT = DenseEnum((
    "Not applicable",
    "Other",
    "Unknown",
    "Full height",
    "Low-profile",
), base=0)
# }}}

# {{{ Event log (type 15)
EVENT_LOG_ACCESS_METHOD = RangeEnum((
    (0, 4, DenseEnum((
        "Indexed I/O, one 8-bit index port, one 8-bit data port",
        "Indexed I/O, two 8-bit index ports, one 8-bit data port",
        "Indexed I/O, one 16-bit index port, one 8-bit data port",
        "Memory-mapped physical 32-bit address",
        "General-purpose non-volatile data functions",
    ), base=0)),
    (0x80, 0xFF, "OEM-specific"),
))

EVENT_LOG_STATUS = FlagTable((
    "Valid",
    "Full",
))

EVENT_LOG_HEADER_FORMAT = RangeEnum((
    (0, 0, "No Header"),
    (1, 1, "Type 1"),
    (0x80, 0xFF, "OEM-specific"),
))

EVENT_LOG_TYPE = RangeEnum((
    (0x01, 0x17, DenseEnum((
        "Single-bit ECC memory error",
        "Multi-bit ECC memory error",
        "Parity memory error",
        "Bus timeout",
        "I/O channel block",
        "Software NMI",
        "POST memory resize",
        "POST error",
        "PCI parity error",
        "PCI system error",
        "CPU failure",
        "EISA failsafe timer timeout",
        "Correctable memory log disabled",
        "Logging disabled",
        None,
        "System limit exceeded",
        "Asynchronous hardware timer expired",
        "System configuration information",
        "Hard disk information",
        "System reconfigured",
        "Uncorrectable CPU-complex error",
        "Log area reset/cleared",
        "System boot",
    ))),
    (0x80, 0xFE, "OEM-specific"),
    (0xFF, 0xFF, "End of log"),
), fallback="Unused")

EVENT_LOG_DATA_FORMAT = RangeEnum((
    (0, 6, DenseEnum((
        "None",
        "Handle",
        "Multiple-event",
        "Multiple-event handle",
        "POST results bitmap",
        "System management",
        "Multiple-event system management",
    ), base=0)),
    (0x80, 0xFF, "OEM-specific"),
), fallback="Unused")
# }}}

# {{{ Memory array and device (types 16, 17)
MEMORY_ARRAY_LOCATION = SparseEnum((
    (0x01, "Other"),
    (0x02, "Unknown"),
    (0x03, "System Board Or Motherboard"),
    (0x04, "ISA Add-on Card"),
    (0x05, "EISA Add-on Card"),
    (0x06, "PCI Add-on Card"),
    (0x07, "MCA Add-on Card"),
    (0x08, "PCMCIA Add-on Card"),
    (0x09, "Proprietary Add-on Card"),
    (0x0A, "NuBus"),
    (0xA0, "PC-98/C20 Add-on Card"),
    (0xA1, "PC-98/C24 Add-on Card"),
    (0xA2, "PC-98/E Add-on Card"),
    (0xA3, "PC-98/Local Bus Add-on Card"),
    (0xA4, "CXL Add-on Card"),
))

MEMORY_ARRAY_USE = DenseEnum((
    "Other",
    "Unknown",
    "System Memory",
    "Video Memory",
    "Flash Memory",
    "Non-volatile RAM",
    "Cache Memory",
))

MEMORY_ARRAY_ECC = DenseEnum((
    "Other",
    "Unknown",
    "None",
    "Parity",
    "Single-bit ECC",
    "Multi-bit ECC",
    "CRC",
))

MEMORY_FORM_FACTOR = DenseEnum((
    "Other",
    "Unknown",
    "SIMM",
    "SIP",
    "Chip",
    "DIP",
    "ZIP",
    "Proprietary Card",
    "DIMM",
    "TSOP",
    "Row Of Chips",
    "RIMM",
    "SODIMM",
    "SRIMM",
    "FB-DIMM",
    "Die",
    "CAMM",
))

MEMORY_DEVICE_TYPE = DenseEnum((
    "Other",
    "Unknown",
    "DRAM",
    "EDRAM",
    "VRAM",
    "SRAM",
    "RAM",
    "ROM",
    "Flash",
    "EEPROM",
    "FEPROM",
    "EPROM",
    "CDRAM",
    "3DRAM",
    "SDRAM",
    "SGRAM",
    "RDRAM",
    "DDR",
    "DDR2",
    "DDR2 FB-DIMM",
    None,
    None,
    None,
    "DDR3",
    "FBD2",
    "DDR4",
    "LPDDR",
    "LPDDR2",
    "LPDDR3",
    "LPDDR4",
    "Logical non-volatile device",
    "HBM",
    "HBM2",
    "DDR5",
    "LPDDR5",
    "HBM3",
))

MEMORY_TYPE_DETAIL = FlagTable((
    "Other",
    "Unknown",
    "Fast-paged",
    "Static Column",
    "Pseudo-static",
    "RAMBus",
    "Synchronous",
    "CMOS",
    "EDO",
    "Window DRAM",
    "Cache DRAM",
    "Non-Volatile",
    "Registered (Buffered)",
    "Unbuffered (Unregistered)",
    "LRDIMM",
), first_bit=1)

MEMORY_TECHNOLOGY = DenseEnum((
    "Other",
    "Unknown",
    "DRAM",
    "NVDIMM-N",
    "NVDIMM-F",
    "NVDIMM-P",
    "Intel Optane persistent memory",
    "MRDIMM",
))

MEMORY_OPERATING_MODES = FlagTable((
    "Other",
    "Unknown",
    "Volatile memory",
    "Byte-accessible persistent memory",
    "Block-accessible persistent memory",
), first_bit=1)
# }}}

# {{{ Memory errors (types 18, 33)
MEMORY_ERROR_TYPE = DenseEnum((
    "Other",
    "Unknown",
    "OK",
    "Bad Read",
    "Parity Error",
    "Single-bit Error",
    "Double-bit Error",
    "Multi-bit Error",
    "Nibble Error",
    "Checksum Error",
    "CRC Error",
    "Corrected Single-bit Error",
    "Corrected Error",
    "Uncorrectable Error",
))

MEMORY_ERROR_GRANULARITY = DenseEnum((
    "Other",
    "Unknown",
    "Device Level",
    "Memory Partition Level",
))

MEMORY_ERROR_OPERATION = DenseEnum((
    "Other",
    "Unknown",
    "Read",
    "Write",
    "Partial Write",
))
# }}}

# {{{ Pointing device, battery, reset, security (types 21-24)
POINTING_DEVICE_TYPE = DenseEnum((
    "Other",
    "Unknown",
    "Mouse",
    "Track Ball",
    "Track Point",
    "Glide Point",
    "Touch Pad",
    "Touch Screen",
    "Optical Sensor",
))

POINTING_DEVICE_INTERFACE = SparseEnum((
    (0x01, "Other"),
    (0x02, "Unknown"),
    (0x03, "Serial"),
    (0x04, "PS/2"),
    (0x05, "Infrared"),
    (0x06, "HP-HIL"),
    (0x07, "Bus Mouse"),
    (0x08, "ADB (Apple Desktop Bus)"),
    (0xA0, "Bus Mouse DB-9"),
    (0xA1, "Bus Mouse Micro DIN"),
    (0xA2, "USB"),
    (0xA3, "I2C"),
    (0xA4, "SPI"),
))

BATTERY_CHEMISTRY = DenseEnum((
    "Other",
    "Unknown",
    "Lead Acid",
    "Nickel Cadmium",
    "Nickel Metal Hydride",
    "Lithium Ion",
    "Zinc Air",
    "Lithium Polymer",
))

BOOT_OPTION = DenseEnum((
    "Operating System",
    "System Utilities",
    "Do Not Reboot",
))

HARDWARE_SECURITY_STATUS = DenseEnum((
    "Disabled",
    "Enabled",
    "Not Implemented",
    "Unknown",
), base=0)
# }}}

# {{{ Probes and cooling (types 26-29)
PROBE_LOCATION = DenseEnum((
    "Other",
    "Unknown",
    "Processor",
    "Disk",
    "Peripheral Bay",
    "System Management Module",
    "Motherboard",
    "Memory Module",
    "Processor Module",
    "Power Unit",
    "Add-in Card",
    "Front Panel Board",
    "Back Panel Board",
    "Power System Board",
    "Drive Back Plane",
))

COOLING_DEVICE_TYPE = SparseEnum((
    (0x01, "Other"),
    (0x02, "Unknown"),
    (0x03, "Fan"),
    (0x04, "Centrifugal Blower"),
    (0x05, "Chip Fan"),
    (0x06, "Cabinet Fan"),
    (0x07, "Power Supply Fan"),
    (0x08, "Heat Pipe"),
    (0x09, "Integrated Refrigeration"),
    (0x10, "Active Cooling"),
    (0x11, "Passive Cooling"),
))
# }}}

# {{{ Boot status (type 32)
BOOT_STATUS = RangeEnum((
    (0, 8, DenseEnum((
        "No errors detected",
        "No bootable media",
        "Operating system failed to load",
        "Firmware-detected hardware failure",
        "Operating system-detected hardware failure",
        "User-requested boot",
        "System security violation",
        "Previously-requested image",
        "System watchdog timer expired",
    ), base=0)),
    (128, 191, "OEM-specific"),
    (192, 255, "Product-specific"),
))
# }}}

# {{{ Management devices (types 34-37)
MANAGEMENT_DEVICE_TYPE = DenseEnum((
    "Other",
    "Unknown",
    "LM75",
    "LM78",
    "LM79",
    "LM80",
    "LM81",
    "ADM9240",
    "DS1780",
    "MAX1617",
    "GL518SM",
    "W83781D",
    "HT82H791",
))

MANAGEMENT_ADDRESS_TYPE = DenseEnum((
    "Other",
    "Unknown",
    "I/O Port",
    "Memory",
    "SMBus",
))

MEMORY_CHANNEL_TYPE = DenseEnum((
    "Other",
    "Unknown",
    "RamBus",
    "SyncLink",
))
# }}}

# {{{ IPMI and power supply (types 38, 39)
IPMI_INTERFACE_TYPE = DenseEnum((
    "Unknown",
    "KCS (Keyboard Control Style)",
    "SMIC (Server Management Interface Chip)",
    "BT (Block Transfer)",
    "SSIF (SMBus System Interface)",
), base=0)

IPMI_REGISTER_SPACING = DenseEnum((
    "Successive Byte Boundaries",
    "32-bit Boundaries",
    "16-byte Boundaries",
), base=0)

POWER_SUPPLY_RANGE_SWITCHING = DenseEnum((
    "Other",
    "Unknown",
    "Manual",
    "Auto-switch",
    "Wide Range",
    "N/A",
))

POWER_SUPPLY_TYPE = DenseEnum((
    "Other",
    "Unknown",
    "Linear",
    "Switching",
    "Battery",
    "UPS",
    "Converter",
    "Regulator",
))
# }}}

# {{{ Host interface, TPM, firmware inventory, string property (types 42-46)
HOST_INTERFACE_TYPE = SparseEnum((
    (0x02, "KCS: Keyboard Controller Style"),
    (0x03, "8250 UART Register Compatible"),
    (0x04, "16450 UART Register Compatible"),
    (0x05, "16550/16550A UART Register Compatible"),
    (0x06, "16650/16650A UART Register Compatible"),
    (0x07, "16750/16750A UART Register Compatible"),
    (0x08, "16850/16850A UART Register Compatible"),
    (0x09, "I2C/SMBus"),
    (0x0A, "I3C"),
    (0x0B, "PCIe VDM"),
    (0x0C, "MMBI"),
    (0x0D, "PCC"),
    (0x0E, "UCIe"),
    (0x0F, "USB"),
    (0x40, "Network Host Interface"),
    (0xF0, "OEM"),
))

HOST_INTERFACE_PROTOCOL = SparseEnum((
    (0x02, "IPMI"),
    (0x03, "MCTP"),
    (0x04, "Redfish over IP"),
    (0xF0, "OEM"),
))

TPM_CHARACTERISTICS = FlagTable((
    "TPM Device characteristics not supported",
    "Family configurable via firmware update",
    "Family configurable via platform software support",
    "Family configurable via OEM proprietary mechanism",
), first_bit=2)

FIRMWARE_VERSION_FORMAT = RangeEnum((
    (0, 3, DenseEnum((
        "Free-form",
        "MAJOR.MINOR",
        "32-bit hexadecimal",
        "64-bit hexadecimal",
    ), base=0)),
    (0x80, 0xFF, "OEM-specific"),
))

FIRMWARE_ID_FORMAT = RangeEnum((
    (0, 1, DenseEnum((
        "Free-form",
        "UEFI ESRT FwClass GUID",
    ), base=0)),
    (0x80, 0xFF, "OEM-specific"),
))

FIRMWARE_CHARACTERISTICS_INVENTORY = FlagTable((
    "Updatable",
    "Write-Protect",
))

FIRMWARE_STATE = DenseEnum((
    "Other",
    "Unknown",
    "Disabled",
    "Enabled",
    "Absent",
    "Standby Offline",
    "Standby Spare",
    "Unavailable Offline",
))

STRING_PROPERTY_ID = RangeEnum((
    (1, 1, "UEFI device path"),
    (0x8000, 0xBFFF, "BIOS vendor defined"),
    (0xC000, 0xFFFF, "OEM defined"),
))
# }}}
