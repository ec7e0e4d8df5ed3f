"""The ELF32 file header."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Type, TypeVar, Union

from .binfile import BinaryFile
from .identification import Identification
from .lon import LonObject, LonString, lonify
from .types import ElfVersion, hex_lon

__all__ = ["ObjectType", "MachineType", "Header"]


class ObjectType(IntEnum):
    NONE = 0
    RELOCATABLE = 1
    EXECUTABLE = 2
    SHARED_OBJECT = 3
    CORE = 4
    LO_PROCESSOR_SPECIFIC = 5
    HI_PROCESSOR_SPECIFIC = 6

    def to_lon(self) -> LonString:
        return LonString(_OBJECT_TYPE_NAMES[self])


_OBJECT_TYPE_NAMES = {
    ObjectType.NONE: "None",
    ObjectType.RELOCATABLE: "Relocatable",
    ObjectType.EXECUTABLE: "Executable",
    ObjectType.SHARED_OBJECT: "Shared object",
    ObjectType.CORE: "Core",
    ObjectType.LO_PROCESSOR_SPECIFIC: "Low (processor specific)",
    ObjectType.HI_PROCESSOR_SPECIFIC: "High (processor specific)",
}


class MachineType(IntEnum):
    NONE = 0
    M32 = 1
    SPARC = 2
    INTEL_386 = 3
    MOTOROLA_68K = 4
    MOTOROLA_88K = 5
    INTEL_80860 = 7
    MIPS_RS3000_BIG_ENDIAN = 8
    MIPS_RS4000_BIG_ENDIAN = 10
    RESERVED_11 = 11
    RESERVED_12 = 12
    RESERVED_13 = 13
    RESERVED_14 = 14
    RESERVED_15 = 15
    RESERVED_16 = 16

    def to_lon(self) -> LonString:
        return LonString(_MACHINE_NAMES[self])


_MACHINE_NAMES = {
    MachineType.NONE: "None",
    MachineType.M32: "M32",
    MachineType.SPARC: "SPARC",
    MachineType.INTEL_386: "Intel 386",
    MachineType.MOTOROLA_68K: "MOTOROLA_68K",
    MachineType.MOTOROLA_88K: "MOTOROLA_88K",
    MachineType.INTEL_80860: "INTEL_80860",
    MachineType.MIPS_RS3000_BIG_ENDIAN: "IPS_RS3000_BIG_ENDIAN",
    MachineType.MIPS_RS4000_BIG_ENDIAN: "MIPS_RS4000_BIG_ENDIAN",
    MachineType.RESERVED_11: "RESERVED_11",
    MachineType.RESERVED_12: "RESERVED_12",
    MachineType.RESERVED_13: "RESERVED_13",
    MachineType.RESERVED_14: "RESERVED_14",
    MachineType.RESERVED_15: "RESERVED_15",
    MachineType.RESERVED_16: "RESERVED_16",
}

_LAYOUT = struct.Struct("<16sHHIIIIIHHHHHH")

_E = TypeVar("_E", bound=IntEnum)


def _enum_or_int(enum: Type[_E], value: int) -> Union[_E, int]:
    try:
        return enum(value)
    except ValueError:
        return value


def _enum_lon(value: Union[IntEnum, int], enum: type, what: str) -> LonString:
    if not isinstance(value, enum):
        raise ValueError(f"invalid {what}")
    return value.to_lon()


@dataclass(frozen=True)
class Header:
    """The decoded ELF32 header.

    Enumerated fields hold the raw integer when the file carries a value
    outside the known set; rendering such a header fails.
    """

    identification: Identification
    object_type: Union[ObjectType, int]
    machine: Union[MachineType, int]
    version: Union[ElfVersion, int]
    entry_point: int
    program_header_offset: int
    section_header_offset: int
    flags: int
    elf_header_size: int
    program_header_entry_size: int
    program_header_number_of_entries: int
    section_header_entry_size: int
    section_header_number_of_entries: int
    section_name_string_table_index: int

    SIZE: ClassVar[int] = _LAYOUT.size

    @classmethod
    def from_bytes(cls, data: bytes) -> Header:
        """Decode a header from the start of data."""
        identification = Identification.from_bytes(data)
        if len(data) < cls.SIZE:
            raise ValueError(f"header needs {cls.SIZE} bytes, got {len(data)}")
        (
            _,
            object_type,
            machine,
            version,
            entry_point,
            program_header_offset,
            section_header_offset,
            flags,
            elf_header_size,
            program_header_entry_size,
            program_header_number_of_entries,
            section_header_entry_size,
            section_header_number_of_entries,
            section_name_string_table_index,
        ) = _LAYOUT.unpack_from(data)
        return cls(
            identification=identification,
            object_type=_enum_or_int(ObjectType, object_type),
            machine=_enum_or_int(MachineType, machine),
            version=_enum_or_int(ElfVersion, version),
            entry_point=entry_point,
            program_header_offset=program_header_offset,
            section_header_offset=section_header_offset,
            flags=flags,
            elf_header_size=elf_header_size,
            program_header_entry_size=program_header_entry_size,
            program_header_number_of_entries=program_header_number_of_entries,
            section_header_entry_size=section_header_entry_size,
            section_header_number_of_entries=section_header_number_of_entries,
            section_name_string_table_index=section_name_string_table_index,
        )

    @classmethod
    def read(cls, f: BinaryFile) -> Header:
        """Read the header from the start of an open file."""
        return cls.from_bytes(f.read(cls.SIZE, 0))

    def to_lon(self) -> LonObject:
        lon = LonObject()
        lon.set_key("Identification", self.identification.to_lon())
        lon.set_key("Object type", _enum_lon(self.object_type, ObjectType, "object_type"))
        lon.set_key("Machine", _enum_lon(self.machine, MachineType, "machine_type"))
        lon.set_key("Version", _enum_lon(self.version, ElfVersion, "elf_version"))
        lon.set_key("Entry point", hex_lon(self.entry_point))
        lon.set_key("Program-header offset", hex_lon(self.program_header_offset))
        lon.set_key("Section-header offset", hex_lon(self.section_header_offset))
        lon.set_key("ELF header size", lonify(self.elf_header_size))
        lon.set_key("Program-header entry size", lonify(self.program_header_entry_size))
        lon.set_key(
            "Program-header number of entries",
            lonify(self.program_header_number_of_entries),
        )
        lon.set_key("Section-header entry size", lonify(self.section_header_entry_size))
        lon.set_key(
            "Section-header number of entries",
            lonify(self.section_header_number_of_entries),
        )
        lon.set_key(
            "Section-name string-table index",
            lonify(str(self.section_name_string_table_index)),
        )
        return lon