"""ELF32 scalar types, enumerations and relocation entries."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

from .lon import LonString

__all__ = [
    "hex_lon",
    "ElfVersion",
    "SectionType",
    "SpecialSectionIndex",
    "SymbolType",
    "SymbolBinding",
    "Relocation",
    "RelocationWithAddend",
]


def hex_lon(value: int) -> LonString:
    """Render an address, offset or half word as a hexadecimal LON string."""
    return LonString(f"0x{value:x}")


class ElfVersion(IntEnum):
    NONE = 0
    CURRENT = 1

    def to_lon(self) -> LonString:
        return LonString(_ELF_VERSION_NAMES[self])


_ELF_VERSION_NAMES = {
    ElfVersion.NONE: "None",
    ElfVersion.CURRENT: "Current",
}


class SectionType(IntEnum):
    NULL_TYPE = 0
    PROGRAM_BITS = 1
    SYMBOL_TABLE = 2
    STRING_TABLE = 3
    RELOCATION_WITH_ADDENDS = 4
    HASH = 5
    DYNAMIC = 6
    NOTE = 7
    NO_BITS = 8
    RELOCATION = 9
    LIB = 10
    DYNAMIC_SYMBOL = 11
    LO_PROC = 0x70000000
    HI_PROC = 0x7FFFFFFF
    LO_USER = 0x80000000
    HI_USER = 0xFFFFFFFF


class SpecialSectionIndex(IntEnum):
    UNDEFINED = 0
    RESERVED_LOW = 0xFF00
    PROCESSOR_SPECIFIC_SEMANTICS_LOW = 0xFF00
    PROCESSOR_SPECIFIC_SEMANTICS_HIGH = 0xFF1F
    ABSOLUTE = 0xFFF1
    COMMON = 0xFFF2
    RESERVED_HIGH = 0xFFFF


class SymbolType(IntEnum):
    NO_TYPE = 0
    OBJECT = 1
    FUNCTION = 2
    SECTION = 3
    FILE = 4
    PROCESSOR_SPECIFIC_SEMANTICS_LOW = 13
    PROCESSOR_SPECIFIC_SEMANTICS_HIGH = 15


class SymbolBinding(IntEnum):
    LOCAL = 0
    GLOBAL = 1
    WEAK = 2
    PROCESSOR_SPECIFIC_SEMANTICS_LOW = 13
    PROCESSOR_SPECIFIC_SEMANTICS_HIGH = 15


_RELOCATION = struct.Struct("<II")
_RELOCATION_WITH_ADDEND = struct.Struct("<IIi")


def _unpack(layout: struct.Struct, data: bytes, what: str) -> tuple:
    if len(data) < layout.size:
        raise ValueError(f"{what} needs {layout.size} bytes, got {len(data)}")
    return layout.unpack_from(data)


@dataclass(frozen=True)
class Relocation:
    """A relocation entry without an addend."""

    offset: int
    info: int

    SIZE = _RELOCATION.size

    @classmethod
    def from_bytes(cls, data: bytes) -> Relocation:
        offset, info = _unpack(_RELOCATION, data, "relocation")
        return cls(offset, info)


@dataclass(frozen=True)
class RelocationWithAddend:
    """A relocation entry carrying an explicit signed addend."""

    offset: int
    info: int
    addend: int

    SIZE = _RELOCATION_WITH_ADDEND.size

    @classmethod
    def from_bytes(cls, data: bytes) -> RelocationWithAddend:
        offset, info, addend = _unpack(_RELOCATION_WITH_ADDEND, data, "relocation")
        return cls(offset, info, addend)