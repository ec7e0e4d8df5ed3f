"""ELF32 section headers and the table that holds them."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Iterable, Iterator, Union, overload

from .binfile import BinaryFile
from .types import SectionType

__all__ = ["SectionAttribute", "SectionHeader", "SectionHeaderTable"]

_LAYOUT = struct.Struct("<10I")


class SectionAttribute(IntEnum):
    WRITEABLE = 1
    ALLOC = 2
    EXECUTABLE = 3
    PROCESSOR_SPECIFIC_SEMANTICS_MASK = 4


def _section_type(value: int) -> Union[SectionType, int]:
    try:
        return SectionType(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class SectionHeader:
    """One decoded section header.

    ``section_type`` holds the raw integer when the file carries a value
    outside the known set.
    """

    name_index: int = 0
    section_type: Union[SectionType, int] = SectionType.NULL_TYPE
    flags: int = 0
    address: int = 0
    offset: int = 0
    size: int = 0
    link: int = 0
    info: int = 0
    address_alignment: int = 0
    entry_size: int = 0

    SIZE: ClassVar[int] = _LAYOUT.size

    @classmethod
    def _from_fields(cls, fields: tuple) -> SectionHeader:
        name_index, section_type, *rest = fields
        return cls(name_index, _section_type(section_type), *rest)

    @classmethod
    def from_bytes(cls, data: bytes) -> SectionHeader:
        """Decode a section header from the start of data."""
        if len(data) < cls.SIZE:
            raise ValueError(f"section header needs {cls.SIZE} bytes, got {len(data)}")
        return cls._from_fields(_LAYOUT.unpack_from(data))

    def has_flag(self, attribute: Union[SectionAttribute, int]) -> bool:
        """True when every bit of attribute is set in the flags."""
        value = int(attribute)
        return (self.flags & value) == value


class SectionHeaderTable:
    """The ordered section headers of a file."""

    def __init__(self, headers: Iterable[SectionHeader] = ()) -> None:
        self._headers: tuple[SectionHeader, ...] = tuple(headers)

    @classmethod
    def read(cls, f: BinaryFile, offset: int, count: int) -> SectionHeaderTable:
        """Read count consecutive section headers starting at offset."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count == 0:
            return cls()
        data = f.read(count * SectionHeader.SIZE, offset)
        return cls(SectionHeader._from_fields(fields) for fields in _LAYOUT.iter_unpack(data))

    def __len__(self) -> int:
        return len(self._headers)

    def __iter__(self) -> Iterator[SectionHeader]:
        return iter(self._headers)

    @overload
    def __getitem__(self, index: int) -> SectionHeader: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[SectionHeader, ...]: ...

    def __getitem__(self, index):
        return self._headers[index]

    def __repr__(self) -> str:
        return f"SectionHeaderTable({list(self._headers)!r})"