"""The sixteen identification bytes at the start of an ELF32 file."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Union

from .lon import LonObject, LonString
from .types import ElfVersion

__all__ = ["IdentIndex", "FileClass", "DataEncoding", "Identification"]


class IdentIndex(IntEnum):
    """Positions of the fields inside the identification bytes."""

    MAGIC_NUMBER_0 = 0
    MAGIC_NUMBER_1 = 1
    MAGIC_NUMBER_2 = 2
    MAGIC_NUMBER_3 = 3
    FILE_CLASS = 4
    DATA_ENCODING = 5
    FILE_VERSION = 6
    START_OF_PADDING_BYTES = 7
    SIZE_OF_IDENTIFICATION = 16


class FileClass(IntEnum):
    NONE = 0
    CLASS_32 = 1
    CLASS_64 = 2

    def to_lon(self) -> LonString:
        return LonString(_FILE_CLASS_NAMES[self])


_FILE_CLASS_NAMES = {
    FileClass.NONE: "None",
    FileClass.CLASS_32: "32-bit",
    FileClass.CLASS_64: "64-bit",
}


class DataEncoding(IntEnum):
    NONE = 0
    LITTLE_ENDIAN_ORDER = 1
    BIG_ENDIAN_ORDER = 2

    def to_lon(self) -> LonString:
        return LonString(_DATA_ENCODING_NAMES[self])


_DATA_ENCODING_NAMES = {
    DataEncoding.NONE: "None",
    DataEncoding.LITTLE_ENDIAN_ORDER: "Little-endian",
    DataEncoding.BIG_ENDIAN_ORDER: "Big-endian",
}

_MAGIC = (0x7F, 0x45, 0x4C, 0x46)
_MAGIC_INDEXES = (
    IdentIndex.MAGIC_NUMBER_0,
    IdentIndex.MAGIC_NUMBER_1,
    IdentIndex.MAGIC_NUMBER_2,
    IdentIndex.MAGIC_NUMBER_3,
)


@dataclass(frozen=True)
class Identification:
    """The raw identification bytes of an ELF file."""

    raw: bytes

    SIZE: ClassVar[int] = int(IdentIndex.SIZE_OF_IDENTIFICATION)

    def __post_init__(self) -> None:
        raw = bytes(self.raw)
        if len(raw) != self.SIZE:
            raise ValueError(f"identification must be {self.SIZE} bytes, got {len(raw)}")
        object.__setattr__(self, "raw", raw)

    @classmethod
    def from_bytes(cls, data: bytes) -> Identification:
        """Validate and take the first sixteen bytes of data.

        Only 32-bit, little-endian files of the current version are accepted.
        """
        if len(data) < cls.SIZE:
            raise ValueError(f"identification needs {cls.SIZE} bytes, got {len(data)}")
        for position, expected in enumerate(_MAGIC):
            if data[position] != expected:
                raise ValueError(f"invalid magic_number_{position}")
        if data[IdentIndex.FILE_CLASS] != FileClass.CLASS_32:
            raise ValueError("cannot parse this file_class")
        if data[IdentIndex.DATA_ENCODING] != DataEncoding.LITTLE_ENDIAN_ORDER:
            raise ValueError("cannot parse this data_encoding")
        if data[IdentIndex.FILE_VERSION] != ElfVersion.CURRENT:
            raise ValueError("invalid elf version")
        return cls(bytes(data[: cls.SIZE]))

    def get(self, index: Union[IdentIndex, int]) -> int:
        """Return the byte at index."""
        position = int(index)
        if not 0 <= position < self.SIZE:
            raise IndexError(f"identification index {position} out of range")
        return self.raw[position]

    @property
    def file_class(self) -> FileClass:
        return FileClass(self.raw[IdentIndex.FILE_CLASS])

    @property
    def data_encoding(self) -> DataEncoding:
        return DataEncoding(self.raw[IdentIndex.DATA_ENCODING])

    @property
    def elf_version(self) -> ElfVersion:
        return ElfVersion(self.raw[IdentIndex.FILE_VERSION])

    def to_lon(self) -> LonObject:
        magic = "".join(f"{self.get(index):x} " for index in _MAGIC_INDEXES)
        lon = LonObject()
        lon.set_key("Magic", LonString(magic))
        lon.set_key("File class", self.file_class.to_lon())
        lon.set_key("Data encoding", self.data_encoding.to_lon())
        lon.set_key("File version", self.elf_version.to_lon())
        return lon