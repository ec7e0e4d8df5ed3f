"""String tables and symbol tables held in section contents."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar, Iterator, Union

from .types import SymbolBinding, SymbolType

__all__ = ["StringTable", "SymbolTableEntry", "SymbolTable"]

_SYMBOL = struct.Struct("<IIIBBH")


class StringTable:
    """The contents of a string-table section: NUL-terminated strings."""

    def __init__(self, data: bytes = b"") -> None:
        self.data = bytes(data)

    def at(self, offset: int) -> str:
        """Return the string that starts at offset."""
        if not 0 <= offset < len(self.data):
            raise IndexError(f"string table offset {offset} out of range")
        end = self.data.find(b"\0", offset)
        if end == -1:
            raise ValueError(f"string at offset {offset} is not terminated")
        return self.data[offset:end].decode("utf-8", errors="replace")

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class SymbolTableEntry:
    """One entry of a symbol table."""

    name_index: int
    value: int
    size: int
    info: int
    other: int
    section_header_index: int

    SIZE: ClassVar[int] = _SYMBOL.size

    @classmethod
    def from_bytes(cls, data: bytes) -> SymbolTableEntry:
        if len(data) < cls.SIZE:
            raise ValueError(f"symbol entry needs {cls.SIZE} bytes, got {len(data)}")
        return cls(*_SYMBOL.unpack_from(data))

    @property
    def binding(self) -> Union[SymbolBinding, int]:
        raw = self.info >> 4
        try:
            return SymbolBinding(raw)
        except ValueError:
            return raw

    @property
    def symbol_type(self) -> Union[SymbolType, int]:
        raw = self.info & 0xF
        try:
            return SymbolType(raw)
        except ValueError:
            return raw


class SymbolTable:
    """The contents of a symbol-table section."""

    def __init__(self, data: bytes = b"") -> None:
        if len(data) % SymbolTableEntry.SIZE:
            raise ValueError(
                f"symbol table size {len(data)} is not a multiple of {SymbolTableEntry.SIZE}"
            )
        self._entries: tuple[SymbolTableEntry, ...] = tuple(
            SymbolTableEntry(*fields) for fields in _SYMBOL.iter_unpack(bytes(data))
        )

    def at(self, index: int) -> SymbolTableEntry:
        """Return the entry at index."""
        if not 0 <= index < len(self._entries):
            raise IndexError(f"symbol index {index} out of range")
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SymbolTableEntry]:
        return iter(self._entries)