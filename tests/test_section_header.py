import struct

import pytest

from elfcrafter.binfile import BinaryFile
from elfcrafter.section_header import SectionAttribute, SectionHeader, SectionHeaderTable
from elfcrafter.types import SectionType


def pack(*fields):
    return struct.pack("<10I", *fields)


def test_size_is_forty_bytes():
    assert SectionHeader.SIZE == 40
    header = SectionHeader.from_bytes(bytes(SectionHeader.SIZE))
    assert header.section_type is SectionType.NULL_TYPE
    assert header.entry_size == 0


def test_from_bytes_decodes_fields_in_order():
    header = SectionHeader.from_bytes(pack(1, 3, 2, 0x1000, 0x200, 0x30, 4, 5, 8, 16))
    assert header.name_index == 1
    assert header.section_type is SectionType.STRING_TABLE
    assert header.flags == 2
    assert header.address == 0x1000
    assert header.offset == 0x200
    assert header.size == 0x30
    assert header.link == 4
    assert header.info == 5
    assert header.address_alignment == 8
    assert header.entry_size == 16


def test_unknown_section_type_kept_as_int():
    header = SectionHeader.from_bytes(pack(0, 0x42, 0, 0, 0, 0, 0, 0, 0, 0))
    assert header.section_type == 0x42
    assert not isinstance(header.section_type, SectionType)


def test_from_bytes_too_short():
    with pytest.raises(ValueError):
        SectionHeader.from_bytes(bytes(39))


def test_default_header_is_null():
    header = SectionHeader()
    assert header.section_type is SectionType.NULL_TYPE
    assert header.flags == 0


def test_has_flag():
    writable = SectionHeader(flags=1)
    assert writable.has_flag(SectionAttribute.WRITEABLE)
    assert not writable.has_flag(SectionAttribute.ALLOC)
    alloc = SectionHeader(flags=2)
    assert alloc.has_flag(SectionAttribute.ALLOC)
    assert not alloc.has_flag(SectionAttribute.WRITEABLE)


def test_table_read_from_offset(tmp_path):
    path = tmp_path / "table.bin"
    entries = [
        (0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
        (1, 1, 6, 0x8000, 0x100, 0x20, 0, 0, 4, 0),
        (7, 2, 0, 0, 0x120, 0x40, 3, 1, 4, 16),
    ]
    prefix = b"\xaa" * 12
    path.write_bytes(prefix + b"".join(pack(*entry) for entry in entries))
    with BinaryFile(path) as f:
        table = SectionHeaderTable.read(f, len(prefix), len(entries))
    assert len(table) == len(entries)
    assert [h.name_index for h in table] == [0, 1, 7]
    assert table[1].address == 0x8000
    assert table[2].section_type is SectionType.SYMBOL_TABLE
    assert table[-1].entry_size == 16
    assert len(table[0:2]) == 2


def test_table_read_zero_entries(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    with BinaryFile(path) as f:
        table = SectionHeaderTable.read(f, 0, 0)
    assert len(table) == 0
    assert list(table) == []


def test_table_read_truncated(tmp_path):
    path = tmp_path / "short.bin"
    path.write_bytes(pack(*range(10)))
    with BinaryFile(path) as f:
        with pytest.raises(EOFError):
            SectionHeaderTable.read(f, 0, 2)


def test_table_index_out_of_range():
    table = SectionHeaderTable([SectionHeader()])
    assert len(table) == 1
    assert table[0].section_type is SectionType.NULL_TYPE
    with pytest.raises(IndexError):
        table.__getitem__(1)