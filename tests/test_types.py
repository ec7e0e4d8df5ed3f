import struct

import pytest

from elfcrafter.types import (
    ElfVersion,
    Relocation,
    RelocationWithAddend,
    SectionType,
    SpecialSectionIndex,
    SymbolBinding,
    SymbolType,
    hex_lon,
)


def test_hex_lon_prefix_and_roundtrip():
    for value in (0, 7, 4096, 0xFFFFFFFF):
        text = hex_lon(value).value
        assert text.startswith("0x")
        assert int(text, 16) == value


def test_hex_lon_lowercase():
    assert hex_lon(255).value == "0xff"


def test_elf_version_names():
    assert ElfVersion.NONE.to_lon().value == "None"
    assert ElfVersion.CURRENT.to_lon().value == "Current"


def test_elf_version_invalid():
    with pytest.raises(ValueError):
        ElfVersion(7)


def test_section_type_ranges():
    assert SectionType(0x70000000) is SectionType.LO_PROC
    assert SectionType(0xFFFFFFFF) is SectionType.HI_USER
    assert SectionType.LO_PROC < SectionType.HI_PROC < SectionType.LO_USER


def test_special_section_alias():
    assert SpecialSectionIndex.PROCESSOR_SPECIFIC_SEMANTICS_LOW is SpecialSectionIndex.RESERVED_LOW
    assert SpecialSectionIndex(0xFFF1) is SpecialSectionIndex.ABSOLUTE


def test_symbol_processor_ranges():
    assert SymbolType(13) is SymbolType.PROCESSOR_SPECIFIC_SEMANTICS_LOW
    assert SymbolBinding(15) is SymbolBinding.PROCESSOR_SPECIFIC_SEMANTICS_HIGH


def test_relocation_from_bytes():
    data = struct.pack("<II", 0x1000, 0x0502)
    rel = Relocation.from_bytes(data)
    assert rel == Relocation(0x1000, 0x0502)


def test_relocation_with_addend_negative():
    data = struct.pack("<IIi", 0x2000, 0x0101, -4)
    rel = RelocationWithAddend.from_bytes(data)
    assert rel.offset == 0x2000
    assert rel.info == 0x0101
    assert rel.addend == -4


def test_relocation_sizes():
    assert Relocation.SIZE == 8
    assert RelocationWithAddend.SIZE == 12
    assert Relocation.from_bytes(bytes(Relocation.SIZE)) == Relocation(0, 0)
    rel = RelocationWithAddend.from_bytes(bytes(RelocationWithAddend.SIZE))
    assert (rel.offset, rel.info, rel.addend) == (0, 0, 0)


def test_relocation_too_short():
    with pytest.raises(ValueError):
        Relocation.from_bytes(b"\x00" * 3)
    with pytest.raises(ValueError):
        RelocationWithAddend.from_bytes(b"\x00" * 8)