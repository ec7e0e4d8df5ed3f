# elfcrafter

Read 32-bit little-endian ELF files and show what their headers hold.

`elfcrafter` checks and decodes the sixteen identification bytes, the file
header and the section header table of an ELF32 file. It can print the file
header as an indented tree. Keys in the tree are sorted, and `|` guides mark
the nesting.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
elfcrafter path/to/program
elfcrafter --indent 2 path/to/program
```

This prints the file header:

- the identification: the magic bytes, the file class, the data encoding
  and the file version
- the object type, the machine and the version
- the entry point and the program-header and section-header offsets, in
  hexadecimal
- the ELF header size
- the entry sizes and entry counts of the program-header and section-header
  tables
- the section-name string-table index

`--indent` sets the indent width. The default is 4, and the width must be at
least 1.

The input must be a 32-bit, little-endian ELF file of the current version.
The command also fails on a file that is too short, or whose object type,
machine or version is outside the known values. In each of these cases it
prints `error: ...` to standard error and exits with status 1.

## Library use

```python
from elfcrafter.elf import Elf32
from elfcrafter.binfile import BinaryFile
from elfcrafter.header import Header
from elfcrafter.section_header import SectionAttribute, SectionHeaderTable

with Elf32("path/to/program") as elf:
    print(elf.describe(4))
    for section_header in elf.section_headers:
        print(section_header.section_type, section_header.size)

with BinaryFile("path/to/program") as f:
    header = Header.read(f)
    table = SectionHeaderTable.read(
        f,
        header.section_header_offset,
        header.section_header_number_of_entries,
    )
    executable = [h for h in table if h.has_flag(SectionAttribute.EXECUTABLE)]
```

The modules:

- `elfcrafter.elf`: `Elf32` opens a file and loads its `header` and
  `section_headers`. `describe(indent_width)` renders the header. `main` is
  the command-line entry point.
- `elfcrafter.binfile`: `BinaryFile` opens a file for reading, or for writing
  (the file is created if it is missing). It reads exactly the number of bytes
  asked for, and raises `EOFError` if the file ends first. Reads and writes
  can start at a given offset.
- `elfcrafter.identification`: `Identification`, `IdentIndex`, `FileClass`
  and `DataEncoding`.
- `elfcrafter.header`: `Header`, `ObjectType` and `MachineType`. If a field
  holds an unknown value, the header keeps the raw integer.
- `elfcrafter.section_header`: `SectionHeader`, `SectionHeaderTable` and
  `SectionAttribute`.
- `elfcrafter.sections`: `StringTable` looks up NUL-terminated strings by
  offset. `SymbolTable` and `SymbolTableEntry` decode symbol entries, with
  their `binding` and `symbol_type`. Both are built from section bytes that
  you supply.
- `elfcrafter.types`: `ElfVersion`, `SectionType`, `SpecialSectionIndex`,
  `SymbolType`, `SymbolBinding`, and the `Relocation` and
  `RelocationWithAddend` entries with `from_bytes`.

### Log Object Notation

The tree output is built with `elfcrafter.lon`. A tree is made of
`LonString`, `LonArray` and `LonObject` values, and `Stringifier` turns it
into text. `lonify` converts strings, numbers, and objects that have a
`to_lon` method.

```python
from elfcrafter.lon import LonArray, LonObject, LonString, Stringifier

obj = LonObject()
obj.set_key("name", LonString("hello"))
obj.set_key("items", LonArray([LonString("a"), LonString("b")]))
print(Stringifier(4).stringify(obj))
```

`LonObject.set_key` keeps the first value stored under a key.
`Stringifier` raises `ValueError` for an indent width below 1.

## What it does not do

- It does not parse program headers.
- It does not read section contents by itself. `StringTable` and
  `SymbolTable` work only on bytes you read yourself.
- It does not print section headers, symbols or header flags.
- It does not create or change ELF files. `Elf32(path, write=True)` only
  opens the file for writing.
- It does not read 64-bit or big-endian files.
- It does not disassemble code.