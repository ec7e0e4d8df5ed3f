"""An ELF32 file: its header and section headers."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence, Union

from .binfile import BinaryFile
from .header import Header
from .lon import Stringifier
from .section_header import SectionHeaderTable

__all__ = ["Elf32", "main"]


class Elf32:
    """An opened ELF32 file with its header and section headers loaded."""

    def __init__(self, path: Union[str, os.PathLike], write: bool = False) -> None:
        self._file = BinaryFile()
        self.header: Optional[Header] = None
        self.section_headers = SectionHeaderTable()
        self.open_file(path, write)

    def open_file(self, path: Union[str, os.PathLike], write: bool = False) -> None:
        """Open path; when reading, load its header and section headers."""
        self._file.open(path, write)
        if write:
            return
        self.header = Header.read(self._file)
        self.section_headers = SectionHeaderTable.read(
            self._file,
            self.header.section_header_offset,
            self.header.section_header_number_of_entries,
        )

    def close_file(self) -> None:
        self._file.close()

    def describe(self, indent_width: int = 4) -> str:
        """Render the header as indented text."""
        stringifier = Stringifier(indent_width)
        if self.header is None:
            raise ValueError("no header loaded")
        return stringifier.stringify(self.header.to_lon())

    def __enter__(self) -> Elf32:
        return self

    def __exit__(self, *args) -> None:
        if self._file.is_open:
            self._file.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="elfcrafter", description="Show the header of an ELF32 file.")
    parser.add_argument("path", help="ELF32 file to read")
    parser.add_argument("--indent", type=int, default=4, help="indent width")
    args = parser.parse_args(argv)
    try:
        with Elf32(args.path) as elf:
            print(elf.describe(args.indent))
    except (OSError, ValueError, EOFError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())