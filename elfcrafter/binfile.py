"""Low-level positioned reads and writes on a file descriptor."""

from __future__ import annotations

import os
from typing import Optional

__all__ = ["BinaryFile"]


class BinaryFile:
    """A file opened either for reading or for writing (created if missing)."""

    def __init__(self, path: Optional[str | os.PathLike] = None, write: bool = False) -> None:
        self._fd: Optional[int] = None
        if path is not None:
            self.open(path, write)

    @property
    def is_open(self) -> bool:
        return self._fd is not None

    def open(self, path: str | os.PathLike, write: bool = False) -> None:
        """Open path; any file already open here is closed first."""
        if self._fd is not None:
            self.close()
        flags = os.O_WRONLY | os.O_CREAT if write else os.O_RDONLY
        flags |= getattr(os, "O_BINARY", 0)
        self._fd = os.open(path, flags, 0o644)

    def _require_open(self) -> int:
        if self._fd is None:
            raise ValueError("file is not open")
        return self._fd

    def close(self) -> None:
        fd = self._require_open()
        self._fd = None
        os.close(fd)

    def tell(self) -> int:
        return os.lseek(self._require_open(), 0, os.SEEK_CUR)

    def seek(self, offset: int) -> None:
        fd = self._require_open()
        if offset < 0:
            raise ValueError("offset must not be negative")
        os.lseek(fd, offset, os.SEEK_SET)

    def read(self, size: int, offset: Optional[int] = None) -> bytes:
        """Read exactly size bytes, from offset if given; EOFError if the file ends first."""
        fd = self._require_open()
        if offset is not None:
            self.seek(offset)
        chunks = []
        remaining = size
        while remaining:
            chunk = os.read(fd, remaining)
            if not chunk:
                raise EOFError("unexpected end of file")
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def write(self, data: bytes, offset: Optional[int] = None) -> None:
        """Write all of data, at offset if given."""
        fd = self._require_open()
        if offset is not None:
            self.seek(offset)
        view = memoryview(data)
        while view:
            written = os.write(fd, view)
            view = view[written:]

    def __enter__(self) -> BinaryFile:
        return self

    def __exit__(self, *args) -> None:
        if self._fd is not None:
            self.close()

    def __del__(self) -> None:
        if getattr(self, "_fd", None) is not None:
            try:
                os.close(self._fd)
            except OSError:
                pass
            self._fd = None