"""Small-file reading and buffered append-only writing."""

from __future__ import annotations

import errno
import os
import stat
import sys
from dataclasses import dataclass
from typing import Union

_BUFFER_SIZE = 64 * 1024
DEFAULT_SIZE_LIMIT = 1024 * 1024

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


@dataclass(frozen=True)
class FileContent:
    """Bytes read from a file plus what ``fstat`` reported about it."""

    content: bytes
    file_size: int | None = None
    modify_time: int | None = None
    create_time: int | None = None


class ReadSmallFile:
    """A read-only file descriptor for reading small files whole."""

    def __init__(self, filename: PathArg) -> None:
        self._name = os.fsdecode(filename)
        self._fd = os.open(filename, os.O_RDONLY | getattr(os, "O_CLOEXEC", 0))

    def _require_open(self) -> int:
        if self._fd < 0:
            raise ValueError("I/O operation on closed file")
        return self._fd

    def read_to_string(self, max_size: int = DEFAULT_SIZE_LIMIT) -> FileContent:
        """Read up to ``max_size`` bytes; raise ``IsADirectoryError`` for a directory."""
        fd = self._require_open()
        st = os.fstat(fd)
        file_size: int | None = None
        if stat.S_ISREG(st.st_mode):
            file_size = st.st_size
        elif stat.S_ISDIR(st.st_mode):
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), self._name)
        chunks: list[bytes] = []
        total = 0
        while total < max_size:
            chunk = os.read(fd, min(max_size - total, _BUFFER_SIZE))
            if not chunk:
                break
            chunks.append(chunk)
            total += len(chunk)
        return FileContent(
            content=b"".join(chunks),
            file_size=file_size,
            modify_time=int(st.st_mtime),
            create_time=int(st.st_ctime),
        )

    def read_to_buffer(self, size: int) -> bytes:
        """Read up to ``size`` bytes from the start of the file."""
        fd = self._require_open()
        if hasattr(os, "pread"):
            return os.pread(fd, size, 0)
        os.lseek(fd, 0, os.SEEK_SET)
        return os.read(fd, size)

    def close(self) -> None:
        if self._fd >= 0:
            os.close(self._fd)
            self._fd = -1

    def __enter__(self) -> ReadSmallFile:
        return self

    def __exit__(self, *args) -> None:
        self.close()


class AppendFile:
    """A file opened for appending through a 64 KiB user-space buffer."""

    def __init__(self, filename: PathArg) -> None:
        self._file = open(filename, "ab", buffering=_BUFFER_SIZE)
        self._written = 0

    def append(self, data: bytes) -> None:
        """Write ``data``; a failed write is reported on stderr."""
        try:
            self._file.write(data)
        except OSError as exc:
            print(f"AppendFile::append() failed {exc.strerror}", file=sys.stderr)
            return
        self._written += len(data)

    def flush(self) -> None:
        self._file.flush()

    def written_bytes(self) -> int:
        """Bytes appended through this object."""
        return self._written

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> AppendFile:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def read_file(filename: PathArg, size_limit: int = DEFAULT_SIZE_LIMIT) -> bytes:
    """Return at most ``size_limit`` bytes of ``filename``; raise ``OSError`` on failure."""
    with ReadSmallFile(filename) as file:
        return file.read_to_string(size_limit).content