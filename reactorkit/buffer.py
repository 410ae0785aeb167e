"""A growable byte buffer with prependable, readable and writable regions."""

from __future__ import annotations

import os

CHEAP_PREPEND = 8
INITIAL_SIZE = 1024
_CRLF = b"\r\n"
_EXTRA_BUF_SIZE = 65536


class Buffer:
    """Contiguous storage split as ``prependable | readable | writable``.

    Offsets accepted and returned by the ``find_*`` and ``retrieve_until``
    methods are relative to the start of the readable region.
    """

    def __init__(self, initial_size: int = INITIAL_SIZE) -> None:
        self._buf = bytearray(CHEAP_PREPEND + initial_size)
        self._reader = CHEAP_PREPEND
        self._writer = CHEAP_PREPEND

    def swap(self, other: Buffer) -> None:
        self._buf, other._buf = other._buf, self._buf
        self._reader, other._reader = other._reader, self._reader
        self._writer, other._writer = other._writer, self._writer

    def readable_bytes(self) -> int:
        return self._writer - self._reader

    def writable_bytes(self) -> int:
        return len(self._buf) - self._writer

    def prependable_bytes(self) -> int:
        return self._reader

    def peek(self) -> bytes:
        """A copy of the readable bytes."""
        return bytes(self._buf[self._reader:self._writer])

    def _check_start(self, start: int) -> int:
        if not 0 <= start <= self.readable_bytes():
            raise ValueError(f"start {start} outside the readable region")
        return self._reader + start

    def find_crlf(self, start: int = 0) -> int | None:
        """Offset of the first CRLF at or after ``start``, or None."""
        pos = self._buf.find(_CRLF, self._check_start(start), self._writer)
        return None if pos == -1 else pos - self._reader

    def find_eol(self, start: int = 0) -> int | None:
        """Offset of the first ``\\n`` at or after ``start``, or None."""
        pos = self._buf.find(b"\n", self._check_start(start), self._writer)
        return None if pos == -1 else pos - self._reader

    def retrieve(self, length: int) -> None:
        """Consume ``length`` readable bytes."""
        if not 0 <= length <= self.readable_bytes():
            raise ValueError(f"cannot retrieve {length} of {self.readable_bytes()} bytes")
        if length < self.readable_bytes():
            self._reader += length
        else:
            self.retrieve_all()

    def retrieve_until(self, end: int) -> None:
        """Consume the readable bytes before offset ``end``."""
        self.retrieve(end)

    def retrieve_all(self) -> None:
        self._reader = CHEAP_PREPEND
        self._writer = CHEAP_PREPEND

    def retrieve_all_as_bytes(self) -> bytes:
        return self.retrieve_as_bytes(self.readable_bytes())

    def retrieve_as_bytes(self, length: int) -> bytes:
        if not 0 <= length <= self.readable_bytes():
            raise ValueError(f"cannot retrieve {length} of {self.readable_bytes()} bytes")
        result = bytes(self._buf[self._reader:self._reader + length])
        self.retrieve(length)
        return result

    def ensure_writable_bytes(self, length: int) -> None:
        if self.writable_bytes() < length:
            self._make_space(length)

    def append(self, data: bytes) -> None:
        n = len(data)
        self.ensure_writable_bytes(n)
        self._buf[self._writer:self._writer + n] = data
        self._writer += n

    def has_written(self, length: int) -> None:
        """Mark ``length`` writable bytes as readable."""
        if not 0 <= length <= self.writable_bytes():
            raise ValueError(f"cannot mark {length} of {self.writable_bytes()} bytes written")
        self._writer += length

    def unwrite(self, length: int) -> None:
        """Drop the last ``length`` readable bytes."""
        if not 0 <= length <= self.readable_bytes():
            raise ValueError(f"cannot unwrite {length} of {self.readable_bytes()} bytes")
        self._writer -= length

    def prepend(self, data: bytes) -> None:
        """Put ``data`` in front of the readable bytes."""
        n = len(data)
        if n > self.prependable_bytes():
            raise ValueError(f"cannot prepend {n} bytes into {self.prependable_bytes()}")
        self._reader -= n
        self._buf[self._reader:self._reader + n] = data

    def shrink(self, reserve: int) -> None:
        """Reallocate to fit the readable bytes plus ``reserve`` writable ones."""
        other = Buffer()
        other.ensure_writable_bytes(self.readable_bytes() + reserve)
        other.append(self.peek())
        self.swap(other)

    def capacity(self) -> int:
        return len(self._buf)

    def read_fd(self, fd: int) -> int:
        """Read once from ``fd`` into the buffer; return the byte count.

        Raises ``OSError`` when the read fails.
        """
        writable = self.writable_bytes()
        extrabuf = bytearray(_EXTRA_BUF_SIZE)
        with memoryview(self._buf) as whole:
            with whole[self._writer:] as view:
                if hasattr(os, "readv"):
                    bufs = [view, extrabuf] if writable < len(extrabuf) else [view]
                    n = os.readv(fd, bufs)
                else:
                    data = os.read(fd, writable + len(extrabuf))
                    n = len(data)
                    head = min(n, writable)
                    view[:head] = data[:head]
                    extrabuf[: n - head] = data[head:]
        if n <= writable:
            self._writer += n
        else:
            self._writer = len(self._buf)
            self.append(bytes(extrabuf[: n - writable]))
        return n

    def _make_space(self, length: int) -> None:
        if self.writable_bytes() + self.prependable_bytes() < length + CHEAP_PREPEND:
            self._buf.extend(bytes(self._writer + length - len(self._buf)))
        else:
            readable = self.readable_bytes()
            self._buf[CHEAP_PREPEND:CHEAP_PREPEND + readable] = self._buf[
                self._reader:self._writer
            ]
            self._reader = CHEAP_PREPEND
            self._writer = CHEAP_PREPEND + readable