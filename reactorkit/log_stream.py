"""Fixed-size byte buffers and a stream that formats values into them."""

from __future__ import annotations

SMALL_BUFFER = 4000
LARGE_BUFFER = 4000 * 1000
MAX_NUMERIC_SIZE = 48


class FixedBuffer:
    """A byte buffer of fixed capacity; appends that do not fit are dropped."""

    def __init__(self, size: int = SMALL_BUFFER) -> None:
        self._data = bytearray(size)
        self._cur = 0

    def append(self, data: bytes) -> None:
        """Append ``data`` if it fits with room to spare, else drop it."""
        n = len(data)
        if self.avail() > n:
            self._write(data)

    def _write(self, data: bytes) -> None:
        n = len(data)
        self._data[self._cur:self._cur + n] = data
        self._cur += n

    def data(self) -> memoryview:
        """A view of the bytes written so far."""
        return memoryview(self._data)[: self._cur]

    def length(self) -> int:
        return self._cur

    def avail(self) -> int:
        return len(self._data) - self._cur

    def reset(self) -> None:
        self._cur = 0

    def bzero(self) -> None:
        """Fill the whole storage with zero bytes."""
        self._data[:] = bytes(len(self._data))

    def to_bytes(self) -> bytes:
        return bytes(self._data[: self._cur])


class Fmt:
    """A single number formatted with a printf-style format."""

    def __init__(self, fmt: str, val: int | float) -> None:
        if not isinstance(val, (int, float)):
            raise TypeError("Fmt needs an arithmetic value")
        text = (fmt % val).encode()
        if len(text) >= 32:
            raise ValueError("formatted value too long")
        self._buf = text

    def data(self) -> bytes:
        return self._buf

    def length(self) -> int:
        return len(self._buf)


class LogStream:
    """Formats values into a small fixed buffer with the ``<<`` operator."""

    def __init__(self, buffer_size: int = SMALL_BUFFER) -> None:
        self._buffer = FixedBuffer(buffer_size)

    def __lshift__(self, value) -> LogStream:
        if isinstance(value, bool):
            self._buffer.append(b"1" if value else b"0")
        elif isinstance(value, int):
            self._format_numeric(str(value))
        elif isinstance(value, float):
            self._format_numeric("%.12g" % value)
        elif value is None:
            self._buffer.append(b"(null)")
        elif isinstance(value, str):
            self._buffer.append(value.encode("utf-8"))
        elif isinstance(value, (bytes, bytearray, memoryview)):
            self._buffer.append(bytes(value))
        elif isinstance(value, FixedBuffer):
            self._buffer.append(value.to_bytes())
        elif isinstance(value, Fmt):
            self._buffer.append(value.data())
        else:
            self._buffer.append(str(value).encode("utf-8"))
        return self

    def _format_numeric(self, text: str) -> None:
        if self._buffer.avail() >= MAX_NUMERIC_SIZE:
            self._buffer._write(text.encode("ascii")[:MAX_NUMERIC_SIZE])

    def append(self, data: bytes) -> None:
        self._buffer.append(data)

    def buffer(self) -> FixedBuffer:
        return self._buffer

    def reset_buffer(self) -> None:
        self._buffer.reset()