"""Levelled log lines with timestamp, level name and source location."""

from __future__ import annotations

import enum
import inspect
import os
import sys
from typing import Callable

from reactorkit.errors import ReactorError
from reactorkit.log_stream import LogStream
from reactorkit.timestamp import Timestamp


class LogLevel(enum.IntEnum):
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5


_LEVEL_NAMES = {
    LogLevel.TRACE: "TRACE ",
    LogLevel.DEBUG: "DEBUG ",
    LogLevel.INFO: "INFO  ",
    LogLevel.WARN: "WARN  ",
    LogLevel.ERROR: "ERROR ",
    LogLevel.FATAL: "FATAL ",
}

OutputFunc = Callable[[bytes], None]
FlushFunc = Callable[[], None]


def _default_output(msg: bytes) -> None:
    sys.stdout.write(msg.decode("utf-8", "replace"))


def _default_flush() -> None:
    sys.stdout.flush()


_level = LogLevel.INFO
_output: OutputFunc = _default_output
_flush: FlushFunc = _default_flush


def log_level() -> LogLevel:
    return _level


def set_log_level(level: LogLevel) -> None:
    global _level
    _level = LogLevel(level)


def set_output(out: OutputFunc | None) -> None:
    """Send finished log lines to ``out``; None restores standard output."""
    global _output
    _output = out if out is not None else _default_output


def set_flush(flush: FlushFunc | None) -> None:
    """Use ``flush`` before a fatal abort; None restores standard output."""
    global _flush
    _flush = flush if flush is not None else _default_flush


def strerror_tl(saved_errno: int) -> str:
    """The message text for an errno value."""
    return os.strerror(saved_errno)


def source_basename(filename: str) -> str:
    """The part of ``filename`` after its last slash."""
    return filename.rsplit("/", 1)[-1]


class Logger:
    """One log line; write to ``stream()`` then call ``finish()``."""

    def __init__(
        self,
        file: str,
        line: int,
        level: LogLevel = LogLevel.INFO,
        func: str | None = None,
        saved_errno: int = 0,
    ) -> None:
        self.time = Timestamp.now()
        self.level = LogLevel(level)
        self.line = line
        self.basename = source_basename(file)
        self._stream = LogStream()
        self._stream << self.time.to_formatted_string(True) << " "
        self._stream << _LEVEL_NAMES[self.level]
        if saved_errno != 0:
            self._stream << strerror_tl(saved_errno) << " (errno=" << saved_errno << ") "
        if func is not None:
            self._stream << func << " "

    def stream(self) -> LogStream:
        return self._stream

    def finish(self) -> None:
        """Complete the line and send it; a fatal line raises ReactorError."""
        self._stream << " - " << self.basename << ":" << self.line << "\n"
        data = self._stream.buffer().to_bytes()
        _output(data)
        if self.level == LogLevel.FATAL:
            _flush()
            raise ReactorError(data.decode("utf-8", "replace"))


def _emit(level: LogLevel, args: tuple, *, with_func: bool = False, saved_errno: int = 0) -> None:
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame is not None and frame.f_back is not None else None
    if caller is not None:
        file, line, func = caller.f_code.co_filename, caller.f_lineno, caller.f_code.co_name
    else:
        file, line, func = "unknown", 0, "unknown"
    del frame, caller
    logger = Logger(file, line, level, func if with_func else None, saved_errno)
    stream = logger.stream()
    for arg in args:
        stream << arg
    logger.finish()


def _current_errno() -> int:
    exc = sys.exc_info()[1]
    if isinstance(exc, OSError) and exc.errno:
        return exc.errno
    return 0


def log_trace(*args) -> None:
    if log_level() <= LogLevel.TRACE:
        _emit(LogLevel.TRACE, args, with_func=True)


def log_debug(*args) -> None:
    if log_level() <= LogLevel.DEBUG:
        _emit(LogLevel.DEBUG, args, with_func=True)


def log_info(*args) -> None:
    if log_level() <= LogLevel.INFO:
        _emit(LogLevel.INFO, args)


def log_warn(*args) -> None:
    _emit(LogLevel.WARN, args)


def log_error(*args) -> None:
    _emit(LogLevel.ERROR, args)


def log_fatal(*args) -> None:
    _emit(LogLevel.FATAL, args)


def log_syserr(*args) -> None:
    """Log at ERROR, with the errno of the OSError being handled, if any."""
    _emit(LogLevel.ERROR, args, saved_errno=_current_errno())


def log_sysfatal(*args) -> None:
    """Log at FATAL with the current errno, then raise ReactorError."""
    _emit(LogLevel.FATAL, args, saved_errno=_current_errno())