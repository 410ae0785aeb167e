"""Facts about the running process, mostly read from /proc."""

from __future__ import annotations

import os
import re
import socket
from dataclasses import dataclass

from reactorkit import current_thread
from reactorkit.file_util import read_file
from reactorkit.timestamp import Timestamp

try:
    import pwd
except ImportError:  # pragma: no cover - non-Unix
    pwd = None  # type: ignore[assignment]

try:
    import resource
except ImportError:  # pragma: no cover - non-Unix
    resource = None  # type: ignore[assignment]

_START_TIME = Timestamp.now()


def _sysconf(name: str, fallback: int) -> int:
    try:
        return int(os.sysconf(name))
    except (AttributeError, ValueError, OSError):
        return fallback


_CLOCK_TICKS = _sysconf("SC_CLK_TCK", 100)
_PAGE_SIZE = _sysconf("SC_PAGE_SIZE", 4096)


@dataclass
class CpuTime:
    """User and system CPU seconds consumed by the process."""

    user_seconds: float = 0.0
    system_seconds: float = 0.0

    def total(self) -> float:
        return self.user_seconds + self.system_seconds


def pid() -> int:
    return os.getpid()


def pid_string() -> str:
    return str(pid())


def uid() -> int:
    return os.getuid()


def username() -> str:
    """The login name for the real user id, or ``"unknownuser"``."""
    if pwd is not None:
        try:
            return pwd.getpwuid(uid()).pw_name
        except KeyError:
            pass
    return "unknownuser"


def euid() -> int:
    return os.geteuid()


def start_time() -> Timestamp:
    """When this module was first loaded."""
    return _START_TIME


def clock_ticks_per_second() -> int:
    return _CLOCK_TICKS


def page_size() -> int:
    return _PAGE_SIZE


def is_debug_build() -> bool:
    """True unless Python runs with optimisation (``-O``)."""
    return __debug__


def hostname() -> str:
    try:
        return socket.gethostname()
    except OSError:
        return "unknownhost"


def procname_from_stat(stat: str) -> str:
    """The command name between the first '(' and the last ')' of a stat line."""
    lp = stat.find("(")
    rp = stat.rfind(")")
    if lp != -1 and rp != -1 and lp < rp:
        return stat[lp + 1:rp]
    return ""


def _read_text(path: str) -> str:
    try:
        return read_file(path).decode("utf-8", "replace")
    except OSError:
        return ""


def procname() -> str:
    return procname_from_stat(proc_stat())


def proc_status() -> str:
    """Contents of /proc/self/status, or empty if unreadable."""
    return _read_text("/proc/self/status")


def proc_stat() -> str:
    """Contents of /proc/self/stat, or empty if unreadable."""
    return _read_text("/proc/self/stat")


def thread_stat() -> str:
    """Contents of /proc/self/task/<tid>/stat for the calling thread."""
    return _read_text(f"/proc/self/task/{current_thread.tid()}/stat")


def exe_path() -> str:
    """Target of /proc/self/exe, or empty if unavailable."""
    try:
        return os.readlink("/proc/self/exe")
    except OSError:
        return ""


def _count_numeric_entries(directory: str) -> list[int]:
    try:
        with os.scandir(directory) as entries:
            return [int(e.name) for e in entries if e.name[:1].isdigit()]
    except OSError:
        return []


def opened_files() -> int:
    """Number of open file descriptors, counted in /proc/self/fd."""
    return len(_count_numeric_entries("/proc/self/fd"))


def max_open_files() -> int:
    """The soft limit on open files, or the current count if unknown."""
    if resource is not None:
        try:
            soft, _hard = resource.getrlimit(resource.RLIMIT_NOFILE)
            return soft
        except (OSError, ValueError):
            pass
    return opened_files()


def cpu_time() -> CpuTime:
    times = os.times()
    return CpuTime(user_seconds=times.user, system_seconds=times.system)


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def num_threads() -> int:
    """Thread count from the ``Threads:`` line of /proc/self/status, else 0."""
    status = proc_status()
    pos = status.find("Threads:")
    if pos == -1:
        return 0
    return _leading_int(status[pos + len("Threads:"):])


def threads() -> list[int]:
    """Sorted ids of the process's threads from /proc/self/task."""
    return sorted(_count_numeric_entries("/proc/self/task"))