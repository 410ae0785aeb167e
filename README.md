# reactorkit

Building blocks for event-driven network services in Python.

- **Time**: `Timestamp` (microseconds since the epoch), `Date` (Julian day
  numbers) and `TimeZone` (fixed UTC offsets), in `reactorkit.timestamp`,
  `reactorkit.date` and `reactorkit.time_zone`.
- **Threads and synchronisation**: `Thread` (`reactorkit.threads`),
  `ThreadPool` (`reactorkit.thread_pool`), and `AtomicInteger`, `MutexLock`,
  `Condition`, `CountDownLatch`, `BlockingQueue` and `BoundedBlockingQueue`
  (`reactorkit.sync`). `reactorkit.singletons` gives process-wide and
  per-thread single instances and `ThreadLocal`; `reactorkit.current_thread`
  caches the calling thread's id and name.
- **Logging**: `LogStream` and `Fmt` format values into a fixed-size buffer
  (`reactorkit.log_stream`); `reactorkit.logger` provides levelled log lines
  (`log_info`, `log_warn`, `log_error`, ...) with pluggable output; `LogFile`
  (`reactorkit.log_file`) writes files that roll over by size and by day.
- **I/O helpers**: `Buffer` (`reactorkit.buffer`), a prependable read/write
  byte buffer for stream protocols; `read_file`, `ReadSmallFile` and
  `AppendFile` (`reactorkit.file_util`); host/network byte-order conversion
  (`reactorkit.endian`); process facts read from `/proc`
  (`reactorkit.process_info`); and `ReactorError`, an exception that records
  the stack where it was created (`reactorkit.errors`).

## Installation

```
pip install reactorkit
```

The package needs Python 3.10 or later and has no third-party dependencies.
Process information and some thread helpers expect Linux.

## Examples

Timestamps:

```python
from reactorkit.timestamp import Timestamp, add_time, time_difference

start = Timestamp.now()
later = add_time(start, 1.5)
print(later.to_formatted_string(True))  # YYYYMMDD HH:MM:SS.ffffff (UTC)
print(time_difference(later, start))    # 1.5
```

Log lines with a custom output:

```python
from reactorkit import logger

lines = []
logger.set_output(lines.append)   # receives each finished line as bytes
logger.set_log_level(logger.LogLevel.DEBUG)
logger.log_info("listening on port ", 8080)
logger.set_output(None)           # back to standard output
```

`log_fatal` and `log_sysfatal` send the line, flush, and then raise
`ReactorError`.

A rolling log file in the current directory (`LogFile` refuses a basename
containing `/`):

```python
from reactorkit.log_file import LogFile

with LogFile("server", 500 * 1000 * 1000) as log:
    log.append(b"service started\n")
    log.flush()
```

Files are named `server.YYYYmmdd-HHMMSS.<hostname>.<pid>.log`.

A thread pool:

```python
from reactorkit.thread_pool import ThreadPool

with ThreadPool("workers") as pool:
    pool.start(4)
    pool.run(lambda: print("hello from a worker"))
```

With no worker threads started, `run` executes the task in the calling thread.
Tasks submitted after `stop` are dropped.

Framing messages with a `Buffer`:

```python
from reactorkit.buffer import Buffer

buf = Buffer()
buf.append(b"GET / HTTP/1.1\r\n")
end = buf.find_crlf()              # offset within the readable bytes, or None
line = buf.retrieve_as_bytes(end)  # b"GET / HTTP/1.1"
buf.retrieve(2)                    # drop the CRLF
```

## What this package does not do

- There is no background, double-buffered log writer: `LogFile.append` writes
  in the calling thread.
- There is no event loop, poller, socket, acceptor, connector or TCP
  server/client. `Buffer.read_fd` reads from a file descriptor you already
  have; opening and polling connections is up to you.
- There is no command-line program; the package is a library only.

## Running the tests

```
pip install -e ".[test]"
pytest
```