"""Small callback-based logger with console and file sinks."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Callable, Optional, TextIO

MAX_CALLBACKS = 32

__all__ = [
    "Level",
    "Event",
    "CallbackLimitError",
    "Logger",
    "level_string",
    "format_console",
    "format_file",
    "get_logger",
]


class Level(enum.IntEnum):
    """Severity levels, lowest first."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5


@dataclass
class Event:
    """A single log record handed to every sink."""

    fmt: str
    args: tuple = ()
    file: str = ""
    line: int = 0
    level: int = Level.TRACE
    time: datetime = field(default_factory=datetime.now)
    udata: Any = None

    def message(self) -> str:
        """Return the printf-style message with its arguments applied."""
        return self.fmt % self.args if self.args else self.fmt


class CallbackLimitError(RuntimeError):
    """Raised when no more callbacks can be registered."""


LogFn = Callable[[Event], None]
LockFn = Callable[[bool, Any], None]


def level_string(level: int) -> str:
    """Return the upper-case name of a level; ValueError if unknown."""
    return Level(level).name


def _prefix(event: Event, time_format: str) -> str:
    return (
        f"{event.time.strftime(time_format)} "
        f"{level_string(event.level):<5} {event.file}:{event.line}: "
    )


def format_console(event: Event) -> str:
    """Render an event the way the console sink prints it (no newline)."""
    return _prefix(event, "%H:%M:%S") + event.message()


def format_file(event: Event) -> str:
    """Render an event the way the file sink writes it (no newline)."""
    return _prefix(event, "%Y-%m-%d %H:%M:%S") + event.message()


def _write_line(stream: TextIO, text: str) -> None:
    stream.write(text + "\n")
    stream.flush()


def _console_callback(event: Event) -> None:
    _write_line(event.udata, format_console(event))


def _file_callback(event: Event) -> None:
    _write_line(event.udata, format_file(event))


@dataclass
class _Callback:
    fn: LogFn
    udata: Any
    level: int


class Logger:
    """Dispatches formatted events to a console stream and registered sinks."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._lock_fn: Optional[LockFn] = None
        self._lock_udata: Any = None
        self.level: int = Level.TRACE
        self.quiet = False
        self._callbacks: list[_Callback] = []

    def set_lock(self, fn: Optional[LockFn], udata: Any = None) -> None:
        """Install a function called with True before and False after logging."""
        self._lock_fn = fn
        self._lock_udata = udata

    def set_level(self, level: int) -> None:
        """Set the minimum level printed to the console stream."""
        self.level = level

    def set_quiet(self, enable: bool) -> None:
        """Turn console output off or on; callbacks are unaffected."""
        self.quiet = enable

    def add_callback(self, fn: LogFn, udata: Any = None, level: int = Level.TRACE) -> None:
        """Register a sink receiving events at or above ``level``."""
        if len(self._callbacks) >= MAX_CALLBACKS:
            raise CallbackLimitError(f"at most {MAX_CALLBACKS} callbacks may be added")
        self._callbacks.append(_Callback(fn, udata, level))

    def add_fp(self, fp: TextIO, level: int = Level.TRACE) -> None:
        """Register a file-like object written in the file format."""
        self.add_callback(_file_callback, fp, level)

    def log(self, level: int, file: str, line: int, fmt: str, *args: Any) -> None:
        """Emit an event to the console and every matching callback."""
        event = Event(fmt=fmt, args=args, file=file, line=line, level=level)
        if self._lock_fn is not None:
            self._lock_fn(True, self._lock_udata)
        try:
            if not self.quiet and level >= self.level:
                stream = self._stream if self._stream is not None else sys.stderr
                _console_callback(replace(event, udata=stream))
            for cb in self._callbacks:
                if level >= cb.level:
                    cb.fn(replace(event, udata=cb.udata))
        finally:
            if self._lock_fn is not None:
                self._lock_fn(False, self._lock_udata)

    def _log_here(self, level: int, fmt: str, args: tuple) -> None:
        caller = sys._getframe(2)
        self.log(level, caller.f_code.co_filename, caller.f_lineno, fmt, *args)

    def trace(self, fmt: str, *args: Any) -> None:
        self._log_here(Level.TRACE, fmt, args)

    def debug(self, fmt: str, *args: Any) -> None:
        self._log_here(Level.DEBUG, fmt, args)

    def info(self, fmt: str, *args: Any) -> None:
        self._log_here(Level.INFO, fmt, args)

    def warn(self, fmt: str, *args: Any) -> None:
        self._log_here(Level.WARN, fmt, args)

    def error(self, fmt: str, *args: Any) -> None:
        self._log_here(Level.ERROR, fmt, args)

    def fatal(self, fmt: str, *args: Any) -> None:
        self._log_here(Level.FATAL, fmt, args)


_default_logger = Logger()


def get_logger() -> Logger:
    """Return the process-wide shared logger."""
    return _default_logger