"""Severity-filtered log messages and assertion reporting."""

from __future__ import annotations

import enum
import inspect
import sys
import threading
from typing import Any, NoReturn

_LOG_TAG = "GPGMM"


class LogSeverity(enum.IntEnum):
    """Log levels, ordered from least to most severe."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3

    @property
    def label(self) -> str:
        """Return the display name used in emitted lines."""
        return self.name.capitalize()


def _default_log_message_level() -> LogSeverity:
    return LogSeverity.DEBUG if __debug__ else LogSeverity.INFO


_level_lock = threading.Lock()
_log_message_level = _default_log_message_level()


def set_log_message_level(level: LogSeverity) -> None:
    """Log only messages whose severity is at least ``level``."""
    global _log_message_level
    level = LogSeverity(level)
    with _level_lock:
        _log_message_level = level


def get_log_message_level() -> LogSeverity:
    """Return the minimum severity that is currently logged."""
    with _level_lock:
        return _log_message_level


class LogMessage:
    """Accumulates text with ``<<`` and prints it once when flushed."""

    def __init__(self, severity: LogSeverity) -> None:
        self.severity = LogSeverity(severity)
        self._parts: list[str] = []

    def __lshift__(self, value: Any) -> LogMessage:
        self._parts.append(str(value))
        return self

    def text(self) -> str:
        """Return the text gathered so far."""
        return "".join(self._parts)

    def flush(self) -> None:
        """Print the message if it is not empty and not below the log level."""
        message = self.text()
        self._parts.clear()
        if not message:
            return
        if get_log_message_level() > self.severity:
            return
        if self.severity in (LogSeverity.WARNING, LogSeverity.ERROR):
            stream = sys.stderr
        else:
            stream = sys.stdout
        if stream is None:
            return
        stream.write(
            f"{_LOG_TAG} {self.severity.label} (tid:{threading.get_ident()}): {message}\n"
        )
        stream.flush()

    def __enter__(self) -> LogMessage:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.flush()

    def __del__(self) -> None:
        try:
            self.flush()
        except Exception:
            pass

    def __repr__(self) -> str:
        return f"LogMessage({self.severity.label}, {self.text()!r})"


def debug_log(
    file: str | None = None, function: str | None = None, line: int | None = None
) -> LogMessage:
    """Return a debug message, prefixed with a source location when one is given."""
    message = LogMessage(LogSeverity.DEBUG)
    if file is not None:
        message << file << ":" << line << "(" << function << ")"
    return message


def info_log() -> LogMessage:
    """Return an info message."""
    return LogMessage(LogSeverity.INFO)


def warning_log() -> LogMessage:
    """Return a warning message."""
    return LogMessage(LogSeverity.WARNING)


def error_log() -> LogMessage:
    """Return an error message."""
    return LogMessage(LogSeverity.ERROR)


def log(level: LogSeverity) -> LogMessage:
    """Return a message of the given severity."""
    if not isinstance(level, LogSeverity):
        try:
            level = LogSeverity(level)
        except ValueError:
            raise ValueError(f"unknown log severity: {level!r}") from None
    return LogMessage(level)


class ScopedLogLevel:
    """Sets the log level on creation and restores the previous one on exit."""

    def __init__(self, level: LogSeverity) -> None:
        self._previous = get_log_message_level()
        set_log_message_level(level)

    def __enter__(self) -> ScopedLogLevel:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        set_log_message_level(self._previous)


def handle_assertion_failure(file: str, function: str, line: int, condition: str) -> NoReturn:
    """Log an assertion failure and raise AssertionError."""
    text = f"Assertion failure at {file}:{line} ({function}): {condition}"
    with error_log() as message:
        message << text
    raise AssertionError(text)


def gpgmm_assert(condition: Any, description: str = "") -> None:
    """Report an assertion failure at the caller's location if ``condition`` is false."""
    if condition:
        return
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    try:
        if caller is not None:
            file = caller.f_code.co_filename
            function = caller.f_code.co_name
            line = caller.f_lineno
        else:
            file, function, line = "<unknown>", "<unknown>", 0
    finally:
        del frame, caller
    handle_assertion_failure(file, function, line, description)