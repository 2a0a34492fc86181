"""Process and platform helpers: environment, executable location and timing."""

from __future__ import annotations

import os
import sys
import time
from typing import Callable

Clock = Callable[[], float]


def get_path_separator() -> str:
    """Return the separator used between path components on this platform."""
    return "\\" if os.name == "nt" else "/"


def get_environment_var(name: str) -> str:
    """Return the value of environment variable ``name``, or "" if it is unset."""
    return os.environ.get(name, "")


def set_environment_var(name: str, value: str) -> None:
    """Set environment variable ``name`` to ``value``, overwriting any previous value."""
    os.environ[name] = value


def get_executable_path() -> str:
    """Return the full path of the running executable, or "" if it cannot be found."""
    if sys.platform.startswith("linux"):
        try:
            return os.readlink("/proc/self/exe")
        except OSError:
            return ""
    return sys.executable or ""


def get_executable_directory() -> str:
    """Return the directory of the running executable, with a trailing separator."""
    exe_path = get_executable_path()
    index = exe_path.rfind(get_path_separator())
    return exe_path[: index + 1] if index != -1 else ""


def get_pid() -> int:
    """Return the id of the current process."""
    return os.getpid()


class PlatformTime:
    """Measures absolute, relative and elapsed time in seconds."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock if clock is not None else time.perf_counter
        self._origin: float | None = None
        self._start: float | None = None

    def get_absolute_time(self) -> float:
        """Return the current time of the clock, in seconds."""
        return self._clock()

    def get_relative_time(self) -> float:
        """Return the seconds elapsed since this method was first called."""
        if self._origin is None:
            self._origin = self.get_absolute_time()
        return self.get_absolute_time() - self._origin

    def start_elapsed_time(self) -> None:
        """Start measuring an interval of elapsed time."""
        self._start = self._clock()

    def end_elapsed_time(self) -> float:
        """Return the seconds elapsed since start_elapsed_time() was last called."""
        if self._start is None:
            raise RuntimeError("start_elapsed_time() has not been called")
        return self._clock() - self._start


def create_platform_time() -> PlatformTime:
    """Return a timer backed by the platform's high-resolution counter."""
    return PlatformTime()