"""Minimal leveled logging to standard error."""

import sys
import threading
from enum import IntEnum

__all__ = ["Level", "set_level", "level", "debug", "info", "warn", "error"]


class Level(IntEnum):
    """Severity levels; ``OFF`` silences all output."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    OFF = 4


_LABELS = {
    Level.DEBUG: "DEBUG",
    Level.INFO: "INFO",
    Level.WARN: "WARN",
    Level.ERROR: "ERROR",
}

_lock = threading.Lock()
_current = Level.INFO


def set_level(lvl: Level) -> None:
    """Set the minimum level that is written."""
    global _current
    _current = Level(lvl)


def level() -> Level:
    """Return the current minimum level."""
    return _current


def _emit(lvl: Level, msg: str) -> None:
    if lvl < _current or _current == Level.OFF:
        return
    with _lock:
        sys.stderr.write(f"[{_LABELS.get(lvl, '')}] {msg}\n")


def debug(msg: str) -> None:
    """Write a debug message."""
    _emit(Level.DEBUG, msg)


def info(msg: str) -> None:
    """Write an informational message."""
    _emit(Level.INFO, msg)


def warn(msg: str) -> None:
    """Write a warning."""
    _emit(Level.WARN, msg)


def error(msg: str) -> None:
    """Write an error message."""
    _emit(Level.ERROR, msg)