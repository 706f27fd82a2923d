"""
Severity scale.

Levels are ordered from most to least severe; a more verbose level compares as
numerically greater, so a threshold ``t`` lets a message at ``level`` through
iff ``t >= level``.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from .exceptions import ConfigurationError


class LogLevel(IntEnum):
    FATAL = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    VERBOSE = 5


_ALIASES = {
    "WARNING": LogLevel.WARN,
    "CRITICAL": LogLevel.FATAL,
    "TRACE": LogLevel.VERBOSE,
}


def is_enabled(threshold: LogLevel, level: LogLevel) -> bool:
    """Return True if ``threshold`` is at least as verbose as ``level``."""
    return threshold >= level


def parse_level(value: LogLevel | int | str) -> LogLevel:
    """Coerce a level, its integer value, or a case-insensitive name."""
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, int):
        try:
            return LogLevel(value)
        except ValueError:
            raise ConfigurationError(f"Unknown log level: {value!r}", value=value) from None
    name = str(value).strip().upper()
    if name.isdigit():
        return parse_level(int(name))
    if name in LogLevel.__members__:
        return LogLevel[name]
    if name in _ALIASES:
        return _ALIASES[name]
    raise ConfigurationError(f"Unknown log level: {value!r}", value=value)


def from_stdlib_level(levelno: int) -> LogLevel:
    """Map a stdlib ``logging`` level number onto the severity scale."""
    if levelno >= logging.CRITICAL:
        return LogLevel.FATAL
    if levelno >= logging.ERROR:
        return LogLevel.ERROR
    if levelno >= logging.WARNING:
        return LogLevel.WARN
    if levelno >= logging.INFO:
        return LogLevel.INFO
    if levelno >= logging.DEBUG:
        return LogLevel.DEBUG
    return LogLevel.VERBOSE


# Below stdlib DEBUG, matching the common TRACE convention.
STDLIB_VERBOSE = 5

_STDLIB_LEVELS = {
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.VERBOSE: STDLIB_VERBOSE,
}


def to_stdlib_level(level: LogLevel) -> int:
    return _STDLIB_LEVELS[level]
