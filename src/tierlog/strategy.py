"""
Output sink contract.

Design Pattern: Strategy Pattern. A ``Logger`` filters and decorates messages,
then hands the final text to whichever ``LogStrategy`` is active.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from .levels import LogLevel


class LogStrategy(ABC):
    """A destination for fully decorated messages.

    Sinks that also implement a unified ``log`` method subclass
    ``UnifiedLogStrategy``; the logger prefers that method when the
    ``supports_unified_log`` flag is set.
    """

    supports_unified_log: ClassVar[bool] = False

    @abstractmethod
    def category(self, name: str) -> LogStrategy:
        """Fetch a sink scoped to the named category.

        What a category means is up to the sink: a separate file, a different
        label, or nothing at all. The result may be a new object or ``self``,
        and callers are free to cache it.
        """
        ...

    @abstractmethod
    def verbose(self, msg: str) -> None: ...

    @abstractmethod
    def debug(self, msg: str) -> None: ...

    @abstractmethod
    def info(self, msg: str) -> None: ...

    @abstractmethod
    def warn(self, msg: str, err: Optional[Any] = None) -> None: ...

    @abstractmethod
    def error(self, msg: str, err: Optional[Any] = None) -> None: ...

    @abstractmethod
    def fatal(self, msg: str, err: Optional[Any] = None) -> None: ...


class UnifiedLogStrategy(LogStrategy):
    """A sink with a single ``log(level, msg, err)`` entry point."""

    supports_unified_log: ClassVar[bool] = True

    @abstractmethod
    def log(self, level: LogLevel, msg: str, err: Optional[Any] = None) -> None: ...

    def verbose(self, msg: str) -> None:
        self.log(LogLevel.VERBOSE, msg)

    def debug(self, msg: str) -> None:
        self.log(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        self.log(LogLevel.INFO, msg)

    def warn(self, msg: str, err: Optional[Any] = None) -> None:
        self.log(LogLevel.WARN, msg, err)

    def error(self, msg: str, err: Optional[Any] = None) -> None:
        self.log(LogLevel.ERROR, msg, err)

    def fatal(self, msg: str, err: Optional[Any] = None) -> None:
        self.log(LogLevel.FATAL, msg, err)


def dispatch(strategy: LogStrategy, level: LogLevel, msg: str, err: Optional[Any] = None) -> None:
    """Hand a finished message to ``strategy``.

    Uses the unified ``log`` method when the sink has one, otherwise the
    per-level method matching ``level``. Per-level methods below WARN take no
    error, so ``err`` is dropped for them.
    """
    if strategy.supports_unified_log:
        strategy.log(level, msg, err)  # type: ignore[attr-defined]
    elif level == LogLevel.VERBOSE:
        strategy.verbose(msg)
    elif level == LogLevel.DEBUG:
        strategy.debug(msg)
    elif level == LogLevel.INFO:
        strategy.info(msg)
    elif level == LogLevel.WARN:
        strategy.warn(msg, err)
    elif level == LogLevel.ERROR:
        strategy.error(msg, err)
    else:
        strategy.fatal(msg, err)


def join_category(parent: Optional[str], name: str) -> str:
    """Dotted category path: ``join_category("db", "pool") == "db.pool"``."""
    return f"{parent}.{name}" if parent else name
