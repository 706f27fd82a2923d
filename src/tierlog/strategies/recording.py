from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..levels import LogLevel
from ..strategy import LogStrategy, join_category


@dataclass(frozen=True)
class RecordedMessage:
    category: Optional[str]
    level: LogLevel
    message: str
    error: Any = None


class RecordingLogStrategy(LogStrategy):
    """Keeps every message in memory.

    Implements only the per-level methods. Categories share the parent's
    ``records`` list and tag their entries with the dotted category path.
    """

    def __init__(self, category: Optional[str] = None, records: Optional[list[RecordedMessage]] = None):
        self._category_name = category
        self.records: list[RecordedMessage] = [] if records is None else records

    def category(self, name: str) -> RecordingLogStrategy:
        return RecordingLogStrategy(join_category(self._category_name, name), self.records)

    @property
    def messages(self) -> list[str]:
        return [record.message for record in self.records]

    def _record(self, level: LogLevel, msg: str, err: Any = None) -> None:
        self.records.append(RecordedMessage(self._category_name, level, msg, err))

    def clear(self) -> None:
        self.records.clear()

    def verbose(self, msg: str) -> None:
        self._record(LogLevel.VERBOSE, msg)

    def debug(self, msg: str) -> None:
        self._record(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        self._record(LogLevel.INFO, msg)

    def warn(self, msg: str, err: Optional[Any] = None) -> None:
        self._record(LogLevel.WARN, msg, err)

    def error(self, msg: str, err: Optional[Any] = None) -> None:
        self._record(LogLevel.ERROR, msg, err)

    def fatal(self, msg: str, err: Optional[Any] = None) -> None:
        self._record(LogLevel.FATAL, msg, err)
