from __future__ import annotations

from typing import Any, Optional

import structlog

from ..levels import LogLevel
from ..strategy import UnifiedLogStrategy, join_category

_METHODS = {
    LogLevel.VERBOSE: "debug",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "critical",
}


class StructlogLogStrategy(UnifiedLogStrategy):
    """Forwards decorated messages to a structlog logger.

    Categories are bound as the ``category`` key; exceptions travel as
    ``exc_info`` so structlog's exception processors can render them.
    """

    def __init__(self, bound_logger: Any = None, name: str = "tierlog", category: Optional[str] = None):
        self._logger = bound_logger if bound_logger is not None else structlog.get_logger(name)
        self._category_name = category

    @property
    def bound_logger(self) -> Any:
        return self._logger

    def category(self, name: str) -> StructlogLogStrategy:
        path = join_category(self._category_name, name)
        return StructlogLogStrategy(self._logger.bind(category=path), category=path)

    def log(self, level: LogLevel, msg: str, err: Optional[Any] = None) -> None:
        method = getattr(self._logger, _METHODS[level])
        if err is None:
            method(msg, tierlog_level=level.name)
        elif isinstance(err, BaseException):
            method(msg, tierlog_level=level.name, exc_info=err)
        else:
            method(msg, tierlog_level=level.name, error=err)
