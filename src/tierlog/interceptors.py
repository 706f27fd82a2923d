"""
Interceptors for routing standard library logs through a tierlog ``Logger``.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .facade import Logger
from .levels import LogLevel, from_stdlib_level, parse_level, to_stdlib_level


class TierlogHandler(logging.Handler):
    """
    Redirect standard library logging records to a tierlog logger.

    Each record goes to ``logger.category(<simplified record name>)`` so the
    sink can separate third-party output by origin. Records from loggers whose
    name contains one of ``skip_names`` are dropped: with the structlog sink on
    a stdlib logger factory they would come straight back here.
    """

    def __init__(
        self,
        logger: Logger,
        level: int = logging.NOTSET,
        skip_names: Iterable[str] = ("structlog", "tierlog"),
    ):
        super().__init__(level)
        self.logger = logger
        self.skip_names = tuple(skip_names)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            if any(name in record.name for name in self.skip_names):
                return

            # getMessage, not format: the exception travels separately as err
            msg = record.getMessage()
            category = self._simplify_logger_name(record.name)
            err = record.exc_info[1] if record.exc_info else None
            self.logger.category(category).log(from_stdlib_level(record.levelno), msg, err)
        except Exception:
            self.handleError(record)

    @staticmethod
    def _simplify_logger_name(name: str) -> str:
        """
        Simplify a logger name for display.

        Rules:
        - "" or "root" -> "stdlib"
        - "uvicorn.access" -> "uvicorn.access"
        - Other -> keep last 2 parts
        """
        if not name or name == "root":
            return "stdlib"
        parts = name.split(".")
        if len(parts) <= 2:
            return name
        return ".".join(parts[-2:])


def intercept_stdlib_logging(
    logger: Logger,
    level: LogLevel | int | str = LogLevel.INFO,
    loggers: Iterable[str] = (),
) -> TierlogHandler:
    """Install a ``TierlogHandler`` on the stdlib root logger.

    Handlers of the named ``loggers`` are removed so their records propagate
    to the root. Returns the installed handler.
    """
    threshold = parse_level(level)
    handler = TierlogHandler(logger)

    root_logger = logging.getLogger()
    root_logger.handlers = [h for h in root_logger.handlers if not isinstance(h, TierlogHandler)]
    root_logger.setLevel(to_stdlib_level(threshold))
    root_logger.addHandler(handler)

    for name in loggers:
        lg = logging.getLogger(name)
        lg.handlers = []
        lg.propagate = True

    return handler

