from __future__ import annotations

from typing import TYPE_CHECKING

from ..levels import LogLevel
from .base import MessageDecoration

if TYPE_CHECKING:
    from ..facade import Logger

LEVEL_COLUMN_WIDTH = 10


class LogLevelMessageDecoration(MessageDecoration):
    """Prefixes the level name in a fixed-width column: ``"WARN      msg"``."""

    def __init__(self, priority: int = 0, width: int = LEVEL_COLUMN_WIDTH):
        self.priority = priority
        self._width = width

    def decorate(self, logger: Logger, level: LogLevel, msg: str) -> str:
        return f"{level.name.ljust(self._width)}{msg}"
