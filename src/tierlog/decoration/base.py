from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

from ..levels import LogLevel

if TYPE_CHECKING:
    from ..facade import Logger

DecorateFunc = Callable[["Logger", LogLevel, str], str]


class MessageDecoration(ABC):
    """Transforms a message on its way to the sink.

    ``priority`` is the sort key; lower values are applied earlier.
    """

    priority: int = 0

    @abstractmethod
    def decorate(self, logger: Logger, level: LogLevel, msg: str) -> str:
        """Return the transformed message."""
        ...


class FunctionDecoration(MessageDecoration):
    """Adapts a plain ``func(logger, level, msg) -> str`` to a decoration."""

    def __init__(self, func: DecorateFunc, priority: int = 0):
        self._func = func
        self.priority = priority

    def decorate(self, logger: Logger, level: LogLevel, msg: str) -> str:
        return self._func(logger, level, msg)

    def __repr__(self) -> str:
        name = getattr(self._func, "__name__", repr(self._func))
        return f"FunctionDecoration({name}, priority={self.priority})"
