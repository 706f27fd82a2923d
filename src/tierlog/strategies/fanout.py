from __future__ import annotations

from typing import Any, Optional

from ..levels import LogLevel
from ..strategy import LogStrategy, UnifiedLogStrategy, dispatch


class FanoutLogStrategy(UnifiedLogStrategy):
    """Delivers every message to several sinks.

    A failing sink does not stop delivery to the others; the first failure is
    re-raised once all sinks have been tried.
    """

    def __init__(self, *strategies: LogStrategy):
        self._strategies = tuple(strategies)

    @property
    def strategies(self) -> tuple[LogStrategy, ...]:
        return self._strategies

    def category(self, name: str) -> FanoutLogStrategy:
        return FanoutLogStrategy(*(strategy.category(name) for strategy in self._strategies))

    def log(self, level: LogLevel, msg: str, err: Optional[Any] = None) -> None:
        failure: Optional[Exception] = None
        for strategy in self._strategies:
            try:
                dispatch(strategy, level, msg, err)
            except Exception as exc:
                if failure is None:
                    failure = exc
        if failure is not None:
            raise failure
