from __future__ import annotations

import sys
from typing import Any, Literal, Optional, TextIO

from ..exceptions import ConfigurationError
from ..formatters import ConsoleFormatter, render_json, render_plain
from ..levels import LogLevel
from ..strategy import UnifiedLogStrategy, join_category

ConsoleFormat = Literal["plain", "console", "json"]

_FORMATS = ("plain", "console", "json")


class ConsoleLogStrategy(UnifiedLogStrategy):
    """Standard I/O sink with configurable format.

    WARN, ERROR and FATAL go to ``error_stream``; everything else to ``stream``.

    Args:
        fmt: "plain" (message only), "console" (aligned columns) or "json"
        stream: Output stream for INFO and below (default: stdout)
        error_stream: Output stream for WARN and above (default: stderr)
        use_color: Force ANSI colors on/off; None detects a TTY
        category: Dotted category label shown in console/json output
    """

    def __init__(
        self,
        fmt: ConsoleFormat = "console",
        stream: Optional[TextIO] = None,
        error_stream: Optional[TextIO] = None,
        use_color: Optional[bool] = None,
        category: Optional[str] = None,
    ):
        if fmt not in _FORMATS:
            raise ConfigurationError(f"Unknown console format: {fmt!r}", format=fmt, allowed=list(_FORMATS))
        self._fmt = fmt
        self._stream = stream
        self._error_stream = error_stream
        self._use_color = use_color
        self._category_name = category

    @property
    def category_name(self) -> Optional[str]:
        return self._category_name

    def category(self, name: str) -> ConsoleLogStrategy:
        return ConsoleLogStrategy(
            fmt=self._fmt,
            stream=self._stream,
            error_stream=self._error_stream,
            use_color=self._use_color,
            category=join_category(self._category_name, name),
        )

    def _target(self, level: LogLevel) -> TextIO:
        # sys.stdout and sys.stderr may be swapped after construction.
        if level <= LogLevel.WARN:
            return self._error_stream or sys.stderr
        return self._stream or sys.stdout

    def log(self, level: LogLevel, msg: str, err: Optional[Any] = None) -> None:
        stream = self._target(level)
        if self._fmt == "json":
            output = render_json(level, msg, self._category_name, err)
        elif self._fmt == "plain":
            output = render_plain(msg, err)
        else:
            use_color = self._use_color
            if use_color is None:
                use_color = bool(getattr(stream, "isatty", lambda: False)())
            output = ConsoleFormatter.format(level, msg, category=self._category_name, err=err, use_color=use_color)

        stream.write(output + "\n")
        stream.flush()
