"""
Console formatting and color utilities.
"""

from __future__ import annotations

import traceback
from datetime import datetime, timezone
from typing import Any, Optional

import orjson

from .levels import LogLevel

# =============================================================================
# ANSI Colors
# =============================================================================

COLORS = {
    "reset": "\033[0m",
    "dim": "\033[2m",
    "timestamp": "\033[90m",
    "category": "\033[35m",
}

LEVEL_COLORS = {
    LogLevel.VERBOSE: "\033[2m",
    LogLevel.DEBUG: "\033[36m",
    LogLevel.INFO: "\033[32m",
    LogLevel.WARN: "\033[33m",
    LogLevel.ERROR: "\033[31m",
    LogLevel.FATAL: "\033[1;31m",
}


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


# =============================================================================
# Error rendering
# =============================================================================


def describe_error(err: Any) -> Optional[str]:
    """One-line description of an error payload, or None when there is none."""
    if err is None:
        return None
    if isinstance(err, BaseException):
        return f"{type(err).__name__}: {err}"
    return str(err)


def format_exc_text(err: Any) -> Optional[str]:
    """Formatted traceback for an exception that carries one."""
    if isinstance(err, BaseException) and err.__traceback__ is not None:
        return "".join(traceback.format_exception(type(err), err, err.__traceback__)).rstrip()
    return None


def orjson_dumps(v: Any, *, default: Any = None) -> str:
    """Fast JSON serialization using orjson."""
    return orjson.dumps(v, default=default, option=orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC).decode()


def render_json(level: LogLevel, msg: str, category: Optional[str], err: Any) -> str:
    """One JSON object per message, as written by the json and file sinks."""
    payload: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "level": level.name,
        "category": category,
        "message": msg,
    }
    error = describe_error(err)
    if error is not None:
        payload["error"] = error
        exc_text = format_exc_text(err)
        if exc_text is not None:
            payload["exc_info"] = exc_text
    return orjson_dumps(payload, default=str)


def render_plain(msg: str, err: Any) -> str:
    error = describe_error(err)
    return msg if error is None else f"{msg} {error}"


# =============================================================================
# Console Formatter (Aligned Columns)
# =============================================================================


class ConsoleFormatter:
    """Human-readable console rendering: ``timestamp | LEVEL | category | message``."""

    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
    TIMESTAMP_WIDTH = 19
    LEVEL_WIDTH = 7
    CATEGORY_WIDTH = 24
    SEPARATOR = " | "
    ROOT_CATEGORY = "root"

    @classmethod
    def configure(
        cls,
        *,
        timestamp_format: str | None = None,
        level_width: int | None = None,
        category_width: int | None = None,
        separator: str | None = None,
    ) -> None:
        """Configure alignment and rendering parameters."""
        if timestamp_format:
            cls.TIMESTAMP_FORMAT = timestamp_format
            cls.TIMESTAMP_WIDTH = len(datetime.now().strftime(timestamp_format))
        if level_width:
            cls.LEVEL_WIDTH = level_width
        if category_width:
            cls.CATEGORY_WIDTH = category_width
        if separator is not None:
            cls.SEPARATOR = separator

    @staticmethod
    def _fit_right(text: str, width: int) -> str:
        if width <= 0:
            return text
        if len(text) > width:
            if width <= 3:
                text = text[-width:]
            else:
                text = "..." + text[-(width - 3) :]
        return f"{text:>{width}}"

    @staticmethod
    def _maybe_color(text: str, color: str, use_color: bool) -> str:
        if not use_color:
            return text
        return colorize(text, color)

    @classmethod
    def format(
        cls,
        level: LogLevel,
        msg: str,
        *,
        category: Optional[str] = None,
        err: Any = None,
        use_color: bool = True,
    ) -> str:
        """Format one message into an aligned line (plus traceback, if any)."""
        timestamp = datetime.now().strftime(cls.TIMESTAMP_FORMAT)

        level_text = cls._fit_right(level.name, cls.LEVEL_WIDTH)
        if use_color:
            level_text = f"{LEVEL_COLORS[level]}{level_text}{COLORS['reset']}"

        message_text = msg
        error = describe_error(err)
        if error is not None:
            message_text = f"{message_text} " + cls._maybe_color(f"error={error}", "dim", use_color)

        line = "".join(
            [
                cls._maybe_color(cls._fit_right(timestamp, cls.TIMESTAMP_WIDTH), "timestamp", use_color),
                cls.SEPARATOR,
                level_text,
                cls.SEPARATOR,
                cls._maybe_color(
                    cls._fit_right(category or cls.ROOT_CATEGORY, cls.CATEGORY_WIDTH),
                    "category",
                    use_color,
                ),
                cls.SEPARATOR,
                message_text,
            ]
        )

        exc_text = format_exc_text(err)
        if exc_text is not None:
            line = f"{line}\n{exc_text}"
        return line
