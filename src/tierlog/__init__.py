"""
Tierlog: a leveled logging facade.

Application code logs through a ``Logger``, which filters by severity, runs
the message through its decorations (tag, arguments, level prefix, ...) and
hands it to a pluggable ``LogStrategy`` sink. Sinks can be split into named
categories; category sinks are cached and follow the logger when its sink is
swapped at runtime.

Design Pattern: Strategy Pattern for sink abstraction.
Library: structlog + orjson for the bundled sinks, pydantic-settings for config.

Usage:
    from tierlog import logger

    logger.info("ready")
    logger.tag("DB").add_argument(42).info("id={}")
"""

from .core import configure_logging, create_logger, get_logger
from .decoration import FunctionDecoration, LogLevelMessageDecoration, MessageDecoration, TagArgumentDecoration
from .exceptions import CategoryCacheMissError, ConfigurationError, TierlogError
from .levels import LogLevel, parse_level
from .facade import Logger
from .strategy import LogStrategy, UnifiedLogStrategy


def __getattr__(name: str):
    if name == "logger":
        return get_logger()
    raise AttributeError(f"module 'tierlog' has no attribute {name}")


__all__ = [
    "CategoryCacheMissError",
    "ConfigurationError",
    "FunctionDecoration",
    "LogLevel",
    "LogLevelMessageDecoration",
    "LogStrategy",
    "Logger",
    "MessageDecoration",
    "TagArgumentDecoration",
    "TierlogError",
    "UnifiedLogStrategy",
    "configure_logging",
    "create_logger",
    "get_logger",
    "logger",
    "parse_level",
]
