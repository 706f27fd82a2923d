"""
Default logger wiring.

The process-wide logger is created lazily on first use from ``LoggingSettings``
and lives for the rest of the process. ``configure_logging`` mutates it in
place, so code holding a reference keeps working after reconfiguration.
"""

from __future__ import annotations

from typing import Optional

from .config import LoggingSettings
from .decoration import MessageDecoration
from .exceptions import ConfigurationError
from .formatters import ConsoleFormatter
from .facade import Logger
from .strategies import ConsoleLogStrategy, FanoutLogStrategy, FileLogStrategy, StructlogLogStrategy
from .strategy import LogStrategy

# =============================================================================
# Global State
# =============================================================================

_default_logger: Optional[Logger] = None

SINK_NAMES = ("console", "file", "structlog")


def get_logger() -> Logger:
    """Return the process-wide default logger, creating it on first call."""
    global _default_logger
    if _default_logger is None:
        _default_logger = create_logger()
    return _default_logger


# =============================================================================
# Construction
# =============================================================================


def build_strategy(settings: LoggingSettings) -> LogStrategy:
    """Create the sink(s) requested by ``settings.sinks``."""
    ConsoleFormatter.configure(
        timestamp_format=settings.console_timestamp_format,
        level_width=settings.console_level_width,
        category_width=settings.console_category_width,
        separator=settings.console_separator,
    )

    strategies: list[LogStrategy] = []
    for name in settings.sink_names:
        if name == "console":
            strategies.append(ConsoleLogStrategy(fmt=settings.format.value, use_color=settings.color))
        elif name == "file":
            strategies.append(FileLogStrategy(settings.file_path))
        elif name == "structlog":
            strategies.append(StructlogLogStrategy(name=settings.structlog_name))
        else:
            raise ConfigurationError(f"Unknown sink: {name!r}", sink=name, allowed=list(SINK_NAMES))

    if not strategies:
        raise ConfigurationError("At least one sink is required", sinks=settings.sinks)
    if len(strategies) == 1:
        return strategies[0]
    return FanoutLogStrategy(*strategies)


def create_logger(settings: Optional[LoggingSettings] = None, *decorations: MessageDecoration) -> Logger:
    """Create a new root logger from settings (environment defaults if omitted)."""
    settings = settings or LoggingSettings()
    return Logger(settings.level, build_strategy(settings), *decorations)


# =============================================================================
# Configuration Logic
# =============================================================================


def _close(strategy: LogStrategy) -> None:
    if isinstance(strategy, FanoutLogStrategy):
        for child in strategy.strategies:
            _close(child)
    elif isinstance(strategy, FileLogStrategy):
        strategy.close()


def configure_logging(
    *,
    level: str = "INFO",
    sinks: str = "console",
    fmt: str = "console",
    color: Optional[bool] = None,
    file_path: str = "logs/tierlog.log",
    structlog_name: str = "tierlog",
) -> Logger:
    """
    Reconfigure the default logger in place.

    Assigning the new strategy rebuilds the logger's category cache, so
    category-loggers already handed out write to the new sinks.

    Args:
        level: Severity threshold (FATAL, ERROR, WARN, INFO, DEBUG, VERBOSE)
        sinks: Comma-separated sink names (console, file, structlog)
        fmt: Output format for the console sink (plain, console, json)
        color: Force ANSI colors on/off for the console sink
        file_path: Path for file sink
        structlog_name: Logger name for the structlog sink
    """
    settings = LoggingSettings(
        level=level,
        sinks=sinks,
        format=fmt,
        color=color,
        file_path=file_path,
        structlog_name=structlog_name,
    )
    strategy = build_strategy(settings)

    logger = get_logger()
    previous = logger.strategy
    logger.log_level = settings.level
    logger.strategy = strategy
    _close(previous)
    return logger
