"""
严重级别单元测试

测试级别全序、阈值判断与名称解析。
"""

from __future__ import annotations

import logging

import pytest

from tierlog import ConfigurationError, LogLevel, parse_level
from tierlog.levels import from_stdlib_level, is_enabled, to_stdlib_level


class TestLevelOrder:
    """级别全序测试"""

    def test_more_verbose_is_greater(self) -> None:
        """越详细的级别数值越大"""
        ordered = [LogLevel.FATAL, LogLevel.ERROR, LogLevel.WARN, LogLevel.INFO, LogLevel.DEBUG, LogLevel.VERBOSE]
        assert sorted(LogLevel) == ordered

    @pytest.mark.parametrize("threshold", list(LogLevel))
    @pytest.mark.parametrize("level", list(LogLevel))
    def test_is_enabled(self, threshold: LogLevel, level: LogLevel) -> None:
        assert is_enabled(threshold, level) == (level <= threshold)


class TestParseLevel:
    """级别解析测试"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (LogLevel.DEBUG, LogLevel.DEBUG),
            (3, LogLevel.INFO),
            ("verbose", LogLevel.VERBOSE),
            (" Error ", LogLevel.ERROR),
            ("WARNING", LogLevel.WARN),
            ("critical", LogLevel.FATAL),
            ("trace", LogLevel.VERBOSE),
        ],
    )
    def test_accepted_values(self, value, expected: LogLevel) -> None:
        assert parse_level(value) is expected

    @pytest.mark.parametrize("value", ["loud", 9, -1])
    def test_unknown_values_raise(self, value) -> None:
        """未知级别应抛出 ConfigurationError"""
        with pytest.raises(ConfigurationError) as exc_info:
            parse_level(value)
        assert exc_info.value.code == "INVALID_CONFIGURATION"


class TestStdlibMapping:
    """与标准库 logging 级别的映射"""

    @pytest.mark.parametrize(
        "levelno, expected",
        [
            (logging.CRITICAL, LogLevel.FATAL),
            (logging.ERROR, LogLevel.ERROR),
            (logging.WARNING, LogLevel.WARN),
            (logging.INFO, LogLevel.INFO),
            (logging.DEBUG, LogLevel.DEBUG),
            (5, LogLevel.VERBOSE),
        ],
    )
    def test_from_stdlib(self, levelno: int, expected: LogLevel) -> None:
        assert from_stdlib_level(levelno) is expected

    @pytest.mark.parametrize("level", list(LogLevel))
    def test_round_trip_through_stdlib(self, level: LogLevel) -> None:
        assert from_stdlib_level(to_stdlib_level(level)) is level
