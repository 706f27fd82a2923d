"""
Logger 过滤与分发单元测试

测试级别过滤、统一 log 入口与逐级方法的分发一致性、错误对象透传。
"""

from __future__ import annotations

import pytest

from tierlog import Logger, LogLevel
from tierlog.strategies import RecordedMessage, RecordingLogStrategy

PER_LEVEL = {
    LogLevel.VERBOSE: "verbose",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warn",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
}


class TestFiltering:
    """级别过滤测试"""

    @pytest.mark.parametrize("threshold", list(LogLevel))
    @pytest.mark.parametrize("level", list(LogLevel))
    def test_log_forwarded_iff_enabled(self, threshold: LogLevel, level: LogLevel) -> None:
        """消息级别不比阈值更详细时才转发到 sink"""
        recorder = RecordingLogStrategy()
        logger = Logger(threshold, recorder)
        logger.log(level, "msg")
        assert len(recorder.records) == (1 if level <= threshold else 0)

    @pytest.mark.parametrize("threshold", list(LogLevel))
    @pytest.mark.parametrize("level", list(LogLevel))
    def test_per_level_methods_match_log(self, threshold: LogLevel, level: LogLevel) -> None:
        """warn(...) 与 log(WARN, ...) 的行为完全一致"""
        via_log = RecordingLogStrategy()
        via_method = RecordingLogStrategy()
        Logger(threshold, via_log).log(level, "msg")
        getattr(Logger(threshold, via_method), PER_LEVEL[level])("msg")
        assert via_log.records == via_method.records

    def test_should_log(self) -> None:
        logger = Logger(LogLevel.WARN, RecordingLogStrategy())
        assert logger.should_log(LogLevel.FATAL)
        assert logger.should_log(LogLevel.WARN)
        assert not logger.should_log(LogLevel.INFO)

    def test_suppressed_call_skips_decoration(self, recorder) -> None:
        """被过滤的调用不做任何装饰工作"""
        calls = []

        class Spy:
            priority = 0

            def decorate(self, logger, level, msg):
                calls.append(msg)
                return msg

        logger = Logger(LogLevel.ERROR, recorder, Spy())
        logger.debug("quiet")
        assert calls == []
        assert recorder.records == []

    def test_threshold_change_takes_effect(self, recorder) -> None:
        logger = Logger("info", recorder)
        logger.debug("hidden")
        logger.log_level = "debug"
        logger.debug("shown")
        assert recorder.messages == ["shown"]


class TestDispatch:
    """统一入口与逐级方法的分发"""

    def test_per_level_sink_receives_matching_method(self, logger: Logger, recorder: RecordingLogStrategy) -> None:
        for level in LogLevel:
            logger.log(level, level.name)
        assert [(r.level, r.message) for r in recorder.records] == [(level, level.name) for level in LogLevel]

    def test_unified_sink_called_once(self, unified) -> None:
        """sink 提供统一 log 方法时优先使用它"""
        logger = Logger(LogLevel.VERBOSE, unified)
        err = RuntimeError("boom")
        logger.warn("careful", err)
        logger.info("fine")
        assert unified.calls == [
            ("s1", LogLevel.WARN, "careful", err),
            ("s1", LogLevel.INFO, "fine", None),
        ]

    @pytest.mark.parametrize("method", ["warn", "error", "fatal"])
    def test_error_payload_forwarded_unmodified(self, logger: Logger, recorder, method: str) -> None:
        payload = {"not": "an exception"}
        getattr(logger, method)("msg", payload)
        assert recorder.records[0].error is payload

    @pytest.mark.parametrize("method", ["warn", "error", "fatal"])
    def test_error_payload_optional(self, logger: Logger, recorder, method: str) -> None:
        getattr(logger, method)("msg")
        assert recorder.records[0].error is None

    def test_error_dropped_for_levels_without_error_argument(self, logger: Logger, recorder) -> None:
        """逐级 sink 的 info/debug/verbose 不接收错误对象"""
        logger.log(LogLevel.INFO, "msg", ValueError("ignored"))
        assert recorder.records == [RecordedMessage(None, LogLevel.INFO, "msg", None)]

    def test_logger_as_sink_of_another_logger(self, recorder) -> None:
        """Logger 本身满足 LogStrategy 契约，可作为另一个 Logger 的 sink"""
        inner = Logger(LogLevel.VERBOSE, recorder).tag("inner")
        outer = Logger(LogLevel.INFO, inner).tag("outer")
        outer.info("hello")
        outer.debug("filtered by outer")
        assert recorder.messages == ["inner - outer - hello"]

    def test_category_of_logger_sink(self, recorder) -> None:
        inner = Logger(LogLevel.VERBOSE, recorder)
        outer = Logger(LogLevel.INFO, inner)
        outer.category("db").info("query")
        assert recorder.records[0].category == "db"
