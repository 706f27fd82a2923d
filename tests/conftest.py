import typing as t

import pytest

import tierlog.core as tierlog_core
from tierlog import Logger, LogLevel, UnifiedLogStrategy
from tierlog.strategies import RecordingLogStrategy


class UnifiedRecorder(UnifiedLogStrategy):
    """统一 log 入口的测试 sink

    每次 category() 都返回新对象，label 记录其来源，便于断言缓存是否过期。
    """

    def __init__(self, label: str = "root", calls: t.Optional[list] = None, category_calls: t.Optional[list] = None):
        self.label = label
        self.calls: list[tuple[str, LogLevel, str, t.Any]] = [] if calls is None else calls
        self.category_calls: list[str] = [] if category_calls is None else category_calls

    def category(self, name: str) -> "UnifiedRecorder":
        self.category_calls.append(name)
        return UnifiedRecorder(f"{self.label}/{name}", self.calls, self.category_calls)

    def log(self, level: LogLevel, msg: str, err: t.Any = None) -> None:
        self.calls.append((self.label, level, msg, err))

    @property
    def messages(self) -> list[str]:
        return [call[2] for call in self.calls]

    @property
    def labels(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def recorder() -> RecordingLogStrategy:
    return RecordingLogStrategy()


@pytest.fixture
def unified() -> UnifiedRecorder:
    return UnifiedRecorder("s1")


@pytest.fixture
def logger(recorder: RecordingLogStrategy) -> Logger:
    return Logger(LogLevel.VERBOSE, recorder)


@pytest.fixture
def reset_default_logger(monkeypatch):
    """隔离进程级默认 logger 与 TIERLOG_ 环境变量"""
    monkeypatch.setattr(tierlog_core, "_default_logger", None)
    for var in ("TIERLOG_LEVEL", "TIERLOG_SINKS", "TIERLOG_FORMAT", "TIERLOG_COLOR", "TIERLOG_FILE_PATH"):
        monkeypatch.delenv(var, raising=False)
    yield
    monkeypatch.setattr(tierlog_core, "_default_logger", None)


@pytest.fixture
def make_unified() -> t.Callable[..., UnifiedRecorder]:
    return UnifiedRecorder
