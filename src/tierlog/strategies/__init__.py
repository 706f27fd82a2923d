"""
Bundled log strategies (sinks).

- console: stdout/stderr in plain, aligned console or JSON format
- file: JSON lines, one file per category
- structlog: forwards to a structlog logger
- recording: keeps messages in memory
- fanout: delivers to several sinks at once
"""

from .console import ConsoleFormat, ConsoleLogStrategy
from .fanout import FanoutLogStrategy
from .file import FileLogStrategy
from .recording import RecordedMessage, RecordingLogStrategy
from .structured import StructlogLogStrategy

__all__ = [
    "ConsoleFormat",
    "ConsoleLogStrategy",
    "FanoutLogStrategy",
    "FileLogStrategy",
    "RecordedMessage",
    "RecordingLogStrategy",
    "StructlogLogStrategy",
]
