"""
Message decorations.

A decoration is one step of the pipeline a message passes through before it
reaches the sink. Decorations run in ascending ``priority``; ties keep the
order in which they were added.
"""

from .base import FunctionDecoration, MessageDecoration
from .level import LogLevelMessageDecoration
from .tag import TagArgumentDecoration

__all__ = [
    "FunctionDecoration",
    "LogLevelMessageDecoration",
    "MessageDecoration",
    "TagArgumentDecoration",
]
