from __future__ import annotations

from typing import TYPE_CHECKING

from ..levels import LogLevel
from .base import MessageDecoration

if TYPE_CHECKING:
    from ..facade import Logger


class TagArgumentDecoration(MessageDecoration):
    """The decoration every ``Logger`` starts with.

    Prepends the logger's active tag, then substitutes the arguments collected
    along its derivation chain, oldest first. Each argument replaces the first
    remaining occurrence of its placeholder; a placeholder that no longer
    occurs is skipped.
    """

    def __init__(self, priority: int = 0):
        self.priority = priority

    def decorate(self, logger: Logger, level: LogLevel, msg: str) -> str:
        tag = logger.current_tag
        if tag:
            msg = f"{tag}{logger.tag_separator or ''}{msg}"
        for placeholder, value in logger.arguments:
            msg = msg.replace(placeholder, str(value), 1)
        return msg

    def __repr__(self) -> str:
        return f"TagArgumentDecoration(priority={self.priority})"
