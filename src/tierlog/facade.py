"""
Leveled logging facade.

A ``Logger`` filters messages by severity, runs them through an ordered list of
decorations, and forwards the result to its ``LogStrategy``. ``tag``,
``add_argument`` and ``category`` return derived loggers: small views that hold
a reference to the logger they came from plus the one field they override.
Deriving never changes the logger it was derived from.

Usage:
    from tierlog import LogLevel, Logger
    from tierlog.strategies import ConsoleLogStrategy

    logger = Logger(LogLevel.INFO, ConsoleLogStrategy())
    logger.tag("DB").add_argument(42).info("id={}")   # "DB - id=42"
    logger.category("http").warn("slow response", err)

Derived loggers are meant to be used right away and dropped; ask for a new one
after changing the root's strategy or decorations.
"""

from __future__ import annotations

from bisect import insort_right
from typing import Any, Iterable, Optional

from .cache import CategoryCache
from .decoration import MessageDecoration, TagArgumentDecoration
from .exceptions import TierlogError
from .levels import LogLevel, is_enabled, parse_level
from .strategy import LogStrategy, UnifiedLogStrategy, dispatch


def _priority_of(decoration: MessageDecoration) -> int:
    return getattr(decoration, "priority", 0) or 0


class Logger(UnifiedLogStrategy):
    """Severity filter, decoration pipeline and category cache in front of a sink.

    Args:
        log_level: Threshold; messages at this level or more severe are emitted.
        strategy: The sink that receives decorated messages.
        *decorations: Extra decorations, added after the built-in tag/argument one.
    """

    def __init__(
        self,
        log_level: LogLevel | int | str,
        strategy: LogStrategy,
        *decorations: MessageDecoration,
    ):
        self._parent: Optional[Logger] = None
        self._log_level: Optional[LogLevel] = parse_level(log_level)
        self._strategy: Optional[LogStrategy] = strategy
        self._category_name: Optional[str] = None
        # Set only on loggers that own a cache: roots and loggers given their own strategy.
        self._category_cache: Optional[CategoryCache] = CategoryCache()
        self._tag: Optional[str] = None
        self._tag_separator: Optional[str] = None
        self._argument: Optional[tuple[str, Any]] = None
        self._decorations: list[MessageDecoration] = []

        self.add_decoration(TagArgumentDecoration())
        for decoration in decorations:
            self.add_decoration(decoration)

    # =========================================================================
    # Derivation
    # =========================================================================

    def _derive(self) -> Logger:
        cls = type(self)
        child = cls.__new__(cls)
        child._parent = self
        child._log_level = None
        child._strategy = None
        child._category_name = None
        child._category_cache = None
        child._tag = None
        child._tag_separator = None
        child._argument = None
        child._decorations = list(self._decorations)
        return child

    def _ancestor(self) -> Logger:
        if self._parent is None:
            raise TierlogError(
                "Logger has neither its own state nor a parent to inherit it from",
                code="ORPHANED_LOGGER",
            )
        return self._parent

    def tag(self, text: str, separator: str = " - ") -> Logger:
        """Derive a logger whose messages are prefixed with ``text + separator``.

        Only one tag is active: tagging an already tagged logger replaces it.
        """
        child = self._derive()
        child._tag = text
        child._tag_separator = separator
        return child

    def add_argument(self, value: Any, placeholder: str = "{}") -> Logger:
        """Derive a logger that replaces the next ``placeholder`` with ``value``.

        Chained arguments are substituted in the order they were added, each one
        consuming one occurrence.
        """
        child = self._derive()
        child._argument = (placeholder, value)
        return child

    def category(self, name: str, use_cache: bool = True) -> Logger:
        """Derive a logger writing to ``strategy.category(name)``.

        The category sink is cached under ``name``. The derived logger looks it
        up on every message, so a later strategy change on this logger is seen
        by category-loggers already handed out.
        """
        self.category_cache.fetch(self.strategy, name, use_cache)
        child = self._derive()
        child._category_name = name
        return child

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def parent(self) -> Optional[Logger]:
        return self._parent

    @property
    def log_level(self) -> LogLevel:
        if self._log_level is not None:
            return self._log_level
        return self._ancestor().log_level

    @log_level.setter
    def log_level(self, level: LogLevel | int | str) -> None:
        self._log_level = parse_level(level)

    @property
    def strategy(self) -> LogStrategy:
        if self._strategy is not None:
            return self._strategy
        if self._category_name is not None:
            return self._ancestor().category_cache.resolve(self._category_name)
        return self._ancestor().strategy

    @strategy.setter
    def strategy(self, strategy: LogStrategy) -> None:
        if self._category_cache is not None:
            self._category_cache.rebuild(strategy)
            self._strategy = strategy
            return
        # A derived logger with its own sink stops sharing its ancestor's cache.
        forked = self.category_cache.fork(strategy)
        self._strategy = strategy
        self._category_name = None
        self._category_cache = forked

    @property
    def category_cache(self) -> CategoryCache:
        """The cache this logger's categories go through, resolved from its ancestors."""
        if self._category_cache is not None:
            return self._category_cache
        inherited = self._ancestor().category_cache
        if self._category_name is not None:
            return inherited.child(self._category_name)
        return inherited

    @property
    def category_name(self) -> Optional[str]:
        return self._category_name

    @property
    def decorations(self) -> tuple[MessageDecoration, ...]:
        return tuple(self._decorations)

    def _tagged(self) -> Optional[Logger]:
        node: Optional[Logger] = self
        while node is not None:
            if node._tag is not None:
                return node
            node = node._parent
        return None

    @property
    def current_tag(self) -> Optional[str]:
        node = self._tagged()
        return node._tag if node is not None else None

    @property
    def tag_separator(self) -> Optional[str]:
        node = self._tagged()
        return node._tag_separator if node is not None else None

    @property
    def arguments(self) -> list[tuple[str, Any]]:
        """``(placeholder, value)`` pairs, most distant ancestor first."""
        chain = []
        node: Optional[Logger] = self
        while node is not None:
            if node._argument is not None:
                chain.append(node._argument)
            node = node._parent
        chain.reverse()
        return chain

    # =========================================================================
    # Decorations
    # =========================================================================

    def add_decoration(self, decoration: MessageDecoration) -> Logger:
        """Insert ``decoration`` by priority, after any existing ones of equal priority."""
        insort_right(self._decorations, decoration, key=_priority_of)
        return self

    def add_decorations(self, decorations: Iterable[MessageDecoration]) -> Logger:
        for decoration in decorations:
            self.add_decoration(decoration)
        return self

    def clear_decorations(self) -> Logger:
        """Remove every decoration, the built-in tag/argument one included."""
        self._decorations.clear()
        return self

    def decorate_msg(self, level: LogLevel, msg: str) -> str:
        for decoration in self._decorations:
            msg = decoration.decorate(self, level, msg)
        return msg

    # =========================================================================
    # Logging
    # =========================================================================

    def should_log(self, level: LogLevel) -> bool:
        return is_enabled(self.log_level, level)

    def log(self, level: LogLevel | int | str, msg: str, err: Optional[Any] = None) -> None:
        level = parse_level(level)
        if not self.should_log(level):
            return
        dispatch(self.strategy, level, self.decorate_msg(level, msg), err)

    def __repr__(self) -> str:
        parts = [f"level={self.log_level.name}"]
        if self._category_name is not None:
            parts.append(f"category={self._category_name!r}")
        tag = self.current_tag
        if tag:
            parts.append(f"tag={tag!r}")
        if self._parent is not None:
            parts.append("derived")
        return f"Logger({', '.join(parts)})"
