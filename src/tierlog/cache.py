"""
Category cache.

Maps category names to the sinks returned by ``strategy.category(name)``.
Entries are always derived from the strategy the cache currently serves:
``rebuild`` re-derives them eagerly, and nested caches (used by loggers that
are themselves categories) follow whenever their parent entry changes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Iterator

from .exceptions import CategoryCacheMissError
from .strategy import LogStrategy


class CategoryCache(Mapping[str, LogStrategy]):
    """Read-only mapping view of name -> category sink, plus maintenance ops."""

    def __init__(self) -> None:
        self._entries: dict[str, LogStrategy] = {}
        self._children: dict[str, CategoryCache] = {}

    def __getitem__(self, name: str) -> LogStrategy:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __repr__(self) -> str:
        return f"CategoryCache({sorted(self._entries)!r})"

    def resolve(self, name: str) -> LogStrategy:
        """Return the cached sink for ``name``; a miss is a consistency fault."""
        try:
            return self._entries[name]
        except KeyError:
            raise CategoryCacheMissError(name, sorted(self._entries)) from None

    def fetch(self, strategy: LogStrategy, name: str, use_cache: bool = True) -> LogStrategy:
        """Return the sink for ``name``, asking ``strategy`` on a miss or when ``use_cache`` is off."""
        if use_cache and name in self._entries:
            return self._entries[name]
        sink = strategy.category(name)
        self.store(name, sink)
        return sink

    def store(self, name: str, sink: LogStrategy) -> None:
        """Replace the entry for ``name``; its nested cache is re-derived from ``sink``."""
        nested = self._children.get(name)
        rebuilt = nested.fork(sink) if nested is not None else None
        self._entries[name] = sink
        if rebuilt is not None:
            self._children[name] = rebuilt

    def rebuild(self, strategy: LogStrategy) -> None:
        """Re-derive every entry from ``strategy``.

        All new entries are computed before any is committed; if a sink raises,
        the cache is left as it was.
        """
        rebuilt = self.fork(strategy)
        self._entries = rebuilt._entries
        self._children = rebuilt._children

    def child(self, name: str) -> CategoryCache:
        """The nested cache for category-loggers named ``name``."""
        nested = self._children.get(name)
        if nested is None:
            nested = self._children[name] = CategoryCache()
        return nested

    def fork(self, strategy: LogStrategy) -> CategoryCache:
        """A new cache holding the same names, nested ones included, derived from ``strategy``."""
        forked = CategoryCache()
        for name in self._entries:
            sink = strategy.category(name)
            forked._entries[name] = sink
            nested = self._children.get(name)
            if nested is not None:
                forked._children[name] = nested.fork(sink)
        return forked
