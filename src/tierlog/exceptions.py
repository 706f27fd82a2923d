"""
Tierlog exception hierarchy.

Configuration mistakes and internal-consistency faults are kept apart so callers
can tell "you passed something wrong" from "this must never happen".
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class TierlogError(Exception):
    """Base class for every error raised by tierlog."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ConfigurationError(TierlogError, ValueError):
    """Raised for unknown level names, sink names or output formats."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message, code="INVALID_CONFIGURATION", details=details)


class CategoryCacheMissError(TierlogError):
    """A category-logger looked up a name its cache does not hold.

    The cache is populated before a category-logger is handed out and rebuilt
    eagerly on every strategy change, so reaching this is a bug in tierlog.
    """

    def __init__(self, name: str, known: Optional[list[str]] = None) -> None:
        super().__init__(
            f"Category {name!r} is missing from the category cache",
            code="CATEGORY_CACHE_MISS",
            details={"name": name, "known": known or []},
        )
        self.name = name
