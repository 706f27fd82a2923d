from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, TextIO

from ..formatters import render_json
from ..levels import LogLevel
from ..strategy import UnifiedLogStrategy, join_category


class FileLogStrategy(UnifiedLogStrategy):
    """Local file sink (JSON lines).

    The base sink writes to ``path``; category ``name`` writes to
    ``<stem>.<name><suffix>`` in the same directory. Files are opened on first
    write and shared by every sink derived from the same base.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        category: Optional[str] = None,
        _handles: Optional[dict[Path, TextIO]] = None,
    ):
        self._path = Path(path)
        self._category_name = category
        self._handles: dict[Path, TextIO] = {} if _handles is None else _handles

    @property
    def path(self) -> Path:
        return self._path

    def category(self, name: str) -> FileLogStrategy:
        path = self._path.with_name(f"{self._path.stem}.{name}{self._path.suffix}")
        return FileLogStrategy(
            path,
            category=join_category(self._category_name, name),
            _handles=self._handles,
        )

    def _file(self) -> TextIO:
        handle = self._handles.get(self._path)
        if handle is None or handle.closed:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            handle = self._handles[self._path] = open(self._path, "a", encoding="utf-8")
        return handle

    def log(self, level: LogLevel, msg: str, err: Optional[Any] = None) -> None:
        handle = self._file()
        handle.write(render_json(level, msg, self._category_name, err) + "\n")
        handle.flush()

    def close(self) -> None:
        """Close every file opened by this sink family."""
        for handle in self._handles.values():
            handle.close()
        self._handles.clear()
