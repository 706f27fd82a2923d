"""
FileLogStrategy 单元测试
"""

from __future__ import annotations

import orjson

from tierlog import Logger, LogLevel
from tierlog.strategies import FileLogStrategy


def read_lines(path) -> list[dict]:
    return [orjson.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


class TestFileLogStrategy:
    """JSON 行文件输出"""

    def test_writes_json_lines(self, tmp_path) -> None:
        path = tmp_path / "logs" / "app.log"
        sink = FileLogStrategy(path)
        sink.info("first")
        sink.error("second", "opaque")
        sink.close()
        entries = read_lines(path)
        assert [(e["level"], e["message"]) for e in entries] == [("INFO", "first"), ("ERROR", "second")]
        assert entries[1]["error"] == "opaque"
        assert entries[0]["category"] is None

    def test_lazy_open(self, tmp_path) -> None:
        """在第一次写入前不创建文件"""
        path = tmp_path / "app.log"
        sink = FileLogStrategy(path)
        sink.category("db")
        assert not path.exists()
        assert not (tmp_path / "app.db.log").exists()

    def test_category_files(self, tmp_path) -> None:
        sink = FileLogStrategy(tmp_path / "app.log")
        logger = Logger(LogLevel.INFO, sink)
        logger.info("root")
        logger.category("db").info("query")
        logger.category("db").category("pool").warn("busy")
        sink.close()
        assert read_lines(tmp_path / "app.log")[0]["message"] == "root"
        db_entry = read_lines(tmp_path / "app.db.log")[0]
        assert (db_entry["category"], db_entry["message"]) == ("db", "query")
        pool_entry = read_lines(tmp_path / "app.db.pool.log")[0]
        assert pool_entry["category"] == "db.pool"

    def test_handles_shared_within_family(self, tmp_path) -> None:
        sink = FileLogStrategy(tmp_path / "app.log")
        sink.category("db").info("a")
        sink.category("db").info("b")
        sink.close()
        assert [e["message"] for e in read_lines(tmp_path / "app.db.log")] == ["a", "b"]

    def test_reopen_after_close(self, tmp_path) -> None:
        path = tmp_path / "app.log"
        sink = FileLogStrategy(path)
        sink.info("one")
        sink.close()
        sink.info("two")
        sink.close()
        assert [e["message"] for e in read_lines(path)] == ["one", "two"]
