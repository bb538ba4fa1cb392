"""Options and file logging."""

import pytest

from mini_dbase.engine import log as dblog
from mini_dbase.engine.config import DbaseOptions, WHERE_IGNORE, WHERE_REJECT
from mini_dbase.engine.database import Database


def test_default_options():
    opts = DbaseOptions()
    assert opts.where_clause == WHERE_IGNORE
    assert opts.decode_hex_bytes is False
    assert opts.allow_trailing_semicolon is True
    assert opts.implicit_empty_bytes is True


def test_invalid_where_policy():
    with pytest.raises(ValueError):
        DbaseOptions(where_clause="filter")


def test_options_from_env():
    opts = DbaseOptions.from_env({"MINI_DBASE_WHERE": "Reject", "MINI_DBASE_DECODE_HEX": "1"})
    assert opts.where_clause == WHERE_REJECT
    assert opts.decode_hex_bytes is True
    assert DbaseOptions.from_env({}) == DbaseOptions()


def test_options_frozen():
    with pytest.raises(Exception):
        DbaseOptions().where_clause = WHERE_REJECT


def test_file_log(tmp_path):
    path = tmp_path / "db.log"
    try:
        used = dblog.enable_log(str(path))
        assert used == str(path)
        # 重复开启不会再挂第二个 handler
        assert dblog.enable_log(str(tmp_path / "other.log")) == str(path)
        db = Database()
        db.create_table_from_text("CREATE TABLE t (a: int32)")
        db.insert("INSERT (1) TO t")
        db.select("SELECT a FROM t WHERE a = 1")
    finally:
        dblog.disable_log()
    text = path.read_text(encoding="utf-8")
    assert "table t created" in text
    assert "insert into t" in text
    assert "WHERE clause ignored" in text
    assert not (tmp_path / "other.log").exists()


def test_disable_log_without_enable():
    dblog.disable_log()
    assert dblog.get_logger().name == "mini_dbase"
    assert dblog.get_logger("table").name == "mini_dbase.table"
