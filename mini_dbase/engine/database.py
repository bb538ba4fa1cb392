# engine/database.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Dict, List, Optional, Union

from ..sql.ast_nodes import CreateTableStatement
from ..sql.ddl_parser import parse_create_table
from ..sql.dml_parser import DmlParser
from ..sql.lexer import Scanner
from ..sql.semantic import SemanticAnalyzer
from .config import DbaseOptions, DEFAULT_OPTIONS, WHERE_REJECT
from .errors import DuplicateTableError, TableNotFoundError, UnsupportedFeatureError
from .log import get_logger
from .table import Table
from .values import Row

logger = get_logger("database")

# 能识别但不实现的语句
UNSUPPORTED_STATEMENTS = ("update", "delete", "drop", "alter", "begin", "commit", "rollback")


class Database:
    """
    数据库（单个进程内的表集合）

    职责：
      - 按表名管理 Table，表名唯一；
      - 把 INSERT / SELECT 文本交给 DML 解析器，再经语义绑定后作用到对应的表；
      - execute() 按语句首个关键字分派 CREATE / INSERT / SELECT。
    """

    def __init__(self, options: Optional[DbaseOptions] = None):
        self.options = options or DEFAULT_OPTIONS
        self._tables: Dict[str, Table] = {}
        self._semantic = SemanticAnalyzer(self.options)

    # ---------- 表目录 ----------
    def create_table(self, stmt: CreateTableStatement) -> Table:
        """
        根据建表语句创建表。

        异常：
            DuplicateTableError: 同名表已存在（已有表及其数据不受影响）
        """
        if stmt.table_name in self._tables:
            raise DuplicateTableError(stmt.table_name)
        table = Table(stmt.table_name, stmt.columns, self.options)
        self._tables[stmt.table_name] = table
        logger.info("table %s created with columns %s", table.name, table.column_names())
        return table

    def create_table_from_text(self, text: str) -> Table:
        return self.create_table(parse_create_table(text, self.options))

    def get_table(self, name: str) -> Optional[Table]:
        return self._tables.get(name)

    def has_table(self, name: str) -> bool:
        return name in self._tables

    def list_tables(self) -> List[str]:
        return list(self._tables)

    def _require_table(self, name: str) -> Table:
        table = self._tables.get(name)
        if table is None:
            raise TableNotFoundError(name)
        return table

    # ---------- DML ----------
    def insert(self, text: str) -> Row:
        """解析并执行一条 INSERT，返回实际写入的行（已补齐自增值和默认值）"""
        stmt = DmlParser(text, self.options).parse_insert()
        table = self._require_table(stmt.table_name)
        slots = self._semantic.bind_insert(stmt, table)
        return table.insert_row(slots)

    def select(self, text: str) -> List[Row]:
        """
        解析并执行一条 SELECT。

        返回：
            按插入顺序的行列表，每行是按请求列顺序排列的值元组
        """
        stmt = DmlParser(text, self.options).parse_select()
        table = self._require_table(stmt.table_name)
        indices = self._semantic.bind_select(stmt, table)
        if stmt.where_text is not None:
            if self.options.where_clause == WHERE_REJECT:
                logger.warning("rejected WHERE clause on %s: %s", table.name, stmt.where_text)
                raise UnsupportedFeatureError("WHERE clause")
            logger.info("WHERE clause ignored on %s: %s", table.name, stmt.where_text)
        rows = [tuple(row[i] for i in indices) for row in table.scan()]
        logger.debug("select %s from %s: %d rows", stmt.columns, table.name, len(rows))
        return rows

    def execute(self, text: str) -> Union[Table, Row, List[Row]]:
        """按首个关键字分派：create -> Table，insert -> Row，select -> List[Row]"""
        sc = Scanner(text)
        sc.skip_whitespace()
        start = sc.pos
        word = sc.scan_word().lower()
        if word == "create":
            return self.create_table_from_text(text)
        if word == "insert":
            return self.insert(text)
        if word == "select":
            return self.select(text)
        if word in UNSUPPORTED_STATEMENTS:
            logger.warning("unsupported statement: %s", word.upper())
            raise UnsupportedFeatureError(f"{word.upper()} statement")
        raise sc.error("Expected CREATE, INSERT or SELECT", position=start,
                       expected="CREATE, INSERT or SELECT")
