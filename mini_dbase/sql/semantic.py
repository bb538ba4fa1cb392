"""
Semantic binding: resolve statement column names against a table schema and
turn literal text into typed values.

Output is what the engine needs to run the statement:
  INSERT -> one optional Value per table column, in declared column order
  SELECT -> the column indices to project, in requested order
"""
from __future__ import annotations

from typing import List, Optional

from .ast_nodes import InsertStatement, SelectStatement
from ..engine.config import DbaseOptions, DEFAULT_OPTIONS
from ..engine.errors import TooManyValuesError
from ..engine.table import Table
from ..engine.values import Value, coerce


class SemanticAnalyzer:
    def __init__(self, options: Optional[DbaseOptions] = None):
        self.options = options or DEFAULT_OPTIONS

    def bind_insert(self, stmt: InsertStatement, table: Table) -> List[Optional[Value]]:
        columns = table.columns
        slots: List[Optional[Value]] = [None] * len(columns)
        if stmt.is_named:
            # 命名形式：按列名放入对应槽位，未列出的列保持为空；同名重复时后者覆盖
            indices = [table.column_index(name) for name in stmt.columns]
            for i, text in zip(indices, stmt.values):
                slots[i] = coerce(text, columns[i].type, self.options)
            return slots

        if len(stmt.values) > len(columns):
            raise TooManyValuesError(table.name, len(columns), len(stmt.values))
        for i, text in enumerate(stmt.values):
            if text is not None:
                slots[i] = coerce(text, columns[i].type, self.options)
        return slots

    def bind_select(self, stmt: SelectStatement, table: Table) -> List[int]:
        # 任何一列不存在都在产出结果前报错
        return [table.column_index(name) for name in stmt.columns]
