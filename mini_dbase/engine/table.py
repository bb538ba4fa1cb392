# engine/table.py
from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence

from ..sql.ast_nodes import ColumnDefinition, DataType
from .config import DbaseOptions, DEFAULT_OPTIONS
from .errors import (
    ArityError,
    MissingValueError,
    NotAutoincrementError,
    UnknownColumnError,
    ValueCoercionError,
)
from .log import get_logger
from .values import BytesValue, Row, Value, coerce

logger = get_logger("table")


def _unquote(raw: str) -> str:
    # 默认值按原文保存；"..." 形式的默认值去掉引号再转换
    if len(raw) >= 2 and raw[0] == raw[-1] == '"':
        return raw[1:-1]
    return raw


class Table:
    """
    内存表：列定义（建表后不可变）+ 只追加的行序列。

    自增列各自维护一个计数器（从 0 开始），只有插入时该列缺值才取号并加一；
    默认值在第一次需要时才按列类型转换，之后缓存复用。
    """

    def __init__(self, name: str, columns: Sequence[ColumnDefinition],
                 options: Optional[DbaseOptions] = None):
        self.name = name
        self._columns = tuple(columns)
        self._rows: List[Row] = []
        self.options = options or DEFAULT_OPTIONS
        self._autoincrement: Dict[int, int] = {
            i: 0 for i, col in enumerate(self._columns) if col.is_autoincrement
        }
        self._defaults: Dict[int, Value] = {}

    @property
    def columns(self) -> tuple:
        return self._columns

    @property
    def rows(self) -> tuple:
        """Snapshot of the stored rows; use scan() to iterate without copying."""
        return tuple(self._rows)

    def scan(self) -> Iterator[Row]:
        # 行是不可变元组，直接按插入顺序产出
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def column_names(self) -> List[str]:
        return [c.name for c in self._columns]

    def column_index(self, name: str) -> int:
        for i, c in enumerate(self._columns):
            if c.name == name:
                return i
        raise UnknownColumnError(self.name, name)

    def autoincrement_counter(self, name: str) -> int:
        """Next value the named autoincrement column will hand out."""
        i = self.column_index(name)
        if i not in self._autoincrement:
            raise NotAutoincrementError(self.name, name)
        return self._autoincrement[i]

    def default_value(self, index: int) -> Optional[Value]:
        col = self._columns[index]
        if not col.has_default:
            if col.type.type is DataType.BYTES and self.options.implicit_empty_bytes:
                return BytesValue(b"")
            return None
        if index not in self._defaults:
            self._defaults[index] = coerce(_unquote(col.default_value), col.type, self.options)
        return self._defaults[index]

    def insert_row(self, values: Sequence[Optional[Value]]) -> Row:
        if len(values) != len(self._columns):
            raise ArityError(self.name, len(self._columns), len(values))

        row: List[Value] = []
        # 先在副本上取号，整行成功后再提交，失败不留下半行也不消耗自增值
        counters = dict(self._autoincrement)
        for i, (col, value) in enumerate(zip(self._columns, values)):
            if value is None:
                if i in counters:
                    value = coerce(str(counters[i]), col.type, self.options)
                    counters[i] += 1
                else:
                    value = self.default_value(i)
            if value is None:
                raise MissingValueError(self.name, col.name)
            if value.data_type is not col.type.type:
                raise ValueCoercionError(repr(value.value), col.type.type.value,
                                         f"column {col.name} holds {col.type}")
            row.append(value)

        stored = tuple(row)
        self._rows.append(stored)
        self._autoincrement = counters
        logger.debug("insert into %s: %s", self.name, stored)
        return stored
