# engine/errors.py
from __future__ import annotations
from typing import Optional


class DbaseError(Exception):
    """Base exception for all mini_dbase errors."""


class DbaseSyntaxError(DbaseError, SyntaxError):
    """
    语句文本不符合文法。

    Attributes:
        position: 出错位置（输入文本中的字符偏移）
        expected: 期望的符号描述，可能为 None
    """

    def __init__(self, message: str, position: int, expected: Optional[str] = None) -> None:
        self.position = position
        self.expected = expected
        super().__init__(message)

    def __str__(self) -> str:
        return self.msg


class DuplicateTableError(DbaseError):
    """Raised when CREATE TABLE names a table that already exists."""

    def __init__(self, table: str) -> None:
        self.table = table
        super().__init__(f"Table already exists: {table}")


class TableNotFoundError(DbaseError):
    """Raised when INSERT/SELECT references an unknown table."""

    def __init__(self, table: str) -> None:
        self.table = table
        super().__init__(f"Table not found: {table}")


class UnknownColumnError(DbaseError):
    """Raised when a column name does not resolve against the table schema."""

    def __init__(self, table: str, column: str) -> None:
        self.table = table
        self.column = column
        super().__init__(f"Column not found: {column} (table {table})")


class ArityError(DbaseError):
    """Raised when a row's slot count differs from the table's column count."""

    def __init__(self, table: str, expected: int, actual: int) -> None:
        self.table = table
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Column count doesn't match value count for table {table}: "
            f"expected {expected}, got {actual}"
        )


class TooManyValuesError(DbaseError):
    """Raised when a positional INSERT supplies more literals than columns."""

    def __init__(self, table: str, expected: int, actual: int) -> None:
        self.table = table
        self.expected = expected
        self.actual = actual
        super().__init__(f"Too many values for table {table}: {actual} > {expected}")


class MissingValueError(DbaseError):
    """Raised when a slot has no value after autoincrement/default fallback."""

    def __init__(self, table: str, column: str) -> None:
        self.table = table
        self.column = column
        super().__init__(f"No value provided for column {column} (table {table})")


class ValueCoercionError(DbaseError, TypeError):
    """Raised when literal text cannot become a value of the column type."""

    def __init__(self, literal: str, data_type: str, reason: str = "") -> None:
        self.literal = literal
        self.data_type = data_type
        msg = f"Cannot convert {literal!r} to {data_type}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class UnsupportedFeatureError(DbaseError, NotImplementedError):
    """Raised for statements and clauses the engine does not implement."""

    def __init__(self, feature: str) -> None:
        self.feature = feature
        super().__init__(f"Not supported: {feature}")


class NotAutoincrementError(DbaseError):
    """Raised when an autoincrement counter is requested for a plain column."""

    def __init__(self, table: str, column: str) -> None:
        self.table = table
        self.column = column
        super().__init__(f"Column {column} is not autoincrement (table {table})")
