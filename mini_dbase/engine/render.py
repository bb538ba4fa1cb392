# engine/render.py
from __future__ import annotations

from typing import Iterable

from .values import BoolValue, BytesValue, Row, Value


def format_value(v: Value) -> str:
    if isinstance(v, BoolValue):
        return "true" if v.value else "false"
    if isinstance(v, BytesValue):
        return "[bytes]"
    return str(v.value)


def format_rows(rows: Iterable[Row]) -> str:
    """每行一条：每个值后跟一个制表符，行尾换行"""
    return "".join("".join(format_value(v) + "\t" for v in row) + "\n" for row in rows)
