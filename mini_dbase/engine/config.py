# engine/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

# WHERE 子句的处理策略
WHERE_IGNORE = "ignore"
WHERE_REJECT = "reject"
_WHERE_POLICIES = (WHERE_IGNORE, WHERE_REJECT)

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class DbaseOptions:
    """
    数据库实例的行为开关：
    - where_clause: "ignore" 接受并丢弃 WHERE 文本（不过滤）；"reject" 直接报不支持
    - decode_hex_bytes: True 时把 0x... 字面量解码为字节；默认不解码，得到空字节串
    - allow_trailing_semicolon: 语句末尾是否允许一个可选的 ';'
    - implicit_empty_bytes: 未声明默认值的 bytes 列缺值时取空字节串，而不是报 MissingValueError
    """
    where_clause: str = WHERE_IGNORE
    decode_hex_bytes: bool = False
    allow_trailing_semicolon: bool = True
    implicit_empty_bytes: bool = True

    def __post_init__(self) -> None:
        if self.where_clause not in _WHERE_POLICIES:
            raise ValueError(
                f"where_clause must be one of {', '.join(_WHERE_POLICIES)}, got {self.where_clause!r}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DbaseOptions":
        """从环境变量 MINI_DBASE_WHERE / MINI_DBASE_DECODE_HEX 读取开关，未设置的取默认值。"""
        env = os.environ if environ is None else environ
        where = env.get("MINI_DBASE_WHERE", WHERE_IGNORE).strip().lower()
        decode = env.get("MINI_DBASE_DECODE_HEX", "").strip().lower() in _TRUTHY
        return cls(where_clause=where, decode_hex_bytes=decode)


DEFAULT_OPTIONS = DbaseOptions()
