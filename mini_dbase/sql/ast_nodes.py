#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AST 节点定义：建表语句的模式类型，以及 INSERT / SELECT 的语法树
"""
from __future__ import annotations

from enum import Enum
from dataclasses import dataclass
from typing import FrozenSet, List, Optional


class DataType(Enum):
    INT32 = "int32"
    BOOL = "bool"
    STRING = "string"
    BYTES = "bytes"


class Attribute(Enum):
    KEY = "key"
    AUTOINCREMENT = "autoincrement"
    UNIQUE = "unique"


#撰写共同父类
class ASTNode:
    pass


@dataclass(frozen=True)
class TypeDefinition:
    type: DataType
    # 仅对 string / bytes 有意义，只作为声明保存，不做长度校验
    size: Optional[int] = None

    def __str__(self) -> str:
        if self.size is None:
            return self.type.value
        return f"{self.type.value}[{self.size}]"


# 建表后作为表模式使用，不可修改
@dataclass(frozen=True)
class ColumnDefinition:
    name: str
    type: TypeDefinition
    attributes: FrozenSet[Attribute] = frozenset()
    # 默认值保存原始文本，插入时才按列类型转换
    default_value: Optional[str] = None

    @property
    def is_autoincrement(self) -> bool:
        return Attribute.AUTOINCREMENT in self.attributes

    @property
    def has_default(self) -> bool:
        return self.default_value is not None


#CT的AST
@dataclass
class CreateTableStatement(ASTNode):
    table_name: str
    columns: List[ColumnDefinition]


#插入insert的AST
@dataclass
class InsertStatement(ASTNode):
    table_name: str
    # 位置形式下为 None 的槽位表示空值，交给自增/默认值处理
    values: List[Optional[str]]
    # 命名形式时与 values 一一对应；位置形式为 None
    columns: Optional[List[str]] = None

    @property
    def is_named(self) -> bool:
        return self.columns is not None


#基础的select的AST
@dataclass
class SelectStatement(ASTNode):
    columns: List[str]
    table_name: str
    # WHERE 子句原文，不解析也不求值
    where_text: Optional[str] = None
