#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
建表语句（DDL）语法分析器

    create_table  := "CREATE" "TABLE" identifier "(" column_def ("," column_def)* ")"
    column_def    := attributes? identifier ":" type default_value?
    attributes    := "{" attr_name ("," attr_name)* "}"
    type          := type_name ("[" integer "]")?
    default_value := "=" <raw text up to next "," or ")">
"""
from __future__ import annotations

from typing import Optional, Set

from .lexer import Scanner
from .ast_nodes import (
    Attribute,
    ColumnDefinition,
    CreateTableStatement,
    DataType,
    TypeDefinition,
)
from ..engine.config import DbaseOptions, DEFAULT_OPTIONS

_ATTRIBUTES = {a.value: a for a in Attribute}
_TYPES = {t.value: t for t in DataType}


class CreateTableParser:
    """语法分析器：把一条 CREATE TABLE 文本解析为 CreateTableStatement"""

    def __init__(self, text: str, options: Optional[DbaseOptions] = None):
        self.scanner = Scanner(text)
        self.options = options or DEFAULT_OPTIONS

    def parse(self) -> CreateTableStatement:
        sc = self.scanner
        sc.expect_keyword("create")
        sc.expect_keyword("table", "after 'CREATE'")
        table_name = sc.parse_identifier()
        sc.expect_char("(", "after table name")

        columns = []
        seen = set()
        while True:
            sc.skip_whitespace()
            start = sc.pos
            column = self.parse_column_definition()
            # 列名重复
            if column.name in seen:
                raise sc.error(f"Duplicate column name '{column.name}'", position=start)
            seen.add(column.name)
            columns.append(column)
            sc.skip_whitespace()
            if sc.at_end():
                raise sc.error("Unexpected end of input inside column definitions", expected="',' or ')'")
            if sc.accept_char(","):
                continue
            if sc.accept_char(")"):
                break
            raise sc.error("Expected ',' or ')' in column definitions", expected="',' or ')'")

        sc.expect_end(self.options.allow_trailing_semicolon)
        return CreateTableStatement(table_name, columns)

    def parse_column_definition(self) -> ColumnDefinition:
        attributes = self.parse_attributes()
        name = self.scanner.parse_identifier()
        self.scanner.expect_char(":", "after column name")
        type_def = self.parse_type()
        default_value = self.parse_default_value()
        return ColumnDefinition(name, type_def, frozenset(attributes), default_value)

    def parse_attributes(self) -> Set[Attribute]:
        sc = self.scanner
        attributes: Set[Attribute] = set()
        if not sc.accept_char("{"):
            return attributes
        while True:
            sc.skip_whitespace()
            start = sc.pos
            word = sc.scan_word()
            if not word:
                raise sc.error("Expected attribute name", expected="attribute name")
            attr = _ATTRIBUTES.get(word.lower())
            if attr is None:
                raise sc.error(f"Unknown attribute '{word}'", position=start,
                               expected="key, autoincrement or unique")
            # 重复的属性静默去重
            attributes.add(attr)
            if not sc.accept_char(","):
                break
        sc.expect_char("}", "after attribute list")
        return attributes

    def parse_type(self) -> TypeDefinition:
        sc = self.scanner
        sc.skip_whitespace()
        start = sc.pos
        word = sc.scan_word()
        if not word:
            raise sc.error("Expected data type", expected="data type")
        data_type = _TYPES.get(word.lower())
        if data_type is None:
            raise sc.error(f"Unknown data type '{word}'", position=start,
                           expected="int32, bool, string or bytes")
        size = None
        if sc.accept_char("["):
            digits = sc.scan_digits()
            if not digits:
                raise sc.error("Expected type size", expected="integer")
            size = int(digits)
            sc.expect_char("]", "after type size")
        return TypeDefinition(data_type, size)

    def parse_default_value(self) -> Optional[str]:
        sc = self.scanner
        if not sc.accept_char("="):
            return None
        sc.skip_whitespace()
        raw = sc.scan_until(",)").rstrip()
        # "= " 后面什么都没有时视为未声明默认值
        return raw or None


def parse_create_table(text: str, options: Optional[DbaseOptions] = None) -> CreateTableStatement:
    return CreateTableParser(text, options).parse()
