#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
INSERT / SELECT 语法分析器

    insert := "INSERT" "(" value_list ")" "TO" identifier
        value_list (positional) := (literal | <empty>) ("," (literal | <empty>))*
        value_list (named)      := identifier "=" literal ("," identifier "=" literal)*
    select := "SELECT" identifier ("," identifier)* "FROM" identifier (WHERE ...)?

只做语法：列名解析、字面量转换由 semantic 完成，执行由 engine.database 完成。
"""
from __future__ import annotations

from typing import List, Optional

from .lexer import Scanner
from .ast_nodes import InsertStatement, SelectStatement
from ..engine.config import DbaseOptions, DEFAULT_OPTIONS


class DmlParser:
    def __init__(self, text: str, options: Optional[DbaseOptions] = None):
        self.scanner = Scanner(text)
        self.options = options or DEFAULT_OPTIONS

    def parse_insert(self) -> InsertStatement:
        sc = self.scanner
        sc.expect_keyword("insert")
        sc.expect_char("(", "after 'INSERT'")
        sc.skip_whitespace()

        # 向前看：')' 之前出现 '=' 则整条语句按命名形式解析，不支持混用
        named = sc.find_first("=)") == "="
        if named:
            columns, values = self._parse_named_values()
        else:
            columns, values = None, self._parse_positional_values()
        sc.expect_char(")", "after values")

        sc.expect_keyword("to", "after value list")
        table_name = sc.parse_identifier()
        sc.expect_end(self.options.allow_trailing_semicolon)
        return InsertStatement(table_name, values, columns)

    def _parse_named_values(self):
        sc = self.scanner
        columns: List[str] = []
        values: List[Optional[str]] = []
        while True:
            columns.append(sc.parse_identifier())
            sc.expect_char("=", "after column name")
            values.append(sc.scan_literal())
            if not sc.accept_char(","):
                break
        return columns, values

    def _parse_positional_values(self) -> List[Optional[str]]:
        sc = self.scanner
        values: List[Optional[str]] = []
        while True:
            sc.skip_whitespace()
            ch = sc.peek()
            if ch == ",":
                # 连续逗号之间为空槽位
                values.append(None)
                sc.pos += 1
                continue
            if ch == ")" or ch == "":
                break
            values.append(sc.scan_literal())
            if sc.accept_char(","):
                continue
            sc.skip_whitespace()
            if sc.peek() == ")" or sc.at_end():
                break
            raise sc.error("Expected ',' or ')' in value list", expected="',' or ')'")
        return values

    def parse_select(self) -> SelectStatement:
        sc = self.scanner
        sc.expect_keyword("select")
        columns: List[str] = []
        while True:
            columns.append(sc.parse_identifier())
            if not sc.accept_char(","):
                break
        sc.expect_keyword("from", "after column list")
        table_name = sc.parse_identifier()

        where_text = None
        if sc.match_keyword("where"):
            # WHERE 只保留原文，不解析条件
            where_text = sc.remaining().strip()
            if self.options.allow_trailing_semicolon and where_text.endswith(";"):
                where_text = where_text[:-1].rstrip()
            if not where_text:
                raise sc.error("Expected condition after 'WHERE'", expected="condition")
        else:
            sc.expect_end(self.options.allow_trailing_semicolon)
        return SelectStatement(columns, table_name, where_text)


def parse_insert(text: str, options: Optional[DbaseOptions] = None) -> InsertStatement:
    return DmlParser(text, options).parse_insert()


def parse_select(text: str, options: Optional[DbaseOptions] = None) -> SelectStatement:
    return DmlParser(text, options).parse_select()
