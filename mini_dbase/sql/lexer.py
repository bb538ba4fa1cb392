"""
Lexer: a single-cursor scanner shared by the DDL and DML parsers.

The statement languages are small enough that no token stream is built;
parsers pull keywords, identifiers and literals straight from the text.
All positions are 0-based character offsets into the statement text.
"""
from __future__ import annotations

import string
from typing import Iterable, Optional

from ..engine.errors import DbaseSyntaxError

WHITESPACE = frozenset(" \t\n\r\f\v")
IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")
HEX_DIGITS = frozenset(string.hexdigits)
HEX_PREFIX = "0x"


class Scanner:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    # ---------- cursor ----------
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Current character, or "" at end of input."""
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ""

    def skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def remaining(self) -> str:
        return self.text[self.pos:]

    def error(self, message: str, position: Optional[int] = None,
              expected: Optional[str] = None) -> DbaseSyntaxError:
        if position is None:
            position = self.pos
        return DbaseSyntaxError(f"{message} at position {position}", position, expected)

    # ---------- punctuation ----------
    def accept_char(self, ch: str) -> bool:
        """Skip whitespace, then consume ch if it is next."""
        self.skip_whitespace()
        if self.peek() == ch:
            self.pos += 1
            return True
        return False

    def expect_char(self, ch: str, context: str = "") -> None:
        if not self.accept_char(ch):
            where = f" {context}" if context else ""
            raise self.error(f"Expected '{ch}'{where}", expected=repr(ch))

    def expect_end(self, allow_semicolon: bool = True) -> None:
        """Only whitespace (and optionally one ';') may follow a statement."""
        if allow_semicolon:
            self.accept_char(";")
        self.skip_whitespace()
        if not self.at_end():
            raise self.error("Unexpected trailing input", expected="end of statement")

    # ---------- words ----------
    def match_keyword(self, keyword: str) -> bool:
        """
        Case-insensitive keyword match at the cursor. The character after the
        keyword must not continue an identifier ("select" never matches the
        start of "selection"). On failure the cursor is left untouched.
        """
        start = self.pos
        self.skip_whitespace()
        end = self.pos + len(keyword)
        word = self.text[self.pos:end]
        if word.lower() == keyword.lower() and (end >= len(self.text) or self.text[end] not in IDENT_CHARS):
            self.pos = end
            return True
        self.pos = start
        return False

    def expect_keyword(self, keyword: str, context: str = "") -> None:
        if not self.match_keyword(keyword):
            self.skip_whitespace()
            where = f" {context}" if context else ""
            raise self.error(f"Expected keyword '{keyword.upper()}'{where}", expected=keyword.upper())

    def scan_word(self) -> str:
        """Maximal run of identifier characters; may be empty."""
        self.skip_whitespace()
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in IDENT_CHARS:
            self.pos += 1
        return self.text[start:self.pos]

    def parse_identifier(self) -> str:
        word = self.scan_word()
        if not word:
            raise self.error("Expected identifier", expected="identifier")
        return word

    def scan_digits(self) -> str:
        self.skip_whitespace()
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos].isdigit() and self.text[self.pos].isascii():
            self.pos += 1
        return self.text[start:self.pos]

    def scan_until(self, stop_chars: Iterable[str]) -> str:
        """Raw text from the cursor up to (not including) the first stop char."""
        stops = frozenset(stop_chars)
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] not in stops:
            self.pos += 1
        return self.text[start:self.pos]

    # ---------- literals ----------
    def scan_literal(self) -> str:
        """
        One literal value:
          "text"      -> text (no escapes; unterminated is an error)
          0xDEADBEEF  -> "0xDEADBEEF" (prefix kept so callers can tell it apart)
          bare token  -> text up to whitespace, ',' or ')'
        """
        self.skip_whitespace()
        if self.at_end():
            raise self.error("Expected literal", expected="literal")
        start = self.pos
        if self.peek() == '"':
            self.pos += 1
            close = self.text.find('"', self.pos)
            if close < 0:
                self.pos = len(self.text)
                raise self.error("Unterminated string literal", position=start, expected='\'"\'')
            value = self.text[self.pos:close]
            self.pos = close + 1
            return value
        if self.text.startswith(HEX_PREFIX, self.pos):
            self.pos += len(HEX_PREFIX)
            while self.pos < len(self.text) and self.text[self.pos] in HEX_DIGITS:
                self.pos += 1
            return self.text[start:self.pos]
        value = self.scan_until(WHITESPACE | {",", ")"})
        if not value:
            raise self.error("Expected literal", expected="literal")
        return value

    def find_first(self, targets: Iterable[str]) -> Optional[str]:
        """
        Look ahead from the cursor, without consuming, for the first of the
        target characters outside a double-quoted literal.
        """
        wanted = frozenset(targets)
        in_quotes = False
        for ch in self.text[self.pos:]:
            if ch == '"':
                in_quotes = not in_quotes
            elif not in_quotes and ch in wanted:
                return ch
        return None
