"""Lexer for the tacc source language.

Single pass over the source text. Literal scanning (numbers, strings, chars)
lives in lexer_literals.py; identifiers, operators and separators are read here.
Unrecognized characters never abort lexing: they are reported and dropped.
"""

import logging

from .errors import LexerError
from .lexer_literals import read_char, read_number, read_string
from .tokens import (
    EQ_EXTENSIBLE, KEYWORDS, OPERATOR_CHARS, SEPARATORS, Token, TokenType,
)

__all__ = ["Lexer", "LexerError"]

logger = logging.getLogger(__name__)


class Lexer:
    def __init__(self, source: str = "", filename: str = "<stdin>"):
        self.filename = filename
        self.set_source(source)

    def set_source(self, source: str):
        """Install new source text and rewind the cursor to 1:1."""
        self.source = source
        self.pos = 0
        self.line = 1
        self.col = 1
        self.tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        while self.pos < len(self.source):
            self._skip_whitespace_and_comments()
            if self.pos >= len(self.source):
                break

            ch = self.source[self.pos]

            if _is_digit(ch):
                read_number(self)
            elif _is_ident_start(ch):
                self._read_identifier()
            elif ch == '"':
                read_string(self)
            elif ch == "'":
                read_char(self)
            elif ch in OPERATOR_CHARS:
                self._read_operator()
            elif ch in SEPARATORS:
                line, col = self.line, self.col
                self._emit(TokenType.SEPARATOR, self._advance(), line, col)
            else:
                line, col = self.line, self.col
                self._emit(TokenType.UNKNOWN, self._advance(), line, col)

        self.tokens.append(Token(TokenType.EOF, "", self.line, self.col))
        logger.debug("%s: %d tokens", self.filename, len(self.tokens))
        return self.tokens

    # --- Character helpers ---

    def _peek(self, offset: int = 0) -> str:
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return '\0'

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _emit(self, token_type: TokenType, value: str, line: int, col: int):
        if token_type == TokenType.UNKNOWN:
            logger.warning("%s:%d:%d: dropping unknown character %r",
                           self.filename, line, col, value)
            return
        self.tokens.append(Token(token_type, value, line, col))

    # --- Whitespace and comments ---

    def _skip_whitespace_and_comments(self):
        while not self._at_end():
            ch = self._peek()
            if ch.isspace():
                self._advance()
            elif ch == '/' and self._peek(1) == '/':
                self._skip_line_comment()
            elif ch == '/' and self._peek(1) == '*':
                self._skip_block_comment()
            else:
                break

    def _skip_line_comment(self):
        while not self._at_end() and self._peek() != '\n':
            self._advance()

    def _skip_block_comment(self):
        start_line, start_col = self.line, self.col
        self._advance()  # /
        self._advance()  # *
        while not self._at_end():
            if self._peek() == '*' and self._peek(1) == '/':
                self._advance()
                self._advance()
                return
            self._advance()
        logger.warning("%s:%d:%d: unterminated block comment runs to end of input",
                       self.filename, start_line, start_col)

    # --- Identifier / keyword ---

    def _read_identifier(self):
        line, col = self.line, self.col
        start = self.pos
        while not self._at_end() and _is_ident_char(self._peek()):
            self._advance()
            # Qualified names: std::string
            if self._peek() == ':' and self._peek(1) == ':':
                self._advance()
                self._advance()
        value = self.source[start:self.pos]
        self._emit(KEYWORDS.get(value, TokenType.IDENTIFIER), value, line, col)

    # --- Operators ---

    def _read_operator(self):
        """Greedy run of operator characters; '=', '!', '<', '>' absorb one '='."""
        line, col = self.line, self.col
        value = ""
        while not self._at_end() and self._peek() in OPERATOR_CHARS:
            value += self._advance()
            if value in EQ_EXTENSIBLE and self._peek() == '=':
                value += self._advance()
                break
        self._emit(TokenType.OPERATOR, value, line, col)


def _is_digit(ch: str) -> bool:
    return '0' <= ch <= '9'


def _is_ident_start(ch: str) -> bool:
    return ch.isascii() and (ch.isalpha() or ch == '_')


def _is_ident_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == '_')
