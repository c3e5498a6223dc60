"""Parser core: token manipulation, error handling, and parse() entry point."""

from __future__ import annotations

import logging

from ..analyzer import Analyzer
from ..errors import NESTING_TOO_DEEP, ParseError
from ..symbols import SymbolTable
from ..tokens import Token, TokenType

logger = logging.getLogger(__name__)

_EOF = Token(TokenType.EOF, "", 0, 0)


class ParserBase:
    def __init__(self, tokens: list[Token] | None = None):
        self.symbols: SymbolTable | None = None
        self.set_tokens(tokens or [])

    def set_tokens(self, tokens: list[Token]):
        """Install a token sequence and rewind the read cursor."""
        self.tokens = list(tokens)
        self.pos = 0

    def parse(self):
        """Parse one top-level statement and validate it against a fresh symbol table."""
        tree = self.parse_syntax()
        self.symbols = Analyzer().analyze(tree)
        return tree

    def parse_syntax(self):
        """Parse one top-level statement without semantic analysis."""
        try:
            tree = self._parse_statement()
        except RecursionError:
            tok = self._peek()
            raise ParseError(NESTING_TOO_DEEP, tok.line, tok.col) from None
        if not self._at_end():
            tok = self._peek()
            logger.warning("ignoring input after the top-level statement, from %s at %d:%d",
                           tok.describe(), tok.line, tok.col)
        return tree

    # ---- Token helpers ----

    def _peek(self, offset: int = 0) -> Token:
        pos = self.pos + offset
        if pos < len(self.tokens):
            return self.tokens[pos]
        return self.tokens[-1] if self.tokens else _EOF

    def _advance(self) -> Token:
        tok = self._peek()
        if self.pos < len(self.tokens):
            self.pos += 1
        return tok

    def _at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _check(self, token_type: TokenType, value: str | None = None) -> bool:
        tok = self._peek()
        return tok.type == token_type and (value is None or tok.value == value)

    def _check_separator(self, value: str) -> bool:
        return self._check(TokenType.SEPARATOR, value)

    def _check_operator(self, value: str) -> bool:
        return self._check(TokenType.OPERATOR, value)

    def _check_keyword(self, value: str) -> bool:
        return self._check(TokenType.KEYWORD, value)

    def _expect_separator(self, value: str, msg: str) -> Token:
        if self._check_separator(value):
            return self._advance()
        raise self._error(msg)

    def _error(self, msg: str) -> ParseError:
        tok = self._peek()
        return ParseError(f"{msg}, got {tok.describe()}", tok.line, tok.col)
