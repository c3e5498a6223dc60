"""Literal tokenization: numbers, strings, chars."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import LexerError
from .tokens import TokenType

if TYPE_CHECKING:
    from .lexer import Lexer

logger = logging.getLogger(__name__)


def read_number(lex: Lexer):
    """Read digits with at most one '.'; a second '.' ends the literal."""
    line, col = lex.line, lex.col
    chars: list[str] = []
    is_float = False
    while not lex._at_end():
        ch = lex._peek()
        if ch == '.':
            if is_float:
                break
            is_float = True
        elif not '0' <= ch <= '9':
            break
        chars.append(lex._advance())
    token_type = TokenType.FLOAT_LITERAL if is_float else TokenType.NUMBER_LITERAL
    lex._emit(token_type, ''.join(chars), line, col)


def read_string(lex: Lexer):
    """Read a double-quoted string literal, quotes included in the value.

    Only \\" is treated as an escape. An unterminated string runs to the end
    of input.
    """
    line, col = lex.line, lex.col
    chars = [lex._advance()]  # opening "
    while not lex._at_end() and lex._peek() != '"':
        if lex._peek() == '\\' and lex._peek(1) == '"':
            chars.append(lex._advance())
        chars.append(lex._advance())
    if lex._at_end():
        logger.warning("%s:%d:%d: unterminated string literal",
                       lex.filename, line, col)
    else:
        chars.append(lex._advance())  # closing "
    lex._emit(TokenType.STRING_LITERAL, ''.join(chars), line, col)


def read_char(lex: Lexer):
    """Read a single-quoted char literal: one character, or \\' for a quote.

    No other escapes exist. An escaped quote keeps only its backslash in the
    token text (`'\\'`), so the literal is still three characters long.
    """
    line, col = lex.line, lex.col
    chars = [lex._advance()]  # opening '
    if lex._peek() == '\\' and lex._peek(1) == "'":
        chars.append(lex._advance())
        lex._advance()  # escaped '
    elif not lex._at_end():
        chars.append(lex._advance())
    if lex._at_end() or lex._peek() != "'":
        raise LexerError("Expected closing single quote for character literal",
                         line, col)
    chars.append(lex._advance())
    lex._emit(TokenType.CHAR_LITERAL, ''.join(chars), line, col)
