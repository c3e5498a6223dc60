"""Token type definitions for the tacc source language."""

from enum import Enum, auto
from dataclasses import dataclass


class TokenType(Enum):
    IDENTIFIER = auto()
    KEYWORD = auto()

    # Literals
    NUMBER_LITERAL = auto()
    FLOAT_LITERAL = auto()
    STRING_LITERAL = auto()
    CHAR_LITERAL = auto()
    BOOL_LITERAL = auto()
    NULL_LITERAL = auto()

    OPERATOR = auto()
    SEPARATOR = auto()

    # Special
    EOF = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    line: int
    col: int

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.col})"

    def describe(self) -> str:
        """Short form used in error messages: kind and text."""
        if self.type == TokenType.EOF:
            return "end of input"
        return f"{self.type.name} '{self.value}'"


# Keyword lookup table: word -> TokenType
KEYWORDS: dict[str, TokenType] = {
    "true": TokenType.BOOL_LITERAL,
    "false": TokenType.BOOL_LITERAL,
    "nullptr": TokenType.NULL_LITERAL,
    "int": TokenType.KEYWORD,
    "return": TokenType.KEYWORD,
    "if": TokenType.KEYWORD,
    "else": TokenType.KEYWORD,
    "for": TokenType.KEYWORD,
    "while": TokenType.KEYWORD,
    "float": TokenType.KEYWORD,
    "char": TokenType.KEYWORD,
    "std::string": TokenType.KEYWORD,
}

# Keywords that start a declaration (used by the parser for dispatch)
TYPE_KEYWORDS: frozenset[str] = frozenset({"int", "float", "char", "std::string"})

# Characters that may appear in an operator run
OPERATOR_CHARS = "+-*/%=<>!&|^~"

# Single-character operators that take one trailing '=' (==, !=, <=, >=)
EQ_EXTENSIBLE: frozenset[str] = frozenset({"=", "!", "<", ">"})

SEPARATORS = ";,(){}"

# Token types accepted as literal operands in expressions
LITERAL_TYPES: frozenset[TokenType] = frozenset({
    TokenType.NUMBER_LITERAL, TokenType.FLOAT_LITERAL,
    TokenType.STRING_LITERAL, TokenType.CHAR_LITERAL,
})

# Operators that form binary expressions (keys of the parser's precedence table)
BINARY_OPERATORS: frozenset[str] = frozenset({
    "*", "/", "%", "<", ">", "<=", ">=", "+", "-", "==", "!=", "&&", "||",
})
