"""Error taxonomy shared by every compiler stage."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    LEXICAL = "lexical"
    SYNTACTIC = "syntactic"
    SEMANTIC = "semantic"


# Reported when statements nest deeper than the interpreter's recursion limit
NESTING_TOO_DEEP = "Nesting too deep"


class CompileError(Exception):
    """A fatal compilation error. The first one raised aborts the compile."""

    kind: ErrorKind = ErrorKind.SYNTACTIC

    def __init__(self, message: str, line: int = 0, col: int = 0):
        self.message = message
        self.line = line
        self.col = col
        super().__init__(f"{message} at {line}:{col}")

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(kind=self.kind, message=self.message,
                          line=self.line, col=self.col)


class LexerError(CompileError):
    kind = ErrorKind.LEXICAL


class ParseError(CompileError):
    kind = ErrorKind.SYNTACTIC


class SemanticError(CompileError):
    kind = ErrorKind.SEMANTIC


@dataclass(frozen=True)
class Diagnostic:
    """Plain-data form of a CompileError, returned across the pipeline boundary."""
    kind: ErrorKind
    message: str
    line: int = 0
    col: int = 0

    def __str__(self):
        return f"{self.kind.value} error: {self.message} at {self.line}:{self.col}"
