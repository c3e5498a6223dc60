"""Diagnostic computation for tacc documents.

Runs the compiler front end (lexer -> parser -> analyzer) on source text and
converts the first error into an LSP Diagnostic. Each stage runs separately
so the tokens, tree and partial symbol table survive a later failure.
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urlparse, unquote

from lsprotocol import types as lsp

from tacc.compiler.analyzer import Analyzer
from tacc.compiler.ast_nodes import Statement
from tacc.compiler.errors import NESTING_TOO_DEEP, CompileError, ParseError
from tacc.compiler.lexer import Lexer
from tacc.compiler.parser import Parser
from tacc.compiler.symbols import SymbolTable
from tacc.compiler.tokens import Token


@dataclass
class AnalysisResult:
    """Cached result of analyzing a document."""

    uri: str
    source: str
    diagnostics: list[lsp.Diagnostic] = field(default_factory=list)
    tokens: Optional[list[Token]] = None
    ast: Optional[Statement] = None
    symbols: Optional[SymbolTable] = None
    analyzed: bool = False


def uri_to_path(uri: str) -> str:
    """Convert file:// URI to filesystem path."""
    parsed = urlparse(uri)
    return unquote(parsed.path)


def _make_diagnostic(err: CompileError, source: str = "tacc") -> lsp.Diagnostic:
    """Create an LSP Diagnostic.

    tacc uses 1-based line/col; LSP uses 0-based.
    """
    line_0 = max(0, err.line - 1)
    col_0 = max(0, err.col - 1)
    return lsp.Diagnostic(
        range=lsp.Range(
            start=lsp.Position(line=line_0, character=col_0),
            end=lsp.Position(line=line_0, character=col_0 + 1),
        ),
        message=err.message,
        severity=lsp.DiagnosticSeverity.Error,
        code=err.kind.name,
        source=source,
    )


def compute_diagnostics(uri: str, source: str) -> AnalysisResult:
    """Run the front end and return diagnostics plus whatever was built."""
    result = AnalysisResult(uri=uri, source=source)
    filename = os.path.basename(uri_to_path(uri))

    try:
        result.tokens = Lexer(source, filename).tokenize()
        result.ast = Parser(result.tokens).parse_syntax()
        result.symbols = SymbolTable()
        Analyzer(result.symbols).analyze(result.ast)
        result.analyzed = True
    except CompileError as e:
        result.diagnostics.append(_make_diagnostic(e))
    except RecursionError:
        result.diagnostics.append(_make_diagnostic(ParseError(NESTING_TOO_DEEP)))

    return result
