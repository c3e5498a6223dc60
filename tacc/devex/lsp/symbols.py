"""Document symbol provider for tacc.

Walks the AST to produce a DocumentSymbol hierarchy for the Outline view:
functions (with the variables declared in their bodies) and variables
declared outside any function.
"""

from __future__ import annotations
from typing import Optional

from lsprotocol import types as lsp

from tacc.compiler.ast_nodes import (
    BlockStatement, FunctionDeclaration, IfStatement, VariableDeclaration,
)

from tacc.devex.lsp.diagnostics import AnalysisResult


def _pos(line: int, col: int) -> lsp.Position:
    """Convert 1-based tacc position to 0-based LSP position."""
    return lsp.Position(line=max(0, line - 1), character=max(0, col - 1))


def _range_from_node(node, source_lines: list[str]) -> lsp.Range:
    """Start at the node; functions extend to their closing brace."""
    start = _pos(node.line, node.col)

    if isinstance(node, FunctionDeclaration):
        end_line = _find_closing_brace(source_lines, node.line - 1)
        if end_line is not None:
            return lsp.Range(start=start, end=lsp.Position(
                line=end_line, character=len(source_lines[end_line])))

    line_idx = max(0, node.line - 1)
    end_col = len(source_lines[line_idx]) if line_idx < len(source_lines) else 0
    return lsp.Range(start=start, end=lsp.Position(line=line_idx, character=end_col))


def _find_closing_brace(source_lines: list[str], start_line: int) -> Optional[int]:
    """Find the line of the closing brace matching the first opening brace at or after start_line."""
    depth = 0
    found_open = False
    for i in range(start_line, len(source_lines)):
        for ch in source_lines[i]:
            if ch == '{':
                depth += 1
                found_open = True
            elif ch == '}':
                depth -= 1
                if found_open and depth == 0:
                    return i
    return None


def _selection_range(node) -> lsp.Range:
    """The declared name itself."""
    start = _pos(node.name_line, node.name_col)
    end = lsp.Position(line=start.line, character=start.character + len(node.name))
    return lsp.Range(start=start, end=end)


def _variable_symbol(decl: VariableDeclaration, source_lines: list[str]) -> lsp.DocumentSymbol:
    return lsp.DocumentSymbol(
        name=decl.name,
        kind=lsp.SymbolKind.Variable,
        range=_range_from_node(decl, source_lines),
        selection_range=_selection_range(decl),
        detail=decl.type,
    )


def _collect(stmts, source_lines: list[str]) -> list[lsp.DocumentSymbol]:
    """Symbols for a statement list, descending into blocks and if branches."""
    symbols: list[lsp.DocumentSymbol] = []
    for stmt in stmts:
        if isinstance(stmt, VariableDeclaration):
            symbols.append(_variable_symbol(stmt, source_lines))
        elif isinstance(stmt, BlockStatement):
            symbols.extend(_collect(stmt.statements, source_lines))
        elif isinstance(stmt, IfStatement):
            branches = [b for b in (stmt.then_branch, stmt.else_branch) if b is not None]
            symbols.extend(_collect(branches, source_lines))
        elif isinstance(stmt, FunctionDeclaration):
            params = ", ".join(str(p) for p in stmt.params)
            symbols.append(lsp.DocumentSymbol(
                name=stmt.name,
                kind=lsp.SymbolKind.Function,
                range=_range_from_node(stmt, source_lines),
                selection_range=_selection_range(stmt),
                detail=f"{stmt.return_type}({params})",
                children=_collect(stmt.body, source_lines),
            ))
    return symbols


def get_document_symbols(result: AnalysisResult) -> list[lsp.DocumentSymbol]:
    """Extract document symbols from the parsed AST."""
    if result.ast is None:
        return []
    return _collect([result.ast], result.source.split('\n'))
