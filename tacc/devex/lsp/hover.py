"""Hover provider for tacc.

Shows declared types for variables, signatures for functions, and a short
description for keywords.
"""

from typing import Optional

from lsprotocol import types as lsp

from tacc.compiler.ast_nodes import BlockStatement, FunctionDeclaration, IfStatement
from tacc.compiler.tokens import KEYWORDS, Token, TokenType

from tacc.devex.lsp.diagnostics import AnalysisResult


def _find_token_at_position(tokens: list[Token], position: lsp.Position) -> Optional[Token]:
    """Find the token that covers the given 0-based position."""
    target_line = position.line + 1  # tacc tokens use 1-based lines
    target_col = position.character + 1  # tacc tokens use 1-based cols

    for tok in tokens:
        if tok.type == TokenType.EOF or tok.line != target_line:
            continue
        if tok.col <= target_col < tok.col + len(tok.value):
            return tok
    return None


_KEYWORD_DOCS = {
    "int": "Integer type. Promotes to `float` in mixed arithmetic.",
    "float": "Floating-point type. Accepts `int` values by promotion.",
    "char": "Character type, written `'c'`.",
    "std::string": "String type, written `\"text\"`.",
    "if": "Conditional: `if (cond) stmt [else stmt]`. The condition must be `int` or `bool`.",
    "else": "Alternative branch of an `if` statement.",
    "return": "Returns from the enclosing function, optionally with a value.",
    "for": "Reserved word; loops are not supported.",
    "while": "Reserved word; loops are not supported.",
    "true": "Boolean literal (not usable in expressions).",
    "false": "Boolean literal (not usable in expressions).",
    "nullptr": "Null literal (not usable in expressions).",
}


def _find_function(node, name: str) -> Optional[FunctionDeclaration]:
    if isinstance(node, FunctionDeclaration):
        if node.name == name:
            return node
        children = node.body
    elif isinstance(node, BlockStatement):
        children = node.statements
    elif isinstance(node, IfStatement):
        children = [b for b in (node.then_branch, node.else_branch) if b is not None]
    else:
        return None
    for child in children:
        found = _find_function(child, name)
        if found is not None:
            return found
    return None


def get_hover_info(result: AnalysisResult, position: lsp.Position) -> Optional[lsp.Hover]:
    """Return hover information for the token at the given position."""
    if not result.tokens:
        return None

    token = _find_token_at_position(result.tokens, position)
    if token is None:
        return None

    content: Optional[str] = None
    if token.value in KEYWORDS:
        content = f"**`{token.value}`** — {_KEYWORD_DOCS[token.value]}"
    elif token.type == TokenType.IDENTIFIER:
        info = result.symbols.get(token.value) if result.symbols else None
        func = _find_function(result.ast, token.value) if result.ast else None
        if info is not None:
            content = (f"```cpp\n{info.type} {info.name}\n```\n"
                       f"Declared at line {info.line}")
        elif func is not None:
            content = f"```cpp\n{func.signature()}\n```\nFunction"

    if content is None:
        return None

    start = lsp.Position(line=token.line - 1, character=token.col - 1)
    end = lsp.Position(line=token.line - 1, character=token.col - 1 + len(token.value))
    return lsp.Hover(
        contents=lsp.MarkupContent(
            kind=lsp.MarkupKind.Markdown,
            value=content,
        ),
        range=lsp.Range(start=start, end=end),
    )
