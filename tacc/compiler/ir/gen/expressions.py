"""Expression lowering: every expression yields an operand string."""

from __future__ import annotations
from typing import TYPE_CHECKING

from ...ast_nodes import (
    BinaryExpression, LiteralExpression, VariableExpression, left_spine,
)
from ...errors import SemanticError
from ...tokens import BINARY_OPERATORS

if TYPE_CHECKING:
    from .generator import GenContext


def lower_expr(ctx: GenContext, expr) -> str:
    """Return the operand holding expr's value, emitting code as needed.

    Literals and variables are their own operands; a binary expression
    computes into a fresh temporary.
    """
    if isinstance(expr, LiteralExpression):
        return expr.value
    if isinstance(expr, VariableExpression):
        return expr.name
    if isinstance(expr, BinaryExpression):
        spine, leftmost = left_spine(expr)
        for node in spine:
            if node.op not in BINARY_OPERATORS:
                raise SemanticError(f"Unknown binary operator '{node.op}'",
                                    node.line, node.col)
        left = lower_expr(ctx, leftmost)
        for node in spine:
            right = lower_expr(ctx, node.right)
            temp = ctx.fresh_temp()
            ctx.emit(node.op, left, right, temp)
            left = temp
        return left
    raise TypeError(f"Unhandled expression node {type(expr).__name__}")
