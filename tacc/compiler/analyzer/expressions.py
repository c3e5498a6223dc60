"""Expression checks and static type computation."""

from ..ast_nodes import (
    BinaryExpression, LiteralExpression, VariableExpression, left_spine,
)
from ..errors import SemanticError
from .core import BOOL, CHAR, FLOAT, INT, STRING

LOGICAL_OPS = frozenset({"&&", "||"})


def literal_type(value: str) -> str:
    """Infer a literal's type from its spelling alone."""
    if len(value) == 3 and value[0] == "'" and value[-1] == "'":
        return CHAR
    if value[:1] == '"' and value[-1:] == '"':
        return STRING
    if "." in value:
        return FLOAT
    return INT


class ExpressionsMixin:

    def _check_expr(self, expr):
        if isinstance(expr, BinaryExpression):
            spine, leftmost = left_spine(expr)
            self._check_expr(leftmost)
            for node in spine:
                self._check_expr(node.right)
        elif isinstance(expr, VariableExpression):
            self.symbols.lookup(expr.name, expr.line, expr.col)
        elif isinstance(expr, LiteralExpression):
            pass
        else:
            raise TypeError(f"Unhandled expression node {type(expr).__name__}")

    def type_of(self, expr) -> str:
        if isinstance(expr, LiteralExpression):
            return literal_type(expr.value)
        if isinstance(expr, VariableExpression):
            return self.symbols.lookup(expr.name, expr.line, expr.col)
        if isinstance(expr, BinaryExpression):
            spine, leftmost = left_spine(expr)
            result = self.type_of(leftmost)
            for node in spine:
                result = self._binary_type(node, result, self.type_of(node.right))
            return result
        raise TypeError(f"Unhandled expression node {type(expr).__name__}")

    def _binary_type(self, expr: BinaryExpression, left: str, right: str) -> str:
        if expr.op in LOGICAL_OPS:
            return BOOL
        if {left, right} == {INT, FLOAT}:
            return FLOAT
        if left != right:
            raise SemanticError(
                f"Type mismatch in binary expression: {left} {expr.op} {right}",
                expr.line, expr.col)
        return left
