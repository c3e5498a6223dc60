"""Expression parsing: precedence climbing over binary operators."""

from ..ast_nodes import BinaryExpression, LiteralExpression, VariableExpression
from ..tokens import LITERAL_TYPES, Token, TokenType

# Binding strength of each binary operator; anything else ends the expression
PRECEDENCE: dict[str, int] = {
    "*": 20, "/": 20, "%": 20,
    "<": 15, ">": 15, "<=": 15, ">=": 15,
    "+": 10, "-": 10,
    "==": 5, "!=": 5,
    "&&": 3, "||": 3,
}


def precedence(tok: Token) -> int:
    if tok.type == TokenType.OPERATOR:
        return PRECEDENCE.get(tok.value, -1)
    return -1


class ExpressionsMixin:

    def _parse_expression(self):
        return self._parse_binary(0)

    def _parse_binary(self, min_precedence: int):
        left = self._parse_primary()
        while True:
            prec = precedence(self._peek())
            if prec < min_precedence:
                return left
            op = self._advance().value
            right = self._parse_binary(prec + 1)
            left = BinaryExpression(left=left, op=op, right=right,
                                    line=left.line, col=left.col)

    def _parse_primary(self):
        tok = self._peek()
        if tok.type in LITERAL_TYPES:
            self._advance()
            return LiteralExpression(value=tok.value, line=tok.line, col=tok.col)
        if tok.type == TokenType.IDENTIFIER:
            self._advance()
            return VariableExpression(name=tok.value, line=tok.line, col=tok.col)
        raise self._error("Unexpected token in expression")
