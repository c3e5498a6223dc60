"""Control flow statement parsing: if/else and return."""

from ..ast_nodes import IfStatement, ReturnStatement


class ControlFlowMixin:

    def _parse_if(self) -> IfStatement:
        tok = self._advance()  # if
        self._expect_separator("(", "Expected '(' after 'if'")
        condition = self._parse_expression()
        self._expect_separator(")", "Expected ')' after 'if' condition")
        then_branch = self._parse_statement()
        else_branch = None
        if self._check_keyword("else"):
            self._advance()
            else_branch = self._parse_statement()
        return IfStatement(condition=condition, then_branch=then_branch,
                           else_branch=else_branch, line=tok.line, col=tok.col)

    def _parse_return(self) -> ReturnStatement:
        tok = self._advance()  # return
        value = None
        if not self._check_separator(";"):
            value = self._parse_expression()
        self._expect_separator(";", "Expected ';' after return statement")
        return ReturnStatement(value=value, line=tok.line, col=tok.col)
