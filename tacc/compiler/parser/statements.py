"""Statement dispatch, blocks, variable declarations and assignments."""

import logging

from ..ast_nodes import AssignmentStatement, BlockStatement, VariableDeclaration
from ..tokens import TYPE_KEYWORDS, TokenType

logger = logging.getLogger(__name__)


class StatementsMixin:

    def _parse_statement(self):
        tok = self._peek()

        if self._check_separator("{"):
            return self._parse_block()
        if tok.type == TokenType.KEYWORD:
            if tok.value in TYPE_KEYWORDS:
                return self._parse_declaration()
            if tok.value == "return":
                return self._parse_return()
            if tok.value == "if":
                return self._parse_if()
        elif tok.type == TokenType.IDENTIFIER:
            return self._parse_assignment()

        raise self._error("Unexpected token")

    def _parse_block(self) -> BlockStatement:
        tok = self._advance()  # {
        stmts = self._parse_statements_until_brace()
        return BlockStatement(statements=stmts, line=tok.line, col=tok.col)

    def _parse_statements_until_brace(self) -> tuple:
        """Parse statements up to and including the closing '}'."""
        stmts = []
        while not self._check_separator("}"):
            if self._at_end():
                raise self._error("Expected '}'")
            stmts.append(self._parse_statement())
        self._advance()  # }
        return tuple(stmts)

    # ---- Declarations: `<type> <name>` then `(` (function) or `[= expr] ;` ----

    def _parse_declaration(self):
        type_tok = self._advance()
        if not self._check(TokenType.IDENTIFIER):
            raise self._error("Expected identifier after type in variable declaration")
        name_tok = self._advance()

        if self._check_separator("("):
            return self._parse_function_declaration(type_tok, name_tok)

        initializer = None
        if self._check_operator("="):
            self._advance()
            initializer = self._parse_expression()
        self._expect_separator(";", "Expected ';' after variable declaration")
        logger.debug("parsed declaration of '%s' at %d:%d",
                     name_tok.value, type_tok.line, type_tok.col)
        return VariableDeclaration(type=type_tok.value, name=name_tok.value,
                                   initializer=initializer,
                                   name_line=name_tok.line, name_col=name_tok.col,
                                   line=type_tok.line, col=type_tok.col)

    # ---- Assignment: `<name> = expr ;` ----

    def _parse_assignment(self) -> AssignmentStatement:
        name_tok = self._advance()

        if self._check_operator("="):
            self._advance()
            value = self._parse_expression()
            self._expect_separator(";", "Expected ';' after assignment")
            return AssignmentStatement(name=name_tok.value, value=value,
                                       line=name_tok.line, col=name_tok.col)

        if self._check_separator("("):
            raise self._error("Function calls not yet supported")

        raise self._error("Unexpected token after identifier")
