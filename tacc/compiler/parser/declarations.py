"""Function declaration parsing."""

import logging

from ..ast_nodes import FunctionDeclaration, Param
from ..tokens import TYPE_KEYWORDS, Token, TokenType

logger = logging.getLogger(__name__)


class DeclarationsMixin:

    def _parse_function_declaration(self, type_tok: Token,
                                    name_tok: Token) -> FunctionDeclaration:
        self._advance()  # (
        params = self._parse_params()
        self._expect_separator(")", "Expected ')' after function parameters")
        self._expect_separator("{", "Expected '{' at the beginning of function body")
        body = self._parse_statements_until_brace()
        logger.debug("parsed function '%s' (%d params, %d statements)",
                     name_tok.value, len(params), len(body))
        return FunctionDeclaration(return_type=type_tok.value, name=name_tok.value,
                                   params=params, body=body,
                                   name_line=name_tok.line, name_col=name_tok.col,
                                   line=type_tok.line, col=type_tok.col)

    def _parse_params(self) -> tuple[Param, ...]:
        """Comma-separated `<type> <name>` pairs; stops before ')'."""
        params = []
        while not self._check_separator(")"):
            tok = self._peek()
            is_type = (tok.type == TokenType.IDENTIFIER or
                       (tok.type == TokenType.KEYWORD and tok.value in TYPE_KEYWORDS))
            if not is_type:
                raise self._error("Expected parameter type in function declaration")
            self._advance()
            if not self._check(TokenType.IDENTIFIER):
                raise self._error("Expected parameter name after type in function declaration")
            name_tok = self._advance()
            params.append(Param(type=tok.value, name=name_tok.value,
                                line=tok.line, col=tok.col))
            if not self._check_separator(","):
                break
            self._advance()
        return tuple(params)
