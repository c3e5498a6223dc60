"""Analyzer core: type names, promotion rule, and orchestration."""

from __future__ import annotations

import logging

from ..errors import SemanticError
from ..symbols import SymbolTable

logger = logging.getLogger(__name__)

INT = "int"
FLOAT = "float"
CHAR = "char"
STRING = "std::string"
BOOL = "bool"

# Types an `if` condition may have
CONDITION_TYPES = frozenset({INT, BOOL})


class AnalyzerBase:
    def __init__(self, symbols: SymbolTable | None = None):
        self.symbols = symbols if symbols is not None else SymbolTable()

    def analyze(self, tree) -> SymbolTable:
        """Validate a tree top-down; raises SemanticError on the first fault."""
        self._check_stmt(tree)
        logger.debug("semantic analysis passed, %d symbols", len(self.symbols))
        return self.symbols

    def _check_assignable(self, target_type: str, value_type: str, message: str,
                          line: int, col: int):
        """int values promote into float targets; every other mismatch is fatal."""
        if value_type == INT and target_type == FLOAT:
            return
        if value_type == FLOAT and target_type == INT:
            raise SemanticError("Cannot assign float to int without explicit cast",
                                line, col)
        if value_type != target_type:
            raise SemanticError(message, line, col)
