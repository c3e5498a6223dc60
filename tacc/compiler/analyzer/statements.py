"""Statement checks: declarations, assignments, if, return, blocks, functions."""

import logging

from ..ast_nodes import (
    AssignmentStatement, BlockStatement, FunctionDeclaration, IfStatement,
    ReturnStatement, VariableDeclaration,
)
from ..errors import SemanticError
from .core import CONDITION_TYPES

logger = logging.getLogger(__name__)


class StatementsMixin:

    def _check_stmt(self, stmt):
        if isinstance(stmt, VariableDeclaration):
            self._check_var_decl(stmt)
        elif isinstance(stmt, AssignmentStatement):
            self._check_assignment(stmt)
        elif isinstance(stmt, IfStatement):
            self._check_if(stmt)
        elif isinstance(stmt, ReturnStatement):
            if stmt.value is not None:
                self._check_expr(stmt.value)
        elif isinstance(stmt, BlockStatement):
            for inner in stmt.statements:
                self._check_stmt(inner)
        elif isinstance(stmt, FunctionDeclaration):
            # Parameters are not entered into the table; one flat scope
            for inner in stmt.body:
                self._check_stmt(inner)
        else:
            raise TypeError(f"Unhandled statement node {type(stmt).__name__}")

    def _check_var_decl(self, decl: VariableDeclaration):
        self.symbols.declare(decl.name, decl.type, decl.line, decl.col)
        logger.debug("declared %s %s", decl.type, decl.name)
        if decl.initializer is None:
            return
        self._check_expr(decl.initializer)
        init_type = self.type_of(decl.initializer)
        self._check_assignable(
            decl.type, init_type,
            f"Type mismatch: Cannot initialize variable of type '{decl.type}' "
            f"with value of type '{init_type}'",
            decl.line, decl.col)

    def _check_assignment(self, stmt: AssignmentStatement):
        self._check_expr(stmt.value)
        var_type = self.symbols.lookup(stmt.name, stmt.line, stmt.col)
        value_type = self.type_of(stmt.value)
        self._check_assignable(
            var_type, value_type,
            f"Type mismatch in assignment: Cannot assign {value_type} to {var_type}",
            stmt.line, stmt.col)

    def _check_if(self, stmt: IfStatement):
        self._check_expr(stmt.condition)
        cond_type = self.type_of(stmt.condition)
        if cond_type not in CONDITION_TYPES:
            raise SemanticError(
                f"Condition in 'if' statement must be of type int or bool, "
                f"got '{cond_type}'",
                stmt.condition.line, stmt.condition.col)
        self._check_stmt(stmt.then_branch)
        if stmt.else_branch is not None:
            self._check_stmt(stmt.else_branch)
