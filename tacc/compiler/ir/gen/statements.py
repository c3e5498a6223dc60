"""Statement lowering: declarations, assignments, blocks, and dispatch."""

from __future__ import annotations
from typing import TYPE_CHECKING

from ...ast_nodes import (
    AssignmentStatement, BlockStatement, FunctionDeclaration, IfStatement,
    ReturnStatement, VariableDeclaration,
)
from ..nodes import MOV
from .expressions import lower_expr

if TYPE_CHECKING:
    from .generator import GenContext


def lower_stmt(ctx: GenContext, stmt):
    from .control_flow import lower_if, lower_return
    from .functions import lower_function

    if isinstance(stmt, VariableDeclaration):
        # Declarations without an initializer emit nothing
        if stmt.initializer is not None:
            value = lower_expr(ctx, stmt.initializer)
            ctx.emit(MOV, value, "", stmt.name)
    elif isinstance(stmt, AssignmentStatement):
        value = lower_expr(ctx, stmt.value)
        ctx.emit(MOV, value, "", stmt.name)
    elif isinstance(stmt, IfStatement):
        lower_if(ctx, stmt)
    elif isinstance(stmt, ReturnStatement):
        lower_return(ctx, stmt)
    elif isinstance(stmt, BlockStatement):
        lower_statements(ctx, stmt.statements)
    elif isinstance(stmt, FunctionDeclaration):
        lower_function(ctx, stmt)
    else:
        raise TypeError(f"Unhandled statement node {type(stmt).__name__}")


def lower_statements(ctx: GenContext, stmts):
    """Lower a statement list; siblings after a return are unreachable."""
    for stmt in stmts:
        lower_stmt(ctx, stmt)
        if isinstance(stmt, ReturnStatement):
            break
