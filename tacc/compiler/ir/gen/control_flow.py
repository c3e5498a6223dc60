"""Control flow lowering: if/else and return."""

from __future__ import annotations
from typing import TYPE_CHECKING

from ...ast_nodes import IfStatement, ReturnStatement
from ..nodes import GOTO, IF_FALSE, LABEL, RET
from .expressions import lower_expr

if TYPE_CHECKING:
    from .generator import GenContext


def lower_if(ctx: GenContext, node: IfStatement):
    """IF_FALSE cond -> else; then; GOTO end; LABEL else; [else]; LABEL end."""
    from .statements import lower_stmt
    cond = lower_expr(ctx, node.condition)
    else_label = ctx.fresh_label()
    end_label = ctx.fresh_label()

    ctx.emit(IF_FALSE, cond, "", else_label)
    lower_stmt(ctx, node.then_branch)
    ctx.emit(GOTO, "", "", end_label)
    ctx.emit(LABEL, "", "", else_label)
    if node.else_branch is not None:
        lower_stmt(ctx, node.else_branch)
    ctx.emit(LABEL, "", "", end_label)


def lower_return(ctx: GenContext, node: ReturnStatement):
    if node.value is not None:
        ctx.emit(RET, lower_expr(ctx, node.value), "", "")
    else:
        ctx.emit(RET)
