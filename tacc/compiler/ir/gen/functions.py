"""Function lowering: FunctionDeclaration -> LABEL, body, RET."""

from __future__ import annotations
from typing import TYPE_CHECKING

from ...ast_nodes import FunctionDeclaration
from ..nodes import LABEL, RET

if TYPE_CHECKING:
    from .generator import GenContext


def lower_function(ctx: GenContext, decl: FunctionDeclaration):
    from .statements import lower_stmt
    ctx.emit(LABEL, "", "", decl.name)
    for stmt in decl.body:
        lower_stmt(ctx, stmt)
        if ctx.last_op() == RET:
            return
    # Falling off the end returns implicitly
    ctx.emit(RET)
