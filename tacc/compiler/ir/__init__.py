"""IR package: TAC nodes, text emitter, and the AST lowering pass."""

from .nodes import (
    GOTO, IF_FALSE, LABEL, MOV, RET, TACInstruction,
)
from .emitter import emit_text, write_instructions
from .gen import IRGenerator, generate_ir
