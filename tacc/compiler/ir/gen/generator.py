"""IR Generator: main class and per-compilation lowering context.

Walks a validated tree once and produces a flat TAC instruction list. The
temporary and label counters live on a GenContext created for each call to
generate_code(), so one generator can compile many trees deterministically.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..nodes import TACInstruction
from .statements import lower_stmt

logger = logging.getLogger(__name__)


@dataclass
class GenContext:
    """Mutable state for one lowering pass: the growing code list and counters."""
    code: list[TACInstruction] = field(default_factory=list)
    temp_counter: int = 0
    label_counter: int = 0

    def emit(self, op: str, arg1: str = "", arg2: str = "", result: str = ""):
        self.code.append(TACInstruction(op, arg1, arg2, result))

    def fresh_temp(self) -> str:
        """t0, t1, ... never reused within one compilation."""
        name = f"t{self.temp_counter}"
        self.temp_counter += 1
        return name

    def fresh_label(self) -> str:
        """L1, L2, ... never reused within one compilation."""
        self.label_counter += 1
        return f"L{self.label_counter}"

    def last_op(self) -> str | None:
        return self.code[-1].op if self.code else None


class IRGenerator:
    """Lowers a validated AST into three-address code."""

    def generate_code(self, tree) -> list[TACInstruction]:
        ctx = GenContext()
        # A root block lowers like any other statement list
        lower_stmt(ctx, tree)
        logger.debug("generated %d instructions (%d temps, %d labels)",
                     len(ctx.code), ctx.temp_counter, ctx.label_counter)
        return ctx.code
