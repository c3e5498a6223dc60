"""Three-address code (TAC) instruction definitions.

A compiled program is a flat, ordered list of TACInstruction records; list
order is control-flow order. Every field is plain text. An absent operand is
the empty string, so the text form of `LABEL` with target L1 is
"LABEL   L1" (four fields joined by single spaces).
"""

from __future__ import annotations
from dataclasses import dataclass

# Opcodes besides the binary operators, which use their operator text as op
MOV = "MOV"
IF_FALSE = "IF_FALSE"
GOTO = "GOTO"
LABEL = "LABEL"
RET = "RET"


@dataclass(frozen=True)
class TACInstruction:
    """`result = arg1 op arg2`, or a control instruction using a subset of fields."""
    op: str
    arg1: str = ""
    arg2: str = ""
    result: str = ""

    def __str__(self) -> str:
        return f"{self.op} {self.arg1} {self.arg2} {self.result}"
