"""TAC text emission: one instruction per line, no header or footer."""

from __future__ import annotations

import logging
from typing import Iterable

from .nodes import TACInstruction

logger = logging.getLogger(__name__)


def emit_text(instructions: Iterable[TACInstruction]) -> str:
    return "".join(f"{instr}\n" for instr in instructions)


def write_instructions(instructions: list[TACInstruction], path: str):
    """Write the program to `path`. OSError propagates to the caller."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(emit_text(instructions))
    logger.info("wrote %d instructions to %s", len(instructions), path)
