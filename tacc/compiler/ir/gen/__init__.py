"""IR generation package: AST -> three-address code lowering."""

from ..nodes import TACInstruction
from .generator import GenContext, IRGenerator


def generate_ir(tree) -> list[TACInstruction]:
    """Generate TAC for a validated tree.

    This is the main entry point for the IR generation pipeline.
    """
    return IRGenerator().generate_code(tree)


__all__ = ["generate_ir", "IRGenerator", "GenContext"]
