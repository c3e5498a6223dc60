"""Pipeline orchestration: source text -> tokens -> validated AST -> TAC.

compile_source() is the boundary between the compiler core and its callers.
Inside the stages the first CompileError aborts; here it is converted into a
CompileResult carrying a Diagnostic instead of an instruction list.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from .ast_nodes import Statement
from .errors import NESTING_TOO_DEEP, CompileError, Diagnostic, ParseError
from .ir import IRGenerator, TACInstruction, write_instructions
from .lexer import Lexer
from .parser import Parser
from .symbols import SymbolTable
from .tokens import Token

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = ".tac"


@dataclass
class CompileResult:
    source: str
    tokens: list[Token] = field(default_factory=list)
    tree: Optional[Statement] = None
    symbols: Optional[SymbolTable] = None
    instructions: list[TACInstruction] = field(default_factory=list)
    error: Optional[Diagnostic] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def compile_source(source: str, filename: str = "<stdin>") -> CompileResult:
    """Run every stage over `source`. Compile errors and over-deep nesting
    come back as `result.error`; nothing is raised for either."""
    result = CompileResult(source=source)
    try:
        result.tokens = Lexer(source, filename).tokenize()
        parser = Parser(result.tokens)
        result.tree = parser.parse()
        result.symbols = parser.symbols
        result.instructions = IRGenerator().generate_code(result.tree)
    except CompileError as e:
        logger.debug("%s: %s error: %s", filename, e.kind.value, e)
        result.error = e.to_diagnostic()
        result.instructions = []
    except RecursionError:
        logger.debug("%s: recursion limit reached", filename)
        result.error = ParseError(NESTING_TOO_DEEP).to_diagnostic()
        result.instructions = []
    return result


def default_output_path(input_path: str) -> str:
    return os.path.splitext(input_path)[0] + OUTPUT_SUFFIX


def compile_file(input_path: str, output_path: str | None = None) -> CompileResult:
    """Compile a file and write its TAC. I/O failures raise OSError.

    Nothing is written when compilation fails.
    """
    with open(input_path, "r", encoding="utf-8") as f:
        source = f.read()
    result = compile_source(source, os.path.basename(input_path))
    if result.ok:
        write_instructions(result.instructions, output_path or default_output_path(input_path))
    return result
