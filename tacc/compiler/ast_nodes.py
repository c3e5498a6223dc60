"""AST node definitions for the tacc source language.

Nodes are immutable and own their children outright (a tree, never a graph).
Every node records the line/col of its first token for error reporting.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union


# ---- Expressions ----

@dataclass(frozen=True)
class LiteralExpression:
    value: str = ""                              # source text, quotes included
    line: int = 0
    col: int = 0


@dataclass(frozen=True)
class VariableExpression:
    name: str = ""
    line: int = 0
    col: int = 0


@dataclass(frozen=True)
class BinaryExpression:
    left: Expression = None
    op: str = ""                                 # operator text, e.g. "+", "&&"
    right: Expression = None
    line: int = 0
    col: int = 0


# ---- Statements ----

@dataclass(frozen=True)
class VariableDeclaration:
    type: str = ""                               # "int" | "float" | "char" | "std::string"
    name: str = ""
    initializer: Optional[Expression] = None
    line: int = 0
    col: int = 0
    name_line: int = 0                           # position of the declared name
    name_col: int = 0


@dataclass(frozen=True)
class AssignmentStatement:
    name: str = ""
    value: Expression = None
    line: int = 0
    col: int = 0


@dataclass(frozen=True)
class IfStatement:
    condition: Expression = None
    then_branch: Statement = None
    else_branch: Optional[Statement] = None
    line: int = 0
    col: int = 0


@dataclass(frozen=True)
class ReturnStatement:
    value: Optional[Expression] = None
    line: int = 0
    col: int = 0


@dataclass(frozen=True)
class BlockStatement:
    statements: tuple[Statement, ...] = ()
    line: int = 0
    col: int = 0


@dataclass(frozen=True)
class Param:
    type: str = ""
    name: str = ""
    line: int = 0
    col: int = 0

    def __str__(self):
        return f"{self.type} {self.name}"


@dataclass(frozen=True)
class FunctionDeclaration:
    return_type: str = ""
    name: str = ""
    params: tuple[Param, ...] = ()
    body: tuple[Statement, ...] = ()
    line: int = 0
    col: int = 0
    name_line: int = 0                           # position of the declared name
    name_col: int = 0

    def signature(self) -> str:
        params = ", ".join(str(p) for p in self.params)
        return f"{self.return_type} {self.name}({params})"


# Closed node families
Expression = Union[BinaryExpression, LiteralExpression, VariableExpression]
Statement = Union[
    VariableDeclaration, AssignmentStatement, IfStatement,
    ReturnStatement, BlockStatement, FunctionDeclaration,
]


def left_spine(expr: BinaryExpression) -> tuple[list[BinaryExpression], Expression]:
    """Split a left-leaning operator chain into its binary nodes and leftmost operand.

    Nodes come back innermost first, i.e. in evaluation order. The walk is
    iterative, so chain length is not bounded by the recursion limit.
    """
    spine = []
    while isinstance(expr, BinaryExpression):
        spine.append(expr)
        expr = expr.left
    spine.reverse()
    return spine, expr
