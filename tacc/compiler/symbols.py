"""Symbol table: one flat name -> type map per compilation.

There is no nested scoping. Declarations inside blocks and function bodies
land in the same table as top-level ones.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator

from .errors import SemanticError


@dataclass
class SymbolInfo:
    name: str
    type: str
    line: int = 0
    col: int = 0


@dataclass
class SymbolTable:
    symbols: dict[str, SymbolInfo] = field(default_factory=dict)

    def declare(self, name: str, type_name: str, line: int = 0, col: int = 0):
        if name in self.symbols:
            raise SemanticError(f"Variable '{name}' is already declared", line, col)
        self.symbols[name] = SymbolInfo(name, type_name, line, col)

    def lookup(self, name: str, line: int = 0, col: int = 0) -> str:
        info = self.symbols.get(name)
        if info is None:
            raise SemanticError(f"Variable '{name}' is not declared", line, col)
        return info.type

    def get(self, name: str) -> SymbolInfo | None:
        return self.symbols.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.symbols

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[SymbolInfo]:
        return iter(self.symbols.values())

    def as_dict(self) -> dict[str, str]:
        """Name -> declared type, in declaration order."""
        return {name: info.type for name, info in self.symbols.items()}
