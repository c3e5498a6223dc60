"""Semantic analysis package."""

from .analyzer import Analyzer, SemanticError
from .core import BOOL, CHAR, FLOAT, INT, STRING
from .expressions import literal_type

__all__ = [
    "Analyzer", "SemanticError", "literal_type",
    "INT", "FLOAT", "CHAR", "STRING", "BOOL",
]
