"""Analyzer assembly: combines all analysis mixins into the final Analyzer class."""

from ..errors import SemanticError
from .core import AnalyzerBase
from .statements import StatementsMixin
from .expressions import ExpressionsMixin


class Analyzer(
    ExpressionsMixin,
    StatementsMixin,
    AnalyzerBase,
):
    """Semantic analyzer for the tacc source language."""
    pass


__all__ = ["Analyzer", "SemanticError"]
