"""Parser assembly: combines all parsing mixins into the final Parser class."""

from ..errors import ParseError
from .core import ParserBase
from .statements import StatementsMixin
from .declarations import DeclarationsMixin
from .control_flow import ControlFlowMixin
from .expressions import ExpressionsMixin


class Parser(
    ExpressionsMixin,
    ControlFlowMixin,
    DeclarationsMixin,
    StatementsMixin,
    ParserBase,
):
    """Recursive descent parser for the tacc source language."""
    pass


__all__ = ["Parser", "ParseError"]
