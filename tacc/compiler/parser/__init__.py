"""Recursive descent parser package."""

from .parser import Parser, ParseError
from .expressions import PRECEDENCE

__all__ = ["Parser", "ParseError", "PRECEDENCE"]
