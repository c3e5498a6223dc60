"""tacc: a small C-like language compiled to three-address code."""

__version__ = "0.1.0"
