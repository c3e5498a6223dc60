#!/usr/bin/env python3
"""tacc: compile a small C-like language to three-address code.

Usage: tacc <input> [-o output.tac] [--emit-tokens] [--emit-ast] [-v]
"""

import argparse
import logging
import os
import pprint
import sys

from .driver import compile_file, compile_source, default_output_path
from .errors import Diagnostic, LexerError
from .lexer import Lexer

EXIT_OK = 0
EXIT_COMPILE_ERROR = 1
EXIT_IO_ERROR = 2


def _format_error(source: str, filename: str, message: str,
                  line: int, col: int) -> str:
    """Format an error with source context and caret."""
    lines = source.split('\n')
    if line < 1 or line > len(lines):
        return f"error: {message}\n --> {filename}:{line}:{col}"
    source_line = lines[line - 1]
    width = len(str(line))
    pad = " " * width
    caret_offset = max(col - 1, 0)
    caret = " " * caret_offset + "^"
    return (
        f"error: {message}\n"
        f" {pad}--> {filename}:{line}:{col}\n"
        f" {pad} |\n"
        f" {line} | {source_line}\n"
        f" {pad} | {caret}"
    )


def _report(source: str, filename: str, diag: Diagnostic):
    message = f"{diag.kind.value} error: {diag.message}"
    print(_format_error(source, filename, message, diag.line, diag.col),
          file=sys.stderr)


def _configure_logging(verbosity: int):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")


def main(argv=None) -> int:
    argparser = argparse.ArgumentParser(prog="tacc", description="tacc compiler")
    argparser.add_argument("input", help="Input source file")
    argparser.add_argument("-o", "--output",
                           help="Output .tac file (default: <input>.tac)")
    argparser.add_argument("--emit-tokens", action="store_true", help="Print token stream")
    argparser.add_argument("--emit-ast", action="store_true", help="Print validated AST")
    argparser.add_argument("-v", "--verbose", action="count", default=0,
                           help="Log progress (-v info, -vv debug)")

    args = argparser.parse_args(argv)
    _configure_logging(args.verbose)
    filename = os.path.basename(args.input)

    if args.emit_tokens or args.emit_ast:
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                source = f.read()
        except OSError as e:
            print(f"Error: could not read '{args.input}': {e.strerror or e}", file=sys.stderr)
            return EXIT_IO_ERROR
        if args.emit_tokens:
            return _emit_tokens(source, filename)
        return _emit_ast(source, filename)

    out_path = args.output or default_output_path(args.input)
    try:
        result = compile_file(args.input, out_path)
    except OSError as e:
        action = "read" if e.filename == args.input else "write"
        print(f"Error: could not {action} '{e.filename}': {e.strerror or e}", file=sys.stderr)
        return EXIT_IO_ERROR

    if not result.ok:
        _report(result.source, filename, result.error)
        return EXIT_COMPILE_ERROR

    print(f"Compilation successful. IR written to {out_path}")
    return EXIT_OK


def _emit_tokens(source: str, filename: str) -> int:
    try:
        tokens = Lexer(source, filename).tokenize()
    except LexerError as e:
        _report(source, filename, e.to_diagnostic())
        return EXIT_COMPILE_ERROR
    for tok in tokens:
        print(tok)
    return EXIT_OK


def _emit_ast(source: str, filename: str) -> int:
    result = compile_source(source, filename)
    if not result.ok:
        _report(source, filename, result.error)
        return EXIT_COMPILE_ERROR
    pprint.pprint(result.tree)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
