"""tacc compiler package."""

from .lexer import Lexer as Lexer, LexerError as LexerError
from .parser import Parser as Parser, ParseError as ParseError
from .analyzer import Analyzer as Analyzer, SemanticError as SemanticError
from .ir import IRGenerator as IRGenerator, TACInstruction as TACInstruction
from .errors import CompileError as CompileError, Diagnostic as Diagnostic, ErrorKind as ErrorKind
from .driver import CompileResult as CompileResult, compile_source as compile_source
