"""S-expression front end producing a typed compiler AST."""

from sexpr_ast.builder import AstBuilder, build_crate_from_str
from sexpr_ast.common.position import Position
from sexpr_ast.config import ParseOptions, PrinterOptions
from sexpr_ast.errors import (
    EmptyInput,
    Expected,
    InvalidEscape,
    LexError,
    LexFailure,
    NestingTooDeep,
    ParseError,
    UnexpectedChar,
    UnexpectedCloseParen,
    UnexpectedEof,
    UnexpectedToken,
    UnterminatedList,
    UnterminatedString,
    format_diagnostic,
)
from sexpr_ast.sexp import Parser, Printer, SExp, parse_all, parse_str, print_sexp, tokenize

__all__ = [
    "AstBuilder",
    "EmptyInput",
    "Expected",
    "InvalidEscape",
    "LexError",
    "LexFailure",
    "NestingTooDeep",
    "ParseError",
    "ParseOptions",
    "Parser",
    "Position",
    "Printer",
    "PrinterOptions",
    "SExp",
    "UnexpectedChar",
    "UnexpectedCloseParen",
    "UnexpectedEof",
    "UnexpectedToken",
    "UnterminatedList",
    "UnterminatedString",
    "build_crate_from_str",
    "format_diagnostic",
    "parse_all",
    "parse_str",
    "print_sexp",
    "tokenize",
]
