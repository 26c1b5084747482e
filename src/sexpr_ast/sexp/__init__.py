"""Generic S-expression layer: tokens, tree nodes, parser and printer."""

from .lexer import Token, TokenKind, tokenize
from .nodes import (
    Keyword,
    List,
    Nil,
    Number,
    SExp,
    StringLit,
    Symbol,
    describe,
    strip_positions,
)
from .parser import Parser, parse_all, parse_str
from .printer import Printer, escape_string, print_sexp

__all__ = [
    "Keyword",
    "List",
    "Nil",
    "Number",
    "Parser",
    "Printer",
    "SExp",
    "StringLit",
    "Symbol",
    "Token",
    "TokenKind",
    "describe",
    "escape_string",
    "parse_all",
    "parse_str",
    "print_sexp",
    "strip_positions",
    "tokenize",
]
