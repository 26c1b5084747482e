"""Recursive-descent parser producing the generic S-expression tree."""

from __future__ import annotations

import logging

from sexpr_ast.config import ParseOptions
from sexpr_ast.errors import (
    EmptyInput,
    LexError,
    LexFailure,
    NestingTooDeep,
    UnexpectedCloseParen,
    UnexpectedToken,
    UnterminatedList,
)
from sexpr_ast.sexp.lexer import Token, TokenKind, tokenize
from sexpr_ast.sexp.nodes import Keyword, List, Nil, Number, SExp, StringLit, Symbol

logger = logging.getLogger(__name__)

_LEAVES = {
    TokenKind.SYMBOL: lambda tok: Symbol(tok.lexeme, tok.pos),
    TokenKind.KEYWORD: lambda tok: Keyword(tok.lexeme, tok.pos),
    TokenKind.STRING: lambda tok: StringLit(tok.lexeme, tok.pos),
    TokenKind.NUMBER: lambda tok: Number(tok.lexeme, tok.pos),
    TokenKind.NIL: lambda tok: Nil(tok.pos),
}


class Parser:
    """Single-token lookahead over a token list that ends with ``EOF``."""

    def __init__(self, tokens: list[Token], options: ParseOptions | None = None):
        if not tokens or tokens[-1].kind is not TokenKind.EOF:
            raise ValueError("token stream must end with an EOF token")
        self.tokens = tokens
        self.options = options or ParseOptions()
        self.current = 0

    def parse(self) -> SExp:
        """Parse the first top-level expression."""

        if self.at_end():
            raise EmptyInput()
        sexp = self.parse_sexp(0)
        if not self.at_end():
            trailing = self.peek()
            if self.options.require_eof:
                raise UnexpectedToken(trailing.lexeme, trailing.pos)
            logger.debug("ignoring trailing input starting at %s", trailing.pos)
        return sexp

    def parse_all(self) -> tuple[SExp, ...]:
        """Parse every top-level expression until end of input."""

        out: list[SExp] = []
        while not self.at_end():
            out.append(self.parse_sexp(0))
        return tuple(out)

    def parse_sexp(self, depth: int) -> SExp:
        tok = self.peek()
        match tok.kind:
            case TokenKind.LPAREN:
                return self.parse_list(depth + 1)
            case TokenKind.RPAREN:
                raise UnexpectedCloseParen(tok.pos)
            case TokenKind.EOF:
                raise EmptyInput()
        self.advance()
        return _LEAVES[tok.kind](tok)

    def parse_list(self, depth: int) -> List:
        open_paren = self.peek()
        if depth > self.options.max_depth:
            raise NestingTooDeep(self.options.max_depth, open_paren.pos)
        self.advance()
        elements: list[SExp] = []
        while True:
            tok = self.peek()
            if tok.kind is TokenKind.EOF:
                raise UnterminatedList(open_paren.pos)
            if tok.kind is TokenKind.RPAREN:
                self.advance()
                return List(tuple(elements), open_paren.pos)
            elements.append(self.parse_sexp(depth))

    def peek(self) -> Token:
        return self.tokens[self.current]

    def advance(self) -> None:
        if not self.at_end():
            self.current += 1

    def at_end(self) -> bool:
        return self.peek().kind is TokenKind.EOF


def _tokens(text: str) -> list[Token]:
    try:
        return tokenize(text)
    except LexError as err:
        raise LexFailure(err) from err


def parse_str(text: str, options: ParseOptions | None = None) -> SExp:
    """Tokenize and parse the first expression in ``text``."""

    return Parser(_tokens(text), options).parse()


def parse_all(text: str, options: ParseOptions | None = None) -> tuple[SExp, ...]:
    """Tokenize and parse every top-level expression in ``text``."""

    return Parser(_tokens(text), options).parse_all()
