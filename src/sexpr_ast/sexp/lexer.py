"""Tokenizer for the S-expression notation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

import ply.lex as lex  # type: ignore[import-untyped]

from sexpr_ast.common.position import Locator, Position
from sexpr_ast.errors import InvalidEscape, UnexpectedChar, UnterminatedString

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    LPAREN = "("
    RPAREN = ")"
    SYMBOL = "symbol"
    KEYWORD = "keyword"
    STRING = "string"
    NUMBER = "number"
    NIL = "nil"
    EOF = "end of input"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str
    pos: Position


ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "\\": "\\", '"': '"'}

_SYMBOL_PUNCT = r"\-+*/=<>!?&"
_SYMBOL_START = rf"(?:[^\W\d]|[{_SYMBOL_PUNCT}])"
_SYMBOL_CHAR = rf"(?:\w|[{_SYMBOL_PUNCT}'])"

tokens = (
    "LPAREN",
    "RPAREN",
    "KEYWORD",
    "STRING",
    "NUMBER",
    "SYMBOL",
    "NIL",
)

t_LPAREN = r"\("
t_RPAREN = r"\)"

t_ignore = " \t\r\f\v"
t_ignore_COMMENT = r";[^\n]*"


def t_newline(t: lex.LexToken) -> None:
    r"\n+"
    t.lexer.lineno += len(t.value)


def t_space(t: lex.LexToken) -> None:
    r"[^\S\n]+"
    # Non-ASCII whitespace such as U+00A0 or U+2028; ASCII is in t_ignore.


@lex.TOKEN(rf":{_SYMBOL_CHAR}+")
def t_KEYWORD(t: lex.LexToken) -> lex.LexToken:
    t.value = t.value[1:]
    return t


def t_STRING(t: lex.LexToken) -> lex.LexToken:
    r'"'
    value, end = read_string(t.lexer.lexdata, t.lexpos, t.lexer.locator)
    t.value = value
    t.lexer.lexpos = end
    return t


def t_NUMBER(t: lex.LexToken) -> lex.LexToken:
    r"-?[0-9]+"
    return t


@lex.TOKEN(rf"{_SYMBOL_START}{_SYMBOL_CHAR}*")
def t_SYMBOL(t: lex.LexToken) -> lex.LexToken:
    if t.value == "nil":
        t.type = "NIL"
    return t


def t_error(t: lex.LexToken) -> None:
    pos = t.lexer.locator.position(t.lexpos)
    raise UnexpectedChar(t.value[0], pos)


def read_string(text: str, start: int, locator: Locator) -> tuple[str, int]:
    """Read the string literal whose opening quote is at ``start``.

    Returns the unescaped value and the index just past the closing quote.
    """

    chars: list[str] = []
    i = start + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == '"':
            return "".join(chars), i + 1
        if ch == "\\":
            i += 1
            if i >= n:
                break
            escaped = ESCAPES.get(text[i])
            if escaped is None:
                raise InvalidEscape(text[i], locator.position(i))
            chars.append(escaped)
        else:
            chars.append(ch)
        i += 1
    raise UnterminatedString(locator.position(start))


_LEXER: lex.Lexer | None = None


def _new_lexer(text: str) -> lex.Lexer:
    global _LEXER
    if _LEXER is None:
        _LEXER = lex.lex()
    lexer = _LEXER.clone()
    lexer.locator = Locator(text)
    lexer.input(text)
    return lexer


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens, ending with an ``EOF`` token."""

    lexer = _new_lexer(text)
    locator: Locator = lexer.locator
    out: list[Token] = []
    for tok in iter(lexer.token, None):
        kind = TokenKind[tok.type]
        out.append(Token(kind, tok.value, locator.position(tok.lexpos)))
    out.append(Token(TokenKind.EOF, "", locator.position(len(text))))
    logger.debug("tokenized %d characters into %d tokens", len(text), len(out))
    return out
