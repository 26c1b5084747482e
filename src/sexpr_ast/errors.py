"""Lexical and syntactic error types."""

from __future__ import annotations

from dataclasses import dataclass

from sexpr_ast.common.position import Locator, Position


class LexError(Exception):
    """Malformed character-level input."""

    pos: Position | None = None

    @property
    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message


@dataclass
class UnexpectedChar(LexError):
    ch: str
    pos: Position

    @property
    def message(self) -> str:
        return f"Unexpected character {self.ch!r} at {self.pos}"


@dataclass
class UnterminatedString(LexError):
    pos: Position

    @property
    def message(self) -> str:
        return f"Unterminated string at {self.pos}"


@dataclass
class InvalidEscape(LexError):
    ch: str
    pos: Position

    @property
    def message(self) -> str:
        return f"Invalid escape sequence '\\{self.ch}' at {self.pos}"


@dataclass
class UnexpectedEof(LexError):
    @property
    def message(self) -> str:
        return "Unexpected end of input"


class ParseError(Exception):
    """Malformed structure or schema mismatch.

    Raised by both the parser and the AST builder.
    """

    pos: Position | None = None

    @property
    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message


@dataclass
class UnexpectedToken(ParseError):
    token: str
    pos: Position

    @property
    def message(self) -> str:
        return f"Unexpected token {self.token!r} at {self.pos}"


@dataclass
class Expected(ParseError):
    expected: str
    found: str
    pos: Position

    @property
    def message(self) -> str:
        return f"Expected {self.expected}, found {self.found} at {self.pos}"


@dataclass
class UnterminatedList(ParseError):
    pos: Position

    @property
    def message(self) -> str:
        return f"Unterminated list at {self.pos}"


@dataclass
class UnexpectedCloseParen(ParseError):
    pos: Position

    @property
    def message(self) -> str:
        return f"Unexpected closing parenthesis at {self.pos}"


@dataclass
class EmptyInput(ParseError):
    @property
    def message(self) -> str:
        return "Empty input"


@dataclass
class NestingTooDeep(ParseError):
    limit: int
    pos: Position

    @property
    def message(self) -> str:
        return f"Nesting deeper than {self.limit} levels at {self.pos}"


@dataclass
class LexFailure(ParseError):
    error: LexError

    @property
    def pos(self) -> Position | None:  # type: ignore[override]
        return self.error.pos

    @property
    def message(self) -> str:
        return f"Lexer error: {self.error}"


def format_diagnostic(error: LexError | ParseError, source: str) -> str:
    """Render ``error`` with the offending source line and a caret."""

    pos = error.pos
    if pos is None:
        return str(error)
    locator = Locator(source)
    try:
        line_text = locator.line_text(pos.line)
    except IndexError:
        return str(error)
    gutter = " " * len(str(pos.line))
    caret = " " * (pos.column - 1) + "^"
    return f"{error}\n {pos.line} | {line_text}\n {gutter} | {caret}"
