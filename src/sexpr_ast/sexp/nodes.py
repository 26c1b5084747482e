"""Generic S-expression parse tree."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, ClassVar

from sexpr_ast.common.position import Position


@dataclass(frozen=True)
class SExp:
    """Base class for parse tree nodes. Every concrete node has a ``pos``."""

    kind: ClassVar[str] = "sexp"

    if TYPE_CHECKING:
        pos: Position


@dataclass(frozen=True)
class Symbol(SExp):
    kind: ClassVar[str] = "symbol"
    value: str
    pos: Position


@dataclass(frozen=True)
class Keyword(SExp):
    kind: ClassVar[str] = "keyword"
    # Without the leading ':'.
    name: str
    pos: Position


@dataclass(frozen=True)
class StringLit(SExp):
    kind: ClassVar[str] = "string"
    # Already unescaped.
    value: str
    pos: Position


@dataclass(frozen=True)
class Number(SExp):
    kind: ClassVar[str] = "number"
    # Literal text, interpreted by consumers.
    value: str
    pos: Position


@dataclass(frozen=True)
class Nil(SExp):
    kind: ClassVar[str] = "nil"
    pos: Position


@dataclass(frozen=True)
class List(SExp):
    kind: ClassVar[str] = "list"
    elements: tuple[SExp, ...]
    # Position of the opening paren.
    pos: Position


def describe(sexp: SExp) -> str:
    """Short description of ``sexp`` for error messages."""

    match sexp:
        case Symbol(value):
            return f"symbol {value}"
        case Keyword(name):
            return f"keyword :{name}"
        case StringLit(value):
            return f"string {value!r}"
        case Number(value):
            return f"number {value}"
        case Nil():
            return "nil"
        case List(elements) if not elements:
            return "empty list"
        case List():
            return "list"
    raise TypeError(f"Not an S-expression: {sexp!r}")


def strip_positions(sexp: SExp) -> SExp:
    """Return a copy of ``sexp`` with every position reset to the origin."""

    origin = Position.start()
    if isinstance(sexp, List):
        return List(tuple(strip_positions(e) for e in sexp.elements), origin)
    return replace(sexp, pos=origin)
