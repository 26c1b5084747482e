"""Expressions and their phase-1 kinds: macro calls, literals, paths."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from sexpr_ast.ast.path import Path
from sexpr_ast.ast.span import Attribute, DelSpan, NodeId, Span, TokenStream


class Delimiter(Enum):
    PAREN = "Paren"
    BRACE = "Brace"
    BRACKET = "Bracket"
    INVISIBLE = "Invisible"


@dataclass(frozen=True)
class MacArgs:
    tag: ClassVar[str]


@dataclass(frozen=True)
class EmptyArgs(MacArgs):
    tag: ClassVar[str] = "Empty"


@dataclass(frozen=True)
class DelimitedArgs(MacArgs):
    """``name!(...)``, ``name![...]`` or ``name!{...}``."""

    tag: ClassVar[str] = "Delimited"
    dspan: DelSpan = DelSpan()
    delim: Delimiter = Delimiter.PAREN
    tokens: TokenStream | None = None


@dataclass(frozen=True)
class EqArgs(MacArgs):
    """``#[name = value]`` style arguments."""

    tag: ClassVar[str] = "Eq"
    eq_span: Span = Span.DUMMY
    tokens: TokenStream | None = None


@dataclass(frozen=True)
class LitKind:
    tag: ClassVar[str]


@dataclass(frozen=True)
class StrLit(LitKind):
    tag: ClassVar[str] = "Str"
    value: str


@dataclass(frozen=True)
class IntLit(LitKind):
    tag: ClassVar[str] = "Int"
    value: int


I128_MIN = -(2**127)
I128_MAX = 2**127 - 1


@dataclass(frozen=True)
class ExprKind:
    tag: ClassVar[str]


@dataclass(frozen=True)
class MacCall(ExprKind):
    tag: ClassVar[str] = "MacCall"
    path: Path
    args: MacArgs = EmptyArgs()


@dataclass(frozen=True)
class Lit(ExprKind):
    tag: ClassVar[str] = "Lit"
    kind: LitKind
    span: Span = Span.DUMMY


@dataclass(frozen=True)
class PathExpr(ExprKind):
    tag: ClassVar[str] = "Path"
    path: Path


@dataclass(frozen=True)
class Expr:
    id: NodeId
    kind: ExprKind
    span: Span = Span.DUMMY
    attrs: tuple[Attribute, ...] = ()
