"""Identifiers, paths and visibility."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from sexpr_ast.ast.span import NodeId, Span, TokenStream


@dataclass(frozen=True)
class Ident:
    name: str
    span: Span = Span.DUMMY


@dataclass(frozen=True)
class GenericArgs:
    """Generic argument list placeholder; only its span is tracked."""

    span: Span = Span.DUMMY


@dataclass(frozen=True)
class PathSegment:
    ident: Ident
    id: NodeId = NodeId.DUMMY
    args: GenericArgs | None = None


@dataclass(frozen=True)
class Path:
    span: Span
    segments: tuple[PathSegment, ...]
    tokens: TokenStream | None = None

    def __str__(self) -> str:
        return "::".join(seg.ident.name for seg in self.segments)


class VisRestrictionKind(Enum):
    CRATE = "Crate"
    SUPER = "Super"
    IN = "In"


@dataclass(frozen=True)
class Visibility:
    tag: ClassVar[str]


@dataclass(frozen=True)
class Public(Visibility):
    tag: ClassVar[str] = "Public"


@dataclass(frozen=True)
class Inherited(Visibility):
    tag: ClassVar[str] = "Inherited"


@dataclass(frozen=True)
class Restricted(Visibility):
    """``pub(crate)``, ``pub(super)`` or ``pub(in path)``."""

    tag: ClassVar[str] = "Restricted"
    path: Path
    shorthand: VisRestrictionKind
    span: Span = Span.DUMMY
