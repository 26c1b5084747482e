"""Items, function signatures, types and patterns, and the crate root."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from sexpr_ast.ast.path import Ident, Inherited, Path, Visibility
from sexpr_ast.ast.span import Attribute, ModSpans, NodeId, Span
from sexpr_ast.ast.stmt import Block


class Mutability(Enum):
    MUT = "Mut"
    NOT = "Not"


@dataclass(frozen=True)
class BindingMode:
    by_ref: bool = False
    mutability: Mutability = Mutability.NOT


@dataclass(frozen=True)
class TyKind:
    tag: ClassVar[str]


@dataclass(frozen=True)
class PathTy(TyKind):
    tag: ClassVar[str] = "Path"
    path: Path


@dataclass(frozen=True)
class Ty:
    id: NodeId
    kind: TyKind
    span: Span = Span.DUMMY


@dataclass(frozen=True)
class PatKind:
    tag: ClassVar[str]


@dataclass(frozen=True)
class IdentPat(PatKind):
    """``x``, ``mut x``, ``ref x`` or ``x @ sub``."""

    tag: ClassVar[str] = "Ident"
    binding_mode: BindingMode
    ident: Ident
    sub: Pat | None = None


@dataclass(frozen=True)
class Pat:
    id: NodeId
    kind: PatKind
    span: Span = Span.DUMMY


@dataclass(frozen=True)
class Param:
    ty: Ty
    pat: Pat
    id: NodeId
    span: Span = Span.DUMMY
    attrs: tuple[Attribute, ...] = ()


@dataclass(frozen=True)
class FnRetTy:
    tag: ClassVar[str]


@dataclass(frozen=True)
class DefaultReturn(FnRetTy):
    """No written return type; the span marks where it would go."""

    tag: ClassVar[str] = "Default"
    span: Span = Span.DUMMY


@dataclass(frozen=True)
class TyReturn(FnRetTy):
    tag: ClassVar[str] = "Ty"
    ty: Ty


@dataclass(frozen=True)
class FnDecl:
    inputs: tuple[Param, ...] = ()
    output: FnRetTy = DefaultReturn()


class Safety(Enum):
    SAFE = "Safe"
    UNSAFE = "Unsafe"
    DEFAULT = "Default"


class Constness(Enum):
    CONST = "Const"
    NOT_CONST = "NotConst"


class CoroutineKind(Enum):
    ASYNC = "Async"
    GEN = "Gen"


@dataclass(frozen=True)
class FnHeader:
    safety: Safety = Safety.DEFAULT
    coroutine_kind: CoroutineKind | None = None
    constness: Constness = Constness.NOT_CONST
    # ABI string of an ``extern "..."`` qualifier.
    ext: str | None = None


@dataclass(frozen=True)
class FnSig:
    header: FnHeader = FnHeader()
    decl: FnDecl = FnDecl()
    span: Span = Span.DUMMY


@dataclass(frozen=True)
class WhereClause:
    has_where_token: bool = False
    predicates: tuple[()] = ()
    span: Span = Span.DUMMY


@dataclass(frozen=True)
class Generics:
    params: tuple[()] = ()
    where_clause: WhereClause = WhereClause()
    span: Span = Span.DUMMY


class Defaultness(Enum):
    DEFAULT = "Default"
    FINAL = "Final"


@dataclass(frozen=True)
class ItemKind:
    tag: ClassVar[str]


@dataclass(frozen=True)
class Fn(ItemKind):
    tag: ClassVar[str] = "Fn"
    sig: FnSig
    defaultness: Defaultness = Defaultness.FINAL
    generics: Generics = Generics()
    body: Block | None = None


@dataclass(frozen=True)
class Item:
    id: NodeId
    ident: Ident
    kind: ItemKind
    vis: Visibility = Inherited()
    span: Span = Span.DUMMY
    attrs: tuple[Attribute, ...] = ()


@dataclass(frozen=True)
class Crate:
    """Root of a built AST."""

    items: tuple[Item, ...]
    spans: ModSpans
    id: NodeId
    attrs: tuple[Attribute, ...] = ()
    is_placeholder: bool = False

    def functions(self) -> list[tuple[Item, Fn]]:
        return [(item, item.kind) for item in self.items if isinstance(item.kind, Fn)]
