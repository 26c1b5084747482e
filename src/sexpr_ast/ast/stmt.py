"""Statements and blocks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from sexpr_ast.ast.expr import Expr
from sexpr_ast.ast.span import NodeId, Span, TokenStream


@dataclass(frozen=True)
class StmtKind:
    tag: ClassVar[str]


@dataclass(frozen=True)
class SemiStmt(StmtKind):
    """Expression followed by a semicolon."""

    tag: ClassVar[str] = "Semi"
    expr: Expr


@dataclass(frozen=True)
class ExprStmt(StmtKind):
    """Trailing expression without a semicolon."""

    tag: ClassVar[str] = "Expr"
    expr: Expr


@dataclass(frozen=True)
class EmptyStmt(StmtKind):
    tag: ClassVar[str] = "Empty"


@dataclass(frozen=True)
class Stmt:
    id: NodeId
    kind: StmtKind
    span: Span = Span.DUMMY


class BlockCheckMode(Enum):
    DEFAULT = "Default"
    UNSAFE = "Unsafe"


@dataclass(frozen=True)
class Block:
    stmts: tuple[Stmt, ...]
    id: NodeId
    rules: BlockCheckMode = BlockCheckMode.DEFAULT
    span: Span = Span.DUMMY
    tokens: TokenStream | None = None
