"""Typed AST for the phase-1 schema."""

from .expr import (
    Delimiter,
    DelimitedArgs,
    EmptyArgs,
    EqArgs,
    Expr,
    ExprKind,
    IntLit,
    Lit,
    LitKind,
    MacArgs,
    MacCall,
    PathExpr,
    StrLit,
)
from .item import (
    BindingMode,
    Constness,
    CoroutineKind,
    Crate,
    DefaultReturn,
    Defaultness,
    Fn,
    FnDecl,
    FnHeader,
    FnRetTy,
    FnSig,
    Generics,
    IdentPat,
    Item,
    ItemKind,
    Mutability,
    Param,
    Pat,
    PatKind,
    PathTy,
    Safety,
    Ty,
    TyKind,
    TyReturn,
    WhereClause,
)
from .path import (
    GenericArgs,
    Ident,
    Inherited,
    Path,
    PathSegment,
    Public,
    Restricted,
    Visibility,
    VisRestrictionKind,
)
from .span import Attribute, DelSpan, ModSpans, NodeId, Span, TokenStream
from .stmt import Block, BlockCheckMode, EmptyStmt, ExprStmt, SemiStmt, Stmt, StmtKind

__all__ = [
    "Attribute",
    "BindingMode",
    "Block",
    "BlockCheckMode",
    "Constness",
    "CoroutineKind",
    "Crate",
    "DefaultReturn",
    "Defaultness",
    "DelSpan",
    "Delimiter",
    "DelimitedArgs",
    "EmptyArgs",
    "EmptyStmt",
    "EqArgs",
    "Expr",
    "ExprKind",
    "ExprStmt",
    "Fn",
    "FnDecl",
    "FnHeader",
    "FnRetTy",
    "FnSig",
    "GenericArgs",
    "Generics",
    "Ident",
    "IdentPat",
    "Inherited",
    "IntLit",
    "Item",
    "ItemKind",
    "Lit",
    "LitKind",
    "MacArgs",
    "MacCall",
    "ModSpans",
    "Mutability",
    "NodeId",
    "Param",
    "Pat",
    "PatKind",
    "Path",
    "PathExpr",
    "PathSegment",
    "PathTy",
    "Public",
    "Restricted",
    "Safety",
    "SemiStmt",
    "Span",
    "StrLit",
    "Stmt",
    "StmtKind",
    "TokenStream",
    "Ty",
    "TyKind",
    "TyReturn",
    "VisRestrictionKind",
    "Visibility",
    "WhereClause",
]
