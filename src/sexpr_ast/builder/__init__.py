"""Typed AST construction from generic S-expressions."""

from .build import AstBuilder, build_crate_from_str
from .exprs import EXPR_KINDS, LIT_KINDS, MAC_ARGS
from .items import ITEM_KINDS, PAT_KINDS, RETURN_TYPES, TY_KINDS, VISIBILITIES
from .registry import TagTable
from .stmts import STMT_KINDS

__all__ = [
    "AstBuilder",
    "EXPR_KINDS",
    "ITEM_KINDS",
    "LIT_KINDS",
    "MAC_ARGS",
    "PAT_KINDS",
    "RETURN_TYPES",
    "STMT_KINDS",
    "TY_KINDS",
    "TagTable",
    "VISIBILITIES",
    "build_crate_from_str",
]
