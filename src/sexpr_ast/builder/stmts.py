"""Builders for statements and blocks."""

from __future__ import annotations

from sexpr_ast.ast.expr import Expr
from sexpr_ast.ast.stmt import (
    Block,
    BlockCheckMode,
    EmptyStmt,
    ExprStmt,
    SemiStmt,
    Stmt,
    StmtKind,
)
from sexpr_ast.builder.exprs import ExprBuilder
from sexpr_ast.builder.helpers import expect_enum, expect_list, require
from sexpr_ast.builder.registry import TagTable
from sexpr_ast.sexp.nodes import List, SExp

STMT_KINDS: TagTable[StmtKind] = TagTable("statement kind")


class StmtBuilder(ExprBuilder):
    def build_block(self, sexp: SExp) -> Block:
        _, fields = self._tagged(sexp, "Block")
        stmts_sexp = fields.get("stmts")
        stmts: tuple[Stmt, ...] = ()
        if stmts_sexp is not None:
            stmts = tuple(self.build_stmt(s) for s in expect_list(stmts_sexp).elements)
        rules_sexp = fields.get("rules")
        rules = (
            BlockCheckMode.DEFAULT
            if rules_sexp is None
            else expect_enum(rules_sexp, BlockCheckMode)
        )
        span = self._span(fields)
        tokens = self._tokens(fields)
        return Block(stmts, self._node_id(fields), rules, span, tokens)

    def build_stmt(self, sexp: SExp) -> Stmt:
        lst, fields = self._tagged(sexp, "Stmt")
        kind = self.build_stmt_kind(require(fields, "kind", lst))
        span = self._span(fields)
        return Stmt(self._node_id(fields), kind, span)

    def build_stmt_kind(self, sexp: SExp) -> StmtKind:
        return STMT_KINDS.build(self, sexp)

    def _stmt_expr(self, lst: List, tag: str) -> Expr:
        # Either (Semi :expr (Expr ...)) or the positional (Semi (Expr ...)).
        rest = lst.elements[1:]
        if len(rest) == 1 and isinstance(rest[0], List):
            return self.build_expr(rest[0])
        _, fields = self._tagged(lst, tag)
        return self.build_expr(require(fields, "expr", lst))

    @STMT_KINDS.register("Semi")
    def _build_semi(self, sexp: SExp) -> SemiStmt:
        return SemiStmt(self._stmt_expr(expect_list(sexp), "Semi"))

    @STMT_KINDS.register("Expr")
    def _build_expr_stmt(self, sexp: SExp) -> ExprStmt:
        return ExprStmt(self._stmt_expr(expect_list(sexp), "Expr"))

    @STMT_KINDS.register("Empty")
    def _build_empty(self, sexp: SExp) -> EmptyStmt:
        self._tagged(sexp, "Empty")
        return EmptyStmt()
