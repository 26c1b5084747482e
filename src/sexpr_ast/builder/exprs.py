"""Builders for expressions, macro calls, literals and paths."""

from __future__ import annotations

from sexpr_ast.ast.expr import (
    I128_MAX,
    I128_MIN,
    DelimitedArgs,
    Delimiter,
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
from sexpr_ast.ast.path import GenericArgs, Path, PathSegment
from sexpr_ast.ast.span import DelSpan
from sexpr_ast.builder.base import BuilderBase
from sexpr_ast.builder.helpers import (
    expect_enum,
    expect_in_range,
    expect_list,
    expect_string,
    is_nil,
    require,
)
from sexpr_ast.builder.registry import TagTable
from sexpr_ast.sexp.nodes import SExp

EXPR_KINDS: TagTable[ExprKind] = TagTable("expression kind")
MAC_ARGS: TagTable[MacArgs] = TagTable("macro arguments")
LIT_KINDS: TagTable[LitKind] = TagTable("literal kind")


class ExprBuilder(BuilderBase):
    def build_expr(self, sexp: SExp) -> Expr:
        lst, fields = self._tagged(sexp, "Expr")
        attrs = self._attrs(fields)
        kind = self.build_expr_kind(require(fields, "kind", lst))
        span = self._span(fields)
        return Expr(self._node_id(fields), kind, span, attrs)

    def build_expr_kind(self, sexp: SExp) -> ExprKind:
        return EXPR_KINDS.build(self, sexp)

    @EXPR_KINDS.register("MacCall")
    def build_mac_call(self, sexp: SExp) -> MacCall:
        lst, fields = self._tagged(sexp, "MacCall")
        path = self.build_path(require(fields, "path", lst))
        args_sexp = fields.get("args")
        if args_sexp is None or is_nil(args_sexp):
            return MacCall(path, EmptyArgs())
        return MacCall(path, self.build_mac_args(args_sexp))

    @EXPR_KINDS.register("Lit")
    def build_lit(self, sexp: SExp) -> Lit:
        lst, fields = self._tagged(sexp, "Lit")
        kind = self.build_lit_kind(require(fields, "kind", lst))
        return Lit(kind, self._span(fields))

    @EXPR_KINDS.register("Path")
    def _build_path_expr(self, sexp: SExp) -> PathExpr:
        return PathExpr(self.build_path(sexp))

    # --- Literals -----------------------------------------------------------
    def build_lit_kind(self, sexp: SExp) -> LitKind:
        return LIT_KINDS.build(self, sexp)

    @LIT_KINDS.register("Str")
    def _build_str_lit(self, sexp: SExp) -> StrLit:
        lst, fields = self._tagged(sexp, "Str")
        return StrLit(expect_string(require(fields, "value", lst)))

    @LIT_KINDS.register("Int")
    def _build_int_lit(self, sexp: SExp) -> IntLit:
        lst, fields = self._tagged(sexp, "Int")
        value = require(fields, "value", lst)
        return IntLit(expect_in_range(value, I128_MIN, I128_MAX, "integer literal"))

    # --- Macro arguments ----------------------------------------------------
    def build_mac_args(self, sexp: SExp) -> MacArgs:
        return MAC_ARGS.build(self, sexp)

    @MAC_ARGS.register("Empty")
    def _build_empty_args(self, sexp: SExp) -> EmptyArgs:
        self._tagged(sexp, "Empty")
        return EmptyArgs()

    @MAC_ARGS.register("Delimited")
    def _build_delimited_args(self, sexp: SExp) -> DelimitedArgs:
        _, fields = self._tagged(sexp, "Delimited")
        dspan_sexp = fields.get("dspan")
        dspan = DelSpan() if dspan_sexp is None else self.build_del_span(dspan_sexp)
        delim_sexp = fields.get("delim")
        delim = Delimiter.PAREN if delim_sexp is None else self.build_delimiter(delim_sexp)
        return DelimitedArgs(dspan, delim, self._tokens(fields))

    @MAC_ARGS.register("Eq")
    def _build_eq_args(self, sexp: SExp) -> EqArgs:
        _, fields = self._tagged(sexp, "Eq")
        return EqArgs(self._span(fields, "eq-span"), self._tokens(fields))

    def build_delimiter(self, sexp: SExp) -> Delimiter:
        return expect_enum(sexp, Delimiter)

    # --- Paths --------------------------------------------------------------
    def build_path(self, sexp: SExp) -> Path:
        _, fields = self._tagged(sexp, "Path")
        segments_sexp = fields.get("segments")
        segments: tuple[PathSegment, ...] = ()
        if segments_sexp is not None:
            segments = tuple(
                self.build_path_segment(seg) for seg in expect_list(segments_sexp).elements
            )
        return Path(self._span(fields), segments, self._tokens(fields))

    def build_path_segment(self, sexp: SExp) -> PathSegment:
        lst, fields = self._tagged(sexp, "PathSegment")
        ident = self.build_ident(require(fields, "ident", lst))
        args_sexp = fields.get("args")
        args = None
        if args_sexp is not None and not is_nil(args_sexp):
            args = self.build_generic_args(args_sexp)
        return PathSegment(ident, self._node_id(fields), args)

    def build_generic_args(self, sexp: SExp) -> GenericArgs:
        _, fields = self._tagged(sexp, "GenericArgs")
        return GenericArgs(self._span(fields))
