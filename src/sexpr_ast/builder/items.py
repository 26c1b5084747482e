"""Builders for items, function signatures, types and patterns."""

from __future__ import annotations

from sexpr_ast.ast.item import (
    BindingMode,
    Constness,
    CoroutineKind,
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
from sexpr_ast.ast.path import Inherited, Public, Restricted, Visibility, VisRestrictionKind
from sexpr_ast.builder.helpers import (
    expect_bool,
    expect_empty_list,
    expect_enum,
    expect_list,
    expect_string,
    is_nil,
    require,
)
from sexpr_ast.builder.registry import TagTable
from sexpr_ast.builder.stmts import StmtBuilder
from sexpr_ast.sexp.nodes import SExp

VISIBILITIES: TagTable[Visibility] = TagTable("visibility")
ITEM_KINDS: TagTable[ItemKind] = TagTable("item kind")
RETURN_TYPES: TagTable[FnRetTy] = TagTable("return type")
TY_KINDS: TagTable[TyKind] = TagTable("type kind")
PAT_KINDS: TagTable[PatKind] = TagTable("pattern kind")


class ItemBuilder(StmtBuilder):
    def build_item(self, sexp: SExp) -> Item:
        lst, fields = self._tagged(sexp, "Item")
        attrs = self._attrs(fields)
        vis_sexp = fields.get("vis")
        vis = Inherited() if vis_sexp is None else self.build_visibility(vis_sexp)
        ident = self.build_ident(require(fields, "ident", lst))
        kind = self.build_item_kind(require(fields, "kind", lst))
        span = self._span(fields)
        return Item(self._node_id(fields), ident, kind, vis, span, attrs)

    # --- Visibility ---------------------------------------------------------
    def build_visibility(self, sexp: SExp) -> Visibility:
        return VISIBILITIES.build(self, sexp)

    @VISIBILITIES.register("Public")
    def _build_public(self, sexp: SExp) -> Public:
        self._tagged(sexp, "Public")
        return Public()

    @VISIBILITIES.register("Inherited")
    def _build_inherited(self, sexp: SExp) -> Inherited:
        self._tagged(sexp, "Inherited")
        return Inherited()

    @VISIBILITIES.register("Restricted")
    def _build_restricted(self, sexp: SExp) -> Restricted:
        lst, fields = self._tagged(sexp, "Restricted")
        path = self.build_path(require(fields, "path", lst))
        shorthand_sexp = fields.get("shorthand")
        shorthand = (
            VisRestrictionKind.IN
            if shorthand_sexp is None
            else expect_enum(shorthand_sexp, VisRestrictionKind)
        )
        return Restricted(path, shorthand, self._span(fields))

    # --- Functions ----------------------------------------------------------
    def build_item_kind(self, sexp: SExp) -> ItemKind:
        return ITEM_KINDS.build(self, sexp)

    @ITEM_KINDS.register("Fn")
    def build_fn(self, sexp: SExp) -> Fn:
        lst, fields = self._tagged(sexp, "Fn")
        defaultness_sexp = fields.get("defaultness")
        defaultness = (
            Defaultness.FINAL
            if defaultness_sexp is None
            else expect_enum(defaultness_sexp, Defaultness)
        )
        sig = self.build_fn_sig(require(fields, "sig", lst))
        generics_sexp = fields.get("generics")
        generics = Generics() if generics_sexp is None else self.build_generics(generics_sexp)
        body_sexp = fields.get("body")
        body = None
        if body_sexp is not None and not is_nil(body_sexp):
            body = self.build_block(body_sexp)
        return Fn(sig, defaultness, generics, body)

    def build_fn_sig(self, sexp: SExp) -> FnSig:
        _, fields = self._tagged(sexp, "FnSig")
        header_sexp = fields.get("header")
        header = FnHeader() if header_sexp is None else self.build_fn_header(header_sexp)
        decl_sexp = fields.get("decl")
        decl = FnDecl() if decl_sexp is None else self.build_fn_decl(decl_sexp)
        return FnSig(header, decl, self._span(fields))

    def build_fn_header(self, sexp: SExp) -> FnHeader:
        _, fields = self._tagged(sexp, "FnHeader")
        header = FnHeader()
        safety = header.safety
        if "safety" in fields:
            safety = expect_enum(fields["safety"], Safety)
        constness = header.constness
        if "constness" in fields:
            constness = expect_enum(fields["constness"], Constness)
        coroutine_kind = None
        coroutine_sexp = fields.get("coroutine-kind")
        if coroutine_sexp is not None and not is_nil(coroutine_sexp):
            coroutine_kind = expect_enum(coroutine_sexp, CoroutineKind)
        ext = None
        ext_sexp = fields.get("ext")
        if ext_sexp is not None and not is_nil(ext_sexp):
            ext = expect_string(ext_sexp)
        return FnHeader(safety, coroutine_kind, constness, ext)

    def build_fn_decl(self, sexp: SExp) -> FnDecl:
        _, fields = self._tagged(sexp, "FnDecl")
        inputs_sexp = fields.get("inputs")
        inputs: tuple[Param, ...] = ()
        if inputs_sexp is not None:
            inputs = tuple(self.build_param(p) for p in expect_list(inputs_sexp).elements)
        output_sexp = fields.get("output")
        output = DefaultReturn() if output_sexp is None else self.build_fn_ret_ty(output_sexp)
        return FnDecl(inputs, output)

    def build_param(self, sexp: SExp) -> Param:
        lst, fields = self._tagged(sexp, "Param")
        attrs = self._attrs(fields)
        ty = self.build_ty(require(fields, "ty", lst))
        pat = self.build_pat(require(fields, "pat", lst))
        span = self._span(fields)
        return Param(ty, pat, self._node_id(fields), span, attrs)

    def build_fn_ret_ty(self, sexp: SExp) -> FnRetTy:
        return RETURN_TYPES.build(self, sexp)

    @RETURN_TYPES.register("Default")
    def _build_default_return(self, sexp: SExp) -> DefaultReturn:
        _, fields = self._tagged(sexp, "Default")
        return DefaultReturn(self._span(fields))

    @RETURN_TYPES.register("Ty")
    def _build_ty_return(self, sexp: SExp) -> TyReturn:
        return TyReturn(self.build_ty(sexp))

    def build_generics(self, sexp: SExp) -> Generics:
        _, fields = self._tagged(sexp, "Generics")
        if "params" in fields:
            expect_empty_list(fields["params"], "generic parameter")
        where_sexp = fields.get("where-clause")
        where = WhereClause() if where_sexp is None else self.build_where_clause(where_sexp)
        return Generics((), where, self._span(fields))

    def build_where_clause(self, sexp: SExp) -> WhereClause:
        _, fields = self._tagged(sexp, "WhereClause")
        has_where = fields.get("has-where-token")
        if "predicates" in fields:
            expect_empty_list(fields["predicates"], "where predicate")
        return WhereClause(
            has_where_token=False if has_where is None else expect_bool(has_where),
            span=self._span(fields),
        )

    # --- Types and patterns -------------------------------------------------
    def build_ty(self, sexp: SExp) -> Ty:
        lst, fields = self._tagged(sexp, "Ty")
        kind = self.build_ty_kind(require(fields, "kind", lst))
        span = self._span(fields)
        return Ty(self._node_id(fields), kind, span)

    def build_ty_kind(self, sexp: SExp) -> TyKind:
        return TY_KINDS.build(self, sexp)

    @TY_KINDS.register("Path")
    def _build_path_ty(self, sexp: SExp) -> PathTy:
        return PathTy(self.build_path(sexp))

    def build_pat(self, sexp: SExp) -> Pat:
        lst, fields = self._tagged(sexp, "Pat")
        kind = self.build_pat_kind(require(fields, "kind", lst))
        span = self._span(fields)
        return Pat(self._node_id(fields), kind, span)

    def build_pat_kind(self, sexp: SExp) -> PatKind:
        return PAT_KINDS.build(self, sexp)

    @PAT_KINDS.register("Ident")
    def _build_ident_pat(self, sexp: SExp) -> IdentPat:
        lst, fields = self._tagged(sexp, "Ident")
        mode_sexp = fields.get("binding-mode")
        mode = BindingMode() if mode_sexp is None else self.build_binding_mode(mode_sexp)
        ident = self.build_ident(require(fields, "ident", lst))
        sub_sexp = fields.get("sub")
        sub = None
        if sub_sexp is not None and not is_nil(sub_sexp):
            sub = self.build_pat(sub_sexp)
        return IdentPat(mode, ident, sub)

    def build_binding_mode(self, sexp: SExp) -> BindingMode:
        _, fields = self._tagged(sexp, "BindingMode")
        by_ref = fields.get("by-ref")
        mutability = fields.get("mutability")
        return BindingMode(
            by_ref=False if by_ref is None else expect_bool(by_ref),
            mutability=(
                Mutability.NOT if mutability is None else expect_enum(mutability, Mutability)
            ),
        )
