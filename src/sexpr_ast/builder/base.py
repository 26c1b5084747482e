"""Session state and metadata builders shared by every node builder."""

from __future__ import annotations

from sexpr_ast.ast.span import U32_MAX, Attribute, DelSpan, ModSpans, NodeId, Span, TokenStream
from sexpr_ast.ast.path import Ident
from sexpr_ast.builder.helpers import (
    Fields,
    expect_empty_list,
    expect_in_range,
    expect_list,
    expect_string,
    expect_tag,
    is_nil,
    parse_kwargs,
    require,
)
from sexpr_ast.errors import Expected
from sexpr_ast.sexp.nodes import List, SExp


class BuilderBase:
    """Owns the node id counter of one build session.

    Ids are handed out in the order nodes finish building: a node's children
    receive their ids before the node itself.
    """

    def __init__(self) -> None:
        self._next_id = 0

    def next_id(self) -> NodeId:
        nid = self._next_id
        if nid >= U32_MAX:
            raise OverflowError("node id space exhausted")
        self._next_id += 1
        return NodeId(nid)

    @property
    def ids_issued(self) -> int:
        return self._next_id

    # --- Shared field handling ------------------------------------------------
    def _tagged(self, sexp: SExp, tag: str) -> tuple[List, Fields]:
        lst = expect_list(sexp)
        expect_tag(lst, tag)
        return lst, parse_kwargs(lst)

    def _node_id(self, fields: Fields) -> NodeId:
        id_sexp = fields.get("id")
        if id_sexp is None:
            return self.next_id()
        return NodeId(expect_in_range(id_sexp, 0, U32_MAX, "node id"))

    def _span(self, fields: Fields, name: str = "span") -> Span:
        span_sexp = fields.get(name)
        if span_sexp is None:
            return Span.DUMMY
        return self.build_span(span_sexp)

    def _attrs(self, fields: Fields) -> tuple[Attribute, ...]:
        attrs = fields.get("attrs")
        if attrs is not None:
            expect_empty_list(attrs, "attribute")
        return ()

    def _tokens(self, fields: Fields) -> TokenStream | None:
        tokens = fields.get("tokens")
        if tokens is None or is_nil(tokens):
            return None
        return self.build_token_stream(tokens)

    # --- Metadata nodes -----------------------------------------------------
    def build_span(self, sexp: SExp) -> Span:
        lst = expect_list(sexp)
        if not lst.elements:
            return Span.DUMMY
        _, fields = self._tagged(lst, "Span")
        lo, hi, ctxt = (
            expect_in_range(fields[k], 0, U32_MAX, k) if k in fields else 0
            for k in ("lo", "hi", "ctxt")
        )
        if lo > hi:
            raise Expected("span with lo <= hi", f"lo {lo}, hi {hi}", lst.pos)
        return Span(lo, hi, ctxt)

    def build_mod_spans(self, sexp: SExp) -> ModSpans:
        _, fields = self._tagged(sexp, "ModSpans")
        return ModSpans(
            inner_span=self._span(fields, "inner-span"),
            inject_use_span=self._span(fields, "inject-use-span"),
        )

    def build_del_span(self, sexp: SExp) -> DelSpan:
        _, fields = self._tagged(sexp, "DelSpan")
        return DelSpan(open=self._span(fields, "open"), close=self._span(fields, "close"))

    def build_ident(self, sexp: SExp) -> Ident:
        lst, fields = self._tagged(sexp, "Ident")
        name = expect_string(require(fields, "name", lst))
        return Ident(name, self._span(fields))

    def build_token_stream(self, sexp: SExp) -> TokenStream:
        _, fields = self._tagged(sexp, "TokenStream")
        source = fields.get("source")
        return TokenStream("" if source is None else expect_string(source))
