"""The AST builder: generic S-expression tree to typed crate AST."""

from __future__ import annotations

import logging

from sexpr_ast.ast.item import Crate, Item
from sexpr_ast.ast.span import ModSpans
from sexpr_ast.builder.helpers import expect_bool, expect_list, require
from sexpr_ast.builder.items import ItemBuilder
from sexpr_ast.config import ParseOptions
from sexpr_ast.sexp.nodes import SExp
from sexpr_ast.sexp.parser import parse_str

logger = logging.getLogger(__name__)


class AstBuilder(ItemBuilder):
    """Builds typed AST nodes from generic S-expressions.

    One instance is one build session: the id counter it owns starts at zero
    and is never reset. Every ``build_*`` method either returns a complete
    node or raises the first :class:`~sexpr_ast.errors.ParseError` it meets.
    """

    def build_crate(self, sexp: SExp) -> Crate:
        lst, fields = self._tagged(sexp, "Crate")
        attrs = self._attrs(fields)
        items = self.build_items(require(fields, "items", lst))
        spans_sexp = fields.get("spans")
        spans = ModSpans() if spans_sexp is None else self.build_mod_spans(spans_sexp)
        placeholder = fields.get("is-placeholder")
        crate = Crate(
            items=items,
            spans=spans,
            id=self._node_id(fields),
            attrs=attrs,
            is_placeholder=False if placeholder is None else expect_bool(placeholder),
        )
        logger.debug(
            "built crate %d with %d items (%d ids issued)",
            crate.id.value,
            len(items),
            self.ids_issued,
        )
        return crate

    def build_items(self, sexp: SExp) -> tuple[Item, ...]:
        return tuple(self.build_item(e) for e in expect_list(sexp).elements)


def build_crate_from_str(text: str, options: ParseOptions | None = None) -> Crate:
    """Parse ``text`` and build it as a crate with a fresh builder."""

    return AstBuilder().build_crate(parse_str(text, options))
