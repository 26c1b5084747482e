"""Extraction helpers shared by the AST builders."""

from __future__ import annotations

import re
from enum import Enum
from typing import TypeVar

from sexpr_ast.errors import Expected
from sexpr_ast.sexp.nodes import (
    Keyword,
    List,
    Nil,
    Number,
    SExp,
    StringLit,
    Symbol,
    describe,
)

E = TypeVar("E", bound=Enum)

Fields = dict[str, SExp]

_INTEGER = re.compile(r"-?[0-9]+")


def expect_list(sexp: SExp) -> List:
    if isinstance(sexp, List):
        return sexp
    raise Expected("list", describe(sexp), sexp.pos)


def expect_symbol(sexp: SExp) -> Symbol:
    if isinstance(sexp, Symbol):
        return sexp
    raise Expected("symbol", describe(sexp), sexp.pos)


def expect_keyword(sexp: SExp) -> Keyword:
    if isinstance(sexp, Keyword):
        return sexp
    raise Expected("keyword", describe(sexp), sexp.pos)


def expect_string(sexp: SExp) -> str:
    if isinstance(sexp, StringLit):
        return sexp.value
    raise Expected("string", describe(sexp), sexp.pos)


def expect_number(sexp: SExp) -> int:
    """Interpret a number node's literal text as a base-10 integer."""

    if not isinstance(sexp, Number):
        raise Expected("number", describe(sexp), sexp.pos)
    if _INTEGER.fullmatch(sexp.value) is None:
        raise Expected("valid number", sexp.value, sexp.pos)
    return int(sexp.value, 10)


def expect_in_range(sexp: SExp, lo: int, hi: int, what: str) -> int:
    value = expect_number(sexp)
    if not lo <= value <= hi:
        raise Expected(f"{what} in {lo}..{hi}", str(value), sexp.pos)
    return value


def expect_bool(sexp: SExp) -> bool:
    sym = expect_symbol(sexp)
    if sym.value == "true":
        return True
    if sym.value == "false":
        return False
    raise Expected("true or false", sym.value, sym.pos)


def expect_enum(sexp: SExp, enum_cls: type[E]) -> E:
    """Map a symbol onto the member of ``enum_cls`` whose value is its text."""

    sym = expect_symbol(sexp)
    for member in enum_cls:
        if member.value == sym.value:
            return member
    names = ", ".join(str(m.value) for m in enum_cls)
    raise Expected(names, sym.value, sym.pos)


def is_nil(sexp: SExp) -> bool:
    return isinstance(sexp, Nil)


def head_symbol(lst: List, expected: str) -> Symbol:
    """Return the tag symbol of ``lst``; ``expected`` names the valid tags."""

    if not lst.elements:
        raise Expected(expected, "empty list", lst.pos)
    head = lst.elements[0]
    if not isinstance(head, Symbol):
        raise Expected(expected, describe(head), head.pos)
    return head


def expect_tag(lst: List, tag: str) -> Symbol:
    head = head_symbol(lst, tag)
    if head.value != tag:
        raise Expected(tag, head.value, head.pos)
    return head


def parse_kwargs(lst: List) -> Fields:
    """Collect the ``:keyword value`` pairs following the tag of ``lst``.

    A repeated keyword keeps its last value. A keyword without a value is an
    error positioned at that keyword.
    """

    fields: Fields = {}
    rest = lst.elements[1:]
    for i in range(0, len(rest), 2):
        key = expect_keyword(rest[i])
        if i + 1 >= len(rest):
            raise Expected(f"value after keyword :{key.name}", "end of list", key.pos)
        fields[key.name] = rest[i + 1]
    return fields


def require(fields: Fields, name: str, lst: List) -> SExp:
    value = fields.get(name)
    if value is None:
        raise Expected(f":{name} field", "missing", lst.pos)
    return value


def expect_empty_list(sexp: SExp, what: str) -> None:
    lst = expect_list(sexp)
    if lst.elements:
        first = lst.elements[0]
        raise Expected(f"empty {what} list", describe(first), first.pos)
