"""Render generic S-expression trees back to text."""

from __future__ import annotations

from sexpr_ast.config import PrinterOptions
from sexpr_ast.sexp.nodes import Keyword, List, Nil, Number, SExp, StringLit, Symbol

_ESCAPES = {"\n": "\\n", "\t": "\\t", "\r": "\\r", "\\": "\\\\", '"': '\\"'}

# Lists longer than this always break across lines.
SIMPLE_LIST_MAX = 3


def escape_string(value: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in value)


def _is_simple(lst: List) -> bool:
    return len(lst.elements) <= SIMPLE_LIST_MAX and not any(
        isinstance(e, List) for e in lst.elements
    )


class Printer:
    def __init__(self, options: PrinterOptions | None = None) -> None:
        self.options = options or PrinterOptions()

    def print(self, sexp: SExp) -> str:
        return self._fmt(sexp, 0)

    def _fmt(self, sexp: SExp, depth: int) -> str:
        match sexp:
            case Symbol(value):
                return value
            case Keyword(name):
                return f":{name}"
            case StringLit(value):
                return f'"{escape_string(value)}"'
            case Number(value):
                return value
            case Nil():
                return "nil"
            case List() as lst:
                return self._fmt_list(lst, depth)
        raise TypeError(f"Cannot print unknown node: {sexp!r}")

    def _fmt_list(self, lst: List, depth: int) -> str:
        if not lst.elements:
            return "()"
        parts = [self._fmt(e, depth + 1) for e in lst.elements]
        if _is_simple(lst):
            return f"({' '.join(parts)})"
        pad = " " * (self.options.indent * (depth + 1))
        return "(" + f"\n{pad}".join(parts) + ")"


def print_sexp(sexp: SExp, indent: int | None = None) -> str:
    """Render ``sexp`` with the default layout, optionally overriding the indent."""

    options = PrinterOptions() if indent is None else PrinterOptions(indent=indent)
    return Printer(options).print(sexp)
