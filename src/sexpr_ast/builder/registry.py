"""Tag tables dispatching tagged lists to variant builders."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from sexpr_ast.builder.helpers import expect_list, head_symbol
from sexpr_ast.errors import Expected
from sexpr_ast.sexp.nodes import SExp

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])


class TagTable(Generic[T]):
    """Maps the tag symbols of one tagged union to the methods that build them.

    Entries are registered with :meth:`register` on builder methods taking
    ``(self, sexp)``. Registration order is the order tags are listed in
    error messages.
    """

    def __init__(self, category: str) -> None:
        self.category = category
        self._entries: dict[str, Callable[[Any, SExp], T]] = {}

    def register(self, tag: str) -> Callable[[F], F]:
        def decorator(fn: F) -> F:
            if tag in self._entries:
                raise ValueError(f"{self.category} tag {tag!r} registered twice")
            self._entries[tag] = fn
            return fn

        return decorator

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def expected(self) -> str:
        return ", ".join(self._entries)

    def build(self, builder: Any, sexp: SExp) -> T:
        lst = expect_list(sexp)
        head = head_symbol(lst, self.expected())
        fn = self._entries.get(head.value)
        if fn is None:
            raise Expected(self.expected(), head.value, head.pos)
        return fn(builder, lst)

    def __contains__(self, tag: object) -> bool:
        return tag in self._entries

    def __repr__(self) -> str:
        return f"TagTable({self.category!r}, tags={self.tags!r})"
