import pytest

from sexpr_ast.ast import Ident, ModSpans, NodeId, Path, PathSegment, Span
from sexpr_ast.builder import AstBuilder
from sexpr_ast.errors import Expected
from sexpr_ast.sexp import parse_str


def build_span(text: str) -> Span:
    return AstBuilder().build_span(parse_str(text))


def test_dummy_values() -> None:
    assert NodeId.DUMMY == NodeId(0xFFFFFFFF)
    assert NodeId.DUMMY.is_dummy
    assert not NodeId(0).is_dummy
    assert Span.DUMMY == Span(0, 0, 0)
    assert Span.DUMMY.is_dummy
    assert not Span(0, 1).is_dummy


def test_span_fields() -> None:
    assert build_span("(Span :lo 1 :hi 4 :ctxt 2)") == Span(1, 4, 2)


def test_span_missing_fields_default_to_zero() -> None:
    assert build_span("(Span)") == Span.DUMMY
    assert build_span("(Span :hi 5)") == Span(0, 5)


def test_empty_list_is_dummy_span() -> None:
    assert build_span("()") == Span.DUMMY


def test_span_bounds_must_be_ordered() -> None:
    with pytest.raises(Expected) as info:
        build_span("(Span :lo 5 :hi 2)")
    assert info.value.expected == "span with lo <= hi"
    assert info.value.found == "lo 5, hi 2"


def test_span_offsets_are_unsigned_32_bit() -> None:
    with pytest.raises(Expected, match="lo in 0..4294967295"):
        build_span("(Span :lo -1 :hi 2)")
    with pytest.raises(Expected, match="hi in 0..4294967295"):
        build_span("(Span :lo 0 :hi 4294967296)")


def test_mod_spans() -> None:
    spans = AstBuilder().build_mod_spans(
        parse_str("(ModSpans :inner-span (Span :lo 0 :hi 9) :inject-use-span ())")
    )
    assert spans == ModSpans(Span(0, 9), Span.DUMMY)


def test_path_display() -> None:
    segment = PathSegment(Ident("a"))
    assert segment.id.is_dummy
    assert segment.args is None
    assert str(Path(Span.DUMMY, (segment, PathSegment(Ident("b"))))) == "a::b"
