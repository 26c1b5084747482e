import pytest

from sexpr_ast.ast import (
    DelimitedArgs,
    Delimiter,
    DelSpan,
    EmptyArgs,
    EqArgs,
    Expr,
    GenericArgs,
    Ident,
    IntLit,
    Lit,
    MacCall,
    NodeId,
    Path,
    PathExpr,
    PathSegment,
    Span,
    StrLit,
    TokenStream,
)
from sexpr_ast.ast.expr import I128_MAX, I128_MIN
from sexpr_ast.builder import AstBuilder
from sexpr_ast.errors import Expected
from sexpr_ast.sexp import parse_str

PRINTLN = '(Path :segments ((PathSegment :ident (Ident :name "println"))))'


def build_expr(text: str) -> Expr:
    return AstBuilder().build_expr(parse_str(text))


# ------------- Literals -------------


def test_int_literal() -> None:
    expr = build_expr("(Expr :kind (Lit :kind (Int :value 42)))")
    assert expr == Expr(NodeId(0), Lit(IntLit(42)))


def test_negative_int_literal_with_span() -> None:
    expr = build_expr("(Expr :kind (Lit :kind (Int :value -5) :span (Span :lo 2 :hi 4)))")
    assert expr.kind == Lit(IntLit(-5), Span(2, 4))


def test_int_literal_range() -> None:
    assert build_expr(f"(Expr :kind (Lit :kind (Int :value {I128_MAX})))").kind == Lit(
        IntLit(I128_MAX)
    )
    assert build_expr(f"(Expr :kind (Lit :kind (Int :value {I128_MIN})))").kind == Lit(
        IntLit(I128_MIN)
    )
    with pytest.raises(Expected, match="integer literal"):
        build_expr(f"(Expr :kind (Lit :kind (Int :value {I128_MAX + 1})))")


def test_int_literal_needs_number() -> None:
    with pytest.raises(Expected) as info:
        build_expr('(Expr :kind (Lit :kind (Int :value "7")))')
    assert info.value.expected == "number"
    assert info.value.found == "string '7'"


def test_str_literal() -> None:
    expr = build_expr('(Expr :kind (Lit :kind (Str :value "a\\nb")))')
    assert expr.kind == Lit(StrLit("a\nb"))


def test_unknown_literal_kind() -> None:
    with pytest.raises(Expected) as info:
        build_expr("(Expr :kind (Lit :kind (Float :value 1)))")
    assert info.value.expected == "Str, Int"
    assert info.value.found == "Float"


# ------------- Macro calls -------------


def test_macro_call_with_delimited_args() -> None:
    expr = build_expr(
        f"(Expr :kind (MacCall :path {PRINTLN}"
        ' :args (Delimited :dspan (DelSpan :open (Span :lo 8 :hi 9) :close (Span :lo 13 :hi 14))'
        ' :delim Paren :tokens (TokenStream :source "\\"hi\\""))))'
    )
    assert expr.id == NodeId(1)
    assert isinstance(expr.kind, MacCall)
    assert str(expr.kind.path) == "println"
    assert expr.kind.path.segments == (PathSegment(Ident("println"), NodeId(0)),)
    assert expr.kind.args == DelimitedArgs(
        DelSpan(Span(8, 9), Span(13, 14)), Delimiter.PAREN, TokenStream('"hi"')
    )


@pytest.mark.parametrize(
    "args",
    ["", ":args nil", ":args (Empty)"],
)
def test_macro_call_without_args(args: str) -> None:
    expr = build_expr(f"(Expr :kind (MacCall :path {PRINTLN} {args}))")
    assert isinstance(expr.kind, MacCall)
    assert expr.kind.args == EmptyArgs()


def test_delimited_defaults() -> None:
    expr = build_expr(f"(Expr :kind (MacCall :path {PRINTLN} :args (Delimited)))")
    assert isinstance(expr.kind, MacCall)
    assert expr.kind.args == DelimitedArgs()


def test_eq_args() -> None:
    expr = build_expr(
        f"(Expr :kind (MacCall :path {PRINTLN}"
        ' :args (Eq :eq-span (Span :lo 3 :hi 4) :tokens (TokenStream :source "1"))))'
    )
    assert isinstance(expr.kind, MacCall)
    assert expr.kind.args == EqArgs(Span(3, 4), TokenStream("1"))


def test_bad_delimiter() -> None:
    with pytest.raises(Expected) as info:
        build_expr(f"(Expr :kind (MacCall :path {PRINTLN} :args (Delimited :delim Round)))")
    assert info.value.expected == "Paren, Brace, Bracket, Invisible"
    assert info.value.found == "Round"


def test_unknown_macro_args() -> None:
    with pytest.raises(Expected) as info:
        build_expr(f"(Expr :kind (MacCall :path {PRINTLN} :args (Tokens)))")
    assert info.value.expected == "Empty, Delimited, Eq"


def test_macro_call_requires_path() -> None:
    with pytest.raises(Expected) as info:
        build_expr("(Expr :kind (MacCall))")
    assert info.value.expected == ":path field"


# ------------- Paths -------------


def test_path_expression() -> None:
    expr = build_expr(
        "(Expr :kind (Path :span (Span :lo 0 :hi 7) :segments"
        ' ((PathSegment :ident (Ident :name "std"))'
        '  (PathSegment :ident (Ident :name "io") :id 9))))'
    )
    assert isinstance(expr.kind, PathExpr)
    path = expr.kind.path
    assert str(path) == "std::io"
    assert path.span == Span(0, 7)
    assert [seg.id for seg in path.segments] == [NodeId(0), NodeId(9)]
    assert expr.id == NodeId(1)


def test_path_segment_generic_args() -> None:
    expr = build_expr(
        "(Expr :kind (Path :segments ((PathSegment :ident (Ident :name \"Vec\")"
        " :args (GenericArgs :span (Span :lo 3 :hi 8))))))"
    )
    assert isinstance(expr.kind, PathExpr)
    assert expr.kind.path.segments[0].args == GenericArgs(Span(3, 8))


def test_path_with_tokens() -> None:
    expr = build_expr('(Expr :kind (Path :segments () :tokens (TokenStream :source "x")))')
    assert expr.kind == PathExpr(Path(Span.DUMMY, (), TokenStream("x")))


def test_ident_requires_string_name() -> None:
    with pytest.raises(Expected) as info:
        build_expr("(Expr :kind (Path :segments ((PathSegment :ident (Ident :name main)))))")
    assert info.value.expected == "string"
    assert info.value.found == "symbol main"


# ------------- Expr envelope -------------


def test_unknown_expression_kind() -> None:
    with pytest.raises(Expected) as info:
        build_expr("(Expr :kind (Call))")
    assert info.value.expected == "MacCall, Lit, Path"
    assert info.value.found == "Call"


def test_expression_requires_kind() -> None:
    with pytest.raises(Expected) as info:
        build_expr("(Expr :span (Span :lo 0 :hi 1))")
    assert info.value.expected == ":kind field"
    assert info.value.found == "missing"


def test_wrong_envelope_tag() -> None:
    with pytest.raises(Expected) as info:
        build_expr("(Exp :kind (Lit :kind (Int :value 1)))")
    assert info.value.expected == "Expr"
    assert info.value.found == "Exp"


def test_attributes_must_be_empty() -> None:
    with pytest.raises(Expected) as info:
        build_expr("(Expr :attrs ((Attr)) :kind (Lit :kind (Int :value 1)))")
    assert info.value.expected == "empty attribute list"
    assert info.value.found == "list"


def test_explicit_expression_id() -> None:
    builder = AstBuilder()
    expr = builder.build_expr(parse_str("(Expr :id 77 :kind (Lit :kind (Int :value 1)))"))
    assert expr.id == NodeId(77)
    assert builder.ids_issued == 0


def test_expression_id_range() -> None:
    assert build_expr("(Expr :id 4294967295 :kind (Lit :kind (Int :value 1)))").id.is_dummy
    with pytest.raises(Expected, match="node id"):
        build_expr("(Expr :id 4294967296 :kind (Lit :kind (Int :value 1)))")
    with pytest.raises(Expected, match="node id"):
        build_expr("(Expr :id -1 :kind (Lit :kind (Int :value 1)))")
