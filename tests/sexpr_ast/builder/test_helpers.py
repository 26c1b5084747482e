import pytest

from sexpr_ast.ast import Delimiter
from sexpr_ast.builder.helpers import (
    expect_bool,
    expect_enum,
    expect_in_range,
    expect_keyword,
    expect_list,
    expect_number,
    expect_string,
    expect_symbol,
    is_nil,
    parse_kwargs,
    require,
)
from sexpr_ast.errors import Expected
from sexpr_ast.sexp import List, parse_str
from sexpr_ast.sexp.nodes import SExp


def sexp(text: str) -> SExp:
    return parse_str(text)


def as_list(text: str) -> List:
    return expect_list(sexp(text))


def test_kind_checks() -> None:
    assert expect_symbol(sexp("a")).value == "a"
    assert expect_keyword(sexp(":a")).name == "a"
    assert expect_string(sexp('"a"')) == "a"
    assert expect_number(sexp("-12")) == -12
    assert is_nil(sexp("nil"))
    assert not is_nil(sexp("()"))


def test_kind_mismatch_describes_found() -> None:
    with pytest.raises(Expected) as info:
        expect_symbol(sexp(":a"))
    assert (info.value.expected, info.value.found) == ("symbol", "keyword :a")
    with pytest.raises(Expected) as info:
        expect_list(sexp("nil"))
    assert (info.value.expected, info.value.found) == ("list", "nil")


def test_range_check() -> None:
    assert expect_in_range(sexp("5"), 0, 5, "lo") == 5
    with pytest.raises(Expected) as info:
        expect_in_range(sexp("6"), 0, 5, "lo")
    assert info.value.expected == "lo in 0..5"
    assert info.value.found == "6"


def test_bool() -> None:
    assert expect_bool(sexp("true")) is True
    assert expect_bool(sexp("false")) is False
    with pytest.raises(Expected, match="true or false"):
        expect_bool(sexp("True"))


def test_enum_by_value() -> None:
    assert expect_enum(sexp("Brace"), Delimiter) is Delimiter.BRACE
    with pytest.raises(Expected) as info:
        expect_enum(sexp("brace"), Delimiter)
    assert info.value.expected == "Paren, Brace, Bracket, Invisible"


def test_kwargs() -> None:
    fields = parse_kwargs(as_list("(Tag :a 1 :b (x) :a 2)"))
    assert list(fields) == ["a", "b"]
    assert expect_number(fields["a"]) == 2


def test_kwargs_empty() -> None:
    assert parse_kwargs(as_list("(Tag)")) == {}


def test_kwargs_dangling_keyword() -> None:
    with pytest.raises(Expected) as info:
        parse_kwargs(as_list("(Tag :a 1 :b)"))
    assert info.value.expected == "value after keyword :b"
    assert info.value.pos.column == 11


def test_require() -> None:
    lst = as_list("(Tag :a 1)")
    fields = parse_kwargs(lst)
    assert expect_number(require(fields, "a", lst)) == 1
    with pytest.raises(Expected) as info:
        require(fields, "b", lst)
    assert info.value.expected == ":b field"
    assert info.value.pos == lst.pos
