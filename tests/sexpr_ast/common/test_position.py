import pytest

from sexpr_ast.common.position import Locator, Position


def test_start_and_str() -> None:
    assert Position.start() == Position(0, 1, 1)
    assert str(Position(4, 3, 2)) == "line 3, column 2"


def test_line_and_column() -> None:
    loc = Locator("ab\ncd\n\ne")
    assert loc.position(0) == Position(0, 1, 1)
    assert loc.position(2) == Position(2, 1, 3)
    assert loc.position(3) == Position(3, 2, 1)
    assert loc.position(7) == Position(7, 4, 1)


def test_offsets_count_utf8_bytes() -> None:
    loc = Locator("aé€b")
    assert loc.position(1) == Position(1, 1, 2)
    assert loc.position(2) == Position(3, 1, 3)
    assert loc.position(3) == Position(6, 1, 4)


def test_lookups_out_of_order() -> None:
    loc = Locator("é\né")
    assert loc.position(2).offset == 3
    assert loc.position(0).offset == 0
    assert loc.position(2) == Position(3, 2, 1)


def test_line_text() -> None:
    loc = Locator("first\nsecond")
    assert loc.line_text(1) == "first"
    assert loc.line_text(2) == "second"
    with pytest.raises(IndexError):
        loc.line_text(3)
