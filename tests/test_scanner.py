import pytest

from objmesh.errors import ParseError, Status
from objmesh.scanner import Cursor, LineType, index_make_absolute


@pytest.mark.parametrize(
    "index, num_components, abs_index",
    [
        (1, 1, 0),
        (-1, 1, 0),
        (1, 10, 0),
        (-1, 10, 9),
        (2, 1, 1),
        (-2, 1, -1),
        (2, 10, 1),
        (-2, 10, 8),
    ],
)
def test_index_make_absolute(index, num_components, abs_index):
    assert index_make_absolute(index, num_components) == abs_index


@pytest.mark.parametrize(
    "text, remainder",
    [
        ("", ""),
        ("\u0020", ""),
        ("\u0020" * 7, ""),
        ("\u000B", ""),
        ("\u000B" * 7, ""),
        ("\u000B\u0020\u000B\u000B\u0020\u000B\u000B\u000B\u000B\u0020", ""),
        ("a", "a"),
        (" a", "a"),
        ("    a", "a"),
        ("a ", "a "),
        ("a    ", "a    "),
    ],
)
def test_skip_whitespace(text, remainder):
    cursor = Cursor(text)
    cursor.skip_whitespace()
    assert cursor.remainder() == remainder


@pytest.mark.parametrize(
    "text",
    [
        "",
        "123abc",
        "123\u1234\u1232\u0987",
        "abc123",
        "\u1234\u1232\u0987123",
        "123/",
        "123//",
        "/123",
        "//123",
    ],
)
def test_parse_float_rejects(text):
    with pytest.raises(ParseError) as info:
        Cursor(text).parse_float()
    assert info.value.status == Status.ERROR_EXPECTED_FLOAT


@pytest.mark.parametrize(
    "text, value",
    [
        ("123", 123.0),
        ("123.000", 123.0),
        ("123.", 123.0),
        (".000", 0.0),
        ("+123.0", 123.0),
        ("-123.0", -123.0),
        ("123e5", 123e5),
        ("123e05", 123e5),
        ("123e+5", 123e5),
        (" 123.0", 123.0),
        ("    123.0", 123.0),
        ("123.0    ", 123.0),
        ("    123.0    ", 123.0),
    ],
)
def test_parse_float_accepts(text, value):
    assert Cursor(text).parse_float() == value


def test_parse_float_negative_exponent():
    assert Cursor("123e-5").parse_float() == pytest.approx(123e-5, rel=1e-6)


def test_parse_float_is_single_precision():
    assert Cursor("0.1").parse_float() == pytest.approx(0.1, rel=1e-7)
    assert Cursor("0.1").parse_float() != 0.1


def test_parse_float_overflow_rejected():
    with pytest.raises(ParseError) as info:
        Cursor("1e39").parse_float()
    assert info.value.status == Status.ERROR_EXPECTED_FLOAT


def test_parse_float_advances_past_token():
    cursor = Cursor("  1.5 2.5")
    assert cursor.parse_float() == 1.5
    assert cursor.remainder() == " 2.5"
    assert cursor.parse_float() == 2.5
    assert cursor.at_end()


def test_parse_float_failure_resets_to_token_start():
    cursor = Cursor("  12x")
    with pytest.raises(ParseError) as info:
        cursor.parse_float()
    assert cursor.pos == 2
    assert info.value.column_number == 2


def test_parse_integer_stops_at_slash():
    cursor = Cursor("12/3")
    assert cursor.parse_integer() == 12
    assert cursor.remainder() == "/3"


@pytest.mark.parametrize("text, value", [("7", 7), ("-3", -3), ("+4", 4), ("  42 ", 42)])
def test_parse_integer_accepts(text, value):
    assert Cursor(text).parse_integer() == value


@pytest.mark.parametrize("text", ["abc", "1.5", "2147483648", "1_0", "/1"])
def test_parse_integer_rejects(text):
    cursor = Cursor(text)
    with pytest.raises(ParseError) as info:
        cursor.parse_integer()
    assert info.value.status == Status.ERROR_EXPECTED_INTEGER
    assert cursor.pos == 0


def test_parse_integer_on_empty_reports_expected_float():
    with pytest.raises(ParseError) as info:
        Cursor("   ").parse_integer()
    assert info.value.status == Status.ERROR_EXPECTED_FLOAT


@pytest.mark.parametrize(
    "text, line_type",
    [
        ("", LineType.EMPTY),
        ("   ", LineType.EMPTY),
        ("# comment", LineType.COMMENT),
        ("  #", LineType.COMMENT),
        ("v 1 2 3", LineType.VERTEX),
        ("v\t1 2 3", LineType.VERTEX),
        ("v", LineType.VERTEX),
        ("vt 0 1", LineType.VERTEX_TEXTURE),
        ("vn 0 0 1", LineType.NORMAL),
        ("f 1 2 3", LineType.FACE),
        ("g name", LineType.GROUP),
        ("vx 1", LineType.UNKNOWN),
        ("usemtl Material", LineType.UNKNOWN),
        ("mtllib cube.mtl", LineType.UNKNOWN),
        ("o Cube", LineType.UNKNOWN),
        ("s 0", LineType.UNKNOWN),
        ("fx", LineType.UNKNOWN),
    ],
)
def test_parse_line_type(text, line_type):
    assert Cursor(text).parse_line_type() is line_type


def test_parse_line_type_leaves_cursor_after_keyword():
    cursor = Cursor("  vn 1 2 3")
    assert cursor.parse_line_type() is LineType.NORMAL
    assert cursor.remainder() == " 1 2 3"


def test_skip_until_slash_or_space():
    cursor = Cursor("123/45 6")
    cursor.skip_until_slash_or_space()
    assert cursor.remainder() == "/45 6"


def test_skip_until_whitespace_includes_slashes():
    cursor = Cursor("1/2/3 4")
    cursor.skip_until_whitespace()
    assert cursor.remainder() == " 4"
    assert cursor.at_end_or_space()
    assert not cursor.at_end()