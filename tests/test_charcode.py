import pytest

from kplc.charcode import CharCode, char_code


@pytest.mark.parametrize("ch", list("azAZmQ"))
def test_letters(ch):
    assert char_code(ch) is CharCode.LETTER


@pytest.mark.parametrize("ch", list("0123456789"))
def test_digits(ch):
    assert char_code(ch) is CharCode.DIGIT


@pytest.mark.parametrize("ch", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_whitespace(ch):
    assert char_code(ch) is CharCode.SPACE


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("!", CharCode.EXCLAMATION),
        ("'", CharCode.SINGLEQUOTE),
        ("(", CharCode.LPAR),
        (")", CharCode.RPAR),
        ("*", CharCode.TIMES),
        ("+", CharCode.PLUS),
        (",", CharCode.COMMA),
        ("-", CharCode.MINUS),
        (".", CharCode.PERIOD),
        ("/", CharCode.SLASH),
        (":", CharCode.COLON),
        (";", CharCode.SEMICOLON),
        ("<", CharCode.LT),
        ("=", CharCode.EQ),
        (">", CharCode.GT),
    ],
)
def test_symbols(ch, expected):
    assert char_code(ch) is expected


@pytest.mark.parametrize("ch", ["@", "[", "_", "~", '"', "?", "\x00", "\x80", "\xe9", "{"])
def test_unknown(ch):
    assert char_code(ch) is CharCode.UNKNOWN


@pytest.mark.parametrize("bad", ["", "ab"])
def test_rejects_non_single_character(bad):
    with pytest.raises(ValueError):
        char_code(bad)