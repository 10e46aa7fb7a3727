import pytest

from printfkit.integers import (
    format_int,
    format_long,
    format_plus_int,
    format_short_unsigned,
    format_space_int,
)
from printfkit.radix import format_alt_hex, format_hex, format_long_upper_hex
from printfkit.registry import SPECIFIERS, Specifier, match_specifier
from printfkit.strings import format_percent, format_rot13, format_string


@pytest.mark.parametrize(
    "fmt, token, convert",
    [
        ("%d", "d", format_int),
        ("%s", "s", format_string),
        ("%x", "x", format_hex),
        ("%ld", "ld", format_long),
        ("%lX", "lX", format_long_upper_hex),
        ("%hu", "hu", format_short_unsigned),
        ("%#x", "#x", format_alt_hex),
        ("%+d", "+d", format_plus_int),
        ("% d", " d", format_space_int),
        ("% +d", " +d", format_plus_int),
        ("%+ i", "+ i", format_plus_int),
        ("%R", "R", format_rot13),
    ],
)
def test_matches_table_entry(fmt, token, convert):
    spec = match_specifier(fmt, 1)
    assert spec.token == token
    assert spec.convert is convert
    assert spec.takes_argument is True


@pytest.mark.parametrize("fmt, token", [("%%", "%"), ("%lq", "l"), ("%h", "h"), ("% %", " %")])
def test_literal_percent_entries(fmt, token):
    spec = match_specifier(fmt, 1)
    assert spec.token == token
    assert spec.takes_argument is False
    assert spec.convert() == "%"


@pytest.mark.parametrize("fmt", ["%q", "% ", "%#", "%+"])
def test_unknown_specifier_gives_none(fmt):
    assert match_specifier(fmt, 1) is None


def test_index_past_end_gives_none():
    assert match_specifier("%", 1) is None


def test_match_respects_index():
    spec = match_specifier("ab%lu", 3)
    assert spec.token == "lu"


def test_long_prefix_wins_over_bare_length():
    tokens = [spec.token for spec in SPECIFIERS]
    assert tokens.index("li") < tokens.index("l")
    assert match_specifier("%li", 1).token == "li"


def test_tokens_are_unique():
    tokens = [spec.token for spec in SPECIFIERS]
    assert len(tokens) == len(set(tokens))
    for token in tokens:
        assert match_specifier("%" + token, 1).token == token


def test_specifier_is_frozen():
    spec = Specifier("%", format_percent, takes_argument=False)
    with pytest.raises(AttributeError):
        spec.token = "d"
    assert spec.token == "%"
    assert spec.convert() == "%"