import io

import pytest

from printfkit.formatter import FormatError, printf, render
from printfkit.integers import format_int, format_plus_int
from printfkit.radix import format_address, format_hex
from printfkit.strings import format_reversed, format_rot13


def test_plain_text_unchanged():
    assert render("hello world") == "hello world"


def test_empty_format():
    assert render("") == ""


def test_string_argument():
    assert render("[%s]", "abc") == "[abc]"


def test_null_string_argument():
    assert render("%s", None) == "(null)"


def test_integer_conversions_use_formatters():
    assert render("%d and %+i", -17, 5) == format_int(-17) + " and " + format_plus_int(5)


def test_hex_and_address():
    assert render("%x %p", 255, None) == format_hex(255) + " " + format_address(None)


def test_reverse_and_rot13():
    assert render("%r|%R", "abc", "Hello") == format_reversed("abc") + "|" + format_rot13("Hello")


def test_double_percent():
    assert render("100%%") == "100%"


def test_percent_consumes_no_argument():
    assert render("%%%s", "x") == "%x"


def test_unknown_specifier_printed_literally():
    assert render("%q") == "%q"


def test_space_percent():
    assert render("% %") == "%"


def test_bare_length_modifier_prints_percent():
    assert render("%l") == "%"
    assert render("%hz") == "%z"


def test_extra_arguments_ignored():
    assert render("%s", "a", "b", "c") == "a"


def test_format_stops_at_nul():
    assert render("ab\0cd") == "ab"


def test_lone_percent_raises_without_partial():
    with pytest.raises(FormatError) as info:
        render("%")
    assert info.value.partial is None


def test_trailing_percent_raises_with_partial():
    with pytest.raises(FormatError) as info:
        render("abc%")
    assert info.value.partial == "abc"


def test_trailing_percent_space_raises_without_partial():
    with pytest.raises(FormatError) as info:
        render("abc% ")
    assert info.value.partial is None


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        render("%d")


def test_none_format_raises():
    with pytest.raises(FormatError):
        render(None)


def test_non_string_format_raises():
    with pytest.raises(TypeError):
        render(42)


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s-%s", "ab", "cd", stream=out)
    assert out.getvalue() == "ab-cd"
    assert count == len("ab-cd")


def test_printf_flushes_partial_then_raises():
    out = io.StringIO()
    with pytest.raises(FormatError):
        printf("abc%", stream=out)
    assert out.getvalue() == "abc"


def test_printf_writes_nothing_on_percent_space():
    out = io.StringIO()
    with pytest.raises(FormatError):
        printf("abc% ", stream=out)
    assert out.getvalue() == ""


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s!", "hi")
    assert capsys.readouterr().out == "hi!"
    assert count == len("hi!")


def test_count_matches_rendered_length():
    fmt = "%d %x %o %s %c"
    args = (-42, 255, 8, "text", "z")
    out = io.StringIO()
    assert printf(fmt, *args, stream=out) == len(render(fmt, *args))