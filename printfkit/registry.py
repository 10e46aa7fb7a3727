"""The table of conversion specifiers and the lookup that matches them."""

from dataclasses import dataclass
from typing import Callable

from .integers import (
    format_int,
    format_long,
    format_long_unsigned,
    format_plus_int,
    format_short,
    format_short_unsigned,
    format_space_int,
    format_unsigned,
)
from .radix import (
    format_address,
    format_alt_hex,
    format_alt_octal,
    format_alt_upper_hex,
    format_binary,
    format_hex,
    format_long_hex,
    format_long_octal,
    format_long_upper_hex,
    format_octal,
    format_short_hex,
    format_short_octal,
    format_short_upper_hex,
    format_upper_hex,
)
from .strings import (
    format_char,
    format_escaped,
    format_percent,
    format_reversed,
    format_rot13,
    format_string,
)


@dataclass(frozen=True)
class Specifier:
    """A conversion: the text after ``%`` and the function that renders it.

    When ``takes_argument`` is false, ``convert`` is called with no arguments
    and no value is consumed from the argument list.
    """

    token: str
    convert: Callable[..., str]
    takes_argument: bool = True


def _spec(token, convert):
    return Specifier(token, convert)


def _literal(token):
    return Specifier(token, format_percent, takes_argument=False)


# Order matters: the first entry whose token matches wins.
SPECIFIERS = (
    _spec("c", format_char),
    _spec("s", format_string),
    _spec("i", format_int),
    _spec("d", format_int),
    _spec("b", format_binary),
    _spec("u", format_unsigned),
    _spec("o", format_octal),
    _spec("x", format_hex),
    _spec("X", format_upper_hex),
    _spec("S", format_escaped),
    _spec("p", format_address),
    _spec("li", format_long),
    _spec("ld", format_long),
    _spec("lu", format_long_unsigned),
    _spec("lo", format_long_octal),
    _spec("lx", format_long_hex),
    _spec("lX", format_long_upper_hex),
    _spec("hi", format_short),
    _spec("hd", format_short),
    _spec("hu", format_short_unsigned),
    _spec("ho", format_short_octal),
    _spec("hx", format_short_hex),
    _spec("hX", format_short_upper_hex),
    _spec("#o", format_alt_octal),
    _spec("#x", format_alt_hex),
    _spec("#X", format_alt_upper_hex),
    _spec("#i", format_int),
    _spec("#d", format_int),
    _spec("#u", format_unsigned),
    _spec("+i", format_plus_int),
    _spec("+d", format_plus_int),
    _spec("+u", format_unsigned),
    _spec("+o", format_octal),
    _spec("+x", format_hex),
    _spec("+X", format_upper_hex),
    _spec(" i", format_space_int),
    _spec(" d", format_space_int),
    _spec(" u", format_unsigned),
    _spec(" o", format_octal),
    _spec(" x", format_hex),
    _spec(" X", format_upper_hex),
    _spec("R", format_rot13),
    _spec("r", format_reversed),
    _literal("%"),
    _literal("l"),
    _literal("h"),
    _spec(" +i", format_plus_int),
    _spec(" +d", format_plus_int),
    _spec("+ i", format_plus_int),
    _spec("+ d", format_plus_int),
    _literal(" %"),
)


def match_specifier(fmt, index):
    """Return the first specifier whose token starts at ``fmt[index]``, or ``None``."""
    return next(
        (spec for spec in SPECIFIERS if fmt.startswith(spec.token, index)),
        None,
    )