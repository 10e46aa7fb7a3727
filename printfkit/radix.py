"""Binary, octal and hexadecimal conversions of C-sized integers.

Covers ``%b``, ``%o``, ``%x``, ``%X``, their ``l`` and ``h`` length variants,
the ``#`` alternate forms and ``%p``.
"""

from .conversions import (
    binary_to_hex,
    binary_to_octal,
    strip_leading_zeros,
    to_binary,
)

INT_BITS = 32
LONG_BITS = 64
SHORT_BITS = 16

NULL_ADDRESS = "(nil)"


def _signed(value, width):
    """Reduce *value* to what a signed C integer of *width* bits would hold."""
    if not isinstance(value, int):
        raise TypeError(f"integer expected, got {type(value).__name__}")
    value &= (1 << width) - 1
    if value >= 1 << (width - 1):
        value -= 1 << width
    return value


def _bits(value, width):
    number = _signed(value, width)
    if number < 0:
        return to_binary(-number - 1, True, width)
    return to_binary(number, False, width)


def _digits(value, width, convert):
    digits = strip_leading_zeros(convert(_bits(value, width)))
    return digits or "0"


def _hex(value, width, uppercase):
    return _digits(value, width, lambda bits: binary_to_hex(bits, uppercase))


def _alt(value, width, convert, prefix):
    if _signed(value, width) == 0:
        return "0"
    return prefix + _digits(value, width, convert)


def format_binary(value):
    """Format a 32-bit integer in binary (``%b``); negatives show two's complement."""
    return _digits(value, INT_BITS, lambda bits: bits)


def format_hex(value):
    """Format a 32-bit integer in lower-case hexadecimal (``%x``)."""
    return _hex(value, INT_BITS, False)


def format_upper_hex(value):
    """Format a 32-bit integer in upper-case hexadecimal (``%X``)."""
    return _hex(value, INT_BITS, True)


def format_long_hex(value):
    """Format a 64-bit integer in lower-case hexadecimal (``%lx``)."""
    return _hex(value, LONG_BITS, False)


def format_long_upper_hex(value):
    """Format a 64-bit integer in upper-case hexadecimal (``%lX``)."""
    return _hex(value, LONG_BITS, True)


def format_short_hex(value):
    """Format a 16-bit integer in lower-case hexadecimal (``%hx``)."""
    return _hex(value, SHORT_BITS, False)


def format_short_upper_hex(value):
    """Format a 16-bit integer in upper-case hexadecimal (``%hX``)."""
    return _hex(value, SHORT_BITS, True)


def format_octal(value):
    """Format a 32-bit integer in octal (``%o``)."""
    return _digits(value, INT_BITS, binary_to_octal)


def format_long_octal(value):
    """Format a 64-bit integer in octal (``%lo``)."""
    return _digits(value, LONG_BITS, binary_to_octal)


def format_short_octal(value):
    """Format a 16-bit integer in octal (``%ho``)."""
    return _digits(value, SHORT_BITS, binary_to_octal)


def format_alt_octal(value):
    """Format a 32-bit integer in octal with a leading ``0`` (``%#o``)."""
    return _alt(value, INT_BITS, binary_to_octal, "0")


def format_alt_hex(value):
    """Format a 32-bit integer in hexadecimal with a ``0x`` prefix (``%#x``)."""
    return _alt(value, INT_BITS, lambda bits: binary_to_hex(bits, False), "0x")


def format_alt_upper_hex(value):
    """Format a 32-bit integer in upper-case hexadecimal with ``0X`` (``%#X``)."""
    return _alt(value, INT_BITS, lambda bits: binary_to_hex(bits, True), "0X")


def format_address(value):
    """Format an address as ``0x`` plus lower-case hex; ``None`` or 0 print ``(nil)``."""
    if value is None or _signed(value, LONG_BITS) == 0:
        return NULL_ADDRESS
    return "0x" + _hex(value, LONG_BITS, False)