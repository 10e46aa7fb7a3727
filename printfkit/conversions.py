"""Bit-string helpers used by the binary, octal and hexadecimal conversions."""

_BIT_CHARS = frozenset("01")
_INVERT = str.maketrans("01", "10")


def _check_bits(bits):
    if not isinstance(bits, str):
        raise TypeError(f"bit string expected, got {type(bits).__name__}")
    if not bits or not set(bits) <= _BIT_CHARS:
        raise ValueError(f"not a bit string: {bits!r}")


def to_binary(value, negative, width):
    """Return *value* as a *width*-bit string, every bit inverted when *negative*.

    For a negative number ``n`` callers pass ``-n - 1`` with ``negative=True``,
    which yields the two's-complement bit pattern of ``n``.
    """
    if not isinstance(value, int) or not isinstance(width, int):
        raise TypeError("value and width must be integers")
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    if not 0 <= value < 1 << width:
        raise ValueError(f"{value} does not fit in {width} bits")
    bits = format(value, f"0{width}b")
    if negative:
        bits = bits.translate(_INVERT)
    return bits


def binary_to_hex(bits, uppercase):
    """Convert a bit string whose length is a multiple of four to hex digits."""
    _check_bits(bits)
    if len(bits) % 4:
        raise ValueError(f"bit string length {len(bits)} is not a multiple of 4")
    spec = "X" if uppercase else "x"
    return format(int(bits, 2), f"0{len(bits) // 4}{spec}")


def binary_to_octal(bits):
    """Convert a bit string to octal digits, three bits per digit.

    Any bits left over at the top form the leading digit, so 32 bits give
    11 digits, 16 bits give 6 and 64 bits give 22.
    """
    _check_bits(bits)
    digits = -(-len(bits) // 3)
    return format(int(bits, 2), f"0{digits}o")


def strip_leading_zeros(digits):
    """Drop leading ``0`` characters; an all-zero string becomes empty."""
    return digits.lstrip("0")