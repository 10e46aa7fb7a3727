"""Decimal formatting of C-sized signed and unsigned integers."""

INT_BITS = 32
LONG_BITS = 64
SHORT_BITS = 16


def _wrap(value, bits, signed):
    """Reduce *value* to what a C integer of *bits* bits would hold."""
    if not isinstance(value, int):
        raise TypeError(f"integer expected, got {type(value).__name__}")
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _signed(value, bits, positive_sign=""):
    number = _wrap(value, bits, True)
    if number < 0:
        return f"-{-number}"
    return f"{positive_sign}{number}"


def format_int(value):
    """Format *value* as a signed 32-bit decimal (``%d``, ``%i``)."""
    return _signed(value, INT_BITS)


def format_long(value):
    """Format *value* as a signed 64-bit decimal (``%ld``, ``%li``)."""
    return _signed(value, LONG_BITS)


def format_short(value):
    """Format *value* as a signed 16-bit decimal (``%hd``, ``%hi``)."""
    return _signed(value, SHORT_BITS)


def format_unsigned(value):
    """Format *value* as an unsigned 32-bit decimal (``%u``)."""
    return str(_wrap(value, INT_BITS, False))


def format_long_unsigned(value):
    """Format *value* as an unsigned 64-bit decimal (``%lu``)."""
    return str(_wrap(value, LONG_BITS, False))


def format_short_unsigned(value):
    """Format *value* as an unsigned 16-bit decimal (``%hu``)."""
    return str(_wrap(value, SHORT_BITS, False))


def format_plus_int(value):
    """Format a signed 32-bit decimal that always carries a sign (``%+d``)."""
    return _signed(value, INT_BITS, "+")


def format_space_int(value):
    """Format a signed 32-bit decimal with a space in place of a plus sign (``% d``)."""
    return _signed(value, INT_BITS, " ")