"""Character and string conversions: ``%c``, ``%s``, ``%r``, ``%R``, ``%S`` and ``%%``."""

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_ROTATED = "NOPQRSTUVWXYZABCDEFGHIJKLMnopqrstuvwxyzabcdefghijklm"
_ROT13 = str.maketrans(_ALPHABET, _ROTATED)

NULL_STRING = "(null)"
NULL_REVERSED = "(llun)"
NULL_ROT13 = "(avyy)"


def _until_nul(value):
    if not isinstance(value, str):
        raise TypeError(f"string expected, got {type(value).__name__}")
    return value.split("\0", 1)[0]


def format_char(value):
    """Format a single character; an integer is taken as a byte value."""
    if isinstance(value, int):
        return chr(value & 0xFF)
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"single character expected, got {value!r}")
        return value
    raise TypeError(f"character expected, got {type(value).__name__}")


def format_string(value):
    """Format a string, stopping at the first NUL; ``None`` prints ``(null)``."""
    if value is None:
        return NULL_STRING
    return _until_nul(value)


def format_reversed(value):
    """Format a string reversed; ``None`` prints ``(llun)``."""
    if value is None:
        return NULL_REVERSED
    return _until_nul(value)[::-1]


def format_rot13(value):
    """Format a string with ASCII letters rotated by 13; ``None`` prints ``(avyy)``."""
    if value is None:
        return NULL_ROT13
    return _until_nul(value).translate(_ROT13)


def format_escaped(value):
    """Format a string with non-printable bytes shown as ``\\xHH`` in upper case.

    Text is taken as UTF-8 bytes; bytes below 32 or from 127 up are escaped.
    """
    if isinstance(value, str):
        data = _until_nul(value).encode("utf-8")
    elif isinstance(value, (bytes, bytearray)):
        data = bytes(value).split(b"\0", 1)[0]
    else:
        raise TypeError(f"string expected, got {type(value).__name__}")
    return "".join(
        chr(byte) if 32 <= byte < 127 else f"\\x{byte:02X}" for byte in data
    )


def format_percent():
    """Format a literal percent sign."""
    return "%"