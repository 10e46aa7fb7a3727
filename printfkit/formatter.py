"""The format-string engine: ``render`` builds the text, ``printf`` writes it."""

import sys

from .registry import match_specifier


class FormatError(ValueError):
    """Raised for a malformed format string or a missing argument.

    ``partial`` holds the text produced before the error when that text is
    still written out, and is ``None`` when nothing is written.
    """

    def __init__(self, message, partial=None):
        super().__init__(message)
        self.partial = partial


def render(fmt, *args):
    """Expand *fmt* with *args* and return the resulting text."""
    if fmt is None:
        raise FormatError("format string is None")
    if not isinstance(fmt, str):
        raise TypeError(f"format string expected, got {type(fmt).__name__}")
    fmt = fmt.split("\0", 1)[0]
    if fmt == "%":
        raise FormatError("format string is a lone '%'")

    pieces = []
    values = iter(args)
    i = 0
    while i < len(fmt):
        char = fmt[i]
        if char != "%":
            pieces.append(char)
            i += 1
            continue
        if i + 1 == len(fmt):
            raise FormatError("format string ends with '%'", partial="".join(pieces))
        spec = match_specifier(fmt, i + 1)
        if spec is None:
            if fmt[i + 1:] == " ":
                raise FormatError("format string ends with '% '")
            pieces.append("%")
            i += 1
            continue
        if spec.takes_argument:
            try:
                value = next(values)
            except StopIteration:
                raise FormatError(f"missing argument for '%{spec.token}'") from None
            pieces.append(spec.convert(value))
        else:
            pieces.append(spec.convert())
        i += 1 + len(spec.token)
    return "".join(pieces)


def printf(fmt, *args, stream=None):
    """Write the expansion of *fmt* to *stream* (standard output by default).

    Returns the number of characters written.  When the format ends in a lone
    ``%`` the text before it is still written before the error is raised.
    """
    out = sys.stdout if stream is None else stream
    try:
        text = render(fmt, *args)
    except FormatError as error:
        if error.partial is not None:
            out.write(error.partial)
            out.flush()
        raise
    out.write(text)
    out.flush()
    return len(text)