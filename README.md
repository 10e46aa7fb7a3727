# printfkit

`printfkit` is a compact printf-style formatter. It accepts a fixed set of
conversion specifiers, among them a few that Python's `%` operator lacks:
binary, ROT13, reversed strings and escaped strings. Integer conversions use
C's fixed widths, so a negative value shown in binary, hex or octal comes out
in two's complement at 16, 32 or 64 bits.

## Installation

```
pip install printfkit
```

Only the standard library is needed.

## Usage

```python
from printfkit.formatter import render, printf, FormatError

render("%d items, %x in hex", 42, 255)   # '42 items, ff in hex'
render("%b", 5)                          # '101'
render("%R", "Hello")                    # 'Uryyb'
render("%r", "abc")                      # 'cba'
render("%S", "a\nb")                     # 'a\\x0Ab'
render("%+d and % d", 7, 7)              # '+7 and  7'
render("%#o %#x", 8, 255)                # '010 0xff'
render("%x", -1)                         # 'ffffffff'

count = printf("%s, %s!\n", "Hello", "world")  # writes to stdout, returns 14
```

`render(fmt, *args)` returns the formatted text. `printf(fmt, *args, stream=None)`
writes that text to `stream` (standard output when none is given), flushes
it and returns the number of characters written.

### Errors

`FormatError` (a subclass of `ValueError`) is raised when:

- the format string is `None` or is a lone `%`;
- the format string ends with `%` — `printf` still writes the text produced
  before it, and the exception's `partial` attribute holds that text;
- the format string ends with `% `;
- a conversion needs an argument and none is left.

A format that is not a string raises `TypeError`. A format string is read
only up to its first NUL character.

### Supported specifiers

| Specifier | Meaning |
|-----------|---------|
| `%c` | character; an integer is taken as a byte value |
| `%s` | string (`None` prints `(null)`) |
| `%d`, `%i` | signed 32-bit; `%ld`/`%li` 64-bit, `%hd`/`%hi` 16-bit |
| `%u` | unsigned 32-bit; `%lu` 64-bit, `%hu` 16-bit |
| `%o` | octal; `%lo`, `%ho`, and `%#o` with a leading `0` |
| `%x`, `%X` | hex; `%lx`/`%lX`, `%hx`/`%hX`, and `%#x`/`%#X` with `0x`/`0X` |
| `%b` | binary |
| `%p` | address as `0x...` (`None` or 0 prints `(nil)`) |
| `%S` | string or bytes with bytes below 32 or from 127 up shown as `\xHH` |
| `%r` | reversed string (`None` prints `(llun)`) |
| `%R` | ROT13 string (`None` prints `(avyy)`) |
| `%+d`, `%+i` | signed with `+` or `-` in front (also `% +d`, `%+ d`) |
| `% d`, `% i` | signed with a space or `-` in front |
| `%%`, `% %` | a literal percent sign |

The flags `#`, `+` and space have no effect on `%u`, on `%#d`/`%#i`, or on
`%+o`, `%+x`, `%+X`, `% o`, `% x`, `% X`. A bare `%l` or `%h` not followed by
a known conversion prints `%` and consumes no argument. Any other
unrecognised specifier is copied into the output as it stands, so `"%q"`
gives `"%q"`. Field widths and precisions are not supported.

### Single conversions

Each conversion can be called on its own:

- `printfkit.integers`: `format_int`, `format_long`, `format_short`,
  `format_unsigned`, `format_long_unsigned`, `format_short_unsigned`,
  `format_plus_int`, `format_space_int`.
- `printfkit.radix`: `format_binary`, `format_hex`, `format_upper_hex`,
  `format_long_hex`, `format_long_upper_hex`, `format_short_hex`,
  `format_short_upper_hex`, `format_octal`, `format_long_octal`,
  `format_short_octal`, `format_alt_octal`, `format_alt_hex`,
  `format_alt_upper_hex`, `format_address`.
- `printfkit.strings`: `format_char`, `format_string`, `format_reversed`,
  `format_rot13`, `format_escaped`, `format_percent`.
- `printfkit.conversions`: bit-string helpers `to_binary`, `binary_to_hex`,
  `binary_to_octal` and `strip_leading_zeros`.

`printfkit.registry` holds the table of `Specifier` entries and
`match_specifier(fmt, index)`, which returns the first specifier whose token
begins at `fmt[index]`, or `None`.