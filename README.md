# shadowfs

Building blocks for low-level, C-flavoured text handling in Python:

- a printf-style formatter that narrows integers to C types and honours
  flags, field width and precision;
- C string helpers (`strtol`, token splitting, NUL-terminated fields);
- a coloured, level-tagged logger with assertion checks.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Formatting: `shadowfs.formatter`

`vformat(fmt, args)` formats an iterable of arguments with a printf-style
format string. `snprintf(size, fmt, *args)` does the same for a buffer of
`size` characters including the terminator, and returns a tuple of the text
that fits (at most `size - 1` characters) and the length the full text would
have had.

```python
from shadowfs.formatter import snprintf, vformat

vformat("%-8s|%05d", ["value", 42])   # 'value   |00042'
vformat("%#x", [255])                 # '0xff'
vformat("%u", [-1])                   # '4294967295'
vformat("%hhd", [200])                # '-56'
snprintf(8, "%05d|%s", 42, "abc")     # ('00042|a', 9)
```

Supported conversions are `%d %i %u %o %x %X %c %s %p %%` and `%f`/`%F`.
The flags `- 0 + space #`, a literal or `*` width and precision, and the
length modifiers `hh h l ll j z t L` are understood; integers are wrapped to
the width of the C type the modifier names (32 bits without one). `%e`, `%g`
and `%a` are accepted but rendered in the same fixed-point form as `%f`. A
`%` that does not start a known specification is copied literally. Running
out of arguments raises `TypeError`.

The lower layers can be used directly:

- `shadowfs.formatspec.parse_format_spec(fmt, pos)` parses the specification
  at the `%` at `fmt[pos]` into a `FormatSpec` (with `Option`,
  `LengthModifier` and `Conversion` enums), or returns `None` for an unknown
  one. It raises `ValueError` when there is no `%` at `pos`.
- `shadowfs.conversion` has `format_reversed_signed`,
  `format_reversed_unsigned` and `format_float_reversed`, which return
  digits least significant first: `format_reversed_unsigned(255, 16)` is
  `"ff"` and `format_reversed_signed(120)` is `"021"`. The float conversion
  gives `"nan"`/`"fni"` for NaN and infinity and `"rre"` when the result does
  not fit its 23-character buffer or the precision is above 21.

## C strings: `shadowfs.cstring`

```python
from shadowfs.cstring import c_field, strtol, tokenize

strtol("  0x1F", 0)               # 31
strtol("0777", 8)                 # 511
list(tokenize("/a//b/", "/"))     # ['a', 'b']
c_field(b"hello\0\0\0")           # 'hello'
```

`strtol` skips leading whitespace and one sign, chooses the base from the
prefix when given base 0, stops at the first non-digit and saturates to
`LONG_MAX` / `LONG_MIN` on 64-bit overflow. Text is read up to the first NUL.

## Logging: `shadowfs.log`

`KernelLog(sink=None, debug=False, trace=False)` writes records to `sink`
(by default `sys.stderr.write`). `info`, `warning` and `error` always emit;
`debug` and `trace` only when enabled. Warnings, errors, debug and trace
records carry the caller's `[file:line]`, and warnings are numbered in
`KernelLog.warnings`. `block(kind)` is a context manager that traces entry
and exit; `check(condition, expression, message=None)` logs an error and
raises `AssertionError` when the condition is false. `format_record` builds
a single line on its own.

```python
from shadowfs.log import KernelLog

lines = []
log = KernelLog(sink=lines.append)
log.info("booted")   # lines[0] == '\x1b[1;92m[INFO ]\x1b[0m booted\n'
```

## What this package does not do

There is no filesystem here: no vnode tree, mount table, device or RAM
filesystem, no loading of tar archives, and no console that writes through
such a filesystem. The package provides only the formatting, string and
logging pieces described above, and it installs no command-line program.