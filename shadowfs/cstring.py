"""C-style string helpers used when decoding on-disk and in-memory records."""

from __future__ import annotations

from itertools import groupby
from typing import Iterator, Union

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)

_WHITESPACE = " \t\n\r\f\v"

Text = Union[str, bytes, bytearray]


def _as_text(text: Text) -> str:
    """Return ``text`` as ``str``, cut at the first NUL character."""
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    nul = text.find("\0")
    return text if nul < 0 else text[:nul]


def _digit_value(ch: str) -> int | None:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    return None


def strtol(text: Text, base: int = 10) -> int:
    """Parse a leading integer from ``text`` the way the C library does.

    Leading whitespace and one sign are skipped. A base of 0 picks the base
    from the prefix (``0x`` for 16, ``0`` for 8, otherwise 10). Parsing stops
    at the first character that is not a digit of the base; a value that does
    not fit a 64-bit signed long saturates to ``LONG_MAX`` or ``LONG_MIN``.
    """
    if base < 0:
        raise ValueError(f"invalid base {base}")

    s = _as_text(text)
    pos = 0
    while pos < len(s) and s[pos] in _WHITESPACE:
        pos += 1

    sign = 1
    if s.startswith("-", pos):
        sign = -1
        pos += 1
    elif s.startswith("+", pos):
        pos += 1

    has_hex_prefix = s.startswith("0", pos) and s[pos + 1 : pos + 2] in ("x", "X")
    if base == 0:
        if has_hex_prefix:
            base = 16
            pos += 2
        elif s.startswith("0", pos):
            base = 8
            pos += 1
        else:
            base = 10
    elif base == 16 and has_hex_prefix:
        pos += 2

    cutoff, cutlim = divmod(LONG_MAX, base)
    result = 0
    for ch in s[pos:]:
        digit = _digit_value(ch)
        if digit is None or digit >= base:
            break
        if result > cutoff or (result == cutoff and digit > cutlim):
            return LONG_MAX if sign == 1 else LONG_MIN
        result = result * base + digit

    return result * sign


def tokenize(text: Text, delimiters: str) -> Iterator[str]:
    """Yield the non-empty runs of ``text`` separated by any delimiter character."""
    s = _as_text(text)
    for is_delimiter, run in groupby(s, key=lambda ch: ch in delimiters):
        if not is_delimiter:
            yield "".join(run)


def c_field(raw: Text) -> str:
    """Decode a fixed-size, NUL-terminated character field."""
    if isinstance(raw, (bytes, bytearray)):
        data = bytes(raw)
        nul = data.find(b"\0")
        if nul >= 0:
            data = data[:nul]
        return data.decode("utf-8", errors="surrogateescape")
    return _as_text(raw)