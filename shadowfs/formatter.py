"""printf-style formatting with C integer widths, flags, width and precision."""

from __future__ import annotations

import operator
from typing import Iterable, Iterator, Tuple

from .conversion import (
    format_float_reversed,
    format_reversed_signed,
    format_reversed_unsigned,
)
from .formatspec import (
    DEFAULT_FLOAT_PRECISION,
    Conversion,
    FormatSpec,
    LengthModifier,
    Option,
    parse_format_spec,
)

_MASK64 = (1 << 64) - 1

_INTEGER_BITS = {
    LengthModifier.NONE: 32,
    LengthModifier.SHORT: 16,
    LengthModifier.LONG_DOUBLE: 32,
    LengthModifier.CHAR: 8,
    LengthModifier.LONG: 64,
    LengthModifier.LONG_LONG: 64,
    LengthModifier.INTMAX: 64,
    LengthModifier.SIZET: 64,
    LengthModifier.PTRDIFFT: 64,
}

_UNSIGNED_BASES = {
    Conversion.OCTAL: 8,
    Conversion.HEX_INT: 16,
    Conversion.UNSIGNED_INT: 10,
}

_FLOAT_CONVERSIONS = {
    Conversion.FLOAT_DEC,
    Conversion.FLOAT_SCI,
    Conversion.FLOAT_SHORTEST,
    Conversion.FLOAT_HEX,
}

_NO_ZERO_PAD = {Conversion.STRING, Conversion.CHAR, Conversion.PERCENT}


class _Arguments:
    """Hands out the values consumed by the conversions, in order."""

    def __init__(self, args: Iterable[object]) -> None:
        self._values: Iterator[object] = iter(args)

    def _next(self) -> object:
        try:
            return next(self._values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def integer(self) -> int:
        return operator.index(self._next())

    def real(self) -> float:
        return float(self._next())

    def string(self) -> str:
        value = self._next()
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode("latin-1")
        if isinstance(value, str):
            return value
        raise TypeError(f"%s expects a string, got {type(value).__name__}")

    def char(self) -> str:
        value = self._next()
        if isinstance(value, str):
            if not value:
                raise TypeError("%c expects a non-empty string or an integer")
            return value[0]
        return chr(operator.index(value) & 0xFF)


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _render(spec: FormatSpec, values: _Arguments) -> str:
    if spec.field_width_opt is Option.STAR:
        width = values.integer()
        spec.field_width_opt = Option.LITERAL
        if width < 0:
            width = -width
            spec.left_justified = True
        spec.field_width = width
    if spec.prec_opt is Option.STAR:
        prec = values.integer()
        spec.prec = prec
        spec.prec_opt = Option.LITERAL if prec >= 0 else Option.NONE
        if prec < 0 and spec.conversion in _FLOAT_CONVERSIONS:
            spec.prec = DEFAULT_FLOAT_PRECISION

    conv = spec.conversion
    zero_precision = spec.prec_opt is Option.LITERAL and spec.prec == 0
    sign = ""
    need_0x = ""
    zero = False

    if conv is Conversion.PERCENT:
        payload = "%"
    elif conv is Conversion.CHAR:
        payload = values.char()
    elif conv is Conversion.STRING:
        text = values.string()
        payload = text if spec.prec_opt is Option.NONE else text[: max(spec.prec, 0)]
    elif conv is Conversion.SIGNED_INT:
        value = _wrap_signed(values.integer(), _INTEGER_BITS[spec.length_modifier])
        sign = "-" if value < 0 else spec.prepend
        zero = value == 0
        payload = "" if zero and zero_precision else format_reversed_signed(value)
    elif conv in _UNSIGNED_BASES:
        value = values.integer() & ((1 << _INTEGER_BITS[spec.length_modifier]) - 1)
        zero = value == 0
        if zero and zero_precision:
            payload = ""
            if conv is Conversion.OCTAL and spec.alt_form:
                spec.prec = 1
        else:
            payload = format_reversed_unsigned(value, _UNSIGNED_BASES[conv], spec.uppercase)
        if value and spec.alt_form:
            if conv is Conversion.OCTAL:
                payload += "0"
            elif conv is Conversion.HEX_INT:
                need_0x = "X" if spec.uppercase else "x"
    elif conv is Conversion.POINTER:
        payload = format_reversed_unsigned(values.integer() & _MASK64, 16, False)
        need_0x = "x"
    else:
        value = values.real()
        sign = "-" if value < 0 else spec.prepend
        zero = value == 0
        payload = format_float_reversed(value, spec.prec, spec.alt_form, spec.uppercase)

    pad = ""
    if spec.field_width_opt is Option.LITERAL:
        if spec.leading_zero_pad:
            if conv not in _NO_ZERO_PAD:
                literal_zero = spec.prec_opt is Option.LITERAL and spec.prec == 0
                pad = " " if literal_zero and zero else "0"
        else:
            pad = " "

    prec_pad = 0
    if conv is not Conversion.STRING and conv is not Conversion.FLOAT_DEC:
        prec_pad = max(0, spec.prec - len(payload))

    field_pad = spec.field_width - len(payload) - (1 if sign else 0) - prec_pad
    if need_0x:
        field_pad -= 2
    field_pad = max(0, field_pad)

    parts = []
    if not spec.left_justified and pad:
        if pad == "0":
            if sign:
                parts.append(sign)
                sign = ""
            if need_0x:
                parts.append("0" + need_0x)
        parts.append(pad * field_pad)
        if pad != "0" and need_0x:
            parts.append("0" + need_0x)
    elif need_0x:
        parts.append("0" + need_0x)

    if conv is Conversion.STRING:
        parts.append(payload)
    else:
        parts.extend((sign, "0" * prec_pad, payload[::-1]))

    if spec.left_justified and pad:
        parts.append(pad * field_pad)
    return "".join(parts)


def vformat(fmt: str, args: Iterable[object]) -> str:
    """Format ``args`` according to the printf-style ``fmt``.

    Integers are narrowed to the C type named by the length modifier. A
    ``%`` that does not begin a known specification is copied literally.
    Raises ``TypeError`` when ``args`` runs out.
    """
    values = _Arguments(args)
    out = []
    pos = 0
    end = len(fmt)
    while pos < end:
        if fmt[pos] != "%":
            stop = fmt.find("%", pos)
            if stop < 0:
                stop = end
            out.append(fmt[pos:stop])
            pos = stop
            continue
        spec = parse_format_spec(fmt, pos)
        if spec is None:
            out.append("%")
            pos += 1
            continue
        pos += spec.length
        out.append(_render(spec, values))
    return "".join(out)


def snprintf(size: int, fmt: str, *args: object) -> Tuple[str, int]:
    """Format into a buffer of ``size`` characters including the terminator.

    Returns the text that fits (at most ``size - 1`` characters) and the
    length the full text would have had.
    """
    if size < 0:
        raise ValueError(f"buffer size must not be negative: {size}")
    text = vformat(fmt, args)
    return text[: max(size - 1, 0)], len(text)