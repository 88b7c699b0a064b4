"""Number-to-text conversions that produce their digits least significant first.

The formatter writes digits into a scratch area from the low end and then
emits them back to front, so every function here returns its text reversed:
``format_reversed_unsigned(255, 16, False)`` is ``"ff"`` and
``format_reversed_signed(120)`` is ``"021"``.
"""

from __future__ import annotations

import struct

CONVERSION_BUFFER_SIZE = 23

_MAN_MASK = 0xFFFFFFFF  # the fraction arithmetic runs on 32-bit unsigned values
_BIN_MASK = 0xFFFFFFFFFFFFFFFF

_DOUBLE_EXP_MASK = 1024 * 2 - 1
_DOUBLE_EXP_BIAS = 1024 - 1
_DOUBLE_MAN_BITS = 53 - 1
_DOUBLE_BIN_BITS = 64
_FTOA_MAN_BITS = 32
_FTOA_SHIFT_BITS = min(_FTOA_MAN_BITS, 53) - 1
_FRACTION_LIMIT = (_MAN_MASK - 3) // 5

_DIGITS_UPPER = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class _Overflow(Exception):
    """The converted text does not fit the conversion buffer."""


def format_reversed_signed(value: int) -> str:
    """Decimal digits of ``abs(value)``, least significant first; no sign."""
    return str(abs(int(value)))[::-1]


def format_reversed_unsigned(value: int, base: int = 10, uppercase: bool = False) -> str:
    """Digits of a non-negative ``value`` in ``base``, least significant first."""
    if value < 0:
        raise ValueError(f"value must not be negative: {value}")
    if not 2 <= base <= 36:
        raise ValueError(f"unsupported base {base}")
    digits = _DIGITS_UPPER if uppercase else _DIGITS_UPPER.lower()
    out = []
    while True:
        value, d = divmod(value, base)
        out.append(digits[d])
        if not value:
            break
    return "".join(out)


def _case(text: str, uppercase: bool) -> str:
    return text if uppercase else text.lower()


def format_float_reversed(
    value: float, precision: int = 6, alt_form: bool = False, uppercase: bool = False
) -> str:
    """Fixed-point text of ``abs(value)`` with ``precision`` decimals, reversed.

    Infinities give ``"fni"`` and NaN ``"nan"``; a precision above 21 or a
    result too long for the 23-character conversion buffer gives ``"rre"``.
    Letters are upper case when ``uppercase`` is set. The sign is not written.
    """
    if precision < 0:
        raise ValueError(f"precision must not be negative: {precision}")

    (bits,) = struct.unpack("<Q", struct.pack("<d", float(value)))
    exp = (bits >> _DOUBLE_MAN_BITS) & _DOUBLE_EXP_MASK
    mantissa = bits & ((1 << _DOUBLE_MAN_BITS) - 1)
    if exp == _DOUBLE_EXP_MASK:
        return _case("NAN" if mantissa else "FNI", uppercase)
    if precision > CONVERSION_BUFFER_SIZE - 2:
        return _case("RRE", uppercase)
    try:
        return _ftoa(mantissa, exp, precision, alt_form)
    except _Overflow:
        return _case("RRE", uppercase)


def _ftoa(bin_: int, exp: int, precision: int, alt_form: bool) -> str:
    if exp:
        bin_ |= 1 << _DOUBLE_MAN_BITS
    else:
        exp += 1
    exp -= _DOUBLE_EXP_BIAS

    buf = ["0"] * CONVERSION_BUFFER_SIZE
    carry = 0
    dec = precision
    if dec or alt_form:
        buf[dec] = "."
        dec += 1

    # Integer part.
    if exp >= 0:
        shift_i = min(exp, _FTOA_SHIFT_BITS)
        exp_i = exp - shift_i
        shift_i = _DOUBLE_MAN_BITS - shift_i
        man_i = (bin_ >> shift_i) & _MAN_MASK
        if exp_i:
            if shift_i:
                carry = (bin_ >> (shift_i - 1)) & 1
            exp = _DOUBLE_MAN_BITS  # no fraction bits remain
        for _ in range(exp_i):
            if not man_i & (1 << (_FTOA_MAN_BITS - 1)):
                man_i = ((man_i << 1) | carry) & _MAN_MASK
                carry = 0
            else:
                if dec >= CONVERSION_BUFFER_SIZE:
                    raise _Overflow
                buf[dec] = "0"
                dec += 1
                carry = int((man_i % 5) + carry > 2)
                man_i //= 5
    else:
        man_i = 0

    end = dec
    while True:
        if end >= CONVERSION_BUFFER_SIZE:
            raise _Overflow
        buf[end] = chr(ord("0") + man_i % 10)
        end += 1
        man_i //= 10
        if not man_i:
            break

    # Fraction part.
    dec_f = precision
    if exp < _DOUBLE_MAN_BITS:
        shift_f = -1 if exp < 0 else exp
        exp_f = exp - shift_f
        bin_f = (bin_ << ((_DOUBLE_BIN_BITS - _DOUBLE_MAN_BITS) + shift_f)) & _BIN_MASK
        man_f = (bin_f >> (_DOUBLE_BIN_BITS - _FTOA_MAN_BITS)) & _MAN_MASK
        carry = (bin_f >> (_DOUBLE_BIN_BITS - _FTOA_MAN_BITS - 1)) & 1

        digit = 0
        while dec_f and exp_f < 4:
            if man_f > _FRACTION_LIMIT or digit:
                carry = man_f & 1
                man_f >>= 1
            else:
                man_f = (man_f * 5) & _MAN_MASK
                if carry:
                    man_f = (man_f + 3) & _MAN_MASK
                    carry = 0
                if exp_f < 0:
                    dec_f -= 1
                    buf[dec_f] = "0"
                else:
                    digit += 1
            exp_f += 1
        man_f = (man_f + carry) & _MAN_MASK
        carry = int(exp_f >= 0)
        dec = 0
    else:
        man_f = 0

    if dec_f:
        top = _FTOA_MAN_BITS - 4
        while True:
            dec_f -= 1
            buf[dec_f] = chr(ord("0") + (man_f >> top))
            man_f &= ~(0xF << top) & _MAN_MASK
            if not dec_f:
                break
            man_f = (man_f * 10) & _MAN_MASK
        man_f = (man_f << 4) & _MAN_MASK
    if exp < _DOUBLE_MAN_BITS:
        carry &= man_f >> (_FTOA_MAN_BITS - 1)

    # Round.
    while carry:
        if dec >= CONVERSION_BUFFER_SIZE:
            raise _Overflow
        if dec >= end:
            buf[end] = "0"
            end += 1
        if buf[dec] != ".":
            carry = int(buf[dec] == "9")
            buf[dec] = "0" if carry else chr(ord(buf[dec]) + 1)
        dec += 1

    return "".join(buf[:end])