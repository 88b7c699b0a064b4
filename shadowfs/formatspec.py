"""Parsing of printf-style conversion specifications."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class Option(enum.Enum):
    """How a field width or precision was given."""

    NONE = enum.auto()
    LITERAL = enum.auto()
    STAR = enum.auto()


class LengthModifier(enum.Enum):
    NONE = enum.auto()
    SHORT = enum.auto()  # h
    LONG_DOUBLE = enum.auto()  # L
    CHAR = enum.auto()  # hh
    LONG = enum.auto()  # l
    LONG_LONG = enum.auto()  # ll
    INTMAX = enum.auto()  # j
    SIZET = enum.auto()  # z
    PTRDIFFT = enum.auto()  # t


class Conversion(enum.Enum):
    PERCENT = enum.auto()  # %
    CHAR = enum.auto()  # c
    STRING = enum.auto()  # s
    SIGNED_INT = enum.auto()  # i, d
    OCTAL = enum.auto()  # o
    HEX_INT = enum.auto()  # x, X
    UNSIGNED_INT = enum.auto()  # u
    POINTER = enum.auto()  # p
    FLOAT_DEC = enum.auto()  # f, F
    FLOAT_SCI = enum.auto()  # e, E
    FLOAT_SHORTEST = enum.auto()  # g, G
    FLOAT_HEX = enum.auto()  # a, A


_INTEGER_CONVERSIONS = {
    "d": (Conversion.SIGNED_INT, False),
    "i": (Conversion.SIGNED_INT, False),
    "o": (Conversion.OCTAL, False),
    "u": (Conversion.UNSIGNED_INT, False),
    "x": (Conversion.HEX_INT, False),
    "X": (Conversion.HEX_INT, True),
}

_FLOAT_CONVERSIONS = {
    "f": Conversion.FLOAT_DEC,
    "e": Conversion.FLOAT_SCI,
    "g": Conversion.FLOAT_SHORTEST,
    "a": Conversion.FLOAT_HEX,
}

_SINGLE_LENGTH_MODIFIERS = {
    "L": LengthModifier.LONG_DOUBLE,
    "j": LengthModifier.INTMAX,
    "z": LengthModifier.SIZET,
    "t": LengthModifier.PTRDIFFT,
}

DEFAULT_FLOAT_PRECISION = 6


@dataclass
class FormatSpec:
    """One parsed conversion specification; ``length`` is the number of characters it spans."""

    conversion: Conversion
    length: int
    prepend: str = ""
    alt_form: bool = False
    field_width_opt: Option = Option.NONE
    field_width: int = 0
    left_justified: bool = False
    leading_zero_pad: bool = False
    prec_opt: Option = Option.NONE
    prec: int = 0
    length_modifier: LengthModifier = LengthModifier.NONE
    uppercase: bool = False


class _Cursor:
    def __init__(self, text: str, pos: int) -> None:
        self.text = text
        self.pos = pos

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def take(self) -> str:
        ch = self.peek()
        if ch:
            self.pos += 1
        return ch

    def digits(self) -> Optional[int]:
        start = self.pos
        while self.peek().isdigit() and self.peek() in "0123456789":
            self.pos += 1
        if self.pos == start:
            return None
        return int(self.text[start:self.pos])


def parse_format_spec(fmt: str, pos: int = 0) -> Optional[FormatSpec]:
    """Parse the specification starting at the ``%`` at ``fmt[pos]``.

    Returns ``None`` when the text is not a complete, known specification, in
    which case the ``%`` is meant to be printed literally.
    """
    if not fmt.startswith("%", pos):
        raise ValueError(f"no '%' at position {pos}")

    cur = _Cursor(fmt, pos + 1)
    left_justified = False
    leading_zero_pad = False
    prepend = ""
    alt_form = False

    while True:
        ch = cur.peek()
        if ch == "-":
            left_justified = True
            leading_zero_pad = False
        elif ch == "0":
            leading_zero_pad = not left_justified
        elif ch == "+":
            prepend = "+"
        elif ch == " ":
            if not prepend:
                prepend = " "
        elif ch == "#":
            alt_form = True
        else:
            break
        cur.pos += 1

    field_width_opt = Option.NONE
    field_width = 0
    if cur.peek() == "*":
        field_width_opt = Option.STAR
        cur.pos += 1
    else:
        width = cur.digits()
        if width is not None:
            field_width_opt = Option.LITERAL
            field_width = width

    prec_opt = Option.NONE
    prec = 0
    if cur.peek() == ".":
        cur.pos += 1
        if cur.peek() == "*":
            prec_opt = Option.STAR
            cur.pos += 1
        else:
            if cur.peek() == "-":
                cur.pos += 1
                prec_opt = Option.NONE
            else:
                prec_opt = Option.LITERAL
            value = cur.digits()
            if value is not None:
                prec = value

    length_modifier = LengthModifier.NONE
    ch = cur.peek()
    if ch == "h":
        cur.pos += 1
        length_modifier = LengthModifier.SHORT
        if cur.peek() == "h":
            cur.pos += 1
            length_modifier = LengthModifier.CHAR
    elif ch == "l":
        cur.pos += 1
        length_modifier = LengthModifier.LONG
        if cur.peek() == "l":
            cur.pos += 1
            length_modifier = LengthModifier.LONG_LONG
    elif ch in _SINGLE_LENGTH_MODIFIERS and ch:
        cur.pos += 1
        length_modifier = _SINGLE_LENGTH_MODIFIERS[ch]

    uppercase = False
    ch = cur.take()
    if ch == "%":
        conversion = Conversion.PERCENT
        prec_opt = Option.NONE
    elif ch == "c":
        conversion = Conversion.CHAR
        prec_opt = Option.NONE
    elif ch == "s":
        conversion = Conversion.STRING
        leading_zero_pad = False
    elif ch and ch in _INTEGER_CONVERSIONS:
        conversion, uppercase = _INTEGER_CONVERSIONS[ch]
        if prec_opt is not Option.NONE:
            leading_zero_pad = False
    elif ch and ch.lower() in _FLOAT_CONVERSIONS:
        conversion = _FLOAT_CONVERSIONS[ch.lower()]
        uppercase = ch.isupper()
        if prec_opt is Option.NONE:
            prec = DEFAULT_FLOAT_PRECISION
    elif ch == "p":
        conversion = Conversion.POINTER
        prec_opt = Option.NONE
    else:
        return None

    return FormatSpec(
        conversion=conversion,
        length=cur.pos - pos,
        prepend=prepend,
        alt_form=alt_form,
        field_width_opt=field_width_opt,
        field_width=field_width,
        left_justified=left_justified,
        leading_zero_pad=leading_zero_pad,
        prec_opt=prec_opt,
        prec=prec,
        length_modifier=length_modifier,
        uppercase=uppercase,
    )