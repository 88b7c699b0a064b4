import pytest

from shadowfs.formatter import snprintf, vformat


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", [42]),
        ("%i", [-42]),
        ("%5d", [42]),
        ("%-5d|", [42]),
        ("%05d", [-42]),
        ("%-05d|", [42]),
        ("%+d", [5]),
        ("% d", [5]),
        ("%+ d", [5]),
        ("%.3d", [42]),
        ("%x", [255]),
        ("%X", [255]),
        ("%#x", [255]),
        ("%#X", [42]),
        ("%#08x", [42]),
        ("%o", [8]),
        ("%u", [7]),
        ("%s", ["hello"]),
        ("%10s|", ["hi"]),
        ("%-10s|", ["hi"]),
        ("%.2s", ["hello"]),
        ("%05s", ["hi"]),
        ("%c", ["A"]),
        ("%c", [65]),
        ("%5c", ["A"]),
        ("%%", []),
        ("a=%d b=%s c=%x", [1, "two", 3]),
        ("%ld", [2**40]),
        ("%*d", [5, 42]),
        ("%.*s", [2, "hello"]),
    ],
)
def test_integer_and_text_match_python_percent(fmt, args):
    assert vformat(fmt, args) == fmt % tuple(args)


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%f", [1.5]),
        ("%.3f", [0.25]),
        ("%.1f", [100.0]),
        ("%.2f", [-2.75]),
        ("%8.2f", [3.5]),
        ("%08.2f", [-1.5]),
        ("%+.1f", [2.0]),
        ("%.0f", [3.0]),
        ("%#.0f", [3.0]),
        ("%f", [float("inf")]),
        ("%f", [float("-inf")]),
        ("%F", [float("inf")]),
        ("%f", [float("nan")]),
    ],
)
def test_floats_match_python_percent(fmt, args):
    assert vformat(fmt, args) == fmt % tuple(args)


def test_negative_star_width_left_justifies():
    assert vformat("%*d|", [-5, 42]) == "%-5d|" % 42


def test_unsigned_wraps_to_c_width():
    assert vformat("%u", [-1]) == str(2**32 - 1)
    assert vformat("%lu", [-1]) == str(2**64 - 1)
    assert vformat("%x", [-1]) == format(2**32 - 1, "x")


def test_short_and_char_modifiers_narrow():
    assert vformat("%hhd", [200]) == str(200 - 256)
    assert vformat("%hu", [70000]) == str(70000 - 65536)
    assert vformat("%hd", [40000]) == str(40000 - 65536)


def test_pointer_is_hex_with_prefix():
    assert vformat("%p", [255]) == "0x" + format(255, "x")


def test_zero_with_zero_precision_prints_nothing():
    assert vformat("%.0d", [0]) == ""
    assert vformat("%5.0d", [0]) == " " * 5


def test_alternate_octal_zero_with_zero_precision():
    assert vformat("%#.0o", [0]) == "0"


def test_precision_too_large_for_float_reports_error():
    assert vformat("%.30f", [1.0]) == "err"


def test_unknown_conversion_is_copied():
    assert vformat("%y", []) == "%y"
    assert vformat("100%", []) == "100%"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        vformat("%d %d", [1])


def test_string_conversion_rejects_numbers():
    with pytest.raises(TypeError):
        vformat("%s", [5])


def test_snprintf_truncates_and_reports_full_length():
    text, length = snprintf(4, "%s", "abcdef")
    assert text == "abcdef"[:3]
    assert length == len("abcdef")


def test_snprintf_fits():
    text, length = snprintf(64, "%d-%s", 7, "x")
    assert text == "%d-%s" % (7, "x")
    assert length == len(text)


def test_snprintf_zero_size():
    text, length = snprintf(0, "%s", "abc")
    assert text == ""
    assert length == len("abc")


def test_snprintf_negative_size():
    with pytest.raises(ValueError):
        snprintf(-1, "%d", 1)