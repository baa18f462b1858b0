import io

import pytest

from sigtalk.cformat import format_string, printf


def test_plain_text_passes_through():
    assert format_string("hello world") == "hello world"


def test_percent_literal():
    assert format_string("100%%") == "100%"


def test_char_from_int_and_str():
    assert format_string("%c", ord("Z")) == "Z"
    assert format_string("%c%c", "a", "b") == "ab"


def test_char_keeps_low_byte():
    assert format_string("%c", ord("Q") + 256) == "Q"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_string("%c", "ab")


def test_string_and_null():
    assert format_string("[%s]", "text") == "[text]"
    assert format_string("%s", None) == "(null)"


def test_string_rejects_non_str():
    with pytest.raises(TypeError):
        format_string("%s", 5)


@pytest.mark.parametrize("n", [0, 1, -1, 42, -987654, 2147483647, -2147483648])
def test_decimal_round_trip(n):
    assert int(format_string("%d", n)) == n
    assert format_string("%i", n) == format_string("%d", n)


def test_decimal_minimum():
    assert format_string("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert format_string("%d", 2147483648) == "-2147483648"


def test_unsigned_of_minus_one():
    assert format_string("%u", -1) == "4294967295"


@pytest.mark.parametrize("n", [0, 7, 255, 4096, 3735928559, 4294967295])
def test_hex_round_trip(n):
    lower = format_string("%x", n)
    upper = format_string("%X", n)
    assert int(lower, 16) == n
    assert int(upper, 16) == n
    assert lower == lower.lower()
    assert upper == upper.upper()
    assert upper.lower() == lower


def test_hex_zero():
    assert format_string("%x", 0) == "0"


def test_hex_of_negative_wraps_to_unsigned():
    assert int(format_string("%x", -1), 16) == int(format_string("%u", -1))


def test_pointer_null_and_zero():
    assert format_string("%p", None) == "0x0"
    assert format_string("%p", 0) == "0x0"


@pytest.mark.parametrize("address", [1, 0xDEAD, 0x7FFF0000ABCD])
def test_pointer_round_trip(address):
    text = format_string("%p", address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address


def test_integer_conversions_reject_non_int():
    for conversion in "diuxX":
        with pytest.raises(TypeError):
            format_string("%" + conversion, "12")
    with pytest.raises(TypeError):
        format_string("%d", True)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d and %d", 1)


def test_extra_arguments_ignored():
    assert format_string("%s", "a", "b") == "a"


def test_unknown_conversion_dropped_without_consuming():
    assert format_string("a%qb%s", "c") == "abc"


def test_trailing_percent_dropped():
    assert format_string("abc%") == "abc"


def test_mixed_format():
    result = format_string("%s=%d (%c)", "x", 5, "y")
    assert result == "x=5 (y)"


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s:%u%%", "n", 12, file=out)
    assert out.getvalue() == format_string("%s:%u%%", "n", 12)
    assert count == len(out.getvalue())


def test_printf_null_string_count():
    out = io.StringIO()
    assert printf("%s", None, file=out) == len("(null)")
    assert out.getvalue() == "(null)"


def test_printf_defaults_to_stdout(capsys):
    count = printf("pid %d\n", 1234)
    captured = capsys.readouterr()
    assert captured.out == "pid 1234\n"
    assert count == len(captured.out)