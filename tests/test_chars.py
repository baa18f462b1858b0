import string

import pytest

from sigtalk.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

CODES = range(-5, 300)


def test_is_alpha_matches_ascii_letters():
    for code in CODES:
        expected = 0 <= code < 128 and chr(code) in string.ascii_letters
        assert is_alpha(code) is expected


def test_is_digit_matches_ascii_digits():
    for code in CODES:
        expected = 0 <= code < 128 and chr(code) in string.digits
        assert is_digit(code) is expected


def test_is_alnum_is_alpha_or_digit():
    for code in CODES:
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_matches_visible_characters_and_space():
    for code in CODES:
        expected = 0 <= code < 128 and (
            chr(code) == " "
            or (chr(code) in string.printable and not chr(code).isspace())
        )
        assert is_print(code) is expected


def test_string_arguments_are_accepted():
    assert is_alpha("q") is True
    assert is_digit("7") is True
    assert is_alnum("_") is False
    assert is_print("~") is True


@pytest.mark.parametrize("lower, upper", zip(string.ascii_lowercase, string.ascii_uppercase))
def test_case_conversion_of_letters(lower, upper):
    assert to_upper(lower) == upper
    assert to_lower(upper) == lower
    assert to_upper(ord(lower)) == ord(upper)
    assert to_lower(ord(upper)) == ord(lower)


def test_case_conversion_leaves_other_characters_alone():
    for ch in string.digits + string.punctuation + " \t":
        assert to_lower(ch) == ch
        assert to_upper(ch) == ch
    for code in (0, 200, 255, -3):
        assert to_lower(code) == code
        assert to_upper(code) == code


def test_case_round_trip():
    for ch in string.ascii_letters:
        assert to_lower(to_upper(ch)) == ch.lower()
        assert to_upper(to_lower(ch)) == ch.upper()


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_lower("")


def test_wrong_type_is_rejected():
    with pytest.raises(TypeError):
        is_digit(3.5)