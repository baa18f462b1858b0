"""ASCII character classification and case conversion.

Every function accepts either an integer code point or a one-character
string. Classifiers return a bool; the case converters return a value of
the same kind as they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER_FIRST, _UPPER_LAST = ord("A"), ord("Z")
_LOWER_FIRST, _LOWER_LAST = ord("a"), ord("z")
_DIGIT_FIRST, _DIGIT_LAST = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_FIRST - _UPPER_FIRST


def _code(c: CharLike) -> int:
    """Return the code point of *c*, which is an int or a single character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _like(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _UPPER_FIRST <= code <= _UPPER_LAST or _LOWER_FIRST <= code <= _LOWER_LAST


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return _DIGIT_FIRST <= _code(c) <= _DIGIT_LAST


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code point in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if _UPPER_FIRST <= code <= _UPPER_LAST:
        return _like(c, code + _CASE_OFFSET)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if _LOWER_FIRST <= code <= _LOWER_LAST:
        return _like(c, code - _CASE_OFFSET)
    return c