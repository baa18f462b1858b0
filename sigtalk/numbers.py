"""Conversion between decimal text and 32-bit signed integers."""

from __future__ import annotations

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = frozenset("\t\n\v\f\r ")


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. Text with no digits yields 0. A value too
    large for a 32-bit int yields -1 when positive and 0 when negative.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]

    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
        if sign == -1 and result > -INT_MIN:
            return 0
        if sign == 1 and result > INT_MAX:
            return -1
    return result * sign


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)