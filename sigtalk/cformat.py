"""A small printf-style formatter for the conversions c, s, d, i, u, x, X, p and %.

Integers are taken as C would see them: ``%d`` and ``%i`` wrap to a 32-bit
signed value, ``%u``, ``%x`` and ``%X`` to a 32-bit unsigned value, and
``%c`` keeps only the low eight bits of an integer. An unknown conversion
letter is dropped together with its ``%``, and so is a lone ``%`` at the end
of the format. Arguments left over after the format is used up are ignored.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_UINT32 = 1 << 32
_UINT64 = 1 << 64
_INT32_SIGN = 1 << 31


def _integer(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"%{conversion} expects an int, got {type(value).__name__}"
        )
    return value


def _signed32(value: int) -> int:
    value %= _UINT32
    return value - _UINT32 if value >= _INT32_SIGN else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_integer(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int) and not isinstance(value, bool):
        address = value % _UINT64
    else:
        address = id(value) % _UINT64
    return f"0x{address:x}"


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "csdiuxXp":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None

    if conversion == "c":
        return _char(value)
    if conversion == "s":
        return _string(value)
    if conversion == "p":
        return _pointer(value)
    number = _integer(value, conversion)
    if conversion in "di":
        return str(_signed32(number))
    unsigned = number % _UINT32
    if conversion == "u":
        return str(unsigned)
    if conversion == "x":
        return f"{unsigned:x}"
    return f"{unsigned:X}"


def _pieces(fmt: str, args: Iterator[Any]) -> Iterator[str]:
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        conversion = next(chars, None)
        if conversion is None:
            return
        yield _convert(conversion, args)


def format_string(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by the formatted *args*."""
    return "".join(_pieces(fmt, iter(args)))


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to *file* (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)