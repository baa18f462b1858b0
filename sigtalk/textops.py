"""Searching, slicing, comparing and bounded copying of text and bytes.

Searches return an index into the given string, or None when nothing is
found. Bounded copies return the resulting text together with the length the
operation tried to create, so a caller can tell when the result was cut short.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _as_char(c: CharLike) -> str:
    """Return *c* as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _as_byte(c: CharLike) -> int:
    """Return *c* as a byte value, keeping only its low eight bits."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c) & 0xFF
    if isinstance(c, int) and not isinstance(c, bool):
        return c & 0xFF
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_count(n: int, *buffers: bytes) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"count {n} exceeds buffer of length {len(buffer)}")


def split(s: str, sep: CharLike) -> list[str]:
    """Split *s* on the character *sep*, dropping empty pieces."""
    return [word for word in s.split(_as_char(sep)) if word]


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character of *s* found in *charset*."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* beginning at *start*.

    A start at or past the end of *s* gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find *needle* wholly inside the first *length* characters of *haystack*.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most *n* characters of *a* and *b*.

    The result is zero when they agree, otherwise the difference of the code
    points at the first place they differ, a shorter string counting as NUL.
    """
    if n <= 0:
        return 0
    for ca, cb in zip_longest(a[:n], b[:n], fillvalue=_NUL):
        if ca != cb:
            return ord(ca) - ord(cb)
    return 0


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first *c* in *s*; NUL matches the end of the string."""
    ch = _as_char(c)
    if ch == _NUL:
        index = s.find(ch)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last *c* in *s*; NUL matches the end of the string."""
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first *n* bytes of *a* and *b*.

    Returns zero when they agree, otherwise the difference of the first
    differing bytes.
    """
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memchr(data: bytes, c: CharLike, n: int) -> Optional[int]:
    """Index of the first byte equal to *c* among the first *n* of *data*."""
    _check_count(n, data)
    index = bytes(data[:n]).find(_as_byte(c))
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy *src* into a buffer of *size* characters, terminator included.

    Returns the copied text and the length of *src*. With a size of zero
    nothing is copied.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* characters.

    Returns the resulting text and the length the full concatenation would
    have had. When *dst* already fills the buffer it is returned unchanged
    and the reported length is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` for each character of *s*."""
    return "".join(func(index, ch) for index, ch in enumerate(s))