"""Conversions, searches and comparisons on NUL-terminated text.

Strings are read up to their first NUL character, as a C string would be.
Search functions return indices into the given string, or None when nothing
is found.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[int, str]

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = frozenset("\t\n\v\f\r ")
_NUL = "\0"


def _terminated(s: str) -> str:
    """Return s cut at its first NUL character."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")


def atoi(s: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign."""
    text = _terminated(s)
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    for ch in text[pos:]:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first c in s; searching for NUL finds the terminator."""
    text = _terminated(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last c in s; searching for NUL finds the terminator."""
    text = _terminated(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def _compare(a: str, b: str, limit: Optional[int]) -> int:
    left = _terminated(a) + _NUL
    right = _terminated(b) + _NUL
    for count, (x, y) in enumerate(zip(left, right)):
        if limit is not None and count >= limit:
            return 0
        if x != y or x == _NUL:
            return ord(x) - ord(y)
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch."""
    _check_count(n)
    return _compare(s1, s2, n)


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the code difference at the first mismatch."""
    return _compare(s1, s2, None)


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of needle found wholly within the first n characters of haystack."""
    _check_count(n)
    target = _terminated(needle)
    if not target:
        return 0
    if n == 0:
        return None
    index = _terminated(haystack)[:n].find(target)
    return None if index < 0 else index