"""String building: bounded copies, joins, slices, trimming, mapping and splitting.

Input strings are read up to their first NUL character, as a C string would be.
Functions that build a new string return it. Bounded copies also return the
length the full result would have had, so a caller can tell whether it was
truncated.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _terminated(s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _separator(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text (at most size - 1 characters) and the length of src.
    """
    _non_negative("size", size)
    text = _terminated(src)
    if size == 0:
        return "", len(text)
    return text[: size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length it tried to create. When dst
    already fills the buffer, dst is returned unchanged with size + len(src).
    """
    _non_negative("size", size)
    head = _terminated(dst)
    tail = _terminated(src)
    if size == 0 or len(head) >= size:
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def strdup(s: str) -> str:
    """Return a copy of s up to its terminator."""
    return _terminated(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at start."""
    _non_negative("start", start)
    _non_negative("length", length)
    text = _terminated(s)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return _terminated(s1) + _terminated(s2)


def strtrim(s: str, chars: Optional[str]) -> str:
    """Remove every character found in chars from both ends of s."""
    text = _terminated(s)
    if not text:
        return ""
    if chars is None:
        return text
    charset = _terminated(chars)
    if not charset:
        return text
    return text.strip(charset)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, character) for each character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(_terminated(s)))


def striteri(
    chars: MutableSequence, f: Callable[[int, CharLike], Optional[CharLike]]
) -> None:
    """Call f(index, element) on each element up to a NUL, in place.

    A value returned by f replaces the element; None leaves it as it was.
    """
    for index, value in enumerate(chars):
        if value == _NUL or value == 0:
            break
        result = f(index, value)
        if result is not None:
            chars[index] = result


def split(s: str, sep: CharLike) -> List[str]:
    """Split s on sep, dropping empty fields."""
    text = _terminated(s)
    delimiter = _separator(sep)
    return [word for word in text.split(delimiter) if word]