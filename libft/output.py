"""Writing characters, strings and numbers to text streams, and a small printf.

Every writer takes an optional stream, which defaults to standard output at
call time. Each returns the number of characters it wrote.
"""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO, Union

CharLike = Union[int, str]

INT_MIN = -2147483648
INT_MAX = 2147483647

_NULL_TEXT = "(null)"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_DECIMAL = "0123456789"
_CONVERSIONS = frozenset("dixuXcsp%")


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


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


def _int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _to_int32(value: object) -> int:
    wrapped = _int(value) & 0xFFFFFFFF
    return wrapped - 0x100000000 if wrapped > INT_MAX else wrapped


def _to_uint32(value: object) -> int:
    return _int(value) & 0xFFFFFFFF


def _in_base(num: int, base: str) -> str:
    if len(base) < 2:
        raise ValueError(f"a base needs at least two digits, got {base!r}")
    if num < 0:
        raise ValueError(f"number must not be negative, got {num}")
    radix = len(base)
    digits = [base[num % radix]]
    num //= radix
    while num:
        digits.append(base[num % radix])
        num //= radix
    return "".join(reversed(digits))


def putchar(c: CharLike, stream: Optional[TextIO] = None) -> int:
    """Write one character."""
    _target(stream).write(_char(c))
    return 1


def putstr(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write s; None is written as "(null)"."""
    text = _NULL_TEXT if s is None else s
    _target(stream).write(text)
    return len(text)


def putendl(s: str, stream: Optional[TextIO] = None) -> int:
    """Write s followed by a newline."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    _target(stream).write(s + "\n")
    return len(s) + 1


def putnbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write a 32-bit signed integer in decimal."""
    value = _int(n)
    if not INT_MIN <= value <= INT_MAX:
        raise OverflowError(f"{value} does not fit in a 32-bit signed integer")
    text = str(value)
    _target(stream).write(text)
    return len(text)


def put_base(num: int, base: str, stream: Optional[TextIO] = None) -> int:
    """Write a non-negative number using the characters of base as digits."""
    text = _in_base(_int(num), base)
    _target(stream).write(text)
    return len(text)


def _render(spec: str, args: Iterator[object]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        if value is None:
            return _NULL_TEXT
        if not isinstance(value, str):
            raise TypeError(f"%s expects a str, got {type(value).__name__}")
        return value
    if spec in "di":
        return str(_to_int32(value))
    if spec == "p":
        address = 0 if value is None else _int(value) & 0xFFFFFFFFFFFFFFFF
        return "0x" + _in_base(address, _HEX_LOWER)
    if spec == "x":
        return _in_base(_to_uint32(value), _HEX_LOWER)
    if spec == "X":
        return _in_base(_to_uint32(value), _HEX_UPPER)
    return _in_base(_to_uint32(value), _DECIMAL)


def sprintf(fmt: str, *args: object) -> str:
    """Format args by the conversions %c %s %d %i %u %x %X %p and %%.

    A '%' followed by any other character is dropped together with it.
    """
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is not None and spec in _CONVERSIONS:
            pieces.append(_render(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: object, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text and return the number of characters written."""
    text = sprintf(fmt, *args)
    _target(stream).write(text)
    return len(text)