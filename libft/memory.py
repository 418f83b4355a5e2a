"""Byte-buffer primitives working on mutable buffers such as bytearray."""

from __future__ import annotations

from typing import Optional, Union

Readable = Union[bytes, bytearray, memoryview]
Writable = Union[bytearray, memoryview]


def _check_count(n: int, *buffers: Readable) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: Writable, c: int, n: int) -> Writable:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Writable, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: Readable, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c in buf[:n], or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Readable, b: Readable, n: int) -> int:
    """Compare the first n bytes; return the difference at the first mismatch."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: Writable, src: Readable, n: int) -> Writable:
    """Copy n bytes from src into the start of dest and return dest."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest: Writable, src: Readable, n: int) -> Writable:
    """Copy n bytes from src into dest, correct even when the two overlap."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest