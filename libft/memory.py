"""Byte-buffer operations: fill, copy, search, compare and allocate."""

from __future__ import annotations

import sys
from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]


def _check_length(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"length {n} exceeds a buffer of {len(buffer)} bytes")


def memset(buffer: MutableBuffer, c: int, n: int) -> MutableBuffer:
    """Set the first ``n`` bytes of ``buffer`` to ``c`` (taken modulo 256)."""
    _check_length(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def bzero(buffer: MutableBuffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def memcpy(dest: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: MutableBuffer, dest: int, src: int, n: int) -> MutableBuffer:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were first
    copied aside.
    """
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for offset in (dest, src):
        if offset < 0 or offset + n > len(buffer):
            raise ValueError(
                f"region at {offset} of {n} bytes lies outside a buffer of {len(buffer)} bytes"
            )
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: Buffer, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first differing pair, or 0.
    """
    if n == 0:
        return 0
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb`` elements of ``size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    total = nmemb * size
    if total > sys.maxsize:
        raise OverflowError(f"cannot allocate {nmemb} elements of {size} bytes")
    return bytearray(total)