"""Byte-buffer helpers: fill, allocate, search, compare and copy."""

from __future__ import annotations

import sys
from typing import Optional

SIZE_MAX = sys.maxsize * 2 + 1


def _check_length(n: int, *buffers: object) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):  # type: ignore[arg-type]
            raise ValueError(f"length {n} exceeds buffer of size {len(buffer)}")  # type: ignore[arg-type]


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``c`` (taken modulo 256)."""
    _check_length(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def zero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the total size does not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the maximum size")
    return bytearray(count * size)


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` in ``data[:n]``, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray | memoryview, second: bytes | bytearray | memoryview, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_length(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memmove(dest: bytearray, src: bytes | bytearray | memoryview, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` into the start of ``dest``; overlap is safe."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memcpy(dest: bytearray, src: bytes | bytearray | memoryview, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` into the start of ``dest``."""
    return memmove(dest, src, n)