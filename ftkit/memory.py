"""Byte-buffer operations over mutable buffers such as bytearray.

Counts are checked: a negative count raises ValueError, and a count that
runs past the end of a buffer raises IndexError.
"""

from __future__ import annotations

from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_count(count: int, *buffers: ReadableBuffer) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise IndexError(
                f"count {count} exceeds buffer length {len(buffer)}"
            )


def memset(buffer: WritableBuffer, value: int, count: int) -> WritableBuffer:
    """Fill the first ``count`` bytes with ``value`` truncated to a byte."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: WritableBuffer, count: int) -> None:
    """Zero the first ``count`` bytes."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer holding ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buffer: ReadableBuffer, byte: int, count: int) -> Optional[int]:
    """Index of the first occurrence of ``byte`` within ``count`` bytes, or None."""
    _check_count(count, buffer)
    target = byte & 0xFF
    return next(
        (pos for pos, value in enumerate(bytes(buffer[:count])) if value == target),
        None,
    )


def memcmp(a: ReadableBuffer, b: ReadableBuffer, count: int) -> int:
    """Difference of the first unequal bytes within ``count``, or 0."""
    _check_count(count, a, b)
    for x, y in zip(bytes(a[:count]), bytes(b[:count])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: WritableBuffer, src: ReadableBuffer, count: int) -> WritableBuffer:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``."""
    _check_count(count, dest, src)
    dest[:count] = src[:count]
    return dest


def memmove(dest: WritableBuffer, src: ReadableBuffer, count: int) -> WritableBuffer:
    """Copy ``count`` bytes, correct even when ``dest`` and ``src`` overlap."""
    _check_count(count, dest, src)
    if count:
        dest[:count] = bytes(src[:count])
    return dest