"""Conversions between decimal text and 32-bit integers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
UINT_MAX = 2**32 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer by two's-complement wrapping."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def wrap_uint32(value: int) -> int:
    """Reduce ``value`` to an unsigned 32-bit integer by wrapping."""
    return value % 2**32


def atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading whitespace is skipped and one optional sign is accepted.
    Parsing stops at the first non-digit; text without digits gives 0.
    The result wraps to a signed 32-bit integer.
    """
    rest = s.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Decimal text of a signed 32-bit integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def utoa(n: int) -> str:
    """Decimal text of an unsigned 32-bit integer."""
    if not 0 <= n <= UINT_MAX:
        raise OverflowError(f"{n} does not fit in an unsigned 32-bit integer")
    return str(n)