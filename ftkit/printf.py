"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, TextIO, Union

from ftkit.numbers import itoa, utoa, wrap_int32, wrap_uint32

_NUL = "\0"
_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_POINTER_MASK = 2**64 - 1


def _until_nul(s: str) -> str:
    return s.split(_NUL, 1)[0]


def _hex_digits(value: int, digits: str) -> str:
    out = []
    while True:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
        if value == 0:
            break
    return "".join(reversed(out))


def format_char(c: Union[str, int]) -> str:
    """The character ``c``; an integer code is reduced to its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def format_str(s: Optional[str]) -> str:
    """``s`` up to any NUL, or "(null)" for None."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"expected a string or None, got {type(s).__name__}")
    return _until_nul(s)


def format_ptr(address: Optional[int]) -> str:
    """An address as 0x-prefixed lower-case hex, or "(nil)" for a null address."""
    if address is None:
        return "(nil)"
    value = address & _POINTER_MASK
    if value == 0:
        return "(nil)"
    return "0x" + _hex_digits(value, _LOWER_HEX)


def format_decimal(n: int) -> str:
    """``n`` as a signed 32-bit decimal."""
    return itoa(wrap_int32(n))


def format_unsigned(n: int) -> str:
    """``n`` as an unsigned 32-bit decimal."""
    return utoa(wrap_uint32(n))


def format_hex(n: int, upper: bool = False) -> str:
    """``n`` as unsigned 32-bit hex, upper case when ``upper`` is true."""
    return _hex_digits(wrap_uint32(n), _UPPER_HEX if upper else _LOWER_HEX)


def format_percent() -> str:
    """A literal percent sign."""
    return "%"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_str,
    "p": format_ptr,
    "d": format_decimal,
    "i": format_decimal,
    "u": format_unsigned,
    "x": lambda n: format_hex(n, False),
    "X": lambda n: format_hex(n, True),
}


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    The format ends at the first NUL. Unknown conversions produce nothing
    and consume no argument; a lone trailing "%" is copied as is.
    Surplus arguments are ignored.
    """
    remaining = iter(args)
    chars = iter(_until_nul(fmt))
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append(ch)
        elif spec == "%":
            pieces.append(format_percent())
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_next_arg(remaining)))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default); return its length."""
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)