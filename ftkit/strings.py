"""String searching, comparison, copying and building.

Searches return an index into the string rather than a pointer, or None
when nothing is found. Bounded copies take the current contents of the
destination and return the new contents together with the length the
caller would need for a complete result.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Any, Optional, Tuple, Union

CharLike = Union[str, int]

_NUL = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c)


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; a NUL matches the end of the string."""
    target = _char(c)
    if target == _NUL:
        return len(s)
    pos = s.find(target)
    return None if pos < 0 else pos


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; a NUL matches the end of the string."""
    target = _char(c)
    if target == _NUL:
        return len(s)
    pos = s.rfind(target)
    return None if pos < 0 else pos


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle matches at index 0.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    pos = haystack[:length].find(needle)
    return None if pos < 0 else pos


def strncmp(a: str, b: str, limit: int) -> int:
    """Compare at most ``limit`` characters; return the code difference or 0.

    A string that ends early compares as if followed by NUL.
    """
    _non_negative("limit", limit)
    for x, y in zip_longest(a[:limit], b[:limit], fillvalue=_NUL):
        if x != y:
            return ord(x) - ord(y)
        if x == _NUL:
            break
    return 0


def strdup(s: str) -> str:
    """A copy of ``s`` (strings are immutable, so the value itself)."""
    return str(s)


def strlcpy(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the new destination contents and ``len(src)``. With a size
    of 0 the destination is left as it was.
    """
    _non_negative("size", size)
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the new destination contents and the length the full
    concatenation would need. When ``dest`` already fills the buffer it
    is left unchanged and the result length is ``size + len(src)``.
    """
    _non_negative("size", size)
    dest_len = min(len(dest), size)
    if dest_len == size:
        return dest, size + len(src)
    room = size - dest_len - 1
    return dest + src[:room], dest_len + len(src)


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` beginning at ``start``."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(a: str, b: str) -> str:
    """``a`` followed by ``b``."""
    return a + b


def strtrim(s: str, charset: str) -> str:
    """``s`` with every leading and trailing character found in ``charset`` removed."""
    return s.strip(charset) if charset else s


def split(s: str, sep: CharLike) -> list[str]:
    """The non-empty pieces of ``s`` between occurrences of ``sep``."""
    separator = _char(sep)
    return [word for word in s.split(separator) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string built from ``func(index, char)`` for each character."""
    return "".join(func(pos, ch) for pos, ch in enumerate(s))


def striteri(buffer: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` over ``buffer``, writing back non-None results.

    Iteration stops at the first NUL item ("\\0" or 0), which ends the string.
    """
    for pos, item in enumerate(list(buffer)):
        if item == _NUL or item == 0:
            break
        result = func(pos, item)
        if result is not None:
            buffer[pos] = result