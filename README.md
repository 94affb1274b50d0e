# ftkit

A small library of C-style helpers for Python code: ASCII character
classification, byte-buffer operations, bounded string copying and searching,
32-bit integer text conversion, and a minimal `printf` that understands the
`%c %s %p %d %i %u %x %X %%` conversions.

## Installation

From the project directory:

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
python -m pytest
```

## Modules

### `ftkit.chars`

`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`.
Each takes a one-character string or an integer character code. The
classifiers return a `bool`; `toupper` and `tolower` return a value of the same
kind they were given and change only ASCII letters. A string longer than one
character raises `ValueError`; anything else that is not a string or an int
raises `TypeError`.

### `ftkit.memory`

`memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`, working
on `bytes`, `bytearray` and `memoryview` objects (writes need a mutable
buffer). `calloc(count, size)` returns a zeroed `bytearray`. `memchr` returns an
index or `None`; `memcmp` returns the difference of the first unequal bytes, or
0. A negative count raises `ValueError`; a count past the end of a buffer
raises `IndexError`.

### `ftkit.strings`

`strlen`, `strchr`, `strrchr`, `strnstr`, `strncmp`, `strdup`, `strlcpy`,
`strlcat`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`.

- Searches return an index into the string, or `None` when nothing is found.
  Searching for `"\0"` with `strchr`/`strrchr` gives the string's length; an
  empty needle in `strnstr` matches at 0.
- `strlcpy(dest, src, size)` and `strlcat(dest, src, size)` return a tuple of
  the new destination contents and the length a complete result would need.
- `split(s, sep)` returns the non-empty pieces between separators.
- `strmapi(s, func)` builds a new string from `func(index, char)`;
  `striteri(buffer, func)` calls `func(index, item)` over a mutable sequence,
  writes back any non-`None` result, and stops at the first NUL item.

### `ftkit.numbers`

- `atoi(s)` skips leading whitespace, accepts one sign, stops at the first
  non-digit, and wraps the result to a signed 32-bit integer.
- `itoa(n)` and `utoa(n)` give decimal text for signed and unsigned 32-bit
  values and raise `OverflowError` outside that range.
- `wrap_int32` and `wrap_uint32` reduce an integer by two's-complement
  wrapping; `INT_MIN`, `INT_MAX` and `UINT_MAX` are the bounds.

### `ftkit.output`

`put_char`, `put_str`, `put_endl`, `put_nbr` write to a text stream given as
`stream`, standard output by default. `put_str` and `put_endl` write nothing
for `None`.

### `ftkit.printf`

`sprintf(fmt, *args)` returns the formatted text; `printf(fmt, *args,
stream=None)` writes it and returns its length. The helpers for each
conversion are `format_char`, `format_str`, `format_ptr`, `format_decimal`,
`format_unsigned`, `format_hex` and `format_percent`.

- `%d`/`%i` wrap to signed 32-bit, `%u`/`%x`/`%X` to unsigned 32-bit.
- `%s` with `None` gives `(null)`; `%p` with 0 or `None` gives `(nil)`,
  otherwise `0x` and lower-case hex.
- The format ends at the first NUL. Unknown conversions produce nothing and
  consume no argument; a lone trailing `%` is copied. Too few arguments raise
  `TypeError`; surplus arguments are ignored.

## Examples

```python
from ftkit.printf import sprintf
from ftkit.strings import split, strtrim, strlcpy
from ftkit.numbers import atoi, itoa

sprintf("%s has %d items (%x)", "cart", 42, 255)   # 'cart has 42 items (ff)'
sprintf("%u", -1)                                   # '4294967295'
sprintf("%p", 0)                                    # '(nil)'

split("  a  b c ", " ")                             # ['a', 'b', 'c']
strtrim("xxhixx", "x")                              # 'hi'
strlcpy("", "hello", 3)                             # ('he', 5)
atoi("   -123abc")                                  # -123
itoa(-2147483648)                                   # '-2147483648'
```

```python
import io
from ftkit.printf import printf

buf = io.StringIO()
count = printf("%c%c\n", "o", "k", stream=buf)      # count == 3, buf holds 'ok\n'
```

## What it does not do

- There is no command-line tool; everything is used from Python.
- `printf` has no flags, field widths, precision or length modifiers, and no
  floating-point conversions.