import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.chars import toupper
from ftkit.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

text = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=126), max_size=30)
char = st.characters(min_codepoint=1, max_codepoint=126)


def test_strlen_empty():
    assert strlen("") == 0


@given(text, text)
def test_strlen_additive(a, b):
    assert strlen(a + b) == strlen(a) + strlen(b)


@given(text, char)
def test_strchr_finds_first(s, c):
    pos = strchr(s, c)
    if c in s:
        assert s[pos] == c
        assert c not in s[:pos]
    else:
        assert pos is None


@given(text, char)
def test_strrchr_finds_last(s, c):
    pos = strrchr(s, c)
    if c in s:
        assert s[pos] == c
        assert c not in s[pos + 1 :]
    else:
        assert pos is None


def test_strchr_nul_matches_end():
    assert strchr("hello", "\0") == len("hello")
    assert strrchr("hello", 0) == len("hello")


def test_strchr_accepts_int_code():
    assert strchr("hello", ord("e")) == strchr("hello", "e")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("hello", "he")


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_respects_length():
    assert strnstr("abcdef", "def", 5) is None
    assert strnstr("abcdef", "def", len("abcdef")) == len("abc")


@given(text, text, st.integers(min_value=0, max_value=40))
def test_strnstr_match_within_bound(hay, needle, length):
    pos = strnstr(hay, needle, length)
    if pos is not None:
        assert hay[pos : pos + len(needle)] == needle
        assert not needle or pos + len(needle) <= length


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strncmp_basic():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("a", "", 1) == ord("a")


@given(text, st.integers(min_value=0, max_value=40))
def test_strncmp_self_is_zero(s, limit):
    assert strncmp(s, s, limit) == 0


@given(text, text, st.integers(min_value=0, max_value=40))
def test_strncmp_antisymmetric(a, b, limit):
    assert strncmp(a, b, limit) == -strncmp(b, a, limit)


@given(text)
def test_strdup_equal(s):
    assert strdup(s) == s


def test_strlcpy_truncates():
    src = "hello"
    assert strlcpy("xyz", src, 4) == (src[:3], len(src))


def test_strlcpy_zero_size_keeps_dest():
    assert strlcpy("xyz", "hello", 0) == ("xyz", len("hello"))


@given(text, text, st.integers(min_value=1, max_value=40))
def test_strlcpy_fits_buffer(dest, src, size):
    copied, total = strlcpy(dest, src, size)
    assert total == len(src)
    assert len(copied) <= size - 1
    assert src.startswith(copied)


def test_strlcat_full_append():
    assert strlcat("ab", "cd", 10) == ("ab" + "cd", len("abcd"))


def test_strlcat_dest_fills_buffer():
    assert strlcat("abcd", "xyz", 3) == ("abcd", 3 + len("xyz"))


def test_strlcat_truncates():
    result, total = strlcat("ab", "cdef", 5)
    assert result == "ab" + "cdef"[:2]
    assert total == len("ab") + len("cdef")


@given(text, text, st.integers(min_value=0, max_value=60))
def test_strlcat_bounds(dest, src, size):
    result, total = strlcat(dest, src, size)
    assert result.startswith(dest)
    if len(dest) < size:
        assert len(result) <= size - 1
        assert total == len(dest) + len(src)


def test_substr_start_past_end():
    assert substr("abc", 10, 2) == ""


@given(text, st.integers(min_value=0, max_value=40), st.integers(min_value=0, max_value=40))
def test_substr_is_contiguous_piece(s, start, length):
    piece = substr(s, start, length)
    assert len(piece) <= length
    if start < len(s):
        assert s.startswith(piece, start)


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xyxy", "xy") == ""


def test_strtrim_empty_set():
    assert strtrim("  a  ", "") == "  a  "


@given(text, text)
def test_strtrim_edges_clean(s, charset):
    result = strtrim(s, charset)
    assert result in s
    if result and charset:
        assert result[0] not in charset
        assert result[-1] not in charset


def test_split_skips_empties():
    assert split(",,a,,b,", ",") == ["a", "b"]
    assert split(",,,", ",") == []


@given(text, char)
def test_split_words_clean(s, sep):
    words = split(s, sep)
    assert all(words)
    assert all(sep not in w for w in words)
    assert "".join(words) == s.replace(sep, "")


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strmapi_indexes():
    assert strmapi("abc", lambda i, c: str(i)) == "012"


def test_strmapi_upper():
    assert strmapi("abc", lambda i, c: toupper(c)) == "ABC"


def test_striteri_mutates_in_place():
    buf = list("abc")
    assert striteri(buf, lambda i, c: toupper(c)) is None
    assert buf == list("ABC")


def test_striteri_stops_at_nul():
    buf = ["a", "\0", "b"]
    seen = []
    striteri(buf, lambda i, c: seen.append(i))
    assert seen == [0]
    assert buf == ["a", "\0", "b"]


def test_striteri_bytearray():
    buf = bytearray(b"ab\x00c")
    striteri(buf, lambda i, c: toupper(c))
    assert buf == bytearray(b"AB\x00c")