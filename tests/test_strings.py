import pytest

from fractol.libft.strings import (
    strcat,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    striteri,
    strtrim,
    substr,
)


@pytest.mark.parametrize("text", ["hello", "banana", "a", "xyzzy"])
def test_strchr_finds_first_occurrence(text):
    for char in set(text):
        index = strchr(text, char)
        assert text[index] == char
        assert char not in text[:index]


def test_strchr_missing_and_nul():
    assert strchr("hello", "z") is None
    assert strchr("hello", 0) == len("hello")
    assert strchr("", "\0") == 0


def test_strchr_accepts_int_codes_modulo_256():
    assert strchr("abc", ord("b")) == strchr("abc", "b")
    assert strchr("abc", ord("b") + 256) == strchr("abc", "b")


def test_strrchr_finds_last_occurrence():
    text = "banana"
    index = strrchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[index + 1:]
    assert strrchr(text, "q") is None
    assert strrchr(text, 0) == len(text)


def test_strchr_rejects_multi_character_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_equal_and_prefix():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0
    assert strncmp("mandelbrot", "mandelbrot", 11) == 0


def test_strncmp_sign_and_antisymmetry():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 3) == -strncmp("abd", "abc", 3)


def test_strncmp_shorter_string_sorts_first():
    assert strncmp("julia", "julia1", 6) < 0
    assert strncmp("julia1", "julia", 5) == 0
    assert strncmp("julia", "mandelbrot", 6) != 0


def test_strncmp_negative_count_raises():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_found_within_length():
    haystack = "lorem ipsum dolor"
    index = strnstr(haystack, "ipsum", len(haystack))
    assert haystack[index:index + len("ipsum")] == "ipsum"


def test_strnstr_respects_length_limit():
    haystack = "lorem ipsum dolor"
    start = haystack.find("ipsum")
    assert strnstr(haystack, "ipsum", start + len("ipsum") - 1) is None
    assert strnstr(haystack, "ipsum", start + len("ipsum")) == start


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "zz", 3) is None


@pytest.mark.parametrize(
    "text,start,length",
    [("hello world", 0, 5), ("hello world", 6, 100), ("abc", 1, 1), ("abc", 0, 0)],
)
def test_substr_matches_slice(text, start, length):
    assert substr(text, start, length) == text[start:start + length]


def test_substr_start_past_end_is_empty():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 10, 2) == ""


def test_strjoin_and_strcat():
    assert strjoin("foo", "bar") == "foobar"
    assert strcat(None, "bar") == "bar"
    assert strcat("foo", "bar") == strjoin("foo", "bar")
    assert strcat("", "") == ""


def test_strlcpy_truncates_and_reports_source_length():
    src = "hello"
    result, total = strlcpy("", src, 3)
    assert total == len(src)
    assert len(result) == 2
    assert src.startswith(result)


def test_strlcpy_full_copy_and_zero_size():
    assert strlcpy("old", "hello", 10) == ("hello", len("hello"))
    assert strlcpy("old", "hello", 0) == ("old", len("hello"))


def test_strlcat_appends_within_size():
    result, total = strlcat("foo", "bar", 10)
    assert result == "foobar"
    assert total == len("foo") + len("bar")


def test_strlcat_truncates():
    result, total = strlcat("foo", "bar", 5)
    assert len(result) == 4
    assert result.startswith("foo")
    assert total == len("foo") + len("bar")


def test_strlcat_size_not_larger_than_dest():
    result, total = strlcat("foobar", "xyz", 3)
    assert result == "foobar"
    assert total == 3 + len("xyz")


@pytest.mark.parametrize(
    "text,charset",
    [("  hello  ", " "), ("xxhixx", "x"), ("abcba", "ab"), ("", "a"), ("aaa", "a")],
)
def test_strtrim_invariants(text, charset):
    result = strtrim(text, charset)
    assert result in text
    if result:
        assert result[0] not in charset
        assert result[-1] not in charset


def test_strtrim_keeps_inner_characters():
    assert strtrim("  a b  ", " ") == "a b"
    assert strtrim("aaa", "a") == ""


def test_strmapi_uses_index_and_char():
    assert strmapi("abcd", lambda i, c: c.upper() if i % 2 == 0 else c) == "AbCd"
    assert strmapi("", lambda i, c: c) == ""


def test_striteri_modifies_in_place():
    chars = list("abc")
    striteri(chars, lambda i, c: c.upper())
    assert chars == ["A", "B", "C"]


def test_striteri_none_leaves_item_and_sees_indices():
    chars = list("xyz")
    seen = []
    striteri(chars, lambda i, c: seen.append((i, c)))
    assert chars == ["x", "y", "z"]
    assert seen == [(0, "x"), (1, "y"), (2, "z")]