import pytest

from fractol.libft.tokens import split, tokenize


def test_split_skips_runs_and_edges():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_without_separator_returns_whole():
    assert split("fractal", ",") == ["fractal"]


@pytest.mark.parametrize("text", ["", ",,,", ","])
def test_split_only_separators_is_empty(text):
    assert split(text, ",") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_tokenize_rejects_empty_separator():
    with pytest.raises(ValueError):
        list(tokenize("a b", ""))


@pytest.mark.parametrize(
    "text",
    ["a,b,c", ",,a,,b,", "", ",,,", "single", "x,", ",y"],
)
def test_tokenize_matches_split(text):
    assert list(tokenize(text, ",")) == split(text, ",")


def test_tokenize_is_lazy():
    tokens = tokenize("one two three", " ")
    assert next(tokens) == "one"
    assert next(tokens) == "two"
    assert next(tokens) == "three"
    with pytest.raises(StopIteration):
        next(tokens)


def test_split_words_contain_no_separator():
    words = split(";a;;bc;;;d;", ";")
    assert all(word and ";" not in word for word in words)
    assert "".join(words) == ";a;;bc;;;d;".replace(";", "")