"""Splitting strings on a single separator character."""

from __future__ import annotations

from collections.abc import Iterator


def _check_separator(sep: str) -> None:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces.

    Runs of separators, and separators at either end, produce no empty words.
    """
    _check_separator(sep)
    return [word for word in text.split(sep) if word]


def tokenize(text: str, delim: str) -> Iterator[str]:
    """Yield the non-empty tokens of ``text`` separated by ``delim``, one at a time."""
    _check_separator(delim)
    length = len(text)
    pos = 0
    while pos < length:
        while pos < length and text[pos] == delim:
            pos += 1
        if pos >= length:
            return
        start = pos
        while pos < length and text[pos] != delim:
            pos += 1
        yield text[start:pos]
        pos += 1