"""String searching, comparison, copying and transformation helpers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Tuple, Union

CharLike = Union[int, str]


def _char_code(char: CharLike) -> int:
    """Return the byte value (0-255) of a character given as a 1-char str or an int."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char) % 256
    return int(char) % 256


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``char`` in ``text``.

    Searching for the NUL character yields ``len(text)``, the position of the
    terminator. Returns None when the character does not occur.
    """
    code = _char_code(char)
    if code == 0:
        return len(text)
    index = text.find(chr(code))
    return None if index < 0 else index


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``char`` in ``text``.

    Searching for the NUL character yields ``len(text)``. Returns None when the
    character does not occur.
    """
    code = _char_code(char)
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index < 0 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns 0 when the compared parts are equal, otherwise the difference of
    the codes of the first differing pair. The end of a string compares as a
    code of 0.
    """
    _check_non_negative("count", count)
    for position in range(min(count, max(len(first), len(second)))):
        left = ord(first[position]) if position < len(first) else 0
        right = ord(second[position]) if position < len(second) else 0
        if left != right:
            return left - right
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle matches at index 0. Returns None when not found.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives the empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings into a new one."""
    return first + second


def strcat(base: Optional[str], addition: str) -> str:
    """Append ``addition`` to ``base``; a missing base counts as empty."""
    return (base or "") + addition


def strlcpy(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Size-bounded copy of ``src`` into a buffer of ``size`` characters.

    Returns the resulting buffer content and the length of ``src``. With a
    size of 0 nothing is written and ``dest`` is returned unchanged.
    """
    _check_non_negative("size", size)
    if size == 0:
        return dest, len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Size-bounded append of ``src`` to ``dest`` in a buffer of ``size`` characters.

    Returns the resulting buffer content and the length the full
    concatenation would have had, counting ``dest`` as at most ``size``.
    """
    _check_non_negative("size", size)
    dest_len = min(len(dest), size)
    if dest_len == size:
        return dest, dest_len + len(src)
    room = size - dest_len - 1
    return dest + src[:room], dest_len + len(src)


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New string built from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence, func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on each item of ``chars``, in place.

    A non-None return value replaces the item at that index.
    """
    for index, char in enumerate(list(chars)):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement