"""Character classification and integer parsing on ASCII codes."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_WHITESPACE = frozenset({" ", "\t", "\n", "\v", "\f", "\r"})


def _code(value: CharLike) -> int:
    """Return the integer code of a character given as an int or a 1-char str."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    return int(value)


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, a single optional sign is accepted, and
    parsing stops at the first non-digit. Text with no digits yields 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return result * sign


def is_alpha(code: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    value = _code(code)
    return 65 <= value <= 90 or 97 <= value <= 122


def is_digit(code: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    value = _code(code)
    return 48 <= value <= 57


def is_alnum(code: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: CharLike) -> bool:
    """True for codes in the range 0-127."""
    value = _code(code)
    return 0 <= value <= 127


def is_print(code: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    value = _code(code)
    return 32 <= value <= 126


def to_lower(code: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    value = _code(code)
    if 65 <= value <= 90:
        return _same_kind(code, value + 32)
    return code


def to_upper(code: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    value = _code(code)
    if 97 <= value <= 122:
        return _same_kind(code, value - 32)
    return code