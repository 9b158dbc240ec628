"""Integer formatting and writing text to streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _check_int(number: int) -> None:
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit int")


def _stream(file: Optional[TextIO]) -> TextIO:
    return sys.stdout if file is None else file


def itoa(number: int) -> str:
    """Decimal text of a 32-bit integer."""
    _check_int(number)
    return str(number)


def putchar(char: str, file: Optional[TextIO] = None) -> None:
    """Write one character to ``file`` (standard output by default)."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _stream(file).write(char)


def putstr(text: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``file``; None writes nothing."""
    if text is None:
        return
    _stream(file).write(text)


def putendl(text: Optional[str], file: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; None writes nothing."""
    if text is None:
        return
    _stream(file).write(text + "\n")


def putnbr(number: int, file: Optional[TextIO] = None) -> None:
    """Write the decimal text of a 32-bit integer to ``file``."""
    _stream(file).write(itoa(number))