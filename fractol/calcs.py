"""Numeric helpers: argument parsing, coordinate scaling and complex arithmetic."""

from __future__ import annotations

WIDTH = 800
HEIGHT = 800

BLACK = 0x000000
WHITE = 0xFFFFFF
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF
MAGENTA_BURST = 0xFF00FF
LIME_SHOCK = 0xCCFF00
NEON_ORANGE = 0xFF6600
PSYCHEDELIC_PURPLE = 0x660066
AQUA_DREAM = 0x33CCCC
HOT_PINK = 0xFF66B2
ELECTRIC_BLUE = 0x0066FF
LAVA_RED = 0xFF3300

_SPACES = frozenset({" ", "\t", "\n", "\v", "\f", "\r"})


def atodbl(s: str) -> float:
    """Parse a decimal number such as ``-0.8`` into a float.

    Leading whitespace is skipped and any run of signs is accepted, each
    minus flipping the sign. Every character before the dot adds to the
    integer part and every character after it to the fractional part, by its
    offset from ``'0'``; no other validation is done.
    """
    pos = 0
    length = len(s)
    while pos < length and s[pos] in _SPACES:
        pos += 1
    sign = 1
    while pos < length and s[pos] in "+-":
        if s[pos] == "-":
            sign = -sign
        pos += 1
    integer_part = 0
    while pos < length and s[pos] != ".":
        integer_part = integer_part * 10 + (ord(s[pos]) - 48)
        pos += 1
    if pos < length and s[pos] == ".":
        pos += 1
    fractional_part = 0.0
    power = 1.0
    for char in s[pos:]:
        power /= 10
        fractional_part = fractional_part + (ord(char) - 48) * power
    return (integer_part + fractional_part) * sign


def map_range(value, new_min, new_max, old_min):
    """Linearly rescale ``value`` from ``[old_min, WIDTH]`` to ``[new_min, new_max]``.

    Works on plain numbers and on numpy arrays alike.
    """
    old_max = WIDTH
    return (new_max - new_min) * (value - old_min) / (old_max - old_min) + new_min


def sum_complex(z1: complex, z2: complex) -> complex:
    """Component-wise sum of two complex numbers."""
    return complex(z1.real + z2.real, z1.imag + z2.imag)


def square_complex(z: complex) -> complex:
    """Square of a complex number."""
    x, y = z.real, z.imag
    return complex((x * x) - (y * y), 2 * x * y)