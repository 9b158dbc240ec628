"""Byte-buffer operations on bytes-like objects."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = (1 << 64) - 1


def _check_count(count: int, *buffers) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(
                f"count {count} exceeds buffer length {len(buffer)}"
            )


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first ``count`` bytes of ``buffer`` with ``value`` (mod 256)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer``."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError when the total does not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise OverflowError(f"{count} * {size} bytes overflows the size type")
    return bytearray(total)


def memchr(buffer, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (mod 256) in the first ``count`` bytes."""
    _check_count(count, buffer)
    index = bytes(buffer[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first, second, count: int) -> int:
    """Compare ``count`` bytes; return the difference of the first differing pair."""
    _check_count(count, first, second)
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0


def memmove(dest, src, count: int):
    """Copy ``count`` bytes from ``src`` into ``dest``; safe when they overlap."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memcpy(dest, src, count: int):
    """Copy ``count`` bytes from ``src`` into the start of ``dest``."""
    return memmove(dest, src, count)