"""Byte-buffer helpers working on bytes-like objects and bytearrays."""

from __future__ import annotations

import sys


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"length {n} exceeds buffer of size {len(buffer)}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with value (taken modulo 256)."""
    _check_length(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > sys.maxsize:
        raise OverflowError(f"allocation of {count} x {size} bytes is too large")
    return bytearray(total)


def memchr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to value within n bytes, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, else 0."""
    _check_length(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy n bytes from src to the start of dest and return dest."""
    _check_length(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buffer from offset src to offset dest, overlap safe."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0 or dest + n > len(buffer) or src + n > len(buffer):
        raise ValueError(f"move of {n} bytes does not fit the buffer")
    buffer[dest : dest + n] = bytes(buffer[src : src + n])
    return buffer