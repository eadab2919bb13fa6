"""Formatted output and small writers for text streams."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_INT32_MIN = -(2**31)
_UINT32 = 2**32
_UINT64_MASK = 2**64 - 1


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return (value - _INT32_MIN) % _UINT32 + _INT32_MIN


def _next_arg(values: Iterator[Any], conversion: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None


def _convert(conversion: str, values: Iterator[Any]) -> str:
    """Render one conversion, taking its argument from values when it needs one."""
    if conversion == "c":
        value = _next_arg(values, conversion)
        if isinstance(value, str) and len(value) == 1:
            return value
        return chr(int(value) & 0xFF)
    if conversion == "s":
        value = _next_arg(values, conversion)
        return "(null)" if value is None else str(value)
    if conversion == "p":
        value = _next_arg(values, conversion)
        if not value:
            return "(nil)"
        return f"0x{int(value) & _UINT64_MASK:x}"
    if conversion in ("d", "i"):
        return str(_to_int32(int(_next_arg(values, conversion))))
    if conversion == "u":
        return str(int(_next_arg(values, conversion)) % _UINT32)
    if conversion == "x":
        return f"{int(_next_arg(values, conversion)) % _UINT32:x}"
    if conversion == "X":
        return f"{int(_next_arg(values, conversion)) % _UINT32:X}"
    if conversion == "%":
        return "%"
    # An unknown conversion, or a lone '%' at the end, produces nothing.
    return ""


def format_printf(fmt: str, *args: Any) -> str:
    """Render fmt with the conversions %c %s %p %d %i %u %x %X and %%."""
    if fmt is None:
        raise TypeError("format must be a string, not None")
    values = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch == "%":
            pieces.append(_convert(next(chars, ""), values))
        else:
            pieces.append(ch)
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write fmt rendered with args to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: TextIO | None = None) -> int:
    """Write one character and return the count written."""
    ch = c if isinstance(c, str) else chr(c & 0xFF)
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(ch)
    return 1


def put_str(s: str, stream: TextIO | None = None) -> int:
    """Write a string and return the count written."""
    if s is None:
        raise TypeError("cannot write None")
    _target(stream).write(s)
    return len(s)


def put_endl(s: str, stream: TextIO | None = None) -> int:
    """Write a string followed by a newline and return the count written."""
    if s is None:
        raise TypeError("cannot write None")
    _target(stream).write(f"{s}\n")
    return len(s) + 1


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    _target(stream).write(str(_to_int32(n)))