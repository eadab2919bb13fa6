"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_INT32_MIN = -(2**31)
_UINT32 = 2**32


def _code(c: int | str) -> int:
    """Return the code point of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return c


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return (value - _INT32_MIN) % _UINT32 + _INT32_MIN


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) < 127


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code += ord("A") - ord("a")
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Read a leading decimal integer, C style.

    Leading whitespace is skipped, one optional sign is read, then digits
    are consumed until the first non-digit. Text without digits gives 0.
    The result wraps around like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _to_int32(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)