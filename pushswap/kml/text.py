"""String helpers: searching, comparing, slicing, joining and mapping text."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return a one-character string from a character or a code point."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return chr(c)


def _check_count(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns the difference of the first unequal pair of code points, where
    the end of a string counts as code point 0, or 0 if they match.
    """
    _check_count(n, "n")
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), n):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, n: int) -> int | None:
    """Return the index of little inside the first n characters of big, or None."""
    if not little:
        return 0
    _check_count(n, "n")
    index = big[:n].find(little)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of s."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s from start; empty past the end."""
    _check_count(start, "start")
    _check_count(length, "length")
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return f"{s1}{s2}"


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    return s.strip(charset) if charset else s


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the text that fits and the full length of src.
    """
    _check_count(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters including the terminator.

    Returns the resulting text and the length it tried to create. When dst
    already fills the buffer it is left unchanged.
    """
    _check_count(size, "size")
    used = min(len(dst), size)
    if used < size:
        return dst + src[: size - used - 1], used + len(src)
    return dst, used + len(src)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return the string made of func(index, char) for each character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call func(index, char) for each element, in place.

    A returned character replaces the element; None leaves it unchanged.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement