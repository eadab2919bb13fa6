"""Splitting text on a separator and joining text pieces."""

from __future__ import annotations

from collections.abc import Iterable


def _separator(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def _words(text: str, sep: str) -> list[str]:
    return [word for word in text.split(sep) if word]


def split(text: str, sep: str) -> list[str]:
    """Split text into the words between runs of sep.

    When the text holds exactly one word, the text is returned whole as the
    only item, separators around the word included.
    """
    words = _words(text, _separator(sep))
    if len(words) == 1:
        return [text]
    return words


def fsplit(text: str, sep: str) -> list[str]:
    """Split text into the words between runs of sep, always trimming them."""
    return _words(text, _separator(sep))


def fjoin(s1: str | None, s2: str | None) -> str | None:
    """Return s1 followed by s2; a missing side yields the other one."""
    if s1 is None:
        return s2
    if s2 is None:
        return s1
    return s1 + s2


def strjoin_nl(s1: str | None, s2: str | None) -> str | None:
    """Return s1 followed by s2 and a newline; a missing side yields the other one."""
    if s1 is None:
        return s2
    if s2 is None:
        return s1
    return f"{s1}{s2}\n"


def argstr(find: str | None, lines: Iterable[str] | None) -> str | None:
    """Collect, one per line, the lines that contain find.

    An empty find selects every line. Missing arguments give None.
    """
    if find is None or lines is None:
        return None
    return "".join(f"{line}\n" for line in lines if find in line)