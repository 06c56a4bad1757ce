"""Helpers for turning a raw input line into a command."""

from __future__ import annotations

MAX_WORDS = 100
INT_MAX = 2**31 - 1
_UINT_MASK = 2**32 - 1
_COMMENT_LEADERS = frozenset(" \t;")
_DIGITS = frozenset("0123456789")


def strip_comment(line: str) -> str | None:
    """Drop a trailing comment from *line*.

    A line starting with ``#`` is a comment as a whole and gives ``None``.
    Otherwise the line is cut at the last ``#`` that follows a space, a tab
    or a semicolon. A ``#`` inside a word is kept.
    """
    cut = 0
    for index, char in enumerate(line):
        if char != "#":
            continue
        if index == 0:
            return None
        if line[index - 1] in _COMMENT_LEADERS:
            cut = index
    return line[:cut] if cut else line


def split_words(line: str) -> list[str]:
    """Split *line* on spaces, dropping empty words, keeping at most 100 words."""
    return [word for word in line.split(" ") if word][:MAX_WORDS]


def parse_int(text: str) -> int:
    """Read an integer the lenient way the shell does.

    Every ``-`` flips the sign, digits accumulate, and the first other
    character ends the number once a non-zero value has been read. The
    result wraps like a 32-bit integer.
    """
    sign = 1
    value = 0
    for char in text:
        if char == "-":
            sign = -sign
        elif char in _DIGITS:
            value = (value * 10 + ord(char) - ord("0")) & _UINT_MASK
        elif value > 0:
            break
    result = (sign * value) & _UINT_MASK
    return result - (1 << 32) if result > INT_MAX else result


def is_digits(text: str) -> bool:
    """Return True when every character of *text* is an ASCII digit."""
    return all(char in _DIGITS for char in text)