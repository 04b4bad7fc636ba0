"""Position searches and three-way comparison over character sequences.

Every search returns the index it found, or :data:`NPOS` when there is
none. Both the text and the needle may be any sequence of characters
(``str``, a list of one-character strings, or another sequence type).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "NPOS",
    "find",
    "rfind",
    "find_first_of",
    "find_first_not_of",
    "find_last_of",
    "find_last_not_of",
    "compare_ranges",
]

NPOS = -1
"""Returned by every search that finds nothing."""


def _check_pos(pos: int | None) -> None:
    if pos is not None and pos < 0:
        raise ValueError("search position must not be negative")


def _matches_at(text: Sequence[Any], needle: Sequence[Any], start: int) -> bool:
    return all(text[start + offset] == item for offset, item in enumerate(needle))


def _last_start(size: int, pos: int | None) -> int:
    """The highest index a backward search may start from."""
    return size - 1 if pos is None else min(pos, size - 1)


def find(text: Sequence[Any], needle: Sequence[Any], pos: int = 0) -> int:
    """Index of the first occurrence of ``needle`` at or after ``pos``."""
    _check_pos(pos)
    size, width = len(text), len(needle)
    if pos > size:
        return NPOS
    for start in range(pos, size - width + 1):
        if _matches_at(text, needle, start):
            return start
    return NPOS


def rfind(text: Sequence[Any], needle: Sequence[Any], pos: int | None = None) -> int:
    """Index of the last occurrence of ``needle`` starting at or before ``pos``.

    With ``pos`` left as ``None`` the whole text is searched.
    """
    _check_pos(pos)
    size, width = len(text), len(needle)
    last = size - width
    if pos is not None:
        last = min(pos, last)
    for start in range(last, -1, -1):
        if _matches_at(text, needle, start):
            return start
    return NPOS


def _first_where(text: Sequence[Any], pos: int, wanted: bool, chars: Iterable[Any]) -> int:
    _check_pos(pos)
    members = frozenset(chars)
    for index in range(pos, len(text)):
        if (text[index] in members) == wanted:
            return index
    return NPOS


def _last_where(
    text: Sequence[Any], pos: int | None, wanted: bool, chars: Iterable[Any]
) -> int:
    _check_pos(pos)
    members = frozenset(chars)
    for index in range(_last_start(len(text), pos), -1, -1):
        if (text[index] in members) == wanted:
            return index
    return NPOS


def find_first_of(text: Sequence[Any], chars: Iterable[Any], pos: int = 0) -> int:
    """Index of the first character at or after ``pos`` that is in ``chars``."""
    return _first_where(text, pos, True, chars)


def find_first_not_of(text: Sequence[Any], chars: Iterable[Any], pos: int = 0) -> int:
    """Index of the first character at or after ``pos`` not in ``chars``."""
    return _first_where(text, pos, False, chars)


def find_last_of(
    text: Sequence[Any], chars: Iterable[Any], pos: int | None = None
) -> int:
    """Index of the last character at or before ``pos`` that is in ``chars``."""
    return _last_where(text, pos, True, chars)


def find_last_not_of(
    text: Sequence[Any], chars: Iterable[Any], pos: int | None = None
) -> int:
    """Index of the last character at or before ``pos`` not in ``chars``."""
    return _last_where(text, pos, False, chars)


def compare_ranges(left: Iterable[Any], right: Iterable[Any]) -> int:
    """Compare two sequences lexicographically.

    Returns -1, 0 or 1. A proper prefix compares less than the longer
    sequence.
    """
    left_iter, right_iter = iter(left), iter(right)
    sentinel = object()
    while True:
        a = next(left_iter, sentinel)
        b = next(right_iter, sentinel)
        if a is sentinel and b is sentinel:
            return 0
        if a is sentinel:
            return -1
        if b is sentinel:
            return 1
        if a < b:
            return -1
        if a > b:
            return 1