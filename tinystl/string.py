"""A mutable character string with explicit capacity management."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, TextIO

from tinystl import search
from tinystl.reverse_iterator import ReverseIterator
from tinystl.search import NPOS

__all__ = ["NPOS", "String", "read_word", "getline", "swap"]

_SEPARATORS = frozenset(" \t\n")


def _check_char(c: Any) -> str:
    if not isinstance(c, str):
        raise TypeError(f"expected a character, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c


def _as_chars(value: Any) -> list[str]:
    if isinstance(value, String):
        return list(value._chars)
    if isinstance(value, str):
        return list(value)
    if isinstance(value, Iterable):
        return [_check_char(c) for c in value]
    raise TypeError(f"cannot build a string from {type(value).__name__}")


def _needle(s: Any) -> Any:
    if isinstance(s, String):
        return s._chars
    if isinstance(s, str):
        return s
    return _as_chars(s)


def _check_pos(pos: int, size: int) -> None:
    if not 0 <= pos <= size:
        raise IndexError(f"position {pos} out of range for size {size}")


def _sub(chars: list[str], pos: int, length: int | None) -> list[str]:
    _check_pos(pos, len(chars))
    if length is None:
        return chars[pos:]
    if length < 0:
        raise ValueError("length must not be negative")
    return chars[pos:pos + length]


class String:
    """A mutable sequence of characters.

    Capacity is tracked the way a growable buffer would: it never shrinks
    unless :meth:`shrink_to_fit` is called, and when an insertion does not
    fit it grows by at least its current size.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any = None, pos: int = 0, length: int | None = None) -> None:
        self._chars: list[str] = []
        if value is None:
            if pos != 0 or length is not None:
                raise IndexError("position out of range for an empty string")
        else:
            self._chars.extend(_sub(_as_chars(value), pos, length))
        self._capacity = len(self._chars)

    @classmethod
    def filled(cls, n: int, c: str) -> String:
        """A string of ``n`` copies of the character ``c``."""
        if n < 0:
            raise ValueError("count must not be negative")
        return cls(_check_char(c) * n)

    # --- size and capacity -------------------------------------------------

    def size(self) -> int:
        return len(self._chars)

    def capacity(self) -> int:
        return self._capacity

    def empty(self) -> bool:
        return not self._chars

    def clear(self) -> None:
        """Remove every character, keeping the capacity."""
        del self._chars[:]

    def resize(self, n: int, c: str = "\0") -> None:
        """Truncate to ``n`` characters or pad with ``c`` up to ``n``."""
        if n < 0:
            raise ValueError("size must not be negative")
        _check_char(c)
        size = len(self._chars)
        if n < size:
            del self._chars[n:]
        elif n > size:
            if n > self._capacity:
                self._capacity = n
            self._chars.extend(c * (n - size))

    def reserve(self, n: int = 0) -> None:
        """Make room for at least ``n`` characters."""
        if n > self._capacity:
            self._capacity = n

    def shrink_to_fit(self) -> None:
        self._capacity = len(self._chars)

    # --- element access ----------------------------------------------------

    def __len__(self) -> int:
        return len(self._chars)

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return String(self._chars[index])
        return self._chars[index]

    def __setitem__(self, index: int, value: str) -> None:
        self._chars[index] = _check_char(value)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __reversed__(self) -> Iterator[str]:
        return reversed(self._chars)

    def rbegin(self) -> ReverseIterator:
        """A reverse iterator at the last character."""
        return ReverseIterator(self._chars, len(self._chars))

    def rend(self) -> ReverseIterator:
        """A reverse iterator one before the first character."""
        return ReverseIterator(self._chars, 0)

    def front(self) -> str:
        if not self._chars:
            raise IndexError("front of empty string")
        return self._chars[0]

    def back(self) -> str:
        if not self._chars:
            raise IndexError("back of empty string")
        return self._chars[-1]

    # --- modifiers ---------------------------------------------------------

    def _insert_chars(self, pos: int, chars: list[str]) -> None:
        _check_pos(pos, len(self._chars))
        n = len(chars)
        if n > self._capacity - len(self._chars):
            self._capacity += max(self._capacity, n)
        self._chars[pos:pos] = chars

    def push_back(self, c: str) -> None:
        self._insert_chars(len(self._chars), [_check_char(c)])

    def pop_back(self) -> str:
        """Remove and return the last character."""
        if not self._chars:
            raise IndexError("pop from empty string")
        return self._chars.pop()

    def insert(self, pos: int, s: Any, subpos: int = 0, sublen: int | None = None) -> String:
        """Insert ``s[subpos:subpos+sublen]`` before index ``pos``."""
        self._insert_chars(pos, _sub(_as_chars(s), subpos, sublen))
        return self

    def insert_fill(self, pos: int, n: int, c: str) -> String:
        """Insert ``n`` copies of ``c`` before index ``pos``."""
        if n < 0:
            raise ValueError("count must not be negative")
        self._insert_chars(pos, [_check_char(c)] * n)
        return self

    def append(self, s: Any, subpos: int = 0, sublen: int | None = None) -> String:
        return self.insert(len(self._chars), s, subpos, sublen)

    def append_fill(self, n: int, c: str) -> String:
        return self.insert_fill(len(self._chars), n, c)

    def erase(self, pos: int = 0, length: int | None = None) -> String:
        """Remove up to ``length`` characters starting at ``pos``."""
        size = len(self._chars)
        _check_pos(pos, size)
        if length is not None and length < 0:
            raise ValueError("length must not be negative")
        end = size if length is None else min(pos + length, size)
        del self._chars[pos:end]
        return self

    def replace(
        self, pos: int, length: int, s: Any, subpos: int = 0, sublen: int | None = None
    ) -> String:
        """Replace ``length`` characters at ``pos`` with part of ``s``."""
        chars = _sub(_as_chars(s), subpos, sublen)
        self.erase(pos, length)
        self._insert_chars(pos, chars)
        return self

    def replace_fill(self, pos: int, length: int, n: int, c: str) -> String:
        """Replace ``length`` characters at ``pos`` with ``n`` copies of ``c``."""
        if n < 0:
            raise ValueError("count must not be negative")
        _check_char(c)
        self.erase(pos, length)
        self._insert_chars(pos, [c] * n)
        return self

    def swap(self, other: String) -> None:
        self._chars[:], other._chars[:] = other._chars, self._chars[:]
        self._capacity, other._capacity = other._capacity, self._capacity

    def copy(self, length: int, pos: int = 0) -> str:
        """Return up to ``length`` characters starting at ``pos``."""
        return "".join(_sub(self._chars, pos, length))

    # --- searching ---------------------------------------------------------

    def find(self, s: Any, pos: int = 0) -> int:
        return search.find(self._chars, _needle(s), pos)

    def rfind(self, s: Any, pos: int | None = None) -> int:
        return search.rfind(self._chars, _needle(s), pos)

    def find_first_of(self, s: Any, pos: int = 0) -> int:
        return search.find_first_of(self._chars, _needle(s), pos)

    def find_first_not_of(self, s: Any, pos: int = 0) -> int:
        return search.find_first_not_of(self._chars, _needle(s), pos)

    def find_last_of(self, s: Any, pos: int | None = None) -> int:
        return search.find_last_of(self._chars, _needle(s), pos)

    def find_last_not_of(self, s: Any, pos: int | None = None) -> int:
        return search.find_last_not_of(self._chars, _needle(s), pos)

    def substr(self, pos: int = 0, length: int | None = None) -> String:
        return String(_sub(self._chars, pos, length))

    def compare(
        self,
        other: Any,
        pos: int = 0,
        length: int | None = None,
        subpos: int = 0,
        sublen: int | None = None,
    ) -> int:
        """Compare ``self[pos:pos+length]`` with ``other[subpos:subpos+sublen]``.

        Returns -1, 0 or 1.
        """
        return search.compare_ranges(
            _sub(self._chars, pos, length), _sub(_as_chars(other), subpos, sublen)
        )

    # --- operators ---------------------------------------------------------

    def __iadd__(self, other: Any) -> String:
        if not isinstance(other, (String, str)):
            return NotImplemented
        return self.append(other)

    def __add__(self, other: Any) -> String:
        if not isinstance(other, (String, str)):
            return NotImplemented
        return String(self).append(other)

    def __radd__(self, other: Any) -> String:
        if not isinstance(other, str):
            return NotImplemented
        return String(other).append(self)

    def _cmp(self, other: Any) -> int | None:
        if not isinstance(other, (String, str)):
            return None
        return search.compare_ranges(self._chars, _needle(other))

    def __eq__(self, other: object) -> bool:
        result = self._cmp(other)
        return NotImplemented if result is None else result == 0

    def __lt__(self, other: Any) -> bool:
        result = self._cmp(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: Any) -> bool:
        result = self._cmp(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: Any) -> bool:
        result = self._cmp(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: Any) -> bool:
        result = self._cmp(other)
        return NotImplemented if result is None else result >= 0

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"String({str(self)!r})"


def read_word(stream: TextIO) -> String:
    """Skip blanks and newlines, then read one whitespace-delimited word.

    The character ending the word is consumed. At end of input an empty
    string is returned.
    """
    ch = stream.read(1)
    while ch and ch in _SEPARATORS:
        ch = stream.read(1)
    word = String()
    while ch and ch not in _SEPARATORS:
        word.push_back(ch)
        ch = stream.read(1)
    return word


def getline(stream: TextIO, delim: str = "\n") -> String:
    """Read characters up to ``delim``, which is consumed but not kept."""
    _check_char(delim)
    line = String()
    ch = stream.read(1)
    while ch and ch != delim:
        line.push_back(ch)
        ch = stream.read(1)
    return line


def swap(x: String, y: String) -> None:
    """Exchange the contents of two strings."""
    x.swap(y)