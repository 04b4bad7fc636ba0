"""Iterator categories and a reverse iterator over random-access sequences."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from typing import Any

__all__ = ["IteratorCategory", "ReverseIterator"]


class IteratorCategory(enum.Enum):
    """The traversal capability of an iterator."""

    INPUT = "input"
    OUTPUT = "output"
    FORWARD = "forward"
    BIDIRECTIONAL = "bidirectional"
    RANDOM_ACCESS = "random_access"


class ReverseIterator:
    """A position walking a sequence backwards.

    ``base`` is the index one past the element the iterator refers to, so
    an iterator built with ``base=len(sequence)`` refers to the last element.
    Iterating it yields the elements from that point towards the front.
    """

    iterator_category = IteratorCategory.RANDOM_ACCESS

    def __init__(self, sequence: Sequence, base: int) -> None:
        self._seq = sequence
        self._base = base

    def base(self) -> int:
        """The index one past the referenced element."""
        return self._base

    def _index(self, index: int) -> int:
        if not 0 <= index < len(self._seq):
            raise IndexError("reverse iterator out of range")
        return index

    def get(self) -> Any:
        """The element the iterator refers to."""
        return self._seq[self._index(self._base - 1)]

    def set(self, value: Any) -> None:
        """Replace the element the iterator refers to."""
        self._seq[self._index(self._base - 1)] = value

    def __getitem__(self, n: int) -> Any:
        return self._seq[self._index(self._base - n - 1)]

    def __add__(self, n: int) -> ReverseIterator:
        if not isinstance(n, int):
            return NotImplemented
        return ReverseIterator(self._seq, self._base - n)

    def __radd__(self, n: int) -> ReverseIterator:
        return self.__add__(n)

    def __sub__(self, other):
        if isinstance(other, ReverseIterator):
            self._require_same(other)
            return self._base - other._base
        if isinstance(other, int):
            return ReverseIterator(self._seq, self._base + other)
        return NotImplemented

    def __iadd__(self, n: int) -> ReverseIterator:
        self._base -= n
        return self

    def __isub__(self, n: int) -> ReverseIterator:
        self._base += n
        return self

    def _require_same(self, other: ReverseIterator) -> None:
        if self._seq is not other._seq:
            raise ValueError("iterators belong to different sequences")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        return self._seq is other._seq and self._base == other._base

    def __lt__(self, other: ReverseIterator) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        self._require_same(other)
        return self._base < other._base

    def __le__(self, other: ReverseIterator) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        self._require_same(other)
        return self._base <= other._base

    def __gt__(self, other: ReverseIterator) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        self._require_same(other)
        return self._base > other._base

    def __ge__(self, other: ReverseIterator) -> bool:
        if not isinstance(other, ReverseIterator):
            return NotImplemented
        self._require_same(other)
        return self._base >= other._base

    def __iter__(self) -> ReverseIterator:
        return self

    def __next__(self) -> Any:
        if self._base <= 0:
            raise StopIteration
        value = self._seq[self._index(self._base - 1)]
        self._base -= 1
        return value

    def __repr__(self) -> str:
        return f"ReverseIterator(base={self._base})"