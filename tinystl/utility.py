"""Pairs, swapping and the basic comparison functors."""

from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Any

__all__ = ["Pair", "make_pair", "swap", "less", "equal_to"]


@dataclass(order=True)
class Pair:
    """Two values compared first by ``first``, then by ``second``."""

    first: Any = None
    second: Any = None

    def swap(self, other: Pair) -> None:
        """Exchange both members with those of ``other``."""
        self.first, other.first = other.first, self.first
        self.second, other.second = other.second, self.second


def make_pair(first: Any, second: Any) -> Pair:
    """Build a :class:`Pair` from two values."""
    return Pair(first, second)


def swap(x: Any, y: Any) -> None:
    """Exchange the contents of two objects in place.

    Objects with a ``swap`` method use it; mutable sequences exchange
    their elements. Anything else cannot be swapped in place.
    """
    method = getattr(x, "swap", None)
    if callable(method) and isinstance(y, type(x)):
        method(y)
        return
    if isinstance(x, MutableSequence) and isinstance(y, MutableSequence):
        x[:], y[:] = list(y), list(x)
        return
    raise TypeError(
        f"cannot swap {type(x).__name__} and {type(y).__name__} in place"
    )


def less(x: Any, y: Any) -> bool:
    """Return ``x < y``."""
    return x < y


def equal_to(x: Any, y: Any) -> bool:
    """Return ``x == y``."""
    return x == y