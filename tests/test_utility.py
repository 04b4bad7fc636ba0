import pytest
from hypothesis import given
from hypothesis import strategies as st

from tinystl.utility import Pair, equal_to, less, make_pair, swap


def test_make_pair_holds_values():
    p = make_pair("a", 3)
    assert p.first == "a"
    assert p.second == 3
    assert p == Pair("a", 3)


def test_pair_ordering_by_first_then_second():
    assert Pair(1, 2) < Pair(1, 3)
    assert Pair(1, 5) < Pair(2, 0)
    assert Pair(2, 0) > Pair(1, 5)
    assert Pair(1, 2) <= Pair(1, 2)
    assert Pair(1, 2) >= Pair(1, 2)
    assert not (Pair(1, 2) < Pair(1, 2))


def test_pair_inequality():
    assert Pair(1, 2) != Pair(2, 1)


def test_pair_swap_method():
    a = Pair(1, "x")
    b = Pair(2, "y")
    a.swap(b)
    assert a == Pair(2, "y")
    assert b == Pair(1, "x")


def test_swap_function_on_pairs():
    a = make_pair(1, 2)
    b = make_pair(3, 4)
    swap(a, b)
    assert (a.first, a.second) == (3, 4)
    assert (b.first, b.second) == (1, 2)


def test_swap_function_on_lists():
    a = [1, 2, 3]
    b = [9]
    swap(a, b)
    assert a == [9]
    assert b == [1, 2, 3]


def test_swap_rejects_immutable_values():
    with pytest.raises(TypeError):
        swap(1, 2)


@given(st.integers(), st.integers(), st.integers(), st.integers())
def test_pair_order_matches_tuple_order(a, b, c, d):
    assert (Pair(a, b) < Pair(c, d)) == ((a, b) < (c, d))
    assert (Pair(a, b) == Pair(c, d)) == ((a, b) == (c, d))


@given(st.integers(), st.integers())
def test_less_and_equal_to(x, y):
    assert less(x, y) == (x < y)
    assert equal_to(x, y) == (x == y)