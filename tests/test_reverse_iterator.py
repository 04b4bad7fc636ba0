import pytest
from hypothesis import given
from hypothesis import strategies as st

from tinystl.reverse_iterator import ReverseIterator


def test_iteration_walks_backwards():
    seq = [1, 2, 3, 4]
    assert list(ReverseIterator(seq, len(seq))) == [4, 3, 2, 1]


def test_iteration_from_middle():
    seq = ["a", "b", "c", "d"]
    assert list(ReverseIterator(seq, 2)) == ["b", "a"]


def test_get_and_base():
    seq = [10, 20, 30]
    it = ReverseIterator(seq, len(seq))
    assert it.base() == len(seq)
    assert it.get() == seq[-1]


def test_set_writes_through():
    seq = [1, 2, 3]
    it = ReverseIterator(seq, 3)
    it.set(99)
    assert seq == [1, 2, 99]


def test_subscript_counts_from_current():
    seq = [1, 2, 3, 4]
    it = ReverseIterator(seq, 4)
    assert [it[n] for n in range(4)] == [4, 3, 2, 1]


def test_add_and_iadd_move_towards_front():
    seq = [1, 2, 3, 4]
    it = ReverseIterator(seq, 4)
    assert (it + 1).get() == seq[2]
    assert (2 + it).get() == seq[1]
    it += 3
    assert it.get() == seq[0]
    it -= 1
    assert it.get() == seq[1]


def test_sub_int_moves_towards_back():
    seq = [1, 2, 3, 4]
    it = ReverseIterator(seq, 1)
    assert (it - 2).get() == seq[2]


def test_out_of_range_raises():
    seq = [1, 2]
    with pytest.raises(IndexError):
        ReverseIterator(seq, 0).get()
    with pytest.raises(IndexError):
        ReverseIterator(seq, 2)[5]


def test_equality_requires_same_sequence():
    a = [1, 2]
    b = [1, 2]
    assert ReverseIterator(a, 2) == ReverseIterator(a, 2)
    assert not ReverseIterator(a, 2) == ReverseIterator(b, 2)


def test_difference_across_sequences_raises():
    with pytest.raises(ValueError):
        ReverseIterator([1], 1) - ReverseIterator([1], 1)


def test_comparisons_follow_underlying_position():
    seq = [1, 2, 3, 4]
    first = ReverseIterator(seq, 4)
    later = first + 1
    assert first > later
    assert later < first
    assert first >= first
    assert later <= first


@given(st.integers(min_value=0, max_value=20), st.integers(min_value=0, max_value=20))
def test_difference_is_base_difference(base, n):
    seq = list(range(40))
    it = ReverseIterator(seq, base + n)
    moved = it + n
    assert moved - it == -n
    assert moved.base() == base


@given(st.lists(st.integers()))
def test_reverse_iteration_matches_reversed(values):
    assert list(ReverseIterator(values, len(values))) == list(reversed(values))