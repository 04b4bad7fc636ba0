import pytest
from hypothesis import given
from hypothesis import strategies as st

from tinystl.alloc import (
    ALIGN,
    MAX_BYTES,
    NOBJS,
    PoolAllocator,
    freelist_index,
    round_up,
)


@given(st.integers(min_value=0, max_value=10_000))
def test_round_up_properties(n):
    r = round_up(n)
    assert r % ALIGN == 0
    assert n <= r < n + ALIGN


@given(st.integers(min_value=1, max_value=MAX_BYTES))
def test_freelist_index_shared_by_size_class(n):
    assert freelist_index(n) == freelist_index(round_up(n))
    assert freelist_index(n) == round_up(n) // ALIGN - 1


def test_partial_refill_uses_remaining_pool():
    pool = PoolAllocator()
    pool.allocate(8)
    heap = pool.heap_size()
    block = pool.allocate(16)
    assert block.size == 16
    assert pool.heap_size() == heap
    assert pool.free_count(16) == 9


def test_small_requests_are_rounded():
    pool = PoolAllocator()
    assert pool.allocate(5).size == round_up(5)
    assert pool.allocate(MAX_BYTES).size == MAX_BYTES


def test_allocate_pops_and_deallocate_pushes():
    pool = PoolAllocator()
    first = pool.allocate(24)
    before = pool.free_count(24)
    second = pool.allocate(24)
    assert pool.free_count(24) == before - 1
    pool.deallocate(second, 24)
    pool.deallocate(first, 24)
    assert pool.free_count(24) == before + 1
    assert pool.allocate(24) is first


def test_large_requests_bypass_pool():
    pool = PoolAllocator()
    block = pool.allocate(MAX_BYTES + 72)
    assert block.size == MAX_BYTES + 72
    assert pool.heap_size() == 0
    pool.deallocate(block, MAX_BYTES + 72)
    assert all(pool.free_count(n) == 0 for n in range(ALIGN, MAX_BYTES + 1, ALIGN))


def test_reallocate_moves_between_size_classes():
    pool = PoolAllocator()
    block = pool.allocate(8)
    count = pool.free_count(8)
    new = pool.reallocate(block, 8, 40)
    assert new.size == 40
    assert pool.free_count(8) == count + 1


def test_leftover_pool_goes_to_free_list():
    pool = PoolAllocator()
    pool.allocate(8)
    single = pool.allocate(MAX_BYTES)
    assert single.size == MAX_BYTES
    assert pool.free_count(MAX_BYTES) == 0
    leftover_before = pool.free_count(32)
    heap = pool.heap_size()
    pool.allocate(64)
    assert pool.free_count(32) == leftover_before + 1
    assert pool.heap_size() > heap


def test_blocks_do_not_overlap():
    pool = PoolAllocator()
    blocks = [pool.allocate(size) for size in (8, 16, 8, 32, 64, 8, 128, 16) * 6]
    for tag, block in enumerate(blocks):
        block.memory[:] = bytes([tag % 256]) * block.size
    for tag, block in enumerate(blocks):
        assert bytes(block.memory) == bytes([tag % 256]) * block.size


def test_invalid_sizes_raise():
    pool = PoolAllocator()
    with pytest.raises(ValueError):
        pool.allocate(0)
    with pytest.raises(ValueError):
        pool.free_count(MAX_BYTES + 1)