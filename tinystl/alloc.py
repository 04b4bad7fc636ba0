"""A small-object pool allocator with size-classed free lists."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "ALIGN",
    "MAX_BYTES",
    "NFREELISTS",
    "NOBJS",
    "Block",
    "PoolAllocator",
    "round_up",
    "freelist_index",
]

ALIGN = 8
MAX_BYTES = 128
NFREELISTS = MAX_BYTES // ALIGN
NOBJS = 20


def round_up(nbytes: int) -> int:
    """Round ``nbytes`` up to a multiple of :data:`ALIGN`."""
    return (nbytes + ALIGN - 1) & ~(ALIGN - 1)


def freelist_index(nbytes: int) -> int:
    """The free-list slot serving requests of ``nbytes``."""
    return (nbytes + ALIGN - 1) // ALIGN - 1


@dataclass(eq=False)
class Block:
    """A region of memory handed out by the allocator."""

    memory: memoryview

    @property
    def size(self) -> int:
        return len(self.memory)


class PoolAllocator:
    """Serves small requests from pooled chunks, large ones directly.

    Requests up to :data:`MAX_BYTES` are rounded up to a multiple of
    :data:`ALIGN` and served from a free list per size class. Empty lists
    are refilled with up to :data:`NOBJS` blocks carved from a shared pool,
    which grows geometrically as the heap grows.
    """

    def __init__(self) -> None:
        self._free_lists: list[list[Block]] = [[] for _ in range(NFREELISTS)]
        self._chunk = memoryview(bytearray())
        self._start = 0
        self._end = 0
        self._heap_size = 0

    def allocate(self, nbytes: int) -> Block:
        """Return a block of at least ``nbytes`` bytes."""
        if nbytes < 1:
            raise ValueError("allocation size must be positive")
        if nbytes > MAX_BYTES:
            return Block(memoryview(bytearray(nbytes)))
        free = self._free_lists[freelist_index(nbytes)]
        if free:
            return free.pop()
        return self._refill(round_up(nbytes))

    def deallocate(self, block: Block, nbytes: int) -> None:
        """Give back a block that was allocated with ``nbytes``."""
        if nbytes < 1:
            raise ValueError("allocation size must be positive")
        if nbytes > MAX_BYTES:
            return
        self._free_lists[freelist_index(nbytes)].append(block)

    def reallocate(self, block: Block, old_size: int, new_size: int) -> Block:
        """Release ``block`` and return a fresh block of ``new_size`` bytes."""
        self.deallocate(block, old_size)
        return self.allocate(new_size)

    def free_count(self, nbytes: int) -> int:
        """Number of free blocks in the size class serving ``nbytes``."""
        if not 1 <= nbytes <= MAX_BYTES:
            raise ValueError(f"size must be between 1 and {MAX_BYTES}")
        return len(self._free_lists[freelist_index(nbytes)])

    def heap_size(self) -> int:
        """Total bytes obtained for the pool so far."""
        return self._heap_size

    def _take(self, nbytes: int) -> memoryview:
        region = self._chunk[self._start:self._start + nbytes]
        self._start += nbytes
        return region

    def _refill(self, size: int) -> Block:
        region, nobjs = self._chunk_alloc(size, NOBJS)
        blocks = [
            Block(region[offset:offset + size])
            for offset in range(0, nobjs * size, size)
        ]
        first, *rest = blocks
        # Kept reversed so that pops hand blocks out in address order.
        self._free_lists[freelist_index(size)].extend(reversed(rest))
        return first

    def _chunk_alloc(self, size: int, nobjs: int) -> tuple[memoryview, int]:
        while True:
            total = size * nobjs
            left = self._end - self._start
            if left >= total:
                return self._take(total), nobjs
            if left >= size:
                nobjs = left // size
                return self._take(nobjs * size), nobjs

            to_get = 2 * total + round_up(self._heap_size >> 4)
            if left > 0:
                self._free_lists[freelist_index(left)].append(Block(self._take(left)))
            try:
                chunk = bytearray(to_get)
            except MemoryError:
                self._reclaim(size)
                continue
            self._heap_size += to_get
            self._chunk = memoryview(chunk)
            self._start = 0
            self._end = to_get

    def _reclaim(self, size: int) -> None:
        for nbytes in range(size, MAX_BYTES + 1, ALIGN):
            free = self._free_lists[freelist_index(nbytes)]
            if free:
                block = free.pop()
                self._chunk = block.memory
                self._start = 0
                self._end = len(block.memory)
                return
        raise MemoryError("pool exhausted")