# tinystl

A small toolkit of container building blocks.

## Modules

- `tinystl.string`: `String`, a mutable character string. It tracks capacity explicitly:
  `reserve`, `shrink_to_fit` and `capacity`. It has positional `insert`, `erase` and
  `replace`, the fill variants `insert_fill`, `append_fill` and `replace_fill`, and the
  searches `find`, `rfind`, `find_first_of`, `find_first_not_of`, `find_last_of` and
  `find_last_not_of`. Each search returns `NPOS` (-1) when nothing is found. The module
  also has `read_word` and `getline`, which read from a text stream, and `swap`.
- `tinystl.search`: the same searches and `compare_ranges` as plain functions. They work
  on any sequence of characters, such as a `str` or a list of one-character strings.
- `tinystl.alloc`: `PoolAllocator`, a free-list pool allocator that hands out `Block`
  objects backed by `memoryview`. It rounds requests of up to 128 bytes up to a multiple
  of 8 and serves them from 16 size-classed free lists. It refills a list up to 20 blocks
  at a time. Larger requests get a block of their own. `round_up` and `freelist_index`
  expose the size arithmetic.
- `tinystl.reverse_iterator`: `ReverseIterator`, a cursor that walks a sequence backwards
  and supports offset arithmetic and comparisons. It is also a Python iterator. There is
  also `IteratorCategory`.
- `tinystl.utility`: `Pair` (ordered by `first`, then `second`), `make_pair`, `swap`,
  `less` and `equal_to`.
- `tinystl.adapters`: `Queue` (first in, first out) and `Stack` (last in, first out).
  Both raise `IndexError` when read or popped while empty.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from tinystl.string import NPOS, String

s = String("hello world")
s.append(" again")
s.insert(0, ">> ")
assert s.find("world") == 9
assert s.find("missing") == NPOS
assert str(s.substr(3, 5)) == "hello"
```

```python
from tinystl.utility import make_pair

p = make_pair(1, "a")
assert p < make_pair(2, "a")
```

```python
from tinystl.adapters import Queue, Stack

q = Queue([1, 2, 3])
q.push(4)
assert q.pop() == 1
assert q.front() == 2 and q.back() == 4

st = Stack([1, 2])
st.push(3)
assert st.top() == 3
```

```python
from tinystl.alloc import PoolAllocator, round_up

pool = PoolAllocator()
block = pool.allocate(10)
pool.deallocate(block, 10)
assert round_up(10) == 16
```

## What it does not include

The package has no general-purpose containers of its own: there is no vector, deque or
linked-list type. `Queue` is built on `collections.deque` and `Stack` on a Python list.
There is no command-line program.