# containerkit

A small set of general-purpose containers:

- `containerkit.linked_list.LinkedList`: a doubly linked list with index-based
  access, in-place reversal, merging and swapping.
- `containerkit.deque.Deque`: a double-ended queue built on the linked list.
- `containerkit.unordered_set.UnorderedSet`: a hash set with union,
  intersection, difference and symmetric difference.

Two of them also have lock-guarded variants in `containerkit.threadsafe`:

- `containerkit.threadsafe.linked_list.ConcurrentLinkedList`
- `containerkit.threadsafe.deque.ConcurrentDeque`

## Installation

```
pip install containerkit
```

## Usage

### LinkedList

```python
from containerkit.linked_list import LinkedList

items = LinkedList([1, 2, 3])
items.insert_first(0)
items.reverse()
print(items.to_list())        # [3, 2, 1, 0]
print(2 in items, len(items)) # True 4

items.insert_at(9, 1)         # [3, 9, 2, 1, 0]
items.update(8, 1)            # [3, 8, 2, 1, 0]
print(items.get(1))           # 8
print(items.index_of(2))      # 2
print(items.find(lambda v: v < 2))  # 1
print(items.first(), items.last())  # 3 0

other = LinkedList([7, 7])
items.merge_end(other)        # appends 7, 7
items.swap(other)             # exchanges contents with other
```

`get`, `update` and `insert_at` raise `IndexError` for an index outside the
list's bounds; `first` and `last` raise `IndexError` on an empty list;
`index_of` raises `ValueError` when no element is equal; `find` raises
`LookupError` when no element matches. `remove(index)`, `remove_first()` and
`remove_last()` return `False` instead of raising when there is nothing to
remove.

Besides plain iteration, `iterator()` returns an iterator with a
`has_next()` method.

### Deque

```python
from containerkit.deque import Deque

dq = Deque()
dq.push_last(1)
dq.push_first(0)
print(dq.first(), dq.last())  # 0 1
print(dq.pop_last())          # 1
print(dq.to_list())           # [0]
```

Reading or popping from an empty deque raises `IndexError("empty deque")`.

### UnorderedSet

```python
from containerkit.unordered_set import UnorderedSet

a = UnorderedSet([1, 2, 3])
b = UnorderedSet([2, 3, 4])
print(a.add(1))                                # False, already present
print(sorted(a.union(b)))                      # [1, 2, 3, 4]
print(sorted(a.intersection(b)))               # [2, 3]
print(sorted(a.difference(b)))                 # [1]
print(sorted(a.symmetric_difference(b)))       # [1, 4]
print(a == UnorderedSet([3, 2, 1]))            # True
```

`add` and `remove` return whether the set changed. `iterator()` returns an
iterator with a `has_next()` method over a snapshot of the elements.

### Thread-safe variants

`ConcurrentLinkedList` and `ConcurrentDeque` offer the same operations as
their plain counterparts (they start empty and are read through `to_list()`
or, for the list, `iterator()`). Every call holds the container's lock, and
`swap` and the merge operations lock both containers in a fixed order so that
two opposite calls cannot deadlock.

```python
import threading
from containerkit.threadsafe.deque import ConcurrentDeque

dq = ConcurrentDeque()
workers = [threading.Thread(target=dq.push_last, args=(n,)) for n in range(10)]
for w in workers:
    w.start()
for w in workers:
    w.join()
print(len(dq))  # 10
```

The iterator returned by `ConcurrentLinkedList.iterator()` may be shared
between threads; each step is taken under its own lock.

## What the package does not include

There are no dedicated queue or stack classes; use `Deque` (or
`ConcurrentDeque`) with `push_last`/`pop_first` for FIFO order and
`push_last`/`pop_last` for LIFO order. There is no thread-safe variant of
`UnorderedSet`.

## Running the tests

```
pip install -e ".[test]"
pytest
```