"""A doubly linked list guarded by a lock for use from several threads."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Callable, Generic, Iterator, TypeVar

from containerkit.linked_list import LinkedList, LinkedListIterator

T = TypeVar("T")


class ConcurrentLinkedListIterator(Generic[T]):
    """Iterator that can be shared between threads; each step is atomic."""

    def __init__(self, inner: LinkedListIterator[T]) -> None:
        self._lock = threading.Lock()
        self._inner = inner

    def __iter__(self) -> "ConcurrentLinkedListIterator[T]":
        return self

    def has_next(self) -> bool:
        """Return True if another element is available."""
        with self._lock:
            return self._inner.has_next()

    def __next__(self) -> T:
        with self._lock:
            return next(self._inner)


class ConcurrentLinkedList(Generic[T]):
    """Thread-safe doubly linked list; every operation holds the lock."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._list: LinkedList[T] = LinkedList()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def __len__(self) -> int:
        with self._lock:
            return len(self._list)

    def __contains__(self, value: Any) -> bool:
        with self._lock:
            return value in self._list

    @contextmanager
    def _both_locked(self, other: "ConcurrentLinkedList[T]") -> Iterator[None]:
        # A fixed lock order keeps two opposite operations from deadlocking.
        first, second = sorted((self, other), key=id)
        with first._lock, second._lock:
            yield

    def insert_last(self, data: T) -> None:
        """Insert a value at the end of the list."""
        with self._lock:
            self._list.insert_last(data)

    def insert_first(self, data: T) -> None:
        """Insert a value at the beginning of the list."""
        with self._lock:
            self._list.insert_first(data)

    def insert_at(self, data: T, index: int) -> None:
        """Insert a value at ``index``; raise IndexError if out of bounds."""
        with self._lock:
            self._list.insert_at(data, index)

    def index_of(self, value: Any) -> int:
        """Return the index of the first equal element; raise ValueError if absent."""
        with self._lock:
            return self._list.index_of(value)

    def get(self, index: int) -> T:
        """Return the element at ``index``; raise IndexError if out of bounds."""
        with self._lock:
            return self._list.get(index)

    def update(self, data: T, index: int) -> None:
        """Replace the element at ``index``; raise IndexError if out of bounds."""
        with self._lock:
            self._list.update(data, index)

    def remove(self, index: int) -> bool:
        """Remove the element at ``index``; return False if out of bounds."""
        with self._lock:
            return self._list.remove(index)

    def remove_first(self) -> bool:
        """Remove the first element; return False if the list is empty."""
        with self._lock:
            return self._list.remove_first()

    def remove_last(self) -> bool:
        """Remove the last element; return False if the list is empty."""
        with self._lock:
            return self._list.remove_last()

    def clear(self) -> None:
        """Remove every element."""
        with self._lock:
            self._list.clear()

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        with self._lock:
            self._list.reverse()

    def to_list(self) -> list[T]:
        """Return a snapshot of the elements as a Python list."""
        with self._lock:
            return self._list.to_list()

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every element in order while holding the lock."""
        with self._lock:
            self._list.for_each(func)

    def find(self, predicate: Callable[[T], bool]) -> T:
        """Return the first element satisfying ``predicate``; raise LookupError if none."""
        with self._lock:
            return self._list.find(predicate)

    def first(self) -> T:
        """Return the first element; raise IndexError if empty."""
        with self._lock:
            return self._list.first()

    def last(self) -> T:
        """Return the last element; raise IndexError if empty."""
        with self._lock:
            return self._list.last()

    def merge_begin(self, other: "ConcurrentLinkedList[T]") -> None:
        """Prepend the elements of ``other``, keeping their order."""
        with self._both_locked(other):
            self._list.merge_begin(other._list)

    def merge_end(self, other: "ConcurrentLinkedList[T]") -> None:
        """Append the elements of ``other``, keeping their order."""
        with self._both_locked(other):
            self._list.merge_end(other._list)

    def swap(self, other: "ConcurrentLinkedList[T]") -> None:
        """Exchange the contents of this list and ``other``."""
        with self._both_locked(other):
            self._list.swap(other._list)

    def iterator(self) -> ConcurrentLinkedListIterator[T]:
        """Return a shareable iterator positioned at the head of the list."""
        with self._lock:
            return ConcurrentLinkedListIterator(self._list.iterator())