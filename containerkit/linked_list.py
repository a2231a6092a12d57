"""A doubly linked list with index-based access and list merging."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "next", "prev")

    def __init__(self, data: T) -> None:
        self.data = data
        self.next: Optional[_Node[T]] = None
        self.prev: Optional[_Node[T]] = None


class LinkedListIterator(Generic[T]):
    """Forward iterator over the nodes of a linked list."""

    def __init__(self, start: Optional[_Node[T]]) -> None:
        self._current = start

    def __iter__(self) -> "LinkedListIterator[T]":
        return self

    def has_next(self) -> bool:
        """Return True if another element is available."""
        return self._current is not None

    def __next__(self) -> T:
        if self._current is None:
            raise StopIteration("no more elements")
        data = self._current.data
        self._current = self._current.next
        return data


class LinkedList(Generic[T]):
    """Doubly linked list holding values in insertion order."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items or ():
            self.insert_last(item)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def iterator(self) -> LinkedListIterator[T]:
        """Return an iterator positioned at the head of the list."""
        return LinkedListIterator(self._head)

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node[T]:
        """Return the node at a valid index, walking from the nearer end."""
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def insert_first(self, data: T) -> None:
        """Insert a value at the beginning of the list."""
        node = _Node(data)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def insert_last(self, data: T) -> None:
        """Insert a value at the end of the list."""
        node = _Node(data)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def insert_at(self, data: T, index: int) -> None:
        """Insert a value so that it ends up at ``index``.

        Raises IndexError unless 0 <= index <= len(self).
        """
        if index < 0 or index > self._size:
            raise IndexError("index out of bounds")
        if index == 0:
            self.insert_first(data)
            return
        if index == self._size:
            self.insert_last(data)
            return
        current = self._node_at(index)
        node = _Node(data)
        node.next = current
        node.prev = current.prev
        current.prev.next = node
        current.prev = node
        self._size += 1

    def index_of(self, value: Any) -> int:
        """Return the index of the first element equal to ``value``.

        Raises ValueError if no such element exists.
        """
        for index, item in enumerate(self):
            if item == value:
                return index
        raise ValueError("value not found")

    def get(self, index: int) -> T:
        """Return the element at ``index``; raise IndexError if out of bounds."""
        if index < 0 or index >= self._size:
            raise IndexError("index out of bounds")
        return self._node_at(index).data

    def update(self, data: T, index: int) -> None:
        """Replace the element at ``index``; raise IndexError if out of bounds."""
        if index < 0 or index >= self._size:
            raise IndexError("index out of bounds")
        self._node_at(index).data = data

    def remove(self, index: int) -> bool:
        """Remove the element at ``index``; return False if out of bounds."""
        if index < 0 or index >= self._size:
            return False
        node = self._node_at(index)
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        self._size -= 1
        return True

    def remove_first(self) -> bool:
        """Remove the first element; return False if the list is empty."""
        return self.remove(0)

    def remove_last(self) -> bool:
        """Remove the last element; return False if the list is empty."""
        return self.remove(self._size - 1)

    def clear(self) -> None:
        """Remove every element."""
        self._head = self._tail = None
        self._size = 0

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        for node in list(self._nodes()):
            node.next, node.prev = node.prev, node.next
        self._head, self._tail = self._tail, self._head

    def to_list(self) -> list[T]:
        """Return the elements as a new Python list."""
        return list(self)

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every element in order."""
        for item in self:
            func(item)

    def find(self, predicate: Callable[[T], bool]) -> T:
        """Return the first element satisfying ``predicate``.

        Raises LookupError if none does.
        """
        for item in self:
            if predicate(item):
                return item
        raise LookupError("no element found")

    def first(self) -> T:
        """Return the first element; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("list is empty")
        return self._head.data

    def last(self) -> T:
        """Return the last element; raise IndexError if empty."""
        if self._tail is None:
            raise IndexError("list is empty")
        return self._tail.data

    def merge_begin(self, other: "LinkedList[T]") -> None:
        """Prepend the elements of ``other``, keeping their order."""
        for item in reversed(other.to_list()):
            self.insert_first(item)

    def merge_end(self, other: "LinkedList[T]") -> None:
        """Append the elements of ``other``, keeping their order."""
        for item in other.to_list():
            self.insert_last(item)

    def swap(self, other: "LinkedList[T]") -> None:
        """Exchange the contents of this list and ``other``."""
        self._head, other._head = other._head, self._head
        self._tail, other._tail = other._tail, self._tail
        self._size, other._size = other._size, self._size