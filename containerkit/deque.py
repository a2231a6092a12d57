"""A double-ended queue backed by a doubly linked list."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

from containerkit.linked_list import LinkedList

T = TypeVar("T")


class Deque(Generic[T]):
    """Double-ended queue supporting pushes and pops at both ends."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._data: LinkedList[T] = LinkedList(items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def push_first(self, value: T) -> None:
        """Add a value at the front."""
        self._data.insert_first(value)

    def push_last(self, value: T) -> None:
        """Add a value at the back."""
        self._data.insert_last(value)

    @staticmethod
    def _peek(getter: Callable[[], T]) -> T:
        try:
            return getter()
        except IndexError:
            raise IndexError("empty deque") from None

    def first(self) -> T:
        """Return the front value; raise IndexError if empty."""
        return self._peek(self._data.first)

    def last(self) -> T:
        """Return the back value; raise IndexError if empty."""
        return self._peek(self._data.last)

    def pop_first(self) -> T:
        """Remove and return the front value; raise IndexError if empty."""
        value = self.first()
        self._data.remove_first()
        return value

    def pop_last(self) -> T:
        """Remove and return the back value; raise IndexError if empty."""
        value = self.last()
        self._data.remove_last()
        return value

    def to_list(self) -> list[T]:
        """Return the values front to back as a new list."""
        return self._data.to_list()

    def swap(self, other: "Deque[T]") -> None:
        """Exchange the contents of this deque and ``other``."""
        self._data.swap(other._data)