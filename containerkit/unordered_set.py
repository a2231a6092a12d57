"""A hash set with set algebra and an explicit iterator."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T", bound=Hashable)


class SetIterator(Generic[T]):
    """Iterator over a snapshot of a set's elements."""

    def __init__(self, keys: list[T]) -> None:
        self._keys = keys
        self._index = -1

    def __iter__(self) -> "SetIterator[T]":
        return self

    def has_next(self) -> bool:
        """Return True if another element is available."""
        return self._index + 1 < len(self._keys)

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration("no more elements")
        self._index += 1
        return self._keys[self._index]


class UnorderedSet(Generic[T]):
    """Set of hashable elements with no guaranteed order."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._data: dict[T, None] = {}
        for item in items or ():
            self.add(item)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._data))

    def __contains__(self, element: object) -> bool:
        return element in self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnorderedSet):
            return NotImplemented
        return self._data.keys() == other._data.keys()

    __hash__ = None  # type: ignore[assignment]

    def add(self, element: T) -> bool:
        """Add ``element``; return False if it was already present."""
        if element in self._data:
            return False
        self._data[element] = None
        return True

    def remove(self, element: T) -> bool:
        """Remove ``element``; return False if it was not present."""
        if element not in self._data:
            return False
        del self._data[element]
        return True

    def clear(self) -> None:
        """Remove every element."""
        self._data.clear()

    def to_list(self) -> list[T]:
        """Return the elements as a new list."""
        return list(self._data)

    def union(self, other: "UnorderedSet[T]") -> "UnorderedSet[T]":
        """Return a new set of elements found in either set."""
        result = UnorderedSet(self)
        for element in other:
            result.add(element)
        return result

    def intersection(self, other: "UnorderedSet[T]") -> "UnorderedSet[T]":
        """Return a new set of elements found in both sets."""
        return UnorderedSet(e for e in self if e in other)

    def difference(self, other: "UnorderedSet[T]") -> "UnorderedSet[T]":
        """Return a new set of elements in this set but not in ``other``."""
        return UnorderedSet(e for e in self if e not in other)

    def symmetric_difference(self, other: "UnorderedSet[T]") -> "UnorderedSet[T]":
        """Return a new set of elements in exactly one of the two sets."""
        result = self.difference(other)
        for element in other:
            if element not in self:
                result.add(element)
        return result

    def iterator(self) -> SetIterator[T]:
        """Return an iterator over a snapshot of the current elements."""
        return SetIterator(self.to_list())