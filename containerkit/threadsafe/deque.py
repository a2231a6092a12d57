"""A double-ended queue guarded by a lock for use from several threads."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Generic, Iterator, TypeVar

from containerkit.deque import Deque

T = TypeVar("T")


class ConcurrentDeque(Generic[T]):
    """Thread-safe double-ended queue; every operation holds the lock."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._deque: Deque[T] = Deque()

    def _locked(self, name: str, *args: Any) -> Any:
        with self._lock:
            return getattr(self._deque, name)(*args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def __len__(self) -> int:
        return self._locked("__len__")

    def push_first(self, value: T) -> None:
        """Add a value at the front."""
        self._locked("push_first", value)

    def push_last(self, value: T) -> None:
        """Add a value at the back."""
        self._locked("push_last", value)

    def pop_first(self) -> T:
        """Remove and return the front value; raise IndexError if empty."""
        return self._locked("pop_first")

    def pop_last(self) -> T:
        """Remove and return the back value; raise IndexError if empty."""
        return self._locked("pop_last")

    def first(self) -> T:
        """Return the front value; raise IndexError if empty."""
        return self._locked("first")

    def last(self) -> T:
        """Return the back value; raise IndexError if empty."""
        return self._locked("last")

    def to_list(self) -> list[T]:
        """Return a snapshot of the values front to back."""
        return self._locked("to_list")

    @contextmanager
    def _both_locked(self, other: "ConcurrentDeque[T]") -> Iterator[None]:
        # A fixed lock order keeps two opposite swaps from deadlocking.
        first, second = sorted((self, other), key=id)
        with first._lock, second._lock:
            yield

    def swap(self, other: "ConcurrentDeque[T]") -> None:
        """Exchange the contents of this deque and ``other``."""
        with self._both_locked(other):
            self._deque.swap(other._deque)