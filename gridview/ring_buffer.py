from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterator, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """
    Fixed-capacity FIFO. Appending to a full buffer drops the oldest item.

    Examples:
        >>> rb = RingBuffer(3)
        >>> for v in range(1, 6):
        ...     rb.append(v)
        >>> list(rb)
        [3, 4, 5]
    """
    __slots__ = ("_items",)

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"RingBuffer capacity must be at least 1, got {capacity}")
        self._items: Deque[T] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._items.maxlen

    @property
    def empty(self) -> bool:
        return not self._items

    @property
    def full(self) -> bool:
        return len(self._items) == self._items.maxlen

    def _require_items(self) -> None:
        if not self._items:
            raise IndexError("RingBuffer is empty")

    @property
    def front(self) -> T:
        self._require_items()
        return self._items[0]

    @property
    def back(self) -> T:
        self._require_items()
        return self._items[-1]

    def append(self, value: T) -> None:
        self._items.append(value)

    def pop_front(self) -> T:
        self._require_items()
        return self._items.popleft()

    def clear(self) -> None:
        self._items.clear()

    def __getitem__(self, i: int) -> T:
        if not (-len(self._items) <= i < len(self._items)):
            raise IndexError(f"Index {i} out of range for {len(self._items)} items")
        return self._items[i]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"RingBuffer({list(self._items)!r}, capacity={self.capacity})"
