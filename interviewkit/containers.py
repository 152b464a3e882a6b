"""Queues and stacks with extra guarantees."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Deque, Generic, List, Tuple, TypeVar

T = TypeVar("T")


class TwoStackQueue(Generic[T]):
    """A first-in first-out queue built on two stacks."""

    def __init__(self) -> None:
        self._incoming: List[T] = []
        self._outgoing: List[T] = []

    def append_tail(self, item: T) -> None:
        """Add ``item`` at the tail."""
        self._incoming.append(item)

    def delete_head(self) -> T:
        """Remove and return the head item."""
        if not self._outgoing:
            while self._incoming:
                self._outgoing.append(self._incoming.pop())
        if not self._outgoing:
            raise IndexError("queue is empty")
        return self._outgoing.pop()

    def __len__(self) -> int:
        return len(self._incoming) + len(self._outgoing)


class MinStack(Generic[T]):
    """A stack that reports its smallest item in constant time."""

    def __init__(self) -> None:
        self._data: List[T] = []
        self._mins: List[T] = []

    def push(self, value: T) -> None:
        """Push ``value``."""
        self._data.append(value)
        if not self._mins or value < self._mins[-1]:
            self._mins.append(value)
        else:
            self._mins.append(self._mins[-1])

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._data:
            raise IndexError("stack is empty")
        self._mins.pop()
        return self._data.pop()

    def top(self) -> T:
        """Return the top item."""
        if not self._data:
            raise IndexError("stack is empty")
        return self._data[-1]

    def min(self) -> T:
        """Return the smallest item on the stack."""
        if not self._mins:
            raise IndexError("stack is empty")
        return self._mins[-1]

    def __len__(self) -> int:
        return len(self._data)


class MedianFinder:
    """Running median of a stream of numbers."""

    def __init__(self) -> None:
        self._small: List[int] = []  # max-heap of the lower half, negated
        self._large: List[int] = []  # min-heap of the upper half

    def add_num(self, num: int) -> None:
        """Add ``num`` to the stream."""
        heapq.heappush(self._large, -heapq.heappushpop(self._small, -num))
        if len(self._small) < len(self._large):
            heapq.heappush(self._small, -heapq.heappop(self._large))

    def find_median(self) -> float:
        """Return the median of the numbers added so far."""
        if not self._small:
            raise ValueError("no numbers added")
        if len(self._small) > len(self._large):
            return float(-self._small[0])
        return 0.5 * (-self._small[0] + self._large[0])


class MaxQueue(Generic[T]):
    """A queue that reports its largest item in constant time."""

    def __init__(self) -> None:
        self._data: Deque[Tuple[T, int]] = deque()
        self._maximums: Deque[Tuple[T, int]] = deque()
        self._index = 0

    def push_back(self, number: T) -> None:
        """Add ``number`` at the back."""
        while self._maximums and number >= self._maximums[-1][0]:
            self._maximums.pop()
        entry = (number, self._index)
        self._data.append(entry)
        self._maximums.append(entry)
        self._index += 1

    def pop_front(self) -> T:
        """Remove and return the front item."""
        if not self._data:
            raise IndexError("queue is empty")
        if self._maximums[0][1] == self._data[0][1]:
            self._maximums.popleft()
        return self._data.popleft()[0]

    def max(self) -> T:
        """Return the largest item in the queue."""
        if not self._maximums:
            raise IndexError("queue is empty")
        return self._maximums[0][0]