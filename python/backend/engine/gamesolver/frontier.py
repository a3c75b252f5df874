"""Heap-backed priority frontier ordered by a caller-supplied key."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class PriorityFrontier(Generic[T]):
    """Min-priority queue over items of any type.

    Each entry is stored as ``(key(item), seq, item)``.  The insertion
    sequence number breaks ties between equal keys in FIFO order and keeps
    ``heapq`` from ever comparing two items directly.
    """

    def __init__(self, key: Callable[[T], Any]) -> None:
        self._key = key
        self._heap: list[tuple[Any, int, T]] = []
        self._seq = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, item: T) -> None:
        heapq.heappush(self._heap, (self._key(item), next(self._seq), item))

    def pop(self) -> T:
        """Remove and return the item with the smallest key."""
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> T:
        if not self._heap:
            raise IndexError("peek at an empty frontier")
        return self._heap[0][2]
