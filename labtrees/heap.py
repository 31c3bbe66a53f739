"""Parallel min- and max-heaps of subject marks."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any


def _sift_up(heap: list[Any], before: Callable[[Any, Any], bool]) -> None:
    index = len(heap) - 1
    while index > 0:
        parent = (index - 1) // 2
        if not before(heap[index], heap[parent]):
            break
        heap[index], heap[parent] = heap[parent], heap[index]
        index = parent


class MarkHeaps:
    """Keep marks in a min-heap and a max-heap built by sifting up."""

    def __init__(self, marks: Iterable[Any] = ()) -> None:
        self._min: list[Any] = []
        self._max: list[Any] = []
        for mark in marks:
            self.add(mark)

    def add(self, mark: Any) -> None:
        """Insert ``mark`` into both heaps."""
        self._min.append(mark)
        _sift_up(self._min, operator.lt)
        self._max.append(mark)
        _sift_up(self._max, operator.gt)

    @property
    def min_heap(self) -> tuple[Any, ...]:
        """Array layout of the min-heap."""
        return tuple(self._min)

    @property
    def max_heap(self) -> tuple[Any, ...]:
        """Array layout of the max-heap."""
        return tuple(self._max)

    def minimum(self) -> Any:
        """Smallest mark; raise ``ValueError`` when no marks are held."""
        if not self._min:
            raise ValueError("no marks entered")
        return self._min[0]

    def maximum(self) -> Any:
        """Largest mark; raise ``ValueError`` when no marks are held."""
        if not self._max:
            raise ValueError("no marks entered")
        return self._max[0]

    def __len__(self) -> int:
        return len(self._min)